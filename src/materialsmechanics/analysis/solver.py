"""
Module Dispatcher
=================
Maps the simulation state to the pure model of the requested loading mode.

Why is this file needed?
------------------------
1. Decoupling: Each model takes only the numbers it needs. This module is the
   single place that knows which state fields feed which model, and in which
   units.
2. Consumers (diagram code, narration) call ``solve`` and receive a fresh
   result record; they never recompute physics themselves.

Note: This module should be pure Python/NumPy and must not import any UI code.
"""
from __future__ import annotations

from typing import Dict, Optional, Union
import logging

from materialsmechanics.analysis.axial import axial_response
from materialsmechanics.analysis.bending import beam_bending
from materialsmechanics.analysis.buckling import euler_buckling
from materialsmechanics.analysis.combined import eccentric_loading
from materialsmechanics.analysis.fundamentals import fundamentals
from materialsmechanics.analysis.stress import principal_stresses_3d, transform_plane_stress
from materialsmechanics.analysis.torsion import shaft_torsion
from materialsmechanics.model.results import (
    AxialResult,
    BendingResult,
    BucklingResult,
    CombinedResult,
    FundamentalsResult,
    PlaneStressResult,
    TorsionResult,
    TriaxialStressResult,
)
from materialsmechanics.model.state import ModuleType, SimulationState

logger = logging.getLogger(__name__)

ModuleResult = Union[
    FundamentalsResult,
    AxialResult,
    BendingResult,
    TorsionResult,
    BucklingResult,
    PlaneStressResult,
    CombinedResult,
]


def solve(state: SimulationState, module: Optional[ModuleType] = None) -> ModuleResult:
    """
    Evaluate one module against the state.

    Args:
        state: The simulation state to read from.
        module: Module to evaluate; defaults to ``state.active_module``.

    Returns:
        The module's result record.

    Raises:
        InvalidParameterError: if the state holds values the model rejects.
    """
    module = ModuleType(module if module is not None else state.active_module)
    material = state.material
    logger.debug(f"Solving module '{module}' with material '{material.name}'")

    match module:
        case ModuleType.FUNDAMENTALS:
            p = state.fundamentals
            return fundamentals(p.strain_level, material.poisson_ratio)
        case ModuleType.AXIAL:
            p = state.axial
            return axial_response(
                p.force, p.area, p.length,
                material.elastic_modulus_MPa, material.yield_strength_MPa
            )
        case ModuleType.BENDING:
            p = state.bending
            return beam_bending(p.load, p.length, p.width, p.height, material.elastic_modulus_GPa)
        case ModuleType.TORSION:
            p = state.torsion
            return shaft_torsion(p.torque, p.radius, p.length, material.shear_modulus_GPa)
        case ModuleType.BUCKLING:
            p = state.buckling
            return euler_buckling(p.load, p.length, p.width, p.height, material.elastic_modulus_GPa)
        case ModuleType.STRESS:
            p = state.stress
            return transform_plane_stress(p.sigma_x, p.sigma_y, p.tau_xy, p.angle)
        case ModuleType.COMBINED:
            p = state.combined
            return eccentric_loading(p.load, p.eccentricity, p.width, p.height)


def solve_all(state: SimulationState) -> Dict[ModuleType, ModuleResult]:
    """Evaluate every module; the first invalid input aborts the whole run."""
    return {module: solve(state, module) for module in ModuleType}


def solve_triaxial(state: SimulationState) -> TriaxialStressResult:
    """Principal stresses of the full 3D tensor held in ``state.stress``."""
    p = state.stress
    return principal_stresses_3d(p.sigma_x, p.sigma_y, p.sigma_z, p.tau_xy, p.tau_yz, p.tau_zx)
