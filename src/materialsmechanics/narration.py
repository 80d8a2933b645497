"""
Narration Context
=================
Formats a computed state as the plain-text context handed to an external
text-generation service. The service call itself lives outside the engine;
this module only turns numbers into sentences and never touches the network.
"""
from __future__ import annotations

from typing import List, Optional
import logging

from materialsmechanics.analysis.solver import ModuleResult, solve, solve_triaxial
from materialsmechanics.model.results import AxialState, ColumnState
from materialsmechanics.model.state import ModuleType, SimulationState

logger = logging.getLogger(__name__)

MODULE_TITLES = {
    ModuleType.FUNDAMENTALS: "Stress and strain fundamentals",
    ModuleType.AXIAL: "Axial loading",
    ModuleType.BENDING: "Beam bending",
    ModuleType.TORSION: "Shaft torsion",
    ModuleType.BUCKLING: "Column buckling",
    ModuleType.STRESS: "Stress transformation",
    ModuleType.COMBINED: "Combined loading (eccentric axial load)",
}


def material_line(state: SimulationState) -> str:
    m = state.material
    return (f"Material: {m.name}, E={m.elastic_modulus_GPa:g} GPa, G={m.shear_modulus_GPa:g} GPa, "
            f"yield strength={m.yield_strength_MPa:g} MPa, Poisson ratio={m.poisson_ratio:g}")


def describe(
    state: SimulationState,
    module: Optional[ModuleType] = None,
    result: Optional[ModuleResult] = None
) -> str:
    """
    Build the narration context for one module.

    Args:
        state: Current simulation state.
        module: Module to describe; defaults to the active module.
        result: A result already computed for ``module``. Solved on demand
            when omitted.

    Returns:
        Multi-line text: title, material, inputs, derived values and any
        warnings (yield, fracture, buckling, stress reversal).
    """
    module = ModuleType(module if module is not None else state.active_module)
    if result is None:
        result = solve(state, module)

    lines: List[str] = [f"Module: {MODULE_TITLES[module]}", material_line(state)]
    warnings: List[str] = []

    match module:
        case ModuleType.FUNDAMENTALS:
            p = state.fundamentals
            lines.append(f"Inputs: engineering strain e={p.strain_level:g}")
            lines.append(
                f"Results: transverse strain={result.poisson.transverse_strain:.4g}, "
                f"engineering stress={result.curve_point.engineering_stress:.1f} MPa, "
                f"true stress={result.curve_point.true_stress:.1f} MPa"
            )
        case ModuleType.AXIAL:
            p = state.axial
            lines.append(f"Inputs: F={p.force:g} N, A={p.area:g} mm^2, L={p.length:g} m")
            lines.append(
                f"Results: stress={result.stress:.1f} MPa, strain={result.strain:.5g}, "
                f"elongation={result.elongation:.3f} mm, state={result.state}"
            )
            if result.state is AxialState.PLASTIC:
                warnings.append("Stress exceeds the yield strength: permanent plastic deformation.")
            elif result.state is AxialState.FRACTURED:
                warnings.append("Stress exceeds the ultimate strength: the bar has fractured.")
        case ModuleType.BENDING:
            p = state.bending
            lines.append(f"Inputs: P={p.load:g} N, L={p.length:g} m, b={p.width:g} mm, h={p.height:g} mm")
            lines.append(
                f"Results: I={result.inertia:.4g} mm^4, M_max={result.max_moment:.1f} N*m, "
                f"w_max={result.max_deflection:.4g} mm, sigma_max={result.max_stress:.2f} MPa"
            )
            if abs(result.max_stress) > state.material.yield_strength_MPa:
                warnings.append("Bending stress exceeds the yield strength.")
        case ModuleType.TORSION:
            p = state.torsion
            lines.append(f"Inputs: T={p.torque:g} N*m, r={p.radius:g} mm, L={p.length:g} m")
            lines.append(
                f"Results: Ip={result.polar_inertia:.4g} mm^4, tau_max={result.max_shear_stress:.2f} MPa, "
                f"twist={result.twist_deg:.3f} deg"
            )
        case ModuleType.BUCKLING:
            p = state.buckling
            lines.append(f"Inputs: P={p.load:g} N, L={p.length:g} m, b={p.width:g} mm, h={p.height:g} mm")
            lines.append(
                f"Results: I_min={result.min_inertia:.4g} mm^4, i={result.radius_of_gyration:.2f} mm, "
                f"slenderness={result.slenderness:.1f}, P_cr={result.critical_load:.0f} N, state={result.state}"
            )
            if result.state is ColumnState.BUCKLED:
                warnings.append("Load exceeds the Euler critical load: the column has buckled.")
        case ModuleType.STRESS:
            p = state.stress
            triaxial = solve_triaxial(state)
            lines.append(
                f"Inputs: sigma_x={p.sigma_x:g}, sigma_y={p.sigma_y:g}, sigma_z={p.sigma_z:g}, "
                f"tau_xy={p.tau_xy:g}, tau_yz={p.tau_yz:g}, tau_zx={p.tau_zx:g} MPa, angle={p.angle:g} deg"
            )
            lines.append(
                f"Results: sigma_x'={result.sigma_x:.2f}, sigma_y'={result.sigma_y:.2f}, "
                f"tau_x'y'={result.tau_xy:.2f}, sigma_1={result.sigma_1:.2f}, sigma_2={result.sigma_2:.2f}, "
                f"tau_max={result.max_shear:.2f} MPa"
            )
            lines.append(
                f"3D principal stresses: {triaxial.sigma_1:.2f}, {triaxial.sigma_2:.2f}, "
                f"{triaxial.sigma_3:.2f} MPa"
            )
        case ModuleType.COMBINED:
            p = state.combined
            lines.append(f"Inputs: F={p.load:g} N, e={p.eccentricity:g} mm, section {p.width:g}x{p.height:g} mm")
            lines.append(
                f"Results: sigma_axial={result.axial_stress:.2f}, sigma_bend={result.bending_stress:.2f}, "
                f"sigma_top={result.top_stress:.2f}, sigma_bottom={result.bottom_stress:.2f} MPa"
            )
            if result.stress_reversal:
                warnings.append("Eccentricity lies outside the section kern: the extreme fibres change sign.")
            if max(abs(result.top_stress), abs(result.bottom_stress)) > state.material.yield_strength_MPa:
                warnings.append("Extreme-fibre stress exceeds the yield strength.")

    lines.extend(f"Warning: {w}" for w in warnings)
    return "\n".join(lines)
