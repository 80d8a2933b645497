"""
Axial loading of a prismatic bar.

The constitutive law is a simplified teaching curve: linear up to yield, a
quadratic hardening branch up to the ultimate strength (1.5 x yield), and a
fixed fracture strain beyond it. The multipliers are presentation constants,
not calibrated material data.
"""
from __future__ import annotations

import logging

from materialsmechanics.config import (
    UTS_FACTOR,
    FAILURE_STRESS_FACTOR,
    UTS_STRAIN_FACTOR,
    FAILURE_STRAIN_FACTOR,
)
from materialsmechanics.errors import require_finite, require_non_negative, require_positive
from materialsmechanics.model.results import AxialResult, AxialState, CurveKeyPoint
from materialsmechanics.utils import m_to_mm

logger = logging.getLogger(__name__)


def axial_strain(stress_MPa: float, elastic_modulus_MPa: float, yield_strength_MPa: float) -> tuple[float, AxialState]:
    """
    Strain and regime for a given engineering stress.

    Args:
        stress_MPa: Engineering stress F/A.
        elastic_modulus_MPa: Young's modulus.
        yield_strength_MPa: Yield strength, must be positive.

    Returns:
        (strain, state). The elastic branch includes sigma == sigma_y.
    """
    strain_at_yield = yield_strength_MPa / elastic_modulus_MPa
    uts = yield_strength_MPa * UTS_FACTOR

    if stress_MPa <= yield_strength_MPa:
        return stress_MPa / elastic_modulus_MPa, AxialState.ELASTIC

    if stress_MPa > uts:
        # No extrapolation past fracture
        return strain_at_yield * FAILURE_STRAIN_FACTOR, AxialState.FRACTURED

    strain_at_uts = strain_at_yield * UTS_STRAIN_FACTOR
    ratio = (stress_MPa - yield_strength_MPa) / (uts - yield_strength_MPa)
    strain = strain_at_yield + (strain_at_uts - strain_at_yield) * ratio ** 2
    return strain, AxialState.PLASTIC


def axial_response(
    force_N: float,
    area_mm2: float,
    length_m: float,
    elastic_modulus_MPa: float,
    yield_strength_MPa: float
) -> AxialResult:
    """
    Stress, strain and elongation of a bar under an axial force.

    Args:
        force_N: Axial force in N (tension positive).
        area_mm2: Cross-section area in mm², must be positive.
        length_m: Free length in m.
        elastic_modulus_MPa: Young's modulus in MPa.
        yield_strength_MPa: Yield strength in MPa.

    Returns:
        AxialResult with the elongation in mm.

    Raises:
        InvalidParameterError: for a non-positive area, modulus or yield
            strength, a negative length, or non-finite input.
    """
    force_N = require_finite("force", force_N)
    area_mm2 = require_positive("area", area_mm2)
    length_m = require_non_negative("length", length_m)
    elastic_modulus_MPa = require_positive("elastic_modulus", elastic_modulus_MPa)
    yield_strength_MPa = require_positive("yield_strength", yield_strength_MPa)

    stress = force_N / area_mm2
    strain, state = axial_strain(stress, elastic_modulus_MPa, yield_strength_MPa)
    elongation = strain * m_to_mm(length_m)

    logger.debug(f"Axial: sigma={stress:.3f} MPa, eps={strain:.6g}, state={state}")
    if state is AxialState.FRACTURED:
        logger.warning(f"Axial stress {stress:.1f} MPa exceeds the ultimate strength "
                       f"{yield_strength_MPa * UTS_FACTOR:.1f} MPa, bar fractured.")

    return AxialResult(stress=stress, strain=strain, elongation=elongation, state=state)


def stress_strain_key_points(elastic_modulus_MPa: float, yield_strength_MPa: float) -> list[CurveKeyPoint]:
    """
    Reference points of the teaching stress-strain diagram.

    The diagram runs origin -> yield -> ultimate -> failure. The failure point
    sits below the ultimate strength (necking) at the fracture strain.
    """
    elastic_modulus_MPa = require_positive("elastic_modulus", elastic_modulus_MPa)
    yield_strength_MPa = require_positive("yield_strength", yield_strength_MPa)

    strain_at_yield = yield_strength_MPa / elastic_modulus_MPa
    return [
        CurveKeyPoint("origin", 0.0, 0.0),
        CurveKeyPoint("yield", strain_at_yield, yield_strength_MPa),
        CurveKeyPoint("ultimate", strain_at_yield * UTS_STRAIN_FACTOR, yield_strength_MPa * UTS_FACTOR),
        CurveKeyPoint("failure", strain_at_yield * FAILURE_STRAIN_FACTOR, yield_strength_MPa * FAILURE_STRESS_FACTOR),
    ]
