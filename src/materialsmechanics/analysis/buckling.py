"""
Euler buckling of a pinned-pinned rectangular column.

Buckling always happens about the weak axis, so the smaller side of the
section governs I_min. The effective-length factor is fixed at 1.
"""
from __future__ import annotations

import logging
import math

from materialsmechanics.analysis.sections import rectangle_area, rectangle_min_inertia
from materialsmechanics.errors import require_finite, require_positive
from materialsmechanics.model.results import BucklingResult, ColumnState
from materialsmechanics.utils import gpa_to_mpa, m_to_mm

logger = logging.getLogger(__name__)

EFFECTIVE_LENGTH_FACTOR = 1.0


def euler_buckling(
    load_N: float,
    length_m: float,
    width_mm: float,
    height_mm: float,
    elastic_modulus_GPa: float
) -> BucklingResult:
    """
    Critical load and stability state of a compressed column.

    Args:
        load_N: Applied compressive load P in N.
        length_m: Column length L in m.
        width_mm: Section width in mm.
        height_mm: Section height in mm.
        elastic_modulus_GPa: Young's modulus in GPa.

    Returns:
        BucklingResult; the column is BUCKLED when P > P_cr.
    """
    load_N = require_finite("load", load_N)
    length_m = require_positive("length", length_m)
    width_mm = require_positive("width", width_mm)
    height_mm = require_positive("height", height_mm)
    elastic_modulus_GPa = require_positive("elastic_modulus", elastic_modulus_GPa)

    effective_length = EFFECTIVE_LENGTH_FACTOR * m_to_mm(length_m)
    min_inertia = rectangle_min_inertia(width_mm, height_mm)
    area = rectangle_area(width_mm, height_mm)
    radius_of_gyration = math.sqrt(min_inertia / area)
    slenderness = effective_length / radius_of_gyration
    critical_load = math.pi ** 2 * gpa_to_mpa(elastic_modulus_GPa) * min_inertia / effective_length ** 2

    state = ColumnState.BUCKLED if load_N > critical_load else ColumnState.SAFE

    logger.debug(f"Buckling: I_min={min_inertia:.4g} mm4, i={radius_of_gyration:.4g} mm, "
                 f"lambda={slenderness:.4g}, P_cr={critical_load:.4g} N, state={state}")
    if state is ColumnState.BUCKLED:
        logger.warning(f"Load {load_N:.0f} N exceeds the Euler load {critical_load:.0f} N, column buckled.")

    return BucklingResult(
        min_inertia=min_inertia,
        area=area,
        radius_of_gyration=radius_of_gyration,
        slenderness=slenderness,
        critical_load=critical_load,
        load=load_N,
        state=state,
    )
