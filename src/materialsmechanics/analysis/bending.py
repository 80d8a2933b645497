"""Simply supported beam with a point load at midspan (linear-elastic)."""
from __future__ import annotations

import logging

from materialsmechanics.analysis.sections import rectangle_inertia
from materialsmechanics.errors import require_finite, require_non_negative, require_positive
from materialsmechanics.model.results import BendingResult
from materialsmechanics.utils import gpa_to_mpa, m_to_mm, nm_to_nmm

logger = logging.getLogger(__name__)


def beam_bending(
    load_N: float,
    length_m: float,
    width_mm: float,
    height_mm: float,
    elastic_modulus_GPa: float
) -> BendingResult:
    """
    Peak moment, deflection and bending stress of a rectangular beam.

    Args:
        load_N: Point load P at midspan in N.
        length_m: Span L in m.
        width_mm: Section width b in mm.
        height_mm: Section height h in mm.
        elastic_modulus_GPa: Young's modulus in GPa.

    Returns:
        BendingResult with I = b·h³/12 (mm⁴), M_max = P·L/4 (N·m),
        w_max = P·L³/(48·E·I) (mm) and sigma_max = M·(h/2)/I (MPa).
    """
    load_N = require_finite("load", load_N)
    length_m = require_non_negative("length", length_m)
    width_mm = require_positive("width", width_mm)
    height_mm = require_positive("height", height_mm)
    elastic_modulus_GPa = require_positive("elastic_modulus", elastic_modulus_GPa)

    length_mm = m_to_mm(length_m)
    modulus_MPa = gpa_to_mpa(elastic_modulus_GPa)

    inertia = rectangle_inertia(width_mm, height_mm)
    max_moment = load_N * length_m / 4.0
    max_deflection = load_N * length_mm ** 3 / (48.0 * modulus_MPa * inertia)
    max_stress = nm_to_nmm(max_moment) * (height_mm / 2.0) / inertia

    logger.debug(f"Bending: I={inertia:.4g} mm4, M={max_moment:.4g} Nm, "
                 f"w={max_deflection:.4g} mm, sigma={max_stress:.4g} MPa")
    return BendingResult(
        inertia=inertia,
        max_moment=max_moment,
        max_deflection=max_deflection,
        max_stress=max_stress,
    )
