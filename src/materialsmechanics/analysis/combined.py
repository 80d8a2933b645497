"""Eccentric axial load on a rectangular column: axial + bending superposition."""
from __future__ import annotations

import logging

from materialsmechanics.analysis.sections import rectangle_area, rectangle_inertia
from materialsmechanics.errors import require_finite, require_positive
from materialsmechanics.model.results import CombinedResult

logger = logging.getLogger(__name__)


def eccentric_loading(
    load_N: float,
    eccentricity_mm: float,
    width_mm: float,
    height_mm: float
) -> CombinedResult:
    """
    Extreme-fibre stresses of an eccentrically loaded section.

    Args:
        load_N: Axial force F in N.
        eccentricity_mm: Offset e of the load from the centroid in mm.
        width_mm: Section width b in mm.
        height_mm: Section height h in mm.

    Returns:
        CombinedResult with sigma_top = F/A - M·(h/2)/I and
        sigma_bottom = F/A + M·(h/2)/I, M = F·e. Signs are kept as computed:
        a negative fibre stress on a tension member (or a positive one on a
        compression member) is a stress reversal.
    """
    load_N = require_finite("load", load_N)
    eccentricity_mm = require_finite("eccentricity", eccentricity_mm)
    width_mm = require_positive("width", width_mm)
    height_mm = require_positive("height", height_mm)

    area = rectangle_area(width_mm, height_mm)
    inertia = rectangle_inertia(width_mm, height_mm)
    moment = load_N * eccentricity_mm
    axial_stress = load_N / area
    bending_stress = moment * (height_mm / 2.0) / inertia

    result = CombinedResult(
        area=area,
        inertia=inertia,
        moment=moment,
        axial_stress=axial_stress,
        bending_stress=bending_stress,
        top_stress=axial_stress - bending_stress,
        bottom_stress=axial_stress + bending_stress,
        kern_limit=height_mm / 6.0,
    )
    logger.debug(f"Combined: top={result.top_stress:.4g} MPa, bottom={result.bottom_stress:.4g} MPa")
    return result
