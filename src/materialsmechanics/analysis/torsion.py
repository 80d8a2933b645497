"""Pure torsion of a solid circular shaft."""
from __future__ import annotations

import logging
import math

from materialsmechanics.analysis.sections import circle_polar_inertia
from materialsmechanics.errors import require_finite, require_non_negative, require_positive
from materialsmechanics.model.results import TorsionResult
from materialsmechanics.utils import gpa_to_mpa, m_to_mm, nm_to_nmm

logger = logging.getLogger(__name__)


def shaft_torsion(
    torque_Nm: float,
    radius_mm: float,
    length_m: float,
    shear_modulus_GPa: float
) -> TorsionResult:
    """
    Surface shear stress and angle of twist.

    Args:
        torque_Nm: Torque T in N·m.
        radius_mm: Shaft radius r in mm.
        length_m: Shaft length L in m.
        shear_modulus_GPa: Shear modulus G in GPa.

    Returns:
        TorsionResult with I_p = π·r⁴/2, tau_max = T·r/I_p and the twist
        phi = T·L/(G·I_p) in degrees.
    """
    torque_Nm = require_finite("torque", torque_Nm)
    radius_mm = require_positive("radius", radius_mm)
    length_m = require_non_negative("length", length_m)
    shear_modulus_GPa = require_positive("shear_modulus", shear_modulus_GPa)

    torque_Nmm = nm_to_nmm(torque_Nm)
    polar_inertia = circle_polar_inertia(radius_mm)
    max_shear = torque_Nmm * radius_mm / polar_inertia
    twist_rad = torque_Nmm * m_to_mm(length_m) / (gpa_to_mpa(shear_modulus_GPa) * polar_inertia)

    logger.debug(f"Torsion: Ip={polar_inertia:.4g} mm4, tau={max_shear:.4g} MPa, "
                 f"phi={math.degrees(twist_rad):.4g} deg")
    return TorsionResult(
        polar_inertia=polar_inertia,
        max_shear_stress=max_shear,
        twist_deg=math.degrees(twist_rad),
    )
