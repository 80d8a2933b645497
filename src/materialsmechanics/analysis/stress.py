"""
Stress State Transformation
===========================
Plane-stress rotation (the algebra behind Mohr's circle) and the principal
stresses of a full 3D stress tensor.

Sign convention: tensile normal stresses positive, the rotation angle theta
measured counter-clockwise from x to x'.
"""
from __future__ import annotations

from typing import TYPE_CHECKING
import logging
import math

import numpy as np

from materialsmechanics.errors import require_finite
from materialsmechanics.model.results import PlaneStressResult, TriaxialStressResult
from materialsmechanics.utils import normalize_angle

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def transform_plane_stress(
    sigma_x: float,
    sigma_y: float,
    tau_xy: float,
    angle_deg: float = 0.0
) -> PlaneStressResult:
    """
    Rotate a plane stress state and find its principal values.

    Args:
        sigma_x: Normal stress on the x face in MPa.
        sigma_y: Normal stress on the y face in MPa.
        tau_xy: Shear stress in MPa.
        angle_deg: Rotation angle in degrees, any real value (taken mod 360).

    Returns:
        PlaneStressResult with the rotated components, sigma_1 >= sigma_2,
        tau_max = R and the Mohr's circle centre/radius.
    """
    sigma_x = require_finite("sigma_x", sigma_x)
    sigma_y = require_finite("sigma_y", sigma_y)
    tau_xy = require_finite("tau_xy", tau_xy)
    angle = normalize_angle(require_finite("angle", angle_deg))

    two_theta = 2.0 * math.radians(angle)
    c = math.cos(two_theta)
    s = math.sin(two_theta)

    avg = (sigma_x + sigma_y) / 2.0
    diff = (sigma_x - sigma_y) / 2.0

    # Written as offsets from the input so theta = 0 returns it unchanged
    offset = diff * (1.0 - c) - tau_xy * s
    sigma_x_rot = sigma_x - offset
    sigma_y_rot = sigma_y + offset
    tau_xy_rot = -diff * s + tau_xy * c

    radius = math.hypot(diff, tau_xy)
    principal_angle = 0.5 * math.degrees(math.atan2(2.0 * tau_xy, sigma_x - sigma_y))

    logger.debug(f"Plane stress at {angle:.2f} deg: sx'={sigma_x_rot:.4g}, sy'={sigma_y_rot:.4g}, "
                 f"txy'={tau_xy_rot:.4g}, s1={avg + radius:.4g}, s2={avg - radius:.4g}")
    return PlaneStressResult(
        angle_deg=angle,
        sigma_x=sigma_x_rot,
        sigma_y=sigma_y_rot,
        tau_xy=tau_xy_rot,
        sigma_1=avg + radius,
        sigma_2=avg - radius,
        max_shear=radius,
        center=avg,
        radius=radius,
        principal_angle_deg=principal_angle,
    )


def stress_tensor(
    sigma_x: float,
    sigma_y: float,
    sigma_z: float,
    tau_xy: float,
    tau_yz: float,
    tau_zx: float
) -> npt.NDArray[np.float64]:
    """Symmetric 3x3 Cauchy stress tensor."""
    return np.array([
        [sigma_x, tau_xy, tau_zx],
        [tau_xy, sigma_y, tau_yz],
        [tau_zx, tau_yz, sigma_z],
    ], dtype=np.float64)


def principal_stresses_3d(
    sigma_x: float,
    sigma_y: float,
    sigma_z: float,
    tau_xy: float = 0.0,
    tau_yz: float = 0.0,
    tau_zx: float = 0.0
) -> TriaxialStressResult:
    """
    Stress invariants and principal stresses of a 3D stress state.

    The principal stresses are the roots of
    sigma³ - I1·sigma² + I2·sigma - I3 = 0, obtained here as the eigenvalues
    of the symmetric tensor.

    Returns:
        TriaxialStressResult with sigma_1 >= sigma_2 >= sigma_3 and the
        absolute maximum shear (sigma_1 - sigma_3) / 2.
    """
    components = {
        "sigma_x": sigma_x, "sigma_y": sigma_y, "sigma_z": sigma_z,
        "tau_xy": tau_xy, "tau_yz": tau_yz, "tau_zx": tau_zx,
    }
    sx, sy, sz, txy, tyz, tzx = (require_finite(name, value) for name, value in components.items())

    tensor = stress_tensor(sx, sy, sz, txy, tyz, tzx)
    i1 = sx + sy + sz
    i2 = sx * sy + sy * sz + sz * sx - txy ** 2 - tyz ** 2 - tzx ** 2
    i3 = float(np.linalg.det(tensor))

    s3, s2, s1 = (float(v) for v in np.linalg.eigvalsh(tensor))

    logger.debug(f"Principal stresses: {s1:.4g}, {s2:.4g}, {s3:.4g} MPa")
    return TriaxialStressResult(
        i1=i1,
        i2=i2,
        i3=i3,
        sigma_1=s1,
        sigma_2=s2,
        sigma_3=s3,
        max_shear=(s1 - s3) / 2.0,
    )
