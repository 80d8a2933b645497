# curve_helpers.py
from __future__ import annotations

import numpy as np
import numpy.typing as npt
import numba as nb

from materialsmechanics.config import (
    CURVE_ELASTIC_LIMIT,
    CURVE_ELASTIC_SLOPE,
    CURVE_YIELD_STRESS,
    CURVE_HARDENING_COEFF,
    CURVE_HARDENING_EXPONENT,
    CURVE_SOFTENING_COEFF,
)

# ---- JIT'd stress-strain kernels (scalar + batched) ----

@nb.njit(cache=True)
def engineering_stress_scalar(e: float) -> float:
    """
    Engineering stress (MPa) of the illustrative tensile curve.

    Linear (4000·e) up to e = 0.05, then
    200 + 300·(e - 0.05)^0.4 - 100·(e - 0.05)². Both branches give 200 MPa
    at e = 0.05.
    """
    if e < CURVE_ELASTIC_LIMIT:
        return e * CURVE_ELASTIC_SLOPE
    ep = e - CURVE_ELASTIC_LIMIT
    return CURVE_YIELD_STRESS + CURVE_HARDENING_COEFF * ep ** CURVE_HARDENING_EXPONENT \
        - CURVE_SOFTENING_COEFF * (ep * ep)

@nb.njit(cache=True)
def true_stress_scalar(e: float) -> float:
    """True stress sigma_eng·(1 + e) under the constant-volume assumption."""
    return engineering_stress_scalar(e) * (1.0 + e)

@nb.njit(cache=True)
def curve_batch(
    strains: npt.NDArray[np.float64]
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Batched curve evaluation.

    Args:
        strains: Engineering strains, shape (n,).

    Returns:
        sigma_eng: Engineering stress per strain (MPa), shape (n,).
        sigma_true: True stress per strain (MPa), shape (n,).
    """
    n = strains.size
    sigma_eng = np.empty(n, np.float64)
    sigma_true = np.empty(n, np.float64)
    for i in range(n):
        e = strains[i]
        s = engineering_stress_scalar(e)
        sigma_eng[i] = s
        sigma_true[i] = s * (1.0 + e)
    return sigma_eng, sigma_true
