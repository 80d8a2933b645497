"""Exceptions raised by the calculation engine."""
from __future__ import annotations

import math
from typing import Any


class InvalidParameterError(ValueError):
    """
    A physical input that the models cannot evaluate.

    Covers non-positive areas and section dimensions, non-positive moduli,
    out-of-range Poisson ratios and non-finite values. Zero denominators are
    reported through this error before any division happens.
    """

    def __init__(self, name: str, value: Any, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid parameter '{name}' = {value!r}: {reason}")


class UnknownMaterialError(KeyError):
    """Raised when a material name is not present in the library."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown material: '{name}'")

    def __str__(self) -> str:
        return self.args[0]


def require_finite(name: str, value: float) -> float:
    """Return ``value`` as float, raising if it is NaN or infinite."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(name, value, "must be a number") from None
    if not math.isfinite(number):
        raise InvalidParameterError(name, value, "must be finite")
    return number


def require_positive(name: str, value: float) -> float:
    """Return ``value`` as float, raising unless it is finite and > 0."""
    number = require_finite(name, value)
    if number <= 0.0:
        raise InvalidParameterError(name, value, "must be greater than zero")
    return number


def require_non_negative(name: str, value: float) -> float:
    """Return ``value`` as float, raising unless it is finite and >= 0."""
    number = require_finite(name, value)
    if number < 0.0:
        raise InvalidParameterError(name, value, "must not be negative")
    return number


def require_poisson_ratio(name: str, value: float) -> float:
    """Poisson ratio of an isotropic solid, 0 <= nu < 0.5."""
    number = require_finite(name, value)
    if not 0.0 <= number < 0.5:
        raise InvalidParameterError(name, value, "must lie in [0, 0.5)")
    return number
