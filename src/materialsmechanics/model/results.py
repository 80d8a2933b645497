"""
Derived results of the models.

Every record is frozen and created fresh on each evaluation. Units follow the
engine convention: forces in N, lengths in mm, stresses in MPa (N/mm²),
second moments in mm⁴, unless the field name says otherwise.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import StrEnum
import math
from typing import Any, Dict


class AxialState(StrEnum):
    ELASTIC = "elastic"
    PLASTIC = "plastic"
    FRACTURED = "fractured"


class ColumnState(StrEnum):
    SAFE = "safe"
    BUCKLED = "buckled"


class _Result:
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AxialResult(_Result):
    stress: float
    strain: float
    elongation: float           # mm
    state: AxialState

    @property
    def is_permanent(self) -> bool:
        """True once the bar has left the elastic branch."""
        return self.state is not AxialState.ELASTIC


@dataclass(frozen=True)
class CurveKeyPoint:
    label: str
    strain: float
    stress: float


@dataclass(frozen=True)
class BendingResult(_Result):
    inertia: float
    max_moment: float           # N·m
    max_deflection: float       # mm
    max_stress: float


@dataclass(frozen=True)
class TorsionResult(_Result):
    polar_inertia: float
    max_shear_stress: float
    twist_deg: float

    @property
    def twist_rad(self) -> float:
        return math.radians(self.twist_deg)


@dataclass(frozen=True)
class BucklingResult(_Result):
    min_inertia: float
    area: float                 # mm²
    radius_of_gyration: float   # mm
    slenderness: float
    critical_load: float        # N
    load: float                 # N
    state: ColumnState

    @property
    def utilization(self) -> float:
        """Applied load as a fraction of the Euler load."""
        return self.load / self.critical_load


@dataclass(frozen=True)
class CombinedResult(_Result):
    area: float
    inertia: float
    moment: float               # N·mm
    axial_stress: float
    bending_stress: float
    top_stress: float
    bottom_stress: float
    kern_limit: float           # mm, h/6

    @property
    def stress_reversal(self) -> bool:
        """Extreme fibres carry stresses of opposite sign."""
        return self.top_stress * self.bottom_stress < 0.0


@dataclass(frozen=True)
class PlaneStressResult(_Result):
    angle_deg: float            # normalised to [0, 360)
    sigma_x: float              # transformed components
    sigma_y: float
    tau_xy: float
    sigma_1: float
    sigma_2: float
    max_shear: float
    center: float               # Mohr's circle centre, (sx + sy) / 2
    radius: float               # Mohr's circle radius
    principal_angle_deg: float


@dataclass(frozen=True)
class TriaxialStressResult(_Result):
    i1: float
    i2: float
    i3: float
    sigma_1: float
    sigma_2: float
    sigma_3: float
    max_shear: float


@dataclass(frozen=True)
class PoissonResult(_Result):
    axial_strain: float
    transverse_strain: float
    width: float
    height: float


@dataclass(frozen=True)
class CurvePoint(_Result):
    strain: float
    engineering_stress: float
    true_stress: float


@dataclass(frozen=True)
class FundamentalsResult(_Result):
    poisson: PoissonResult
    curve_point: CurvePoint
