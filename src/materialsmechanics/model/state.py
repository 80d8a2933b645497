"""
Simulation State (Data Model)
=============================
This module defines the parameter record the models are evaluated against.

Why is this file needed?
------------------------
1. State Management: It holds the physical inputs of every loading mode and
   the active material in one place.
2. Decoupling: The UI writes to this object through partial merges; the
   solver reads only the group belonging to the active module.
3. Determinism: There is no hidden state. Every result is a function of the
   groups stored here and nothing else.

Classes:
    ModuleType: The loading modes the engine can evaluate.
    *Params: Frozen per-module parameter groups.
    SimulationState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace, asdict
from enum import StrEnum
from typing import Any, ClassVar, Dict, Mapping
import logging

from materialsmechanics.errors import InvalidParameterError, require_finite, require_positive
from materialsmechanics.model.materials import MaterialProperties, STRUCTURAL_STEEL

logger = logging.getLogger(__name__)


class ModuleType(StrEnum):
    FUNDAMENTALS = "fundamentals"
    AXIAL = "axial"
    BENDING = "bending"
    TORSION = "torsion"
    BUCKLING = "buckling"
    STRESS = "stress"
    COMBINED = "combined"


class _ParamsBase:
    """Finite-value check shared by the parameter groups."""
    POSITIVE: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        for f in fields(self):
            label = f"{type(self).__name__}.{f.name}"
            if f.name in self.POSITIVE:
                value = require_positive(label, getattr(self, f.name))
            else:
                value = require_finite(label, getattr(self, f.name))
            object.__setattr__(self, f.name, value)


@dataclass(frozen=True)
class FundamentalsParams(_ParamsBase):
    strain_level: float = 0.1       # engineering strain of the marker point


@dataclass(frozen=True)
class AxialParams(_ParamsBase):
    POSITIVE = ("area", "length")

    force: float = 5000.0           # N
    area: float = 100.0             # mm²
    length: float = 1.0             # m


@dataclass(frozen=True)
class BendingParams(_ParamsBase):
    POSITIVE = ("length", "width", "height")

    load: float = 2000.0            # N, at midspan
    length: float = 2.0             # m
    width: float = 100.0            # mm
    height: float = 150.0           # mm


@dataclass(frozen=True)
class TorsionParams(_ParamsBase):
    POSITIVE = ("radius", "length")

    torque: float = 500.0           # N·m
    radius: float = 20.0            # mm
    length: float = 1.0             # m


@dataclass(frozen=True)
class BucklingParams(_ParamsBase):
    POSITIVE = ("length", "width", "height")

    load: float = 1000.0            # N, compressive
    length: float = 2.0             # m
    width: float = 40.0             # mm
    height: float = 40.0            # mm


@dataclass(frozen=True)
class StressParams(_ParamsBase):
    sigma_x: float = 50.0           # MPa
    sigma_y: float = 20.0
    sigma_z: float = 10.0
    tau_xy: float = 30.0
    tau_yz: float = 0.0
    tau_zx: float = 0.0
    angle: float = 0.0              # degrees


@dataclass(frozen=True)
class CombinedParams(_ParamsBase):
    POSITIVE = ("width", "height", "length")

    load: float = 10000.0           # N
    eccentricity: float = 20.0      # mm, offset from the centroid
    width: float = 50.0             # mm
    height: float = 100.0           # mm
    length: float = 1.0             # m


PARAMETER_GROUPS: Dict[str, type] = {
    "fundamentals": FundamentalsParams,
    "axial": AxialParams,
    "bending": BendingParams,
    "torsion": TorsionParams,
    "buckling": BucklingParams,
    "stress": StressParams,
    "combined": CombinedParams,
}


@dataclass
class SimulationState:
    """
    Holds the inputs of every module plus the embedded material.
    Pass this instance to the solver; mutate it only through ``update``.
    """
    active_module: ModuleType = ModuleType.AXIAL
    material: MaterialProperties = STRUCTURAL_STEEL

    fundamentals: FundamentalsParams = field(default_factory=FundamentalsParams)
    axial: AxialParams = field(default_factory=AxialParams)
    bending: BendingParams = field(default_factory=BendingParams)
    torsion: TorsionParams = field(default_factory=TorsionParams)
    buckling: BucklingParams = field(default_factory=BucklingParams)
    stress: StressParams = field(default_factory=StressParams)
    combined: CombinedParams = field(default_factory=CombinedParams)

    def update(self, **changes: Any) -> None:
        """
        Partially merge new values into the state.

        Each keyword names a parameter group and carries either a replacement
        record or a mapping of the fields to change, e.g.
        ``state.update(axial={"force": 8000.0})``. ``material`` and
        ``active_module`` are accepted too; a ``material`` mapping changes only
        the named constants of the current material. The merge is all-or-nothing: if any
        value is rejected the state is left untouched.
        """
        staged: Dict[str, Any] = {}
        for group, value in changes.items():
            if group == "material":
                staged[group] = self._merge_material(value)
            elif group == "active_module":
                try:
                    staged[group] = ModuleType(value)
                except ValueError:
                    raise InvalidParameterError(group, value, "unknown module") from None
            elif group in PARAMETER_GROUPS:
                staged[group] = self._merge_group(group, value)
            else:
                raise InvalidParameterError(group, value, "unknown parameter group")

        for group, value in staged.items():
            setattr(self, group, value)
        logger.debug(f"State updated: {', '.join(staged)}")

    def _merge_group(self, group: str, value: Any) -> Any:
        params_cls = PARAMETER_GROUPS[group]
        if isinstance(value, params_cls):
            return value
        if not isinstance(value, Mapping):
            raise InvalidParameterError(group, value, f"expected {params_cls.__name__} or a mapping")

        known = {f.name for f in fields(params_cls)}
        unknown = set(value) - known
        if unknown:
            name = f"{group}.{sorted(unknown)[0]}"
            raise InvalidParameterError(name, value[sorted(unknown)[0]], "unknown field")
        return replace(getattr(self, group), **value)

    def _merge_material(self, value: Any) -> MaterialProperties:
        if isinstance(value, MaterialProperties):
            return value
        if not isinstance(value, Mapping):
            raise InvalidParameterError("material", value, "expected MaterialProperties or a mapping")

        known = {f.name for f in fields(MaterialProperties)}
        unknown = sorted(set(value) - known)
        if unknown:
            raise InvalidParameterError(f"material.{unknown[0]}", value[unknown[0]], "unknown field")
        return replace(self.material, **value)

    def select_material(self, material: MaterialProperties) -> None:
        """Embed the chosen material record."""
        self.material = material
        logger.info(f"Material selected: {material.name}")

    def params_for(self, module: ModuleType) -> Any:
        """Parameter group read by ``module``."""
        return getattr(self, ModuleType(module).value)

    def reset(self) -> None:
        """Restore every group to its default value."""
        defaults = SimulationState()
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))
        logger.info("Simulation state has been reset.")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "active_module": self.active_module.value,
            "material": self.material.to_dict(),
        }
        for group in PARAMETER_GROUPS:
            data[group] = asdict(getattr(self, group))
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> SimulationState:
        state = SimulationState()
        state.update(**data)
        return state
