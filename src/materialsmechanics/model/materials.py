"""
Material Library Management
===========================
Defines the elastic/strength constants the models read, and the static
catalog they are selected from.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Iterator, List, Optional, Any
import json
import logging

from materialsmechanics.config import DEFAULT_MATS_PATH
from materialsmechanics.errors import (
    InvalidParameterError,
    UnknownMaterialError,
    require_positive,
    require_poisson_ratio,
)
from materialsmechanics.utils import gpa_to_mpa

logger = logging.getLogger(__name__)

REQUIRED_CONSTANTS = (
    "elastic_modulus_GPa",
    "shear_modulus_GPa",
    "yield_strength_MPa",
    "poisson_ratio",
)


@dataclass(frozen=True, kw_only=True)
class MaterialProperties:
    """
    Isotropic linear-elastic material with a yield strength.

    Immutable: selecting another material replaces the whole record.
    """
    name: str
    elastic_modulus_GPa: float
    shear_modulus_GPa: float
    yield_strength_MPa: float
    poisson_ratio: float
    description: str = ""

    def __post_init__(self) -> None:
        # Coerce to float so records built from JSON ints compare cleanly
        object.__setattr__(self, "elastic_modulus_GPa",
                           require_positive("elastic_modulus_GPa", self.elastic_modulus_GPa))
        object.__setattr__(self, "shear_modulus_GPa",
                           require_positive("shear_modulus_GPa", self.shear_modulus_GPa))
        object.__setattr__(self, "yield_strength_MPa",
                           require_positive("yield_strength_MPa", self.yield_strength_MPa))
        object.__setattr__(self, "poisson_ratio",
                           require_poisson_ratio("poisson_ratio", self.poisson_ratio))

    @property
    def elastic_modulus_MPa(self) -> float:
        return gpa_to_mpa(self.elastic_modulus_GPa)

    @property
    def shear_modulus_MPa(self) -> float:
        return gpa_to_mpa(self.shear_modulus_GPa)

    @property
    def yield_strain(self) -> float:
        """Strain at first yield, sigma_y / E."""
        return self.yield_strength_MPa / self.elastic_modulus_MPa

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> MaterialProperties:
        """Build a complete record; every constant must be present."""
        missing = [key for key in REQUIRED_CONSTANTS if key not in data]
        if missing:
            raise InvalidParameterError(missing[0], None, "missing material constant")
        return MaterialProperties(
            name=data.get("name", "Unnamed Material"),
            description=data.get("description", ""),
            elastic_modulus_GPa=data["elastic_modulus_GPa"],
            shear_modulus_GPa=data["shear_modulus_GPa"],
            yield_strength_MPa=data["yield_strength_MPa"],
            poisson_ratio=data["poisson_ratio"],
        )


STRUCTURAL_STEEL = MaterialProperties(
    name="Structural Steel",
    description="Mild structural steel (S235/A36 class).",
    elastic_modulus_GPa=200.0,
    shear_modulus_GPa=77.0,
    yield_strength_MPa=250.0,
    poisson_ratio=0.3,
)


class MaterialLibrary:
    """
    Manages the catalog of materials, including loading from files
    and retrieving material definitions.
    """
    def __init__(self, filepath: Optional[str] = DEFAULT_MATS_PATH) -> None:
        self.materials: Dict[str, MaterialProperties] = {}
        if filepath:
            self.load_json(filepath)

    @classmethod
    def from_json(cls, filepath: str) -> MaterialLibrary:
        return cls(filepath)

    def load_json(self, filepath: str) -> None:
        """Add every material listed in a JSON array file."""
        try:
            with open(filepath, mode='r', encoding='utf-8') as f:
                entries = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Material catalog import failed: {e}")
            raise IOError(f"Failed to read material catalog '{filepath}': {e}") from e

        for entry in entries:
            self.add_material(MaterialProperties.from_dict(entry))
        logger.info(f"Loaded {len(entries)} materials from {filepath}")

    def add_material(self, material: MaterialProperties) -> None:
        """Add or update a material in the library."""
        if material.name in self.materials:
            logger.debug(f"Replacing material '{material.name}'")
        self.materials[material.name] = material

    def get_material(self, name: str) -> MaterialProperties:
        """Retrieve a material by name."""
        try:
            return self.materials[name]
        except KeyError:
            raise UnknownMaterialError(name) from None

    def get_names(self) -> List[str]:
        """List all material names in the library."""
        return list(self.materials.keys())

    def find(
        self,
        elastic_modulus_GPa: Optional[float] = None,
        yield_strength_MPa: Optional[float] = None,
        shear_modulus_GPa: Optional[float] = None,
        modulus_tolerance_GPa: float = 1.0,
        tolerance_MPa: float = 5.0
    ) -> Optional[MaterialProperties]:
        """
        Return the first catalog entry matching the given constants.

        An entry matches when its E or its G lies within
        ``modulus_tolerance_GPa`` of the given value, and, when a yield
        strength is given, its yield strength lies within ``tolerance_MPa``.
        Used to label free-form input that is close to a catalog material;
        ``None`` means the input is a custom material.

        Args:
            elastic_modulus_GPa: Young's modulus to match, if known.
            yield_strength_MPa: Yield strength to match, if known.
            shear_modulus_GPa: Shear modulus to match, if known.
            modulus_tolerance_GPa: Accepted deviation of E and G.
            tolerance_MPa: Accepted deviation of the yield strength.
        """
        def near(catalog_value: float, value: Optional[float], tolerance: float) -> bool:
            return value is not None and abs(catalog_value - value) < tolerance

        for material in self.materials.values():
            modulus_match = (near(material.elastic_modulus_GPa, elastic_modulus_GPa, modulus_tolerance_GPa)
                             or near(material.shear_modulus_GPa, shear_modulus_GPa, modulus_tolerance_GPa))
            if not modulus_match:
                continue
            if yield_strength_MPa is None or near(material.yield_strength_MPa, yield_strength_MPa, tolerance_MPa):
                return material
        return None

    def __contains__(self, name: object) -> bool:
        return name in self.materials

    def __iter__(self) -> Iterator[MaterialProperties]:
        return iter(self.materials.values())

    def __len__(self) -> int:
        return len(self.materials)
