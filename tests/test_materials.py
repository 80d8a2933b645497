"""
Tests for material properties and the material library.

Tests cover:
- MaterialProperties validation
- Unit helpers
- Catalog loading and lookup
"""
import json

import numpy as np
import pytest

from materialsmechanics.errors import InvalidParameterError, UnknownMaterialError
from materialsmechanics.model.materials import MaterialLibrary, MaterialProperties, STRUCTURAL_STEEL


@pytest.mark.unit
@pytest.mark.material
class TestMaterialProperties:
    """Tests for the MaterialProperties value type."""

    def test_initialization(self, steel):
        """Test constants are stored as given."""
        assert steel.name == "Structural Steel"
        assert steel.elastic_modulus_GPa == 200.0
        assert steel.shear_modulus_GPa == 77.0
        assert steel.yield_strength_MPa == 250.0
        assert steel.poisson_ratio == 0.3

    def test_unit_conversions(self, steel):
        """Test GPa -> MPa helpers and the yield strain."""
        assert steel.elastic_modulus_MPa == 200_000.0
        assert steel.shear_modulus_MPa == 77_000.0
        assert np.isclose(steel.yield_strain, 0.00125)

    def test_immutable(self, steel):
        """Test the record cannot be modified in place."""
        with pytest.raises(AttributeError):
            steel.elastic_modulus_GPa = 100.0

    @pytest.mark.parametrize("nu", [-0.1, 0.5, 0.7, float("nan")])
    def test_poisson_ratio_out_of_range(self, nu):
        """Test nu must lie in [0, 0.5)."""
        with pytest.raises(InvalidParameterError):
            MaterialProperties(name="x", elastic_modulus_GPa=1.0, shear_modulus_GPa=1.0,
                               yield_strength_MPa=1.0, poisson_ratio=nu)

    @pytest.mark.parametrize("field", ["elastic_modulus_GPa", "shear_modulus_GPa", "yield_strength_MPa"])
    @pytest.mark.parametrize("value", [0.0, -10.0])
    def test_non_positive_constants(self, field, value):
        """Test moduli and yield strength must be positive."""
        data = dict(name="x", elastic_modulus_GPa=200.0, shear_modulus_GPa=77.0,
                    yield_strength_MPa=250.0, poisson_ratio=0.3)
        data[field] = value
        with pytest.raises(InvalidParameterError) as excinfo:
            MaterialProperties(**data)
        assert excinfo.value.name == field

    def test_integer_input_coerced(self):
        """Test integer constants are stored as floats."""
        mat = MaterialProperties(name="x", elastic_modulus_GPa=200, shear_modulus_GPa=77,
                                 yield_strength_MPa=250, poisson_ratio=0)
        assert isinstance(mat.elastic_modulus_GPa, float)
        assert mat.poisson_ratio == 0.0

    def test_dict_round_trip(self, aluminum):
        """Test serialization to and from a plain dict."""
        assert MaterialProperties.from_dict(aluminum.to_dict()) == aluminum

    def test_from_dict_missing_constant(self):
        """Test an incomplete record is refused with the missing key named."""
        with pytest.raises(InvalidParameterError) as excinfo:
            MaterialProperties.from_dict({"name": "x", "elastic_modulus_GPa": 200.0})
        assert excinfo.value.name == "shear_modulus_GPa"


@pytest.mark.unit
@pytest.mark.material
class TestMaterialLibrary:
    """Tests for the material catalog."""

    def test_default_catalog(self, library):
        """Test the bundled catalog holds the nine teaching materials."""
        assert len(library) == 9
        assert "Structural Steel" in library
        assert "Rubber (Isoprene)" in library
        assert library.get_names()[0] == "Structural Steel"

    def test_default_steel_matches_constant(self, library):
        """Test the catalog entry equals the built-in default material."""
        assert library.get_material("Structural Steel") == STRUCTURAL_STEEL

    def test_unknown_material(self, library):
        """Test missing names raise a KeyError subclass."""
        with pytest.raises(UnknownMaterialError):
            library.get_material("Unobtainium")
        with pytest.raises(KeyError):
            library.get_material("Unobtainium")

    def test_add_material(self, library, aluminum):
        """Test adding replaces an entry with the same name."""
        stiffer = MaterialProperties(name=aluminum.name, elastic_modulus_GPa=72.0, shear_modulus_GPa=27.0,
                                     yield_strength_MPa=276.0, poisson_ratio=0.33)
        library.add_material(stiffer)
        assert len(library) == 9
        assert library.get_material("Aluminum 6061").elastic_modulus_GPa == 72.0

    def test_find_by_constants(self, library):
        """Test free-form constants resolve to the matching catalog entry."""
        assert library.find(200.0, 252.0).name == "Structural Steel"
        assert library.find(70.0, 276.0).name == "Aluminum 6061"
        assert library.find(70.0, 50.0).name == "Glass"
        assert library.find(70.0).name == "Aluminum 6061"
        assert library.find(999.0) is None
        assert library.find(200.0, 300.0) is None

    def test_find_within_modulus_tolerance(self, library):
        """Test values less than 1 GPa away from a catalog modulus still match."""
        assert library.find(200.5, 250.0).name == "Structural Steel"
        assert library.find(199.2).name == "Structural Steel"
        assert library.find(201.0) is None

    def test_find_by_shear_modulus(self, library):
        """Test G alone, or a matching G with an off E, selects the entry."""
        assert library.find(shear_modulus_GPa=77.3).name == "Structural Steel"
        assert library.find(150.0, 830.0, shear_modulus_GPa=42.0).name == "Titanium"
        assert library.find(shear_modulus_GPa=42.0, yield_strength_MPa=250.0) is None

    def test_find_without_constants(self, library):
        """Test no modulus means no match."""
        assert library.find() is None
        assert library.find(yield_strength_MPa=250.0) is None

    def test_iteration(self, library):
        """Test iterating yields MaterialProperties records."""
        assert all(isinstance(m, MaterialProperties) for m in library)

    def test_empty_library(self):
        """Test a library can start without a catalog file."""
        assert len(MaterialLibrary(filepath=None)) == 0

    def test_from_json(self, tmp_path, aluminum):
        """Test loading a custom catalog file."""
        path = tmp_path / "mats.json"
        path.write_text(json.dumps([aluminum.to_dict()]), encoding="utf-8")

        lib = MaterialLibrary.from_json(str(path))
        assert lib.get_names() == ["Aluminum 6061"]
        assert lib.get_material("Aluminum 6061") == aluminum

    def test_from_json_missing_file(self, tmp_path):
        """Test an unreadable catalog raises IOError."""
        with pytest.raises(IOError):
            MaterialLibrary.from_json(str(tmp_path / "missing.json"))

    def test_from_json_invalid_entry(self, tmp_path):
        """Test catalog entries are validated like any other material."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{
            "name": "bad", "elastic_modulus_GPa": -1, "shear_modulus_GPa": 1,
            "yield_strength_MPa": 1, "poisson_ratio": 0.3,
        }]), encoding="utf-8")
        with pytest.raises(InvalidParameterError):
            MaterialLibrary.from_json(str(path))
