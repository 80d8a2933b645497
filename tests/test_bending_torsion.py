"""
Tests for the beam bending and shaft torsion models.

Tests cover:
- Reference beam scenario and formula checks
- Scaling with section geometry
- Torsion of a solid circular shaft
- Parameter validation
"""
import math

import numpy as np
import pytest

from materialsmechanics.analysis.bending import beam_bending
from materialsmechanics.analysis.sections import (
    circle_polar_inertia,
    rectangle_inertia,
    rectangle_min_inertia,
)
from materialsmechanics.analysis.torsion import shaft_torsion
from materialsmechanics.errors import InvalidParameterError


@pytest.mark.unit
class TestSections:
    """Tests for the cross-section helpers."""

    def test_rectangle_inertia(self):
        """Test b·h³/12."""
        assert np.isclose(rectangle_inertia(100.0, 150.0), 28_125_000.0)

    def test_weak_axis(self):
        """Test the weak axis is independent of orientation."""
        assert rectangle_min_inertia(40.0, 80.0) == rectangle_min_inertia(80.0, 40.0)
        assert np.isclose(rectangle_min_inertia(40.0, 80.0), 80.0 * 40.0 ** 3 / 12.0)

    def test_polar_inertia(self):
        """Test pi·r⁴/2."""
        assert np.isclose(circle_polar_inertia(20.0), math.pi * 160_000.0 / 2.0)


@pytest.mark.unit
@pytest.mark.bending
class TestBeamBending:
    """Tests for the simply supported beam."""

    def test_reference_scenario(self):
        """Test P=2000 N, L=2 m, b=100 mm, h=150 mm, E=200 GPa."""
        result = beam_bending(2000.0, 2.0, 100.0, 150.0, 200.0)

        assert np.isclose(result.inertia, 28_125_000.0)
        assert np.isclose(result.max_moment, 1000.0)
        assert np.isclose(result.max_stress, 1000.0 * 1000.0 * 75.0 / 28_125_000.0)
        assert np.isclose(result.max_stress, 2.6667, atol=1e-4)

    def test_deflection_formula(self):
        """Test w = P·L³/(48·E·I) with L in mm and E in MPa."""
        result = beam_bending(2000.0, 2.0, 100.0, 150.0, 200.0)

        expected = 2000.0 * 2000.0 ** 3 / (48.0 * 200_000.0 * 28_125_000.0)
        assert np.isclose(result.max_deflection, expected)
        assert np.isclose(result.max_deflection, 0.05926, atol=1e-5)

    def test_height_dominates_stiffness(self):
        """Test doubling h cuts the deflection by 8 and the stress by 4."""
        base = beam_bending(2000.0, 2.0, 100.0, 150.0, 200.0)
        deep = beam_bending(2000.0, 2.0, 100.0, 300.0, 200.0)

        assert np.isclose(base.max_deflection / deep.max_deflection, 8.0)
        assert np.isclose(base.max_stress / deep.max_stress, 4.0)

    def test_softer_material_deflects_more(self):
        """Test deflection scales with 1/E while stress does not depend on E."""
        steel = beam_bending(2000.0, 2.0, 100.0, 150.0, 200.0)
        alu = beam_bending(2000.0, 2.0, 100.0, 150.0, 70.0)

        assert np.isclose(alu.max_deflection / steel.max_deflection, 200.0 / 70.0)
        assert np.isclose(alu.max_stress, steel.max_stress)

    @pytest.mark.parametrize("args", [
        (2000.0, 2.0, 0.0, 150.0, 200.0),
        (2000.0, 2.0, 100.0, -1.0, 200.0),
        (2000.0, 2.0, 100.0, 150.0, 0.0),
        (2000.0, -2.0, 100.0, 150.0, 200.0),
    ])
    def test_invalid_inputs(self, args):
        """Test zero section dimensions, modulus and negative span are refused."""
        with pytest.raises(InvalidParameterError):
            beam_bending(*args)


@pytest.mark.unit
@pytest.mark.torsion
class TestShaftTorsion:
    """Tests for the circular shaft."""

    def test_reference_scenario(self):
        """Test T=500 N·m, r=20 mm, L=1 m, G=77 GPa."""
        result = shaft_torsion(500.0, 20.0, 1.0, 77.0)

        ip = math.pi * 20.0 ** 4 / 2.0
        assert np.isclose(result.polar_inertia, ip)
        assert np.isclose(result.max_shear_stress, 500_000.0 * 20.0 / ip)
        assert np.isclose(result.max_shear_stress, 39.789, atol=1e-3)
        assert np.isclose(result.twist_rad, 500_000.0 * 1000.0 / (77_000.0 * ip))
        assert np.isclose(result.twist_deg, 1.4803, atol=1e-4)

    def test_radius_scaling(self):
        """Test doubling r reduces shear by 8 and twist by 16."""
        thin = shaft_torsion(500.0, 20.0, 1.0, 77.0)
        thick = shaft_torsion(500.0, 40.0, 1.0, 77.0)

        assert np.isclose(thin.max_shear_stress / thick.max_shear_stress, 8.0)
        assert np.isclose(thin.twist_deg / thick.twist_deg, 16.0)

    def test_twist_proportional_to_length(self):
        """Test phi grows linearly with the shaft length."""
        short = shaft_torsion(500.0, 20.0, 1.0, 77.0)
        long = shaft_torsion(500.0, 20.0, 3.0, 77.0)
        assert np.isclose(long.twist_deg, 3.0 * short.twist_deg)

    def test_reversed_torque(self):
        """Test the sign of the torque carries through."""
        result = shaft_torsion(-500.0, 20.0, 1.0, 77.0)
        assert result.max_shear_stress < 0.0
        assert result.twist_deg < 0.0

    @pytest.mark.parametrize("args", [
        (500.0, 0.0, 1.0, 77.0),
        (500.0, 20.0, 1.0, 0.0),
        (500.0, 20.0, -1.0, 77.0),
    ])
    def test_invalid_inputs(self, args):
        """Test zero radius or modulus and negative length are refused."""
        with pytest.raises(InvalidParameterError):
            shaft_torsion(*args)
