"""
Shared fixtures for the calculation engine tests.

This module provides simple, reusable fixtures for testing.
"""
import matplotlib
import pytest

from materialsmechanics.model.materials import MaterialLibrary, MaterialProperties, STRUCTURAL_STEEL
from materialsmechanics.model.state import SimulationState

matplotlib.use("Agg")


# =============================================================================
# Material Fixtures
# =============================================================================

@pytest.fixture
def steel():
    """Structural steel: E=200 GPa, G=77 GPa, sigma_y=250 MPa, nu=0.3."""
    return STRUCTURAL_STEEL


@pytest.fixture
def aluminum():
    """Aluminium 6061: E=70 GPa, G=26 GPa, sigma_y=276 MPa, nu=0.33."""
    return MaterialProperties(
        name="Aluminum 6061",
        elastic_modulus_GPa=70.0,
        shear_modulus_GPa=26.0,
        yield_strength_MPa=276.0,
        poisson_ratio=0.33,
    )


@pytest.fixture
def library():
    """The bundled default catalog."""
    return MaterialLibrary()


# =============================================================================
# State Fixtures
# =============================================================================

@pytest.fixture
def default_state():
    """Simulation state with every module at its default inputs."""
    return SimulationState()


# =============================================================================
# Helper Functions
# =============================================================================

def plane_stress_cases():
    """(sigma_x, sigma_y, tau_xy) triples covering signs and pure shear."""
    return [
        (50.0, 20.0, 30.0),
        (-80.0, 40.0, 0.0),
        (0.0, 0.0, 25.0),
        (120.0, -60.0, -45.0),
        (10.0, 10.0, 0.0),
    ]
