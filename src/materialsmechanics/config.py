"""
Configuration & Constants
=========================
This module serves as the central registry for file paths and the fixed
constants of the teaching models.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find the bundled material catalog when the app is frozen into an .exe.
3. Reproducibility: The hardening multipliers and the curve coefficients are
   illustrative presentation constants. They are kept here, in one place, so
   every model reads the same numbers.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_MATS_PATH (str): Absolute path to the default material catalog.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Assets ship inside the package: src/materialsmechanics/assets
    package_path: Path = Path(__file__).parent
    return os.path.join(str(package_path), relative_path)


# Global Paths
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_MATS_PATH: str = os.path.join(ASSETS_PATH, "materials_default.json")

DEFAULT_MATERIAL_NAME: str = "Structural Steel"

# Axial model (multiples of the yield strength / yield strain)
UTS_FACTOR: float = 1.5
FAILURE_STRESS_FACTOR: float = 1.4
UTS_STRAIN_FACTOR: float = 10.0
FAILURE_STRAIN_FACTOR: float = 15.0

# Fundamentals engineering stress-strain curve
CURVE_ELASTIC_LIMIT: float = 0.05      # strain where the linear branch ends
CURVE_ELASTIC_SLOPE: float = 4000.0    # MPa per unit strain
CURVE_YIELD_STRESS: float = 200.0      # MPa, = slope * elastic limit
CURVE_HARDENING_COEFF: float = 300.0
CURVE_HARDENING_EXPONENT: float = 0.4
CURVE_SOFTENING_COEFF: float = 100.0
CURVE_MAX_STRAIN: float = 0.5
CURVE_STEP: float = 0.01
