"""Calculation engine for an interactive mechanics-of-materials course."""
from materialsmechanics.analysis.solver import solve, solve_all
from materialsmechanics.errors import InvalidParameterError, UnknownMaterialError
from materialsmechanics.model.materials import MaterialLibrary, MaterialProperties
from materialsmechanics.model.state import ModuleType, SimulationState

__all__ = [
    "InvalidParameterError",
    "MaterialLibrary",
    "MaterialProperties",
    "ModuleType",
    "SimulationState",
    "UnknownMaterialError",
    "solve",
    "solve_all",
]
