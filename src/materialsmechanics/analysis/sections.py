"""Cross-section properties used by the beam, column and shaft models."""
import math


def rectangle_area(width_mm: float, height_mm: float) -> float:
    """Area of a solid rectangle in mm²."""
    return width_mm * height_mm

def rectangle_inertia(width_mm: float, height_mm: float) -> float:
    """Second moment of area b·h³/12 about the axis parallel to the width, in mm⁴."""
    return width_mm * height_mm ** 3 / 12.0

def rectangle_min_inertia(width_mm: float, height_mm: float) -> float:
    """Second moment of area about the weak axis, max(b, h)·min(b, h)³/12."""
    side_min = min(width_mm, height_mm)
    side_max = max(width_mm, height_mm)
    return rectangle_inertia(side_max, side_min)

def circle_polar_inertia(radius_mm: float) -> float:
    """Polar moment of area π·r⁴/2 of a solid circle, in mm⁴."""
    return math.pi * radius_mm ** 4 / 2.0
