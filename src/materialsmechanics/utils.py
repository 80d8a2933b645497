import math

MM_PER_M = 1000.0
MPA_PER_GPA = 1000.0


def m_to_mm(length_m: float) -> float:
    """Convert metres to millimetres."""
    return length_m * MM_PER_M

def gpa_to_mpa(modulus_GPa: float) -> float:
    """Convert GPa to MPa (N/mm²)."""
    return modulus_GPa * MPA_PER_GPA

def nm_to_nmm(moment_Nm: float) -> float:
    """Convert a moment or torque from N·m to N·mm."""
    return moment_Nm * MM_PER_M

def normalize_angle(angle_deg: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    wrapped = math.fmod(angle_deg, 360.0)
    if wrapped < 0.0:
        wrapped += 360.0
    # fmod of a tiny negative value can round up to exactly 360
    return 0.0 if wrapped == 360.0 else wrapped
