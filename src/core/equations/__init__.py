"""
Polynomial equations

Кубические уравнения с решением в замкнутой форме.
"""

from src.core.equations.cubic import (
    CubicEquation,
    DepressedCubicEquation,
    GeneralCubicEquation,
)

__all__ = [
    "CubicEquation",
    "DepressedCubicEquation",
    "GeneralCubicEquation",
]
