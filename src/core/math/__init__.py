"""
Core math modules

Скалярные примитивы с IEEE-754 семантикой, классификация пар (re, im)
и каноническое форматирование вещественных чисел.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CONGRUENCE_DEFAULT,
    EPS_EQUALS_DEFAULT,
    EPS_IDENTITY,
    FLOAT32_HALF_ULP,
    FLOAT32_MAX,
    # IEEE-safe operations
    cbrt,
    fround,
    ieee_divide,
    ieee_sign,
    round_half_up,
    safe_cosh,
    safe_exp,
    safe_log,
    safe_pow,
    safe_sinh,
    # Comparisons
    is_integral,
    within,
)

# Real-Kind Classification
from src.core.math.real_kind import (
    ComplexKind,
    classify,
    is_finite_pair,
    is_imaginary_pair,
    is_infinite_pair,
    is_nan_pair,
    is_real_pair,
    is_zero_pair,
)

# Formatting
from src.core.math.formatting import format_real

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_CONGRUENCE_DEFAULT",
    "EPS_EQUALS_DEFAULT",
    "EPS_IDENTITY",
    "FLOAT32_HALF_ULP",
    "FLOAT32_MAX",
    # Numerical Safeguards: IEEE-safe operations
    "cbrt",
    "fround",
    "ieee_divide",
    "ieee_sign",
    "round_half_up",
    "safe_cosh",
    "safe_exp",
    "safe_log",
    "safe_pow",
    "safe_sinh",
    # Numerical Safeguards: Comparisons
    "is_integral",
    "within",
    # Real-Kind Classification
    "ComplexKind",
    "classify",
    "is_finite_pair",
    "is_imaginary_pair",
    "is_infinite_pair",
    "is_nan_pair",
    "is_real_pair",
    "is_zero_pair",
    # Formatting
    "format_real",
]
