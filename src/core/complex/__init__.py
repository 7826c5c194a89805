"""
Extended complex numbers

Комплексные числа с первоклассными INFINITY и NaN: иерархия вариантов,
фабрика make_complex, приведение по модулю и функциональный фасад CMath
(модуль src.core.complex.functions).
"""

from src.core.complex.modular import ModArg
from src.core.complex.values import (
    # Singletons
    I,
    INFINITY,
    MINUS_I,
    MINUS_ONE,
    NaN,
    ONE,
    ZERO,
    # Types
    Complex,
    ComplexInfinity,
    ComplexNaN,
    GeneralComplex,
    ImaginaryUnit,
    MinusImaginaryUnit,
    MinusOne,
    NegativeReal,
    One,
    PositiveReal,
    PureImaginary,
    Zero,
    # Exceptions
    ComplexInvariantViolation,
    # Factory
    make_complex,
    of_polar,
)
from src.core.complex.functions import E, PI

__all__ = [
    # Singletons
    "I",
    "INFINITY",
    "MINUS_I",
    "MINUS_ONE",
    "NaN",
    "ONE",
    "ZERO",
    "E",
    "PI",
    # Types
    "Complex",
    "ComplexInfinity",
    "ComplexNaN",
    "GeneralComplex",
    "ImaginaryUnit",
    "MinusImaginaryUnit",
    "MinusOne",
    "ModArg",
    "NegativeReal",
    "One",
    "PositiveReal",
    "PureImaginary",
    "Zero",
    # Exceptions
    "ComplexInvariantViolation",
    # Factory
    "make_complex",
    "of_polar",
]
