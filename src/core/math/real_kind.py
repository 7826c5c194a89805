"""
Real-Kind Classification — классификация пары (re, im)

Модуль определяет, к какому алгебраическому классу относится пара
IEEE-754 чисел (re, im). Результат используется фабрикой комплексных
чисел для выбора специализированного представления.

Классы взаимоисключающие; для любой пары применим ровно один:
- NAN: хотя бы одна компонента NaN
- INFINITY: обе компоненты не NaN, хотя бы одна бесконечна
- ZERO, ONE, MINUS_ONE, I, MINUS_I: единичные точки
- POSITIVE_REAL, NEGATIVE_REAL: im = 0
- PURE_IMAGINARY: re = 0
- GENERAL: re ≠ 0, im ≠ 0
"""

import math
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ComplexKind(str, Enum):
    """Алгебраический класс комплексного значения"""

    ZERO = "zero"
    ONE = "one"
    MINUS_ONE = "minus_one"
    I = "i"
    MINUS_I = "minus_i"
    POSITIVE_REAL = "positive_real"
    NEGATIVE_REAL = "negative_real"
    PURE_IMAGINARY = "pure_imaginary"
    GENERAL = "general"
    INFINITY = "infinity"
    NAN = "nan"


# =============================================================================
# ПРЕДИКАТЫ ПАРЫ (re, im)
# =============================================================================


def is_nan_pair(re: float, im: float) -> bool:
    """Хотя бы одна компонента NaN."""
    return math.isnan(re) or math.isnan(im)


def is_infinite_pair(re: float, im: float) -> bool:
    """Нет NaN, но хотя бы одна компонента бесконечна."""
    return not is_nan_pair(re, im) and (math.isinf(re) or math.isinf(im))


def is_finite_pair(re: float, im: float) -> bool:
    """Обе компоненты конечны."""
    return math.isfinite(re) and math.isfinite(im)


def is_zero_pair(re: float, im: float) -> bool:
    """re = 0 и im = 0 (знак нуля не учитывается)."""
    return re == 0.0 and im == 0.0


def is_real_pair(re: float, im: float) -> bool:
    """Конечная пара с im = 0."""
    return is_finite_pair(re, im) and im == 0.0


def is_imaginary_pair(re: float, im: float) -> bool:
    """Конечная пара с re = 0 и im ≠ 0."""
    return is_finite_pair(re, im) and re == 0.0 and im != 0.0


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def classify(re: float, im: float) -> ComplexKind:
    """
    Классификация пары (re, im).

    Порядок проверок: NaN → бесконечность → конечные классы.

    Args:
        re: Вещественная часть
        im: Мнимая часть

    Returns:
        ComplexKind для пары

    Examples:
        >>> classify(0.0, -0.0)
        <ComplexKind.ZERO: 'zero'>
        >>> classify(float('inf'), float('nan'))
        <ComplexKind.NAN: 'nan'>
        >>> classify(-float('inf'), 1.0)
        <ComplexKind.INFINITY: 'infinity'>
        >>> classify(3.0, 4.0)
        <ComplexKind.GENERAL: 'general'>
    """
    if is_nan_pair(re, im):
        return ComplexKind.NAN

    if not is_finite_pair(re, im):
        return ComplexKind.INFINITY

    if im == 0.0:
        if re == 0.0:
            return ComplexKind.ZERO
        if re == 1.0:
            return ComplexKind.ONE
        if re == -1.0:
            return ComplexKind.MINUS_ONE
        return ComplexKind.POSITIVE_REAL if re > 0.0 else ComplexKind.NEGATIVE_REAL

    if re == 0.0:
        if im == 1.0:
            return ComplexKind.I
        if im == -1.0:
            return ComplexKind.MINUS_I
        return ComplexKind.PURE_IMAGINARY

    return ComplexKind.GENERAL
