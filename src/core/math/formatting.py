"""
Formatting — каноническое текстовое представление вещественных чисел

Правила совпадают с Number.prototype.toString в JavaScript:
- кратчайшие цифры, однозначно задающие float (как repr())
- целые значения без дробной части ("2", а не "2.0")
- фиксированная запись для 1e-7 < |x| < 1e21 ("0.000001", "100000000000000000000")
- иначе экспоненциальная запись без ведущих нулей порядка ("1e-7", "1.5e+21")

Используется при форматировании комплексных чисел и кубических уравнений.
"""

import math
from typing import Final

# Наибольшая позиция десятичной точки для фиксированной записи (|x| < 1e21)
FIXED_POINT_MAX_EXPONENT: Final[int] = 21

# Наименьшая позиция десятичной точки для фиксированной записи (|x| >= 1e-6)
FIXED_POINT_MIN_EXPONENT: Final[int] = -5


def _shortest_digits(x: float) -> tuple[str, int]:
    """
    Кратчайшие значащие цифры s и позиция точки n: |x| = 0.s × 10ⁿ.

    Examples:
        >>> _shortest_digits(100.0)
        ('1', 3)
        >>> _shortest_digits(0.00125)
        ('125', -2)
    """
    mantissa, _, exponent = repr(abs(x)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    all_digits = int_part + frac_part
    point = len(int_part) + (int(exponent) if exponent else 0)

    significant = all_digits.lstrip("0")
    point -= len(all_digits) - len(significant)
    return significant.rstrip("0"), point


def format_real(x: float) -> str:
    """
    Каноническая строка для вещественного числа.

    Examples:
        >>> format_real(2.0)
        '2'
        >>> format_real(-3.5)
        '-3.5'
        >>> format_real(-0.0)
        '0'
        >>> format_real(1e-7)
        '1e-7'
        >>> format_real(float('inf'))
        'Infinity'
        >>> format_real(float('nan'))
        'NaN'
    """
    x = float(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0.0:
        return "0"

    sign = "-" if x < 0 else ""
    digits, point = _shortest_digits(x)
    k = len(digits)

    if k <= point <= FIXED_POINT_MAX_EXPONENT:
        return sign + digits + "0" * (point - k)
    if 0 < point <= FIXED_POINT_MAX_EXPONENT:
        return sign + digits[:point] + "." + digits[point:]
    if FIXED_POINT_MIN_EXPONENT <= point <= 0:
        return sign + "0." + "0" * (-point) + digits

    exponent = point - 1
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{sign}{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"
