"""
Kernels — замкнутые формулы над парами (re, im)

Чистые функции над float-парами без знания о вариантах Complex.
Каждая функция возвращает кортеж (re, im); канонизацию результата
(NaN, бесконечность, синглтоны) выполняет фабрика make_complex.

ФОРМУЛЫ:
    1/(x + iy)        — масштабированная формула Смита
    (a + ib)/(c + id) — масштабированная формула Смита
    √(x + iy)         — w = √(|z| + |x|), ветвление по знаку x
    exp(x + iy)       = eˣ(cos y + i sin y)
    log(x + iy)       = log|z| + i·atan2(y, x)
    tan(x + iy)       = (sin 2x + i sinh 2y) / (cos 2x + cosh 2y)
    tanh(x + iy)      = (sinh 2x + i sin 2y) / (cosh 2x + cos 2y)
"""

import math

from src.core.math.numerical_safeguards import (
    ieee_divide,
    safe_cosh,
    safe_exp,
    safe_log,
    safe_sinh,
)

Pair = tuple[float, float]


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def multiply(a: float, b: float, c: float, d: float) -> Pair:
    """
    (a + ib)(c + id) = (ac - bd) + i(ad + bc)

    Переполнение частичного произведения конечных множителей даёт
    (inf, inf), а не nan из inf - inf: |zw| не меньше любого из них.
    """
    re = a * c - b * d
    im = a * d + b * c
    if not (math.isfinite(re) and math.isfinite(im)) and all(
        math.isfinite(t) for t in (a, b, c, d)
    ):
        return (math.inf, math.inf)
    return (re, im)


def reciprocal(x: float, y: float) -> Pair:
    """
    1/(x + iy) по формуле Смита.

    Деление выполняется на компоненту большего модуля, что исключает
    промежуточное переполнение x² + y².

    Args:
        x: Вещественная часть (x, y не равны нулю одновременно)
        y: Мнимая часть

    Returns:
        (re, im) обратного значения
    """
    if abs(x) >= abs(y):
        w = y / x
        d = x + y * w
        return (1.0 / d, -w / d)
    else:
        w = x / y
        d = x * w + y
        return (w / d, -1.0 / d)


def divide(a: float, b: float, c: float, d: float) -> Pair:
    """
    (a + ib)/(c + id) по формуле Смита.

    Делитель (c, d) должен быть конечным и ненулевым.
    """
    if abs(c) >= abs(d):
        w = d / c
        den = c + d * w
        return ((a + b * w) / den, (b - a * w) / den)
    else:
        w = c / d
        den = c * w + d
        return ((a * w + b) / den, (b * w - a) / den)


# =============================================================================
# КОРНИ, ЭКСПОНЕНТА, ЛОГАРИФМ
# =============================================================================


def sqrt(x: float, y: float) -> Pair:
    """
    Главное значение √(x + iy), -π/2 ≤ arg ≤ π/2.

    w = √(|z| + |x|); при x ≥ 0 результат (w/√2, y/(w√2)),
    иначе (|y|/(w√2), ±w/√2) со знаком y. Ветвление устраняет
    вычитание близких величин.
    """
    if x == 0.0 and y == 0.0:
        return (0.0, 0.0)

    r = math.hypot(x, y)
    w = math.sqrt(r + abs(x))

    if x >= 0.0:
        return (math.sqrt(0.5) * w, math.sqrt(0.5) * y / w)
    else:
        im = math.sqrt(0.5) * w
        return (math.sqrt(0.5) * abs(y) / w, im if y >= 0.0 else -im)


def exp(x: float, y: float) -> Pair:
    """exp(x + iy) = eˣ(cos y + i sin y)"""
    r = safe_exp(x)
    if y == 0.0:
        return (r, 0.0)
    return (r * math.cos(y), r * math.sin(y))


def log(x: float, y: float) -> Pair:
    """
    Главное значение log(x + iy), -π ≤ Im ≤ π.

    Модуль считается через hypot, а не через log(x² + y²)/2:
    x² + y² переполняется уже при |z| ~ 1e154.
    """
    return (safe_log(math.hypot(x, y)), math.atan2(y, x))


def polar(r: float, theta: float) -> Pair:
    """r(cos θ + i sin θ)"""
    return (r * math.cos(theta), r * math.sin(theta))


# =============================================================================
# ТРИГОНОМЕТРИЧЕСКИЕ И ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sin(x: float, y: float) -> Pair:
    """sin(x + iy) = sin x cosh y + i cos x sinh y"""
    return (math.sin(x) * safe_cosh(y), math.cos(x) * safe_sinh(y))


def cos(x: float, y: float) -> Pair:
    """cos(x + iy) = cos x cosh y - i sin x sinh y"""
    return (math.cos(x) * safe_cosh(y), -math.sin(x) * safe_sinh(y))


def tan(x: float, y: float) -> Pair:
    """tan(x + iy) = (sin 2x + i sinh 2y) / (cos 2x + cosh 2y)"""
    d = math.cos(2 * x) + safe_cosh(2 * y)
    if math.isinf(d):
        # |y| велико: tan → ±i
        return (0.0, math.copysign(1.0, y))
    return (ieee_divide(math.sin(2 * x), d), ieee_divide(math.sinh(2 * y), d))


def sinh(x: float, y: float) -> Pair:
    """sinh(x + iy) = sinh x cos y + i cosh x sin y"""
    return (safe_sinh(x) * math.cos(y), safe_cosh(x) * math.sin(y))


def cosh(x: float, y: float) -> Pair:
    """cosh(x + iy) = cosh x cos y + i sinh x sin y"""
    return (safe_cosh(x) * math.cos(y), safe_sinh(x) * math.sin(y))


def tanh(x: float, y: float) -> Pair:
    """tanh(x + iy) = (sinh 2x + i sin 2y) / (cosh 2x + cos 2y)"""
    d = safe_cosh(2 * x) + math.cos(2 * y)
    if math.isinf(d):
        # |x| велико: tanh → ±1
        return (math.copysign(1.0, x), 0.0)
    return (ieee_divide(math.sinh(2 * x), d), ieee_divide(math.sin(2 * y), d))
