"""
Numerical Safeguards — IEEE-совместимые скалярные примитивы

Модуль обеспечивает IEEE-754 семантику для скалярных операций, которые
стандартный модуль math реализует через исключения:
- Деление с возвратом ±inf/nan вместо ZeroDivisionError
- exp/sinh/cosh с возвратом ±inf вместо OverflowError
- log с возвратом -inf для нуля вместо ValueError
- Кубический корень и округление до float32

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключение на конечных, бесконечных или NaN входах
2. NaN всегда пропагирует (как в IEEE-754)
3. Знак бесконечности сохраняется там, где он определён
4. Все операции детерминированы и воспроизводимы
"""

import math
import struct
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность по умолчанию для equals(): точное сравнение
EPS_EQUALS_DEFAULT: Final[float] = 0.0

# Толерантность по умолчанию для is_congruent_to()
EPS_CONGRUENCE_DEFAULT: Final[float] = 0.0

# Толерантность для проверки тождеств элементарных функций
EPS_IDENTITY: Final[float] = 1e-10

# Максимальное конечное значение float32 (для fround)
FLOAT32_MAX: Final[float] = 3.4028234663852886e38

# Половина шага float32 у FLOAT32_MAX: от FLOAT32_MAX + FLOAT32_HALF_ULP
# округление к ближайшему даёт inf
FLOAT32_HALF_ULP: Final[float] = 2.0**103


# =============================================================================
# ПРОВЕРКИ И СРАВНЕНИЯ
# =============================================================================


def is_integral(value: float) -> bool:
    """
    Проверка, является ли значение конечным целым числом.

    Examples:
        >>> is_integral(3.0)
        True
        >>> is_integral(3.5)
        False
        >>> is_integral(float('inf'))
        False
    """
    return math.isfinite(value) and float(value).is_integer()


def within(a: float, b: float, eps: float = EPS_EQUALS_DEFAULT) -> bool:
    """
    Абсолютное сравнение: |a - b| <= eps.

    NaN не близок ни к чему. Равные значения (в том числе одинаковые
    бесконечности) близки при любом eps.
    """
    if a == b:
        return True
    return abs(a - b) <= eps


# =============================================================================
# IEEE-БЕЗОПАСНЫЕ ОПЕРАЦИИ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE-754 семантикой.

    Python бросает ZeroDivisionError для x / 0.0; здесь возвращается
    то же, что вернул бы IEEE-754:
    - x / ±0 = ±inf (знак по правилу знаков), если x ≠ 0
    - 0 / 0 = nan, nan / 0 = nan

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator) or math.isnan(denominator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def safe_exp(x: float) -> float:
    """
    exp(x) с переполнением в +inf вместо OverflowError.

    Examples:
        >>> safe_exp(0.0)
        1.0
        >>> safe_exp(1000.0)
        inf
    """
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def safe_sinh(x: float) -> float:
    """sinh(x) с переполнением в ±inf."""
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def safe_cosh(x: float) -> float:
    """cosh(x) с переполнением в +inf."""
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def safe_log(x: float) -> float:
    """
    Натуральный логарифм с IEEE-семантикой.

    - log(0) = -inf
    - log(x < 0) = nan
    - log(inf) = inf

    Examples:
        >>> safe_log(1.0)
        0.0
        >>> safe_log(0.0)
        -inf
    """
    if x == 0.0:
        return -math.inf
    if x < 0.0 or math.isnan(x):
        return math.nan
    return math.log(x)


def safe_pow(base: float, exponent: float) -> float:
    """base ** exponent (base >= 0) с переполнением в +inf."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


def cbrt(x: float) -> float:
    """
    Вещественный кубический корень (знак сохраняется).

    math.cbrt не гарантирует корректного округления (cbrt(27.0) может
    дать 3.0000000000000004); для точных кубов целых чисел результат
    приводится к целому.

    Examples:
        >>> cbrt(-8.0)
        -2.0
        >>> cbrt(27.0)
        3.0
    """
    root = math.cbrt(x)
    if root == 0.0 or not math.isfinite(root):
        return root
    nearest = round(root)
    if nearest**3 == x:
        return float(nearest)
    return root


def ieee_sign(x: float) -> float:
    """
    Знак числа: -1.0, 0.0 (с сохранением знака нуля), 1.0 или nan.
    """
    if math.isnan(x) or x == 0.0:
        return x
    return 1.0 if x > 0 else -1.0


def round_half_up(x: float) -> float:
    """
    Округление к ближайшему целому, половины — в сторону +inf.

    Это отличается от встроенного round() (banker's rounding):
    round_half_up(2.5) == 3.0, round_half_up(-2.5) == -2.0.
    Нецелые бесконечности и NaN возвращаются без изменений.
    """
    if not math.isfinite(x):
        return x
    return float(math.floor(x + 0.5))


def fround(x: float) -> float:
    """
    Округление до ближайшего float32 (возвращается как float).

    Значения за пределами диапазона float32 становятся ±inf.
    """
    if not math.isfinite(x):
        return x
    if abs(x) >= FLOAT32_MAX + FLOAT32_HALF_ULP:
        return math.copysign(math.inf, x)
    return struct.unpack("f", struct.pack("f", x))[0]
