"""
CMath — функциональный фасад над Complex

Функции повторяют форму стандартного math API: f(z) = z.f().
Собственных алгоритмов нет, результат побитно совпадает с вызовом метода.
Аргумент может быть Complex, вещественным числом или встроенным complex.

Дополнительно:
- Покомпонентные round/ceil/floor/trunc/fround (part="re" | "im" | None)
- sign(z) = (sign(re), sign(im))
- Константы PI, E, LN2, LOG2E, LN10, LOG10E, SQRT2, SQRT1_2
"""

import math
from collections.abc import Callable
from numbers import Real
from typing import Literal, Union

from src.core.complex.values import Complex, ModArgLike, NaN, make_complex
from src.core.math.numerical_safeguards import fround as fround_real
from src.core.math.numerical_safeguards import ieee_sign, round_half_up

Part = Literal["re", "im"] | None
Number = Union[Complex, Real, complex]


def _box(z: Number) -> Complex:
    if isinstance(z, Complex):
        return z
    if isinstance(z, (Real, complex)):
        return make_complex(z)
    raise TypeError(f"Complex, real or complex argument expected, got {type(z).__name__}")


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

PI: Complex = make_complex(math.pi)
E: Complex = make_complex(math.e)
LN2: Complex = make_complex(math.log(2))
LOG2E: Complex = make_complex(1 / math.log(2))
LN10: Complex = make_complex(math.log(10))
LOG10E: Complex = make_complex(1 / math.log(10))
SQRT2: Complex = make_complex(math.sqrt(2))
SQRT1_2: Complex = make_complex(math.sqrt(0.5))


# =============================================================================
# МОДУЛЬ, АРГУМЕНТ, СОПРЯЖЕНИЕ
# =============================================================================


def abs(z: Number) -> float:
    return _box(z).abs()


def abs2(z: Number) -> float:
    return _box(z).abs2()


def arg(z: Number) -> float:
    return _box(z).arg()


def conj(z: Number) -> Complex:
    return _box(z).conjugate()


def neg(z: Number) -> Complex:
    return _box(z).negate()


def reciprocal(z: Number) -> Complex:
    return _box(z).reciprocal()


def mod(z: Number, m: ModArgLike) -> Complex:
    return _box(z).mod(m)


# =============================================================================
# КОРНИ, СТЕПЕНЬ, ЭКСПОНЕНТА, ЛОГАРИФМ
# =============================================================================


def sqrt(z: Number) -> Complex:
    return _box(z).sqrt()


def nroots(z: Number, n: int) -> list[Complex]:
    return _box(z).nroots(n)


def pow(z: Number, w: Number) -> Complex:
    return _box(z).pow(w)


def exp(z: Number) -> Complex:
    return _box(z).exp()


def log(z: Number) -> Complex:
    return _box(z).log()


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(z: Number) -> Complex:
    return _box(z).sin()


def cos(z: Number) -> Complex:
    return _box(z).cos()


def tan(z: Number) -> Complex:
    return _box(z).tan()


def cot(z: Number) -> Complex:
    return _box(z).cot()


def sec(z: Number) -> Complex:
    return _box(z).sec()


def csc(z: Number) -> Complex:
    return _box(z).csc()


def asin(z: Number) -> Complex:
    return _box(z).asin()


def acos(z: Number) -> Complex:
    return _box(z).acos()


def atan(z: Number) -> Complex:
    return _box(z).atan()


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh(z: Number) -> Complex:
    return _box(z).sinh()


def cosh(z: Number) -> Complex:
    return _box(z).cosh()


def tanh(z: Number) -> Complex:
    return _box(z).tanh()


def coth(z: Number) -> Complex:
    return _box(z).coth()


def sech(z: Number) -> Complex:
    return _box(z).sech()


def csch(z: Number) -> Complex:
    return _box(z).csch()


def asinh(z: Number) -> Complex:
    return _box(z).asinh()


def acosh(z: Number) -> Complex:
    return _box(z).acosh()


def atanh(z: Number) -> Complex:
    return _box(z).atanh()


# =============================================================================
# ПОКОМПОНЕНТНОЕ ОКРУГЛЕНИЕ
# =============================================================================


def _componentwise(z: Number, fn: Callable[[float], float], part: Part) -> Complex:
    """
    Применение скалярной функции к выбранным компонентам.

    Args:
        z: Значение
        fn: Скалярная функция float → float
        part: "re", "im" или None (обе компоненты)

    Returns:
        Новое значение; INFINITY и NaN возвращаются без изменений

    Raises:
        ValueError: Если part не "re", "im" или None
    """
    if part not in ("re", "im", None):
        raise ValueError(f"part must be 're', 'im' or None, got {part!r}")

    value = _box(z)
    if not value.is_finite():
        return value

    re = fn(value.re) if part in ("re", None) else value.re
    im = fn(value.im) if part in ("im", None) else value.im
    return make_complex(re, im)


def round(z: Number, part: Part = None) -> Complex:
    """Округление к ближайшему целому, половины — к +inf."""
    return _componentwise(z, round_half_up, part)


def ceil(z: Number, part: Part = None) -> Complex:
    return _componentwise(z, math.ceil, part)


def floor(z: Number, part: Part = None) -> Complex:
    return _componentwise(z, math.floor, part)


def trunc(z: Number, part: Part = None) -> Complex:
    return _componentwise(z, math.trunc, part)


def fround(z: Number, part: Part = None) -> Complex:
    """Округление компонент до float32."""
    return _componentwise(z, fround_real, part)


def sign(z: Number) -> Complex:
    """
    Покомпонентный знак: (sign(re), sign(im)).

    Examples:
        >>> str(sign(make_complex(-3, 4)))
        '-1+i'
        >>> str(sign(make_complex(0, -2.5)))
        '-i'
    """
    value = _box(z)
    if not value.is_finite():
        return NaN
    return make_complex(ieee_sign(value.re), ieee_sign(value.im))
