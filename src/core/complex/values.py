"""
Complex Values — замкнутая иерархия комплексных чисел с ∞ и NaN

Комплексное число — неизменяемый value-объект. Каждое значение относится
ровно к одному варианту, выбираемому фабрикой make_complex при создании:

    Zero, One, MinusOne           — синглтоны ZERO, ONE, MINUS_ONE
    ImaginaryUnit, MinusImaginaryUnit — синглтоны I, MINUS_I
    PositiveReal(x), NegativeReal(x) — вещественная ось
    PureImaginary(y)              — мнимая ось
    GeneralComplex(x, y)          — x ≠ 0, y ≠ 0
    ComplexInfinity               — синглтон INFINITY (беззнаковая ∞ сферы Римана)
    ComplexNaN                    — синглтон NaN

Варианты переопределяют операции для своего класса: особые значения
обрабатываются за O(1), не нагружая проверками общий путь.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значения создаются только через make_complex (прямой конструктор варианта
   с чужими компонентами → ComplexInvariantViolation)
2. Все операции тотальны: особые случаи дают NaN/INFINITY, а не исключения
3. NaN не равен ничему, включая себя
4. arg(x - 0i) = π для x < 0 (знак нуля мнимой части не хранится)

ВЕТВИ ГЛАВНЫХ ЗНАЧЕНИЙ:
    sqrt:  -π/2 ≤ arg ≤ π/2          log:   -π ≤ Im ≤ π
    asin:  -π/2 ≤ Re ≤ π/2           acos:  0 ≤ Re ≤ π
    atan:  -π/2 ≤ Re ≤ π/2           asinh: -π/2 ≤ Im ≤ π/2
    acosh: -π ≤ Im ≤ π, Re ≥ 0       atanh: -π/2 ≤ Im ≤ π/2
"""

import math
import operator
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any, Union

from src.core.complex import kernels
from src.core.complex.modular import ModArg, congruence_candidates, reduce_pair
from src.core.math.formatting import format_real
from src.core.math.numerical_safeguards import (
    EPS_CONGRUENCE_DEFAULT,
    EPS_EQUALS_DEFAULT,
    is_integral,
    safe_cosh,
    safe_exp,
    safe_pow,
    safe_sinh,
    within,
)
from src.core.math.real_kind import ComplexKind, classify

Operand = Union["Complex", float, int, complex]
ModArgLike = Union[ModArg, Mapping[str, Any]]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ComplexInvariantViolation(ValueError):
    """
    Нарушение инварианта варианта при прямом создании.

    Возникает, только если конструктор варианта вызван в обход фабрики
    с компонентами другого класса (например, PureImaginary(0.0)).
    Это ошибка вызывающего кода, а не вычислительный случай.
    """

    pass


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ComplexInvariantViolation(message)


# =============================================================================
# ПРИВЕДЕНИЕ ОПЕРАНДОВ
# =============================================================================


def _is_operand(value: Any) -> bool:
    return isinstance(value, (Complex, Real, complex))


def _as_real(value: Any) -> float | None:
    """float для вещественного операнда, None для комплексного."""
    if isinstance(value, Real) and not isinstance(value, Complex):
        return float(value)
    return None


def _as_complex(value: Any) -> "Complex":
    if isinstance(value, Complex):
        return value
    if isinstance(value, (Real, complex)):
        return make_complex(value)
    raise TypeError(f"Complex, real or complex operand expected, got {type(value).__name__}")


# =============================================================================
# БАЗОВЫЙ КЛАСС
# =============================================================================


class Complex(ABC):
    """
    Общий контракт комплексного числа.

    Реализации по умолчанию рассчитаны на конечное ненулевое значение
    (GeneralComplex); варианты переопределяют то, что для них вырождается
    или упрощается.
    """

    # -------------------------------------------------------------------------
    # Компоненты
    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def re(self) -> float:
        """Вещественная часть."""

    @property
    @abstractmethod
    def im(self) -> float:
        """Мнимая часть."""

    @property
    def real(self) -> float:
        return self.re

    @property
    def imag(self) -> float:
        return self.im

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_real(self) -> bool:
        return self.im == 0.0

    def is_imaginary(self) -> bool:
        return self.re == 0.0 and self.im != 0.0

    def is_zero(self) -> bool:
        return False

    def is_one(self) -> bool:
        return False

    def is_finite(self) -> bool:
        return True

    def is_infinite(self) -> bool:
        return False

    def is_nan(self) -> bool:
        return False

    def is_integer(self) -> bool:
        return self.is_real() and is_integral(self.re)

    def is_gaussian_integer(self) -> bool:
        return is_integral(self.re) and is_integral(self.im)

    # -------------------------------------------------------------------------
    # Модуль и аргумент
    # -------------------------------------------------------------------------

    def abs(self) -> float:
        """√(re² + im²) без промежуточного переполнения."""
        return math.hypot(self.re, self.im)

    def abs2(self) -> float:
        """re² + im²"""
        return self.re * self.re + self.im * self.im

    def arg(self) -> float:
        """atan2(im, re); NaN для нуля, ∞ и NaN."""
        return math.atan2(self.im, self.re)

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def negate(self) -> "Complex":
        return make_complex(-self.re, -self.im)

    def conjugate(self) -> "Complex":
        return make_complex(self.re, -self.im)

    def reciprocal(self) -> "Complex":
        """1/z по формуле Смита."""
        return make_complex(*kernels.reciprocal(self.re, self.im))

    # -------------------------------------------------------------------------
    # Бинарные операции
    # -------------------------------------------------------------------------

    def plus(self, that: Operand) -> "Complex":
        x = _as_real(that)
        if x is not None:
            return self._plus_real(x)
        return self._plus_complex(_as_complex(that))

    def minus(self, that: Operand) -> "Complex":
        x = _as_real(that)
        if x is not None:
            return self._minus_real(x)
        return self._minus_complex(_as_complex(that))

    def times(self, that: Operand) -> "Complex":
        x = _as_real(that)
        if x is not None:
            return self._times_real(x)
        return self._times_complex(_as_complex(that))

    def div(self, that: Operand) -> "Complex":
        x = _as_real(that)
        if x is not None:
            return self._div_real(x)
        return self._div_complex(_as_complex(that))

    def _plus_real(self, x: float) -> "Complex":
        if math.isnan(x):
            return NaN
        if math.isinf(x):
            return INFINITY
        return make_complex(self.re + x, self.im)

    def _plus_complex(self, w: "Complex") -> "Complex":
        if w.is_nan():
            return NaN
        if w.is_infinite():
            return INFINITY
        return make_complex(self.re + w.re, self.im + w.im)

    def _minus_real(self, x: float) -> "Complex":
        if math.isnan(x):
            return NaN
        if math.isinf(x):
            return INFINITY
        return make_complex(self.re - x, self.im)

    def _minus_complex(self, w: "Complex") -> "Complex":
        if w.is_nan():
            return NaN
        if w.is_infinite():
            return INFINITY
        return make_complex(self.re - w.re, self.im - w.im)

    def _times_real(self, x: float) -> "Complex":
        if math.isnan(x):
            return NaN
        if math.isinf(x):
            return INFINITY
        return make_complex(self.re * x, self.im * x)

    def _times_complex(self, w: "Complex") -> "Complex":
        if w.is_nan():
            return NaN
        if w.is_infinite():
            return INFINITY
        return make_complex(*kernels.multiply(self.re, self.im, w.re, w.im))

    def _div_real(self, x: float) -> "Complex":
        if math.isnan(x):
            return NaN
        if math.isinf(x):
            return ZERO
        if x == 0.0:
            return INFINITY
        return make_complex(self.re / x, self.im / x)

    def _div_complex(self, w: "Complex") -> "Complex":
        if w.is_nan():
            return NaN
        if w.is_infinite():
            return ZERO
        if w.is_zero():
            return INFINITY
        return make_complex(*kernels.divide(self.re, self.im, w.re, w.im))

    # -------------------------------------------------------------------------
    # Степень
    # -------------------------------------------------------------------------

    def pow(self, that: Operand) -> "Complex":
        """
        z^w = exp(w·log z).

        Целые показатели вычисляются возведением в квадрат (точно для
        вещественного основания). Бесконечный показатель: |z| > 1 → ∞ или 0,
        |z| < 1 — наоборот, |z| = 1 → ONE только для z = 1, иначе NaN.
        z^INFINITY = NaN для всех z, кроме ONE.
        """
        x = _as_real(that)
        if x is not None:
            return self._pow_real(x)
        return self._pow_complex(_as_complex(that))

    def _pow_real(self, x: float) -> "Complex":
        if math.isnan(x):
            return NaN
        if math.isinf(x):
            return self._pow_infinite(x > 0)
        if x == 0.0:
            return ONE
        if is_integral(x):
            return self._int_power(int(x))
        return self.log().times(x).exp()

    def _pow_complex(self, w: "Complex") -> "Complex":
        if w.is_nan():
            return NaN
        if w.is_infinite():
            return ONE if self.is_one() else NaN
        if w.is_zero():
            return ONE
        if w.is_integer():
            return self._int_power(int(w.re))
        return self.log().times(w).exp()

    def _pow_infinite(self, positive: bool) -> "Complex":
        r = self.abs()
        if r == 1.0:
            return ONE if self.is_one() else NaN
        if (r > 1.0) == positive:
            return INFINITY
        return ZERO

    def _int_power(self, n: int) -> "Complex":
        if n == 0:
            return ONE
        if n < 0:
            return self._int_power(-n).reciprocal()

        result: Complex = ONE
        base: Complex = self
        while True:
            if n & 1:
                result = result.times(base)
            n >>= 1
            if n == 0:
                return result
            base = base.times(base)

    # -------------------------------------------------------------------------
    # Приведение по модулю
    # -------------------------------------------------------------------------

    def mod(self, m: ModArgLike) -> "Complex":
        """
        Приведение компонент по модулю решётки.

        Args:
            m: ModArg или mapping {"re": w | (lo, hi), "im": ...}

        Returns:
            Приведённое значение; NaN при вырожденном модуле

        Examples:
            >>> str(make_complex(2.6, 3.2).mod({"re": 1.4}))
            '1.2000000000000002+3.2i'
        """
        arg = ModArg.coerce(m)
        if arg.re is None and arg.im is None:
            return self
        return make_complex(*reduce_pair(self.re, self.im, arg))

    def is_congruent_to(
        self,
        that: Operand,
        m: ModArgLike,
        epsilon: float = EPS_CONGRUENCE_DEFAULT,
    ) -> bool:
        """
        Проверка (self - that) mod m ≈ 0 с точностью epsilon.

        Кроме представителя нуля проверяются соседние узлы решётки:
        приведённая разность у границы интервала может попасть на любой край.
        """
        arg = ModArg.coerce(m)
        d = self.minus(that)
        if not d.is_finite():
            return False

        d_re, d_im = reduce_pair(d.re, d.im, arg)
        if math.isnan(d_re) or math.isnan(d_im):
            return False

        return any(
            within(d_re, c_re, epsilon) and within(d_im, c_im, epsilon)
            for c_re, c_im in congruence_candidates(arg)
        )

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equals(self, that: Operand, epsilon: float = EPS_EQUALS_DEFAULT) -> bool:
        """
        Покомпонентное сравнение |Δre| ≤ ε и |Δim| ≤ ε.

        Вещественный операнд x сравнивается так же, как make_complex(x).
        """
        x = _as_real(that)
        if x is not None:
            if not math.isfinite(x):
                return False
            return within(self.re, x, epsilon) and within(self.im, 0.0, epsilon)

        w = _as_complex(that)
        if not w.is_finite():
            return False
        return within(self.re, w.re, epsilon) and within(self.im, w.im, epsilon)

    # -------------------------------------------------------------------------
    # Корни, экспонента, логарифм
    # -------------------------------------------------------------------------

    def sqrt(self) -> "Complex":
        return make_complex(*kernels.sqrt(self.re, self.im))

    def nroots(self, n: int) -> list["Complex"]:
        """
        Корни степени n: n точек на окружности радиуса |z|^(1/n),
        равномерно по аргументу начиная с arg(z)/n.

        Args:
            n: Степень корня (int); n ≤ 0 → пустой список

        Raises:
            TypeError: Если n не целое
        """
        n = operator.index(n)
        if n <= 0:
            return []
        return self._nroots(n)

    def _nroots(self, n: int) -> list["Complex"]:
        if n == 1:
            return [self]
        if n == 2:
            root = self.sqrt()
            return [root, root.negate()]

        r = safe_pow(self.abs(), 1.0 / n)
        theta = self.arg() / n
        return [of_polar(r, theta + 2 * math.pi * k / n) for k in range(n)]

    def exp(self) -> "Complex":
        return make_complex(*kernels.exp(self.re, self.im))

    def log(self) -> "Complex":
        return make_complex(*kernels.log(self.re, self.im))

    # -------------------------------------------------------------------------
    # Тригонометрические и гиперболические функции
    # -------------------------------------------------------------------------

    def sin(self) -> "Complex":
        return make_complex(*kernels.sin(self.re, self.im))

    def cos(self) -> "Complex":
        return make_complex(*kernels.cos(self.re, self.im))

    def tan(self) -> "Complex":
        return make_complex(*kernels.tan(self.re, self.im))

    def cot(self) -> "Complex":
        return self.tan().reciprocal()

    def sec(self) -> "Complex":
        return self.cos().reciprocal()

    def csc(self) -> "Complex":
        return self.sin().reciprocal()

    def sinh(self) -> "Complex":
        return make_complex(*kernels.sinh(self.re, self.im))

    def cosh(self) -> "Complex":
        return make_complex(*kernels.cosh(self.re, self.im))

    def tanh(self) -> "Complex":
        return make_complex(*kernels.tanh(self.re, self.im))

    def coth(self) -> "Complex":
        return self.tanh().reciprocal()

    def sech(self) -> "Complex":
        return self.cosh().reciprocal()

    def csch(self) -> "Complex":
        return self.sinh().reciprocal()

    # -------------------------------------------------------------------------
    # Обратные функции
    # -------------------------------------------------------------------------

    def asin(self) -> "Complex":
        """asin z = -i·log(√(1 − z²) + iz)"""
        w = ONE.minus(self.times(self)).sqrt().plus(I.times(self))
        return MINUS_I.times(w.log())

    def acos(self) -> "Complex":
        """acos z = -i·log(z + i√(1 − z²))"""
        w = self.plus(I.times(ONE.minus(self.times(self)).sqrt()))
        return MINUS_I.times(w.log())

    def atan(self) -> "Complex":
        """atan z = (i/2)·log((i + z)/(i − z))"""
        w = I.plus(self).div(I.minus(self))
        return HALF_I.times(w.log())

    def asinh(self) -> "Complex":
        """asinh z = log(z + √(z² + 1))"""
        return self.plus(self.times(self).plus(1.0).sqrt()).log()

    def acosh(self) -> "Complex":
        """acosh z = log(z + √(z + 1)·√(z − 1))"""
        w = self.plus(1.0).sqrt().times(self.minus(1.0).sqrt())
        return self.plus(w).log()

    def atanh(self) -> "Complex":
        """atanh z = ½·log((1 + z)/(1 − z))"""
        w = ONE.plus(self).div(ONE.minus(self))
        return w.log().times(0.5)

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        if self.im == 1.0:
            im_str = "+i"
        elif self.im == -1.0:
            im_str = "-i"
        elif self.im > 0:
            im_str = f"+{format_real(self.im)}i"
        else:
            im_str = f"{format_real(self.im)}i"
        return format_real(self.re) + im_str

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    # -------------------------------------------------------------------------
    # Протокол чисел Python
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(complex(self.re, self.im))

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __abs__(self) -> float:
        return self.abs()

    def __neg__(self) -> "Complex":
        return self.negate()

    def __pos__(self) -> "Complex":
        return self

    def __add__(self, other: Operand) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: Operand) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Operand) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: Operand) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.minus(other).negate()

    def __mul__(self, other: Operand) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other: Operand) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.times(other)

    def __truediv__(self, other: Operand) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Operand) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return _as_complex(other).div(self)

    def __pow__(self, other: Operand) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.pow(other)

    def __rpow__(self, other: Operand) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return _as_complex(other).pow(self)


# =============================================================================
# ОБЩИЙ СЛУЧАЙ
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class GeneralComplex(Complex):
    """x + iy, x ≠ 0, y ≠ 0, обе компоненты конечны."""

    x: float
    y: float

    def __post_init__(self) -> None:
        _require(
            math.isfinite(self.x) and math.isfinite(self.y) and self.x != 0.0 and self.y != 0.0,
            f"GeneralComplex requires finite nonzero components, got ({self.x}, {self.y})",
        )

    @property
    def re(self) -> float:
        return self.x

    @property
    def im(self) -> float:
        return self.y

    def is_real(self) -> bool:
        return False

    def is_imaginary(self) -> bool:
        return False

    def is_integer(self) -> bool:
        return False


# =============================================================================
# ВЕЩЕСТВЕННАЯ ОСЬ
# =============================================================================


class _RealValue(Complex):
    """
    Конечное ненулевое вещественное значение.

    Операции с вещественным операндом и элементарные функции сводятся
    к скалярному math без комплексной арифметики.
    """

    @property
    def im(self) -> float:
        return 0.0

    def is_real(self) -> bool:
        return True

    def is_imaginary(self) -> bool:
        return False

    def is_integer(self) -> bool:
        return is_integral(self.re)

    def is_gaussian_integer(self) -> bool:
        return is_integral(self.re)

    def abs(self) -> float:
        return abs(self.re)

    def abs2(self) -> float:
        return self.re * self.re

    def arg(self) -> float:
        return 0.0 if self.re > 0 else math.pi

    def negate(self) -> Complex:
        return make_complex(-self.re)

    def conjugate(self) -> Complex:
        return self

    def reciprocal(self) -> Complex:
        return make_complex(1.0 / self.re)

    def _plus_real(self, x: float) -> Complex:
        return make_complex(self.re + x)

    def _minus_real(self, x: float) -> Complex:
        return make_complex(self.re - x)

    def _times_real(self, x: float) -> Complex:
        if math.isinf(x):
            return INFINITY
        return make_complex(self.re * x)

    def _times_complex(self, w: Complex) -> Complex:
        if w.is_nan():
            return NaN
        if w.is_infinite():
            return INFINITY
        return make_complex(self.re * w.re, self.re * w.im)

    def _div_real(self, x: float) -> Complex:
        if math.isnan(x):
            return NaN
        if math.isinf(x):
            return ZERO
        if x == 0.0:
            return INFINITY
        return make_complex(self.re / x)

    def sqrt(self) -> Complex:
        if self.re > 0:
            return make_complex(math.sqrt(self.re))
        return make_complex(0.0, math.sqrt(-self.re))

    def exp(self) -> Complex:
        return make_complex(safe_exp(self.re))

    def log(self) -> Complex:
        if self.re > 0:
            return make_complex(math.log(self.re))
        return make_complex(math.log(-self.re), math.pi)

    def sin(self) -> Complex:
        return make_complex(math.sin(self.re))

    def cos(self) -> Complex:
        return make_complex(math.cos(self.re))

    def tan(self) -> Complex:
        return make_complex(math.tan(self.re))

    def sinh(self) -> Complex:
        return make_complex(safe_sinh(self.re))

    def cosh(self) -> Complex:
        return make_complex(safe_cosh(self.re))

    def tanh(self) -> Complex:
        return make_complex(math.tanh(self.re))

    def asin(self) -> Complex:
        if -1.0 <= self.re <= 1.0:
            return make_complex(math.asin(self.re))
        return super().asin()

    def acos(self) -> Complex:
        if -1.0 <= self.re <= 1.0:
            return make_complex(math.acos(self.re))
        return super().acos()

    def atan(self) -> Complex:
        return make_complex(math.atan(self.re))

    def asinh(self) -> Complex:
        return make_complex(math.asinh(self.re))

    def acosh(self) -> Complex:
        if self.re >= 1.0:
            return make_complex(math.acosh(self.re))
        return super().acosh()

    def atanh(self) -> Complex:
        if -1.0 < self.re < 1.0:
            return make_complex(math.atanh(self.re))
        return super().atanh()

    def __str__(self) -> str:
        return format_real(self.re)


@dataclass(frozen=True, eq=False, repr=False)
class PositiveReal(_RealValue):
    """x > 0, x ≠ 1, конечное."""

    x: float

    def __post_init__(self) -> None:
        _require(
            math.isfinite(self.x) and self.x > 0.0 and self.x != 1.0,
            f"PositiveReal requires finite x > 0, x != 1, got {self.x}",
        )

    @property
    def re(self) -> float:
        return self.x


@dataclass(frozen=True, eq=False, repr=False)
class NegativeReal(_RealValue):
    """x < 0, x ≠ -1, конечное."""

    x: float

    def __post_init__(self) -> None:
        _require(
            math.isfinite(self.x) and self.x < 0.0 and self.x != -1.0,
            f"NegativeReal requires finite x < 0, x != -1, got {self.x}",
        )

    @property
    def re(self) -> float:
        return self.x


@dataclass(frozen=True, eq=False, repr=False)
class One(_RealValue):
    """Мультипликативная единица."""

    @property
    def re(self) -> float:
        return 1.0

    def is_one(self) -> bool:
        return True

    def negate(self) -> Complex:
        return MINUS_ONE

    def reciprocal(self) -> Complex:
        return ONE

    def _times_real(self, x: float) -> Complex:
        return make_complex(x)

    def _times_complex(self, w: Complex) -> Complex:
        return w

    def _pow_real(self, x: float) -> Complex:
        return NaN if math.isnan(x) else ONE

    def _pow_complex(self, w: Complex) -> Complex:
        return NaN if w.is_nan() else ONE

    def sqrt(self) -> Complex:
        return ONE

    def log(self) -> Complex:
        return ZERO

    def atanh(self) -> Complex:
        return NaN

    def __str__(self) -> str:
        return "1"


@dataclass(frozen=True, eq=False, repr=False)
class MinusOne(_RealValue):
    """-1"""

    @property
    def re(self) -> float:
        return -1.0

    def negate(self) -> Complex:
        return ONE

    def reciprocal(self) -> Complex:
        return MINUS_ONE

    def _times_complex(self, w: Complex) -> Complex:
        return w.negate()

    def sqrt(self) -> Complex:
        return I

    def log(self) -> Complex:
        return PI_I

    def atanh(self) -> Complex:
        return NaN

    def __str__(self) -> str:
        return "-1"


# =============================================================================
# МНИМАЯ ОСЬ
# =============================================================================


class _ImaginaryValue(Complex):
    """Конечное ненулевое чисто мнимое значение iy."""

    @property
    def re(self) -> float:
        return 0.0

    def is_real(self) -> bool:
        return False

    def is_imaginary(self) -> bool:
        return True

    def is_integer(self) -> bool:
        return False

    def is_gaussian_integer(self) -> bool:
        return is_integral(self.im)

    def abs(self) -> float:
        return abs(self.im)

    def abs2(self) -> float:
        return self.im * self.im

    def arg(self) -> float:
        return math.copysign(math.pi / 2, self.im)

    def negate(self) -> Complex:
        return make_complex(0.0, -self.im)

    def conjugate(self) -> Complex:
        return make_complex(0.0, -self.im)

    def reciprocal(self) -> Complex:
        return make_complex(0.0, -1.0 / self.im)

    def exp(self) -> Complex:
        return make_complex(math.cos(self.im), math.sin(self.im))

    def log(self) -> Complex:
        return make_complex(math.log(abs(self.im)), math.copysign(math.pi / 2, self.im))

    def sin(self) -> Complex:
        return make_complex(0.0, safe_sinh(self.im))

    def cos(self) -> Complex:
        return make_complex(safe_cosh(self.im))

    def tan(self) -> Complex:
        return make_complex(0.0, math.tanh(self.im))

    def sinh(self) -> Complex:
        return make_complex(0.0, math.sin(self.im))

    def cosh(self) -> Complex:
        return make_complex(math.cos(self.im))

    def tanh(self) -> Complex:
        return make_complex(0.0, math.tan(self.im))

    def __str__(self) -> str:
        return f"{format_real(self.im)}i"


@dataclass(frozen=True, eq=False, repr=False)
class PureImaginary(_ImaginaryValue):
    """iy, y ≠ 0, y ≠ ±1, конечное."""

    y: float

    def __post_init__(self) -> None:
        _require(
            math.isfinite(self.y) and self.y != 0.0 and abs(self.y) != 1.0,
            f"PureImaginary requires finite y != 0, y != ±1, got {self.y}",
        )

    @property
    def im(self) -> float:
        return self.y


@dataclass(frozen=True, eq=False, repr=False)
class ImaginaryUnit(_ImaginaryValue):
    """i"""

    @property
    def im(self) -> float:
        return 1.0

    def negate(self) -> Complex:
        return MINUS_I

    def conjugate(self) -> Complex:
        return MINUS_I

    def reciprocal(self) -> Complex:
        return MINUS_I

    def atan(self) -> Complex:
        return NaN

    def __str__(self) -> str:
        return "i"


@dataclass(frozen=True, eq=False, repr=False)
class MinusImaginaryUnit(_ImaginaryValue):
    """-i"""

    @property
    def im(self) -> float:
        return -1.0

    def negate(self) -> Complex:
        return I

    def conjugate(self) -> Complex:
        return I

    def reciprocal(self) -> Complex:
        return I

    def atan(self) -> Complex:
        return NaN

    def __str__(self) -> str:
        return "-i"


# =============================================================================
# НОЛЬ
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class Zero(Complex):
    """
    Аддитивный ноль.

    0·∞ = NaN, 0/0 = NaN, 1/0 = INFINITY, 0^0 = NaN.
    """

    @property
    def re(self) -> float:
        return 0.0

    @property
    def im(self) -> float:
        return 0.0

    def is_real(self) -> bool:
        return True

    def is_imaginary(self) -> bool:
        return False

    def is_zero(self) -> bool:
        return True

    def is_integer(self) -> bool:
        return True

    def is_gaussian_integer(self) -> bool:
        return True

    def abs(self) -> float:
        return 0.0

    def abs2(self) -> float:
        return 0.0

    def arg(self) -> float:
        return math.nan

    def negate(self) -> Complex:
        return self

    def conjugate(self) -> Complex:
        return self

    def reciprocal(self) -> Complex:
        return INFINITY

    def _plus_real(self, x: float) -> Complex:
        return make_complex(x)

    def _plus_complex(self, w: Complex) -> Complex:
        return w

    def _minus_real(self, x: float) -> Complex:
        return make_complex(-x)

    def _minus_complex(self, w: Complex) -> Complex:
        return w.negate()

    def _times_real(self, x: float) -> Complex:
        return ZERO if math.isfinite(x) else NaN

    def _times_complex(self, w: Complex) -> Complex:
        return ZERO if w.is_finite() else NaN

    def _div_real(self, x: float) -> Complex:
        return NaN if math.isnan(x) or x == 0.0 else ZERO

    def _div_complex(self, w: Complex) -> Complex:
        return NaN if w.is_nan() or w.is_zero() else ZERO

    def _pow_real(self, x: float) -> Complex:
        if math.isnan(x) or x == 0.0:
            return NaN
        return ZERO if x > 0 else INFINITY

    def _pow_complex(self, w: Complex) -> Complex:
        if w.is_nan() or w.is_infinite() or w.re == 0.0:
            return NaN
        return ZERO if w.re > 0 else INFINITY

    def sqrt(self) -> Complex:
        return ZERO

    def _nroots(self, n: int) -> list[Complex]:
        return [ZERO]

    def exp(self) -> Complex:
        return ONE

    def log(self) -> Complex:
        return INFINITY

    def sin(self) -> Complex:
        return ZERO

    def cos(self) -> Complex:
        return ONE

    def tan(self) -> Complex:
        return ZERO

    def sinh(self) -> Complex:
        return ZERO

    def cosh(self) -> Complex:
        return ONE

    def tanh(self) -> Complex:
        return ZERO

    def asin(self) -> Complex:
        return ZERO

    def acos(self) -> Complex:
        return HALF_PI

    def atan(self) -> Complex:
        return ZERO

    def asinh(self) -> Complex:
        return ZERO

    def acosh(self) -> Complex:
        return HALF_PI_I

    def atanh(self) -> Complex:
        return ZERO

    def __str__(self) -> str:
        return "0"


# =============================================================================
# БЕСКОНЕЧНОСТЬ
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class ComplexInfinity(Complex):
    """
    Беззнаковая бесконечность сферы Римана.

    Направление не хранится: ∞ + finite = ∞, ∞·∞ = ∞, ∞ ± ∞ = NaN,
    ∞·0 = NaN, ∞/∞ = NaN. Элементарные функции дают NaN, кроме
    sqrt и log (∞).
    """

    @property
    def re(self) -> float:
        return math.inf

    @property
    def im(self) -> float:
        return math.inf

    def is_real(self) -> bool:
        return False

    def is_imaginary(self) -> bool:
        return False

    def is_integer(self) -> bool:
        return False

    def is_gaussian_integer(self) -> bool:
        return False

    def is_finite(self) -> bool:
        return False

    def is_infinite(self) -> bool:
        return True

    def abs(self) -> float:
        return math.inf

    def abs2(self) -> float:
        return math.inf

    def arg(self) -> float:
        return math.nan

    def negate(self) -> Complex:
        return self

    def conjugate(self) -> Complex:
        return self

    def reciprocal(self) -> Complex:
        return ZERO

    def _plus_real(self, x: float) -> Complex:
        return INFINITY if math.isfinite(x) else NaN

    def _plus_complex(self, w: Complex) -> Complex:
        return INFINITY if w.is_finite() else NaN

    _minus_real = _plus_real
    _minus_complex = _plus_complex

    def _times_real(self, x: float) -> Complex:
        return NaN if math.isnan(x) or x == 0.0 else INFINITY

    def _times_complex(self, w: Complex) -> Complex:
        return NaN if w.is_nan() or w.is_zero() else INFINITY

    def _div_real(self, x: float) -> Complex:
        return INFINITY if math.isfinite(x) else NaN

    def _div_complex(self, w: Complex) -> Complex:
        return INFINITY if w.is_finite() else NaN

    def _pow_real(self, x: float) -> Complex:
        if math.isnan(x) or x == 0.0:
            return NaN
        return INFINITY if x > 0 else ZERO

    def _pow_complex(self, w: Complex) -> Complex:
        if w.is_nan() or w.is_infinite() or w.re == 0.0:
            return NaN
        return INFINITY if w.re > 0 else ZERO

    def equals(self, that: Operand, epsilon: float = EPS_EQUALS_DEFAULT) -> bool:
        x = _as_real(that)
        if x is not None:
            return math.isinf(x)
        return _as_complex(that).is_infinite()

    def sqrt(self) -> Complex:
        return INFINITY

    def _nroots(self, n: int) -> list[Complex]:
        return [INFINITY]

    def exp(self) -> Complex:
        return NaN

    def log(self) -> Complex:
        return INFINITY

    def sin(self) -> Complex:
        return NaN

    def cos(self) -> Complex:
        return NaN

    def tan(self) -> Complex:
        return NaN

    def sinh(self) -> Complex:
        return NaN

    def cosh(self) -> Complex:
        return NaN

    def tanh(self) -> Complex:
        return NaN

    def asin(self) -> Complex:
        return NaN

    def acos(self) -> Complex:
        return NaN

    def atan(self) -> Complex:
        return NaN

    def asinh(self) -> Complex:
        return NaN

    def acosh(self) -> Complex:
        return NaN

    def atanh(self) -> Complex:
        return NaN

    def __hash__(self) -> int:
        # Совпадает с hash(float("inf")); -inf и комплексные бесконечности
        # между собой не равны, общего хеша у них быть не может
        return hash(math.inf)

    def __str__(self) -> str:
        return "∞(C)"


# =============================================================================
# NaN
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class ComplexNaN(Complex):
    """
    Комплексное «не число».

    Любая операция с NaN даёт NaN; NaN не равен ничему, включая себя.
    """

    @property
    def re(self) -> float:
        return math.nan

    @property
    def im(self) -> float:
        return math.nan

    def is_real(self) -> bool:
        return False

    def is_imaginary(self) -> bool:
        return False

    def is_integer(self) -> bool:
        return False

    def is_gaussian_integer(self) -> bool:
        return False

    def is_finite(self) -> bool:
        return False

    def is_nan(self) -> bool:
        return True

    def abs(self) -> float:
        return math.nan

    def abs2(self) -> float:
        return math.nan

    def arg(self) -> float:
        return math.nan

    def negate(self) -> Complex:
        return self

    def conjugate(self) -> Complex:
        return self

    def reciprocal(self) -> Complex:
        return self

    def _plus_real(self, x: float) -> Complex:
        return self

    def _plus_complex(self, w: Complex) -> Complex:
        return self

    _minus_real = _times_real = _div_real = _pow_real = _plus_real
    _minus_complex = _times_complex = _div_complex = _pow_complex = _plus_complex

    def equals(self, that: Operand, epsilon: float = EPS_EQUALS_DEFAULT) -> bool:
        return False

    def is_congruent_to(
        self,
        that: Operand,
        m: ModArgLike,
        epsilon: float = EPS_CONGRUENCE_DEFAULT,
    ) -> bool:
        return False

    def sqrt(self) -> Complex:
        return self

    def _nroots(self, n: int) -> list[Complex]:
        return []

    def exp(self) -> Complex:
        return self

    def log(self) -> Complex:
        return self

    sin = cos = tan = sinh = cosh = tanh = exp
    asin = acos = atan = asinh = acosh = atanh = exp

    def __hash__(self) -> int:
        return hash(ComplexNaN)

    def __str__(self) -> str:
        return "NaN(C)"


# =============================================================================
# ФАБРИКА
# =============================================================================


def make_complex(re: float | complex = 0.0, im: float = 0.0) -> Complex:
    """
    Каноническое комплексное значение для пары (re, im).

    - NaN в любой компоненте → NaN
    - иначе бесконечная компонента → INFINITY (знак отбрасывается)
    - иначе выбирается вариант; нулевые и единичные точки — синглтоны

    Args:
        re: Вещественная часть (или встроенный complex: re + i·im)
        im: Мнимая часть

    Returns:
        Значение соответствующего варианта

    Examples:
        >>> make_complex(0.0, 0.0) is ZERO
        True
        >>> str(make_complex(3, 4))
        '3+4i'
        >>> make_complex(float('-inf'), 1.0) is INFINITY
        True
    """
    if isinstance(re, complex):
        re, im = re.real, re.imag + im

    re = float(re)
    im = float(im)

    kind = classify(re, im)
    singleton = _SINGLETONS.get(kind)
    if singleton is not None:
        return singleton

    if kind is ComplexKind.POSITIVE_REAL:
        return PositiveReal(re)
    if kind is ComplexKind.NEGATIVE_REAL:
        return NegativeReal(re)
    if kind is ComplexKind.PURE_IMAGINARY:
        return PureImaginary(im)
    return GeneralComplex(re, im)


def of_polar(r: float, theta: float) -> Complex:
    """r(cos θ + i sin θ)"""
    return make_complex(*kernels.polar(r, theta))


# =============================================================================
# СИНГЛТОНЫ
# =============================================================================

ZERO: Complex = Zero()
ONE: Complex = One()
MINUS_ONE: Complex = MinusOne()
I: Complex = ImaginaryUnit()
MINUS_I: Complex = MinusImaginaryUnit()
INFINITY: Complex = ComplexInfinity()
NaN: Complex = ComplexNaN()

_SINGLETONS: dict[ComplexKind, Complex] = {
    ComplexKind.ZERO: ZERO,
    ComplexKind.ONE: ONE,
    ComplexKind.MINUS_ONE: MINUS_ONE,
    ComplexKind.I: I,
    ComplexKind.MINUS_I: MINUS_I,
    ComplexKind.INFINITY: INFINITY,
    ComplexKind.NAN: NaN,
}

# Вспомогательные значения для обратных функций
HALF_I: Complex = PureImaginary(0.5)
HALF_PI: Complex = PositiveReal(math.pi / 2)
HALF_PI_I: Complex = PureImaginary(math.pi / 2)
PI_I: Complex = PureImaginary(math.pi)
