"""
Cubic Equation — решение ax³ + bx² + cx + d = 0 в замкнутой форме

Уравнение приводится к депрессированной форме x³ + px + q = 0
подстановкой x = t - b/3a:

    p = c/a - b²/3a²
    q = 2b³/27a³ - bc/3a² + d/a
    discriminant = -(4p³ + 27q²)

Вещественные корни (ветви проверяются строго по порядку):
    1. p = 0             → ∛(-q)
    2. q = 0             → {0} при p ≥ 0, {-√-p, 0, √-p} при p < 0
    3. discriminant = 0  → {-2w, w}, w = ∛(q/2)
    4. discriminant < 0  → формула Кардано, один корень
    5. discriminant > 0  → подстановка Виета, три корня

Комплексные корни всегда возвращаются тройкой через переданную
фабрику factory(x, y); уравнение не зависит от представления Complex.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a ≠ 0, все коэффициенты конечны (иначе pydantic.ValidationError)
2. Коэффициенты неизменяемы; p, q, discriminant вычисляются, не хранятся
"""

import math
from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.logging_config import get_logger
from src.core.math.formatting import format_real
from src.core.math.numerical_safeguards import cbrt

logger = get_logger(__name__)

C = TypeVar("C")

SQRT3_HALF = math.sqrt(3) / 2


# =============================================================================
# РЕШЕНИЕ ДЕПРЕССИРОВАННОЙ ФОРМЫ
# =============================================================================


def _discriminant(p: float, q: float) -> float:
    return -(4 * p * p * p + 27 * q * q)


def _cardano_cube(p: float, q: float, disc: float) -> float:
    """
    Кубический корень формулы Кардано (disc < 0).

    Знак под корнем выбирается по знаку q: так исключается вычитание
    близких величин.
    """
    s = math.sqrt(-disc / 108)
    if q > 0:
        return cbrt(-q / 2 - s)
    return cbrt(-q / 2 + s)


def _viete_roots(p: float, q: float) -> list[float]:
    """Три вещественных корня подстановкой Виета (disc > 0, p < 0)."""
    m = math.sqrt(-p / 3)
    r = 2 * m
    # Аргумент acos может выйти за [-1, 1] на величину ошибки округления
    cos_arg = max(-1.0, min(1.0, 3 * q / (2 * p * m)))
    t = math.acos(cos_arg)
    return [r * math.cos((t + 2 * math.pi * k) / 3) for k in range(3)]


def _depressed_real_roots(p: float, q: float) -> list[float]:
    if p == 0.0:
        logger.debug(f"Cubic branch p=0 (q={q})")
        return [cbrt(-q)]

    if q == 0.0:
        logger.debug(f"Cubic branch q=0 (p={p})")
        if p >= 0:
            return [0.0]
        s = math.sqrt(-p)
        return [-s, 0.0, s]

    disc = _discriminant(p, q)

    if disc == 0.0:
        logger.debug(f"Cubic branch discriminant=0 (p={p}, q={q})")
        w = cbrt(q / 2)
        return [-2 * w, w]

    if disc < 0:
        logger.debug(f"Cubic branch discriminant<0 (p={p}, q={q}, disc={disc})")
        w = _cardano_cube(p, q, disc)
        return [w - p / (3 * w)]

    logger.debug(f"Cubic branch discriminant>0 (p={p}, q={q}, disc={disc})")
    return _viete_roots(p, q)


def _depressed_complex_roots(p: float, q: float) -> list[tuple[float, float]]:
    if p == 0.0 and q == 0.0:
        logger.debug("Cubic branch p=q=0: triple root")
        return [(0.0, 0.0)] * 3

    if q == 0.0 and p < 0:
        logger.debug(f"Cubic branch q=0 (p={p}): three real roots")
        s = math.sqrt(-p)
        return [(-s, 0.0), (0.0, 0.0), (s, 0.0)]

    disc = _discriminant(p, q)

    if disc == 0.0:
        logger.debug(f"Cubic branch discriminant=0 (p={p}, q={q})")
        w = cbrt(q / 2)
        return [(-2 * w, 0.0), (w, 0.0), (w, 0.0)]

    if disc < 0:
        logger.debug(f"Cubic branch discriminant<0 (p={p}, q={q}, disc={disc})")
        a3 = _cardano_cube(p, q, disc)
        b3 = -p / (3 * a3)
        x = a3 + b3
        y = abs(a3 - b3) * SQRT3_HALF
        return [(x, 0.0), (-x / 2, y), (-x / 2, -y)]

    logger.debug(f"Cubic branch discriminant>0 (p={p}, q={q}, disc={disc})")
    return [(x, 0.0) for x in _viete_roots(p, q)]


# =============================================================================
# CUBIC EQUATION MODEL
# =============================================================================


class CubicEquation(BaseModel):
    """
    Кубическое уравнение ax³ + bx² + cx + d = 0.

    Immutable модель (frozen=True). Создаётся через CubicEquation.new(),
    of_depressed() или from_roots(); конкретный класс — DepressedCubicEquation
    (a = 1, b = 0) или GeneralCubicEquation.
    """

    a: float = Field(..., allow_inf_nan=False, description="Коэффициент при x³ (≠ 0)")
    b: float = Field(default=0.0, allow_inf_nan=False, description="Коэффициент при x²")
    c: float = Field(default=0.0, allow_inf_nan=False, description="Коэффициент при x")
    d: float = Field(default=0.0, allow_inf_nan=False, description="Свободный член")

    model_config = {"frozen": True}

    @field_validator("a")
    @classmethod
    def validate_leading_coefficient(cls, v: float) -> float:
        if v == 0.0:
            raise ValueError("The coefficient of x³ must not be zero")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @staticmethod
    def new(a: float, b: float = 0.0, c: float = 0.0, d: float = 0.0) -> "CubicEquation":
        """
        Уравнение ax³ + bx² + cx + d = 0.

        Raises:
            pydantic.ValidationError: Если a = 0 или коэффициент не конечен
        """
        if a == 1 and b == 0:
            return DepressedCubicEquation(a=a, b=b, c=c, d=d)
        return GeneralCubicEquation(a=a, b=b, c=c, d=d)

    @staticmethod
    def of_depressed(p: float, q: float) -> "DepressedCubicEquation":
        """Уравнение x³ + px + q = 0."""
        return DepressedCubicEquation(a=1.0, b=0.0, c=p, d=q)

    @staticmethod
    def from_roots(x0: float, x1: float, x2: float, a: float = 1.0) -> "CubicEquation":
        """
        Уравнение a(x - x0)(x - x1)(x - x2) = 0.

        Examples:
            >>> eq = CubicEquation.from_roots(1, 1, 1, 2)
            >>> (eq.a, eq.b, eq.c, eq.d)
            (2.0, -6.0, 6.0, -2.0)
        """
        b = -a * (x0 + x1 + x2)
        c = a * (x0 * x1 + x1 * x2 + x2 * x0)
        d = -a * x0 * x1 * x2
        return CubicEquation.new(a, b, c, d)

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    def _normalized(self) -> tuple[float, float, float]:
        return (self.b / self.a, self.c / self.a, self.d / self.a)

    @property
    def p(self) -> float:
        """(3ac - b²)/3a²"""
        b, c, _ = self._normalized()
        return c - b * b / 3

    @property
    def q(self) -> float:
        """(2b³ - 9abc + 27a²d)/27a³"""
        b, c, d = self._normalized()
        return 2 * b * b * b / 27 - b * c / 3 + d

    @property
    def discriminant(self) -> float:
        """
        -(4p³ + 27q²) = a⁴(r₁ - r₂)²(r₂ - r₃)²(r₃ - r₁)²

        Положителен при трёх различных вещественных корнях, отрицателен
        при паре комплексно-сопряжённых, равен нулю при кратном корне.
        """
        return _discriminant(self.p, self.q)

    def _shift(self) -> float:
        return self.b / self.a / 3

    def f(self, x: float) -> float:
        """Значение ax³ + bx² + cx + d по схеме Горнера."""
        return ((self.a * x + self.b) * x + self.c) * x + self.d

    def depressed(self) -> "DepressedCubicEquation":
        """Уравнение x³ + px + q = 0 для этого уравнения."""
        return CubicEquation.of_depressed(self.p, self.q)

    # -------------------------------------------------------------------------
    # Корни
    # -------------------------------------------------------------------------

    def real_roots(self) -> list[float]:
        """
        Вещественные корни (кратные корни возвращаются один раз).

        Returns:
            Список из 1, 2 или 3 корней
        """
        shift = self._shift()
        return [t - shift for t in _depressed_real_roots(self.p, self.q)]

    def complex_roots(self, factory: Callable[[float, float], C]) -> list[C]:
        """
        Три корня с учётом кратности, созданные через factory(re, im).

        Args:
            factory: Конструктор комплексного значения, например make_complex

        Returns:
            Ровно три значения; при discriminant < 0 — вещественный корень
            и комплексно-сопряжённая пара
        """
        shift = self._shift()
        return [factory(x - shift, y) for x, y in _depressed_complex_roots(self.p, self.q)]

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return (
            _cubic_term(self.a)
            + _lower_term(self.b, "x²")
            + _lower_term(self.c, "x")
            + _const_term(self.d)
            + " = 0"
        )


class DepressedCubicEquation(CubicEquation):
    """x³ + px + q = 0 (a = 1, b = 0)."""

    @model_validator(mode="after")
    def validate_depressed_form(self) -> "DepressedCubicEquation":
        if self.a != 1.0 or self.b != 0.0:
            raise ValueError(f"Depressed cubic requires a=1, b=0, got a={self.a}, b={self.b}")
        return self

    @property
    def p(self) -> float:
        return self.c

    @property
    def q(self) -> float:
        return self.d

    def _shift(self) -> float:
        return 0.0

    def depressed(self) -> "DepressedCubicEquation":
        return self


class GeneralCubicEquation(CubicEquation):
    """ax³ + bx² + cx + d = 0 в общем виде."""

    pass


# =============================================================================
# ФОРМАТИРОВАНИЕ ЧЛЕНОВ
# =============================================================================


def _cubic_term(a: float) -> str:
    if a == 1:
        return "x³"
    if a == -1:
        return "- x³"
    return f"{format_real(a)}x³"


def _lower_term(t: float, power: str) -> str:
    if t == 0:
        return ""
    if t == 1:
        return f" + {power}"
    if t == -1:
        return f" - {power}"
    if t > 0:
        return f" + {format_real(t)}{power}"
    return f" - {format_real(-t)}{power}"


def _const_term(d: float) -> str:
    if d == 0:
        return ""
    if d > 0:
        return f" + {format_real(d)}"
    return f" - {format_real(-d)}"
