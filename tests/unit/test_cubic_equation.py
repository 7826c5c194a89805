"""
Тесты кубического уравнения

Проверяет:
1. Конструкторы и валидацию коэффициентов (pydantic)
2. Форматирование уравнения
3. Вещественные корни во всех ветвях решения
4. Комплексные корни (всегда тройка)
5. Невязку f(x) на случайных целых коэффициентах
"""

import math
import random

import pytest
from pydantic import ValidationError

from src.core.complex.values import make_complex
from src.core.equations.cubic import (
    CubicEquation,
    DepressedCubicEquation,
    GeneralCubicEquation,
)


def residual_scale(eq: CubicEquation, x: float) -> float:
    """Масштаб слагаемых многочлена в точке x"""
    return max(1.0, abs(eq.a * x**3) + abs(eq.b * x * x) + abs(eq.c * x) + abs(eq.d))


def complex_value(eq: CubicEquation, z: complex) -> complex:
    return ((eq.a * z + eq.b) * z + eq.c) * z + eq.d


# =============================================================================
# ТЕСТЫ КОНСТРУКТОРОВ
# =============================================================================


class TestConstruction:
    """Тесты создания и валидации"""

    def test_new_selects_depressed_form(self) -> None:
        assert isinstance(CubicEquation.new(1, 0, -3, 2), DepressedCubicEquation)
        assert isinstance(CubicEquation.new(2, 0, -3, 2), GeneralCubicEquation)
        assert isinstance(CubicEquation.new(1, 1, 1, 1), GeneralCubicEquation)

    def test_of_depressed(self) -> None:
        eq = CubicEquation.of_depressed(-7, 6)
        assert (eq.a, eq.b, eq.c, eq.d) == (1.0, 0.0, -7.0, 6.0)
        assert eq.p == -7.0
        assert eq.q == 6.0

    @pytest.mark.parametrize(
        "roots, coefficients",
        [
            ((0, 0, 0, 1), (1, 0, 0, 0)),
            ((0, 0, 0, 2), (2, 0, 0, 0)),
            ((1, 1, 1, 2), (2, -6, 6, -2)),
            ((2, 2, 3, 5), (5, -35, 80, -60)),
            ((1, -2, 3, 4), (4, -8, -20, 24)),
        ],
    )
    def test_from_roots(self, roots, coefficients) -> None:
        eq = CubicEquation.from_roots(*roots)
        assert (eq.a, eq.b, eq.c, eq.d) == coefficients

    def test_zero_leading_coefficient_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not be zero"):
            CubicEquation.new(0, 1, 1, 1)

    @pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
    def test_non_finite_coefficients_rejected(self, bad: float) -> None:
        with pytest.raises(ValidationError):
            CubicEquation.new(bad, 1, 1, 1)
        with pytest.raises(ValidationError):
            CubicEquation.new(1, 0, bad, 1)

    def test_depressed_form_enforced(self) -> None:
        with pytest.raises(ValidationError):
            DepressedCubicEquation(a=2.0, b=0.0, c=1.0, d=1.0)
        with pytest.raises(ValidationError):
            DepressedCubicEquation(a=1.0, b=1.0, c=1.0, d=1.0)

    def test_frozen(self) -> None:
        eq = CubicEquation.new(1, 2, 3, 4)
        with pytest.raises(ValidationError):
            eq.a = 2.0  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ ПРОИЗВОДНЫХ ВЕЛИЧИН
# =============================================================================


class TestDerivedQuantities:
    """p, q, discriminant, f, depressed"""

    def test_horner(self) -> None:
        assert CubicEquation.new(1, 2, 3, 4).f(2) == 26.0

    def test_depressed_of_perfect_cube(self) -> None:
        eq = CubicEquation.new(1, 3, 3, 1)
        assert eq.p == 0.0
        assert eq.q == 0.0
        assert str(eq.depressed()) == "x³ = 0"

    def test_depressed_of_depressed_is_self(self) -> None:
        eq = CubicEquation.of_depressed(1, 2)
        assert eq.depressed() is eq

    def test_discriminant_sign(self) -> None:
        assert CubicEquation.of_depressed(-3, 2).discriminant == 0.0
        assert CubicEquation.of_depressed(-7, 6).discriminant == 400.0
        assert CubicEquation.of_depressed(3, -4).discriminant < 0

    def test_discriminant_invariant_under_scaling(self) -> None:
        eq = CubicEquation.from_roots(1, 2, 3)
        scaled = CubicEquation.from_roots(1, 2, 3, 4)
        assert eq.discriminant == pytest.approx(scaled.discriminant)
        assert eq.discriminant == pytest.approx(4.0)


# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ
# =============================================================================


class TestFormatting:
    """Тесты __str__"""

    @pytest.mark.parametrize(
        "coefficients, expected",
        [
            ((1, 0, 0, 0), "x³ = 0"),
            ((1, 1, 1, 1), "x³ + x² + x + 1 = 0"),
            ((-1, -1, -1, -1), "- x³ - x² - x - 1 = 0"),
            ((2, 2, 2, 2), "2x³ + 2x² + 2x + 2 = 0"),
            ((-2, -2, -2, -2), "-2x³ - 2x² - 2x - 2 = 0"),
            ((1, 0, -3.5, 0.25), "x³ - 3.5x + 0.25 = 0"),
        ],
    )
    def test_str(self, coefficients, expected: str) -> None:
        assert str(CubicEquation.new(*coefficients)) == expected


# =============================================================================
# ТЕСТЫ ВЕЩЕСТВЕННЫХ КОРНЕЙ
# =============================================================================


class TestRealRoots:
    """Тесты real_roots по ветвям решения"""

    def test_p_zero(self) -> None:
        assert CubicEquation.of_depressed(0, 1).real_roots() == pytest.approx([-1.0])
        assert CubicEquation.of_depressed(0, -8).real_roots() == pytest.approx([2.0])
        assert CubicEquation.of_depressed(0, 5).real_roots() == [math.cbrt(-5)]

    def test_triple_root(self) -> None:
        assert CubicEquation.of_depressed(0, 0).real_roots() == [0.0]
        assert CubicEquation.from_roots(1, 1, 1, 2).real_roots() == [1.0]

    def test_q_zero(self) -> None:
        assert CubicEquation.of_depressed(3, 0).real_roots() == [0.0]
        s = math.sqrt(3)
        assert CubicEquation.of_depressed(-3, 0).real_roots() == [-s, 0.0, s]

    def test_double_root(self) -> None:
        # x³ - 3x + 2 = (x - 1)²(x + 2)
        assert CubicEquation.of_depressed(-3, 2).real_roots() == pytest.approx([-2.0, 1.0])

    def test_cardano_single_root(self) -> None:
        # x³ + 3x - 4 = (x - 1)(x² + x + 4)
        roots = CubicEquation.of_depressed(3, -4).real_roots()
        assert len(roots) == 1
        assert roots[0] == pytest.approx(1.0, abs=1e-14)

    def test_viete_three_roots(self) -> None:
        # x³ - 7x + 6 = (x - 1)(x - 2)(x + 3)
        roots = sorted(CubicEquation.of_depressed(-7, 6).real_roots())
        assert roots == pytest.approx([-3.0, 1.0, 2.0], abs=1e-12)

    def test_general_form_shift(self) -> None:
        roots = sorted(CubicEquation.from_roots(1, 2, 3, 2).real_roots())
        assert roots == pytest.approx([1.0, 2.0, 3.0], abs=1e-12)

    def test_general_form_single_root(self) -> None:
        roots = CubicEquation.new(2, 4, 6, 4).real_roots()
        # 2(x + 1)(x² + x + 2)
        assert roots == pytest.approx([-1.0], abs=1e-12)

    def test_residual_on_random_coefficients(self) -> None:
        rng = random.Random(3)
        for _ in range(500):
            a = rng.choice([k for k in range(-10, 11) if k != 0])
            b, c, d = (rng.randint(-10, 10) for _ in range(3))
            eq = CubicEquation.new(a, b, c, d)
            roots = eq.real_roots()
            assert 1 <= len(roots) <= 3
            for x in roots:
                assert math.isfinite(x)
                assert abs(eq.f(x)) <= 1e-9 * residual_scale(eq, x), str(eq)


# =============================================================================
# ТЕСТЫ КОМПЛЕКСНЫХ КОРНЕЙ
# =============================================================================


class TestComplexRoots:
    """Тесты complex_roots"""

    def test_conjugate_pair(self) -> None:
        roots = CubicEquation.new(2, 0, 0, 16).complex_roots(make_complex)
        # x³ + 8 = 0
        assert roots[0].equals(make_complex(-2.0), 1e-14)
        assert roots[1].equals(make_complex(1.0, math.sqrt(3)), 1e-14)
        assert roots[2] == roots[1].conjugate()

    def test_multiplicity_is_kept(self) -> None:
        roots = CubicEquation.of_depressed(-3, 2).complex_roots(make_complex)
        expected = [make_complex(-2.0), make_complex(1.0), make_complex(1.0)]
        assert all(z.equals(w, 1e-15) for z, w in zip(roots, expected))
        assert roots[1] == roots[2]

        triple = CubicEquation.new(1, 3, 3, 1).complex_roots(complex)
        assert triple == [complex(-1, 0)] * 3

    def test_three_real_roots(self) -> None:
        roots = CubicEquation.of_depressed(-3, 0).complex_roots(complex)
        s = math.sqrt(3)
        assert roots == [complex(-s, 0), 0j, complex(s, 0)]

    def test_factory_is_used(self) -> None:
        calls = []

        def factory(x: float, y: float) -> tuple[float, float]:
            calls.append((x, y))
            return (x, y)

        roots = CubicEquation.of_depressed(0, 0).complex_roots(factory)
        assert roots == [(0.0, 0.0)] * 3
        assert len(calls) == 3

    def test_residual_on_random_coefficients(self) -> None:
        rng = random.Random(5)
        for _ in range(500):
            a = rng.choice([k for k in range(-10, 11) if k != 0])
            b, c, d = (rng.randint(-10, 10) for _ in range(3))
            eq = CubicEquation.new(a, b, c, d)
            roots = eq.complex_roots(complex)
            assert len(roots) == 3
            for z in roots:
                scale = residual_scale(eq, abs(z))
                assert abs(complex_value(eq, z)) <= 1e-9 * scale, str(eq)

    def test_real_roots_are_among_complex_roots(self) -> None:
        eq = CubicEquation.new(1, -2, -5, 6)
        complex_re = sorted(z.real for z in eq.complex_roots(complex))
        assert sorted(eq.real_roots()) == pytest.approx(complex_re, abs=1e-12)
