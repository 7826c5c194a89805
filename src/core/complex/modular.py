"""
Modular Reduction — приведение компонент по модулю решётки

Каждая ось (re, im) приводится независимо:
- None: ось не ограничена, значение проходит без изменений
- w: приведение в [0, w) по формуле x - floor(x/w)·w
- (lo, hi): приведение в [lo, hi) по формуле x - floor((x-lo)/(hi-lo))·(hi-lo)

Вырожденный модуль (w = 0, hi = lo, нефинитная или NaN граница) даёт NaN:
так сравнение по модулю сигнализирует об отсутствии корректного приведения.
"""

import itertools
import math
from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, Field

from src.core.logging_config import get_logger

logger = get_logger(__name__)

AxisModulus = Union[float, tuple[float, float], None]


# =============================================================================
# MODARG MODEL
# =============================================================================


class ModArg(BaseModel):
    """
    Параметры приведения по модулю для осей re и im.

    Immutable модель (frozen=True). Границы не валидируются на
    конечность: вырожденный модуль — допустимый вход, результат NaN.
    """

    re: float | tuple[float, float] | None = Field(
        default=None, description="Модуль вещественной оси: w или (lo, hi)"
    )
    im: float | tuple[float, float] | None = Field(
        default=None, description="Модуль мнимой оси: w или (lo, hi)"
    )

    model_config = {"frozen": True}

    @classmethod
    def coerce(cls, value: Union["ModArg", Mapping[str, Any]]) -> "ModArg":
        """
        Приведение входа к ModArg.

        Args:
            value: ModArg или mapping вида {"re": 1.4, "im": (0, 2π)}

        Raises:
            TypeError: Если value не ModArg и не mapping
            pydantic.ValidationError: Если mapping не соответствует модели
        """
        if isinstance(value, ModArg):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise TypeError(f"ModArg or mapping expected, got {type(value).__name__}")


# =============================================================================
# ПРИВЕДЕНИЕ ПО ОСИ
# =============================================================================


def axis_interval(modulus: float | tuple[float, float]) -> tuple[float, float]:
    """
    Нижняя граница и ширина интервала приведения.

    Examples:
        >>> axis_interval(1.4)
        (0.0, 1.4)
        >>> axis_interval((-1.0, 1.0))
        (-1.0, 2.0)
    """
    if isinstance(modulus, tuple):
        lo, hi = modulus
        return (float(lo), float(hi) - float(lo))
    return (0.0, float(modulus))


def reduce_axis(x: float, modulus: AxisModulus) -> float:
    """
    Приведение значения x по модулю одной оси.

    Args:
        x: Значение компоненты
        modulus: None, ширина w или интервал (lo, hi)

    Returns:
        Приведённое значение или NaN при вырожденном модуле
        или нефинитном x

    Examples:
        >>> round(reduce_axis(2.6, 1.4), 12)
        1.2
        >>> reduce_axis(5.0, None)
        5.0
        >>> math.isnan(reduce_axis(1.0, 0.0))
        True
    """
    if modulus is None:
        return x

    lo, width = axis_interval(modulus)

    if not (math.isfinite(lo) and math.isfinite(width)) or width == 0.0:
        logger.debug(f"Degenerate modulus {modulus!r}: reduction of {x} is NaN")
        return math.nan

    if not math.isfinite(x):
        return math.nan

    quotient = (x - lo) / width
    if not math.isfinite(quotient):
        return math.nan

    return x - math.floor(quotient) * width


def reduce_pair(re: float, im: float, arg: ModArg) -> tuple[float, float]:
    """Приведение пары (re, im) по модулю arg."""
    return (reduce_axis(re, arg.re), reduce_axis(im, arg.im))


# =============================================================================
# СРАВНЕНИЕ ПО МОДУЛЮ
# =============================================================================


def _axis_candidates(modulus: AxisModulus) -> list[float]:
    if modulus is None:
        return [0.0]

    _, width = axis_interval(modulus)
    zero = reduce_axis(0.0, modulus)
    return [zero - width, zero, zero + width]


def congruence_candidates(arg: ModArg) -> list[tuple[float, float]]:
    """
    Точки решётки, эквивалентные нулю после приведения.

    Приведённая разность, близкая к границе интервала, может оказаться
    у любого из краёв, поэтому помимо представителя нуля проверяются
    соседние точки (± ширина) по каждой ограниченной оси.

    Returns:
        Список пар (re, im) — декартово произведение кандидатов по осям
    """
    return list(itertools.product(_axis_candidates(arg.re), _axis_candidates(arg.im)))
