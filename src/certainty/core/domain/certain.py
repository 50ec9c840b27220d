"""
Certain — точные скаляры как неопределённые величины

Адаптер "нейтрального элемента": любой вещественный скаляр (float, int,
numpy float) ведёт себя как величина с нулевой неопределённостью. Функции
модуля дают единый доступ к компонентам и для скаляров, и для
AbsUncertainty/RelUncertainty, поэтому точные и неопределённые значения
смешиваются в одних выражениях без обёрток.

Для скаляра x:
    mean(x) == x
    standard_deviation(x) == coefficient_of_variation(x) == uncertainty(x) == 0
    is_certain(x) is True
    powi(x, n) == x ** n (по IEEE-754, без исключений)
"""

from functools import singledispatch
from typing import Any

from certainty.core.domain.absolute import AbsUncertainty
from certainty.core.domain.relative import RelUncertainty
from certainty.core.domain.uncertainty import Uncertainty
from certainty.core.math.numerical_safeguards import (
    DEFAULT_PRECISION,
    Precision,
    ieee_power,
    is_certain_scalar,
    to_precision,
)
from certainty.core.math.propagation import DEFAULT_POWER_RULE, PowerRule


def _scalar(value: Any) -> float:
    """Проверка скаляра; bool и нечисловые типы отклоняются"""
    if not is_certain_scalar(value):
        raise TypeError(
            f"expected an uncertain value or a real number, got {type(value).__name__}"
        )
    return float(value)


# =============================================================================
# ACCESSORS
# =============================================================================


@singledispatch
def mean(value: Any) -> float:
    """Центральная оценка"""
    return _scalar(value)


@mean.register
def _(value: Uncertainty) -> float:
    return value.mean


@singledispatch
def standard_deviation(value: Any) -> float:
    """Стандартное отклонение (0 для скаляра)"""
    _scalar(value)
    return 0.0


@standard_deviation.register
def _(value: AbsUncertainty) -> float:
    return value.standard_deviation


@standard_deviation.register
def _(value: RelUncertainty) -> float:
    return value.standard_deviation


@singledispatch
def coefficient_of_variation(value: Any) -> float:
    """Коэффициент вариации (0 для скаляра)"""
    _scalar(value)
    return 0.0


@coefficient_of_variation.register
def _(value: AbsUncertainty) -> float:
    return value.coefficient_of_variation


@coefficient_of_variation.register
def _(value: RelUncertainty) -> float:
    return value.coefficient_of_variation


@singledispatch
def uncertainty(value: Any) -> float:
    """Неопределённость в родных единицах (0 для скаляра)"""
    _scalar(value)
    return 0.0


@uncertainty.register
def _(value: Uncertainty) -> float:
    return value.uncertainty


def is_certain(value: Any) -> bool:
    """True если неопределённость равна нулю (всегда True для скаляра)"""
    return uncertainty(value) == 0.0


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


@singledispatch
def powi(value: Any, n: int, rule: PowerRule = DEFAULT_POWER_RULE) -> Any:
    """
    Целая степень.

    Для скаляра возвращает скаляр (правило распространения не влияет),
    для неопределённой величины — значение того же представления.
    """
    return ieee_power(_scalar(value), n)


@powi.register
def _(value: Uncertainty, n: int, rule: PowerRule = DEFAULT_POWER_RULE) -> Uncertainty:
    return value.powi(n, rule=rule)


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def to_absolute(value: Any, precision: Precision | None = None) -> AbsUncertainty:
    """Абсолютная форма; скаляр становится mean ± 0"""
    return AbsUncertainty.from_value(value, precision=precision)


def to_relative(value: Any, precision: Precision | None = None) -> RelUncertainty:
    """Относительная форма; скаляр становится mean ± 0%"""
    return RelUncertainty.from_value(value, precision=precision)


def to_scalar(value: Any, precision: Precision = DEFAULT_PRECISION) -> float:
    """
    Отбрасывание неопределённости: центральная оценка как float.

    Для неопределённой величины точность берётся из неё самой.
    """
    if isinstance(value, Uncertainty):
        return value.mean
    return to_precision(_scalar(value), precision)
