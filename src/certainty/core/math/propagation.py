"""
Propagation — аналитическое распространение неопределённости

Линеаризованное (first-order) распространение дисперсии через
арифметические операции. Функции модуля работают с парами
(mean, uncertainty), где uncertainty выражена в "родных" единицах
представления левого операнда (standard deviation для абсолютной формы,
coefficient of variation для относительной), и не знают о доменных моделях.

Правила (a — левый операнд, b — правый, u — родная неопределённость):

    add / sub:  mean = a ± b       u = sqrt(ua² + ub²)
    mul:        mean = a·b         u = sqrt(ua²·b² + ub²·a²)
    div:        mean = a/b         u = sqrt(ua²/b² + a²·(ub/b²)²)     STANDARD
                                   u = sqrt(ua²/b² + a²·(ub·b²)²)     LEGACY
    powi(n):    mean = aⁿ          u = sqrt(n²·a^(2n-2)·ua²)          EXPONENT
                                   u = sqrt(2ⁿ·a^(2n-2)·ua²)          LEGACY_CONSTANT

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды статистически независимы (ковариации не отслеживаются)
2. Результат — всегда в представлении и точности левого операнда
3. Исключения не выбрасываются: NaN/±Inf пропагируют по IEEE-754
4. Функции чистые: никакого состояния между вызовами
"""

import logging
from enum import Enum
from typing import Any, Callable, Final

import numpy as np

from certainty.core.math.numerical_safeguards import (
    DEFAULT_PRECISION,
    Precision,
    as_scalars,
    ieee_arithmetic,
    is_valid_float,
    validate_integer_exponent,
)

logger = logging.getLogger(__name__)

# (mean, uncertainty)
Propagated = tuple[float, float]


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Бинарная арифметическая операция"""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"


class DivisionRule(str, Enum):
    """
    Формула распространения для деления.

    STANDARD — стандартная first-order формула для частного.
    LEGACY — историческая формула с множителем b² вместо делителя b²
    (размерно несогласованная, сохранена для воспроизведения старых расчётов).
    """

    STANDARD = "standard"
    LEGACY = "legacy"


class PowerRule(str, Enum):
    """
    Формула распространения для целой степени.

    EXPONENT — delta-method для монома: множитель n².
    LEGACY_CONSTANT — историческая формула с постоянным множителем 2ⁿ.
    """

    EXPONENT = "exponent"
    LEGACY_CONSTANT = "legacy_constant"


DEFAULT_DIVISION_RULE: Final[DivisionRule] = DivisionRule.STANDARD
DEFAULT_POWER_RULE: Final[PowerRule] = PowerRule.EXPONENT


# =============================================================================
# HELPERS
# =============================================================================


def _finish(
    operation: str,
    inputs: tuple[float, ...],
    mean: np.floating,
    uncertainty: np.floating,
) -> Propagated:
    result = (float(mean), float(uncertainty))

    if all(is_valid_float(float(x)) for x in inputs) and not all(
        is_valid_float(x) for x in result
    ):
        logger.debug(
            "%s produced non-finite result %r from finite inputs %r",
            operation,
            result,
            inputs,
        )

    return result


# =============================================================================
# БИНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def propagate_add(
    a_mean: float,
    a_unc: float,
    b_mean: float,
    b_unc: float,
    precision: Precision = DEFAULT_PRECISION,
) -> Propagated:
    """
    Сложение: дисперсии независимых величин складываются.

    Examples:
        >>> propagate_add(10.0, 1.0, 5.0, 2.0)
        (15.0, 2.23606797749979)
    """
    with ieee_arithmetic():
        a, ua, b, ub = as_scalars(precision, a_mean, a_unc, b_mean, b_unc)
        mean = a + b
        unc = np.sqrt(ua**2 + ub**2)
    return _finish(Operation.ADD.value, (a_mean, a_unc, b_mean, b_unc), mean, unc)


def propagate_sub(
    a_mean: float,
    a_unc: float,
    b_mean: float,
    b_unc: float,
    precision: Precision = DEFAULT_PRECISION,
) -> Propagated:
    """
    Вычитание: дисперсии складываются независимо от знака операции.

    Examples:
        >>> propagate_sub(10.0, 1.0, 5.0, 2.0)
        (5.0, 2.23606797749979)
    """
    with ieee_arithmetic():
        a, ua, b, ub = as_scalars(precision, a_mean, a_unc, b_mean, b_unc)
        mean = a - b
        unc = np.sqrt(ua**2 + ub**2)
    return _finish(Operation.SUB.value, (a_mean, a_unc, b_mean, b_unc), mean, unc)


def propagate_mul(
    a_mean: float,
    a_unc: float,
    b_mean: float,
    b_unc: float,
    precision: Precision = DEFAULT_PRECISION,
) -> Propagated:
    """
    Умножение: u = sqrt(ua²·b² + ub²·a²).

    Examples:
        >>> propagate_mul(10.0, 1.0, 5.0, 2.0)
        (50.0, 20.615528128088304)
    """
    with ieee_arithmetic():
        a, ua, b, ub = as_scalars(precision, a_mean, a_unc, b_mean, b_unc)
        mean = a * b
        unc = np.sqrt(ua**2 * b**2 + ub**2 * a**2)
    return _finish(Operation.MUL.value, (a_mean, a_unc, b_mean, b_unc), mean, unc)


def propagate_div(
    a_mean: float,
    a_unc: float,
    b_mean: float,
    b_unc: float,
    precision: Precision = DEFAULT_PRECISION,
    rule: DivisionRule = DEFAULT_DIVISION_RULE,
) -> Propagated:
    """
    Деление.

    STANDARD: u = sqrt(ua²/b² + a²·(ub/b²)²), что эквивалентно
    |a/b|·sqrt((ua/a)² + (ub/b)²) для абсолютной неопределённости.

    LEGACY: u = sqrt(ua²/b² + a²·(ub·b²)²).

    Деление на b = 0 даёт ±Inf/NaN, исключение не выбрасывается.

    Examples:
        >>> propagate_div(10.0, 1.0, 5.0, 0.0)
        (2.0, 0.2)
        >>> propagate_div(10.0, 1.0, 0.0, 0.0)
        (inf, nan)
    """
    rule = DivisionRule(rule)

    with ieee_arithmetic():
        a, ua, b, ub = as_scalars(precision, a_mean, a_unc, b_mean, b_unc)
        mean = a / b
        if rule is DivisionRule.STANDARD:
            denominator_term = ub / b**2
        else:
            denominator_term = ub * b**2
        unc = np.sqrt(ua**2 / b**2 + a**2 * denominator_term**2)
    return _finish(Operation.DIV.value, (a_mean, a_unc, b_mean, b_unc), mean, unc)


# =============================================================================
# ЦЕЛАЯ СТЕПЕНЬ
# =============================================================================


def propagate_powi(
    mean: float,
    unc: float,
    n: int,
    precision: Precision = DEFAULT_PRECISION,
    rule: PowerRule = DEFAULT_POWER_RULE,
) -> Propagated:
    """
    Возведение в целую степень n.

    EXPONENT: u = sqrt(n²·a^(2n-2)·ua²) — первый порядок разложения aⁿ.
    LEGACY_CONSTANT: u = sqrt(2ⁿ·a^(2n-2)·ua²).

    Args:
        mean: Центральное значение
        unc: Родная неопределённость
        n: Целый показатель степени (может быть отрицательным или нулём)
        precision: Точность вычисления
        rule: Формула распространения

    Returns:
        (mean ** n, неопределённость результата)

    Raises:
        TypeError: Если n не целое число

    Examples:
        >>> propagate_powi(10.0, 1.0, 2)
        (100.0, 20.0)
    """
    n = validate_integer_exponent(n)
    rule = PowerRule(rule)
    dtype = Precision(precision).dtype

    with ieee_arithmetic():
        a, ua = as_scalars(precision, mean, unc)
        if rule is PowerRule.EXPONENT:
            factor = dtype(n) ** 2
        else:
            factor = dtype(2) ** dtype(n)
        result_mean = np.power(a, dtype(n))
        result_unc = np.sqrt(factor * np.power(a, dtype(2 * n - 2)) * ua**2)
    return _finish(f"powi({n})", (mean, unc), result_mean, result_unc)


# =============================================================================
# DISPATCH
# =============================================================================


_BINARY_RULES: Final[dict[Operation, Callable[..., Propagated]]] = {
    Operation.ADD: propagate_add,
    Operation.SUB: propagate_sub,
    Operation.MUL: propagate_mul,
    Operation.DIV: propagate_div,
}


def propagate(
    operation: Operation,
    a_mean: float,
    a_unc: float,
    b_mean: float,
    b_unc: float,
    precision: Precision = DEFAULT_PRECISION,
    division_rule: DivisionRule = DEFAULT_DIVISION_RULE,
) -> Propagated:
    """
    Применение правила распространения для бинарной операции.

    Args:
        operation: Операция (add/sub/mul/div)
        a_mean, a_unc: Левый операнд
        b_mean, b_unc: Правый операнд (уже в представлении левого)
        precision: Точность вычисления
        division_rule: Формула для деления (игнорируется для остальных операций)

    Returns:
        (mean, uncertainty) результата
    """
    operation = Operation(operation)
    func = _BINARY_RULES[operation]

    if operation is Operation.DIV:
        return func(a_mean, a_unc, b_mean, b_unc, precision, division_rule)
    return func(a_mean, a_unc, b_mean, b_unc, precision)


def combine(
    operation: Operation,
    left: Any,
    right: Any,
    division_rule: DivisionRule = DEFAULT_DIVISION_RULE,
) -> Any:
    """
    Бинарная операция над неопределёнными величинами.

    Правый операнд (другое представление или точный скаляр) сначала
    конвертируется в представление и точность левого, затем применяется
    правило распространения. Результат — новый экземпляр типа левого операнда.

    Args:
        operation: Операция (add/sub/mul/div)
        left: Левый операнд (AbsUncertainty или RelUncertainty)
        right: Правый операнд (любое неопределённое значение или скаляр)
        division_rule: Формула для деления

    Returns:
        Новое значение типа type(left)
    """
    representation = type(left)
    other = representation.from_value(right, precision=left.precision)

    mean, unc = propagate(
        operation,
        left.mean,
        left.uncertainty,
        other.mean,
        other.uncertainty,
        precision=left.precision,
        division_rule=division_rule,
    )
    return representation.new(mean, unc, precision=left.precision)
