"""
Numerical Safeguards — IEEE-754 примитивы для распространения неопределённости

Модуль обеспечивает численную основу для всех операций над неопределёнными
величинами:
- Точность вычислений (single = float32, double = float64)
- Деление, умножение и возведение в степень без исключений (IEEE-754)
- Проверки конечности и принадлежности к "точным" скалярам
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна арифметическая операция не выбрасывает исключение:
   деление на ноль, переполнение и невалидные операции дают ±Inf/NaN
2. NaN/Inf пропагируют дальше без изменений (никакой санитизации)
3. Результат всегда округлён до заданной точности
4. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from enum import Enum
from typing import Final

import numpy as np

# =============================================================================
# ТОЧНОСТЬ
# =============================================================================


class Precision(str, Enum):
    """Точность хранения и вычислений"""

    SINGLE = "single"  # float32
    DOUBLE = "double"  # float64

    @property
    def dtype(self) -> type[np.floating]:
        """numpy-тип, соответствующий точности"""
        if self is Precision.SINGLE:
            return np.float32
        return np.float64


DEFAULT_PRECISION: Final[Precision] = Precision.DOUBLE


# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float64
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float64
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Толерантности для float32 (~7 значащих цифр)
EPS_FLOAT32_COMPARE_REL: Final[float] = 1e-5
EPS_FLOAT32_COMPARE_ABS: Final[float] = 1e-6


# =============================================================================
# IEEE-754 АРИФМЕТИКА
# =============================================================================


def ieee_arithmetic() -> np.errstate:
    """
    Контекст, в котором numpy следует IEEE-754 без предупреждений.

    Деление на ноль, переполнение, потеря значимости и невалидные операции
    дают ±Inf/NaN молча. Чистые Python float в тех же ситуациях бросают
    ZeroDivisionError/OverflowError, поэтому вся арифметика с
    неопределённостями выполняется над numpy-скалярами внутри этого контекста.

    Examples:
        >>> with ieee_arithmetic():
        ...     float(np.float64(1.0) / np.float64(0.0))
        inf
    """
    return np.errstate(all="ignore")


def as_scalars(precision: Precision, *values: float) -> tuple[np.floating, ...]:
    """
    Приведение значений к numpy-скалярам заданной точности.

    Вызывать внутри ieee_arithmetic(): переполнение при приведении к float32
    даёт Inf.

    Args:
        precision: Целевая точность
        *values: Исходные значения (float, int, numpy-скаляры)

    Returns:
        Кортеж numpy-скаляров того же порядка
    """
    dtype = Precision(precision).dtype
    return tuple(dtype(value) for value in values)


def to_precision(value: float, precision: Precision = DEFAULT_PRECISION) -> float:
    """
    Округление значения до заданной точности.

    Результат — Python float, точно представимый в целевом формате.

    Examples:
        >>> to_precision(0.1, Precision.DOUBLE)
        0.1
        >>> to_precision(0.1, Precision.SINGLE)
        0.10000000149011612
        >>> to_precision(1e40, Precision.SINGLE)
        inf
    """
    with ieee_arithmetic():
        (scalar,) = as_scalars(precision, value)
    return float(scalar)


def ieee_divide(
    numerator: float,
    denominator: float,
    precision: Precision = DEFAULT_PRECISION,
) -> float:
    """
    Деление по правилам IEEE-754.

    В отличие от safe-деления, знаменатель не защищается: x/0 даёт ±Inf,
    0/0 даёт NaN. Исключения не выбрасываются.

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
    """
    with ieee_arithmetic():
        num, den = as_scalars(precision, numerator, denominator)
        result = num / den
    return float(result)


def ieee_multiply(a: float, b: float, precision: Precision = DEFAULT_PRECISION) -> float:
    """Умножение с округлением до заданной точности (переполнение → ±Inf)"""
    with ieee_arithmetic():
        x, y = as_scalars(precision, a, b)
        result = x * y
    return float(result)


def ieee_power(base: float, exponent: int, precision: Precision = DEFAULT_PRECISION) -> float:
    """
    Целая степень по правилам IEEE-754.

    0 ** -n даёт Inf, переполнение даёт ±Inf (Python бросил бы
    ZeroDivisionError/OverflowError).

    Args:
        base: Основание
        exponent: Целый показатель степени
        precision: Точность вычисления

    Returns:
        base ** exponent

    Raises:
        TypeError: Если exponent не целое число
    """
    exponent = validate_integer_exponent(exponent)
    with ieee_arithmetic():
        (x,) = as_scalars(precision, base)
        result = np.power(x, Precision(precision).dtype(exponent))
    return float(result)


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_certain_scalar(value: object) -> bool:
    """
    Является ли значение "точным" скаляром (вещественное число без погрешности).

    Подходят float, int и numpy-скаляры с плавающей точкой. bool исключён:
    True/False не являются измеренными величинами.

    Examples:
        >>> is_certain_scalar(1.5)
        True
        >>> is_certain_scalar(np.float32(1.5))
        True
        >>> is_certain_scalar(True)
        False
        >>> is_certain_scalar("1.5")
        False
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def validate_integer_exponent(exponent: object) -> int:
    """
    Валидация целого показателя степени.

    Args:
        exponent: Показатель степени

    Returns:
        Показатель как int

    Raises:
        TypeError: Если показатель не целое число (bool тоже отклоняется)
    """
    if isinstance(exponent, (bool, np.bool_)) or not isinstance(exponent, numbers.Integral):
        raise TypeError(
            f"exponent must be an integer, got {type(exponent).__name__}"
        )
    return int(exponent)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def tolerances_for(precision: Precision) -> tuple[float, float]:
    """
    Толерантности сравнения (rel_tol, abs_tol) для заданной точности.

    Examples:
        >>> tolerances_for(Precision.DOUBLE)
        (1e-09, 1e-12)
        >>> tolerances_for(Precision.SINGLE)
        (1e-05, 1e-06)
    """
    if Precision(precision) is Precision.SINGLE:
        return EPS_FLOAT32_COMPARE_REL, EPS_FLOAT32_COMPARE_ABS
    return EPS_FLOAT_COMPARE_REL, EPS_FLOAT_COMPARE_ABS


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Бесконечности равны только самим себе, NaN не равен ничему
    (семантика math.isclose).

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(float("inf"), float("inf"))
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
