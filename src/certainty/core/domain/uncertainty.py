"""
Uncertainty — общий контракт неопределённых величин

Immutable Pydantic модель-основа для AbsUncertainty и RelUncertainty.

Контракт:
- new(mean, uncertainty) — конструктор; смысл uncertainty зависит от
  представления, знак всегда нормализуется (берётся модуль)
- mean — центральная оценка
- standard_deviation — погрешность в единицах mean
- coefficient_of_variation — погрешность как доля mean
- uncertainty — погрешность в "родных" единицах представления
- is_certain() — True iff uncertainty == 0
- powi(n) — целая степень с распространением неопределённости
- to_absolute() / to_relative() / from_value() — конверсии без потерь

Арифметика (+ - * / **) принимает справа любое неопределённое значение или
точный скаляр и возвращает результат в представлении левого операнда.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Родная неопределённость >= 0 (или NaN) после конструирования
2. Компоненты точно представимы в заданной точности (float32/float64)
3. Экземпляры неизменяемы: каждая операция создаёт новый экземпляр
4. Численные операции не выбрасывают исключений (NaN/±Inf по IEEE-754)
"""

import numbers
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Final

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from certainty.core.math.numerical_safeguards import (
    DEFAULT_PRECISION,
    Precision,
    is_certain_scalar,
    is_valid_float,
    to_precision,
)
from certainty.core.math.propagation import (
    DEFAULT_DIVISION_RULE,
    DEFAULT_POWER_RULE,
    DivisionRule,
    Operation,
    PowerRule,
    combine,
    propagate_powi,
)

# Формат по умолчанию для str() и format() с пустой спецификацией
DEFAULT_FORMAT_SPEC: Final[str] = ".2f"


class Uncertainty(BaseModel, ABC):
    """
    Базовая модель неопределённой величины.

    Наследники объявляют поле родной неопределённости (NATIVE_FIELD) и
    реализуют конверсии. Общая арифметика, нормализация и сериализация
    живут здесь.
    """

    # Имя поля родной неопределённости в наследнике
    NATIVE_FIELD: ClassVar[str]

    # precision объявлена первой: валидаторы компонент читают её из info.data
    precision: Precision = Field(
        default=DEFAULT_PRECISION,
        description="Точность хранения и вычислений (single/double)",
    )
    mean: float = Field(
        ...,
        validation_alias=AliasChoices("mean", "value"),
        description="Центральная оценка величины",
    )

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @model_validator(mode="before")
    @classmethod
    def coerce_real_scalars(cls, data: Any) -> Any:
        """
        Приведение вещественных скаляров (int, numpy float) к float.

        Строки и прочие типы остаются на lax-валидацию pydantic.
        """
        if not isinstance(data, dict):
            return data

        coerced = dict(data)
        for key, value in data.items():
            if is_certain_scalar(value):
                coerced[key] = float(value)
        return coerced

    @field_validator("mean")
    @classmethod
    def round_mean(cls, v: float, info: ValidationInfo) -> float:
        """Округление центральной оценки до точности модели"""
        return to_precision(v, _precision_of(info))

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def new(
        cls,
        mean: float,
        uncertainty: float,
        precision: Precision = DEFAULT_PRECISION,
    ) -> "Uncertainty":
        """
        Создание значения из центральной оценки и родной неопределённости.

        Args:
            mean: Центральная оценка
            uncertainty: Неопределённость в родных единицах представления
                (знак игнорируется)
            precision: Точность хранения

        Returns:
            Новый экземпляр
        """
        return cls(mean=mean, precision=precision, **{cls.NATIVE_FIELD: uncertainty})

    @classmethod
    def zero(cls, precision: Precision = DEFAULT_PRECISION) -> "Uncertainty":
        """Нейтральный элемент сложения: 0 без неопределённости"""
        return cls.new(0.0, 0.0, precision=precision)

    @classmethod
    @abstractmethod
    def from_value(cls, value: Any, precision: Precision | None = None) -> "Uncertainty":
        """
        Конверсия любого неопределённого значения или точного скаляра.

        Args:
            value: AbsUncertainty, RelUncertainty или вещественный скаляр
            precision: Целевая точность (по умолчанию — точность value)

        Raises:
            TypeError: Если value не является ни тем, ни другим
        """

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    @abstractmethod
    def uncertainty(self) -> float:
        """Неопределённость в родных единицах представления"""

    def is_certain(self) -> bool:
        """True если неопределённость равна нулю"""
        return self.uncertainty == 0.0

    def is_zero(self) -> bool:
        """True если центральная оценка равна нулю"""
        return self.mean == 0.0

    def is_finite(self) -> bool:
        """True если обе компоненты конечны (не NaN, не Inf)"""
        return is_valid_float(self.mean) and is_valid_float(self.uncertainty)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @abstractmethod
    def to_absolute(self) -> "Uncertainty":
        """Представление со standard deviation"""

    @abstractmethod
    def to_relative(self) -> "Uncertainty":
        """Представление с coefficient of variation"""

    def __float__(self) -> float:
        # Отбрасывание неопределённости
        return self.mean

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def powi(self, n: int, rule: PowerRule = DEFAULT_POWER_RULE) -> "Uncertainty":
        """
        Возведение в целую степень с распространением неопределённости.

        Args:
            n: Целый показатель степени
            rule: Формула распространения (EXPONENT по умолчанию)

        Returns:
            Новое значение того же представления и точности

        Raises:
            TypeError: Если n не целое число
        """
        mean, unc = propagate_powi(
            self.mean, self.uncertainty, n, precision=self.precision, rule=rule
        )
        return self.new(mean, unc, precision=self.precision)

    def divide(self, other: Any, rule: DivisionRule = DEFAULT_DIVISION_RULE) -> "Uncertainty":
        """
        Деление с явным выбором формулы распространения.

        Оператор / использует DEFAULT_DIVISION_RULE.

        Raises:
            TypeError: Если other не неопределённое значение и не скаляр
        """
        if not _is_operand(other):
            raise TypeError(
                f"unsupported operand type for divide: {type(other).__name__}"
            )
        return combine(Operation.DIV, self, other, division_rule=rule)

    def __add__(self, other: Any) -> "Uncertainty":
        if not _is_operand(other):
            return NotImplemented
        return combine(Operation.ADD, self, other)

    def __sub__(self, other: Any) -> "Uncertainty":
        if not _is_operand(other):
            return NotImplemented
        return combine(Operation.SUB, self, other)

    def __mul__(self, other: Any) -> "Uncertainty":
        if not _is_operand(other):
            return NotImplemented
        return combine(Operation.MUL, self, other)

    def __truediv__(self, other: Any) -> "Uncertainty":
        if not _is_operand(other):
            return NotImplemented
        return combine(Operation.DIV, self, other)

    # Скаляр слева: повышается до представления правого операнда
    def __radd__(self, other: Any) -> "Uncertainty":
        if not is_certain_scalar(other):
            return NotImplemented
        return combine(Operation.ADD, self._promote(other), self)

    def __rsub__(self, other: Any) -> "Uncertainty":
        if not is_certain_scalar(other):
            return NotImplemented
        return combine(Operation.SUB, self._promote(other), self)

    def __rmul__(self, other: Any) -> "Uncertainty":
        if not is_certain_scalar(other):
            return NotImplemented
        return combine(Operation.MUL, self._promote(other), self)

    def __rtruediv__(self, other: Any) -> "Uncertainty":
        if not is_certain_scalar(other):
            return NotImplemented
        return combine(Operation.DIV, self._promote(other), self)

    def __pow__(self, n: Any) -> "Uncertainty":
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            return NotImplemented
        return self.powi(n)

    def _promote(self, scalar: float) -> "Uncertainty":
        return type(self).from_value(scalar, precision=self.precision)

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return format(self, "")

    @abstractmethod
    def __format__(self, format_spec: str) -> str:
        ...


def _is_operand(value: Any) -> bool:
    return isinstance(value, Uncertainty) or is_certain_scalar(value)


def _precision_of(info: ValidationInfo) -> Precision:
    # Если precision не прошла валидацию, её ошибка уже в отчёте
    return info.data.get("precision", DEFAULT_PRECISION)


def normalize_uncertainty(v: float, info: ValidationInfo) -> float:
    """
    Нормализация родной неопределённости после приведения типа.

    Берётся модуль (NaN остаётся NaN), затем округление до точности модели.
    Вызывается из field_validator поля родной неопределённости наследника.
    """
    return to_precision(abs(v), _precision_of(info))
