"""
AbsUncertainty — абсолютная неопределённость

Величина, характеризуемая центральной оценкой (mean) и стандартным
отклонением (standard_deviation) в тех же единицах, что и mean.

Конверсия в относительную форму:
    coefficient_of_variation = standard_deviation / mean

При mean == 0 результат — NaN (0/0) или Inf, без защиты.
"""

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import AliasChoices, Field, ValidationInfo, field_validator

from certainty.core.domain.uncertainty import (
    DEFAULT_FORMAT_SPEC,
    Uncertainty,
    normalize_uncertainty,
)
from certainty.core.math.numerical_safeguards import (
    DEFAULT_PRECISION,
    Precision,
    ieee_divide,
    is_certain_scalar,
)

if TYPE_CHECKING:
    from certainty.core.domain.relative import RelUncertainty


class AbsUncertainty(Uncertainty):
    """
    Абсолютная неопределённость: mean ± standard_deviation.

    Immutable модель (frozen=True). Все арифметические операции создают
    новый экземпляр в абсолютном представлении.

    Examples:
        >>> x = AbsUncertainty.new(10.0, 1.0)
        >>> str(x + AbsUncertainty.new(5.0, 2.0))
        '15.00 ± 2.24'
    """

    NATIVE_FIELD: ClassVar[str] = "standard_deviation"

    standard_deviation: float = Field(
        ...,
        validation_alias=AliasChoices("standard_deviation", "uncertainty"),
        description="Стандартное отклонение (в единицах mean, >= 0)",
    )

    @field_validator("standard_deviation")
    @classmethod
    def normalize_standard_deviation(cls, v: float, info: ValidationInfo) -> float:
        return normalize_uncertainty(v, info)

    @classmethod
    def from_value(
        cls, value: Any, precision: Precision | None = None
    ) -> "AbsUncertainty":
        if isinstance(value, Uncertainty):
            target = Precision(precision or value.precision)
            if isinstance(value, cls) and value.precision is target:
                return value
            return cls.new(value.mean, value.standard_deviation, precision=target)

        if is_certain_scalar(value):
            return cls.new(value, 0.0, precision=precision or DEFAULT_PRECISION)

        raise TypeError(
            f"cannot convert {type(value).__name__} to {cls.__name__}"
        )

    @property
    def coefficient_of_variation(self) -> float:
        """Стандартное отклонение как доля mean (со знаком mean)"""
        return ieee_divide(self.standard_deviation, self.mean, self.precision)

    @property
    def uncertainty(self) -> float:
        # Родная неопределённость абсолютной формы
        return self.standard_deviation

    def to_absolute(self) -> "AbsUncertainty":
        return self

    def to_relative(self) -> "RelUncertainty":
        # relative.py импортирует этот модуль
        from certainty.core.domain.relative import RelUncertainty

        return RelUncertainty.from_value(self)

    def __format__(self, format_spec: str) -> str:
        spec = format_spec or DEFAULT_FORMAT_SPEC
        return f"{self.mean:{spec}} ± {self.standard_deviation:{spec}}"
