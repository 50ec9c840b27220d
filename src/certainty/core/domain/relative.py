"""
RelUncertainty — относительная неопределённость

Величина, характеризуемая центральной оценкой (mean) и коэффициентом
вариации (coefficient_of_variation) — стандартным отклонением, выраженным
как безразмерная доля mean.

Конверсия в абсолютную форму:
    standard_deviation = |coefficient_of_variation × mean|

Конверсия определена для всех конечных значений. Для любого mean != 0
Abs → Rel → Abs и Rel → Abs → Rel воспроизводят исходные компоненты
с точностью до округления.
"""

from typing import Any, ClassVar

from pydantic import AliasChoices, Field, ValidationInfo, field_validator

from certainty.core.domain.absolute import AbsUncertainty
from certainty.core.domain.uncertainty import (
    DEFAULT_FORMAT_SPEC,
    Uncertainty,
    normalize_uncertainty,
)
from certainty.core.math.numerical_safeguards import (
    DEFAULT_PRECISION,
    Precision,
    ieee_multiply,
    is_certain_scalar,
)


class RelUncertainty(Uncertainty):
    """
    Относительная неопределённость: mean ± coefficient_of_variation·100%.

    Immutable модель (frozen=True). Арифметика применяет правила
    распространения непосредственно к коэффициенту вариации (родной
    неопределённости представления).

    Examples:
        >>> x = RelUncertainty.new(10.0, 0.1)
        >>> x.standard_deviation
        1.0
        >>> str(x)
        '10.00 ± 10.00%'
    """

    NATIVE_FIELD: ClassVar[str] = "coefficient_of_variation"

    coefficient_of_variation: float = Field(
        ...,
        validation_alias=AliasChoices("coefficient_of_variation", "uncertainty"),
        description="Коэффициент вариации (доля mean, >= 0)",
    )

    @field_validator("coefficient_of_variation")
    @classmethod
    def normalize_coefficient_of_variation(cls, v: float, info: ValidationInfo) -> float:
        return normalize_uncertainty(v, info)

    @classmethod
    def from_value(
        cls, value: Any, precision: Precision | None = None
    ) -> "RelUncertainty":
        if isinstance(value, Uncertainty):
            target = Precision(precision or value.precision)
            if isinstance(value, cls) and value.precision is target:
                return value
            return cls.new(value.mean, value.coefficient_of_variation, precision=target)

        if is_certain_scalar(value):
            return cls.new(value, 0.0, precision=precision or DEFAULT_PRECISION)

        raise TypeError(
            f"cannot convert {type(value).__name__} to {cls.__name__}"
        )

    @property
    def standard_deviation(self) -> float:
        """Стандартное отклонение в единицах mean (>= 0)"""
        return abs(ieee_multiply(self.coefficient_of_variation, self.mean, self.precision))

    @property
    def uncertainty(self) -> float:
        # Родная неопределённость относительной формы
        return self.coefficient_of_variation

    def to_absolute(self) -> AbsUncertainty:
        return AbsUncertainty.from_value(self)

    def to_relative(self) -> "RelUncertainty":
        return self

    def __format__(self, format_spec: str) -> str:
        spec = format_spec or DEFAULT_FORMAT_SPEC
        percent = ieee_multiply(self.coefficient_of_variation, 100.0, self.precision)
        return f"{self.mean:{spec}} ± {percent:{spec}}%"
