"""
Domain models and value objects.

Неопределённые величины (абсолютная и относительная формы) и адаптер
точных скаляров.
"""

from certainty.core.domain.absolute import AbsUncertainty
from certainty.core.domain.certain import (
    coefficient_of_variation,
    is_certain,
    mean,
    powi,
    standard_deviation,
    to_absolute,
    to_relative,
    to_scalar,
    uncertainty,
)
from certainty.core.domain.relative import RelUncertainty
from certainty.core.domain.uncertainty import DEFAULT_FORMAT_SPEC, Uncertainty

__all__ = [
    # Models
    "Uncertainty",
    "AbsUncertainty",
    "RelUncertainty",
    "DEFAULT_FORMAT_SPEC",
    # Certain-value adapter
    "mean",
    "standard_deviation",
    "coefficient_of_variation",
    "uncertainty",
    "is_certain",
    "powi",
    "to_absolute",
    "to_relative",
    "to_scalar",
]
