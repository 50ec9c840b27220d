"""
certainty — числовые величины с аналитически распространяемой неопределённостью

Две формы представления:
- AbsUncertainty: mean ± standard deviation (в единицах mean)
- RelUncertainty: mean ± coefficient of variation (доля mean)

Точные скаляры (float, int, numpy float) участвуют в тех же выражениях как
величины с нулевой неопределённостью.

Examples:
    >>> from certainty import AbsUncertainty, RelUncertainty
    >>> x = AbsUncertainty.new(10.0, 1.0)
    >>> y = AbsUncertainty.new(5.0, 2.0)
    >>> str(x * y)
    '50.00 ± 20.62'
    >>> str(RelUncertainty.from_value(x))
    '10.00 ± 10.00%'
"""

from certainty.core.domain import (
    AbsUncertainty,
    RelUncertainty,
    Uncertainty,
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
from certainty.core.math import (
    DEFAULT_DIVISION_RULE,
    DEFAULT_POWER_RULE,
    DEFAULT_PRECISION,
    DivisionRule,
    PowerRule,
    Precision,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "Uncertainty",
    "AbsUncertainty",
    "RelUncertainty",
    # Configuration
    "Precision",
    "DivisionRule",
    "PowerRule",
    "DEFAULT_PRECISION",
    "DEFAULT_DIVISION_RULE",
    "DEFAULT_POWER_RULE",
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
