"""
Core math modules для certainty

IEEE-754 примитивы и правила распространения неопределённости.
"""

# Numerical Safeguards
from certainty.core.math.numerical_safeguards import (
    # Precision
    DEFAULT_PRECISION,
    Precision,
    # Epsilon constants
    EPS_FLOAT32_COMPARE_ABS,
    EPS_FLOAT32_COMPARE_REL,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # IEEE-754 arithmetic
    as_scalars,
    ieee_arithmetic,
    ieee_divide,
    ieee_multiply,
    ieee_power,
    to_precision,
    # Checks
    is_certain_scalar,
    is_close,
    is_valid_float,
    tolerances_for,
    validate_integer_exponent,
)

# Propagation
from certainty.core.math.propagation import (
    DEFAULT_DIVISION_RULE,
    DEFAULT_POWER_RULE,
    DivisionRule,
    Operation,
    PowerRule,
    Propagated,
    combine,
    propagate,
    propagate_add,
    propagate_div,
    propagate_mul,
    propagate_powi,
    propagate_sub,
)

__all__ = [
    # Numerical Safeguards — Precision
    "DEFAULT_PRECISION",
    "Precision",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT32_COMPARE_ABS",
    "EPS_FLOAT32_COMPARE_REL",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — IEEE-754 arithmetic
    "as_scalars",
    "ieee_arithmetic",
    "ieee_divide",
    "ieee_multiply",
    "ieee_power",
    "to_precision",
    # Numerical Safeguards — Checks
    "is_certain_scalar",
    "is_close",
    "is_valid_float",
    "tolerances_for",
    "validate_integer_exponent",
    # Propagation — Constants
    "DEFAULT_DIVISION_RULE",
    "DEFAULT_POWER_RULE",
    # Propagation — Types
    "DivisionRule",
    "Operation",
    "PowerRule",
    "Propagated",
    # Propagation — Functions
    "combine",
    "propagate",
    "propagate_add",
    "propagate_div",
    "propagate_mul",
    "propagate_powi",
    "propagate_sub",
]
