"""
Contract Validation Module

Модуль для валидации JSON записей неопределённых величин.
"""

from .validators import (
    AbsUncertaintyValidator,
    ContractValidator,
    RelUncertaintyValidator,
    SchemaLoader,
    validate_abs_uncertainty,
    validate_rel_uncertainty,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AbsUncertaintyValidator",
    "RelUncertaintyValidator",
    # Functions
    "validate_abs_uncertainty",
    "validate_rel_uncertainty",
]
