"""
Contract Validation Module

Модуль для валидации JSON контрактов входных данных moneycalc.
"""

from .validators import (
    CalculationContextValidator,
    ContractValidator,
    RateValidator,
    SchemaLoader,
    validate_calculation_context,
    validate_rate,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculationContextValidator",
    "RateValidator",
    # Functions
    "validate_calculation_context",
    "validate_rate",
]
