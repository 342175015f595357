"""
moneycalc — финансовые формулы с явным контекстом Decimal-арифметики.

Основная операция — время удвоения вложений при ставке за период:

    >>> from moneycalc import Rate, calculate_doubling_time
    >>> calculate_doubling_time(Rate.of(1.0))
    Decimal('1')
"""

from loguru import logger

from moneycalc.core.domain import Rate
from moneycalc.core.math import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    DEFAULT_CALCULATION_CONTEXT,
    CalculationContext,
    InvalidRateError,
    MoneyCalcError,
    RoundingMode,
    calculate_doubling_time,
    calculate_doubling_time_continuous,
    calculate_doubling_time_simple,
    rule_of_72,
)

__version__ = "0.1.0"

# Библиотека молчит, пока приложение не вызовет monitoring.setup_logging
logger.disable("moneycalc")

__all__ = [
    "Rate",
    "CalculationContext",
    "RoundingMode",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "DEFAULT_CALCULATION_CONTEXT",
    "MoneyCalcError",
    "InvalidRateError",
    "calculate_doubling_time",
    "calculate_doubling_time_continuous",
    "calculate_doubling_time_simple",
    "rule_of_72",
]
