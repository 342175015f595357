"""
Core math modules для moneycalc

Финансовые формулы и численные примитивы с явным контекстом Decimal-арифметики.
"""

# Numerical Safeguards
from moneycalc.core.math.numerical_safeguards import (
    LOG1P_SWITCH_THRESHOLD,
    float_to_decimal,
    is_valid_float,
    safe_log_growth,
    validate_finite,
)

# Calculation Context
from moneycalc.core.math.calculation_context import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    DEFAULT_CALCULATION_CONTEXT,
    DEFAULT_PRECISION,
    MAX_PRECISION,
    CalculationContext,
    RoundingMode,
)

# Doubling Time
from moneycalc.core.math.doubling_time import (
    LN_2,
    InvalidRateError,
    MoneyCalcError,
    calculate_doubling_time,
    calculate_doubling_time_continuous,
    calculate_doubling_time_simple,
    rule_of_72,
)

__all__ = [
    # Numerical Safeguards
    "LOG1P_SWITCH_THRESHOLD",
    "float_to_decimal",
    "is_valid_float",
    "safe_log_growth",
    "validate_finite",
    # Calculation Context — Constants
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "DEFAULT_CALCULATION_CONTEXT",
    "DEFAULT_PRECISION",
    "MAX_PRECISION",
    # Calculation Context — Types
    "CalculationContext",
    "RoundingMode",
    # Doubling Time — Constants
    "LN_2",
    # Doubling Time — Exceptions
    "InvalidRateError",
    "MoneyCalcError",
    # Doubling Time — Functions
    "calculate_doubling_time",
    "calculate_doubling_time_continuous",
    "calculate_doubling_time_simple",
    "rule_of_72",
]
