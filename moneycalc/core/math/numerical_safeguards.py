"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость расчётов доходности:
- NaN/Inf проверка входов до вызова log/log1p
- Численно стабильный расчёт ln(1 + r) с переключением на log1p
- Перевод float → Decimal без артефактов двоичного представления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в Decimal-арифметику (ValueError)
2. log1p используется для |r| < LOG1P_SWITCH_THRESHOLD
3. float → Decimal идёт через кратчайший repr (0.1 → Decimal('0.1'))
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import Decimal
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Порог переключения между log(1+r) и log1p(r) для численной стабильности
# Если |r| < LOG1P_SWITCH_THRESHOLD → используем log1p(r)
# Иначе → используем log(1 + r)
LOG1P_SWITCH_THRESHOLD: Final[float] = 0.01


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str = "value") -> float:
    """
    Валидация: значение должно быть конечным.

    Raises:
        ValueError: если value содержит NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} contains NaN/Inf: {value}")
    return value


# =============================================================================
# LOG-GROWTH
# =============================================================================


def safe_log_growth(r: float) -> float:
    """
    Численно стабильное вычисление ln(1 + r).

    - Если |r| < LOG1P_SWITCH_THRESHOLD → log1p(r)
    - Иначе → log(1 + r)

    Доменная проверка (r > -1) НЕ выполняется: при r ≤ -1 стандартный
    math выбрасывает ValueError("math domain error"), который пробрасывается
    вызывающему без изменений.

    Args:
        r: Ставка за период (безразмерная, например 0.05 для 5%)

    Returns:
        ln(1 + r)

    Raises:
        ValueError: если r содержит NaN/Inf или r ≤ -1

    Examples:
        >>> safe_log_growth(0.0)
        0.0
        >>> abs(safe_log_growth(0.05) - 0.04879) < 1e-5
        True
        >>> safe_log_growth(1.0) == math.log(2.0)
        True
    """
    validate_finite(r, name="Rate")

    if abs(r) < LOG1P_SWITCH_THRESHOLD:
        # Для малых r: 1.0 + r теряет значащие разряды, log1p — нет
        return math.log1p(r)
    return math.log(1.0 + r)


# =============================================================================
# FLOAT → DECIMAL
# =============================================================================


def float_to_decimal(value: float) -> Decimal:
    """
    Перевод float в Decimal через кратчайшее десятичное представление.

    Decimal(0.1) даёт точное двоичное значение
    (0.1000000000000000055511151231257827...), поэтому используется repr:
    Decimal(repr(0.1)) == Decimal('0.1').

    Raises:
        ValueError: если value содержит NaN/Inf

    Examples:
        >>> float_to_decimal(0.05)
        Decimal('0.05')
        >>> float_to_decimal(2.0)
        Decimal('2.0')
    """
    validate_finite(value)
    return Decimal(repr(float(value)))
