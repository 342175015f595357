"""
Doubling Time — Время удвоения вложений

Количество периодов начисления, за которое сумма удваивается при
фиксированной ставке за период r.

ВАЖНО: r — ставка ЗА ПЕРИОД, а не годовая. Для счёта с ежемесячной
капитализацией нужна месячная ставка (годовая / 12), и результат будет
в месяцах, а не в годах. Вместо месячной ставки можно использовать
эффективную годовую ставку (APY), тогда результат — в годах.

ФОРМУЛЫ:
    сложный процент:        T = ln(2) / ln(1 + r)
    непрерывное начисление: T = ln(2) / r
    простой процент:        T = 1 / r
    правило 72:             T ≈ 72 / (100 × r)

Логарифмы считаются в float, затем переводятся в Decimal; финальное
деление выполняется в Decimal с точностью и округлением из
CalculationContext.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. r = 0 → InvalidRateError ДО любых вычислений
2. Других проверок нет: отрицательные r допустимы
3. r ≤ -1 не проверяется: ln(1 + r) не определён, math выбрасывает
   ValueError("math domain error"), который пробрасывается как есть
4. Глобальный decimal-контекст потока не используется и не изменяется

См. http://www.financeformulas.net/Doubling_Time.html
"""

import math
from decimal import Decimal
from typing import Final, Optional

from loguru import logger

from moneycalc.core.domain.rate import Rate, RateLike
from moneycalc.core.math.calculation_context import (
    DEFAULT_CALCULATION_CONTEXT,
    CalculationContext,
)
from moneycalc.core.math.numerical_safeguards import float_to_decimal, safe_log_growth

# ln(2) в double-точности, числитель всех формул удвоения
LN_2: Final[float] = math.log(2.0)

RULE_OF_72_NUMERATOR: Final[Decimal] = Decimal(72)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MoneyCalcError(Exception):
    """Базовое исключение финансовых расчётов."""


class InvalidRateError(MoneyCalcError):
    """
    Ставка не допускает расчёт.

    Единственный случай — нулевая ставка: знаменатель ln(1 + 0) = 0.
    Ошибка фатальна для вызова: частичный результат не возвращается.
    """

    def __init__(self, rate: Rate, message: Optional[str] = None):
        self.rate = rate
        super().__init__(
            message or f"Cannot calculate doubling time with a zero rate (rate={rate})"
        )


# =============================================================================
# HELPERS
# =============================================================================


def _require_non_zero(rate: RateLike) -> Rate:
    rate = Rate.of(rate)
    if rate.signum() == 0:
        logger.warning("Doubling time rejected: rate={} is zero", rate)
        raise InvalidRateError(rate)
    return rate


def _resolve_context(context: Optional[CalculationContext]) -> CalculationContext:
    return context if context is not None else DEFAULT_CALCULATION_CONTEXT


# =============================================================================
# DOUBLING TIME
# =============================================================================


def calculate_doubling_time(
    rate: RateLike,
    context: Optional[CalculationContext] = None,
) -> Decimal:
    """
    Количество периодов для удвоения суммы при сложном проценте.

    T = ln(2) / ln(1 + r)

    Args:
        rate: Ставка за период (Rate или число, например 0.05 для 5%)
        context: Точность и округление результата
            (default: DEFAULT_CALCULATION_CONTEXT)

    Returns:
        Количество периодов (может быть дробным) в единицах периода ставки

    Raises:
        InvalidRateError: если rate == 0
        ValueError: если rate ≤ -1 (ln не определён)
        decimal.DivisionByZero: если |rate| меньше минимального float
            (например, 1e-400): as_float() даёт 0.0 и ln(1 + r) = 0

    Examples:
        >>> calculate_doubling_time(1.0)
        Decimal('1')
    """
    rate = _require_non_zero(rate)
    context = _resolve_context(context)

    numerator = float_to_decimal(LN_2)
    denominator = float_to_decimal(safe_log_growth(rate.as_float()))

    periods = context.to_decimal_context().divide(numerator, denominator)

    logger.debug(
        "Doubling time: rate={}, context=({}), periods={}", rate, context, periods
    )
    return periods


def calculate_doubling_time_continuous(
    rate: RateLike,
    context: Optional[CalculationContext] = None,
) -> Decimal:
    """
    Время удвоения при непрерывном начислении процентов.

    T = ln(2) / r

    Raises:
        InvalidRateError: если rate == 0
    """
    rate = _require_non_zero(rate)
    context = _resolve_context(context)

    periods = context.to_decimal_context().divide(float_to_decimal(LN_2), rate.value)

    logger.debug(
        "Doubling time (continuous): rate={}, context=({}), periods={}",
        rate,
        context,
        periods,
    )
    return periods


def calculate_doubling_time_simple(
    rate: RateLike,
    context: Optional[CalculationContext] = None,
) -> Decimal:
    """
    Время удвоения при простом проценте (без капитализации).

    T = 1 / r

    Raises:
        InvalidRateError: если rate == 0
    """
    rate = _require_non_zero(rate)
    context = _resolve_context(context)

    periods = context.to_decimal_context().divide(Decimal(1), rate.value)

    logger.debug(
        "Doubling time (simple): rate={}, context=({}), periods={}",
        rate,
        context,
        periods,
    )
    return periods


def rule_of_72(
    rate: RateLike,
    context: Optional[CalculationContext] = None,
) -> Decimal:
    """
    Оценка времени удвоения по правилу 72.

    T ≈ 72 / (100 × r)

    Достаточно точна для ставок 6-10% за период; для сравнения с точной
    формулой используйте calculate_doubling_time.

    Raises:
        InvalidRateError: если rate == 0

    Examples:
        >>> rule_of_72(0.08)
        Decimal('9')
    """
    rate = _require_non_zero(rate)
    context = _resolve_context(context)
    decimal_context = context.to_decimal_context()

    percent = decimal_context.multiply(rate.value, Decimal(100))
    periods = decimal_context.divide(RULE_OF_72_NUMERATOR, percent)

    logger.debug(
        "Doubling time (rule of 72): rate={}, context=({}), periods={}",
        rate,
        context,
        periods,
    )
    return periods
