"""
CalculationContext — Контекст Decimal-арифметики

Immutable Pydantic модель: точность (значащие цифры) + режим округления.

Контекст передаётся в расчёты явно и никогда не подменяет глобальный
decimal-контекст потока: каждый вызов получает свой decimal.Context через
to_decimal_context(). Поэтому расчёты можно вызывать из нескольких потоков
без синхронизации.

Пресеты повторяют стандартные IEEE 754-2008 decimal форматы:
- DECIMAL32:  7 цифр, HALF_EVEN
- DECIMAL64:  16 цифр, HALF_EVEN (default)
- DECIMAL128: 34 цифры, HALF_EVEN
"""

import decimal
from enum import Enum
from typing import Any, Final, Mapping

from pydantic import BaseModel, Field

from moneycalc.core.contracts import validate_calculation_context


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления Decimal-арифметики."""

    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    ZERO_FIVE_UP = "ZERO_FIVE_UP"

    @property
    def decimal_rounding(self) -> str:
        """Соответствующая константа модуля decimal."""
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING: Final[dict[RoundingMode, str]] = {
    RoundingMode.UP: decimal.ROUND_UP,
    RoundingMode.DOWN: decimal.ROUND_DOWN,
    RoundingMode.CEILING: decimal.ROUND_CEILING,
    RoundingMode.FLOOR: decimal.ROUND_FLOOR,
    RoundingMode.HALF_UP: decimal.ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: decimal.ROUND_HALF_EVEN,
    RoundingMode.ZERO_FIVE_UP: decimal.ROUND_05UP,
}


# =============================================================================
# CALCULATION CONTEXT
# =============================================================================

# Верхняя граница точности: decimal.MAX_PREC зависит от платформы,
# а расчёт с миллионами цифр бессмыслен для log в double-точности
MAX_PRECISION: Final[int] = 1000

DEFAULT_PRECISION: Final[int] = 16


class CalculationContext(BaseModel):
    """
    Контекст расчёта: точность и режим округления.

    Immutable модель (frozen=True); изменения — только через model_copy.
    """

    precision: int = Field(
        DEFAULT_PRECISION,
        ge=1,
        le=MAX_PRECISION,
        description="Количество значащих цифр результата",
    )
    rounding: RoundingMode = Field(
        RoundingMode.HALF_EVEN, description="Режим округления"
    )

    model_config = {"frozen": True}

    def to_decimal_context(self) -> decimal.Context:
        """
        Новый decimal.Context для одного расчёта.

        Ловушки DivisionByZero/InvalidOperation/Overflow включены, поэтому
        невалидная операция выбрасывает исключение, а не возвращает NaN/Inf.
        """
        return decimal.Context(
            prec=self.precision,
            rounding=self.rounding.decimal_rounding,
            traps=[
                decimal.DivisionByZero,
                decimal.InvalidOperation,
                decimal.Overflow,
            ],
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CalculationContext":
        """
        Создание контекста из dict (например, распарсенного JSON).

        Данные валидируются по контракту calculation_context.json;
        отсутствующие ключи получают значения по умолчанию.

        Raises:
            jsonschema.ValidationError: если data не соответствует контракту

        Examples:
            >>> CalculationContext.from_mapping({"precision": 7, "rounding": "HALF_UP"})
            CalculationContext(precision=7, rounding=<RoundingMode.HALF_UP: 'HALF_UP'>)
        """
        validate_calculation_context(dict(data))
        return cls(**data)

    def __str__(self) -> str:
        return f"precision={self.precision}, rounding={self.rounding.value}"


# =============================================================================
# ПРЕСЕТЫ
# =============================================================================

DECIMAL32: Final[CalculationContext] = CalculationContext(
    precision=7, rounding=RoundingMode.HALF_EVEN
)
DECIMAL64: Final[CalculationContext] = CalculationContext(
    precision=16, rounding=RoundingMode.HALF_EVEN
)
DECIMAL128: Final[CalculationContext] = CalculationContext(
    precision=34, rounding=RoundingMode.HALF_EVEN
)

DEFAULT_CALCULATION_CONTEXT: Final[CalculationContext] = DECIMAL64
