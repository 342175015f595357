"""
Rate — Ставка за период

Immutable Pydantic модель: знаковое Decimal значение ставки за период
начисления (например, 0.05 = 5% за период).

Период не фиксирован: месячная ставка даёт результаты расчётов в месяцах,
годовая — в годах. Годовая ставка при ежемесячной капитализации должна
быть предварительно приведена к месячной (annual / 12).
"""

from decimal import Decimal
from typing import Any, Mapping, Union

from pydantic import BaseModel, Field

from moneycalc.core.contracts import validate_rate

RateLike = Union["Rate", Decimal, int, float, str]


def _shift_point(value: Decimal, places: int) -> Decimal:
    """Сдвиг десятичной точки без округления и без decimal-контекста."""
    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + places))


class Rate(BaseModel):
    """
    Ставка за период.

    Immutable модель (frozen=True). NaN/Inf отвергаются при создании.
    """

    value: Decimal = Field(
        ..., allow_inf_nan=False, description="Ставка за период (фракция, 0.05 = 5%)"
    )

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, value: RateLike) -> "Rate":
        """
        Создание Rate из числа, строки или существующего Rate.

        float переводится через кратчайший repr, поэтому
        Rate.of(0.05).value == Decimal("0.05").

        Raises:
            pydantic.ValidationError: если значение не число или NaN/Inf

        Examples:
            >>> Rate.of(0.05).value
            Decimal('0.05')
            >>> Rate.of("0.1").value
            Decimal('0.1')
        """
        if isinstance(value, Rate):
            return value
        if isinstance(value, float):
            value = Decimal(repr(value))
        return cls(value=value)

    @classmethod
    def from_percent(cls, percent: Union[Decimal, int, float, str]) -> "Rate":
        """
        Создание Rate из процентов: 5 → 0.05.

        Сдвиг точки точный: все цифры сохраняются независимо от
        точности текущего decimal-контекста.

        Raises:
            pydantic.ValidationError: если значение не число или NaN/Inf

        Examples:
            >>> Rate.from_percent(5).value
            Decimal('0.05')
        """
        percent_value = cls.of(percent).value
        return cls(value=_shift_point(percent_value, -2))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Rate":
        """
        Создание Rate из dict: {"value": 0.05} или {"percent": 5}.

        Числа в виде строк ("0.05") сохраняют точность без двоичного
        округления.

        Raises:
            jsonschema.ValidationError: если data не соответствует контракту rate.json
        """
        validate_rate(dict(data))
        if "percent" in data:
            return cls.from_percent(data["percent"])
        return cls.of(data["value"])

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    def get(self) -> Decimal:
        """Decimal значение ставки."""
        return self.value

    def signum(self) -> int:
        """Знак ставки: -1, 0 или 1."""
        if self.value > 0:
            return 1
        if self.value < 0:
            return -1
        return 0

    def as_float(self) -> float:
        """Ставка как float (используется в log-формулах)."""
        return float(self.value)

    def as_percent(self) -> Decimal:
        """Ставка в процентах: 0.05 → 5 (без округления)."""
        return _shift_point(self.value, 2)

    def __str__(self) -> str:
        return str(self.value)
