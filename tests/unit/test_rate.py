"""
Тесты для Rate — ставка за период

Покрывает:
- Создание из float/str/Decimal/int/Rate
- Проценты
- Знак, float/percent представления
- NaN/Inf и нечисловые значения
- Immutability (frozen=True)
- Создание из dict через контракт rate.json
"""

import decimal
from decimal import Decimal

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from moneycalc.core.domain import Rate


class TestRateCreation:
    """Фабрики Rate."""

    def test_from_float_uses_shortest_repr(self):
        assert Rate.of(0.05).value == Decimal("0.05")
        assert Rate.of(0.1).value == Decimal("0.1")

    def test_from_string(self):
        assert Rate.of("0.075").value == Decimal("0.075")

    def test_from_decimal(self):
        assert Rate.of(Decimal("0.123456789012345678901234567890")).value == Decimal(
            "0.123456789012345678901234567890"
        )

    def test_from_int(self):
        assert Rate.of(1).value == Decimal(1)

    def test_from_rate_returns_same_instance(self):
        rate = Rate.of("0.05")
        assert Rate.of(rate) is rate

    def test_from_percent(self):
        assert Rate.from_percent(5).value == Decimal("0.05")
        assert Rate.from_percent("7.5").value == Decimal("0.075")
        assert Rate.from_percent(12.5).value == Decimal("0.125")

    def test_equality_by_value(self):
        assert Rate.of("0.05") == Rate.of(0.05)


class TestRateInvalid:
    """Невалидные значения отвергаются."""

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "NaN", "Infinity"])
    def test_nan_inf_rejected(self, value):
        with pytest.raises(ValidationError):
            Rate.of(value)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            Rate.of("five percent")

    @pytest.mark.parametrize("value", ["five", float("nan"), "Infinity"])
    def test_from_percent_rejects_like_of(self, value):
        """from_percent и of отвергают невалидный ввод одной ошибкой."""
        with pytest.raises(ValidationError):
            Rate.from_percent(value)

    def test_frozen(self):
        rate = Rate.of("0.05")
        with pytest.raises(ValidationError):
            rate.value = Decimal("0.06")


class TestPercentScaling:
    """Перевод процентов сдвигает точку без округления."""

    def test_from_percent_keeps_all_digits(self):
        rate = Rate.from_percent("1.2345678901234567890123456789012345")
        assert rate.value == Decimal("0.012345678901234567890123456789012345")
        assert len(rate.value.as_tuple().digits) == 35

    def test_from_percent_matches_value_mapping(self):
        long_percent = "98.7654321098765432109876543210987654321"
        long_value = "0.987654321098765432109876543210987654321"
        assert Rate.from_mapping({"percent": long_percent}) == Rate.from_mapping({"value": long_value})

    def test_from_percent_ignores_local_context(self):
        with decimal.localcontext() as ctx:
            ctx.prec = 3
            rate = Rate.from_percent("12.345")
        assert rate.value == Decimal("0.12345")

    def test_as_percent_keeps_all_digits(self):
        rate = Rate.of("0.012345678901234567890123456789012345")
        assert rate.as_percent() == Decimal("1.2345678901234567890123456789012345")

    def test_as_percent_ignores_local_context(self):
        rate = Rate.of("0.12345")
        with decimal.localcontext() as ctx:
            ctx.prec = 3
            percent = rate.as_percent()
        assert percent == Decimal("12.345")

    def test_percent_round_trip(self):
        rate = Rate.from_percent("-7.125")
        assert rate.value == Decimal("-0.07125")
        assert rate.as_percent() == Decimal("-7.125")


class TestRateAccessors:
    """Знак и представления."""

    @pytest.mark.parametrize(
        "value,expected",
        [("0.05", 1), ("-0.05", -1), ("0", 0), ("-0", 0), ("0.000", 0)],
    )
    def test_signum(self, value, expected):
        assert Rate.of(value).signum() == expected

    def test_get(self):
        assert Rate.of("0.05").get() == Decimal("0.05")

    def test_as_float(self):
        assert Rate.of("0.05").as_float() == 0.05

    def test_as_percent(self):
        assert Rate.of("0.05").as_percent() == Decimal(5)

    def test_str(self):
        assert str(Rate.of("0.05")) == "0.05"


class TestRateFromMapping:
    """Создание из dict через контракт rate.json."""

    def test_value_number(self):
        assert Rate.from_mapping({"value": 0.05}) == Rate.of("0.05")

    def test_value_string(self):
        assert Rate.from_mapping({"value": "0.05"}).value == Decimal("0.05")

    def test_percent(self):
        assert Rate.from_mapping({"percent": 5}).value == Decimal("0.05")
        assert Rate.from_mapping({"percent": "-2.5"}).value == Decimal("-0.025")

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"value": 0.05, "percent": 5},
            {"value": "five"},
            {"value": None},
            {"value": True},
            {"rate": 0.05},
        ],
    )
    def test_invalid_mapping(self, data):
        with pytest.raises(SchemaValidationError):
            Rate.from_mapping(data)
