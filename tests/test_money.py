from decimal import Decimal

import pytest

from payment_methods import ExecutionError, ExecutionReason, Money


def test_of_parses_strings_ints_and_floats():
    assert Money.of("10.00").amount == Decimal("10.00")
    assert Money.of(5).amount == Decimal(5)
    assert Money.of(0.1).amount == Decimal("0.1")
    assert Money.of("1", "eur").currency == "EUR"


@pytest.mark.parametrize("value", ["ten", "", None, True, "NaN", "Infinity"])
def test_of_rejects_non_numeric(value):
    with pytest.raises(ExecutionError) as excinfo:
        Money.of(value)
    assert excinfo.value.reason is ExecutionReason.INVALID_AMOUNT


@pytest.mark.parametrize("currency", ["US", "DOLLARS", "U$D", 840])
def test_of_rejects_bad_currency(currency):
    with pytest.raises(ExecutionError) as excinfo:
        Money.of("1.00", currency)
    assert excinfo.value.reason is ExecutionReason.INVALID_AMOUNT


def test_to_minor_units_uses_currency_exponent():
    assert Money.of("10.00", "USD").to_minor_units() == 1000
    assert Money.of("500", "JPY").to_minor_units() == 500
    assert Money.of("1.234", "KWD").to_minor_units() == 1234


@pytest.mark.parametrize(
    "amount, currency",
    [("0", "USD"), ("-1.00", "USD"), ("0.001", "USD"), ("1.5", "JPY")],
)
def test_to_minor_units_rejects_unchargeable(amount, currency):
    with pytest.raises(ExecutionError) as excinfo:
        Money.of(amount, currency).to_minor_units()
    assert excinfo.value.reason is ExecutionReason.INVALID_AMOUNT


def test_coerce_keeps_existing_money():
    money = Money.of("3.00", "GBP")
    assert Money.coerce(money, "USD") is money
    assert Money.coerce("3.00", "GBP") == money


def test_direct_construction_is_normalised():
    money = Money(10, "jpy")
    assert money.amount == Decimal(10)
    assert money.currency == "JPY"
    assert Money(Decimal("2.50")) == Money.of("2.50", "USD")


@pytest.mark.parametrize("amount, currency", [("ten", "USD"), ("1.00", "yen")])
def test_direct_construction_rejects_bad_input(amount, currency):
    with pytest.raises(ExecutionError) as excinfo:
        Money(amount, currency)
    assert excinfo.value.reason is ExecutionReason.INVALID_AMOUNT


def test_direct_construction_uses_currency_exponent():
    with pytest.raises(ExecutionError) as excinfo:
        Money(Decimal("1.5"), "jpy").to_minor_units()
    assert excinfo.value.reason is ExecutionReason.INVALID_AMOUNT
    assert Money(Decimal("5.00"), "jpy").to_minor_units() == 5


def test_to_minor_units_keeps_every_digit_of_large_amounts():
    money = Money.of("1234567890123456789012345678.91")
    assert money.to_minor_units() == 123456789012345678901234567891


def test_to_minor_units_rejects_excess_precision_on_large_amounts():
    with pytest.raises(ExecutionError) as excinfo:
        Money.of("1234567890123456789012345678.911").to_minor_units()
    assert excinfo.value.reason is ExecutionReason.INVALID_AMOUNT
