"""
Currency-denominated amounts.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from .errors import ExecutionError, ExecutionReason

__all__ = ["AmountLike", "Money", "currency_exponent"]

AmountLike = Union[Decimal, str, int, float]

# ISO 4217 minor-unit exponents that differ from the usual two decimals.
_CURRENCY_EXPONENTS = {
    "BHD": 3,
    "CLP": 0,
    "IQD": 3,
    "ISK": 0,
    "JOD": 3,
    "JPY": 0,
    "KRW": 0,
    "KWD": 3,
    "OMR": 3,
    "TND": 3,
    "UGX": 0,
    "VND": 0,
}
_DEFAULT_EXPONENT = 2


def currency_exponent(currency: str) -> int:
    return _CURRENCY_EXPONENTS.get(currency, _DEFAULT_EXPONENT)


def _normalize_currency(raw_currency: str) -> str:
    if not isinstance(raw_currency, str):
        raise ExecutionError(
            ExecutionReason.INVALID_AMOUNT, f"Currency must be a string, got {raw_currency!r}"
        )
    value = raw_currency.strip().upper()
    if len(value) != 3 or not value.isascii() or not value.isalpha():
        raise ExecutionError(
            ExecutionReason.INVALID_AMOUNT,
            f"Currency must be a three-letter ISO code, got '{raw_currency}'",
        )
    return value


def _to_decimal(value: AmountLike) -> Decimal:
    if isinstance(value, bool):
        raise ExecutionError(ExecutionReason.INVALID_AMOUNT, "Amount must be numeric")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ExecutionError(
            ExecutionReason.INVALID_AMOUNT,
            f"Amount must be a valid decimal number, got '{value}'",
        ) from exc
    if not amount.is_finite():
        raise ExecutionError(
            ExecutionReason.INVALID_AMOUNT, f"Amount must be finite, got '{value}'"
        )
    return amount


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))
        object.__setattr__(self, "currency", _normalize_currency(self.currency))

    @classmethod
    def of(cls, value: AmountLike, currency: str = "USD") -> "Money":
        return cls(amount=value, currency=currency)

    @classmethod
    def coerce(cls, value: Union["Money", AmountLike], currency: str = "USD") -> "Money":
        """
        Return ``value`` unchanged when it is already :class:`Money`, otherwise
        interpret it as an amount in ``currency``.
        """
        if isinstance(value, Money):
            return value
        return cls.of(value, currency)

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    def to_minor_units(self) -> int:
        """
        Express the amount as an integer count of the currency's minor unit.

        Raises ``ExecutionError(invalid_amount)`` for amounts that are not
        positive or carry more precision than the currency allows.
        """
        if not self.is_positive:
            raise ExecutionError(
                ExecutionReason.INVALID_AMOUNT,
                f"Charge amount must be greater than zero, got {self.amount}",
            )
        # Enough precision that scaling never rounds the coefficient.
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(self.amount.as_tuple().digits))
            scaled = self.amount.scaleb(currency_exponent(self.currency))
            integral = scaled.to_integral_value()
        if integral != scaled:
            raise ExecutionError(
                ExecutionReason.INVALID_AMOUNT,
                f"Amount {self.amount} cannot be represented in {self.currency}",
            )
        return int(integral)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"
