"""
Two-phase facade: ``validate()`` first, then any number of ``charge()`` calls.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from .details import PaymentMethodDetails
from .errors import ExecutionError, ExecutionReason, ValidationError
from .executor import ChargeExecutor, check_amount
from .money import AmountLike, Money
from .status import ChargeStatus
from .transport import PaymentNetworkTransport
from .validator import Validator

__all__ = ["PaymentMethod", "PaymentMethodState"]


class PaymentMethodState(str, Enum):
    UNVALIDATED = "unvalidated"
    VALIDATED = "validated"


class PaymentMethod:
    """
    Binds one :class:`PaymentMethodDetails` to its validation state.

    Not safe for concurrent ``charge`` calls on the same instance; two callers
    may both observe the validated state and both submit a charge.
    """

    def __init__(
        self,
        details: PaymentMethodDetails,
        *,
        validator: Optional[Validator] = None,
        executor: Optional[ChargeExecutor] = None,
        transport: Optional[PaymentNetworkTransport] = None,
        currency: str = "USD",
    ) -> None:
        if transport is None and (validator is None or executor is None):
            raise ValueError(
                "Provide a transport or both a validator and an executor."
            )
        self._details = details
        self._validator = validator or Validator(transport)
        self._executor = executor or ChargeExecutor(transport)
        self._currency = currency
        self._validated = False
        self._last_status: Optional[ChargeStatus] = None

    @property
    def details(self) -> PaymentMethodDetails:
        return self._details

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def validated(self) -> bool:
        return self._validated

    @property
    def state(self) -> PaymentMethodState:
        if self._validated:
            return PaymentMethodState.VALIDATED
        return PaymentMethodState.UNVALIDATED

    @property
    def last_status(self) -> Optional[ChargeStatus]:
        return self._last_status

    def validate(self) -> None:
        """
        Check the instrument. Raises :class:`ValidationError` and leaves the
        instance unvalidated when it is not usable. A check that could not
        be completed leaves the current state as it was.
        """
        try:
            self._validator.validate(self._details)
        except ValidationError as exc:
            # An unreachable check says nothing about the instrument.
            if exc.retryable:
                raise
            if self._validated:
                logging.debug(
                    "%s failed re-validation (%s)", self._details.describe(), exc.reason.value
                )
            self._validated = False
            raise
        self._validated = True
        logging.debug("%s is validated", self._details.describe())

    def charge(
        self,
        amount: Union[Money, AmountLike],
        *,
        idempotency_key: Optional[str] = None,
    ) -> ChargeStatus:
        """
        Attempt one charge and return its :class:`ChargeStatus`.

        Bare numbers are taken to be in the instance's default currency.
        Raises :class:`ExecutionError` when the outcome is unknown or the
        call itself is invalid (bad amount, not validated).
        """
        money = check_amount(Money.coerce(amount, self._currency))
        if not self._validated:
            raise ExecutionError(
                ExecutionReason.NOT_VALIDATED,
                "validate() must succeed before charge() is called",
            )
        status = self._executor.charge(
            self._details, money, idempotency_key=idempotency_key
        )
        self._last_status = status
        return status

    def __repr__(self) -> str:
        return f"PaymentMethod({self._details.describe()}, state={self.state.value})"
