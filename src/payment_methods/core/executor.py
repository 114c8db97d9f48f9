"""
Executes one charge attempt and classifies the processor's answer.
"""

from __future__ import annotations

import logging
from typing import Optional

from .details import PaymentMethodDetails
from .errors import ExecutionError, ExecutionReason
from .money import Money
from .status import ChargeStatus
from .transport import PaymentNetworkTransport, TransportFault, TransportTimeout

__all__ = ["ChargeExecutor", "check_amount"]


def check_amount(amount: Money) -> Money:
    """Raise ``ExecutionError(invalid_amount)`` unless ``amount`` is chargeable."""
    if not isinstance(amount, Money):
        raise ExecutionError(
            ExecutionReason.INVALID_AMOUNT, f"Expected Money, got {type(amount).__name__}"
        )
    amount.to_minor_units()
    return amount


class ChargeExecutor:
    """
    Submits exactly one charge per call.

    The instrument is assumed to be validated already; retry policy belongs
    to the caller.
    """

    def __init__(self, transport: PaymentNetworkTransport) -> None:
        self.transport = transport

    def charge(
        self,
        details: PaymentMethodDetails,
        amount: Money,
        *,
        idempotency_key: Optional[str] = None,
    ) -> ChargeStatus:
        check_amount(amount)

        try:
            response = self.transport.submit_charge(
                details, amount, idempotency_key=idempotency_key
            )
        except TransportTimeout as exc:
            raise ExecutionError(
                ExecutionReason.TIMEOUT, f"Charge submission timed out: {exc}"
            ) from exc
        except TransportFault as exc:
            raise ExecutionError(
                ExecutionReason.TRANSPORT_FAILURE, f"Charge submission failed: {exc}"
            ) from exc

        try:
            status = ChargeStatus.classify(response.status)
        except ExecutionError as exc:
            logging.warning(
                "Unmapped charge response for %s: %s", details.describe(), response.raw
            )
            raise ExecutionError(exc.reason, exc.message, raw=response.raw) from None

        logging.info(
            "Charge of %s for %s classified as %s (id=%s)",
            amount,
            details.describe(),
            status.value,
            response.charge_id,
        )
        return status
