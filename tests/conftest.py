from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from payment_methods import (
    ChargeResponse,
    Money,
    PaymentMethodDetails,
    TransportFault,
    ValidityReport,
)


class FakeTransport:
    """In-memory processor keyed by token."""

    def __init__(
        self,
        *,
        validity: Optional[Dict[str, Dict[str, Any]]] = None,
        charges: Optional[Dict[str, Dict[str, Any]]] = None,
        validity_error: Optional[TransportFault] = None,
        charge_error: Optional[TransportFault] = None,
    ) -> None:
        self.validity = validity or {}
        self.charges = charges or {}
        self.validity_error = validity_error
        self.charge_error = charge_error
        self.validity_calls: List[PaymentMethodDetails] = []
        self.charge_calls: List[Tuple[PaymentMethodDetails, Money, Optional[str]]] = []

    def check_validity(self, details: PaymentMethodDetails) -> ValidityReport:
        self.validity_calls.append(details)
        if self.validity_error is not None:
            raise self.validity_error
        return ValidityReport.from_response(self.validity.get(details.token, {"valid": True}))

    def submit_charge(
        self,
        details: PaymentMethodDetails,
        amount: Money,
        *,
        idempotency_key: Optional[str] = None,
    ) -> ChargeResponse:
        self.charge_calls.append((details, amount, idempotency_key))
        if self.charge_error is not None:
            raise self.charge_error
        return ChargeResponse.from_response(self.charges.get(details.token, {"status": "ok"}))


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport(
        validity={
            "tok_good": {"valid": True},
            "tok_3dsecure": {"valid": True},
            "tok_bad": {"valid": False, "reason": "revoked"},
        },
        charges={
            "tok_good": {"id": "ch_1", "status": "ok"},
            "tok_3dsecure": {"id": "ch_2", "status": "auth_challenge_needed"},
        },
    )


@pytest.fixture
def make_transport():
    return FakeTransport
