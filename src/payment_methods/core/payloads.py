"""
Helpers for constructing the JSON bodies sent to the payment processor.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .details import PaymentMethodDetails
from .money import Money

__all__ = [
    "build_charge_request",
    "build_validity_request",
]


def build_validity_request(details: PaymentMethodDetails) -> Dict[str, Any]:
    return {"instrument": details.as_payload()}


def build_charge_request(
    details: PaymentMethodDetails,
    amount: Money,
    *,
    description: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Charge body with the amount in the currency's minor units.

    Raises ``ExecutionError(invalid_amount)`` when the amount cannot be
    expressed that way.
    """
    body: Dict[str, Any] = {
        "instrument": details.as_payload(),
        "amount": amount.to_minor_units(),
        "currency": amount.currency,
    }
    if description:
        body["description"] = description
    return body
