"""
HTTP transport for the payment network.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

import requests

from .config import TransportConfig
from .details import PaymentMethodDetails
from .money import Money
from .payloads import build_charge_request, build_validity_request

__all__ = [
    "ChargeResponse",
    "HttpTransport",
    "PaymentNetworkTransport",
    "TransportFault",
    "TransportTimeout",
    "ValidityReport",
]


class TransportFault(Exception):
    """The processor could not be reached or answered with garbage."""


class TransportTimeout(TransportFault):
    """The processor did not answer in time."""


@dataclass(frozen=True)
class ValidityReport:
    valid: Optional[bool]
    reason: Optional[str]
    raw: Dict[str, Any]

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "ValidityReport":
        valid = payload.get("valid")
        reason = payload.get("reason")
        return cls(
            valid=valid if isinstance(valid, bool) else None,
            reason=str(reason) if reason is not None else None,
            raw=payload,
        )


@dataclass(frozen=True)
class ChargeResponse:
    # Left unparsed; ChargeStatus.classify decides what it means.
    status: Any
    charge_id: Optional[str]
    raw: Dict[str, Any]

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "ChargeResponse":
        charge_id = payload.get("id")
        return cls(
            status=payload.get("status"),
            charge_id=str(charge_id) if charge_id is not None else None,
            raw=payload,
        )


class PaymentNetworkTransport(Protocol):
    def check_validity(self, details: PaymentMethodDetails) -> ValidityReport:
        ...

    def submit_charge(
        self,
        details: PaymentMethodDetails,
        amount: Money,
        *,
        idempotency_key: Optional[str] = None,
    ) -> ChargeResponse:
        ...


def _post_json(
    session: requests.Session,
    url: str,
    body: Dict[str, Any],
    *,
    headers: Dict[str, str],
    timeout: float,
) -> Dict[str, Any]:
    try:
        response = session.post(url, json=body, headers=headers, timeout=timeout)
    except requests.Timeout as exc:
        logging.warning("Request to %s timed out after %ss", url, timeout)
        raise TransportTimeout(f"Processor at {url} timed out") from exc
    except requests.RequestException as exc:
        logging.warning("Request to %s failed: %s", url, exc)
        raise TransportFault(f"Request to processor at {url} failed: {exc}") from exc

    if response.status_code >= 400:
        logging.warning("Processor responded with %s for %s", response.status_code, url)
        raise TransportFault(
            f"Processor responded with {response.status_code}: {response.text}"
        )
    try:
        payload = response.json()
    except (json.JSONDecodeError, ValueError) as exc:
        raise TransportFault(
            f"Failed to parse JSON from processor at {url}: {response.text}"
        ) from exc
    if not isinstance(payload, dict):
        raise TransportFault(f"Expected a JSON object from processor at {url}")
    return payload


class HttpTransport:
    """
    Talks to the processor's ``/validity`` and ``/charges`` endpoints.

    One method call is one HTTP request; nothing is retried.
    """

    def __init__(
        self,
        config: TransportConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def check_validity(self, details: PaymentMethodDetails) -> ValidityReport:
        url = self.config.validity_url
        logging.info("Checking validity of %s at %s", details.describe(), url)
        payload = _post_json(
            self.session,
            url,
            build_validity_request(details),
            headers=self.config.headers(),
            timeout=self.config.timeout_seconds,
        )
        return ValidityReport.from_response(payload)

    def submit_charge(
        self,
        details: PaymentMethodDetails,
        amount: Money,
        *,
        idempotency_key: Optional[str] = None,
    ) -> ChargeResponse:
        url = self.config.charges_url
        body = build_charge_request(
            details, amount, description=self.config.charge_description
        )
        headers = self.config.headers()
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key
        logging.info("Submitting charge of %s for %s to %s", amount, details.describe(), url)
        payload = _post_json(
            self.session,
            url,
            body,
            headers=headers,
            timeout=self.config.timeout_seconds,
        )
        return ChargeResponse.from_response(payload)
