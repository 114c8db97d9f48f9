"""
Caller-supplied payment instrument data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from eth_utils import is_hex_address, to_checksum_address

__all__ = [
    "InstrumentType",
    "PaymentMethodDetails",
]


class InstrumentType(str, Enum):
    CARD = "card"
    WALLET = "wallet"


def _normalize_wallet_token(raw: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    value = raw.strip()
    if not value.startswith("0x"):
        value = "0x" + value
    if not is_hex_address(value):
        return raw
    return to_checksum_address(value)


@dataclass(frozen=True)
class PaymentMethodDetails:
    """
    Identifying data for one payment instrument.

    Construction never fails on bad data; :meth:`problems` lists what is wrong
    so that the validator can report it at the validation call site.
    """

    token: str
    instrument_type: InstrumentType | str = InstrumentType.CARD
    billing: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        try:
            kind: InstrumentType | str = InstrumentType(self.instrument_type)
        except ValueError:
            kind = self.instrument_type
        object.__setattr__(self, "instrument_type", kind)

        if kind is InstrumentType.WALLET:
            object.__setattr__(self, "token", _normalize_wallet_token(self.token))

        billing = self.billing
        if isinstance(billing, Mapping):
            billing = MappingProxyType(dict(billing))
        object.__setattr__(self, "billing", billing)

    def problems(self) -> List[str]:
        issues: List[str] = []
        if not isinstance(self.instrument_type, InstrumentType):
            issues.append(f"unsupported instrument type {self.instrument_type!r}")
            return issues

        if not isinstance(self.token, str) or not self.token.strip():
            issues.append("token must be a non-empty string")
        elif self.instrument_type is InstrumentType.CARD:
            if any(ch.isspace() for ch in self.token):
                issues.append("card token must not contain whitespace")
        elif not is_hex_address(self.token):
            issues.append("wallet token is not a valid EVM address")

        if not isinstance(self.billing, Mapping):
            issues.append("billing metadata must be a mapping")
        elif not all(
            isinstance(key, str) and isinstance(value, str)
            for key, value in self.billing.items()
        ):
            issues.append("billing metadata keys and values must be strings")
        return issues

    @property
    def is_well_formed(self) -> bool:
        return not self.problems()

    def describe(self) -> str:
        """Masked representation that is safe to log."""
        token = self.token if isinstance(self.token, str) else repr(self.token)
        if len(token) <= 7:
            masked = "****"
        else:
            masked = f"{token[:4]}****{token[-3:]}"
        kind = getattr(self.instrument_type, "value", self.instrument_type)
        return f"{kind}:{masked}"

    def as_payload(self) -> Dict[str, Any]:
        kind = getattr(self.instrument_type, "value", self.instrument_type)
        payload: Dict[str, Any] = {"type": kind, "token": self.token}
        if self.billing:
            payload["billing"] = dict(self.billing)
        return payload
