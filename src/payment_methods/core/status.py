"""
The closed set of business outcomes a charge attempt can have.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .errors import ExecutionError, ExecutionReason

__all__ = ["ChargeStatus"]


class ChargeStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"
    PENDING = "pending"
    AUTH_CHALLENGE_NEEDED = "auth_challenge_needed"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        """``ok`` and ``failed`` settle the charge; everything else needs follow-up."""
        return self in (ChargeStatus.OK, ChargeStatus.FAILED)

    @property
    def requires_revalidation(self) -> bool:
        return self is ChargeStatus.EXPIRED

    @classmethod
    def classify(cls, raw_status: Any) -> "ChargeStatus":
        """
        Map a raw processor status string onto a :class:`ChargeStatus`.

        Matching is exact. Anything else raises
        ``ExecutionError(unmapped_response)`` carrying the raw value.
        """
        if isinstance(raw_status, str):
            for status in cls:
                if status.value == raw_status:
                    return status
        raise ExecutionError(
            ExecutionReason.UNMAPPED_RESPONSE,
            f"Processor returned unrecognised status {raw_status!r}",
            raw=raw_status,
        )
