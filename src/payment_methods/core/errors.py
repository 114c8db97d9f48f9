"""
Error types for the validation and charge phases.

``ValidationError`` and ``ExecutionError`` share no base class besides
``Exception``; catching one never catches the other.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

__all__ = [
    "ExecutionError",
    "ExecutionReason",
    "ValidationError",
    "ValidationReason",
]


class ValidationReason(str, Enum):
    MALFORMED_DETAILS = "malformed_details"
    INSTRUMENT_INVALID = "instrument_invalid"
    VALIDITY_CHECK_UNREACHABLE = "validity_check_unreachable"


class ExecutionReason(str, Enum):
    NOT_VALIDATED = "not_validated"
    INVALID_AMOUNT = "invalid_amount"
    TRANSPORT_FAILURE = "transport_failure"
    TIMEOUT = "timeout"
    UNMAPPED_RESPONSE = "unmapped_response"


_CALLER_ERRORS = frozenset(
    {ExecutionReason.NOT_VALIDATED, ExecutionReason.INVALID_AMOUNT}
)


class ValidationError(Exception):
    """Raised when a payment method is not usable."""

    def __init__(self, reason: ValidationReason, message: Optional[str] = None) -> None:
        self.reason = ValidationReason(reason)
        self.message = message
        super().__init__(self._render())

    def _render(self) -> str:
        if self.message:
            return f"{self.reason.value}: {self.message}"
        return self.reason.value

    @property
    def retryable(self) -> bool:
        """
        ``True`` when validity could not be determined, as opposed to the
        instrument being reported invalid or the details being malformed.
        """
        return self.reason is ValidationReason.VALIDITY_CHECK_UNREACHABLE


class ExecutionError(Exception):
    """
    Raised when a charge attempt has no business outcome.

    ``raw`` carries the processor payload for ``unmapped_response`` so the
    caller can inspect what was actually returned.
    """

    def __init__(
        self,
        reason: ExecutionReason,
        message: Optional[str] = None,
        *,
        raw: Any = None,
    ) -> None:
        self.reason = ExecutionReason(reason)
        self.message = message
        self.raw = raw
        super().__init__(self._render())

    def _render(self) -> str:
        if self.message:
            return f"{self.reason.value}: {self.message}"
        return self.reason.value

    @property
    def is_caller_error(self) -> bool:
        return self.reason in _CALLER_ERRORS

    @property
    def outcome_unknown(self) -> bool:
        return not self.is_caller_error
