"""
Checks that a payment instrument is usable before any money moves.
"""

from __future__ import annotations

from .details import PaymentMethodDetails
from .errors import ValidationError, ValidationReason
from .transport import PaymentNetworkTransport, TransportFault, TransportTimeout

__all__ = ["Validator"]


class Validator:
    def __init__(self, transport: PaymentNetworkTransport) -> None:
        self.transport = transport

    def validate(self, details: PaymentMethodDetails) -> None:
        """
        Return ``None`` when the instrument is chargeable right now, otherwise
        raise :class:`ValidationError`.

        Malformed details are rejected without contacting the processor.
        Otherwise exactly one validity check is made.
        """
        problems = details.problems()
        if problems:
            raise ValidationError(ValidationReason.MALFORMED_DETAILS, "; ".join(problems))

        try:
            report = self.transport.check_validity(details)
        except TransportTimeout as exc:
            raise ValidationError(
                ValidationReason.VALIDITY_CHECK_UNREACHABLE,
                f"Validity check timed out: {exc}",
            ) from exc
        except TransportFault as exc:
            raise ValidationError(
                ValidationReason.VALIDITY_CHECK_UNREACHABLE,
                f"Validity check failed: {exc}",
            ) from exc

        if report.valid is True:
            return
        if report.valid is False:
            raise ValidationError(ValidationReason.INSTRUMENT_INVALID, report.reason)
        raise ValidationError(
            ValidationReason.VALIDITY_CHECK_UNREACHABLE,
            f"Processor did not report validity: {report.raw}",
        )
