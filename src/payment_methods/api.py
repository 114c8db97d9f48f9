"""
Public, high-level helpers for validating and charging payment methods.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

import requests

from .core.config import (
    DEFAULT_CURRENCY,
    ConfigError,
    TransportConfig,
    load_transport_config,
)
from .core.details import InstrumentType, PaymentMethodDetails
from .core.errors import ExecutionError, ExecutionReason, ValidationError, ValidationReason
from .core.money import AmountLike, Money
from .core.payment_method import PaymentMethod, PaymentMethodState
from .core.status import ChargeStatus
from .core.transport import HttpTransport, PaymentNetworkTransport

__all__ = [
    "ChargeStatus",
    "ConfigError",
    "ExecutionError",
    "ExecutionReason",
    "HttpTransport",
    "InstrumentType",
    "Money",
    "PaymentMethod",
    "PaymentMethodDetails",
    "PaymentMethodState",
    "TransportConfig",
    "ValidationError",
    "ValidationReason",
    "create_payment_method",
    "create_transport",
    "load_transport_config",
    "validate_and_charge",
]


def create_transport(
    *,
    config: Optional[TransportConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
) -> HttpTransport:
    """
    Construct an :class:`HttpTransport`.

    Callers either pass a ready-made :class:`TransportConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        if overrides or base is not None:
            raise ValueError(
                "Provide either a pre-built TransportConfig or environment sources, not both."
            )
        cfg = config
    else:
        cfg = load_transport_config(env_file=env_file, overrides=overrides, base=base)
    return HttpTransport(cfg, session=session)


def create_payment_method(
    details: PaymentMethodDetails,
    *,
    transport: Optional[PaymentNetworkTransport] = None,
    config: Optional[TransportConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    currency: Optional[str] = None,
) -> PaymentMethod:
    """
    Wrap ``details`` in an unvalidated :class:`PaymentMethod`.

    No request is made here; call :meth:`PaymentMethod.validate` next.
    """
    if transport is not None:
        extras = (config, session, overrides, base)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a transport or the settings to build one, not both."
            )
    else:
        transport = create_transport(
            config=config,
            session=session,
            env_file=env_file,
            overrides=overrides,
            base=base,
        )
    if currency is None:
        if isinstance(transport, HttpTransport):
            currency = transport.config.default_currency
        else:
            currency = DEFAULT_CURRENCY
    return PaymentMethod(details, transport=transport, currency=currency)


def validate_and_charge(
    payment_method: PaymentMethod,
    amount: Union[Money, AmountLike],
) -> ChargeStatus:
    """
    Run both phases back to back.

    :class:`ValidationError` and :class:`ExecutionError` propagate unchanged,
    so the caller still sees which phase went wrong.
    """
    payment_method.validate()
    return payment_method.charge(amount)
