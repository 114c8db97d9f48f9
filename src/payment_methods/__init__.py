"""
Public facade for the payment-methods package.

The most useful pieces are re-exported here so integrators can
``from payment_methods import ...`` without navigating the package.
"""

from .api import create_payment_method, create_transport, validate_and_charge
from .core import (
    ChargeExecutor,
    ChargeResponse,
    ChargeStatus,
    ConfigError,
    ExecutionError,
    ExecutionReason,
    HttpTransport,
    InstrumentType,
    Money,
    PaymentMethod,
    PaymentMethodDetails,
    PaymentMethodState,
    PaymentNetworkTransport,
    TransportConfig,
    TransportFault,
    TransportTimeout,
    ValidationError,
    ValidationReason,
    Validator,
    ValidityReport,
    build_environment,
    load_transport_config,
)

__version__ = "0.1.0"

__all__ = (
    "ChargeExecutor",
    "ChargeResponse",
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
    "PaymentNetworkTransport",
    "TransportConfig",
    "TransportFault",
    "TransportTimeout",
    "ValidationError",
    "ValidationReason",
    "Validator",
    "ValidityReport",
    "build_environment",
    "create_payment_method",
    "create_transport",
    "load_transport_config",
    "validate_and_charge",
)
