"""
Core primitives for validating payment methods and classifying charges.
"""

from .config import ConfigError, TransportConfig, load_transport_config
from .details import InstrumentType, PaymentMethodDetails
from .environment import PaymentsEnvironment, build_environment
from .errors import ExecutionError, ExecutionReason, ValidationError, ValidationReason
from .executor import ChargeExecutor
from .money import Money
from .payloads import build_charge_request, build_validity_request
from .payment_method import PaymentMethod, PaymentMethodState
from .status import ChargeStatus
from .transport import (
    ChargeResponse,
    HttpTransport,
    PaymentNetworkTransport,
    TransportFault,
    TransportTimeout,
    ValidityReport,
)
from .validator import Validator

__all__ = [
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
    "PaymentsEnvironment",
    "TransportConfig",
    "TransportFault",
    "TransportTimeout",
    "ValidationError",
    "ValidationReason",
    "Validator",
    "ValidityReport",
    "build_charge_request",
    "build_environment",
    "build_validity_request",
    "load_transport_config",
]
