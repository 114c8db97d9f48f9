"""
Configuration for the payment network transport.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from .environment import build_environment

__all__ = [
    "ConfigError",
    "TransportConfig",
    "load_transport_config",
]

DEFAULT_PROCESSOR_URL = "https://api.processor.example"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_CURRENCY = "USD"

_PARAMETER_TO_ENV_KEY = {
    "processor_url": "PAYMENTS_PROCESSOR_URL",
    "api_key": "PAYMENTS_API_KEY",
    "timeout_seconds": "PAYMENTS_TIMEOUT_SECONDS",
    "default_currency": "PAYMENTS_DEFAULT_CURRENCY",
    "charge_description": "PAYMENTS_CHARGE_DESCRIPTION",
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _normalize_url(raw_url: str) -> str:
    value = raw_url.strip().rstrip("/")
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(
            f"PAYMENTS_PROCESSOR_URL must be an http(s) URL, got '{raw_url}'"
        )
    return value


def _parse_timeout(raw_timeout: str) -> float:
    try:
        timeout = Decimal(raw_timeout.strip())
    except InvalidOperation as exc:
        raise ConfigError(
            f"PAYMENTS_TIMEOUT_SECONDS must be a number, got '{raw_timeout}'"
        ) from exc
    if not timeout.is_finite() or timeout <= 0:
        raise ConfigError("PAYMENTS_TIMEOUT_SECONDS must be greater than zero")
    return float(timeout)


def _normalize_currency(raw_currency: str) -> str:
    value = raw_currency.strip().upper()
    if len(value) != 3 or not value.isascii() or not value.isalpha():
        raise ConfigError(
            f"PAYMENTS_DEFAULT_CURRENCY must be a three-letter ISO code, got '{raw_currency}'"
        )
    return value


def _optional(values: Mapping[str, str], key: str) -> Optional[str]:
    value = values.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class TransportConfig:
    processor_url: str = DEFAULT_PROCESSOR_URL
    api_key: Optional[str] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    default_currency: str = DEFAULT_CURRENCY
    charge_description: Optional[str] = None

    @property
    def validity_url(self) -> str:
        return f"{self.processor_url}/validity"

    @property
    def charges_url(self) -> str:
        return f"{self.processor_url}/charges"

    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "TransportConfig":
        processor_url = _normalize_url(
            values.get("PAYMENTS_PROCESSOR_URL", DEFAULT_PROCESSOR_URL)
        )
        timeout_seconds = _parse_timeout(
            values.get("PAYMENTS_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )
        default_currency = _normalize_currency(
            values.get("PAYMENTS_DEFAULT_CURRENCY", DEFAULT_CURRENCY)
        )
        return cls(
            processor_url=processor_url,
            api_key=_optional(values, "PAYMENTS_API_KEY"),
            timeout_seconds=timeout_seconds,
            default_currency=default_currency,
            charge_description=_optional(values, "PAYMENTS_CHARGE_DESCRIPTION"),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        **parameters: Any,
    ) -> "TransportConfig":
        merged_overrides = dict(overrides or {})
        for name, value in parameters.items():
            if value is None:
                continue
            try:
                env_key = _PARAMETER_TO_ENV_KEY[name]
            except KeyError as exc:
                raise TypeError(f"Unknown transport parameter '{name}'") from exc
            merged_overrides[env_key] = str(value)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_transport_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    processor_url: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout_seconds: Optional[float | str] = None,
    default_currency: Optional[str] = None,
    charge_description: Optional[str] = None,
) -> TransportConfig:
    """
    Convenience wrapper that mirrors :meth:`TransportConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, keyword
    arguments, or any combination; keyword arguments take precedence.
    """
    return TransportConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        processor_url=processor_url,
        api_key=api_key,
        timeout_seconds=timeout_seconds,
        default_currency=default_currency,
        charge_description=charge_description,
    )
