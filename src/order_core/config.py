"""Configuration loading.

Reads settings from the environment, optionally seeded from a .env file.
Everything is validated when loaded so misconfiguration fails at startup
rather than on the first order.

Environment variables:
    TAX_RATE                  decimal in [0, 1], default 0.15
    FREE_SHIPPING_THRESHOLD   decimal amount, default 100.00
    SHIPPING_FEE              decimal amount, default 10.00
    PAYPAL_CLIENT_ID          required for the PayPal verifier
    PAYPAL_APP_SECRET         required for the PayPal verifier
    PAYPAL_API_URL            default https://api-m.sandbox.paypal.com
    PAYPAL_TIMEOUT_SECONDS    default 10
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

from order_core.domain.exceptions import DomainException
from order_core.domain.services import PricingPolicy
from order_core.domain.value_objects import Money

logger = logging.getLogger(__name__)

DEFAULT_PAYPAL_API_URL = "https://api-m.sandbox.paypal.com"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True, slots=True)
class PayPalSettings:
    client_id: str
    app_secret: str
    api_url: str = DEFAULT_PAYPAL_API_URL
    timeout_seconds: float = 10.0


def load_environment(env_file: str | Path = ".env") -> None:
    """Load variables from a .env file if present. Existing variables win."""
    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(env_path, override=False)
        logger.info("Loaded environment from %s", env_path)
    else:
        logger.debug("No %s file found, using process environment", env_path)


def _get_decimal(env: Mapping[str, str], key: str, default: str) -> Decimal:
    raw = env.get(key, default)
    try:
        value = Decimal(raw.strip())
    except (InvalidOperation, AttributeError) as e:
        raise ConfigurationError(f"{key} must be a decimal number, got {raw!r}") from e
    if not value.is_finite():
        raise ConfigurationError(f"{key} must be finite, got {raw!r}")
    return value


def _get_required(env: Mapping[str, str], key: str) -> str:
    value = env.get(key, "").strip()
    if not value:
        raise ConfigurationError(f"Missing required environment variable: {key}")
    return value


def load_pricing_policy(env: Mapping[str, str] | None = None) -> PricingPolicy:
    """Build the PricingPolicy from environment variables.

    Raises:
        ConfigurationError: If any value is unparsable or out of range.
    """
    env = os.environ if env is None else env
    try:
        return PricingPolicy(
            tax_rate=_get_decimal(env, "TAX_RATE", "0.15"),
            free_shipping_threshold=Money.of(_get_decimal(env, "FREE_SHIPPING_THRESHOLD", "100.00")),
            shipping_fee=Money.of(_get_decimal(env, "SHIPPING_FEE", "10.00")),
        )
    except DomainException as e:
        raise ConfigurationError(f"Invalid pricing configuration: {e}") from e


def load_paypal_settings(env: Mapping[str, str] | None = None) -> PayPalSettings:
    """Build PayPalSettings from environment variables.

    Raises:
        ConfigurationError: If credentials are missing or the timeout is invalid.
    """
    env = os.environ if env is None else env
    timeout = _get_decimal(env, "PAYPAL_TIMEOUT_SECONDS", "10")
    if timeout <= 0:
        raise ConfigurationError(f"PAYPAL_TIMEOUT_SECONDS must be positive, got {timeout}")

    return PayPalSettings(
        client_id=_get_required(env, "PAYPAL_CLIENT_ID"),
        app_secret=_get_required(env, "PAYPAL_APP_SECRET"),
        api_url=env.get("PAYPAL_API_URL", DEFAULT_PAYPAL_API_URL).strip().rstrip("/"),
        timeout_seconds=float(timeout),
    )
