"""Runtime configuration for the Correios calculator client.

Settings are resolved from environment variables when a builder is
created without explicit settings:

    CORREIOS_CALC_URL          Calculator endpoint (defaults to the public one)
    CORREIOS_TIMEOUT           HTTP timeout in seconds
    CORREIOS_COMPANY_ID        Contract administrative code
    CORREIOS_COMPANY_PASSWORD  Contract password
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT_URL = "http://ws.correios.com.br/calculador/CalcPrecoPrazo.aspx"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class CorreiosSettings:
    """Typed settings for the calculator client."""

    endpoint_url: str = DEFAULT_ENDPOINT_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    company_id: str | None = None
    company_password: str | None = None


def _env_str(name: str) -> str | None:
    """Read a stripped env var, treating blank values as unset."""
    value = os.environ.get(name, "").strip()
    return value or None


def _env_timeout() -> float:
    """Parse CORREIOS_TIMEOUT, falling back to the default on bad input."""
    raw = os.environ.get("CORREIOS_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(
            "Invalid CORREIOS_TIMEOUT %r, using default %.1fs",
            raw, DEFAULT_TIMEOUT_SECONDS,
        )
        return DEFAULT_TIMEOUT_SECONDS
    if timeout <= 0:
        logger.warning(
            "CORREIOS_TIMEOUT must be positive (got %s), using default %.1fs",
            raw, DEFAULT_TIMEOUT_SECONDS,
        )
        return DEFAULT_TIMEOUT_SECONDS
    return timeout


def load_settings() -> CorreiosSettings:
    """Build settings from the environment.

    Returns:
        CorreiosSettings with env overrides applied over the defaults.
    """
    company_id = _env_str("CORREIOS_COMPANY_ID")
    company_password = _env_str("CORREIOS_COMPANY_PASSWORD")
    if bool(company_id) != bool(company_password):
        logger.warning(
            "Only one of CORREIOS_COMPANY_ID / CORREIOS_COMPANY_PASSWORD is set; "
            "Correios will reject contract pricing without both."
        )

    return CorreiosSettings(
        endpoint_url=_env_str("CORREIOS_CALC_URL") or DEFAULT_ENDPOINT_URL,
        timeout=_env_timeout(),
        company_id=company_id,
        company_password=company_password,
    )
