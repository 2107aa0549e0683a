"""Service layer for calcfrete.

Provides the Correios service code catalog, the rate request builder
and response parsing.
"""

from calcfrete.services.correios_service_codes import (
    SERVICE_ALIASES,
    SERVICE_CODE_NAMES,
    ServiceCode,
    resolve_service_code,
)
from calcfrete.services.quote_parsing import parse_first_quote, parse_quotes
from calcfrete.services.rate_request_builder import RateRequestBuilder

__all__ = [
    "ServiceCode",
    "SERVICE_ALIASES",
    "SERVICE_CODE_NAMES",
    "resolve_service_code",
    "RateRequestBuilder",
    "parse_first_quote",
    "parse_quotes",
]
