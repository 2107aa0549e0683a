"""Client for the Correios remote price and delivery-time calculator."""

from calcfrete.config import CorreiosSettings, load_settings
from calcfrete.errors import (
    CalcFreteError,
    FieldNotFoundError,
    NetworkError,
    ParseError,
)
from calcfrete.models import (
    CalculationMode,
    PackageFormat,
    QuoteResult,
    RateRequestParameters,
)
from calcfrete.services import RateRequestBuilder, ServiceCode

__all__ = [
    "RateRequestBuilder",
    "RateRequestParameters",
    "QuoteResult",
    "ServiceCode",
    "PackageFormat",
    "CalculationMode",
    "CorreiosSettings",
    "load_settings",
    "CalcFreteError",
    "NetworkError",
    "ParseError",
    "FieldNotFoundError",
]
