"""Error handling framework for calcfrete.

This package provides:
- Error code registry with E-XXXX format codes
- Correios error translation to friendly messages
- Coded exception types raised by the client

Error categories:
- E-2xxx: Package validation errors (reported by Correios)
- E-3xxx: Correios service errors
- E-4xxx: Client/system errors
- E-5xxx: Contract authentication errors
"""

from calcfrete.errors.correios_translation import (
    CORREIOS_ERROR_MAP,
    translate_correios_error,
)
from calcfrete.errors.domain import FieldNotFoundError, NetworkError, ParseError
from calcfrete.errors.formatter import CalcFreteError, format_error
from calcfrete.errors.registry import (
    ERROR_REGISTRY,
    ErrorCategory,
    ErrorCode,
    get_error,
    get_errors_by_category,
)

__all__ = [
    # Registry
    "ErrorCode",
    "ErrorCategory",
    "ERROR_REGISTRY",
    "get_error",
    "get_errors_by_category",
    # Correios translation
    "translate_correios_error",
    "CORREIOS_ERROR_MAP",
    # Exceptions
    "CalcFreteError",
    "NetworkError",
    "ParseError",
    "FieldNotFoundError",
    "format_error",
]
