"""Test helper utilities."""

from tests.helpers.correios_transport import (
    EMPTY_SERVICES_XML,
    MISSING_WEIGHT_XML,
    MULTI_SERVICE_XML,
    SEDEX_SUCCESS_XML,
    FailingTransport,
    FakeCorreiosTransport,
)

__all__ = [
    "FakeCorreiosTransport",
    "FailingTransport",
    "SEDEX_SUCCESS_XML",
    "MISSING_WEIGHT_XML",
    "MULTI_SERVICE_XML",
    "EMPTY_SERVICES_XML",
]
