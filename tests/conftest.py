"""Root-level pytest fixtures for all tests.

Provides shared fixtures for request testing including:
- Explicit settings (no environment lookups)
- Fake Correios transports and builders wired to them
"""

import httpx
import pytest

from calcfrete.config import CorreiosSettings
from calcfrete.services.correios_service_codes import ServiceCode
from calcfrete.services.rate_request_builder import RateRequestBuilder
from tests.helpers.correios_transport import TEST_ENDPOINT, FakeCorreiosTransport


@pytest.fixture(autouse=True)
def _clear_correios_env(monkeypatch):
    """Keep developer CORREIOS_* variables out of the tests."""
    for name in (
        "CORREIOS_CALC_URL",
        "CORREIOS_TIMEOUT",
        "CORREIOS_COMPANY_ID",
        "CORREIOS_COMPANY_PASSWORD",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> CorreiosSettings:
    return CorreiosSettings(endpoint_url=TEST_ENDPOINT, timeout=5.0)


@pytest.fixture
def sedex_package() -> dict:
    """The SEDEX package from the calculator's usage example."""
    return {
        "serviceCode": ServiceCode.SEDEX,
        "originPostalCode": "11680000",
        "destinationPostalCode": "82220000",
        "weightKg": "1",
        "lengthCm": 30,
        "heightCm": 15,
        "widthCm": 20,
    }


@pytest.fixture
def transport() -> FakeCorreiosTransport:
    return FakeCorreiosTransport()


@pytest.fixture
def make_builder(settings):
    """Factory for builders whose requests go to a given fake transport."""

    def _make(initial=None, transport=None):
        http_client = httpx.Client(transport=transport or FakeCorreiosTransport())
        return RateRequestBuilder(initial, settings=settings, http_client=http_client)

    return _make
