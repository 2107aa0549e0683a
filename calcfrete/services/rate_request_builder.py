"""Rate request builder for the Correios price/deadline calculator.

Holds the parameter set for one package, merges caller overrides,
serializes everything into a GET query string and returns the parsed
quote(s).

Example usage:
    builder = RateRequestBuilder({
        "service_code": ServiceCode.SEDEX,
        "origin_postal_code": "11680000",
        "destination_postal_code": "82220000",
        "weight_kg": "1",
        "length_cm": 30,
        "height_cm": 15,
        "width_cm": 20,
    })
    quote = builder.request()

    # Same package, different service
    builder.set("service_code", ServiceCode.PAC)
    quote = builder.request()
"""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode, urlsplit

import httpx

from calcfrete.config import CorreiosSettings, load_settings
from calcfrete.errors.domain import NetworkError
from calcfrete.models import (
    QuoteResult,
    RateRequestParameters,
    format_parameter_value,
)
from calcfrete.services.correios_service_codes import (
    CASH_ON_DELIVERY_SERVICES,
    resolve_service_code,
)
from calcfrete.services.quote_parsing import parse_first_quote, parse_money, parse_quotes
from calcfrete.utils.redaction import (
    redact_for_logging,
    redact_url,
    sanitize_error_message,
)

logger = logging.getLogger(__name__)

# Override key that replaces the endpoint for one builder instance
URL_OVERRIDE_KEY = "url"
SERVICE_CODE_FIELD = "service_code"

CASH_ON_DELIVERY_CODES = frozenset(str(code) for code in CASH_ON_DELIVERY_SERVICES)


def _coerce_override(value: Any) -> str:
    """Convert an override value to the trimmed string that gets stored."""
    return format_parameter_value(value).strip()


def _coerce_service_code(value: Any) -> str:
    """Resolve service names and aliases ("sedex", "PAC") to numeric codes.

    Unrecognized entries are kept as given so new Correios codes still work.
    """
    items = value if isinstance(value, (list, tuple)) else [value]
    resolved = []
    for item in items:
        service = resolve_service_code(item)
        resolved.append(service if service is not None else item)
    return _coerce_override(resolved)


class RateRequestBuilder:
    """Builds and sends price/deadline requests to the Correios calculator.

    Not safe for concurrent use: callers sharing an instance must
    serialize their set/request calls.
    """

    def __init__(
        self,
        initial: Mapping[str, Any] | None = None,
        *,
        settings: CorreiosSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            initial: Optional overrides applied through apply_overrides().
            settings: Endpoint, timeout and default contract credentials.
                Loaded from the environment when omitted.
            http_client: Client used for requests. A short-lived client is
                opened per request when omitted.
        """
        self._settings = settings if settings is not None else load_settings()
        self._http_client = http_client
        self._url = self._settings.endpoint_url
        self._params = RateRequestParameters()

        if self._settings.company_id:
            self._params.set("company_id", self._settings.company_id)
        if self._settings.company_password:
            self._params.set("company_password", self._settings.company_password)

        if initial:
            self.apply_overrides(initial)

    @property
    def url(self) -> str:
        """Endpoint this builder sends requests to."""
        return self._url

    @property
    def parameters(self) -> RateRequestParameters:
        return self._params

    def apply_overrides(self, overrides: Mapping[str, Any] | None) -> None:
        """Merge overrides into the parameter set.

        Known field names (Python, wire or camelCase spelling) and the
        ``url`` key are stored as trimmed strings; None values are
        skipped. Other keys are ignored. Later calls win. Service names
        and aliases given for ``service_code`` are resolved to their
        numeric codes.

        Args:
            overrides: Mapping of field name to value.
        """
        if not overrides or not isinstance(overrides, Mapping):
            return

        for key, value in overrides.items():
            if value is None:
                continue
            if key == URL_OVERRIDE_KEY:
                self._url = _coerce_override(value)
                logger.debug("Endpoint overridden for this builder: %s", self._url)
            elif self._params.is_known(key):
                if self._params.resolve_name(key) == SERVICE_CODE_FIELD:
                    self._params.set(key, _coerce_service_code(value))
                else:
                    self._params.set(key, _coerce_override(value))
            else:
                logger.debug("Ignoring unknown rate request parameter %r", key)

    def get(self, name: str) -> Any:
        """Read a field by name.

        Raises:
            FieldNotFoundError: If ``name`` is not a documented parameter.
        """
        return self._params.get(name)

    def set(self, name: str, value: Any) -> None:
        """Write a field by name, storing the value as given.

        Raises:
            FieldNotFoundError: If ``name`` is not a documented parameter.
        """
        self._params.set(name, value)

    def set_extra(self, name: str, value: Any) -> None:
        """Send an undocumented calculator parameter with every request."""
        self._params.set_extra(name, value)

    def build_query(self) -> str:
        """Serialize all parameters, in declaration order, percent-encoded."""
        return urlencode(self._params.to_query_pairs())

    def build_url(self) -> str:
        """Append the query to the endpoint, keeping any query it already has."""
        separator = "&" if urlsplit(self._url).query else "?"
        return f"{self._url}{separator}{self.build_query()}"

    def request(self, overrides: Mapping[str, Any] | None = None) -> QuoteResult:
        """Request a quote and return the first ``cServico`` node.

        Args:
            overrides: Optional overrides merged before sending.

        Returns:
            QuoteResult for the first quote node. Remote business errors
            (invalid CEP, weight out of range, ...) are reported in its
            error_code/error_message, not raised.

        Raises:
            NetworkError: On transport failure or non-2xx status.
            ParseError: On empty or malformed response body.
        """
        self.apply_overrides(overrides)
        return parse_first_quote(self._send())

    def request_all(self, overrides: Mapping[str, Any] | None = None) -> list[QuoteResult]:
        """Request quotes and return every ``cServico`` node.

        Pass a list of service codes as ``service_code`` to price several
        services in one call.

        Raises:
            NetworkError: On transport failure or non-2xx status.
            ParseError: On empty or malformed response body.
        """
        self.apply_overrides(overrides)
        return parse_quotes(self._send())

    def _send(self) -> bytes:
        logger.debug("Rate request parameters: %s", redact_for_logging(self._params.as_dict()))
        self._check_collect_amount()
        return self._fetch(self.build_url())

    def _check_collect_amount(self) -> None:
        """Warn when a cash-on-delivery service has no amount to collect."""
        codes = format_parameter_value(self._params.get(SERVICE_CODE_FIELD)).split(",")
        if not any(code.strip() in CASH_ON_DELIVERY_CODES for code in codes):
            return
        declared = parse_money(format_parameter_value(self._params.get("declared_value")))
        if not declared:
            logger.warning(
                "Cash-on-delivery service requested without a declared value; "
                "Correios collects the declared value from the recipient"
            )

    def _fetch(self, url: str) -> bytes:
        """GET ``url`` and return the raw response body."""
        safe_url = redact_url(url)
        logger.info("Requesting Correios quote: %s", safe_url)

        try:
            if self._http_client is not None:
                response = self._http_client.get(url)
                response.raise_for_status()
                return response.content

            with httpx.Client(timeout=self._settings.timeout, follow_redirects=True) as client:
                response = client.get(url)
                response.raise_for_status()
                return response.content

        except httpx.HTTPStatusError as e:
            details = f"{e.response.status_code} {e.response.reason_phrase}"
            logger.warning("Correios returned %s for %s", details, safe_url)
            raise NetworkError.for_request(safe_url, details) from None
        except httpx.RequestError as e:
            details = sanitize_error_message(str(e) or type(e).__name__)
            logger.warning("Correios request failed: %s", details)
            raise NetworkError.for_request(safe_url, details) from None
