"""Typed domain exceptions raised by the rate request client.

Callers can catch a specific type instead of matching on codes:

    try:
        quote = builder.request()
    except NetworkError:
        ...  # transport failure or non-2xx status
    except ParseError:
        ...  # empty or malformed response body
"""

from calcfrete.errors.formatter import CalcFreteError


class NetworkError(CalcFreteError):
    """The Correios endpoint could not be reached or answered non-2xx."""

    @classmethod
    def for_request(cls, url: str, details: str) -> "NetworkError":
        return cls.from_code("E-4001", url=url, details=details)  # type: ignore[return-value]


class ParseError(CalcFreteError):
    """The response body is empty or not a well-formed XML document."""

    @classmethod
    def for_body(cls, details: str) -> "ParseError":
        return cls.from_code("E-4002", details=details)  # type: ignore[return-value]


class FieldNotFoundError(CalcFreteError, LookupError):
    """Raised when reading or writing a parameter that does not exist."""

    @classmethod
    def for_field(cls, name: str) -> "FieldNotFoundError":
        return cls.from_code("E-4003", field=name)  # type: ignore[return-value]
