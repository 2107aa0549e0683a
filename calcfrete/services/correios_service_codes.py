"""Canonical Correios service code definitions.

Single source of truth for the service code enum, aliases, display
names, and the resolver function. Codes are the non-contract ("sem
contrato") values accepted by the remote calculator.
"""

from enum import IntEnum


class ServiceCode(IntEnum):
    """Correios service codes for the price/deadline calculator."""

    SEDEX = 40010
    SEDEX10 = 40215
    SEDEX_COD = 40045  # SEDEX a cobrar (cash on delivery)
    PAC = 41106


# ---------------------------------------------------------------------------
# Alias mapping: maps user-friendly terms to ServiceCode enum values
# ---------------------------------------------------------------------------

SERVICE_ALIASES: dict[str, ServiceCode] = {
    # SEDEX
    "sedex": ServiceCode.SEDEX,
    "express": ServiceCode.SEDEX,
    # SEDEX 10
    "sedex10": ServiceCode.SEDEX10,
    "sedex 10": ServiceCode.SEDEX10,
    "sedex_10": ServiceCode.SEDEX10,
    # SEDEX a cobrar
    "sedex_cod": ServiceCode.SEDEX_COD,
    "sedex cod": ServiceCode.SEDEX_COD,
    "sedex a cobrar": ServiceCode.SEDEX_COD,
    "sedexacobrar": ServiceCode.SEDEX_COD,
    "cash on delivery": ServiceCode.SEDEX_COD,
    # PAC
    "pac": ServiceCode.PAC,
    "economico": ServiceCode.PAC,
    "econômico": ServiceCode.PAC,
}

# Reverse mapping: code value → ServiceCode enum member
CODE_TO_SERVICE: dict[int, ServiceCode] = {code.value: code for code in ServiceCode}

# Display names: code value → human-readable name
SERVICE_CODE_NAMES: dict[int, str] = {
    40010: "SEDEX",
    40215: "SEDEX 10",
    40045: "SEDEX a Cobrar",
    41106: "PAC",
}

# Services that use the declared value as the amount to collect
CASH_ON_DELIVERY_SERVICES: frozenset[int] = frozenset({
    40045,  # SEDEX a cobrar
})


def resolve_service_code(value: object) -> ServiceCode | None:
    """Resolve a user-supplied service reference to a ServiceCode.

    Accepts an enum member, an integer code, a numeric string, an enum
    name ("SEDEX_COD") or an alias ("sedex a cobrar").

    Returns:
        The matching ServiceCode, or None if nothing matches.
    """
    if isinstance(value, ServiceCode):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return CODE_TO_SERVICE.get(value)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if text.isdigit():
        return CODE_TO_SERVICE.get(int(text))
    if text.upper() in ServiceCode.__members__:
        return ServiceCode[text.upper()]
    return SERVICE_ALIASES.get(text.lower())


def get_service_name(code: object) -> str | None:
    """Return the display name for a service reference, if known."""
    service = resolve_service_code(code)
    if service is None:
        return None
    return SERVICE_CODE_NAMES[service.value]
