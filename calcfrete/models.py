"""Models for the Correios price/deadline calculator client."""

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from calcfrete.errors.correios_translation import (
    CORREIOS_SUCCESS_CODES,
    CORREIOS_WARNING_CODES,
    normalize_correios_code,
    translate_correios_error,
)
from calcfrete.errors.domain import FieldNotFoundError


class PackageFormat(IntEnum):
    """Package formats accepted by ``nCdFormato``."""

    BOX = 1
    ROLL = 2  # roll or prism; uses diameter
    ENVELOPE = 3


class CalculationMode(IntEnum):
    """Outputs computed by the calculator (``nIndicaCalculo``)."""

    PRICE_ONLY = 1
    DEADLINE_ONLY = 2
    PRICE_AND_DEADLINE = 3


@dataclass(frozen=True)
class ParameterField:
    """One documented calculator parameter.

    Attributes:
        name: Python-side field name.
        wire_name: Name sent in the query string.
        alias: camelCase name accepted as an alternative key.
        default: Value used until the field is set.
    """

    name: str
    wire_name: str
    alias: str
    default: Any = None


# Declaration order is the order fields appear in the query string.
RATE_REQUEST_FIELDS: tuple[ParameterField, ...] = (
    ParameterField("company_id", "nCdEmpresa", "companyId"),
    ParameterField("company_password", "sDsSenha", "companyPassword"),
    ParameterField("origin_postal_code", "sCepOrigem", "originPostalCode"),
    ParameterField("destination_postal_code", "sCepDestino", "destinationPostalCode"),
    ParameterField("weight_kg", "nVlPeso", "weightKg"),
    ParameterField("package_format", "nCdFormato", "packageFormat", PackageFormat.BOX.value),
    ParameterField("length_cm", "nVlComprimento", "lengthCm"),
    ParameterField("height_cm", "nVlAltura", "heightCm"),
    ParameterField("width_cm", "nVlLargura", "widthCm"),
    ParameterField("hand_delivery", "sCdMaoPropria", "handDelivery", "N"),
    ParameterField("declared_value", "nVlValorDeclarado", "declaredValue", 0),
    ParameterField("receipt_notice", "sCdAvisoRecebimento", "receiptNotice", "N"),
    ParameterField("service_code", "nCdServico", "serviceCode"),
    ParameterField("diameter_cm", "nVlDiametro", "diameterCm", 0),
    ParameterField("response_format", "StrRetorno", "responseFormat", "xml"),
    ParameterField(
        "calculation_mode", "nIndicaCalculo", "calculationMode",
        CalculationMode.PRICE_AND_DEADLINE.value,
    ),
)

# Every accepted spelling → Python field name
FIELD_NAME_LOOKUP: dict[str, str] = {}
for _field in RATE_REQUEST_FIELDS:
    FIELD_NAME_LOOKUP[_field.name] = _field.name
    FIELD_NAME_LOOKUP[_field.wire_name] = _field.name
    FIELD_NAME_LOOKUP[_field.alias] = _field.name
del _field


def format_parameter_value(value: Any) -> str:
    """Render a parameter value the way the calculator expects it.

    None becomes an empty token, enums their value, booleans the
    Correios ``S``/``N`` flag, and sequences a comma-separated list
    (used to quote several services in one call).
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "S" if value else "N"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(format_parameter_value(item) for item in value)
    return str(value)


class RateRequestParameters:
    """Ordered, closed-set parameter mapping for one rate request.

    Fields are addressed by Python name (``weight_kg``), Correios wire
    name (``nVlPeso``) or camelCase alias (``weightKg``). Undocumented
    parameters go through ``set_extra`` and are sent after the
    documented ones.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {f.name: f.default for f in RATE_REQUEST_FIELDS}
        self._extras: dict[str, Any] = {}

    @staticmethod
    def resolve_name(name: str) -> str:
        """Return the Python field name for any accepted spelling.

        Raises:
            FieldNotFoundError: If ``name`` is not a documented parameter.
        """
        try:
            return FIELD_NAME_LOOKUP[name]
        except (KeyError, TypeError):
            raise FieldNotFoundError.for_field(str(name)) from None

    @staticmethod
    def is_known(name: object) -> bool:
        return isinstance(name, str) and name in FIELD_NAME_LOOKUP

    def get(self, name: str) -> Any:
        return self._values[self.resolve_name(name)]

    def set(self, name: str, value: Any) -> None:
        self._values[self.resolve_name(name)] = value

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return self.is_known(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def set_extra(self, name: str, value: Any) -> None:
        """Store an undocumented calculator parameter verbatim."""
        if self.is_known(name):
            raise ValueError(f"'{name}' is a documented parameter; use set() instead")
        self._extras[name] = value

    @property
    def extras(self) -> dict[str, Any]:
        return dict(self._extras)

    def as_dict(self) -> dict[str, Any]:
        """Return documented fields keyed by Python name, in declaration order."""
        return dict(self._values)

    def to_query_pairs(self) -> list[tuple[str, str]]:
        """Return (wire_name, value) pairs in declaration order, extras last."""
        pairs = [
            (f.wire_name, format_parameter_value(self._values[f.name]))
            for f in RATE_REQUEST_FIELDS
        ]
        pairs.extend(
            (name, format_parameter_value(value)) for name, value in self._extras.items()
        )
        return pairs


class QuoteResult(BaseModel):
    """One ``cServico`` node of the calculator response.

    Every field is None when the response carried no quote node.
    """

    service_code: str | None = Field(None, description="Codigo: service the quote refers to")
    price: Decimal | None = Field(None, description="Valor: total price in BRL")
    delivery_days: int | None = Field(None, description="PrazoEntrega: business days to deliver")
    hand_delivery_price: Decimal | None = Field(None, description="ValorMaoPropria surcharge")
    receipt_notice_price: Decimal | None = Field(None, description="ValorAvisoRecebimento surcharge")
    declared_value_price: Decimal | None = Field(None, description="ValorValorDeclarado surcharge")
    price_without_extras: Decimal | None = Field(None, description="ValorSemAdicionais")
    home_delivery: bool | None = Field(None, description="EntregaDomiciliar")
    saturday_delivery: bool | None = Field(None, description="EntregaSabado")
    error_code: str | None = Field(None, description="Erro: Correios error code ('0' on success)")
    error_message: str | None = Field(None, description="MsgErro")
    notes: str | None = Field(None, description="obsFim: free-text remark")
    raw: dict[str, Any] = Field(default_factory=dict, description="Original node as parsed")

    model_config = ConfigDict(frozen=True)

    @property
    def surcharges(self) -> dict[str, Decimal]:
        """Per-surcharge price breakdown (only surcharges present in the node)."""
        breakdown = {
            "hand_delivery": self.hand_delivery_price,
            "receipt_notice": self.receipt_notice_price,
            "declared_value": self.declared_value_price,
        }
        return {name: value for name, value in breakdown.items() if value is not None}

    @property
    def is_success(self) -> bool:
        return normalize_correios_code(self.error_code) in CORREIOS_SUCCESS_CODES

    @property
    def is_warning(self) -> bool:
        """Correios flagged the quote but still priced it."""
        return normalize_correios_code(self.error_code) in CORREIOS_WARNING_CODES

    @property
    def has_error(self) -> bool:
        code = normalize_correios_code(self.error_code)
        return code is not None and not self.is_success and not self.is_warning

    def translate_error(self) -> tuple[str, str, str] | None:
        """Map the Correios error to (E-code, message, remediation).

        Returns:
            None when the quote succeeded or carries no error code.
        """
        if normalize_correios_code(self.error_code) is None or self.is_success:
            return None
        return translate_correios_error(self.error_code, self.error_message)
