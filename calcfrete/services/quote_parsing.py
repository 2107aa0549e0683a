"""Parse Correios calculator responses into QuoteResult objects.

Uses xmltodict to convert the XML body to a dict, then reads the
``cServico`` children of the document root. Money values arrive in
Brazilian notation ("1.234,56") and flags as "S"/"N".
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from calcfrete.errors.domain import ParseError
from calcfrete.models import QuoteResult

logger = logging.getLogger(__name__)

QUOTE_NODE = "cServico"


def parse_money(value: Any) -> Decimal | None:
    """Parse a Correios money string ("1.234,56") into a Decimal.

    Returns:
        Decimal value, or None for empty or unparseable input.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    if "," in text:
        text = text.replace(".", "").replace(",", ".")
    try:
        return Decimal(text)
    except InvalidOperation:
        logger.debug("Unparseable money value from Correios: %r", value)
        return None


def parse_int(value: Any) -> int | None:
    if value is None:
        return None
    text = str(value).strip()
    if not text.lstrip("-").isdigit():
        return None
    return int(text)


def parse_flag(value: Any) -> bool | None:
    """Parse an S/N flag. Unknown values yield None."""
    if value is None:
        return None
    text = str(value).strip().upper()
    if text in ("S", "Y", "TRUE"):
        return True
    if text in ("N", "FALSE"):
        return False
    return None


def _text(value: Any) -> str | None:
    """Return stripped text of a leaf node, or None for empty nodes."""
    if value is None:
        return None
    if isinstance(value, dict):
        value = value.get("#text")
        if value is None:
            return None
    text = str(value).strip()
    return text or None


def quote_from_node(node: Any) -> QuoteResult:
    """Build a QuoteResult from one parsed ``cServico`` node.

    A missing or empty node yields an empty QuoteResult.
    """
    if not isinstance(node, dict):
        return QuoteResult()

    fields = {key: _text(value) for key, value in node.items()}
    return QuoteResult(
        service_code=fields.get("Codigo"),
        price=parse_money(fields.get("Valor")),
        delivery_days=parse_int(fields.get("PrazoEntrega")),
        hand_delivery_price=parse_money(fields.get("ValorMaoPropria")),
        receipt_notice_price=parse_money(fields.get("ValorAvisoRecebimento")),
        declared_value_price=parse_money(fields.get("ValorValorDeclarado")),
        price_without_extras=parse_money(fields.get("ValorSemAdicionais")),
        home_delivery=parse_flag(fields.get("EntregaDomiciliar")),
        saturday_delivery=parse_flag(fields.get("EntregaSabado")),
        error_code=fields.get("Erro"),
        error_message=fields.get("MsgErro"),
        notes=fields.get("obsFim"),
        raw=dict(node),
    )


def parse_document(body: bytes | str) -> dict[str, Any]:
    """Parse a response body into a dict.

    Raises:
        ParseError: If the body is empty or not well-formed XML.
    """
    if not body or not body.strip():
        raise ParseError.for_body("empty response body")
    try:
        document = xmltodict.parse(body)
    except ExpatError as e:
        logger.warning("Malformed XML from Correios: %s", e)
        raise ParseError.for_body(str(e)) from e
    if not isinstance(document, dict) or not document:
        raise ParseError.for_body("document has no root element")
    return document


def extract_quote_nodes(document: dict[str, Any]) -> list[Any]:
    """Return the ``cServico`` children of the document root, in order."""
    root = next(iter(document.values()))
    if not isinstance(root, dict):
        return []
    nodes = root.get(QUOTE_NODE)
    if nodes is None:
        return []
    return nodes if isinstance(nodes, list) else [nodes]


def parse_quotes(body: bytes | str) -> list[QuoteResult]:
    """Parse every quote in a calculator response.

    Raises:
        ParseError: If the body is empty or malformed.
    """
    document = parse_document(body)
    return [quote_from_node(node) for node in extract_quote_nodes(document)]


def parse_first_quote(body: bytes | str) -> QuoteResult:
    """Parse the first quote in a calculator response.

    Returns:
        The first QuoteResult, or an empty QuoteResult when the document
        holds no ``cServico`` node.

    Raises:
        ParseError: If the body is empty or malformed.
    """
    nodes = extract_quote_nodes(parse_document(body))
    if not nodes:
        logger.info("Correios response contained no %s node", QUOTE_NODE)
        return QuoteResult()
    return quote_from_node(nodes[0])
