"""Correios calculator error code translation to calcfrete E-codes.

The calculator reports business errors inside each ``cServico`` node
(``Erro``/``MsgErro``). This module maps those codes to the calcfrete
registry so callers get a stable code and an actionable remediation.
"""

from calcfrete.errors.registry import get_error

# Codes meaning the quote was computed normally
CORREIOS_SUCCESS_CODES: frozenset[str] = frozenset({"0", "00", "000"})

# Codes that still carry a valid price and deadline
CORREIOS_WARNING_CODES: frozenset[str] = frozenset({"009", "010", "011"})

# Source: Correios "Calculador Remoto de Preços e Prazos" implementation manual
CORREIOS_ERROR_MAP: dict[str, str] = {
    "-1": "E-3007",  # Código de serviço inválido
    "-2": "E-2001",  # CEP de origem inválido
    "-3": "E-2001",  # CEP de destino inválido
    "-4": "E-2004",  # Peso excedido
    "-5": "E-2007",  # Valor declarado acima do limite
    "-6": "E-3004",  # Serviço indisponível para o trecho
    "-7": "E-2007",  # Valor declarado obrigatório
    "-8": "E-2008",  # Serviço não aceita mão própria
    "-9": "E-2008",  # Serviço não aceita aviso de recebimento
    "-10": "E-3004",  # Precificação indisponível para o trecho
    "-11": "E-2006",  # Dimensões obrigatórias
    "-12": "E-2006",  # Comprimento inválido
    "-13": "E-2006",  # Largura inválida
    "-14": "E-2006",  # Altura inválida
    "-15": "E-2006",  # Comprimento acima do máximo
    "-16": "E-2006",  # Largura acima do máximo
    "-17": "E-2006",  # Altura acima do máximo
    "-18": "E-2006",  # Altura abaixo do mínimo
    "-20": "E-2006",  # Largura abaixo do mínimo
    "-22": "E-2006",  # Comprimento abaixo do mínimo
    "-23": "E-2006",  # Soma das dimensões acima do máximo
    "-24": "E-2006",
    "-25": "E-2006",  # Diâmetro inválido
    "-26": "E-2006",
    "-27": "E-2006",
    "-28": "E-2006",
    "-29": "E-2006",
    "-30": "E-2006",
    "-31": "E-2006",
    "-32": "E-2006",
    "-33": "E-3001",  # Sistema temporariamente fora do ar
    "-34": "E-5001",  # Código administrativo ou senha inválidos
    "-35": "E-5001",  # Senha incorreta
    "-36": "E-5002",  # Cliente sem contrato vigente
    "-37": "E-5002",  # Cliente sem serviço ativo no contrato
    "-38": "E-5002",  # Serviço indisponível para o código administrativo
    "-39": "E-2004",  # Peso excedido para envelope
    "-40": "E-2006",
    "-41": "E-2006",
    "-42": "E-2006",
    "-43": "E-2006",
    "-44": "E-2006",
    "-45": "E-2006",
    "-888": "E-3005",  # Erro ao calcular a tarifa
    "006": "E-2001",  # Localidade de origem não abrange o CEP
    "007": "E-2001",  # Localidade de destino não abrange o CEP
    "008": "E-3004",  # Serviço indisponível para o trecho
    "009": "E-3006",  # CEP inicial em área de risco
    "010": "E-3006",  # Entrega sujeita a prazo diferenciado
    "011": "E-3006",  # CEPs em área de risco
    "7": "E-3001",  # Serviço indisponível, tente mais tarde
    "99": "E-3005",  # Outros erros
}

# Message fragments used when the code itself is unmapped
CORREIOS_MESSAGE_PATTERNS: dict[str, str] = {
    "cep": "E-2001",
    "peso": "E-2004",
    "senha": "E-5001",
    "fora do ar": "E-3001",
    "indispon": "E-3004",
}


def normalize_correios_code(code: str | None) -> str | None:
    """Strip whitespace and drop empty codes."""
    if code is None:
        return None
    code = str(code).strip()
    return code or None


def translate_correios_error(
    correios_code: str | None,
    correios_message: str | None,
    context: dict | None = None,
) -> tuple[str, str, str]:
    """Translate a Correios error to a calcfrete error.

    Args:
        correios_code: Value of the ``Erro`` node (e.g., "-3").
        correios_message: Value of the ``MsgErro`` node.
        context: Additional template context.

    Returns:
        Tuple of (error_code, formatted_message, remediation).
    """
    context = context or {}
    correios_code = normalize_correios_code(correios_code)

    if correios_code and correios_code in CORREIOS_ERROR_MAP:
        error = get_error(CORREIOS_ERROR_MAP[correios_code])
        if error:
            message = _format_message(
                error.message_template,
                correios_message=correios_message or f"Code: {correios_code}",
                **context,
            )
            return (error.code, message, error.remediation)

    if correios_message:
        lowered = correios_message.lower()
        for pattern, code in CORREIOS_MESSAGE_PATTERNS.items():
            if pattern in lowered:
                error = get_error(code)
                if error:
                    message = _format_message(
                        error.message_template,
                        correios_message=correios_message,
                        **context,
                    )
                    return (error.code, message, error.remediation)

    error = get_error("E-3005")
    if error:
        message = _format_message(
            error.message_template,
            correios_message=correios_message or f"Code: {correios_code}",
            **context,
        )
        return (error.code, message, error.remediation)

    return (
        "E-3005",
        f"Correios error: {correios_message or correios_code or 'Unknown'}",
        "Contact support with this error message for assistance.",
    )


def _format_message(template: str, **kwargs: object) -> str:
    """Format a message template with context, ignoring missing keys."""
    try:
        return template.format(**kwargs)
    except KeyError:
        return template
