"""Tests for Correios error code translation to calcfrete E-codes."""

import pytest

from calcfrete.errors.correios_translation import (
    CORREIOS_ERROR_MAP,
    normalize_correios_code,
    translate_correios_error,
)
from calcfrete.errors.registry import get_error


class TestCorreiosCodeMapping:
    """Correios error codes map to the right E-codes."""

    @pytest.mark.parametrize(
        "correios_code,expected",
        [
            ("-1", "E-3007"),
            ("-2", "E-2001"),
            ("-3", "E-2001"),
            ("-4", "E-2004"),
            ("-5", "E-2007"),
            ("-6", "E-3004"),
            ("-8", "E-2008"),
            ("-15", "E-2006"),
            ("-33", "E-3001"),
            ("-34", "E-5001"),
            ("-36", "E-5002"),
            ("010", "E-3006"),
            ("7", "E-3001"),
            ("99", "E-3005"),
        ],
    )
    def test_code_lookup(self, correios_code, expected):
        code, _, _ = translate_correios_error(correios_code, "msg")
        assert code == expected

    def test_every_mapped_code_is_registered(self):
        for correios_code, calc_code in CORREIOS_ERROR_MAP.items():
            assert get_error(calc_code) is not None, correios_code

    def test_message_included(self):
        _, message, remediation = translate_correios_error("-3", "CEP de destino invalido.")
        assert message == "Correios rejected the postal code: CEP de destino invalido."
        assert remediation

    def test_code_without_message(self):
        _, message, _ = translate_correios_error("-4", None)
        assert "Code: -4" in message

    def test_whitespace_code(self):
        code, _, _ = translate_correios_error(" -3 ", None)
        assert code == "E-2001"


class TestMessagePatternFallback:
    """Unmapped codes fall back to message patterns, then E-3005."""

    def test_cep_pattern(self):
        code, _, _ = translate_correios_error("-999", "CEP nao encontrado")
        assert code == "E-2001"

    def test_password_pattern(self):
        code, _, _ = translate_correios_error(None, "Senha incorreta")
        assert code == "E-5001"

    def test_unknown_falls_back(self):
        code, message, _ = translate_correios_error("-12345", "algo estranho")
        assert code == "E-3005"
        assert "algo estranho" in message

    def test_nothing_known(self):
        code, message, _ = translate_correios_error(None, None)
        assert code == "E-3005"
        assert "Code: None" in message


class TestNormalizeCode:
    def test_normalize(self):
        assert normalize_correios_code(" 0 ") == "0"
        assert normalize_correios_code("") is None
        assert normalize_correios_code(None) is None
