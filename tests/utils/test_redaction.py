"""Tests for secret redaction utility."""

from urllib.parse import parse_qsl, urlsplit


class TestRedactForLogging:

    def test_redacts_password_fields(self):
        from calcfrete.utils.redaction import redact_for_logging

        data = {"company_id": "08082650", "company_password": "564321", "weight_kg": "1"}
        result = redact_for_logging(data)
        assert result["company_password"] == "***REDACTED***"
        assert result["company_id"] == "08082650"
        assert result["weight_kg"] == "1"

    def test_unset_password_left_alone(self):
        from calcfrete.utils.redaction import redact_for_logging

        data = {"company_password": None, "sDsSenha": ""}
        assert redact_for_logging(data) == data

    def test_case_insensitive_matching(self):
        from calcfrete.utils.redaction import redact_for_logging

        result = redact_for_logging({"sDsSenha": "x", "ACCESS_TOKEN": "y"})
        assert result == {"sDsSenha": "***REDACTED***", "ACCESS_TOKEN": "***REDACTED***"}

    def test_handles_nested_dict(self):
        from calcfrete.utils.redaction import redact_for_logging

        result = redact_for_logging({"outer": {"password": "p", "name": "n"}})
        assert result["outer"] == {"password": "***REDACTED***", "name": "n"}

    def test_does_not_mutate_input(self):
        from calcfrete.utils.redaction import redact_for_logging

        data = {"password": "p"}
        redact_for_logging(data)
        assert data == {"password": "p"}


class TestRedactUrl:

    def test_redacts_password_param(self):
        from calcfrete.utils.redaction import redact_url

        url = "http://calc.test/CalcPrecoPrazo.aspx?nCdEmpresa=123&sDsSenha=hunter2&nVlPeso=1"
        result = redact_url(url)

        assert "hunter2" not in result
        pairs = parse_qsl(urlsplit(result).query, keep_blank_values=True)
        assert pairs == [
            ("nCdEmpresa", "123"),
            ("sDsSenha", "***REDACTED***"),
            ("nVlPeso", "1"),
        ]

    def test_empty_password_kept_empty(self):
        from calcfrete.utils.redaction import redact_url

        url = "http://calc.test/calc?nCdEmpresa=&sDsSenha=&nVlPeso=1"
        assert redact_url(url) == url

    def test_url_without_query(self):
        from calcfrete.utils.redaction import redact_url

        assert redact_url("http://calc.test/calc") == "http://calc.test/calc"


class TestSanitizeErrorMessage:

    def test_redacts_password_in_text(self):
        from calcfrete.utils.redaction import sanitize_error_message

        msg = "connection refused: http://calc.test/calc?sDsSenha=hunter2&nVlPeso=1"
        result = sanitize_error_message(msg)
        assert "hunter2" not in result
        assert "sDsSenha=***REDACTED***&nVlPeso=1" in result

    def test_none_passthrough(self):
        from calcfrete.utils.redaction import sanitize_error_message

        assert sanitize_error_message(None) is None

    def test_truncates(self):
        from calcfrete.utils.redaction import sanitize_error_message

        result = sanitize_error_message("x" * 50, max_length=10)
        assert result == "xxxxxxx..."
