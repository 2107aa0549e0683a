"""Secret redaction utility for safe logging and error messages.

Prevents the Correios contract password from leaking into logs and
exception text. Uses case-insensitive substring matching for sensitive
key detection.
"""

import re
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

# Substring patterns matched case-insensitively against parameter names
_DEFAULT_SENSITIVE_PATTERNS = frozenset({
    "senha", "password", "secret", "token", "credential",
})

_REDACTED = "***REDACTED***"


def _is_sensitive_key(key: str, sensitive_patterns: frozenset[str]) -> bool:
    """Check if a key matches any sensitive pattern (case-insensitive substring)."""
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in sensitive_patterns)


def redact_for_logging(
    obj: dict,
    sensitive_patterns: frozenset[str] = _DEFAULT_SENSITIVE_PATTERNS,
) -> dict:
    """Redact sensitive values from a dict for safe logging.

    Args:
        obj: Dict to redact (not mutated; a copy is returned).
        sensitive_patterns: Substring patterns whose matching keys' values
            should be replaced. Matching is case-insensitive.

    Returns:
        New dict with sensitive, non-empty values replaced by
        '***REDACTED***'. Nested dicts are handled recursively.
    """
    result = {}
    for key, value in obj.items():
        if _is_sensitive_key(str(key), sensitive_patterns) and value not in (None, ""):
            result[key] = _REDACTED
        elif isinstance(value, dict):
            result[key] = redact_for_logging(value, sensitive_patterns)
        else:
            result[key] = value
    return result


def redact_url(
    url: str,
    sensitive_patterns: frozenset[str] = _DEFAULT_SENSITIVE_PATTERNS,
) -> str:
    """Return ``url`` with sensitive query parameter values redacted.

    Parameter order and empty values are preserved.
    """
    parts = urlsplit(url)
    if not parts.query:
        return url
    pairs = [
        (key, _REDACTED if value and _is_sensitive_key(key, sensitive_patterns) else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    query = urlencode(pairs, safe="*")
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


# Detects key=value pairs for sensitive keys in free text (e.g., a URL
# embedded in an httpx error message).
_SENSITIVE_KEYWORDS = r"senha|password|secret|token|credential"
_SENSITIVE_VALUE_PATTERNS = re.compile(
    r"(?i)(\w*(?:" + _SENSITIVE_KEYWORDS + r")\w*)\s*[=:]\s*[^\s&'\"]+",
)


def sanitize_error_message(msg: str | None, max_length: int = 2000) -> str | None:
    """Sanitize an error message before it is logged or raised.

    Redacts sensitive-looking key=value pairs and truncates to max_length.

    Args:
        msg: Error message to sanitize (None passes through).
        max_length: Maximum length of the sanitized message.

    Returns:
        Sanitized and truncated message, or None.
    """
    if msg is None:
        return None
    sanitized = _SENSITIVE_VALUE_PATTERNS.sub(lambda m: f"{m.group(1)}={_REDACTED}", msg)
    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length - 3] + "..."
    return sanitized
