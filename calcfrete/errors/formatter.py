"""Coded application error and display formatting.

This module provides:
- CalcFreteError exception class carrying a registry code
- Error formatting for user display
"""

from dataclasses import dataclass, field

from calcfrete.errors.registry import get_error


@dataclass
class CalcFreteError(Exception):
    """Application error with code, message, and context.

    Attributes:
        code: Error code in E-XXXX format.
        message: Human-readable error message.
        remediation: Action user should take to resolve.
        is_retryable: Whether the operation can be retried without user action.
        details: Additional context dictionary.
    """

    code: str
    message: str
    remediation: str
    is_retryable: bool = False
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code}: {self.message}"

    @classmethod
    def from_code(cls, code: str, **kwargs: object) -> "CalcFreteError":
        """Create error from registry code with context substitution.

        Args:
            code: Error code in E-XXXX format.
            **kwargs: Context values for message template substitution.
                The special key 'details' is also kept on the instance
                when it is a dict.

        Returns:
            Instance of ``cls`` with formatted message.
        """
        details = kwargs.get("details", {})
        if not isinstance(details, dict):
            details = {}

        error_def = get_error(code)
        if not error_def:
            return cls(
                code=code,
                message=f"Unknown error: {code}",
                remediation="Contact support.",
                details=details,
            )

        message = error_def.message_template
        try:
            message = message.format(**kwargs)
        except KeyError:
            # Keep template if some placeholders are missing
            pass

        return cls(
            code=error_def.code,
            message=message,
            remediation=error_def.remediation,
            is_retryable=error_def.is_retryable,
            details=details,
        )


def format_error(error: CalcFreteError, include_remediation: bool = True) -> str:
    """Format error for display to user.

    Args:
        error: The CalcFreteError to format.
        include_remediation: Whether to include remediation steps.

    Returns:
        Multi-line formatted string suitable for user display.
    """
    lines = [f"{error.code}: {error.message}"]

    if error.is_retryable:
        lines.append("  Retryable: yes")

    if include_remediation:
        lines.append(f"  Action: {error.remediation}")

    return "\n".join(lines)
