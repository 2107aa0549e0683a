"""Error code registry with E-XXXX format codes.

This module defines the error code system for calcfrete, organizing errors
into categories:
- E-2xxx: Package validation errors (reported by Correios)
- E-3xxx: Correios service errors
- E-4xxx: Client/system errors
- E-5xxx: Contract authentication errors

Each error includes a code, title, message template, and remediation steps.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """Categories for error codes."""

    VALIDATION = "validation"  # E-2xxx: Package validation errors
    CORREIOS = "correios"  # E-3xxx: Correios service errors
    SYSTEM = "system"  # E-4xxx: Client/system errors
    AUTH = "auth"  # E-5xxx: Contract authentication errors


@dataclass
class ErrorCode:
    """Definition of an error code with metadata.

    Attributes:
        code: Error code in E-XXXX format.
        category: Error category for grouping.
        title: Short title for display.
        message_template: Message with {placeholders} for context.
        remediation: Action user should take to resolve.
        is_retryable: Whether the operation can be retried without user action.
    """

    code: str  # E-XXXX format
    category: ErrorCategory
    title: str
    message_template: str
    remediation: str
    is_retryable: bool = False


ERROR_REGISTRY: dict[str, ErrorCode] = {
    # Validation errors (E-2xxx)
    "E-2001": ErrorCode(
        code="E-2001",
        category=ErrorCategory.VALIDATION,
        title="Invalid Postal Code",
        message_template="Correios rejected the postal code: {correios_message}",
        remediation="CEPs must be 8 numeric digits with no formatting characters. Correct and retry.",
    ),
    "E-2004": ErrorCode(
        code="E-2004",
        category=ErrorCategory.VALIDATION,
        title="Invalid Weight",
        message_template="Correios rejected the package weight: {correios_message}",
        remediation="Weight must be 0.3 kg or between 1 kg and 30 kg. Correct and retry.",
    ),
    "E-2006": ErrorCode(
        code="E-2006",
        category=ErrorCategory.VALIDATION,
        title="Invalid Dimensions",
        message_template="Correios rejected the package dimensions: {correios_message}",
        remediation="Check length, width, height and diameter against the limits for the package format.",
    ),
    "E-2007": ErrorCode(
        code="E-2007",
        category=ErrorCategory.VALIDATION,
        title="Invalid Declared Value",
        message_template="Correios rejected the declared value: {correios_message}",
        remediation="Declare a value within the service limits, or omit it for services that do not require one.",
    ),
    "E-2008": ErrorCode(
        code="E-2008",
        category=ErrorCategory.VALIDATION,
        title="Unsupported Service Option",
        message_template="The selected service does not accept this option: {correios_message}",
        remediation="Turn off hand delivery or receipt notice for this service and retry.",
    ),
    # Correios service errors (E-3xxx)
    "E-3001": ErrorCode(
        code="E-3001",
        category=ErrorCategory.CORREIOS,
        title="Correios Service Unavailable",
        message_template="The Correios calculator is not responding: {correios_message}",
        remediation="Wait a few minutes and retry.",
        is_retryable=True,
    ),
    "E-3004": ErrorCode(
        code="E-3004",
        category=ErrorCategory.CORREIOS,
        title="Service Not Available For Route",
        message_template="The service is not available between these postal codes: {correios_message}",
        remediation="Try a different service or verify both postal codes are serviceable.",
    ),
    "E-3005": ErrorCode(
        code="E-3005",
        category=ErrorCategory.CORREIOS,
        title="Correios Unknown Error",
        message_template="Correios returned an unexpected error: {correios_message}",
        remediation="Contact support with error code E-3005 and the Correios message.",
    ),
    "E-3006": ErrorCode(
        code="E-3006",
        category=ErrorCategory.CORREIOS,
        title="Delivery Subject To Extended Time",
        message_template="Delivery to this area may take longer than quoted: {correios_message}",
        remediation="The quote is valid. Inform the recipient that delivery may be delayed.",
    ),
    "E-3007": ErrorCode(
        code="E-3007",
        category=ErrorCategory.CORREIOS,
        title="Invalid Service Code",
        message_template="Correios does not recognise the service code: {correios_message}",
        remediation="Use one of the ServiceCode constants (SEDEX, SEDEX10, SEDEX_COD, PAC).",
    ),
    # System errors (E-4xxx)
    "E-4001": ErrorCode(
        code="E-4001",
        category=ErrorCategory.SYSTEM,
        title="Network Error",
        message_template="Request to {url} failed: {details}",
        remediation="Check network connectivity and the endpoint URL, then retry.",
        is_retryable=True,
    ),
    "E-4002": ErrorCode(
        code="E-4002",
        category=ErrorCategory.SYSTEM,
        title="Malformed Response",
        message_template="Could not parse the Correios response: {details}",
        remediation="The calculator returned an unexpected document. Retry, and contact support if it persists.",
    ),
    "E-4003": ErrorCode(
        code="E-4003",
        category=ErrorCategory.SYSTEM,
        title="Unknown Parameter",
        message_template="'{field}' is not a rate request parameter.",
        remediation="Use one of the documented parameter names, or set_extra() for undocumented ones.",
    ),
    # Auth errors (E-5xxx)
    "E-5001": ErrorCode(
        code="E-5001",
        category=ErrorCategory.AUTH,
        title="Contract Authentication Failed",
        message_template="Correios rejected the contract credentials: {correios_message}",
        remediation="Check the administrative code and password of your Correios contract.",
    ),
    "E-5002": ErrorCode(
        code="E-5002",
        category=ErrorCategory.AUTH,
        title="Contract Not Active",
        message_template="The Correios contract cannot be used for this request: {correios_message}",
        remediation="Verify the contract is active and includes the requested service.",
    ),
}


def get_error(code: str) -> ErrorCode | None:
    """Get error definition by code.

    Args:
        code: Error code in E-XXXX format.

    Returns:
        ErrorCode if found, None otherwise.
    """
    return ERROR_REGISTRY.get(code)


def get_errors_by_category(category: ErrorCategory) -> list[ErrorCode]:
    """Get all errors in a category."""
    return [e for e in ERROR_REGISTRY.values() if e.category == category]
