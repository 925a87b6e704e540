"""
Exception hierarchy for underbar.

The collection functions themselves never raise these: misuse surfaces as
ordinary Python errors. They are raised by the configuration layer and the
command line, which need categorised errors with troubleshooting hints.
"""

import time
from enum import Enum
from typing import Any

from .logging import get_logger

logger = get_logger(__name__)


class ErrorCategory(Enum):
    """Categories for error classification."""

    USER_ERROR = "user_error"
    CONFIGURATION_ERROR = "configuration_error"
    DATA_ERROR = "data_error"
    SYSTEM_ERROR = "system_error"


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class UnderbarError(Exception):
    """
    Base exception for all underbar errors.

    Carries error context, categorisation and troubleshooting guidance.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        category: ErrorCategory = ErrorCategory.SYSTEM_ERROR,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        correlation_id: str | None = None,
        user_message: str | None = None,
        troubleshooting_hints: list[str] | None = None,
        **context: Any,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.category = category
        self.severity = severity
        self.correlation_id = correlation_id
        self.user_message = user_message or message
        self.troubleshooting_hints = troubleshooting_hints or []
        self.context = context
        self.timestamp = time.time()

        self._log_error()

    def _log_error(self) -> None:
        """Log error creation with full context."""
        logger.debug(
            f"Exception created: {self.__class__.__name__}",
            error_message=self.message,
            category=self.category.value,
            severity=self.severity.value,
            correlation_id=self.correlation_id,
            details=self.details,
            **self.context,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "user_message": self.user_message,
            "category": self.category.value,
            "severity": self.severity.value,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp,
            "details": self.details,
            "troubleshooting_hints": self.troubleshooting_hints,
            "context": self.context,
        }

    def with_context(self, **context: Any) -> "UnderbarError":
        """Add additional context to the error."""
        self.context.update(context)
        return self


class ConfigurationError(UnderbarError):
    """Raised when settings cannot be loaded."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        actual_value: str | None = None,
        **kwargs,
    ):
        hints = [
            "Check your configuration file (.env) for missing or incorrect values",
            "Verify UNDERBAR_* environment variables are properly set",
            "Run 'underbar config-info' to see the effective settings",
        ]

        details = kwargs.setdefault("details", {})
        if config_key:
            hints.append(f"Ensure '{config_key}' is properly configured")
            details["config_key"] = config_key

        if actual_value:
            details["actual_value"] = actual_value

        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION_ERROR,
            severity=ErrorSeverity.HIGH,
            troubleshooting_hints=hints,
            **kwargs,
        )


class InputDataError(UnderbarError):
    """Raised when an input document cannot be read or decoded."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        reason: str | None = None,
        **kwargs,
    ):
        details = kwargs.setdefault("details", {})
        details.update({"source": source, "reason": reason})

        hints = [
            "Check that the file exists and is readable",
            "Verify the file contains a single valid JSON document",
            "Use '-' to read the document from standard input",
        ]

        super().__init__(
            message,
            category=ErrorCategory.DATA_ERROR,
            troubleshooting_hints=hints,
            **kwargs,
        )


class ValidationError(UnderbarError):
    """Raised when an input document has the wrong shape."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        field_value: Any | None = None,
        validation_rule: str | None = None,
        **kwargs,
    ):
        details = kwargs.setdefault("details", {})
        details.update(
            {
                "field_name": field_name,
                "field_value": field_value,
                "validation_rule": validation_rule,
            }
        )

        hints = [
            "Check the input data format and values",
            "Sequence commands expect a JSON array, merge commands a JSON object",
        ]

        if field_name:
            hints.append(f"Check the value provided for '{field_name}'")

        super().__init__(
            message,
            category=ErrorCategory.USER_ERROR,
            severity=ErrorSeverity.LOW,
            troubleshooting_hints=hints,
            **kwargs,
        )
