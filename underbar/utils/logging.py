"""
Logging configuration for underbar.

Structured logging built on structlog, rendered through Rich on the console
or as JSON lines, with operation context and correlation IDs.
"""

import contextvars
import logging
import logging.handlers
import time
import uuid
from typing import Any

import structlog
from rich.console import Console
from rich.logging import RichHandler

# Context variables for correlation and operation tracking
correlation_id: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)
operation_context: contextvars.ContextVar[dict[str, Any] | None] = (
    contextvars.ContextVar("operation_context", default=None)
)
operation_start_time: contextvars.ContextVar[float] = contextvars.ContextVar(
    "operation_start_time", default=0.0
)


class CorrelationIDProcessor:
    """Processor to add correlation ID to log records."""

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        correlation_id_value = correlation_id.get()
        if correlation_id_value:
            event_dict["correlation_id"] = correlation_id_value
        return event_dict


class OperationContextProcessor:
    """Processor to add operation context to log records."""

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        context = operation_context.get()
        if context:
            for key, value in context.items():
                event_dict.setdefault(key, value)
        return event_dict


class StructuredLogger:
    """Thin wrapper around a structlog logger with keyword-context methods."""

    def __init__(self, logger_name: str):
        # Wrapping a stdlib logger keeps library logging silent until
        # setup_logging() installs handlers and levels.
        self.logger = structlog.wrap_logger(logging.getLogger(logger_name))
        self._logger_name = logger_name

    @property
    def name(self) -> str:
        return self._logger_name

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message with structured data."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message with structured data."""
        self.logger.warning(message, **kwargs)

    def error(
        self, message: str, error: Exception | None = None, **kwargs: Any
    ) -> None:
        """Log an error message with structured data and exception details."""
        if error:
            kwargs.update(
                {
                    "error": str(error),
                    "error_type": type(error).__name__,
                    "error_module": type(error).__module__,
                }
            )
        self.logger.error(message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message with structured data."""
        self.logger.debug(message, **kwargs)


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    json_logs: bool = False,
    log_file: str | None = None,
    log_level: str | None = None,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 3,
) -> None:
    """Configure structured logging for the command line."""

    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        # Unknown level names fall back to INFO
        level = logging.getLevelName((log_level or "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO

    base_processors = [
        CorrelationIDProcessor(),
        OperationContextProcessor(),
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if json_logs:
        renderers = [
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        renderers = [
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ],
                additional_ignores=[__name__],
            ),
            structlog.dev.ConsoleRenderer(colors=False),
        ]
        # Logs go to stderr so command output on stdout stays machine readable
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
        )

    handlers = [handler]

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    structlog.configure(
        processors=[*base_processors, *renderers],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

    configure_third_party_loggers(verbose)


def configure_third_party_loggers(verbose: bool) -> None:
    """Configure third-party library loggers."""
    logging.getLogger("rich").setLevel(logging.WARNING)

    if verbose:
        logging.getLogger("asyncio").setLevel(logging.DEBUG)
    else:
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name)


def get_correlation_id() -> str:
    """Get the current correlation ID."""
    return correlation_id.get()


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


def clear_context() -> None:
    """Clear all logging context variables."""
    correlation_id.set("")
    operation_context.set(None)
    operation_start_time.set(0.0)


class LoggingContextManager:
    """Context manager for structured logging contexts."""

    def __init__(
        self,
        logger: StructuredLogger,
        operation: str,
        correlation_id_value: str | None = None,
        **context: Any,
    ):
        self.logger = logger
        self.operation = operation
        self.correlation_id_value = correlation_id_value or generate_correlation_id()
        self.context = context
        self._tokens: list[tuple[contextvars.ContextVar, contextvars.Token]] = []

    def __enter__(self) -> StructuredLogger:
        self._tokens = [
            (correlation_id, correlation_id.set(self.correlation_id_value)),
            (
                operation_context,
                operation_context.set({"operation": self.operation, **self.context}),
            ),
            (operation_start_time, operation_start_time.set(time.time())),
        ]

        self.logger.debug(f"Starting operation: {self.operation}")
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = (time.time() - operation_start_time.get()) * 1000

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation}",
                error=exc_val,
                duration_ms=round(duration_ms, 2),
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation}",
                duration_ms=round(duration_ms, 2),
            )

        for var, token in reversed(self._tokens):
            var.reset(token)
        self._tokens = []


def operation_logger(
    operation_name: str, correlation_id_value: str | None = None, **context: Any
) -> LoggingContextManager:
    """Create a logging context manager for operations."""
    logger = get_logger(__name__)
    return LoggingContextManager(
        logger, operation_name, correlation_id_value, **context
    )
