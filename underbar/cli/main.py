"""
Command line interface for underbar using Typer.

Applies the collection functions to JSON documents read from files or
standard input and prints the result as JSON.
"""

import json
import random
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import core
from ..config import Settings, get_settings
from ..utils.exceptions import (
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    InputDataError,
    UnderbarError,
    ValidationError,
)
from ..utils.logging import (
    generate_correlation_id,
    get_logger,
    operation_logger,
    setup_logging,
)

app = typer.Typer(
    name="underbar",
    help="[bold blue]underbar[/bold blue] - functional helpers for JSON collections",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()

_logger = get_logger(__name__)


class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIGURATION_ERROR = 2
    DATA_ERROR = 3
    VALIDATION_ERROR = 4
    USER_INTERRUPTED = 130  # Standard SIGINT exit code


def get_exit_code_for_error(error: BaseException) -> int:
    """Determine appropriate exit code based on error type."""
    if isinstance(error, UnderbarError):
        category_to_exit_code = {
            ErrorCategory.CONFIGURATION_ERROR: ExitCodes.CONFIGURATION_ERROR,
            ErrorCategory.DATA_ERROR: ExitCodes.DATA_ERROR,
            ErrorCategory.USER_ERROR: ExitCodes.VALIDATION_ERROR,
        }
        return category_to_exit_code.get(error.category, ExitCodes.GENERAL_ERROR)

    if isinstance(error, KeyboardInterrupt):
        return ExitCodes.USER_INTERRUPTED

    return ExitCodes.GENERAL_ERROR


def get_configured_settings(config_path: Path | None = None) -> Settings:
    """Load settings, optionally from an explicit .env file."""
    try:
        if config_path is not None:
            settings = Settings(_env_file=str(config_path))
        else:
            settings = get_settings()
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load configuration: {e!s}",
            config_key="configuration_file" if config_path else "default_settings",
            actual_value=str(config_path) if config_path else "default",
        ) from e

    return settings


def display_enhanced_error(
    message: str,
    exception: BaseException | None = None,
    show_hints: bool = True,
) -> None:
    """Display an error message with troubleshooting hints."""
    console.print(f"[red]✗ Error:[/red] {escape(message)}")

    if isinstance(exception, UnderbarError):
        console.print(f"[dim red]Details: {escape(exception.user_message)}[/dim red]")
        console.print(
            f"[dim]Category: {exception.category.value.replace('_', ' ').title()}[/dim]"
        )
        if exception.severity in [ErrorSeverity.HIGH, ErrorSeverity.CRITICAL]:
            console.print(
                f"[dim red]Severity: {exception.severity.value.upper()}[/dim red]"
            )

        if show_hints and exception.troubleshooting_hints:
            console.print("\n[bold yellow]Troubleshooting Tips:[/bold yellow]")
            for i, hint in enumerate(exception.troubleshooting_hints, 1):
                console.print(f"  {i}. {escape(hint)}")

    elif exception:
        console.print(f"[dim red]Details: {escape(str(exception))}[/dim red]")

    _logger.error(f"CLI Error: {message}", error=exception)


def handle_cli_exception(operation: str, exception: BaseException) -> int:
    """Report a failed command and return its exit code."""
    exit_code = get_exit_code_for_error(exception)

    if isinstance(exception, KeyboardInterrupt):
        console.print("[yellow]⚠[/yellow] Operation cancelled by user")
        _logger.info("User interrupted operation", operation=operation)
    else:
        display_enhanced_error(f"{operation} failed", exception)

    return exit_code


# --- Input and output ---


def load_document(source: str) -> Any:
    """Read and decode one JSON document from a path or '-' for stdin."""
    try:
        if source == "-":
            text = typer.get_text_stream("stdin").read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise InputDataError(
            f"Cannot read input '{source}'", source=source, reason=str(e)
        ) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InputDataError(
            f"Input '{source}' is not valid JSON", source=source, reason=str(e)
        ) from e


def load_array(source: str) -> list[Any]:
    """Load a document that must be a JSON array."""
    document = load_document(source)
    if not isinstance(document, list):
        raise ValidationError(
            f"Input '{source}' must be a JSON array",
            field_name=source,
            field_value=type(document).__name__,
            validation_rule="array",
        )
    return document


def load_object(source: str) -> dict[str, Any]:
    """Load a document that must be a JSON object."""
    document = load_document(source)
    if not isinstance(document, dict):
        raise ValidationError(
            f"Input '{source}' must be a JSON object",
            field_name=source,
            field_value=type(document).__name__,
            validation_rule="object",
        )
    return document


def require_sources(sources: list[str], minimum: int) -> None:
    if len(sources) < minimum:
        raise ValidationError(
            f"Expected at least {minimum} inputs, got {len(sources)}",
            field_name="sources",
            field_value=len(sources),
            validation_rule=f"min_items={minimum}",
        )


def emit(result: Any) -> None:
    """Print a result as JSON on stdout."""
    console.print_json(json.dumps(result), highlight=False)


def run_command(ctx: typer.Context, operation: str, action: Callable[[], Any]) -> None:
    """Run a command body with operation logging and CLI error handling."""
    correlation_id = (ctx.obj or {}).get("correlation_id")

    try:
        with operation_logger(operation, correlation_id):
            result = action()
        emit(result)
    except (Exception, KeyboardInterrupt) as e:
        raise typer.Exit(handle_cli_exception(operation, e))


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only show warnings and errors"
    ),
    json_logs: bool = typer.Option(
        False, "--json-logs", help="Emit logs as JSON lines on stderr"
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (.env)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    [bold blue]underbar[/bold blue] - functional helpers for JSON collections

    Every command reads JSON documents (a path, or '-' for stdin) and prints
    the result as JSON.

    [bold]Examples:[/bold]
        underbar flatten nested.json
        underbar sort-by people.json name
        echo '[3, 1, 3]' | underbar uniq -
    """
    try:
        settings = get_configured_settings(config)
    except ConfigurationError as e:
        display_enhanced_error("Configuration error", e)
        raise typer.Exit(get_exit_code_for_error(e))

    setup_logging(
        verbose=verbose,
        quiet=quiet,
        json_logs=json_logs or settings.log_format == "json",
        log_file=str(settings.log_file) if settings.log_file else None,
        log_level=settings.log_level,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["verbose"] = verbose
    ctx.obj["correlation_id"] = generate_correlation_id()


# --- Sequence commands ---


@app.command("first")
def first_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="JSON array file, or '-'"),
    count: int | None = typer.Option(None, "-n", "--count", help="Number of elements"),
):
    """Print the first element, or the first N elements."""
    run_command(ctx, "first", lambda: core.iteration.first(load_array(source), count))


@app.command("last")
def last_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="JSON array file, or '-'"),
    count: int | None = typer.Option(None, "-n", "--count", help="Number of elements"),
):
    """Print the last element, or the last N elements."""
    run_command(ctx, "last", lambda: core.iteration.last(load_array(source), count))


@app.command("uniq")
def uniq_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="JSON array file, or '-'"),
):
    """Print the array without duplicates, first occurrences kept."""
    run_command(ctx, "uniq", lambda: core.iteration.uniq(load_array(source)))


@app.command("flatten")
def flatten_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="JSON array file, or '-'"),
):
    """Print the array with all nested arrays flattened."""
    run_command(ctx, "flatten", lambda: core.arrays.flatten(load_array(source)))


@app.command("pluck")
def pluck_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="JSON array of objects, or '-'"),
    key: str = typer.Argument(..., help="Property to extract"),
):
    """Print one property of every object in the array."""
    run_command(ctx, "pluck", lambda: core.transforms.pluck(load_array(source), key))


@app.command("sort-by")
def sort_by_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="JSON array or object, or '-'"),
    key: str = typer.Argument(..., help="Property to sort by"),
):
    """Print the values sorted by a property, stable for equal keys."""

    def action() -> list[Any]:
        document = load_document(source)
        if not isinstance(document, list | dict):
            raise ValidationError(
                f"Input '{source}' must be a JSON array or object",
                field_name=source,
                field_value=type(document).__name__,
                validation_rule="array_or_object",
            )
        return core.sorting.sort_by(document, key)

    run_command(ctx, "sort-by", action)


@app.command("shuffle")
def shuffle_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="JSON array file, or '-'"),
    seed: int | None = typer.Option(None, "--seed", help="Random seed"),
):
    """Print the array in random order."""
    if seed is None:
        seed = ctx.obj["settings"].shuffle_seed
    # An unset seed makes Random() seed itself from the OS
    rng = random.Random(seed)
    run_command(
        ctx, "shuffle", lambda: core.arrays.shuffle(load_array(source), rng=rng)
    )


# --- Multi-sequence commands ---


@app.command("zip")
def zip_command(
    ctx: typer.Context,
    sources: list[str] = typer.Argument(..., help="JSON array files"),
):
    """Print arrays zipped together by index, padded with null."""
    run_command(
        ctx, "zip", lambda: core.arrays.zip(*[load_array(s) for s in sources])
    )


@app.command("intersection")
def intersection_command(
    ctx: typer.Context,
    sources: list[str] = typer.Argument(..., help="Two or more JSON array files"),
):
    """Print the elements of the first array present in all the others."""

    def action() -> list[Any]:
        require_sources(sources, 2)
        arrays = [load_array(s) for s in sources]
        return core.arrays.intersection(*arrays)

    run_command(ctx, "intersection", action)


@app.command("difference")
def difference_command(
    ctx: typer.Context,
    sources: list[str] = typer.Argument(..., help="Two or more JSON array files"),
):
    """Print the elements of the first array absent from all the others."""

    def action() -> list[Any]:
        require_sources(sources, 2)
        arrays = [load_array(s) for s in sources]
        return core.arrays.difference(*arrays)

    run_command(ctx, "difference", action)


# --- Object commands ---


@app.command("extend")
def extend_command(
    ctx: typer.Context,
    sources: list[str] = typer.Argument(..., help="Two or more JSON object files"),
):
    """Merge objects left to right, later keys overwriting earlier ones."""

    def action() -> dict[str, Any]:
        require_sources(sources, 2)
        objects = [load_object(s) for s in sources]
        return core.objects.extend(*objects)

    run_command(ctx, "extend", action)


@app.command("defaults")
def defaults_command(
    ctx: typer.Context,
    sources: list[str] = typer.Argument(..., help="Two or more JSON object files"),
):
    """Fill in keys missing from the first object, first supplier winning."""

    def action() -> dict[str, Any]:
        require_sources(sources, 2)
        objects = [load_object(s) for s in sources]
        return core.objects.defaults(*objects)

    run_command(ctx, "defaults", action)


# --- Configuration ---


@app.command("config-info")
def config_info_command(ctx: typer.Context):
    """Show the effective configuration."""
    settings: Settings = ctx.obj["settings"]

    table = Table(
        title="[bold magenta]underbar Configuration[/bold magenta]",
        show_header=True,
        border_style="blue",
    )
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")
    table.add_column("Environment Variable", style="dim")

    for name, value in settings.model_dump().items():
        table.add_row(
            name,
            "Not Set" if value is None else str(value),
            f"UNDERBAR_{name.upper()}",
        )

    console.print(table)


# --- Main Entry Point ---


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(ExitCodes.USER_INTERRUPTED)
