"""Shared utilities for CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from envguard.utils.errors import EnvGuardError
from envguard.utils.logging import get_logger, get_logger_with_context

# Shared console instances
console = Console()
err_console = Console(stderr=True)

EXIT_FAILURE = 1

logger = get_logger("cli")


def print_error(error: EnvGuardError) -> None:
    """Print ``Error: <message>`` on stderr."""
    err_console.print(f"[red]Error:[/red] {escape(error.message)}")


def report_error(error: EnvGuardError) -> None:
    """Log and print an error, then exit with the failure code.

    The printed line does not depend on the configured log level.

    Args:
        error: The error that ended the run

    Raises:
        typer.Exit: Always
    """
    report = error.to_error_report()
    logger.error(report.message)
    get_logger_with_context("cli", code=report.code, **report.details).debug(str(report))
    print_error(error)
    raise typer.Exit(EXIT_FAILURE)


def report_startup_error(error: EnvGuardError) -> None:
    """Print an error raised before logging is configured, then exit.

    Raises:
        typer.Exit: Always
    """
    print_error(error)
    raise typer.Exit(EXIT_FAILURE)
