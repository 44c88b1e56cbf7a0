"""CLI command for jarhunt."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from jarhunt.config import (
    DEFAULT_DEPENDENCY_XML,
    DEFAULT_ERROR_XML,
    DEFAULT_HOST,
    DEFAULT_PORT,
    HuntConfig,
    validate_root,
)
from jarhunt.core.exceptions import ConfigurationError, JarhuntError
from jarhunt.core.models import DrainOrder


app = typer.Typer(
    name="jarhunt",
    help=(
        "Generate Maven <dependency> fragments for a directory of jar files "
        "by looking up each file's SHA-1 on Maven Central."
    ),
    add_completion=False,
)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _version_callback(value: bool) -> None:
    if value:
        from jarhunt import __version__

        typer.echo(f"jarhunt {__version__}")
        raise typer.Exit()


def _configure_logging(level: LogLevel) -> None:
    """Route jarhunt log records to stderr through Rich."""
    package_logger = logging.getLogger("jarhunt")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setLevel(level.value)
    package_logger.addHandler(handler)
    package_logger.setLevel(level.value)


def _fail(error: JarhuntError) -> typer.Exit:
    """Print an error with its hint to stderr and return an Exit to raise."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    return typer.Exit(1)


@app.command()
def hunt(
    ctx: typer.Context,
    directory: str | None = typer.Argument(
        None,
        help="Directory that contains jar files.",
        show_default=False,
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive",
        "-r",
        help="Recursively search subdirectories for jar files.",
    ),
    suppress: bool = typer.Option(
        False,
        "--suppress",
        "-s",
        help='Suppress "found" messages.',
    ),
    dependency_xml: Path = typer.Option(
        DEFAULT_DEPENDENCY_XML,
        "--dependency-xml",
        "-x",
        help="File to write <dependency> XML output to.",
    ),
    error_xml: Path = typer.Option(
        DEFAULT_ERROR_XML,
        "--error-xml",
        "-e",
        help="File to write <error> output to.",
    ),
    host: str = typer.Option(
        DEFAULT_HOST,
        "--host",
        envvar="JARHUNT_HOST",
        help="Search service host.",
    ),
    port: int = typer.Option(
        DEFAULT_PORT,
        "--port",
        envvar="JARHUNT_PORT",
        help="Search service port.",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        help="Per-lookup timeout in seconds. Waits indefinitely when omitted.",
    ),
    order: DrainOrder = typer.Option(
        DrainOrder.LIFO,
        "--order",
        case_sensitive=False,
        help="Order in which queued files are digested.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        case_sensitive=False,
        help="Set the logging level.",
    ),
    summary: bool = typer.Option(
        True,
        "--summary/--no-summary",
        help="Print a summary table when the run finishes.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Find jar files and resolve their Maven coordinates by SHA-1."""
    from jarhunt.cli.formatting import render_summary
    from jarhunt.core.services import hunt as run_hunt
    from jarhunt.progress import RichReporter

    _ = version  # Handled eagerly by its callback

    if directory is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    try:
        validate_root(directory)
    except ConfigurationError as e:
        typer.echo(str(e))
        raise typer.Exit(1) from None

    try:
        config = HuntConfig(
            root=directory,
            recursive=recursive,
            show_found=not suppress,
            dependency_xml=dependency_xml,
            error_xml=error_xml,
            host=host,
            port=port,
            order=order,
            timeout=timeout,
        )
    except ConfigurationError as e:
        raise _fail(e) from None

    _configure_logging(log_level)

    try:
        result = run_hunt(config, reporter=RichReporter())
    except JarhuntError as e:
        raise _fail(e) from None

    if summary:
        Console(stderr=True).print(render_summary(result))


def main() -> None:
    """Entry point for the CLI."""
    app()
