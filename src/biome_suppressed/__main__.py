"""Main entry point for biome-suppressed (``bs``).

This module provides the command-line interface for:
- Checking for errors that are not in the baseline
- Creating, updating and clearing the baseline
- Showing a summary of the stored baseline
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from biome_suppressed.cli import (
    check_command,
    clear_command,
    init_command,
    status_command,
    update_command,
)

# Load environment variables from a .env file in the working directory
load_dotenv(Path.cwd() / ".env")

app = typer.Typer(
    name="bs",
    help="Fail only on biome errors that are not in the committed baseline.",
    no_args_is_help=True,
)

PathsArgument = Annotated[
    list[str] | None,
    typer.Argument(help="Files or directories to check (default: .)", show_default=False),
]
InputOption = Annotated[
    Path | None,
    typer.Option(
        "--input",
        "-i",
        help="Read biome GitHub reporter output from a file ('-' for stdin) instead of running biome",
        dir_okay=False,
        allow_dash=True,
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        case_sensitive=False,
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose output (sets log level to DEBUG)"),
]


@app.command()
def check(  # noqa: PLR0913 - CLI entry point with many options
    paths: PathsArgument = None,
    write: Annotated[
        bool,
        typer.Option("--write", help="Apply fixes (like biome check --write)"),
    ] = False,
    skip_suppression_update: Annotated[
        bool,
        typer.Option(
            "--skip-suppression-update",
            help="Don't update baseline on improvement",
        ),
    ] = False,
    suppression_fail_on_improvement: Annotated[
        bool,
        typer.Option(
            "--suppression-fail-on-improvement",
            help="Fail if fewer errors than baseline (CI mode)",
        ),
    ] = False,
    strict_ratchet: Annotated[
        bool,
        typer.Option(
            "--strict-ratchet",
            help="Only ratchet the baseline down when no new errors are present",
        ),
    ] = False,
    input_file: InputOption = None,
    verbose: VerboseOption = False,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Check for new errors compared to the baseline.

    Example:
        bs check
        bs check --write
        bs check --skip-suppression-update src/

    """
    exit_code = check_command(
        paths,
        write=write,
        skip_update=skip_suppression_update,
        fail_on_improvement=suppression_fail_on_improvement,
        strict=strict_ratchet,
        input_file=input_file,
        log_level=log_level,
        verbose=verbose,
    )
    raise typer.Exit(exit_code)


@app.command()
def init(
    paths: PathsArgument = None,
    input_file: InputOption = None,
    verbose: VerboseOption = False,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Create the initial baseline."""
    init_command(paths, input_file=input_file, log_level=log_level, verbose=verbose)


@app.command()
def update(
    paths: PathsArgument = None,
    input_file: InputOption = None,
    verbose: VerboseOption = False,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Update the baseline with the current errors."""
    update_command(paths, input_file=input_file, log_level=log_level, verbose=verbose)


@app.command()
def clear(log_level: LogLevelOption = "WARNING") -> None:
    """Remove the baseline file."""
    clear_command(log_level)


@app.command()
def status(log_level: LogLevelOption = "WARNING") -> None:
    """Show baseline information."""
    status_command(log_level)


if __name__ == "__main__":
    app()
