"""CLI command implementations for biome-suppressed."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from biome_suppressed.cli.errors import CLIError, cli_error_handler
from biome_suppressed.cli.formatting import OutputFormatter, console
from biome_suppressed.configuration import BiomeSuppressedConfiguration
from biome_suppressed.diff import BaselineDiffEngine, RatchetPolicy
from biome_suppressed.logging import setup_logging
from biome_suppressed.models import Finding
from biome_suppressed.parser import parse_findings
from biome_suppressed.runner import BiomeRunner
from biome_suppressed.store import FilesystemBaselineStore

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def resolve_paths(paths: Sequence[str] | None, command: str) -> list[str]:
    """Drop paths that do not exist, defaulting to the current directory.

    Raises:
        CLIError: If none of the given paths exist.

    """
    candidates = list(paths) if paths else ["."]
    valid: list[str] = []
    for candidate in candidates:
        if candidate == "." or Path(candidate).exists():
            valid.append(candidate)
        else:
            logger.warning("File/directory not found: %s", candidate)

    if not valid:
        raise CLIError("No valid files or directories found", command=command)
    return valid


def _read_input(input_file: Path) -> str:
    if str(input_file) == STDIN_MARKER:
        return sys.stdin.read()
    return input_file.read_text(encoding="utf-8")


def collect_findings(
    runner: BiomeRunner,
    paths: Sequence[str] | None,
    command: str,
    write: bool = False,
    input_file: Path | None = None,
) -> list[Finding]:
    """Obtain reporter output and parse it into findings.

    Args:
        runner: Tool adapter used when no input file is given.
        paths: Paths handed to the tool.
        command: CLI command name for error context.
        write: Let the tool apply fixes before reporting.
        input_file: Pre-captured reporter output ("-" for stdin).

    """
    if input_file is not None:
        logger.debug("Reading reporter output from %s", input_file)
        return parse_findings(_read_input(input_file))

    result = runner.check(resolve_paths(paths, command), write=write)
    if result.returncode != 0 and result.stderr:
        logger.debug("biome exited with %d: %s", result.returncode, result.stderr.strip())
    return parse_findings(result.stdout)


def _build_engine(
    config: BiomeSuppressedConfiguration,
    runner: BiomeRunner,
    policy: RatchetPolicy | None = None,
) -> BaselineDiffEngine:
    store = config.store_config().create_store(version_provider=runner.version)
    return BaselineDiffEngine(store, policy)


def _setup(
    log_level: str, verbose: bool = False
) -> tuple[BiomeSuppressedConfiguration, BiomeRunner]:
    setup_logging(level="DEBUG" if verbose else log_level)
    config = BiomeSuppressedConfiguration.from_properties({})
    return config, BiomeRunner(config.biome_command)


def check_command(  # noqa: PLR0913 - mirrors CLI options
    paths: Sequence[str] | None,
    write: bool = False,
    skip_update: bool = False,
    fail_on_improvement: bool = False,
    strict: bool = False,
    input_file: Path | None = None,
    log_level: str = "WARNING",
    verbose: bool = False,
) -> int:
    """CLI command implementation for checking against the baseline.

    Returns:
        Process exit code (0 pass, 1 fail).

    """
    with cli_error_handler("check", "Check failed"):
        config, runner = _setup(log_level, verbose)
        policy = RatchetPolicy(
            fail_on_improvement=fail_on_improvement,
            skip_update=skip_update,
            strict=strict,
        )
        engine = _build_engine(config, runner, policy)
        formatter = OutputFormatter(config.biome_command)

        formatter.format_running(write)
        findings = collect_findings(runner, paths, "check", write, input_file)

        evaluation = engine.check(findings)
        formatter.format_found(evaluation.current_count, write)
        formatter.format_evaluation(evaluation)

    return evaluation.exit_code


def _save_command(
    command: str,
    verb: str,
    paths: Sequence[str] | None,
    input_file: Path | None,
    log_level: str,
    verbose: bool,
) -> None:
    with cli_error_handler(command, f"Baseline {command} failed"):
        config, runner = _setup(log_level, verbose)
        engine = _build_engine(config, runner)

        console.print(f"🔍 Running biome check to {command} baseline...")
        # Explicit baselines always reflect the unfixed code
        findings = collect_findings(runner, paths, command, False, input_file)
        baseline = engine.init(findings) if command == "init" else engine.update(findings)
        OutputFormatter().format_saved(baseline, verb)


def init_command(
    paths: Sequence[str] | None,
    input_file: Path | None = None,
    log_level: str = "WARNING",
    verbose: bool = False,
) -> None:
    """CLI command implementation for creating the initial baseline."""
    _save_command("init", "created", paths, input_file, log_level, verbose)


def update_command(
    paths: Sequence[str] | None,
    input_file: Path | None = None,
    log_level: str = "WARNING",
    verbose: bool = False,
) -> None:
    """CLI command implementation for overwriting the baseline."""
    _save_command("update", "updated", paths, input_file, log_level, verbose)


def clear_command(log_level: str = "WARNING") -> None:
    """CLI command implementation for deleting the baseline."""
    with cli_error_handler("clear", "Baseline clear failed"):
        config, runner = _setup(log_level)
        engine = _build_engine(config, runner)
        OutputFormatter().format_cleared(engine.clear())


def status_command(log_level: str = "WARNING") -> None:
    """CLI command implementation for summarising the baseline."""
    with cli_error_handler("status", "Baseline status failed"):
        config, runner = _setup(log_level)
        engine = _build_engine(config, runner)
        store = engine.store
        location = store.path if isinstance(store, FilesystemBaselineStore) else None
        OutputFormatter().format_status(engine.status(), location)
