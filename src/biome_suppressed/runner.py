"""Adapter around the external analysis tool.

The tool is treated as a black box: it is run once with the GitHub reporter
and its stdout is handed to the parser. A non-zero exit code only means the
tool found issues; output is still used.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from biome_suppressed.errors import ToolInvocationError
from biome_suppressed.models import UNKNOWN_VERSION

logger = logging.getLogger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = ("npx", "biome")
REPORTER_FLAG = "--reporter=github"


@dataclass(frozen=True)
class ToolResult:
    """Captured output of one tool invocation."""

    stdout: str
    stderr: str = ""
    returncode: int = 0


def _is_broken_pipe(stderr: str) -> bool:
    return "Broken pipe" in stderr or "EPIPE" in stderr


class BiomeRunner:
    """Runs ``biome check`` and the version probe."""

    def __init__(self, command: Sequence[str] = DEFAULT_COMMAND) -> None:
        """Initialise runner.

        Args:
            command: Executable prefix, e.g. ``("npx", "biome")``.

        """
        self._command = tuple(command)

    @property
    def command(self) -> tuple[str, ...]:
        return self._command

    def build_check_command(self, paths: Sequence[str], write: bool = False) -> list[str]:
        """Build the check command line."""
        cmd = [*self._command, "check"]
        if write:
            cmd.append("--write")
        cmd.append(REPORTER_FLAG)
        cmd.extend(paths)
        return cmd

    def check(self, paths: Sequence[str], write: bool = False) -> ToolResult:
        """Run the tool over ``paths``.

        Args:
            paths: Files or directories to analyse.
            write: Let the tool apply safe fixes first.

        Returns:
            Captured output. A broken pipe is reported as success with
            whatever output was captured.

        Raises:
            ToolInvocationError: If the executable cannot be started.

        """
        cmd = self.build_check_command(paths, write)
        logger.debug("Running: %s", " ".join(cmd))

        try:
            completed = subprocess.run(  # noqa: S603 - command built from config
                cmd, capture_output=True, text=True, check=False
            )
        except BrokenPipeError:
            logger.debug("Tool output pipe closed early, treating as success")
            return ToolResult(stdout="", returncode=0)
        except OSError as e:
            raise ToolInvocationError(
                f"Could not run '{' '.join(self._command)}': {e}"
            ) from e

        if completed.returncode != 0 and _is_broken_pipe(completed.stderr):
            logger.debug("Tool reported a broken pipe, using partial output")
            return ToolResult(stdout=completed.stdout or "", returncode=0)

        return ToolResult(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            returncode=completed.returncode,
        )

    def version(self) -> str:
        """Return the tool version string, or "unknown" if it cannot be probed."""
        try:
            completed = subprocess.run(  # noqa: S603 - command built from config
                [*self._command, "--version"],
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as e:
            logger.debug("Version probe failed: %s", e)
            return UNKNOWN_VERSION
        return completed.stdout.strip() or UNKNOWN_VERSION
