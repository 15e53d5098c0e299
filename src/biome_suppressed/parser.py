"""Parser for the GitHub Actions reporter output of the analysis tool.

Only lines starting with ``::error`` are candidates. Each is matched against::

    ::error title=<rule>,file=<path>,line=<N>,...::<message>

Properties after ``line`` are ignored. Lines that do not match are dropped
silently; malformed tool output is never a parse error.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from pydantic import ValidationError

from biome_suppressed.models import Finding, sort_findings

logger = logging.getLogger(__name__)

ERROR_MARKER = "::error"

_ERROR_PATTERN = re.compile(
    r"::error title=(?P<rule>[^,]+),file=(?P<file>[^,]+),line=(?P<line>\d+).*?::(?P<message>.+)"
)


def normalise_path(path: str, cwd: str | Path | None = None) -> str:
    """Normalise a reported path for fingerprinting.

    Absolute paths are made relative to ``cwd`` (default: the current working
    directory). Backslashes always become forward slashes. Idempotent.

    Args:
        path: Path as reported by the tool.
        cwd: Directory that relative paths are anchored to.

    Returns:
        Forward-slash path, relative where possible.

    """
    if os.path.isabs(path):
        base = os.fspath(cwd) if cwd is not None else os.getcwd()
        try:
            path = os.path.relpath(path, base)
        except ValueError:
            # Different drive on Windows; keep the absolute path
            logger.debug("Cannot relativise %s against %s", path, base)
    return path.replace("\\", "/")


def parse_line(line: str, cwd: str | Path | None = None) -> Finding | None:
    """Parse a single reporter line.

    Returns:
        The parsed Finding, or None when the line is not a well-formed error.

    """
    if not line.startswith(ERROR_MARKER):
        return None

    match = _ERROR_PATTERN.match(line)
    if match is None:
        return None

    try:
        return Finding(
            rule=match["rule"],
            file=normalise_path(match["file"], cwd),
            line=int(match["line"]),
            message=match["message"].strip(),
        )
    except ValidationError:
        return None


def parse_findings(output: str, cwd: str | Path | None = None) -> list[Finding]:
    """Parse reporter output into findings in canonical order.

    Args:
        output: Raw multi-line text produced by the tool.
        cwd: Directory absolute paths are made relative to.

    Returns:
        Findings sorted by file, line, rule (then message).

    """
    findings: list[Finding] = []
    dropped = 0
    for line in output.splitlines():
        finding = parse_line(line, cwd)
        if finding is not None:
            findings.append(finding)
        elif line.startswith(ERROR_MARKER):
            dropped += 1

    if dropped:
        logger.debug("Ignored %d malformed error line(s)", dropped)

    return sort_findings(findings)
