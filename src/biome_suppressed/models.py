"""Data models for findings and persisted baselines."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from biome_suppressed.fingerprint import fingerprint_set

BASELINE_FORMAT_VERSION = "1.0.0"
UNKNOWN_VERSION = "unknown"


class Finding(BaseModel):
    """One normalised issue reported by the analysis tool.

    Identity is the ``(file, rule, line)`` tuple. ``message`` is descriptive
    only and may change between tool versions without counting as a new issue.
    """

    model_config = ConfigDict(frozen=True)

    rule: str = Field(..., min_length=1, description="Identifier of the violated check")
    file: str = Field(..., min_length=1, description="Forward-slash relative path")
    line: int = Field(..., ge=1, description="1-based line number")
    message: str = Field(default="", description="Free-text description")

    @property
    def location(self) -> str:
        """Return ``file:line`` for display."""
        return f"{self.file}:{self.line}"


def sort_key(finding: Finding) -> tuple[str, int, str, str]:
    """Canonical ordering shared by the parser and persisted baselines."""
    return (finding.file, finding.line, finding.rule, finding.message)


def sort_findings(findings: Iterable[Finding]) -> list[Finding]:
    """Return findings in canonical order."""
    return sorted(findings, key=sort_key)


class Baseline(BaseModel):
    """Persisted snapshot of accepted findings.

    Serialised keys are ``version``, ``biomeVersion``, ``fingerprints`` and
    ``errors``. Volatile or derivable values (timestamps, counts) are never
    stored; older files carrying them still load because extra keys are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    version: str = Field(default=BASELINE_FORMAT_VERSION, description="File format version")
    biome_version: str = Field(
        default=UNKNOWN_VERSION,
        alias="biomeVersion",
        description="Version of the analysis tool that produced the findings",
    )
    fingerprints: list[str] = Field(
        default_factory=list, description="Sorted, deduplicated fingerprints"
    )
    errors: list[Finding] = Field(
        default_factory=list, description="Findings kept for reporting"
    )

    @property
    def error_count(self) -> int:
        """Number of distinct accepted issues."""
        return len(self.fingerprints)

    @classmethod
    def from_findings(
        cls, findings: Iterable[Finding], biome_version: str = UNKNOWN_VERSION
    ) -> Baseline:
        """Build a baseline with canonical ordering applied.

        Findings are kept verbatim (no deduplication); the fingerprint list is
        sorted and deduplicated.
        """
        ordered = sort_findings(findings)
        return cls(
            biome_version=biome_version,
            fingerprints=sorted(fingerprint_set(ordered)),
            errors=ordered,
        )

    def known_fingerprints(self) -> frozenset[str]:
        """Return the fingerprints as a set for membership checks."""
        return frozenset(self.fingerprints)

    def to_json(self) -> str:
        """Serialise as pretty-printed JSON with a trailing newline."""
        return self.model_dump_json(by_alias=True, indent=2) + "\n"
