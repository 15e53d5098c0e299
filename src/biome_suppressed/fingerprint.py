"""Stable identity hashes for findings.

The identity string is ``file:rule:line`` with forward-slash separators, hashed
with MD5 and rendered as 32 hex characters. Baseline files written by earlier
releases use the same join format and digest, so they compare byte-for-byte.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from biome_suppressed.models import Finding

FINGERPRINT_LENGTH = 32


def identity_string(finding: Finding) -> str:
    """Build the identity string hashed into a fingerprint.

    The path is re-normalised here even though the parser already does it,
    so findings constructed elsewhere hash identically.
    """
    normalised_file = finding.file.replace("\\", "/")
    return f"{normalised_file}:{finding.rule}:{finding.line}"


def fingerprint(finding: Finding) -> str:
    """Return the fingerprint of a finding. ``message`` never contributes."""
    data = identity_string(finding).encode("utf-8")
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


def fingerprint_set(findings: Iterable[Finding]) -> set[str]:
    """Return the distinct fingerprints of ``findings``."""
    return {fingerprint(finding) for finding in findings}
