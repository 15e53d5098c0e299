"""Baseline suppression for biome: only fail on errors that are new."""

from biome_suppressed.diff import (
    Action,
    BaselineDiffEngine,
    Evaluation,
    RatchetPolicy,
    Status,
    evaluate,
)
from biome_suppressed.errors import (
    BaselineStoreError,
    BaselineWriteError,
    BiomeSuppressedError,
    ToolInvocationError,
)
from biome_suppressed.fingerprint import fingerprint
from biome_suppressed.models import Baseline, Finding
from biome_suppressed.parser import normalise_path, parse_findings, parse_line
from biome_suppressed.store import (
    BaselineStore,
    FilesystemBaselineStore,
    InMemoryBaselineStore,
)

__all__ = [
    "Action",
    "Baseline",
    "BaselineDiffEngine",
    "BaselineStore",
    "BaselineStoreError",
    "BaselineWriteError",
    "BiomeSuppressedError",
    "Evaluation",
    "FilesystemBaselineStore",
    "Finding",
    "InMemoryBaselineStore",
    "RatchetPolicy",
    "Status",
    "ToolInvocationError",
    "evaluate",
    "fingerprint",
    "normalise_path",
    "parse_findings",
    "parse_line",
]
