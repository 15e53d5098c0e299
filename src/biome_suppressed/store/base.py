"""BaselineStore interface.

The store is the sole writer of baseline state. The diff engine only asks it
to save; it never touches persisted data directly.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from biome_suppressed.models import UNKNOWN_VERSION, Baseline, Finding

logger = logging.getLogger(__name__)

type VersionProvider = Callable[[], str]


class BaselineStore(ABC):
    """Abstract base class for baseline store implementations.

    Supports multiple backends (local JSON file, in-memory for testing) behind
    one interface so the diff engine can be exercised without touching disk.
    """

    def __init__(self, version_provider: VersionProvider | None = None) -> None:
        """Initialise baseline store.

        Args:
            version_provider: Zero-argument callable returning the analysis
                tool version recorded as provenance on save.

        """
        self._version_provider = version_provider

    def _probe_version(self) -> str:
        """Return the tool version, or "unknown" if the probe is absent or fails."""
        if self._version_provider is None:
            return UNKNOWN_VERSION
        try:
            return self._version_provider() or UNKNOWN_VERSION
        except Exception as e:
            logger.debug("Tool version probe failed: %s", e)
            return UNKNOWN_VERSION

    def build(self, findings: Iterable[Finding]) -> Baseline:
        """Build the baseline that ``save`` would persist."""
        return Baseline.from_findings(findings, biome_version=self._probe_version())

    @abstractmethod
    def load(self) -> Baseline | None:
        """Load the persisted baseline.

        Returns:
            The baseline, or None when there is none. Corrupt storage is
            logged as a warning and also reported as None.

        """
        ...

    @abstractmethod
    def save(self, findings: Iterable[Finding]) -> Baseline:
        """Replace the persisted baseline with ``findings``.

        Args:
            findings: Findings to accept, in any order.

        Returns:
            The baseline as written.

        Raises:
            BaselineWriteError: If the baseline cannot be persisted.

        """
        ...

    @abstractmethod
    def exists(self) -> bool:
        """Check whether a baseline is present, valid or not."""
        ...

    @abstractmethod
    def clear(self) -> bool:
        """Delete the persisted baseline.

        Returns:
            True if a baseline was deleted, False if there was none.

        """
        ...
