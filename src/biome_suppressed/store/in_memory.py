"""In-memory baseline store implementation.

Provides an in-memory implementation of the BaselineStore interface for
testing the diff engine without filesystem dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import override

from biome_suppressed.models import Baseline, Finding
from biome_suppressed.store.base import BaselineStore, VersionProvider


class InMemoryBaselineStore(BaselineStore):
    """In-memory baseline store for testing.

    Counts saves so tests can assert that a run did or did not mutate the
    baseline.
    """

    def __init__(
        self,
        baseline: Baseline | None = None,
        version_provider: VersionProvider | None = None,
    ) -> None:
        """Initialise in-memory store, optionally pre-seeded with a baseline."""
        super().__init__(version_provider)
        self._baseline = baseline
        self.save_count = 0

    @override
    def load(self) -> Baseline | None:
        return self._baseline

    @override
    def save(self, findings: Iterable[Finding]) -> Baseline:
        self._baseline = self.build(findings)
        self.save_count += 1
        return self._baseline

    @override
    def exists(self) -> bool:
        return self._baseline is not None

    @override
    def clear(self) -> bool:
        existed = self._baseline is not None
        self._baseline = None
        return existed
