"""Baseline persistence for biome-suppressed."""

from biome_suppressed.store.base import BaselineStore, VersionProvider
from biome_suppressed.store.config import (
    FilesystemStoreConfig,
    MemoryStoreConfig,
    StoreConfig,
)
from biome_suppressed.store.filesystem import (
    DEFAULT_BASELINE_PATH,
    FilesystemBaselineStore,
)
from biome_suppressed.store.in_memory import InMemoryBaselineStore

__all__ = [
    "DEFAULT_BASELINE_PATH",
    "BaselineStore",
    "FilesystemBaselineStore",
    "FilesystemStoreConfig",
    "InMemoryBaselineStore",
    "MemoryStoreConfig",
    "StoreConfig",
    "VersionProvider",
]
