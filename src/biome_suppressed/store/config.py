"""Store configuration classes using a discriminated union.

Each backend defines its own config class with a ``create_store()`` method.
Pydantic's discriminated union handles deserialisation automatically.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel

from biome_suppressed.store.base import BaselineStore, VersionProvider
from biome_suppressed.store.filesystem import (
    DEFAULT_BASELINE_PATH,
    FilesystemBaselineStore,
)
from biome_suppressed.store.in_memory import InMemoryBaselineStore


class MemoryStoreConfig(BaseModel):
    """Config for in-memory store (testing, dry runs)."""

    type: Literal["memory"] = "memory"

    def create_store(
        self, version_provider: VersionProvider | None = None
    ) -> BaselineStore:
        """Create an empty in-memory baseline store."""
        return InMemoryBaselineStore(version_provider=version_provider)


class FilesystemStoreConfig(BaseModel):
    """Config for the JSON file store."""

    type: Literal["filesystem"] = "filesystem"
    path: Path = DEFAULT_BASELINE_PATH

    def create_store(
        self, version_provider: VersionProvider | None = None
    ) -> BaselineStore:
        """Create a filesystem-backed baseline store."""
        return FilesystemBaselineStore(
            path=self.path, version_provider=version_provider
        )


_StoreConfigUnion = Annotated[
    MemoryStoreConfig | FilesystemStoreConfig,
    Field(discriminator="type"),
]


class StoreConfig(RootModel[_StoreConfigUnion]):
    """Store configuration with automatic type selection based on 'type' field.

    Example:
        >>> config = StoreConfig.model_validate({"type": "filesystem"})
        >>> store = config.create_store()

        >>> config.root.path
        PosixPath('.biome-suppressed.json')

    """

    model_config = ConfigDict(frozen=True)

    def create_store(
        self, version_provider: VersionProvider | None = None
    ) -> BaselineStore:
        """Create a store instance.

        Delegates to the inner config's create_store method.

        """
        return self.root.create_store(version_provider)
