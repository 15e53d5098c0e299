"""Configuration for biome-suppressed with environment variable fallback."""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from biome_suppressed.runner import DEFAULT_COMMAND
from biome_suppressed.store import DEFAULT_BASELINE_PATH, StoreConfig

ENV_BASELINE_PATH = "BIOME_SUPPRESSED_BASELINE"
ENV_BIOME_COMMAND = "BIOME_SUPPRESSED_COMMAND"
ENV_STORE_TYPE = "BIOME_SUPPRESSED_STORE"


class BiomeSuppressedConfiguration(BaseModel):
    """Tool configuration.

    Supports dual-mode operation:
    1. Explicit configuration with typed fields
    2. Environment variable fallback for zero-config scenarios

    Attributes:
        baseline_path: Location of the baseline JSON file
        biome_command: Executable prefix used to run the linter
        store_type: Baseline backend ("filesystem" or "memory")

    Example:
        ```python
        config = BiomeSuppressedConfiguration.from_properties(
            {"baseline_path": "ci/baseline.json"}
        )
        store = config.store_config().create_store()
        ```

    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)

    baseline_path: Path = Field(
        default=DEFAULT_BASELINE_PATH, description="Baseline file location"
    )
    biome_command: tuple[str, ...] = Field(
        default=DEFAULT_COMMAND, description="Command prefix for the linter"
    )
    store_type: Literal["filesystem", "memory"] = Field(
        default="filesystem", description="Baseline store backend"
    )

    @field_validator("biome_command", mode="before")
    @classmethod
    def split_command(cls, v: Any) -> Any:
        """Accept a shell-style string as well as a sequence."""
        if isinstance(v, str):
            v = tuple(shlex.split(v))
        if not v:
            raise ValueError("biome_command must not be empty")
        return v

    @field_validator("store_type", mode="before")
    @classmethod
    def lower_store_type(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties with environment fallback.

        Layering:
        1. Explicit properties (highest priority)
        2. Environment variables (fallback)
        3. Defaults (lowest priority)

        Environment variables used:
        - BIOME_SUPPRESSED_BASELINE: Baseline file path
        - BIOME_SUPPRESSED_COMMAND: Linter command, e.g. "pnpm exec biome"
        - BIOME_SUPPRESSED_STORE: "filesystem" or "memory"

        Raises:
            ValidationError: If configuration is invalid

        """
        config_data = {k: v for k, v in properties.items() if v is not None}

        env_fallbacks = {
            "baseline_path": ENV_BASELINE_PATH,
            "biome_command": ENV_BIOME_COMMAND,
            "store_type": ENV_STORE_TYPE,
        }
        for key, env_var in env_fallbacks.items():
            if key not in config_data and (value := os.getenv(env_var)):
                config_data[key] = value

        return cls.model_validate(config_data)

    def store_config(self) -> StoreConfig:
        """Return the store configuration described by this config."""
        if self.store_type == "memory":
            return StoreConfig.model_validate({"type": "memory"})
        return StoreConfig.model_validate(
            {"type": "filesystem", "path": self.baseline_path}
        )
