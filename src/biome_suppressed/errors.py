"""Error classes for biome-suppressed.

This module provides:
- BiomeSuppressedError: Base exception class for all tool errors
- BaselineStoreError, BaselineWriteError: Baseline persistence exceptions
- ToolInvocationError: Raised when the external linter cannot be started
"""


class BiomeSuppressedError(Exception):
    """Base exception for all biome-suppressed errors."""

    pass


class BaselineStoreError(BiomeSuppressedError):
    """Base exception for baseline store related errors."""

    pass


class BaselineWriteError(BaselineStoreError):
    """Raised when a baseline cannot be persisted."""

    pass


class ToolInvocationError(BiomeSuppressedError):
    """Raised when the external analysis tool cannot be executed at all."""

    pass
