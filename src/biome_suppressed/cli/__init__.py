"""CLI command implementations for biome-suppressed."""

from biome_suppressed.cli.commands import (
    check_command,
    clear_command,
    init_command,
    status_command,
    update_command,
)
from biome_suppressed.cli.errors import CLIError

__all__ = [
    "CLIError",
    "check_command",
    "clear_command",
    "init_command",
    "status_command",
    "update_command",
]
