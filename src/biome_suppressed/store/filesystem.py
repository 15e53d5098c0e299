"""Local filesystem baseline store.

The baseline is a single pretty-printed JSON document (``.biome-suppressed.json``
by default) meant to be committed next to the code it describes:

    {
      "version": "1.0.0",
      "biomeVersion": "Version: 1.9.4",
      "fingerprints": ["0f1e...", ...],
      "errors": [{"rule": ..., "file": ..., "line": ..., "message": ...}, ...]
    }

Writes go to a temporary file in the same directory followed by an atomic
rename, so readers never observe a partially written baseline.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import override

from pydantic import ValidationError

from biome_suppressed.errors import BaselineStoreError, BaselineWriteError
from biome_suppressed.models import Baseline, Finding
from biome_suppressed.store.base import BaselineStore, VersionProvider

logger = logging.getLogger(__name__)

DEFAULT_BASELINE_PATH = Path(".biome-suppressed.json")


class FilesystemBaselineStore(BaselineStore):
    """JSON-file-backed baseline store."""

    def __init__(
        self,
        path: Path = DEFAULT_BASELINE_PATH,
        version_provider: VersionProvider | None = None,
    ) -> None:
        """Initialise filesystem store.

        Args:
            path: Location of the baseline file.
            version_provider: Tool version probe used on save.

        """
        super().__init__(version_provider)
        self._path = path

    @property
    def path(self) -> Path:
        """The baseline file location."""
        return self._path

    @override
    def load(self) -> Baseline | None:
        """Load the baseline file, degrading to None on any read problem."""
        try:
            content = self._path.read_text(encoding="utf-8")
            return Baseline.model_validate(json.loads(content))
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("Could not load baseline from %s: %s", self._path, e)
            return None

    @override
    def save(self, findings: Iterable[Finding]) -> Baseline:
        """Write the baseline atomically."""
        baseline = self.build(findings)
        directory = self._path.parent

        try:
            directory.mkdir(parents=True, exist_ok=True)
            mode = self._file_mode()
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                    f.write(baseline.to_json())
                os.chmod(tmp_name, mode)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise BaselineWriteError(
                f"Could not write baseline to {self._path}: {e}"
            ) from e

        logger.debug(
            "Saved baseline with %d fingerprint(s) to %s",
            baseline.error_count,
            self._path,
        )
        return baseline

    def _file_mode(self) -> int:
        """Permission bits for the written file.

        An existing baseline keeps its mode; a new one gets ``0o666`` less the
        process umask, as a plain ``open()`` would.
        """
        try:
            return stat.S_IMODE(self._path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    @override
    def exists(self) -> bool:
        """Check if the baseline file exists."""
        try:
            self._path.stat()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning("Could not access baseline %s: %s", self._path, e)
            return False
        return True

    @override
    def clear(self) -> bool:
        """Delete the baseline file."""
        try:
            self._path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise BaselineStoreError(
                f"Could not delete baseline {self._path}: {e}"
            ) from e
        return True
