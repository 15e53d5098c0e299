"""Tests for FilesystemBaselineStore implementation."""

import json
import logging
import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from biome_suppressed.errors import BaselineStoreError, BaselineWriteError
from biome_suppressed.fingerprint import fingerprint_set
from biome_suppressed.models import Finding
from biome_suppressed.store.filesystem import FilesystemBaselineStore


def make_findings() -> list[Finding]:
    """Two findings in non-canonical order."""
    return [
        Finding(rule="ruleY", file="b.js", line=2, message="second"),
        Finding(rule="ruleX", file="a.js", line=1, message="first"),
    ]


# =============================================================================
# Load Tests
# =============================================================================


class TestFilesystemBaselineStoreLoad:
    """Tests for the load() method."""

    def test_load_returns_none_when_file_missing(self, tmp_path: Path) -> None:
        store = FilesystemBaselineStore(path=tmp_path / ".biome-suppressed.json")

        assert store.load() is None

    def test_load_returns_none_and_warns_on_invalid_json(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / ".biome-suppressed.json"
        path.write_text("{ not json", encoding="utf-8")
        store = FilesystemBaselineStore(path=path)

        with caplog.at_level(logging.WARNING, logger="biome_suppressed"):
            assert store.load() is None

        assert "Could not load baseline" in caplog.text

    def test_load_returns_none_on_schema_mismatch(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / ".biome-suppressed.json"
        path.write_text(json.dumps({"fingerprints": "not-a-list"}), encoding="utf-8")
        store = FilesystemBaselineStore(path=path)

        with caplog.at_level(logging.WARNING, logger="biome_suppressed"):
            assert store.load() is None

        assert caplog.records

    def test_load_returns_none_when_document_is_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / ".biome-suppressed.json"
        path.write_text("[]", encoding="utf-8")

        assert FilesystemBaselineStore(path=path).load() is None

    def test_load_returns_none_and_warns_when_access_denied(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        store = FilesystemBaselineStore(path=tmp_path / ".biome-suppressed.json")
        store.save(make_findings())

        with (
            patch.object(Path, "read_text", side_effect=PermissionError("denied")),
            caplog.at_level(logging.WARNING, logger="biome_suppressed"),
        ):
            assert store.load() is None

        assert "denied" in caplog.text

    def test_load_reads_legacy_baseline(self, tmp_path: Path) -> None:
        path = tmp_path / ".biome-suppressed.json"
        path.write_text(
            json.dumps(
                {
                    "version": "1.0.0",
                    "timestamp": "2025-03-01T10:00:00.000Z",
                    "biomeVersion": "Version: 1.9.4",
                    "errorCount": 1,
                    "fingerprints": ["d41d8cd98f00b204e9800998ecf8427e"],
                    "errors": [
                        {"rule": "r", "file": "a.js", "line": 1, "message": "m"}
                    ],
                }
            ),
            encoding="utf-8",
        )

        baseline = FilesystemBaselineStore(path=path).load()

        assert baseline is not None
        assert baseline.fingerprints == ["d41d8cd98f00b204e9800998ecf8427e"]
        assert baseline.biome_version == "Version: 1.9.4"


# =============================================================================
# Save Tests
# =============================================================================


class TestFilesystemBaselineStoreSave:
    """Tests for the save() method."""

    def test_save_then_load_round_trips_fingerprints(self, tmp_path: Path) -> None:
        store = FilesystemBaselineStore(path=tmp_path / ".biome-suppressed.json")
        findings = make_findings()

        store.save(findings)
        loaded = store.load()

        assert loaded is not None
        assert set(loaded.fingerprints) == fingerprint_set(findings)

    def test_save_writes_sorted_findings(self, tmp_path: Path) -> None:
        path = tmp_path / ".biome-suppressed.json"
        store = FilesystemBaselineStore(path=path)

        store.save(make_findings())

        data = json.loads(path.read_text(encoding="utf-8"))
        assert [e["file"] for e in data["errors"]] == ["a.js", "b.js"]
        assert data["fingerprints"] == sorted(data["fingerprints"])

    def test_save_records_probed_version(self, tmp_path: Path) -> None:
        path = tmp_path / ".biome-suppressed.json"
        store = FilesystemBaselineStore(path=path, version_provider=lambda: "Version: 2.0.0")

        baseline = store.save([])

        assert baseline.biome_version == "Version: 2.0.0"
        assert json.loads(path.read_text())["biomeVersion"] == "Version: 2.0.0"

    def test_save_records_unknown_when_probe_fails(self, tmp_path: Path) -> None:
        def failing_probe() -> str:
            raise RuntimeError("npx not installed")

        store = FilesystemBaselineStore(
            path=tmp_path / ".biome-suppressed.json", version_provider=failing_probe
        )

        assert store.save([]).biome_version == "unknown"

    def test_repeated_saves_are_byte_identical(self, tmp_path: Path) -> None:
        path = tmp_path / ".biome-suppressed.json"
        store = FilesystemBaselineStore(path=path)

        store.save(make_findings())
        first = path.read_bytes()
        store.save(list(reversed(make_findings())))

        assert path.read_bytes() == first

    def test_save_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "ci" / "baselines" / "biome.json"

        FilesystemBaselineStore(path=path).save(make_findings())

        assert path.exists()

    def test_save_leaves_no_temporary_files(self, tmp_path: Path) -> None:
        store = FilesystemBaselineStore(path=tmp_path / ".biome-suppressed.json")

        store.save(make_findings())

        assert [p.name for p in tmp_path.iterdir()] == [".biome-suppressed.json"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_save_keeps_existing_file_mode(self, tmp_path: Path) -> None:
        path = tmp_path / ".biome-suppressed.json"
        store = FilesystemBaselineStore(path=path)
        store.save(make_findings())
        path.chmod(0o644)

        store.save([])

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_new_file_mode_follows_umask(self, tmp_path: Path) -> None:
        path = tmp_path / ".biome-suppressed.json"
        previous = os.umask(0o022)
        try:
            FilesystemBaselineStore(path=path).save(make_findings())
        finally:
            os.umask(previous)

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_failed_rename_keeps_previous_baseline(self, tmp_path: Path) -> None:
        path = tmp_path / ".biome-suppressed.json"
        store = FilesystemBaselineStore(path=path)
        store.save(make_findings())
        before = path.read_bytes()

        with (
            patch("biome_suppressed.store.filesystem.os.replace", side_effect=OSError("disk full")),
            pytest.raises(BaselineWriteError, match="disk full"),
        ):
            store.save([])

        assert path.read_bytes() == before
        assert [p.name for p in tmp_path.iterdir()] == [".biome-suppressed.json"]

    @pytest.mark.skipif(
        os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="Directory permissions are not enforced",
    )
    def test_save_to_unwritable_directory_raises(self, tmp_path: Path) -> None:
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0o500)
        store = FilesystemBaselineStore(path=locked / ".biome-suppressed.json")

        try:
            with pytest.raises(BaselineWriteError):
                store.save(make_findings())
        finally:
            locked.chmod(0o700)


# =============================================================================
# Exists / Clear Tests
# =============================================================================


class TestFilesystemBaselineStoreClear:
    """Tests for the exists() and clear() methods."""

    def test_clear_deletes_existing_baseline(self, tmp_path: Path) -> None:
        store = FilesystemBaselineStore(path=tmp_path / ".biome-suppressed.json")
        store.save(make_findings())

        assert store.exists()
        assert store.clear() is True
        assert not store.exists()
        assert store.load() is None

    def test_clear_without_baseline_returns_false(self, tmp_path: Path) -> None:
        store = FilesystemBaselineStore(path=tmp_path / ".biome-suppressed.json")

        assert store.clear() is False

    def test_clear_failure_raises_store_error(self, tmp_path: Path) -> None:
        store = FilesystemBaselineStore(path=tmp_path / ".biome-suppressed.json")
        store.save([])

        with (
            patch.object(Path, "unlink", side_effect=PermissionError("denied")),
            pytest.raises(BaselineStoreError, match="denied"),
        ):
            store.clear()

    def test_exists_is_false_when_access_denied(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        store = FilesystemBaselineStore(path=tmp_path / ".biome-suppressed.json")

        with (
            patch.object(Path, "stat", side_effect=PermissionError("denied")),
            caplog.at_level(logging.WARNING, logger="biome_suppressed"),
        ):
            assert store.exists() is False

        assert "Could not access baseline" in caplog.text

    def test_exists_is_true_for_corrupt_baseline(self, tmp_path: Path) -> None:
        path = tmp_path / ".biome-suppressed.json"
        path.write_text("garbage", encoding="utf-8")

        assert FilesystemBaselineStore(path=path).exists()
