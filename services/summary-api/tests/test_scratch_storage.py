"""Tests for invocation-scoped scratch files."""

import pytest

from infrastructure.scratch_storage import ScratchSpace


class TestScratchSpace:
    def test_allocates_unique_empty_files(self, scratch_dir):
        scratch = ScratchSpace(scratch_dir)

        with scratch.allocate("inv") as first, scratch.allocate("inv") as second:
            assert first != second
            assert first.parent == scratch_dir
            assert first.exists() and first.stat().st_size == 0
            assert "inv" in first.name
            assert first.suffix == ".mp3"

    def test_removed_on_normal_exit(self, scratch_dir):
        with ScratchSpace(scratch_dir).allocate("inv") as path:
            path.write_bytes(b"audio")

        assert not path.exists()

    def test_removed_on_error(self, scratch_dir):
        with pytest.raises(RuntimeError):
            with ScratchSpace(scratch_dir).allocate("inv") as path:
                path.write_bytes(b"audio")
                raise RuntimeError("download failed")

        assert not path.exists()

    def test_tolerates_file_already_deleted(self, scratch_dir):
        with ScratchSpace(scratch_dir).allocate("inv") as path:
            path.unlink()

        assert list(scratch_dir.iterdir()) == []

    def test_creates_missing_directory(self, tmp_path):
        directory = tmp_path / "nested" / "scratch"

        with ScratchSpace(directory).allocate("inv") as path:
            assert path.parent == directory
