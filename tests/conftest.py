"""
Shared fixtures for duplicate search tests.
Creates isolated temporary directories with controlled test files.
"""
import logging
import os
import pytest
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so the 'dupfind' package is importable without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from dupfind.core.models import FileRecord


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; undo it so later tests see a clean logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def temp_dir(tmp_path):
    """Isolated temporary directory, auto-cleanup after test."""
    return tmp_path


@pytest.fixture
def make_record():
    """Builds a FileRecord from a real file on disk (stat snapshot)."""
    def _make(path) -> FileRecord:
        return FileRecord.from_stat(str(path), os.lstat(path))
    return _make


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 3 identical files a, b, c (one group)
    - 1 unrelated file d
    - 2 identical files in a subdirectory (second group, only found when recursing)
    - 2 empty files (identical, excluded with include_empty=False)
    """
    files = {}

    content = b"A" * 10000  # spans two 8 KiB chunks
    for name in ("a", "b", "c"):
        files[name] = temp_dir / name
        files[name].write_bytes(content)

    files["d"] = temp_dir / "d"
    files["d"].write_bytes(b"unrelated content")

    subdir = temp_dir / "sub"
    subdir.mkdir()
    files["sub_x"] = subdir / "x.txt"
    files["sub_y"] = subdir / "y.txt"
    files["sub_x"].write_bytes(b"B" * 2048)
    files["sub_y"].write_bytes(b"B" * 2048)

    files["empty1"] = temp_dir / "empty1"
    files["empty2"] = temp_dir / "empty2"
    files["empty1"].write_bytes(b"")
    files["empty2"].write_bytes(b"")

    return files


class ConstantAlgorithm:
    """Hash algorithm that puts every file in the same bucket (forced collisions)."""
    name = "constant"

    class _State:
        def update(self, data: bytes) -> None:
            pass

        def hexdigest(self) -> str:
            return "0" * 16

    def new(self):
        return self._State()


@pytest.fixture
def constant_algorithm():
    return ConstantAlgorithm()
