import pytest
import tempfile
import shutil
from pathlib import Path

from pathkit.core.models import PathFormat
from pathkit.core.errors import ResolutionError
from pathkit.utils.host import HostFilesystem


class FakeHost(HostFilesystem):
    """In-memory host with a fixed working directory and a set of existing paths."""

    def __init__(self, cwd="/work", existing=(), path_format=PathFormat.POSIX):
        self.cwd = cwd
        self.existing = set(existing)
        self.path_format = path_format
        self.probes = []

    @property
    def native_format(self):
        return self.path_format

    def exists(self, path):
        self.probes.append(path)
        return path in self.existing

    def current_working_directory(self):
        if self.cwd is None:
            raise ResolutionError("Internal error in getcwd(): no working directory")
        return self.cwd

    def absolute_path_of(self, path):
        if path not in self.existing:
            raise ResolutionError(f"Internal error in realpath(): {path} does not exist")
        return path


@pytest.fixture
def fake_host():
    """Fake host rooted at /work with nothing on disk."""
    return FakeHost()


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def sample_tree(temp_workspace):
    """Create a small directory tree with a few files."""
    root = temp_workspace / "sample"
    root.mkdir()

    (root / "filesystem").mkdir()
    (root / "filesystem" / "path.h").write_text("#pragma once\n")
    (root / "filesystem" / "resolver.h").write_text("#pragma once\n")
    (root / "docs").mkdir()
    (root / "docs" / "README.md").write_text("# Docs\n")
    (root / "data.bin").write_bytes(b"\x00" * 64)

    return root
