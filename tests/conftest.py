"""Pytest configuration and fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from dontrm.safety.expansion import MemoryLister


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def system_tree() -> MemoryLister:
    """A small, fixed Linux root with a two-entry /usr/bin."""
    return MemoryLister([
        "/bin/",
        "/etc/passwd",
        "/etc/hosts",
        "/etc/.pwd.lock",
        "/home/other/",
        "/home/user/notes.txt",
        "/tmp/",
        "/usr/bin/bash",
        "/usr/bin/go",
        "/usr/lib/libc.so",
        "/var/log/syslog",
    ])


@pytest.fixture
def glob_tree(temp_dir: Path) -> Path:
    """Create a real directory tree for glob expansion."""
    (temp_dir / "a.txt").write_text("a")
    (temp_dir / "b.txt").write_text("b")
    (temp_dir / "c.log").write_text("c")
    (temp_dir / ".hidden").write_text("h")

    sub = temp_dir / "sub"
    sub.mkdir()
    (sub / "d.txt").write_text("d")

    (temp_dir / "star*").write_text("literal star")

    yield temp_dir


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate config lookup and the dry-run toggle from the host."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("DRY_RUN", raising=False)
    monkeypatch.delenv("DONTRM_CONFIG", raising=False)
    yield tmp_path
