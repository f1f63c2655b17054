"""Tests for the rm delegate."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from dontrm.core.delegate import DEFAULT_RM_PATH, DelegateError, RmDelegate


class TestRmDelegate:
    """Tests for RmDelegate."""

    def test_default_path(self):
        assert RmDelegate().rm_path == DEFAULT_RM_PATH

    def test_command_keeps_arguments(self):
        delegate = RmDelegate("/bin/rm")
        args = ["-rf", "--", "-foo", "bar baz"]
        assert delegate.command(args) == ["/bin/rm", "-rf", "--", "-foo", "bar baz"]

    def test_describe_quotes(self):
        delegate = RmDelegate("/bin/rm")
        assert delegate.describe(["-f", "bar baz"]) == "/bin/rm -f 'bar baz'"

    def test_run_returns_exit_status(self, monkeypatch):
        calls = []

        def fake_run(command, check):
            calls.append(command)
            return subprocess.CompletedProcess(command, 3)

        monkeypatch.setattr(subprocess, "run", fake_run)
        assert RmDelegate("/bin/rm").run(["x"]) == 3
        assert calls == [["/bin/rm", "x"]]

    def test_missing_binary(self, temp_dir: Path):
        delegate = RmDelegate(str(temp_dir / "no-such-rm"))
        with pytest.raises(DelegateError, match="Cannot run"):
            delegate.run(["x"])

    def test_runs_real_program(self):
        # Any executable will do; never the system rm
        delegate = RmDelegate(sys.executable)
        assert delegate.run(["-c", "import sys; sys.exit(7)"]) == 7
