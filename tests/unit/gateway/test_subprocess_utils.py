"""Tests for subprocess error wrapping."""

import subprocess
from typing import Any

import pytest
from pytest import MonkeyPatch

from kitbag.errors import VersionControlError
from kitbag.subprocess_utils import run_subprocess_with_context


def test_called_process_error_becomes_version_control_error(monkeypatch: MonkeyPatch) -> None:
    def mock_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        raise subprocess.CalledProcessError(128, cmd, output="", stderr="fatal: bad ref\n")

    monkeypatch.setattr(subprocess, "run", mock_run)

    with pytest.raises(VersionControlError) as exc_info:
        run_subprocess_with_context(["git", "rev-parse", "nope"], operation_context="resolve nope")

    error = exc_info.value
    assert error.command == ["git", "rev-parse", "nope"]
    assert error.returncode == 128
    assert error.stderr == "fatal: bad ref"
    assert str(error).startswith("Failed to resolve nope\nCommand: git rev-parse nope")


def test_missing_binary(monkeypatch: MonkeyPatch) -> None:
    def mock_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(subprocess, "run", mock_run)

    with pytest.raises(VersionControlError, match="Command not found: git") as exc_info:
        run_subprocess_with_context(["git", "status"], operation_context="check status")

    assert exc_info.value.returncode is None


def test_success_returns_completed_process(monkeypatch: MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []

    def mock_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        calls.append(kwargs)
        return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="abc\n", stderr="")

    monkeypatch.setattr(subprocess, "run", mock_run)

    result = run_subprocess_with_context(["git", "rev-parse", "HEAD"], operation_context="x")

    assert result.stdout == "abc\n"
    assert calls[0]["capture_output"] is True
    assert calls[0]["check"] is True
