import subprocess
from pathlib import Path

import pytest

from utils import backend_client
from utils.backend_client import BackendCommandError


def _fake_backend(tmp_path: Path) -> Path:
    exe = tmp_path / "match-backend"
    exe.write_text("stub")
    return exe


def test_missing_backend_path_raises(tmp_path: Path) -> None:
    fake_exe = tmp_path / "match-backend"
    with pytest.raises(FileNotFoundError):
        backend_client.run_backend_command("matches", backend_path=str(fake_exe))


def test_resolve_backend_from_env(monkeypatch, tmp_path: Path) -> None:
    fake_backend = _fake_backend(tmp_path)
    monkeypatch.setenv("MATCH_VIEWER_BACKEND", str(fake_backend))
    resolved = backend_client._resolve_backend_path(None)  # type: ignore[attr-defined]
    assert resolved == fake_backend


def test_run_backend_command_decodes_json(monkeypatch, tmp_path: Path) -> None:
    exe = _fake_backend(tmp_path)
    seen: dict = {}

    def fake_run(args, **kwargs):
        seen["args"] = args
        seen["timeout"] = kwargs["timeout"]
        return subprocess.CompletedProcess(args, 0, stdout='\ufeff{"id": 42}\n', stderr="")

    monkeypatch.setattr(backend_client.subprocess, "run", fake_run)

    payload = backend_client.run_backend_command(
        "match-details", backend_path=str(exe), extra_args=["42"], timeout=3.0
    )

    assert payload == {"id": 42}
    assert seen["args"] == [str(exe), "match-details", "42"]
    assert seen["timeout"] == 3.0


def test_non_zero_exit_raises(monkeypatch, tmp_path: Path) -> None:
    exe = _fake_backend(tmp_path)
    monkeypatch.setattr(
        backend_client.subprocess,
        "run",
        lambda args, **kwargs: subprocess.CompletedProcess(args, 2, stdout="", stderr="no such match"),
    )

    with pytest.raises(BackendCommandError, match="no such match"):
        backend_client.run_backend_command("match-details", backend_path=str(exe), extra_args=["9"])


def test_timeout_raises_backend_error(monkeypatch, tmp_path: Path) -> None:
    exe = _fake_backend(tmp_path)

    def fake_run(args, **kwargs):
        raise subprocess.TimeoutExpired(args, kwargs["timeout"])

    monkeypatch.setattr(backend_client.subprocess, "run", fake_run)

    with pytest.raises(BackendCommandError, match="timed out"):
        backend_client.run_backend_command("matches", backend_path=str(exe), timeout=0.5)


def test_invalid_json_raises(monkeypatch, tmp_path: Path) -> None:
    exe = _fake_backend(tmp_path)
    monkeypatch.setattr(
        backend_client.subprocess,
        "run",
        lambda args, **kwargs: subprocess.CompletedProcess(args, 0, stdout="not json", stderr=""),
    )

    with pytest.raises(BackendCommandError):
        backend_client.run_backend_command("matches", backend_path=str(exe))


def test_empty_output_allowed_when_not_expected(monkeypatch, tmp_path: Path) -> None:
    exe = _fake_backend(tmp_path)
    monkeypatch.setattr(
        backend_client.subprocess,
        "run",
        lambda args, **kwargs: subprocess.CompletedProcess(args, 0, stdout="", stderr=""),
    )

    assert (
        backend_client.run_backend_command(
            "clear-image-cache", backend_path=str(exe), expect_output=False
        )
        is None
    )
    with pytest.raises(BackendCommandError):
        backend_client.run_backend_command("matches", backend_path=str(exe))
