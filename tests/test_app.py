"""Tests for the command line entry point."""

import runpy
import sys
from unittest.mock import patch

import pytest

from mindgames.app import main


def test_missing_explicit_config_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(tmp_path / "missing.yaml")])
    assert exc.value.code == 1
    assert "Config not found" in capsys.readouterr().out


def test_clean_quit_returns_zero(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with patch("mindgames.app.run_session") as mock_session:
        assert main([]) == 0
    mock_session.assert_called_once()
    assert mock_session.call_args.kwargs["escape_delay_ms"] == 25
    assert mock_session.call_args.kwargs["recorder"] is None
    assert "Bye!" in capsys.readouterr().out


def test_io_error_printed_after_session(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with patch("mindgames.app.run_session", side_effect=OSError("input closed")):
        with pytest.raises(SystemExit) as exc:
            main(["--verbose"])
    assert exc.value.code == 1
    assert "Error: input closed" in capsys.readouterr().out


def test_record_flag_builds_recorder(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with patch("mindgames.app.run_session") as mock_session:
        main(["--record", str(tmp_path / "frames")])
    recorder = mock_session.call_args.kwargs["recorder"]
    assert recorder.directory == tmp_path / "frames"


def test_default_config_file_is_picked_up(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "mindgames.yaml").write_text("terminal:\n  escape_delay_ms: 100\n")
    with patch("mindgames.app.run_session") as mock_session:
        main([])
    assert mock_session.call_args.kwargs["escape_delay_ms"] == 100


def test_module_entry_point_exits_with_status(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["mindgames"])
    with patch("mindgames.terminal.run_session"):
        with pytest.raises(SystemExit) as exc:
            runpy.run_module("mindgames.app", run_name="__main__")
    assert exc.value.code == 0
