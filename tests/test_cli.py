import os

import pytest

from conftest import FakeTerminal
from tedit import __version__
from tedit.cli import main
from tedit.terminal import RawTerminal


def test_main_runs_session_and_restores_terminal(tmp_path) -> None:
    target = tmp_path / "file.txt"
    target.write_bytes(b"one\ntwo")
    terminal = FakeTerminal([b"\x11"])

    assert main([str(target)], terminal=terminal) == 0
    assert terminal.entered is True
    assert terminal.exited is True
    assert b"file.txt [2 lines]" in terminal.frames[0]


def test_main_without_path_starts_unnamed_buffer() -> None:
    terminal = FakeTerminal([b"\x11"])

    assert main([], terminal=terminal) == 0
    assert b"[No Name] [1 lines]" in terminal.frames[0]


def test_main_reports_unreadable_file(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    terminal = FakeTerminal()

    assert main([str(tmp_path)], terminal=terminal) == 1

    assert "tedit: cannot open" in capsys.readouterr().err
    assert terminal.entered is False


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_main_reports_non_terminal_stdin(capsys: pytest.CaptureFixture[str]) -> None:
    read_fd, write_fd = os.pipe()
    try:
        terminal = RawTerminal(stdin_fd=read_fd, stdout_fd=write_fd)

        assert main([], terminal=terminal) == 1
    finally:
        os.close(read_fd)
        os.close(write_fd)

    assert "tedit: stdin is not a terminal" in capsys.readouterr().err
