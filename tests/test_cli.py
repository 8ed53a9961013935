"""Tests for the command-line launcher."""

import json
import logging
from collections import deque

import pytest

import term_snake.console as console_module
from term_snake.cli import (
    EXIT_CONSOLE_ERROR,
    EXIT_INTERRUPTED,
    _build_parser,
    _configure_logging,
    main,
)
from term_snake.console.base import Console


class QuitAfterConsole(Console):
    """Console that presses ``q`` after a number of empty polls."""

    def __init__(self, idle_polls=3, size=(80, 40)):
        self.keys = deque([None] * idle_polls + ["q"])
        self._size = size
        self.closed = False

    def close(self):
        self.closed = True

    def render(self, frame):
        pass

    def poll_key(self):
        return self.keys.popleft() if self.keys else "q"

    def size(self):
        return self._size

    def sleep(self, ms):
        pass


class InterruptingConsole(QuitAfterConsole):
    """Console whose first key poll is interrupted by Ctrl+C."""

    def poll_key(self):
        raise KeyboardInterrupt


class TestCLIParser:
    def test_defaults(self):
        args = _build_parser().parse_args([])
        assert args.config is None
        assert args.width is None
        assert args.style is None
        assert not args.no_high_score

    def test_flags(self):
        args = _build_parser().parse_args([
            "--width", "30",
            "--height", "15",
            "--style", "emoji",
            "--backend", "curses",
            "--tick-ms", "120",
            "--seed", "4",
        ])
        assert args.width == 30
        assert args.height == 15
        assert args.style == "emoji"
        assert args.backend == "curses"
        assert args.tick_ms == 120
        assert args.seed == 4

    def test_unknown_style_rejected(self):
        with pytest.raises(SystemExit, match="2"):
            _build_parser().parse_args(["--style", "neon"])


class TestCLIConfig:
    def test_invalid_grid_rejected(self):
        with pytest.raises(SystemExit, match="2"):
            main(["--width", "2", "--no-high-score"])

    def test_missing_config_file_rejected(self, tmp_path):
        with pytest.raises(SystemExit, match="2"):
            main(["--config", str(tmp_path / "nope.json")])


class TestCLIPlay:
    @pytest.fixture
    def scripted(self, monkeypatch):
        console = QuitAfterConsole()
        monkeypatch.setattr(console_module, "make_console", lambda backend: console)
        return console

    def test_play_and_quit(self, scripted, capsys):
        assert main(["--no-high-score", "--seed", "1"]) == 0
        assert scripted.closed
        assert "Thanks for playing!" in capsys.readouterr().out

    def test_save_config(self, scripted, tmp_path):
        path = tmp_path / "cfg.json"
        main([
            "--no-high-score", "--width", "12", "--save-config", str(path),
        ])
        saved = json.loads(path.read_text())
        assert saved["grid_width"] == 12
        assert saved["high_score_path"] is None

    def test_config_file_with_override(self, scripted, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"grid_width": 10, "tick_ms": 50}))
        out = tmp_path / "effective.json"
        main([
            "--config", str(path), "--tick-ms", "75", "--no-high-score",
            "--save-config", str(out),
        ])
        saved = json.loads(out.read_text())
        assert saved["grid_width"] == 10
        assert saved["tick_ms"] == 75

    def test_terminal_too_small(self, monkeypatch, capsys):
        console = QuitAfterConsole(size=(10, 5))
        monkeypatch.setattr(console_module, "make_console", lambda backend: console)
        assert main(["--no-high-score"]) == EXIT_CONSOLE_ERROR
        assert console.closed
        assert "Terminal too small" in capsys.readouterr().err

    def test_ctrl_c_exits_130_and_restores_terminal(self, monkeypatch, capsys):
        console = InterruptingConsole()
        monkeypatch.setattr(console_module, "make_console", lambda backend: console)
        assert main(["--no-high-score"]) == EXIT_INTERRUPTED
        assert console.closed
        assert "Thanks for playing!" not in capsys.readouterr().out


class TestCLILogging:
    @pytest.fixture
    def basic_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        return calls

    def test_log_file_gets_info(self, basic_config, tmp_path):
        path = str(tmp_path / "snake.log")
        _configure_logging(path)
        assert basic_config[0]["filename"] == path
        assert basic_config[0]["level"] == logging.INFO

    def test_stderr_gets_warnings_only(self, basic_config):
        _configure_logging(None)
        assert basic_config[0]["filename"] is None
        assert basic_config[0]["level"] == logging.WARNING

    def test_main_passes_log_file(self, basic_config, monkeypatch, tmp_path):
        monkeypatch.setattr(
            console_module, "make_console", lambda backend: QuitAfterConsole(),
        )
        path = str(tmp_path / "snake.log")
        assert main(["--no-high-score", "--log-file", path]) == 0
        assert basic_config[0]["filename"] == path
        assert "%(levelname)s" in basic_config[0]["format"]
