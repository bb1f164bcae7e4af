"""Tests for the curses terminal handle and the session bracket."""

import curses
import os
import random
from unittest.mock import MagicMock, patch

import pytest

from mindgames.events import ENTER, KeyEvent
from mindgames.frame import Frame
from mindgames.games.number_memory import NumberMemoryGame
from mindgames.games.reaction import ReactionGame
from mindgames.terminal import Terminal, run_session


class FakeScreen:
    """Stands in for a curses window: getch plays back codes, then -1."""

    def __init__(self, codes=()):
        self.codes = list(codes)
        self.timeouts = []
        self.getch_calls = 0

    def timeout(self, ms: int) -> None:
        self.timeouts.append(ms)

    def getch(self) -> int:
        self.getch_calls += 1
        return self.codes.pop(0) if self.codes else -1

    def keypad(self, flag: bool) -> None:
        self.keypad_on = flag


def test_poll_without_input_is_false():
    screen = FakeScreen()
    term = Terminal(screen)
    assert term.poll(0.01) is False
    assert screen.timeouts == [10]


def test_poll_keeps_the_key_for_read():
    screen = FakeScreen([10])
    term = Terminal(screen)
    assert term.poll(0.01) is True
    assert term.poll(0.01) is True
    assert screen.getch_calls == 1

    assert term.read() == KeyEvent(ENTER)
    assert screen.getch_calls == 1


def test_read_blocks_then_translates():
    screen = FakeScreen([ord("7")])
    term = Terminal(screen)
    assert term.read() == KeyEvent.of("7")
    assert screen.timeouts == [-1]


def test_read_failure_is_io_error():
    with pytest.raises(OSError):
        Terminal(FakeScreen()).read()


def test_resize_and_mouse_are_not_key_presses():
    term = Terminal(FakeScreen([curses.KEY_RESIZE, curses.KEY_MOUSE, ord("q")]))
    assert term.poll(0.01) is False
    assert term.poll(0.01) is False
    assert term.read() == KeyEvent.of("q")


def test_resize_does_not_count_as_a_reaction(clock):
    game = ReactionGame(clock=clock, rng=random.Random(7), frame_delay=0)
    game.handle_input(KeyEvent.of(" "))
    clock.now = game.session.wait_until
    game.update()
    assert game.state == "active"

    clock.advance(0.049)
    with pytest.raises(OSError):
        game.handle_events(Terminal(FakeScreen([curses.KEY_RESIZE])))
    assert game.state == "active"
    assert game.session.history == []


def test_resize_does_not_start_number_memory(clock):
    game = NumberMemoryGame(clock=clock, rng=random.Random(3), frame_delay=0)
    game.handle_events(Terminal(FakeScreen([curses.KEY_RESIZE, ord("q")])))
    assert game.state == "title"
    assert game.quit is True


def test_draw_paints_and_records():
    recorder = MagicMock()
    term = Terminal(FakeScreen(), recorder=recorder)
    frame = Frame("red")
    with patch("mindgames.terminal.draw_frame") as mock_draw:
        term.draw(frame)
    mock_draw.assert_called_once_with(term.stdscr, frame)
    recorder.record.assert_called_once_with(frame)


def _session_patches(screen):
    return (
        patch("curses.wrapper", side_effect=lambda f: f(screen)),
        patch("curses.curs_set"),
        patch("curses.raw"),
        patch("mindgames.terminal.init_colors"),
    )


def test_run_session_hands_a_terminal_to_func():
    screen = FakeScreen()
    recorder = MagicMock()
    seen = []
    wrapper, curs_set, raw, init_colors = _session_patches(screen)
    with patch.dict(os.environ), wrapper as mock_wrapper, curs_set, raw as mock_raw, init_colors as mock_colors:
        os.environ.pop("ESCDELAY", None)
        result = run_session(lambda term: seen.append(term) or "done", escape_delay_ms=40, recorder=recorder)
        assert os.environ["ESCDELAY"] == "40"

    assert result == "done"
    mock_wrapper.assert_called_once()
    mock_raw.assert_called_once()
    mock_colors.assert_called_once()
    assert screen.keypad_on is True
    assert isinstance(seen[0], Terminal)
    assert seen[0].stdscr is screen
    assert seen[0].recorder is recorder


def test_run_session_survives_hidden_cursor_failure():
    screen = FakeScreen()
    wrapper, _, raw, init_colors = _session_patches(screen)
    with wrapper, raw, init_colors, patch("curses.curs_set", side_effect=curses.error("no cursor")):
        assert run_session(lambda term: 1) == 1


def test_run_session_propagates_io_errors():
    def broken(term):
        raise OSError("input closed")

    wrapper, curs_set, raw, init_colors = _session_patches(FakeScreen())
    with wrapper, curs_set, raw, init_colors:
        with pytest.raises(OSError):
            run_session(broken)
