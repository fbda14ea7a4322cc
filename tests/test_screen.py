import io
import random

import pytest

from spaceshooter.game import JET_ROW, JET_SPRITE, SCREEN_HEIGHT, SCREEN_WIDTH, WIN_WIDTH, Game
from spaceshooter.screen import (
    SEPARATOR,
    SIDEBAR_X,
    Terminal,
    banner_lines,
    draw_banner,
    draw_border,
    draw_game,
    draw_sidebar,
    draw_status,
    erase_game,
    gameover_lines,
    instruction_lines,
)


class FakeKey(str):
    def __new__(cls, text, name=None):
        obj = str.__new__(cls, text)
        obj.name = name
        return obj


class FakeTerm:
    home = "<home>"
    clear = "<clear>"

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.timeouts = []

    def move_xy(self, x, y):
        return f"<{x},{y}>"

    def inkey(self, timeout=None):
        self.timeouts.append(timeout)
        if self.keys:
            return self.keys.pop(0)
        if timeout is None:
            raise AssertionError("blocking read with no input left")
        return FakeKey("")


def make_terminal(keys=()):
    term = FakeTerm(keys)
    return Terminal(term, io.StringIO()), term


def row_text(terminal, y, start=0, width=110):
    return "".join(terminal.cells.get((x, y), " ") for x in range(start, width)).rstrip()


def test_put_records_cells_and_writes_movement():
    terminal, _ = make_terminal()
    terminal.put(3, 4, "ab")
    assert terminal.cells[(3, 4)] == "a"
    assert terminal.cells[(4, 4)] == "b"
    assert terminal.stream.getvalue() == "<3,4>ab"


def test_clear_forgets_cells():
    terminal, _ = make_terminal()
    terminal.put(1, 1, "x")
    terminal.clear()
    assert terminal.cells == {}
    assert terminal.stream.getvalue().endswith("<home><clear>")


@pytest.mark.parametrize(
    "key, expected",
    [
        (FakeKey("\x1b[D", "KEY_LEFT"), "left"),
        (FakeKey("\x1b[C", "KEY_RIGHT"), "right"),
        (FakeKey("\x1b", "KEY_ESCAPE"), "escape"),
        (FakeKey(" "), " "),
        (FakeKey("1"), "1"),
    ],
)
def test_get_key_maps_keys(key, expected):
    terminal, _ = make_terminal([key])
    assert terminal.get_key(None) == expected


def test_get_key_poll_without_input_gives_none():
    terminal, term = make_terminal()
    assert terminal.get_key(0) is None
    assert term.timeouts == [0]


def test_read_line_handles_backspace_and_echoes():
    keys = [FakeKey("a"), FakeKey("b"), FakeKey("\x7f", "KEY_BACKSPACE"), FakeKey("c"),
            FakeKey("\n", "KEY_ENTER")]
    terminal, term = make_terminal(keys)
    assert terminal.read_line(5, 15, "Name: ") == "ac"
    assert row_text(terminal, 15) == "     Name: ac"
    assert term.keys == []


def test_read_line_ignores_named_non_text_keys():
    keys = [FakeKey("\x1b[A", "KEY_UP"), FakeKey("z"), FakeKey("\r")]
    terminal, _ = make_terminal(keys)
    assert terminal.read_line(0, 0, "") == "z"


def test_beep_rings_bell():
    terminal, _ = make_terminal()
    terminal.beep(800, 50)
    assert terminal.stream.getvalue() == "\a"


def test_banner_lines_shape():
    lines = banner_lines()
    assert len(lines) == 11
    assert lines[5] == ""
    assert lines[0] == "       ******    *****     ***      *****   *******   "


def test_draw_banner_frames_title():
    terminal, _ = make_terminal()
    draw_banner(terminal)
    assert row_text(terminal, 0) == SEPARATOR
    assert row_text(terminal, 12) == SEPARATOR
    for row, line in enumerate(banner_lines(), start=1):
        assert row_text(terminal, row) == line.rstrip()


def test_draw_border():
    terminal, _ = make_terminal()
    draw_border(terminal)
    assert all(terminal.cells[(x, SCREEN_HEIGHT)] == "=" for x in range(SCREEN_WIDTH + 2))
    for y in range(SCREEN_HEIGHT):
        assert terminal.cells[(0, y)] == "|"
        assert terminal.cells[(SCREEN_WIDTH + 2, y)] == "|"
        assert terminal.cells[(WIN_WIDTH, y)] == "|"


def test_draw_sidebar_and_status():
    terminal, _ = make_terminal()
    draw_sidebar(terminal)
    draw_status(terminal, 7, 2, 9, 11)
    assert row_text(terminal, 2, SIDEBAR_X) == "SPACE SHOOTER"
    assert row_text(terminal, 10, SIDEBAR_X) == "Esc Exit"
    assert row_text(terminal, 12, SIDEBAR_X) == "Score: 7"
    assert row_text(terminal, 13, SIDEBAR_X) == "Lives: 2"
    assert row_text(terminal, 15, SIDEBAR_X) == "Your Best: 9"
    assert row_text(terminal, 16, SIDEBAR_X) == "Overall: 11"


def test_draw_game_then_erase_leaves_blank():
    terminal, _ = make_terminal()
    game = Game(random.Random(1))
    game.fire()
    game.move_bullets()
    draw_game(terminal, game)
    for row, line in enumerate(JET_SPRITE):
        width = game.jet_pos + len(line)
        assert "".join(terminal.cells[(x, JET_ROW + row)] for x in range(game.jet_pos, width)) == line
    assert terminal.cells[(game.jet_pos, JET_ROW - 1)] == "."
    assert terminal.cells[(game.jet_pos + 4, JET_ROW - 1)] == "."
    enemy = game.enemies[0]
    assert terminal.cells[(enemy.x + 1, enemy.y + 1)] == "O"
    erase_game(terminal, game)
    assert all(char == " " for char in terminal.cells.values())


def test_gameover_lines_records():
    texts = [text for _, text in gameover_lines(5, 5, 5)]
    assert "*** NEW PERSONAL RECORD! ***" in texts
    assert "*** NEW OVERALL RECORD! ***" in texts
    quiet = dict(gameover_lines(0, 0, 0))
    assert 18 not in quiet and 19 not in quiet
    plain = dict(gameover_lines(3, 5, 9))
    assert plain[12] == "Final Score: 3"
    assert plain[14] == "Your Best: 5"
    assert plain[16] == "Overall Best: 9"
    assert plain[22] == "Press any key to return to menu..."


def test_instruction_lines():
    lines = dict(instruction_lines())
    assert lines[3] == "INSTRUCTIONS"
    assert lines[20] == "Press any key to return to menu..."
    assert len(lines) == len(instruction_lines())