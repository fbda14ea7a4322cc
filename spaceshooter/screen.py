"""Drawing on a character terminal and reading keys from it."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .game import (
    ENEMY_SPRITE,
    JET_ROW,
    JET_SPRITE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WIN_WIDTH,
    Game,
)

KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_ESCAPE = "escape"
KEY_SPACE = " "

_NAMED_KEYS = {"KEY_LEFT": KEY_LEFT, "KEY_RIGHT": KEY_RIGHT, "KEY_ESCAPE": KEY_ESCAPE}
_ENTER_NAMES = {"KEY_ENTER"}
_ERASE_NAMES = {"KEY_BACKSPACE", "KEY_DELETE"}

SIDEBAR_X = WIN_WIDTH + 2
SEPARATOR = "==================================================================================================="

_TITLE = (
    "       ******    *****     ***      *****   *******   ",
    "       **        **  **   ** **    **       **        ",
    "       ******    *****   **   **   **       *******   ",
    "            **   **      *******   **       **        ",
    "       ******    **      **   **    *****   *******   ",
)
_SUBTITLE = (
    "                      ******   **    **     *****     *****    ********    *******   *******   ",
    "                      **       **    **    **   **   **   **      **       **        **    **  ",
    "                      ******   ********    **   **   **   **      **       *******   *******   ",
    "                           **  **    **    **   **   **   **      **       **        **    **  ",
    "                      ******   **    **     *****     *****       **       *******   **     ** ",
)

_SIDEBAR = (
    (2, "SPACE SHOOTER"),
    (4, "CONTROLS"),
    (5, "----------"),
    (7, "<- Left"),
    (8, "-> Right"),
    (9, "Space Shoot"),
    (10, "Esc Exit"),
)


class Terminal:
    """A cursor-addressed screen over a blessed-style terminal.

    Every character written is also kept in ``cells`` keyed by ``(x, y)``.
    """

    def __init__(self, term: Any, stream: TextIO | None = None) -> None:
        self.term = term
        self.stream = stream if stream is not None else sys.stdout
        self.cells: dict[tuple[int, int], str] = {}

    def clear(self) -> None:
        """Blank the whole screen."""
        self.stream.write(self.term.home + self.term.clear)
        self.cells.clear()

    def put(self, x: int, y: int, text: str) -> None:
        """Write ``text`` starting at column ``x`` of row ``y``."""
        self.stream.write(self.term.move_xy(x, y) + text)
        for offset, char in enumerate(text):
            self.cells[(x + offset, y)] = char

    def flush(self) -> None:
        self.stream.flush()

    def get_key(self, timeout: float | None = None) -> str | None:
        """Wait up to ``timeout`` seconds (forever if None) for a key.

        Arrow and escape keys come back as ``"left"``, ``"right"`` and
        ``"escape"``; other keys as their text; no key as None.
        """
        self.flush()
        key = self.term.inkey(timeout=timeout)
        name = getattr(key, "name", None)
        if name:
            return _NAMED_KEYS.get(name, name)
        return str(key) or None

    def read_line(self, prompt_x: int, prompt_y: int, prompt: str = "") -> str:
        """Show ``prompt`` and read an echoed line of text until Enter."""
        self.put(prompt_x, prompt_y, prompt)
        start = prompt_x + len(prompt)
        chars: list[str] = []
        while True:
            self.flush()
            key = self.term.inkey(timeout=None)
            name = getattr(key, "name", None)
            text = str(key)
            if name in _ENTER_NAMES or text in ("\n", "\r"):
                return "".join(chars)
            if name in _ERASE_NAMES or text in ("\b", "\x7f"):
                if chars:
                    chars.pop()
                    self.put(start + len(chars), prompt_y, " ")
                continue
            if name is None and text and text.isprintable():
                self.put(start + len(chars), prompt_y, text)
                chars.extend(text)

    def beep(self, frequency: int, duration: int) -> None:
        """Sound the terminal bell; pitch and length are up to the terminal."""
        self.stream.write("\a")


def banner_lines() -> list[str]:
    """The title art: two blocks of five rows with a blank row between."""
    return [*_TITLE, "", *_SUBTITLE]


def draw_banner(terminal: Terminal) -> None:
    """Draw the title art framed by separator rows 0 and 12."""
    terminal.put(0, 0, SEPARATOR)
    for row, line in enumerate(banner_lines(), start=1):
        terminal.put(0, row, line)
    terminal.put(0, 12, SEPARATOR)


def draw_border(terminal: Terminal) -> None:
    """Draw the playfield frame and the divider before the sidebar."""
    for x in range(SCREEN_WIDTH + 2):
        terminal.put(x, SCREEN_HEIGHT, "=")
    for y in range(SCREEN_HEIGHT):
        terminal.put(0, y, "|")
        terminal.put(SCREEN_WIDTH + 2, y, "|")
    for y in range(SCREEN_HEIGHT):
        terminal.put(WIN_WIDTH, y, "|")


def draw_sidebar(terminal: Terminal) -> None:
    """Draw the title and key summary beside the playfield."""
    for row, text in _SIDEBAR:
        terminal.put(SIDEBAR_X, row, text)


def draw_status(terminal: Terminal, score: int, lives: int, best: int, overall: int) -> None:
    """Draw score, lives and the personal and overall bests."""
    terminal.put(SIDEBAR_X, 12, f"Score: {score}        ")
    terminal.put(SIDEBAR_X, 13, f"Lives: {lives}        ")
    terminal.put(SIDEBAR_X, 15, f"Your Best: {best}        ")
    terminal.put(SIDEBAR_X, 16, f"Overall: {overall}        ")


def draw_game(terminal: Terminal, game: Game) -> None:
    """Draw the jet, the active enemies and the flying bullets."""
    for row, line in enumerate(JET_SPRITE):
        terminal.put(game.jet_pos, JET_ROW + row, line)
    for enemy in game.enemies:
        if enemy.active:
            for row, line in enumerate(ENEMY_SPRITE):
                terminal.put(enemy.x, enemy.y + row, line)
    for pair in game.bullets:
        for bullet in pair:
            if bullet.visible:
                terminal.put(bullet.x, bullet.y, ".")


def erase_game(terminal: Terminal, game: Game) -> None:
    """Blank out everything that ``draw_game`` would draw for ``game``."""
    blank_jet = " " * len(JET_SPRITE[0])
    for row in range(len(JET_SPRITE)):
        terminal.put(game.jet_pos, JET_ROW + row, blank_jet)
    for enemy in game.enemies:
        if enemy.active:
            for row in range(len(ENEMY_SPRITE)):
                terminal.put(enemy.x, enemy.y + row, "    ")
    for pair in game.bullets:
        for bullet in pair:
            if bullet.y >= 1:
                terminal.put(bullet.x, bullet.y, " ")


def gameover_lines(final_score: int, best: int, overall: int) -> list[tuple[int, str]]:
    """Rows of the game-over screen as ``(row, text)``, all at column 5."""
    lines = [
        (5, "================================"),
        (6, "|                              |"),
        (7, "|        GAME OVER             |"),
        (8, "|                              |"),
        (9, "================================"),
        (12, f"Final Score: {final_score}"),
        (14, f"Your Best: {best}"),
        (16, f"Overall Best: {overall}"),
    ]
    if final_score == best and final_score > 0:
        lines.append((18, "*** NEW PERSONAL RECORD! ***"))
    if final_score == overall and final_score > 0:
        lines.append((19, "*** NEW OVERALL RECORD! ***"))
    lines.append((22, "Press any key to return to menu..."))
    return lines


def instruction_lines() -> list[tuple[int, str]]:
    """Rows of the instruction screen as ``(row, text)``, all at column 5."""
    return [
        (3, "INSTRUCTIONS"),
        (4, "------------"),
        (6, "Objective: Destroy enemies to increase score"),
        (8, "Controls:"),
        (9, "  <- Left Arrow Key  : Move left"),
        (10, "  -> Right Arrow Key : Move right"),
        (11, "  [Spacebar]         : Shoot bullets"),
        (12, "  [Escape]           : Exit game"),
        (14, "Game Rules:"),
        (15, "  - You have 3 lives"),
        (16, "  - Each enemy hit = +1 score"),
        (17, "  - Collision with enemy = -1 life"),
        (20, "Press any key to return to menu..."),
    ]