"""The interactive session: login, menu and the game loop."""

from __future__ import annotations

import argparse
import copy
import random
import sys
import time
from typing import Any

import blessed

from .game import Event, Game
from .screen import (
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    Terminal,
    draw_banner,
    draw_border,
    draw_game,
    draw_sidebar,
    draw_status,
    erase_game,
    gameover_lines,
    instruction_lines,
)
from .storage import Player, ScoreStore, find_player

FRAME_DELAY = 0.08
COLLISION_DELAY = 0.15
WRONG_PASSWORD_DELAY = 1.5
PASSWORD_ATTEMPTS = 3
_SET_PROMPT = "Set Password: "


class Session:
    """One run of the program for one terminal and one set of score files."""

    def __init__(self, terminal: Terminal, store: ScoreStore, rng: Any = None) -> None:
        self.terminal = terminal
        self.store = store
        self.game = Game(rng if rng is not None else random.Random())
        self.player_name = ""
        self.high_score = 0
        self.overall = 0
        self.sleep = time.sleep

    def _banner_screen(self) -> None:
        self.terminal.clear()
        draw_banner(self.terminal)

    def _message(self, text: str) -> None:
        self._banner_screen()
        self.terminal.put(5, 15, text)
        self.terminal.put(5, 17, "Press any key to continue...")
        self.terminal.get_key(None)

    def _pause(self, seconds: float) -> None:
        self.terminal.flush()
        self.sleep(seconds)

    def login(self) -> bool:
        """Ask for a name, register it if new, and check the password.

        Returns True once logged in, False when the user gives up.
        """
        terminal = self.terminal
        while True:
            players = self.store.read_players()
            self._banner_screen()
            name = terminal.read_line(5, 15, "Enter Player Name: ")
            if find_player(players, name) is not None:
                self._message("Player already exists!")
            else:
                self._banner_screen()
                chosen = terminal.read_line(5, 15, _SET_PROMPT)
                players.append(Player(name, chosen))
                self.store.save_player(name, chosen)
                terminal.clear()
            if self.verify_password(players, name):
                self.player_name = name
                return True
            self._banner_screen()
            terminal.put(5, 15, "Too many failed password attempts.")
            choice = terminal.read_line(
                5, 17, "Do you want to re-enter player name? (y/n): "
            ).strip()
            if not choice or choice[0] not in "yY":
                return False

    def verify_password(self, players: list[Player], username: str) -> bool:
        """Give the user a few tries at the password of ``username``."""
        player = find_player(players, username)
        if player is None:
            self._message("User not found!")
            return False
        attempts = PASSWORD_ATTEMPTS
        while attempts > 0:
            self._banner_screen()
            entered = self.terminal.read_line(
                5, 15, f"Enter Password ({attempts} attempts left): "
            )
            tokens = entered.split()
            if (tokens[0] if tokens else "") == player.password:
                self._message("Login successful!")
                return True
            attempts -= 1
            if attempts > 0:
                self.terminal.put(5, 17, "Incorrect password! Try again.")
                self._pause(WRONG_PASSWORD_DELAY)
        return False

    def menu(self) -> str:
        """Show the main menu and return the key chosen."""
        terminal = self.terminal
        self._banner_screen()
        for row, text in (
            (15, "1. Start Game"),
            (16, "2. Restart"),
            (17, "3. Instructions"),
            (18, "4. Quit"),
            (20, "Select Option: "),
        ):
            terminal.put(5, row, text)
        option = terminal.get_key(None) or ""
        if len(option) == 1:
            terminal.put(20, 20, option)
        return option

    def _show_status(self) -> None:
        game = self.game
        draw_status(self.terminal, game.score, game.lives, game.high_score, self.overall)

    def _show_controls(self) -> None:
        draw_sidebar(self.terminal)
        self.terminal.put(25, 10, "Press any key")
        self.terminal.get_key(None)
        self.terminal.put(25, 10, "             ")

    def play(self) -> int:
        """Play one round, record its score, and return the final score."""
        terminal = self.terminal
        game = self.game
        terminal.clear()
        draw_border(terminal)
        self.high_score = self.store.read_player_high_score(self.player_name)
        self.overall = self.store.read_overall_high_score()
        game.reset()
        game.high_score = self.high_score
        self._show_status()
        self._show_controls()
        self.store.save_instructions()
        self._run_round()
        self.high_score, self.overall = self.store.write_player_high_score(
            self.player_name, game.score, self.overall
        )
        return game.score

    def _run_round(self) -> None:
        terminal = self.terminal
        game = self.game
        while True:
            key = terminal.get_key(0)
            if key == KEY_LEFT:
                game.move_left()
            elif key == KEY_RIGHT:
                game.move_right()
            elif key == KEY_SPACE:
                game.fire()
                terminal.beep(800, 50)
            elif key == KEY_ESCAPE:
                return

            draw_game(terminal, game)
            drawn = copy.deepcopy(game)
            events = game.tick()
            if Event.COLLISION in events:
                self._show_status()
                terminal.beep(200, 200)
                self._pause(COLLISION_DELAY)
                if Event.GAME_OVER in events:
                    terminal.beep(150, 300)
                    terminal.beep(100, 400)
                    self.game_over(game.score)
                    return
            if Event.HIT in events:
                self._show_status()
                terminal.beep(1000, 30)

            self._pause(FRAME_DELAY)
            erase_game(terminal, drawn)
            game.move_bullets()
            game.advance_enemies()

    def show_instructions(self) -> None:
        """Show the instruction screen until a key is pressed."""
        self.terminal.clear()
        for row, text in instruction_lines():
            self.terminal.put(5, row, text)
        self.terminal.get_key(None)

    def game_over(self, final_score: int) -> None:
        """Show the game-over screen until a key is pressed."""
        self.terminal.clear()
        for row, text in gameover_lines(final_score, self.game.high_score, self.overall):
            self.terminal.put(5, row, text)
        self.terminal.get_key(None)

    def run(self) -> None:
        """Log in, then serve the menu until the user quits."""
        while self.login():
            while True:
                option = self.menu()
                if option == "1":
                    self.play()
                elif option == "2":
                    break
                elif option == "3":
                    self.show_instructions()
                elif option == "4":
                    return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="spaceshooter",
        description="Shoot down falling enemies in the terminal.",
    )
    parser.parse_args(argv)
    term = blessed.Terminal()
    with term.cbreak(), term.hidden_cursor():
        session = Session(Terminal(term, sys.stdout), ScoreStore("."), random.Random())
        session.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())