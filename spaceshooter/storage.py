"""Plain-text persistence for players, scores and the instruction sheet."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

PLAYERS_FILE = "game.txt"
PLAYER_SCORES_FILE = "Player_Scores.txt"
OVERALL_SCORE_FILE = "Overall_High_Score.txt"
INSTRUCTIONS_FILE = "Instructions.txt"

OVERALL_LABEL = "Overall High Score:"

INSTRUCTIONS_TEXT = (
    "Instructions",
    "-------------------",
    "-> Left Arrow Key for moving left",
    "-> Right Arrow Key for moving right",
    "-> Press spacebar to shoot enemies",
)


@dataclass
class Player:
    """A registered player and their password."""

    name: str
    password: str


def find_player(players: Iterable[Player], name: str) -> Player | None:
    """Return the first player called ``name``, or None."""
    return next((player for player in players if player.name == name), None)


def _pairs(path: Path) -> Iterator[tuple[str, str]]:
    """Yield whitespace-separated token pairs; a trailing odd token is dropped."""
    tokens = iter(path.read_text(encoding="utf-8").split())
    return zip(tokens, tokens)


class ScoreStore:
    """Files holding players, per-player best scores and the overall best."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)

    @property
    def players_path(self) -> Path:
        return self.directory / PLAYERS_FILE

    @property
    def scores_path(self) -> Path:
        return self.directory / PLAYER_SCORES_FILE

    @property
    def overall_path(self) -> Path:
        return self.directory / OVERALL_SCORE_FILE

    @property
    def instructions_path(self) -> Path:
        return self.directory / INSTRUCTIONS_FILE

    def save_player(self, name: str, password: str) -> None:
        """Append a player's name and password to the player file."""
        with self.players_path.open("a", encoding="utf-8") as handle:
            handle.write(f"{name} {password}\n")

    def read_players(self) -> list[Player]:
        """Return every stored player; an absent file means no players."""
        try:
            return [Player(name, password) for name, password in _pairs(self.players_path)]
        except FileNotFoundError:
            return []

    def read_player_high_score(self, player_name: str) -> int:
        """Return the stored best score of a player, 0 when unknown."""
        try:
            pairs = _pairs(self.scores_path)
        except FileNotFoundError:
            return 0
        for name, score in pairs:
            if name == player_name:
                return int(score)
        return 0

    def read_overall_high_score(self) -> int:
        """Return the overall best score, creating the file at 0 if absent."""
        try:
            tokens = self.overall_path.read_text(encoding="utf-8").split()
        except FileNotFoundError:
            self._write_overall(0)
            return 0
        if len(tokens) < 4:
            return 0
        try:
            return int(tokens[3])
        except ValueError:
            return 0

    def _write_overall(self, score: int) -> None:
        self.overall_path.write_text(f"{OVERALL_LABEL} {score}\n", encoding="utf-8")

    def write_overall_high_score(self, score: int, current: int) -> int:
        """Store ``score`` if it beats ``current``; return the resulting overall best."""
        if score > current:
            self._write_overall(score)
            return score
        return current

    def write_player_high_score(
        self, player_name: str, score: int, current_overall: int
    ) -> tuple[int, int]:
        """Record a finished game's score.

        Returns the player's best score and the overall best afterwards.
        """
        lines: list[str] = []
        found = False
        best = score
        try:
            pairs = list(_pairs(self.scores_path))
        except FileNotFoundError:
            pairs = []
        for name, stored in pairs:
            if name == player_name:
                old = int(stored)
                found = True
                if score > old:
                    lines.append(f"{name} {score}")
                    best = score
                else:
                    lines.append(f"{name} {stored}")
                    best = old
            else:
                lines.append(f"{name} {stored}")
        if not found:
            lines.append(f"{player_name} {score}")
        self.scores_path.write_text(
            "".join(f"{line}\n" for line in lines), encoding="utf-8"
        )
        overall = self.write_overall_high_score(score, current_overall)
        return best, overall

    def save_instructions(self) -> None:
        """Write the short instruction sheet."""
        self.instructions_path.write_text(
            "".join(f"{line}\n" for line in INSTRUCTIONS_TEXT), encoding="utf-8"
        )