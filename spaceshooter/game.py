"""Game state and rules, independent of any screen."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

SCREEN_WIDTH = 90
SCREEN_HEIGHT = 26
WIN_WIDTH = 70

JET_ROW = SCREEN_HEIGHT - 5
JET_STEP = 4
BULLET_SLOTS = 20
ENEMY_COUNT = 2
START_LIVES = 3

JET_SPRITE = (
    " \\^/ ",
    "< * >",
    "< * >",
    " /v\\ ",
    "  v  ",
)
ENEMY_SPRITE = (" <", "<O>", " >")


@dataclass
class Enemy:
    """An enemy ship; ``x``, ``y`` is its top-left cell."""

    x: int = 0
    y: int = 1
    active: bool = True


@dataclass
class Bullet:
    """One shot; a row of 0 means the shot is spent."""

    y: int = 0
    x: int = 0

    @property
    def visible(self) -> bool:
        return self.y > 1


class Event(enum.Enum):
    """Things that happen during a frame."""

    COLLISION = "collision"
    GAME_OVER = "game_over"
    HIT = "hit"
    NEW_BEST = "new_best"


def _empty_slots() -> list[tuple[Bullet, Bullet]]:
    return [(Bullet(), Bullet()) for _ in range(BULLET_SLOTS)]


@dataclass
class Game:
    """A round of play: the jet, two enemies and a ring of bullet pairs."""

    rng: random.Random = field(default_factory=random.Random)
    jet_pos: int = WIN_WIDTH // 2
    lives: int = START_LIVES
    score: int = 0
    high_score: int = 0
    enemies: list[Enemy] = field(default_factory=lambda: [Enemy() for _ in range(ENEMY_COUNT)])
    bullets: list[tuple[Bullet, Bullet]] = field(default_factory=_empty_slots)
    next_slot: int = 0

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Start a fresh round."""
        self.jet_pos = WIN_WIDTH // 2 - 1
        self.lives = START_LIVES
        self.score = 0
        self.bullets = _empty_slots()
        for index, enemy in enumerate(self.enemies):
            enemy.active = True
            enemy.y = 1
            self.spawn_enemy(index)

    def move_left(self) -> None:
        if self.jet_pos > 2:
            self.jet_pos -= JET_STEP

    def move_right(self) -> None:
        if self.jet_pos < WIN_WIDTH - 7:
            self.jet_pos += JET_STEP

    def fire(self) -> None:
        """Launch a pair of shots from both wings of the jet."""
        self.bullets[self.next_slot] = (
            Bullet(JET_ROW, self.jet_pos),
            Bullet(JET_ROW, self.jet_pos + 4),
        )
        self.next_slot = (self.next_slot + 1) % BULLET_SLOTS

    def spawn_enemy(self, index: int) -> None:
        """Place an enemy at a random column."""
        self.enemies[index].x = 3 + self.rng.randrange(WIN_WIDTH - 10)

    def reset_enemy(self, index: int) -> None:
        """Send an enemy back to the top at a new column."""
        self.enemies[index].y = 1
        self.spawn_enemy(index)

    def move_bullets(self) -> None:
        for pair in self.bullets:
            for bullet in pair:
                bullet.y = bullet.y - 1 if bullet.y > 2 else 0

    def collision(self) -> bool:
        """Whether an enemy has reached the jet."""
        return any(
            enemy.y + 3 >= JET_ROW and 0 <= (enemy.x + 3) - self.jet_pos < 8
            for enemy in self.enemies
        )

    def bullet_hit(self) -> bool:
        """Resolve the first shot that strikes an enemy."""
        for pair in self.bullets:
            for bullet in pair:
                if bullet.y == 0:
                    continue
                for index, enemy in enumerate(self.enemies):
                    if enemy.y <= bullet.y <= enemy.y + 2 and enemy.x <= bullet.x <= enemy.x + 3:
                        bullet.y = 0
                        self.reset_enemy(index)
                        return True
        return False

    def advance_enemies(self) -> None:
        """Move active enemies down one row, recycling those past the jet."""
        for index, enemy in enumerate(self.enemies):
            if enemy.active:
                enemy.y += 1
            if enemy.y > JET_ROW:
                self.reset_enemy(index)

    def handle_collision(self) -> bool:
        """Take a life and recycle low enemies if one hit the jet."""
        if not self.collision():
            return False
        self.lives -= 1
        for index, enemy in enumerate(self.enemies):
            if enemy.y + 3 >= JET_ROW:
                self.reset_enemy(index)
        return True

    def tick(self) -> list[Event]:
        """Check collisions and hits for the current frame."""
        events: list[Event] = []
        if self.handle_collision():
            events.append(Event.COLLISION)
            if self.lives <= 0:
                events.append(Event.GAME_OVER)
                return events
        if self.bullet_hit():
            self.score += 1
            events.append(Event.HIT)
            if self.score > self.high_score:
                self.high_score = self.score
                events.append(Event.NEW_BEST)
        return events