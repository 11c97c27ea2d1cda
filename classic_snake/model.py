"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Direction     — immutable (dx, dy) value object
    GameSnapshot  — frozen view of the state handed to the renderer
    GameModel     — the state machine: NotStarted -> Running -> GameOver

Functions:
    tick_interval_ms(score)  — timer period for a given score
    speed_level(score)       — 1-based speed level shown in the HUD
"""

import logging
import random
from collections import deque
from dataclasses import dataclass

from .config import (
    GRID_SIZE, APPLE_REWARD,
    INITIAL_SNAKE, INITIAL_DIRECTION, INITIAL_APPLE,
    BASE_INTERVAL_MS, MIN_INTERVAL_MS, INTERVAL_STEP_MS, SPEED_LEVEL_STEP,
    STATE_NOT_STARTED, STATE_RUNNING, STATE_OVER,
)
from .storage import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)

Position = tuple[int, int]


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    UP    = None  # filled below after class definition
    DOWN  = None
    LEFT  = None
    RIGHT = None

    def __init__(self, x: int, y: int):
        if abs(x) + abs(y) != 1:
            raise ValueError(f"not a unit grid direction: ({x}, {y})")
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)
Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)


# ───────────────────────── Speed rules ───────────────────────────
def tick_interval_ms(score: int) -> int:
    """Milliseconds between ticks: 200 at score 0, 2 ms faster per point, never under 100."""
    return max(MIN_INTERVAL_MS, BASE_INTERVAL_MS - INTERVAL_STEP_MS * score)


def speed_level(score: int) -> int:
    return score // SPEED_LEVEL_STEP + 1


# ───────────────────────── GameSnapshot ──────────────────────────
@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of everything the renderer is allowed to see."""

    snake: tuple[Position, ...]
    apple: Position
    score: int
    high_score: int
    state: str

    @property
    def game_over(self) -> bool:
        return self.state == STATE_OVER

    @property
    def game_started(self) -> bool:
        return self.state != STATE_NOT_STARTED

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def speed_level(self) -> int:
        return speed_level(self.score)


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls tick() once per timer event and
    request_direction() once per arrow key.
    """

    def __init__(
        self,
        store: HighScoreStore | MemoryHighScoreStore | None = None,
        rng: random.Random | None = None,
    ):
        self.store = store if store is not None else HighScoreStore()
        self.rng = rng if rng is not None else random.Random()
        self.high_score: int = self.store.load()
        self.state: str = STATE_NOT_STARTED
        self.snake: deque[Position] = deque()
        self.direction: Direction = Direction.UP
        self._next_dir: Direction = Direction.UP
        self.apple: Position = INITIAL_APPLE
        self.score: int = 0
        self._reset_entities()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def pending_direction(self) -> Direction:
        return self._next_dir

    @property
    def game_over(self) -> bool:
        return self.state == STATE_OVER

    @property
    def game_started(self) -> bool:
        return self.state != STATE_NOT_STARTED

    @property
    def running(self) -> bool:
        return self.state == STATE_RUNNING

    @property
    def interval_ms(self) -> int:
        return tick_interval_ms(self.score)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            snake=tuple(self.snake),
            apple=self.apple,
            score=self.score,
            high_score=self.high_score,
            state=self.state,
        )

    # ── Commands ─────────────────────────────────────────────────
    def reset(self) -> None:
        """Start a fresh round. Works from any state; the best score survives."""
        self._reset_entities()
        self.state = STATE_RUNNING
        logger.info("New game started (best %d)", self.high_score)

    def request_direction(self, new_dir: Direction) -> bool:
        """
        Set the direction for the next tick.
        Rejected while not running, or when it would reverse the active direction.
        Returns True if the request was accepted.
        """
        if self.state != STATE_RUNNING:
            return False
        if new_dir.is_opposite(self.direction):
            return False
        self._next_dir = new_dir
        return True

    def tick(self) -> bool:
        """
        Advance the game by one step.
        Returns True if the state changed (always, while running).
        """
        if self.state != STATE_RUNNING:
            return False

        self.direction = self._next_dir
        hx, hy = self.head
        head = (hx + self.direction.x, hy + self.direction.y)

        if not (0 <= head[0] < GRID_SIZE and 0 <= head[1] < GRID_SIZE):
            self._end("wall", head)
            return True

        if head in self.snake:
            self._end("self", head)
            return True

        self.snake.appendleft(head)
        if head == self.apple:
            self._eat()
        else:
            self.snake.pop()
        return True

    # ── Private helpers ──────────────────────────────────────────
    def _reset_entities(self) -> None:
        self.snake = deque(INITIAL_SNAKE)
        self.direction = Direction(*INITIAL_DIRECTION)
        self._next_dir = self.direction
        self.apple = INITIAL_APPLE
        self.score = 0

    def _eat(self) -> None:
        self.score += APPLE_REWARD
        logger.debug("Apple eaten at %s, score %d", self.apple, self.score)
        if self.score > self.high_score:
            self.high_score = self.score
            self.store.store(self.high_score)
            logger.info("New high score: %d", self.high_score)

        if len(self.snake) >= GRID_SIZE * GRID_SIZE:
            # Board full: there is nowhere left to put an apple.
            self._end("board full", self.head)
            return
        self.apple = self._spawn_apple()

    def _spawn_apple(self) -> Position:
        occupied = set(self.snake)
        while True:
            pos = (self.rng.randrange(GRID_SIZE), self.rng.randrange(GRID_SIZE))
            if pos not in occupied:
                return pos

    def _end(self, reason: str, at: Position) -> None:
        self.state = STATE_OVER
        logger.info("Game over (%s at %s), final score %d", reason, at, self.score)
