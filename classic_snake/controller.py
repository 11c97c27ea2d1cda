"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop (the single dispatcher for every callback).
  - Own the tick timer: armed only while a game is running, re-armed
    whenever the score changes the tick interval.
  - Translate keyboard and mouse events into model commands.
  - Ask the view to redraw once after every state change.
  - Tear everything down on every exit path so no event can reach the
    model after the loop is gone.

The controller is the only layer that reads pygame events.
"""

import logging

import pygame

from .config import WIDTH, HEIGHT, FPS, WINDOW_TITLE
from .model import Direction, GameModel
from .view import GameView, button_rect

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

DIRECTION_KEYS = {
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
RESET_KEYS = (pygame.K_RETURN, pygame.K_SPACE, pygame.K_r)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, model: GameModel | None = None):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.model = model if model is not None else GameModel()
        self.view = GameView(self.screen)
        self.timer_interval: int | None = None
        self._active = False
        self._closed = False

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Run the game loop until the player quits, then release everything."""
        self._active = True
        self._render()
        try:
            while self._active:
                self.clock.tick(FPS)
                for event in pygame.event.get():
                    self.dispatch(event)
        finally:
            self.shutdown()

    def stop(self) -> None:
        self._active = False

    def shutdown(self) -> None:
        """Cancel the tick timer and close pygame. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._active = False
        self._set_timer(None)
        pygame.quit()
        logger.info("Game loop shut down")

    # ── Event dispatch ────────────────────────────────────────────
    def dispatch(self, event: pygame.event.Event) -> None:
        if self._closed:
            return
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == TICK_EVENT:
            self._on_tick()
        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if button_rect().collidepoint(event.pos):
                self._reset()
        elif event.type in (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED):
            self._render()

    def _handle_keydown(self, key: int) -> None:
        if key in QUIT_KEYS:
            self.stop()
        elif key in RESET_KEYS:
            self._reset()
        elif key in DIRECTION_KEYS:
            # Takes effect on the next tick; nothing new to draw yet.
            self.model.request_direction(DIRECTION_KEYS[key])

    # ── Model commands ────────────────────────────────────────────
    def _reset(self) -> None:
        self.model.reset()
        self._sync_timer()
        self._render()

    def _on_tick(self) -> None:
        if not self.model.tick():
            return
        self._sync_timer()
        self._render()

    # ── Timer ─────────────────────────────────────────────────────
    def _sync_timer(self) -> None:
        """Keep the timer period equal to the interval for the current score."""
        self._set_timer(self.model.interval_ms if self.model.running else None)

    def _set_timer(self, interval: int | None) -> None:
        if interval == self.timer_interval:
            return
        pygame.time.set_timer(TICK_EVENT, interval or 0)
        self.timer_interval = interval
        logger.debug("Tick timer %s", f"set to {interval} ms" if interval else "cancelled")

    # ── Rendering ─────────────────────────────────────────────────
    def _render(self) -> None:
        self.view.render(self.model.snapshot())
