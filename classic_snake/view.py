"""
view.py — View layer.

Draws one complete frame from a GameSnapshot:
  - HUD panel with current score and best score
  - 20x20 board with grid lines
  - Snake segments (glowing head, gradient body)
  - Apple as a glowing filled circle
  - "Ready to play?" / "Game over!" overlays driven by the state flags
  - Start / Play-again button, stats strip and controls hint

The view never mutates game state and never decides when to draw; the
controller calls render() after every state change.

Public API:
    GameView(screen)       — bind to a pygame surface (None: use the display)
    view.render(snapshot)  — draw the current frame, True if it was drawn
    button_rect()          — screen rectangle of the reset/start button
"""

import logging

import pygame

from .config import (
    WIDTH, PANEL_H, BOARD_SIZE, GRID_SIZE, CELL, CELL_INSET,
    OFFSET_X, OFFSET_Y, FOOTER_Y, BUTTON_H,
    BG, BOARD_BG, GRID_COL, HEAD_COL, BODY_LIGHT, BODY_DARK, APPLE_COL,
    SCORE_COL, BEST_COL, TEXT_COL, MUTED_COL, OVER_COL,
    PANEL_BG, BORDER_COL, BUTTON_COL, OVERLAY_RGBA,
)
from .model import GameSnapshot, Position

logger = logging.getLogger(__name__)

SEGMENT = CELL - 2 * CELL_INSET


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def cell_rect(pos: Position) -> pygame.Rect:
    """Screen rectangle of a snake segment or apple at grid `pos`."""
    return pygame.Rect(
        OFFSET_X + pos[0] * CELL + CELL_INSET,
        OFFSET_Y + pos[1] * CELL + CELL_INSET,
        SEGMENT,
        SEGMENT,
    )


def button_rect() -> pygame.Rect:
    return pygame.Rect(OFFSET_X, FOOTER_Y, BOARD_SIZE, BUTTON_H)


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameSnapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface | None = None):
        self.screen = screen
        self._init_fonts()
        self._build_static_surfaces()

    # ── Main entry ───────────────────────────────────────────────
    def render(self, snapshot: GameSnapshot) -> bool:
        """
        Draw `snapshot`. A missing or lost surface skips this frame only;
        the next render() tries again.
        """
        surface = self.screen if self.screen is not None else pygame.display.get_surface()
        if surface is None:
            logger.warning("No drawing surface available; frame skipped")
            return False

        try:
            surface.fill(BG)
            self._draw_panel(surface, snapshot)
            self._draw_board(surface, snapshot.snake, snapshot.apple)
            if snapshot.game_over:
                self._draw_game_over_overlay(surface, snapshot)
            elif not snapshot.game_started:
                self._draw_start_overlay(surface)
            self._draw_footer(surface, snapshot)
            if surface is pygame.display.get_surface():
                pygame.display.flip()
        except pygame.error as exc:
            logger.warning("Render failed, frame skipped: %s", exc)
            return False
        return True

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        # Board background with grid lines (drawn once)
        self._board_surf = pygame.Surface((BOARD_SIZE, BOARD_SIZE))
        self._board_surf.fill(BOARD_BG)
        for i in range(GRID_SIZE + 1):
            pos = min(i * CELL, BOARD_SIZE - 1)
            pygame.draw.line(self._board_surf, GRID_COL, (pos, 0), (pos, BOARD_SIZE - 1))
            pygame.draw.line(self._board_surf, GRID_COL, (0, pos), (BOARD_SIZE - 1, pos))

        # Diagonal gradient tile shared by every body segment
        self._body_tile = pygame.Surface((SEGMENT, SEGMENT))
        span = max(1, 2 * (SEGMENT - 1))
        for x in range(SEGMENT):
            for y in range(SEGMENT):
                self._body_tile.set_at((x, y), _lerp_color(BODY_LIGHT, BODY_DARK, (x + y) / span))

        self._head_glow = self._make_glow(HEAD_COL, SEGMENT // 2 + 8, 70)
        self._apple_glow = self._make_glow(APPLE_COL, SEGMENT // 2 + 6, 80)

        self._overlay_surf = pygame.Surface((BOARD_SIZE, BOARD_SIZE), pygame.SRCALPHA)
        self._overlay_surf.fill(OVERLAY_RGBA)

    @staticmethod
    def _make_glow(color: tuple, radius: int, peak: int) -> pygame.Surface:
        glow = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        for r in range(radius, 0, -1):
            a = int(peak * (1 - r / radius))
            pygame.draw.circle(glow, _with_alpha(color, a), (radius, radius), r)
        return glow

    # ── Board ────────────────────────────────────────────────────
    def _draw_board(self, surface: pygame.Surface,
                    snake: tuple[Position, ...], apple: Position) -> None:
        surface.blit(self._board_surf, (OFFSET_X, OFFSET_Y))
        pygame.draw.rect(surface, BORDER_COL,
                         (OFFSET_X - 2, OFFSET_Y - 2, BOARD_SIZE + 4, BOARD_SIZE + 4),
                         2, border_radius=4)
        self._draw_snake(surface, snake)
        self._draw_apple(surface, apple)

    def _draw_snake(self, surface: pygame.Surface, snake: tuple[Position, ...]) -> None:
        # Body first, tail to neck, so the head always ends up on top
        for segment in reversed(snake[1:]):
            surface.blit(self._body_tile, cell_rect(segment).topleft)
        if snake:
            rect = cell_rect(snake[0])
            r = self._head_glow.get_width() // 2
            surface.blit(self._head_glow, (rect.centerx - r, rect.centery - r))
            pygame.draw.rect(surface, HEAD_COL, rect)

    def _draw_apple(self, surface: pygame.Surface, apple: Position) -> None:
        rect = cell_rect(apple)
        r = self._apple_glow.get_width() // 2
        surface.blit(self._apple_glow, (rect.centerx - r, rect.centery - r))
        pygame.draw.circle(surface, APPLE_COL, rect.center, SEGMENT // 2)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, surface: pygame.Surface, snapshot: GameSnapshot) -> None:
        panel = pygame.Rect(OFFSET_X, 8, BOARD_SIZE, PANEL_H - 12)
        pygame.draw.rect(surface, PANEL_BG, panel, border_radius=8)

        for cx, label, value, color in [
            (panel.x + panel.w // 4, "SCORE", snapshot.score, SCORE_COL),
            (panel.x + 3 * panel.w // 4, "BEST", snapshot.high_score, BEST_COL),
        ]:
            lbl = self.font_small.render(label, True, color)
            surface.blit(lbl, lbl.get_rect(midtop=(cx, panel.y + 4)))
            val = self.font_big.render(str(value), True, TEXT_COL)
            surface.blit(val, val.get_rect(midbottom=(cx, panel.bottom - 3)))

    # ── Footer: button, stats, hint ───────────────────────────────
    def _draw_footer(self, surface: pygame.Surface, snapshot: GameSnapshot) -> None:
        btn = button_rect()
        pygame.draw.rect(surface, BUTTON_COL, btn, border_radius=8)
        label = "PLAY AGAIN" if snapshot.game_started else "START GAME"
        txt = self.font_med.render(label, True, TEXT_COL)
        surface.blit(txt, txt.get_rect(center=btn.center))

        cy = btn.bottom + 14
        hint = self.font_tiny.render("USE ARROW KEYS TO CONTROL THE SNAKE", True, MUTED_COL)
        surface.blit(hint, hint.get_rect(midtop=(WIDTH // 2, cy)))

        stats = pygame.Rect(OFFSET_X, cy + hint.get_height() + 12, BOARD_SIZE, 44)
        pygame.draw.rect(surface, PANEL_BG, stats, border_radius=8)
        for i, line in enumerate([
            f"SNAKE LENGTH: {snapshot.length}",
            f"SPEED LEVEL: {snapshot.speed_level}",
        ]):
            s = self.font_tiny.render(line, True, MUTED_COL)
            surface.blit(s, s.get_rect(midtop=(WIDTH // 2, stats.y + 6 + i * 18)))

    # ── State overlays ────────────────────────────────────────────
    def _draw_overlay(self, surface: pygame.Surface, title: str,
                      color: tuple, subtitle: str) -> None:
        surface.blit(self._overlay_surf, (OFFSET_X, OFFSET_Y))
        cx = OFFSET_X + BOARD_SIZE // 2
        cy = OFFSET_Y + BOARD_SIZE // 2
        t = self.font_title.render(title, True, color)
        surface.blit(t, t.get_rect(midbottom=(cx, cy)))
        s = self.font_small.render(subtitle, True, TEXT_COL)
        surface.blit(s, s.get_rect(midtop=(cx, cy + 8)))

    def _draw_start_overlay(self, surface: pygame.Surface) -> None:
        self._draw_overlay(surface, "READY TO PLAY?", SCORE_COL, "USE ARROW KEYS TO CONTROL")

    def _draw_game_over_overlay(self, surface: pygame.Surface, snapshot: GameSnapshot) -> None:
        self._draw_overlay(surface, "GAME OVER!", OVER_COL, f"FINAL SCORE: {snapshot.score}")

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        specs = [
            ("font_title", "courier", 30, True),
            ("font_big",   "courier", 22, True),
            ("font_med",   "courier", 18, True),
            ("font_small", "courier", 14, True),
            ("font_tiny",  "courier", 12, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception:
                setattr(self, attr, pygame.font.Font(None, size))
