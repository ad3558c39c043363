from __future__ import annotations
import math
import pygame
from typing import Dict, Optional, Set, Tuple

from engine.api import Game, FrameData
from engine.app.context import Context
from engine.render.shapes import draw_text, draw_text_centered

from .config import RoundConfig
from .const import (
    BANNER_COLOR,
    BOMB_COLOR,
    BOMB_FUSE_COLOR,
    CRACKED_COLOR,
    EDGE_MARGIN,
    HIT_COLOR,
    HOLE_COLOR,
    HUD_COLOR,
    REINFORCED_COLOR,
    STANDARD_COLOR,
    START_BUTTON_COLOR,
    START_BUTTON_SIZE,
)
from .difficulty import TargetType
from .layout import grid_cells, raised_part, slot_at
from .round import RoundController
from .view import EndReason, RoundView, format_clock

BANNER_TEXT = {
    EndReason.TimeUp: "Out of time!",
    EndReason.Bomb: "Boom! You hit a bomb",
}


class PygameRoundView(RoundView):
    """Keeps just enough state for on_draw; the round owns the gameplay."""

    def __init__(self):
        self.score_text = "0"
        self.time_text = "0:00"
        self.banners: Set[EndReason] = set()
        self.start_button = True
        # slot_id -> (target, lives, hit)
        self.sprites: Dict[int, Tuple[TargetType, int, bool]] = {}

    def show_banner(self, kind):
        self.banners.add(kind)

    def hide_banner(self, kind):
        self.banners.discard(kind)

    def show_start_button(self):
        self.start_button = True

    def hide_start_button(self):
        self.start_button = False

    def set_score(self, score):
        self.score_text = str(score)

    def set_time(self, seconds):
        self.time_text = format_clock(seconds)

    def hide_slot(self, slot_id):
        self.sprites.pop(slot_id, None)

    def set_sprite(self, slot_id, target, lives, hit=False):
        self.sprites[slot_id] = (target, lives, hit)


class WhackAMole(Game):
    def on_load(self, ctx: Context, manifest):
        super().on_load(ctx, manifest)

        config = RoundConfig.from_manifest(manifest)
        if ctx.cfg.seed is not None:
            config.seed = ctx.cfg.seed

        self.view = PygameRoundView()
        self.round = RoundController(config, view=self.view)
        self.view.set_time(config.starting_time)

        self.cells = grid_cells(ctx.screen_size, config.slot_count, config.grid_columns)
        w, h = ctx.screen_size
        bw, bh = START_BUTTON_SIZE
        self.start_rect = pygame.Rect((w - bw) // 2, (h - bh) // 2 + 60, bw, bh)

    # ------------- helpers -------------
    def _tap_slot(self, index: Optional[int]):
        if index is not None and 0 <= index < len(self.round.slots):
            self.round.slots[index].interact()

    def _start(self):
        if not self.round.is_playing:
            self.round.start_round()

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        if not self.round.is_playing:
            for p in frame.taps:
                if self.view.start_button and self.start_rect.collidepoint(p.x, p.y):
                    self._start()
                    break
            return

        visibilities = [s.visibility for s in self.round.slots]
        for p in frame.taps:
            self._tap_slot(slot_at(self.cells, visibilities, p.x, p.y))
            if not self.round.is_playing:
                return

        self.round.tick(dt_ms / 1000.0)

    def on_draw(self, surface: pygame.Surface) -> None:
        w, _ = self.ctx.screen_size
        draw_text(surface, f"Score: {self.view.score_text}", (EDGE_MARGIN, 18), HUD_COLOR, size=32)
        draw_text(surface, f"Time: {self.view.time_text}", (w - 200, 18), HUD_COLOR, size=32)

        for slot, cell in zip(self.round.slots, self.cells):
            pygame.draw.ellipse(surface, HOLE_COLOR,
                                pygame.Rect(cell.x, cell.y + cell.h * 3 // 4, cell.w, cell.h // 4))
            sprite = self.view.sprites.get(slot.index)
            if sprite is None or slot.visibility <= 0:
                continue
            self._draw_mole(surface, raised_part(cell, slot.visibility), *sprite)

        for i, kind in enumerate(sorted(self.view.banners, key=lambda k: k.value)):
            draw_text_centered(surface, BANNER_TEXT[kind],
                               (w // 2, self.start_rect.y - 80 - 50 * i), BANNER_COLOR, size=56)

        if self.view.start_button:
            pygame.draw.rect(surface, START_BUTTON_COLOR, self.start_rect, width=3, border_radius=8)
            if self.round.end_reason is None:
                draw_text_centered(surface, self.title, (w // 2, self.start_rect.y - 80), HUD_COLOR, size=56)
            label = "Play" if self.round.end_reason is None else "Play again"
            draw_text_centered(surface, label, self.start_rect.center, HUD_COLOR, size=36)

    def _draw_mole(self, surface, part, target: TargetType, lives: int, hit: bool):
        rect = pygame.Rect(part.x, part.y, part.w, part.h)
        if target == TargetType.Bomb:
            pygame.draw.ellipse(surface, BOMB_COLOR, rect)
            # fuse flicker
            t = pygame.time.get_ticks() * 0.02
            r = max(2, int(part.w * 0.06 * (1.2 + 0.4 * math.sin(t))))
            pygame.draw.circle(surface, BOMB_FUSE_COLOR, (rect.centerx, rect.top + r), r)
            return

        body = HIT_COLOR if hit else STANDARD_COLOR
        pygame.draw.ellipse(surface, body, rect)
        if target == TargetType.Reinforced and not hit:
            hat = REINFORCED_COLOR if lives > 1 else CRACKED_COLOR
            hat_rect = pygame.Rect(rect.x + rect.w // 6, rect.y, rect.w * 2 // 3, max(1, rect.h // 4))
            pygame.draw.rect(surface, hat, hat_rect, border_radius=6)
            if lives == 1:
                pygame.draw.line(surface, HOLE_COLOR, hat_rect.midtop, hat_rect.midbottom, 3)

    def on_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key in (pygame.K_SPACE, pygame.K_RETURN):
            self._start()
        elif self.round.is_playing and pygame.K_1 <= event.key <= pygame.K_9:
            self._tap_slot(event.key - pygame.K_1)

    def on_unload(self) -> None:
        pass


def get_game():
    return WhackAMole()
