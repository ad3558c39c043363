from __future__ import annotations
import pygame
from typing import List, Tuple

from engine.api.frame_data import Point

_BTN_LEFT = 1


class PointerInput:
    """
    Collects pointer presses as taps for the current frame.
    - Only the left mouse button (or a touch, which pygame reports as one) counts.
    - A press is one tap; holding does not repeat.
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, mirror: bool = False):
        self.mirror = mirror
        self._taps: List[Point] = []

    def _to_logical(self, x: int, y: int, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == _BTN_LEFT:
            w, h = screen_size
            lx, ly = self._to_logical(*event.pos, w, h)
            self._taps.append(Point(lx, ly))

        # taps queued before focus loss are stale
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._taps.clear()

    def drain(self) -> List[Point]:
        """Return this frame's taps and start collecting the next frame's."""
        taps, self._taps = self._taps, []
        return taps
