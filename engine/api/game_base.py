from __future__ import annotations

import pygame

from engine.app.context import Context

from .frame_data import FrameData


class Game:
    """
    Base interface game plugins implement. The engine calls, in order:
    on_load once, then every frame on_event (per pygame event), on_update
    and on_draw, and finally on_unload.
    """

    title = "Untitled"

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Called once after the game module loads. Keeps ctx and manifest around."""
        self.ctx = ctx
        self.manifest = manifest
        self.title = manifest.get("title", self.title)

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        """Called every frame; dt_ms is milliseconds elapsed, frame carries this frame's taps."""
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        """Draw the game to the provided surface."""
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Optional: raw pygame events (keyboard fallbacks etc.)."""
        ...

    def on_unload(self) -> None:
        """Optional: cleanup when the game exits."""
        ...
