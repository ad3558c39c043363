from __future__ import annotations
from enum import Enum

from .difficulty import TargetType


class EndReason(Enum):
    TimeUp = 1
    Bomb = 2


def format_clock(seconds: float) -> str:
    """Whole seconds as m:ss, e.g. 65.9 -> '1:05'. Negative reads as 0:00."""
    total = max(0, int(seconds))
    return f"{total // 60}:{total % 60:02d}"


class RoundView:
    """
    What the round needs from the presentation layer.
    Every method is a no-op here; adapters override what they draw.
    """

    def show_banner(self, kind: EndReason) -> None:
        ...

    def hide_banner(self, kind: EndReason) -> None:
        ...

    def show_start_button(self) -> None:
        ...

    def hide_start_button(self) -> None:
        ...

    def set_score(self, score: int) -> None:
        ...

    def set_time(self, seconds: float) -> None:
        """Render with format_clock; seconds is already clamped to >= 0."""
        ...

    def animate_reveal(self, slot_id: int, duration: float) -> None:
        """Slot starts rising from hidden to shown over `duration` seconds."""
        ...

    def animate_hide(self, slot_id: int, duration: float) -> None:
        """Slot starts sinking from shown to hidden over `duration` seconds."""
        ...

    def hide_slot(self, slot_id: int) -> None:
        """Snap straight to hidden."""
        ...

    def set_sprite(self, slot_id: int, target: TargetType, lives: int, hit: bool = False) -> None:
        ...
