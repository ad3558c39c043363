from .config import RoundConfig
from .difficulty import Difficulty, TargetType, difficulty_for, draw_target
from .round import RoundController
from .slot import Slot, SlotState
from .view import EndReason, RoundView, format_clock

__all__ = [
    "RoundConfig",
    "Difficulty",
    "TargetType",
    "difficulty_for",
    "draw_target",
    "RoundController",
    "Slot",
    "SlotState",
    "EndReason",
    "RoundView",
    "format_clock",
]
