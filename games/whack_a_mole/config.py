from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .const import (
    GRID_COLUMNS,
    HIT_BONUS_SEC,
    MISS_PENALTY_SEC,
    RESOLVE_DELAY_SEC,
    REVEAL_DURATION_SEC,
    SCORE_PER_LEVEL,
    SLOT_COUNT,
    STARTING_TIME_SEC,
)


@dataclass
class RoundConfig:
    starting_time: float = STARTING_TIME_SEC
    hit_bonus: float = HIT_BONUS_SEC
    miss_penalty: float = MISS_PENALTY_SEC
    score_per_level: int = SCORE_PER_LEVEL
    slot_count: int = SLOT_COUNT
    grid_columns: int = GRID_COLUMNS
    reveal_duration: float = REVEAL_DURATION_SEC
    resolve_delay: float = RESOLVE_DELAY_SEC
    seed: Optional[int] = None

    def __post_init__(self):
        if self.starting_time <= 0:
            raise ValueError("starting_time must be positive")
        if self.slot_count < 1:
            raise ValueError("slot_count must be at least 1")
        if self.grid_columns < 1:
            raise ValueError("grid_columns must be at least 1")
        if self.score_per_level < 1:
            raise ValueError("score_per_level must be at least 1")
        for name in ("hit_bonus", "miss_penalty", "reveal_duration", "resolve_delay"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @classmethod
    def from_manifest(cls, manifest: Dict[str, Any] | None) -> "RoundConfig":
        """
        Build from the plugin manifest's `options` block. Unknown keys are
        ignored, missing keys fall back to the defaults in const.py.
        """
        opts = (manifest or {}).get("options", {}) or {}
        seed = opts.get("seed")
        return cls(
            starting_time=float(opts.get("starting_time", STARTING_TIME_SEC)),
            hit_bonus=float(opts.get("hit_bonus", HIT_BONUS_SEC)),
            miss_penalty=float(opts.get("miss_penalty", MISS_PENALTY_SEC)),
            score_per_level=int(opts.get("score_per_level", SCORE_PER_LEVEL)),
            slot_count=int(opts.get("slot_count", SLOT_COUNT)),
            grid_columns=int(opts.get("grid_columns", GRID_COLUMNS)),
            reveal_duration=float(opts.get("reveal_duration", REVEAL_DURATION_SEC)),
            resolve_delay=float(opts.get("resolve_delay", RESOLVE_DELAY_SEC)),
            seed=None if seed is None else int(seed),
        )
