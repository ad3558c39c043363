"""
Difficulty curve for a single mole activation.
NO UI DEPENDENCIES.

Everything scales with the round's difficulty level (score // 10):
more bombs, more reinforced moles and shorter exposures.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Tuple

from .const import (
    BOMB_RATE_MAX,
    BOMB_RATE_PER_LEVEL,
    EXPOSURE_DECAY_PER_LEVEL,
    EXPOSURE_FLOOR_SEC,
    EXPOSURE_MAX_BASE_SEC,
    EXPOSURE_MIN_BASE_SEC,
    REINFORCED_RATE_MAX,
    REINFORCED_RATE_PER_LEVEL,
)


class RandomSource(Protocol):
    """The slice of numpy.random.Generator the game draws from."""

    def random(self) -> float: ...

    def uniform(self, low: float, high: float) -> float: ...

    def integers(self, low: int, high: int) -> int: ...


class TargetType(Enum):
    Standard = 1
    Reinforced = 2
    Bomb = 3


LIVES = {
    TargetType.Standard: 1,
    TargetType.Reinforced: 2,
    TargetType.Bomb: 1,
}


@dataclass(frozen=True)
class Difficulty:
    level: int
    bomb_rate: float
    reinforced_rate: float
    exposure_min: float
    exposure_max: float


def difficulty_for(level: int) -> Difficulty:
    level = max(0, int(level))
    bomb_rate = min(level * BOMB_RATE_PER_LEVEL, BOMB_RATE_MAX)
    reinforced_rate = min(level * REINFORCED_RATE_PER_LEVEL, REINFORCED_RATE_MAX)

    decay = level * EXPOSURE_DECAY_PER_LEVEL
    hi = min(max(EXPOSURE_MAX_BASE_SEC - decay, EXPOSURE_FLOOR_SEC), EXPOSURE_MAX_BASE_SEC)
    lo = min(max(EXPOSURE_MIN_BASE_SEC - decay, EXPOSURE_FLOOR_SEC), EXPOSURE_MIN_BASE_SEC)
    lo = min(lo, hi)
    return Difficulty(level, bomb_rate, reinforced_rate, lo, hi)


def draw_target(difficulty: Difficulty, rng: RandomSource) -> Tuple[TargetType, float]:
    """
    Pick the target type and exposure duration for one activation.

    Two independent draws: the bomb roll first, and only if that fails the
    reinforced roll. Exposure is uniform over [exposure_min, exposure_max].
    """
    if rng.random() < difficulty.bomb_rate:
        target = TargetType.Bomb
    elif rng.random() < difficulty.reinforced_rate:
        target = TargetType.Reinforced
    else:
        target = TargetType.Standard

    exposure = float(rng.uniform(difficulty.exposure_min, difficulty.exposure_max))
    return target, exposure
