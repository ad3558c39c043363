from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    fps: int = 60
    mirror: bool = False
    debug: bool = False
    # overrides the game's manifest seed when set
    seed: Optional[int] = None
