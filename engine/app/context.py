from __future__ import annotations
from dataclasses import dataclass, field
import pygame
from typing import Any, Dict, Tuple
from engine.api.config import EngineConfig


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    screen_size: Tuple[int, int]
    # the plugin's manifest.yaml, as loaded
    manifest: Dict[str, Any] = field(default_factory=dict)
