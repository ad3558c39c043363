from .config import EngineConfig
from .frame_data import FrameData, Point
from .game_base import Game
from engine.app.context import Context

__all__ = ["Context", "EngineConfig", "FrameData", "Game", "Point"]
