import pygame
from typing import Dict, Tuple

_FONTS: Dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    font = _FONTS.get(size)
    if font is None:
        font = _FONTS[size] = pygame.font.SysFont(None, size)
    return font


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    surface.blit(_font(size).render(text, True, color), pos)


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[int, int], color=(230, 230, 230), size=24):
    img = _font(size).render(text, True, color)
    surface.blit(img, img.get_rect(center=center))
