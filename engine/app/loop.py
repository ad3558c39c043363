from __future__ import annotations
import logging
import sys
import time
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData
from engine.app.context import Context
from engine.app.loader import game_root_for, load_game_manifest, load_game_module
from engine.input.pointer_input import PointerInput

logger = logging.getLogger(__name__)

BACKGROUND = (12, 14, 18)


def run_game(game_id: str, cfg: EngineConfig):
    game_root = game_root_for(game_id)
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    title = manifest.get("title", game_id)
    pygame.display.set_caption(f"Arcade - {title}")
    try:
        screen = pygame.display.set_mode(cfg.screen_size)
    except pygame.error as exc:
        print(f"ERROR: could not open a {cfg.screen_size[0]}x{cfg.screen_size[1]} window: {exc}",
              file=sys.stderr)
        pygame.quit()
        return
    clock = pygame.time.Clock()

    pointer = PointerInput(mirror=cfg.mirror)

    # Render target: draw off-screen if mirroring, otherwise directly to the window
    render_surface = screen if not cfg.mirror else pygame.Surface(
        cfg.screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        screen_size=cfg.screen_size,
        manifest=manifest,
    )

    game.on_load(ctx, manifest)
    logger.info("Running %s at %dx%d, %d fps", game_id, *cfg.screen_size, cfg.fps)

    running = True
    try:
        while running:
            dt = clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                pointer.handle_pygame_event(event, cfg.screen_size)
                game.on_event(event)

            frame_data = FrameData(timestamp=time.time(), taps=pointer.drain())

            # ---- draw to render_surface ----
            render_surface.fill(BACKGROUND)
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)

            # ---- present to window ----
            if cfg.mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        game.on_unload()
        pygame.quit()
