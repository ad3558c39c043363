import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.api.config import EngineConfig
from engine.app.loop import run_game


def parse_screen(value: str):
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive, got {value!r}")
    return w, h


def build_parser():
    parser = argparse.ArgumentParser(description="Arcade Launcher")
    parser.add_argument("--game", default="whack_a_mole", help="Game folder name under games/")
    parser.add_argument("--screen", default="1280x720", type=parse_screen,
                        help="Screen size WxH, e.g. 1280x720")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the game's random source for a reproducible session")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--debug", action="store_true", help="Verbose (DEBUG) logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_game(
        args.game,
        EngineConfig(
            screen_size=args.screen,
            fps=args.fps,
            mirror=args.mirror,
            debug=args.debug,
            seed=args.seed,
        ),
    )


if __name__ == "__main__":
    main()
