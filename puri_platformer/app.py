"""
Command-line entry point.

    puri-platformer --scale 3 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys

from puri_engine.core import Game, GameConfig
from puri_platformer.scene import PlatformerScene


logger = logging.getLogger("puri_platformer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="puri-platformer", description="Run the platformer.")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--fps", type=int, default=60, help="target frames per second")
    parser.add_argument("--scale", type=float, default=1.0, help="screen pixels per world unit")
    parser.add_argument(
        "--variable-timestep",
        action="store_true",
        help="one tick per frame using the measured frame time",
    )
    parser.add_argument("--assets", default="assets", help="directory holding sprite sheets")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        width=args.width,
        height=args.height,
        target_fps=args.fps,
        fixed_timestep=None if args.variable_timestep else 1 / 60,
        scale=args.scale,
        asset_dir=args.assets,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        game = Game(config_from_args(args))
        game.set_scene(PlatformerScene(game))
    except (KeyError, ValueError, RuntimeError):
        logger.exception("Setup failed")
        return 1

    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
