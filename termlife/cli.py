"""Command-line entry point: run a random Game of Life in the terminal."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import LifeConfig
from .core.boundary import BoundaryPolicy
from .core.grid import Grid
from .core.seeding import CoinFlipSource
from .driver.clock import FrameClock
from .driver.loop import LifeRunner
from .driver.terminal import TerminalDisplay

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def build_parser(defaults: LifeConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='termlife', description="Conway's Game of Life in the terminal")
    parser.add_argument("--width", type=int, default=defaults.width, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=defaults.height, help="Grid height in cells")
    parser.add_argument("--boundary", type=BoundaryPolicy.parse, default=defaults.boundary,
                        help="Edge handling: wrap (torus) or clip (outside is dead)")
    parser.add_argument("--fps", type=float, default=defaults.frame_rate, help="Target frames per second")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Seed for the initial random state")
    parser.add_argument("--max-generations", type=int, default=defaults.max_generations,
                        help="Stop after this many generations even if cells remain")
    parser.add_argument("--debug-neighbors", action="store_true", default=defaults.debug_neighbors,
                        help="Show live neighbor counts instead of cells")
    parser.add_argument("--no-clear", dest="clear_screen", action="store_false", default=defaults.clear_screen,
                        help="Do not clear the screen between frames")
    parser.add_argument("--log-level", default=defaults.log_level, type=str.upper,
                        help="Logging level (written to stderr)")
    return parser


def parse_config(argv: Optional[List[str]] = None) -> LifeConfig:
    """Combine environment defaults and command-line flags into a config."""
    args = build_parser(LifeConfig.from_env()).parse_args(argv)
    return LifeConfig(
        width=args.width,
        height=args.height,
        boundary=args.boundary,
        frame_rate=args.fps,
        seed=args.seed,
        max_generations=args.max_generations,
        debug_neighbors=args.debug_neighbors,
        clear_screen=args.clear_screen,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = parse_config(argv)
        config.validate()
    except ValueError as e:
        logging.basicConfig(format='%(asctime)s - %(levelname)s - %(message)s')
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG_ERROR

    logging.basicConfig(level=config.log_level, stream=sys.stderr,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    grid = Grid(config.width, config.height, config.boundary, source=CoinFlipSource(config.seed))
    runner = LifeRunner(
        grid,
        TerminalDisplay(clear=config.clear_screen),
        FrameClock(config.frame_rate),
        max_generations=config.max_generations,
        debug_neighbors=config.debug_neighbors,
    )

    try:
        runner.run()
    except KeyboardInterrupt:
        logger.info(f"Interrupted at generation {grid.generation}")
        return EXIT_INTERRUPTED
    return 0


if __name__ == "__main__":
    sys.exit(main())
