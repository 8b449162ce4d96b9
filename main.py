"""Main entry point for the Wa-Tor simulation.

This module provides command-line options to run the simulation:
- Viewer mode (default): pygame window showing the ocean
- Headless mode: Stats-only, as fast as the machine allows
"""

import argparse
import logging
import sys
from typing import List, Optional

from wator.config.grid import (
    DEFAULT_FISH_FRACTION,
    DEFAULT_FISH_REPRO_PERIOD,
    DEFAULT_HEIGHT,
    DEFAULT_SHARK_ENERGY_BOOST,
    DEFAULT_SHARK_FRACTION,
    DEFAULT_SHARK_INITIAL_ENERGY,
    DEFAULT_SHARK_REPRO_PERIOD,
    DEFAULT_WIDTH,
    GridConfig,
)
from wator.config.display import CELL_SIZE, FRAME_RATE
from wator.engine import WatorEngine
from wator.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Wa-Tor Predator/Prey Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the viewer with the classic 70x10 ocean
  python main.py

  # Run headless for 5000 ticks, logging stats every 500
  python main.py --headless --max-ticks 5000 --stats-interval 500

  # Larger ocean, diagonal moves allowed, reproducible
  python main.py --width 120 --height 80 --neighborhood 8 --seed 42
        """,
    )

    parser.add_argument(
        "--headless", action="store_true", help="Run in headless mode (no UI, stats only)"
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Grid columns")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Grid rows")
    parser.add_argument(
        "--fish", type=float, default=DEFAULT_FISH_FRACTION, help="Initial fish fraction"
    )
    parser.add_argument(
        "--sharks", type=float, default=DEFAULT_SHARK_FRACTION, help="Initial shark fraction"
    )
    parser.add_argument(
        "--shark-energy",
        type=int,
        default=DEFAULT_SHARK_INITIAL_ENERGY,
        help="Energy of a newborn shark",
    )
    parser.add_argument(
        "--fish-breed",
        type=int,
        default=DEFAULT_FISH_REPRO_PERIOD,
        help="Ticks between fish births",
    )
    parser.add_argument(
        "--shark-breed",
        type=int,
        default=DEFAULT_SHARK_REPRO_PERIOD,
        help="Ticks between shark births",
    )
    parser.add_argument(
        "--shark-boost",
        type=int,
        default=DEFAULT_SHARK_ENERGY_BOOST,
        help="Energy a shark gains per fish eaten",
    )
    parser.add_argument(
        "--neighborhood",
        type=int,
        choices=(4, 8),
        default=4,
        help="Use the 4- or 8-neighborhood (default: 4)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=None,
        help="Stop after N ticks (headless default: 1000, viewer default: unlimited)",
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=100,
        help="Log stats every N ticks in headless mode (default: 100, 0 = off)",
    )
    parser.add_argument(
        "--fps", type=int, default=FRAME_RATE, help=f"Viewer frame rate (default: {FRAME_RATE})"
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=CELL_SIZE,
        help=f"Viewer cell size in pixels (default: {CELL_SIZE})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every tick")
    return parser


def config_from_args(args: argparse.Namespace) -> GridConfig:
    """Translate parsed CLI arguments into a GridConfig."""
    return GridConfig(
        width=args.width,
        height=args.height,
        fish_fraction=args.fish,
        shark_fraction=args.sharks,
        shark_initial_energy=args.shark_energy,
        fish_repro_period=args.fish_breed,
        shark_repro_period=args.shark_breed,
        shark_energy_boost=args.shark_boost,
        neighborhood=args.neighborhood,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Parse command-line arguments and run the appropriate mode."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        engine = WatorEngine(config_from_args(args), seed=args.seed)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(2)

    try:
        if args.headless:
            engine.run_headless(
                max_ticks=args.max_ticks if args.max_ticks is not None else 1000,
                stats_interval=args.stats_interval,
            )
        else:
            try:
                from rendering.viewer import run_viewer
            except ImportError as e:
                logger.error(f"Error: Required dependencies not installed: {e}")
                logger.error("Install with: pip install -e .")
                sys.exit(1)
            if not run_viewer(
                engine, frame_rate=args.fps, cell_size=args.cell_size, max_ticks=args.max_ticks
            ):
                logger.error("Viewer could not open a window; try --headless")
                sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
