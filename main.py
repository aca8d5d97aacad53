"""
Unblock Solver - Entry Point

Reads the starting board from a screenshot, a raw RGB dump or a text
layout, searches for the shortest way to free the prisoner and prints
every board along the way.

Example:
    python main.py                          # reads ./data.rgb
    python main.py --image IMG_0354.PNG --step
    python main.py --layout puzzles/easy.txt --debug
"""

import sys
import logging
import argparse
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from unblock.detect import DEBUG_DIR, create_detector, format_tiles, load_image, save_debug_image
from unblock.layout import load_layout
from unblock.render import format_move, render_text
from unblock.settings import load_settings, save_settings
from unblock.solver import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_STRATEGY,
    Block,
    SolutionPlayback,
    UnblockError,
    get_strategy_names,
    solve,
)

logger = logging.getLogger(__name__)

DEFAULT_RGB_DUMP = Path("data.rgb")

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1
EXIT_INVALID_INPUT = 2


def configure_logging(debug: bool) -> None:
    """Log to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Main application controller.

    Loads the starting board, runs the solver and presents the result,
    optionally one move at a time.
    """

    def __init__(self, args: argparse.Namespace):
        """
        Initialize the application.

        Args:
            args: Parsed command line arguments (override saved settings)
        """
        self.args = args
        self.settings = load_settings()

        self.debug_mode = args.debug or self.settings.get("debug_enabled", False)
        self.step_through = args.step or self.settings.get("step_through", False)
        self.strategy_name = args.strategy or self.settings.get("strategy_name", DEFAULT_STRATEGY)
        self.board_size = self._board_size_setting()

    def _board_size_setting(self) -> int:
        """Saved board size, or the default when the saved value is not a number."""
        value = self.settings.get("board_size", DEFAULT_BOARD_SIZE)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring board_size {value!r} in settings, using {DEFAULT_BOARD_SIZE}")
            return DEFAULT_BOARD_SIZE

    def load_blocks(self) -> Tuple[List[Block], int]:
        """
        Load the starting blocks from whichever source was requested.

        Returns:
            (blocks, board size)
        """
        if self.args.layout:
            logger.info(f"Loading layout {self.args.layout}")
            return load_layout(self.args.layout)

        path = Path(self.args.image or self.args.rgb or DEFAULT_RGB_DUMP)
        logger.info(f"Detecting board in {path}")
        image = load_image(path)

        detector = create_detector("pixel", size=self.board_size)
        result = detector.process(image)
        if self.debug_mode:
            print(format_tiles(result))
        if self.debug_mode or self.settings.get("save_debug_image", False):
            stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            save_debug_image(image, result, str(DEBUG_DIR / f"debug_{stamp}.png"))
        return result.blocks, self.board_size

    def run(self) -> int:
        """
        Run the application.

        Returns:
            Exit code
        """
        if self.args.save_settings:
            self.settings.update({
                "debug_enabled": self.debug_mode,
                "step_through": self.step_through,
                "strategy_name": self.strategy_name,
            })
            save_settings(self.settings)

        try:
            blocks, size = self.load_blocks()
            print(render_text(blocks, size))
            print("\nSearching for a solution...")
            result = solve(blocks, size=size, strategy=self.strategy_name,
                           progress_callback=self._on_progress)
        except UnblockError as e:
            logger.error(f"{e}")
            return EXIT_INVALID_INPUT

        print()
        if not result:
            print(f"\nNo solution: explored {result.metrics.states_explored} states.")
            return EXIT_NO_SOLUTION

        print(f"\nSolved! {result.move_count} moves "
              f"({result.metrics.states_explored} states, {result.metrics.computation_time_ms:.0f}ms)\n")
        self._present(SolutionPlayback(result), size)
        print("Run free, prisoner, run! :-)")
        return EXIT_SOLVED

    def _present(self, playback: SolutionPlayback, size: int) -> None:
        """Print each board of the solution, waiting for Enter if stepping."""
        step = 0
        while True:
            blocks = playback.current_blocks
            print(render_text(blocks, size))
            move = playback.advance()
            if move is None:
                break
            step += 1
            print(f"Move {step}: {format_move(move, blocks)}")
            if self.step_through:
                try:
                    input("Press ENTER for next move")
                except EOFError:
                    logger.info("No more input, printing the remaining moves")
                    self.step_through = False

    def _on_progress(self, depth: int, message: str) -> None:
        sys.stdout.write(f"\rDepth reached: {depth:3d}")
        sys.stdout.flush()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Unblock Solver - frees the prisoner block in the fewest moves"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--image", "-i",
        help="Screenshot of the game (PNG, JPEG, ...)"
    )
    source.add_argument(
        "--rgb", "-r",
        help=f"Raw 320x480 RGB dump (default: {DEFAULT_RGB_DUMP})"
    )
    source.add_argument(
        "--layout", "-l",
        help="Text layout file, one character per tile"
    )
    parser.add_argument(
        "--step", "-s",
        action="store_true",
        help="Wait for Enter between moves"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging and save an annotated detection image"
    )
    parser.add_argument(
        "--strategy",
        choices=get_strategy_names(),
        help="Search strategy (default from config.json, else bfs)"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Remember --step, --debug and --strategy in config.json"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Initialize and run the Unblock solver."""
    args = parse_args(argv)
    configure_logging(args.debug)
    application = Application(args)
    if application.debug_mode:
        logging.getLogger().setLevel(logging.DEBUG)
    return application.run()


if __name__ == "__main__":
    sys.exit(main())
