"""
Solution Context Module - Shared context for strategy execution.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from .block import Block
from .board import DEFAULT_BOARD_SIZE


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the initial blocks
    and progress reporting.

    The search has no timeout or cancellation: it always runs until it
    finds a solution or exhausts the reachable states.

    Attributes:
        blocks: Initial block list to solve
        size: Grid side length
        start_time: When computation started
        progress_callback: Optional callback receiving (depth, message)
    """
    blocks: Tuple[Block, ...]
    size: int = DEFAULT_BOARD_SIZE
    start_time: float = field(default_factory=time.perf_counter)
    progress_callback: Optional[Callable[[int, str], None]] = None

    def __post_init__(self):
        self.blocks = tuple(self.blocks)

    def report_progress(self, depth: int, message: str = "") -> None:
        """
        Report search progress.

        Args:
            depth: Current breadth-first level (number of moves)
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(depth, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.perf_counter() - self.start_time
