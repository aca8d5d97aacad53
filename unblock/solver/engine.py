"""
Engine Module - The single entry point used by detection and presentation.
"""

import logging
from typing import Callable, Optional, Sequence, Union

from .block import Block
from .board import DEFAULT_BOARD_SIZE, validate_blocks
from .context import SolutionContext
from .factory import create_strategy
from .solution import NoSolution, Solution

logger = logging.getLogger(__name__)


def solve(
    initial_blocks: Sequence[Block],
    size: int = DEFAULT_BOARD_SIZE,
    strategy: Optional[str] = None,
    progress_callback: Optional[Callable[[int, str], None]] = None,
) -> Union[Solution, NoSolution]:
    """
    Find the shortest sequence of slides that frees the prisoner.

    Args:
        initial_blocks: Starting blocks (exactly one prisoner, no overlaps)
        size: Grid side length
        strategy: Registered strategy name (default "bfs")
        progress_callback: Optional callback receiving (depth, message)

    Returns:
        Solution (truthy) with snapshots and moves, or NoSolution (falsy)

    Raises:
        InvalidConfiguration: If the blocks violate the board invariants;
            raised before any search
        ValueError: If the strategy name is unknown
    """
    blocks = tuple(initial_blocks)
    validate_blocks(blocks, size)

    solver = create_strategy(strategy)
    logger.info(f"Solving {len(blocks)} blocks on a {size}x{size} board with '{solver.name}'")

    context = SolutionContext(blocks=blocks, size=size, progress_callback=progress_callback)
    return solver.solve(context)
