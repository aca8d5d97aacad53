"""
Console rendering of block lists and moves.
"""

from typing import Iterable, List, Optional, Sequence

from .solver.block import Block
from .solver.board import DEFAULT_BOARD_SIZE
from .solver.move import Move

PRISONER_LABEL = "Z"
# Z is reserved for the prisoner
BLOCK_LABELS = "ABCDEFGHIJKLMNOPQRSTUVWXY0123456789abcdefghijklmnopqrstuvwxyz"


def block_label(block: Block) -> str:
    """Single character drawn for a block."""
    if block.is_prisoner:
        return PRISONER_LABEL
    return BLOCK_LABELS[block.id % len(BLOCK_LABELS)]


def render_text(blocks: Iterable[Block], size: int = DEFAULT_BOARD_SIZE) -> str:
    """
    Draw a block list as framed text.

    Every tile is two characters wide. The right wall is left open on
    the prisoner's row, where the exit is.

    Args:
        blocks: Blocks to draw
        size: Grid side length

    Returns:
        Multi-line string
    """
    grid: List[List[str]] = [[" "] * size for _ in range(size)]
    exit_row: Optional[int] = None
    for block in blocks:
        label = block_label(block)
        if block.is_prisoner:
            exit_row = block.row
        for r, c in block.cells():
            grid[r][c] = label

    frame = "+" + "-" * (3 * size) + "+"
    lines = [frame]
    for r, row in enumerate(grid):
        wall = " " if r == exit_row else "|"
        lines.append("|" + "".join(f"{ch}{ch} " for ch in row) + wall)
    lines.append(frame)
    return "\n".join(lines)


def format_move(move: Move, blocks: Sequence[Block]) -> str:
    """
    Describe a move using the label of the block it slides.

    Args:
        move: Move to describe
        blocks: Block list the move applies to

    Returns:
        Text such as "B up 1"
    """
    for block in blocks:
        if block.id == move.block_id:
            return f"{block_label(block)} {move.direction.value} {move.steps}"
    return str(move)
