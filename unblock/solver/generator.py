"""
Move Generator Module - Legal slides for one block, and successor states.

Generation is a two-stage pipeline: moves_for() lazily yields every
legal position of a single block, and successors() flattens those over
all blocks of a state into new block lists.
"""

from typing import Iterator, Sequence, Tuple

from .block import Block
from .board import BoardState
from .move import Direction, Move


def _entered_tile(block: Block, direction: Direction, distance: int) -> Tuple[int, int]:
    """
    Tile a block newly covers after sliding `distance` tiles.

    Leftward and upward slides enter the tile adjacent to the origin side;
    rightward and downward slides enter the tile just past the far end.
    """
    if direction is Direction.LEFT:
        return (block.row, block.col - distance)
    if direction is Direction.RIGHT:
        return (block.row, block.col + block.length + distance - 1)
    if direction is Direction.UP:
        return (block.row - distance, block.col)
    return (block.row + block.length + distance - 1, block.col)


def moves_for(board: BoardState, block: Block) -> Iterator[Tuple[Block, Move]]:
    """
    Yield every position a block can reach with a single slide.

    Scans outward along the block's axis one tile at a time, first
    toward the origin side (left/up), then away from it (right/down).
    Each direction stops at the first occupied tile or the grid edge,
    so a block never jumps over another one.

    Args:
        board: Board the block currently sits on
        block: Block to move (must be part of the board)

    Yields:
        (moved_block, move) pairs in increasing distance per direction
    """
    for direction in block.orientation.directions:
        for distance in range(1, board.size):
            row, col = _entered_tile(block, direction, distance)
            if not board.is_empty(row, col):
                break
            yield block.moved(direction, distance), Move(block.id, direction, distance)


def successors(board: BoardState,
               blocks: Sequence[Block]) -> Iterator[Tuple[Tuple[Block, ...], Move]]:
    """
    Yield every block list reachable from a state with one move.

    Blocks are visited in list order; the moved block keeps its index so
    the list order (and therefore the tie-break order) is stable.

    Args:
        board: Board rendered from `blocks`
        blocks: Current block list

    Yields:
        (new_blocks, move) pairs; new_blocks is a fresh tuple
    """
    for index, block in enumerate(blocks):
        for moved, move in moves_for(board, block):
            yield tuple(blocks[:index]) + (moved,) + tuple(blocks[index + 1:]), move


def apply_move(blocks: Sequence[Block], move: Move) -> Tuple[Block, ...]:
    """
    Apply a move to a block list without checking legality.

    Args:
        blocks: Block list the move was generated from
        move: Move naming the block to slide

    Returns:
        New block list with the named block translated

    Raises:
        KeyError: If no block carries the move's block id
    """
    for index, block in enumerate(blocks):
        if block.id == move.block_id:
            moved = block.moved(move.direction, move.steps)
            return tuple(blocks[:index]) + (moved,) + tuple(blocks[index + 1:])
    raise KeyError(f"No block with id {move.block_id}")
