"""
Board State Module - Immutable occupancy snapshot used as the search key.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .block import Block, Orientation, TileKind
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

# Side of the square grid used by the physical game
DEFAULT_BOARD_SIZE = 6


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board occupancy.

    Uses tuple-of-tuples for hashability and immutability. Each cell
    holds the TileKind painted there, so two block lists that cover the
    same tiles with the same kinds compare equal no matter how the
    blocks are numbered or ordered. Equality and hash are generated
    from the frozen fields.

    Attributes:
        size: Number of rows (and columns) of the square grid
        grid: Tuple of row tuples of TileKind
    """
    size: int
    grid: Tuple[Tuple[TileKind, ...], ...]

    @classmethod
    def empty(cls, size: int = DEFAULT_BOARD_SIZE) -> 'BoardState':
        """Create a board with every tile empty."""
        row = tuple(TileKind.EMPTY for _ in range(size))
        return cls(size=size, grid=tuple(row for _ in range(size)))

    @classmethod
    def from_blocks(cls, blocks: Iterable[Block],
                    size: int = DEFAULT_BOARD_SIZE) -> 'BoardState':
        """
        Render a block list into a board.

        Args:
            blocks: Non-overlapping, in-bounds blocks
            size: Grid side length

        Returns:
            BoardState whose occupancy is exactly the union of the footprints

        Raises:
            InvalidConfiguration: If a block leaves the grid or two blocks overlap
        """
        cells: List[List[TileKind]] = [[TileKind.EMPTY] * size for _ in range(size)]
        owners: Dict[Tuple[int, int], int] = {}

        for block in blocks:
            for r, c in block.cells():
                if not (0 <= r < size and 0 <= c < size):
                    raise InvalidConfiguration(
                        f"Block {block.id} covers ({r},{c}) outside the {size}x{size} grid"
                    )
                if (r, c) in owners:
                    raise InvalidConfiguration(
                        f"Blocks {owners[(r, c)]} and {block.id} overlap at ({r},{c})"
                    )
                owners[(r, c)] = block.id
                cells[r][c] = block.kind

        return cls(size=size, grid=tuple(tuple(row) for row in cells))

    def diff(self, other: 'BoardState') -> List[Tuple[int, int]]:
        """
        Find cells that differ between this board and another.

        Args:
            other: Another BoardState to compare against

        Returns:
            List of (row, col) tuples where cells differ
        """
        if not isinstance(other, BoardState):
            raise TypeError("Can only diff against another BoardState")
        if other.size != self.size:
            raise ValueError(f"Cannot diff a {self.size}x{self.size} board "
                             f"against a {other.size}x{other.size} board")

        differences = []
        for r in range(self.size):
            for c in range(self.size):
                if self.grid[r][c] != other.grid[r][c]:
                    differences.append((r, c))
        return differences

    def get_cell(self, row: int, col: int) -> Optional[TileKind]:
        """
        Get the tile kind at a position.

        Returns:
            TileKind, or None if the position is outside the grid
        """
        if self.in_bounds(row, col):
            return self.grid[row][col]
        return None

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row: int, col: int) -> bool:
        """True if the position is inside the grid and unoccupied."""
        return self.in_bounds(row, col) and self.grid[row][col] is TileKind.EMPTY

    def exit_is_clear(self, prisoner: Block) -> bool:
        """
        Check the win condition for a prisoner on this board.

        The exit sits on the right edge of the prisoner's row, so the
        prisoner escapes once every tile to the right of it is empty.

        Args:
            prisoner: The prisoner block as placed on this board

        Returns:
            True if nothing stands between the prisoner and the exit
        """
        row = prisoner.row
        for col in range(prisoner.col + prisoner.length, self.size):
            if self.grid[row][col] is not TileKind.EMPTY:
                return False
        return True

    def count_occupied(self) -> int:
        """Number of tiles covered by any block."""
        return sum(1 for row in self.grid for cell in row if cell is not TileKind.EMPTY)

    def key(self) -> str:
        """Row-major string with one tag character per cell."""
        return "".join(cell.value for row in self.grid for cell in row)


def render(blocks: Iterable[Block], size: int = DEFAULT_BOARD_SIZE) -> BoardState:
    """Render a block list into its occupancy board."""
    return BoardState.from_blocks(blocks, size)


def find_prisoner(blocks: Iterable[Block]) -> Block:
    """
    Locate the prisoner in a block list.

    Raises:
        InvalidConfiguration: If the list holds no prisoner
    """
    for block in blocks:
        if block.is_prisoner:
            return block
    raise InvalidConfiguration("No prisoner block on the board")


def validate_blocks(blocks: Sequence[Block], size: int = DEFAULT_BOARD_SIZE) -> BoardState:
    """
    Check an initial block list against the board invariants.

    Args:
        blocks: Block list supplied by detection or a layout file
        size: Grid side length

    Returns:
        The rendered initial board

    Raises:
        InvalidConfiguration: On any violated invariant
    """
    if size < 2:
        raise InvalidConfiguration(f"Board size must be at least 2, got {size}")
    if not blocks:
        raise InvalidConfiguration("Block list is empty")

    seen_ids = set()
    prisoners = []
    for block in blocks:
        if block.id in seen_ids:
            raise InvalidConfiguration(f"Duplicate block id {block.id}")
        seen_ids.add(block.id)

        if block.id < 0:
            raise InvalidConfiguration(f"Block id {block.id} is negative")
        if block.kind is TileKind.EMPTY:
            raise InvalidConfiguration(f"Block {block.id} has kind EMPTY")
        if block.length < 2:
            raise InvalidConfiguration(
                f"Block {block.id} has length {block.length}, expected at least 2"
            )
        if block.is_prisoner:
            prisoners.append(block)

    if not prisoners:
        raise InvalidConfiguration("No prisoner block on the board")
    if len(prisoners) > 1:
        ids = ", ".join(str(p.id) for p in prisoners)
        raise InvalidConfiguration(f"Expected one prisoner, found {len(prisoners)} (ids {ids})")
    if prisoners[0].orientation is not Orientation.HORIZONTAL:
        raise InvalidConfiguration(f"Prisoner block {prisoners[0].id} must be horizontal")

    board = BoardState.from_blocks(blocks, size)
    logger.debug(f"Validated {len(blocks)} blocks on a {size}x{size} board: {board.key()}")
    return board
