"""
Block Module - Puzzle pieces and the tile kinds they paint on the board.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple

from .move import Direction


class TileKind(str, Enum):
    """What occupies a single tile. EMPTY is the absence of a block."""
    EMPTY = "."
    BLOCK = "#"
    PRISONER = "Z"


class Orientation(str, Enum):
    """Axis a block lies (and slides) along."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def directions(self) -> Tuple[Direction, Direction]:
        """Directions a block of this orientation may slide, in scan order."""
        if self is Orientation.HORIZONTAL:
            return (Direction.LEFT, Direction.RIGHT)
        return (Direction.UP, Direction.DOWN)


@dataclass(frozen=True)
class Block:
    """
    Rigid rectangular piece occupying a straight run of tiles.

    Blocks are immutable: moving one produces a new Block with the same
    id, so states queued during the search never share mutable pieces.

    Attributes:
        id: Identity, unique within one puzzle and stable across moves
        row: Row of the top-left tile
        col: Column of the top-left tile
        orientation: Horizontal blocks extend along increasing columns,
                     vertical blocks along increasing rows
        kind: TileKind.BLOCK or TileKind.PRISONER
        length: Number of tiles covered (at least 2)
    """
    id: int
    row: int
    col: int
    orientation: Orientation
    kind: TileKind
    length: int

    @classmethod
    def horizontal(cls, id: int, row: int, col: int, length: int = 2,
                   prisoner: bool = False) -> 'Block':
        """Shorthand for a horizontal block."""
        kind = TileKind.PRISONER if prisoner else TileKind.BLOCK
        return cls(id=id, row=row, col=col, orientation=Orientation.HORIZONTAL,
                   kind=kind, length=length)

    @classmethod
    def vertical(cls, id: int, row: int, col: int, length: int = 2) -> 'Block':
        """Shorthand for a vertical block."""
        return cls(id=id, row=row, col=col, orientation=Orientation.VERTICAL,
                   kind=TileKind.BLOCK, length=length)

    @property
    def origin(self) -> Tuple[int, int]:
        """(row, col) of the top-left tile."""
        return (self.row, self.col)

    @property
    def is_horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    @property
    def is_prisoner(self) -> bool:
        return self.kind is TileKind.PRISONER

    @property
    def end(self) -> Tuple[int, int]:
        """(row, col) of the bottom-right tile."""
        if self.is_horizontal:
            return (self.row, self.col + self.length - 1)
        return (self.row + self.length - 1, self.col)

    def cells(self) -> List[Tuple[int, int]]:
        """
        List the tiles this block covers.

        Returns:
            (row, col) tuples ordered from the origin outward
        """
        if self.is_horizontal:
            return [(self.row, self.col + i) for i in range(self.length)]
        return [(self.row + i, self.col) for i in range(self.length)]

    def moved(self, direction: Direction, steps: int) -> 'Block':
        """
        Translate the block.

        Args:
            direction: Slide direction (must lie along the block's axis)
            steps: Number of tiles to slide

        Returns:
            New Block with the same id at the translated origin

        Raises:
            ValueError: If direction is across the block's axis
        """
        if direction not in self.orientation.directions:
            raise ValueError(
                f"Block {self.id} is {self.orientation.value} and cannot move {direction.value}"
            )
        dr, dc = direction.delta
        return replace(self, row=self.row + dr * steps, col=self.col + dc * steps)
