"""
Move Module - Represents a single block slide on the board.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Axis-aligned slide directions."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) offset of a single-tile step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        """Direction that undoes a step in this direction."""
        return _OPPOSITES[self]


_DELTAS = {
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
}

_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

# Block id carried by the sentinel move recorded for the initial board
SENTINEL_BLOCK_ID = -1


@dataclass(frozen=True)
class Move:
    """
    Represents one block sliding along its axis.

    A move is only meaningful relative to the board it was generated
    from: it is the edge label between two states in the search graph.

    Attributes:
        block_id: Id of the block that slides
        direction: Direction of the slide
        steps: Number of tiles covered (at least 1)
    """
    block_id: int
    direction: Direction
    steps: int

    @classmethod
    def sentinel(cls) -> 'Move':
        """
        Create the "no predecessor" marker stored for the initial board.

        Returns:
            Move whose block_id is SENTINEL_BLOCK_ID
        """
        return cls(block_id=SENTINEL_BLOCK_ID, direction=Direction.LEFT, steps=0)

    @property
    def is_sentinel(self) -> bool:
        """True if this move marks the initial board."""
        return self.block_id == SENTINEL_BLOCK_ID

    def inverse(self) -> 'Move':
        """
        Get the move that undoes this one.

        Returns:
            Move for the same block, opposite direction, same steps
        """
        return Move(block_id=self.block_id,
                    direction=self.direction.opposite,
                    steps=self.steps)

    def __str__(self) -> str:
        return f"block {self.block_id} {self.direction.value} {self.steps}"
