"""
State Store Module - Visited set and parent pointers for one search.
"""

from typing import Dict, Optional, Set, Tuple

from .board import BoardState
from .move import Move


class StateStore:
    """
    Records how each board was first reached during a search.

    Keeps a single parent-pointer map from a board to the move that
    first produced it and the board it was produced from, plus the set
    of boards already expanded. Boards are keyed by occupancy, so the
    move (which carries the block id) is what tells the backtracker
    which physical block slid.

    Because the search is breadth-first, the first arrival at a board is
    along a shortest path; later arrivals are ignored.
    """

    def __init__(self):
        self._parents: Dict[BoardState, Tuple[Move, Optional[BoardState]]] = {}
        self._visited: Set[BoardState] = set()

    def record_first_arrival(self, board: BoardState, move: Move,
                             parent: Optional[BoardState] = None) -> bool:
        """
        Remember the move that reached a board, unless one is already known.

        Args:
            board: Board that was reached
            move: Move that produced it (Move.sentinel() for the start)
            parent: Board the move was applied to (None for the start)

        Returns:
            True if this was the first arrival and it was recorded
        """
        if board in self._parents:
            return False
        self._parents[board] = (move, parent)
        return True

    def lookup(self, board: BoardState) -> Optional[Move]:
        """
        Get the move that first reached a board.

        Returns:
            Recorded Move, or None if the board was never reached
        """
        entry = self._parents.get(board)
        return entry[0] if entry else None

    def parent(self, board: BoardState) -> Optional[BoardState]:
        """Get the board a recorded board was reached from."""
        entry = self._parents.get(board)
        return entry[1] if entry else None

    def has_visited(self, board: BoardState) -> bool:
        """True if the board has already been expanded."""
        return board in self._visited

    def mark_visited(self, board: BoardState) -> None:
        self._visited.add(board)

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def __contains__(self, board: BoardState) -> bool:
        return board in self._parents

    def __len__(self) -> int:
        return len(self._parents)
