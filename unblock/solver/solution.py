"""
Solution Module - Search outcomes and step-by-step playback.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .block import Block
from .board import DEFAULT_BOARD_SIZE
from .move import Move

Snapshot = Tuple[Block, ...]


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of boards expanded (popped and not yet visited)
        states_enqueued: Number of block lists pushed onto the frontier
        duplicates_skipped: Number of popped boards already expanded
        max_depth: Deepest breadth-first level reached
        strategy_name: Name of strategy that computed this result
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    states_enqueued: int = 0
    duplicates_skipped: int = 0
    max_depth: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Shortest sequence of slides that frees the prisoner.

    Attributes:
        snapshots: Block lists from the initial to the winning state, inclusive
        moves: Forward moves; moves[i] turns snapshots[i] into snapshots[i + 1]
        size: Grid side length
        metrics: Performance statistics
    """
    snapshots: List[Snapshot] = field(default_factory=list)
    moves: List[Move] = field(default_factory=list)
    size: int = DEFAULT_BOARD_SIZE
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    solved = True

    def __bool__(self) -> bool:
        return True

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def final_blocks(self) -> Snapshot:
        return self.snapshots[-1]


@dataclass
class NoSolution:
    """
    Outcome of a search that exhausted every reachable state.

    This is a normal result, not an error: the puzzle simply cannot be
    solved from the given configuration.
    """
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    solved = False

    def __bool__(self) -> bool:
        return False


@dataclass
class SolutionPlayback:
    """
    Cursor over a solution for move-by-move presentation.

    Attributes:
        solution: The complete solution being played back
        move_index: Current position in move sequence (0 = first move)
    """
    solution: Solution
    move_index: int = 0

    @property
    def current_move(self) -> Optional[Move]:
        """Get next move to display, or None if exhausted."""
        if self.move_index < len(self.solution.moves):
            return self.solution.moves[self.move_index]
        return None

    @property
    def current_blocks(self) -> Snapshot:
        """Block list before the current move (the final one once exhausted)."""
        return self.solution.snapshots[min(self.move_index, len(self.solution.snapshots) - 1)]

    @property
    def is_exhausted(self) -> bool:
        """True if all moves have been consumed."""
        return self.move_index >= len(self.solution.moves)

    @property
    def moves_remaining(self) -> int:
        """Number of moves left in the solution."""
        return max(0, len(self.solution.moves) - self.move_index)

    def advance(self) -> Optional[Move]:
        """
        Move to next move in sequence.

        Returns:
            The move that was just completed, or None if exhausted
        """
        if self.is_exhausted:
            return None
        completed_move = self.current_move
        self.move_index += 1
        return completed_move

    def peek_moves(self, count: int = 3) -> List[Move]:
        """
        Preview upcoming moves without advancing.

        Args:
            count: Number of moves to preview

        Returns:
            List of upcoming moves (may be shorter than count)
        """
        start = self.move_index
        end = min(start + count, len(self.solution.moves))
        return self.solution.moves[start:end]
