"""
Base Strategy Module - Abstract base class for solving strategies.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple, Union

from .block import Block
from .board import BoardState, find_prisoner
from .context import SolutionContext
from .generator import successors
from .move import Move
from .solution import NoSolution, Solution


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Union[Solution, NoSolution]:
        """
        Search for a way to free the prisoner.

        The initial blocks in the context have already been validated.

        Args:
            context: Solution context with blocks, size and progress reporting

        Returns:
            Solution on success, NoSolution once every state is exhausted
        """

    def find_all_moves(self, board: BoardState,
                       blocks: Sequence[Block]) -> List[Tuple[Tuple[Block, ...], Move]]:
        """
        Find every state reachable with one slide.

        Args:
            board: Board rendered from `blocks`
            blocks: Current block list

        Returns:
            List of (new_blocks, move) pairs in block-then-direction order
        """
        return list(successors(board, blocks))

    def is_winning(self, board: BoardState, blocks: Sequence[Block]) -> bool:
        """
        Check whether the prisoner can leave through the exit.

        Args:
            board: Board rendered from `blocks`
            blocks: Current block list

        Returns:
            True if every tile right of the prisoner is empty
        """
        return board.exit_is_clear(find_prisoner(blocks))
