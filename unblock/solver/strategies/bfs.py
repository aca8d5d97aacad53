"""
Breadth-First Strategy - Shortest solution by number of slides.
"""

import logging
from collections import deque
from typing import Deque, List, Tuple, Union

from ..base import SolverStrategy
from ..block import Block
from ..board import BoardState
from ..context import SolutionContext
from ..factory import register_strategy
from ..generator import apply_move
from ..move import Move
from ..solution import NoSolution, Solution, SolutionMetrics
from ..store import StateStore

logger = logging.getLogger(__name__)

# (depth, blocks, board) triples waiting to be expanded
Frontier = Deque[Tuple[int, Tuple[Block, ...], BoardState]]


@register_strategy
class BreadthFirstStrategy(SolverStrategy):
    """
    Breadth-first search over board states.

    States are expanded strictly first-in-first-out, so the first
    winning state popped is at the smallest possible depth: the returned
    solution has the minimum number of slides (a slide over several
    tiles counts once). Among equally short solutions the one found
    first under block-list order, then left/up before right/down, wins.
    """
    name = "bfs"
    description = "Breadth-first search (optimal) - fewest slides"

    def solve(self, context: SolutionContext) -> Union[Solution, NoSolution]:
        """
        Run the search to completion.

        Args:
            context: Solution context with validated initial blocks

        Returns:
            Solution with snapshots and moves, or NoSolution
        """
        size = context.size
        metrics = SolutionMetrics(strategy_name=self.name)

        store = StateStore()
        initial_blocks = tuple(context.blocks)
        initial_board = BoardState.from_blocks(initial_blocks, size)
        store.record_first_arrival(initial_board, Move.sentinel())

        queue: Frontier = deque([(0, initial_blocks, initial_board)])
        metrics.states_enqueued = 1
        current_depth = 0

        while queue:
            depth, blocks, board = queue.popleft()

            if store.has_visited(board):
                metrics.duplicates_skipped += 1
                continue
            store.mark_visited(board)
            metrics.states_explored += 1

            if depth > current_depth:
                current_depth = depth
                metrics.max_depth = depth
                logger.debug(f"Depth {depth}: {metrics.states_explored} states explored, "
                             f"{len(queue)} queued")
                context.report_progress(depth, f"{metrics.states_explored} states explored")

            if self.is_winning(board, blocks):
                snapshots, moves = self._backtrack(store, blocks, board, size)
                metrics.computation_time_ms = context.elapsed_time() * 1000
                logger.info(f"Solved in {len(moves)} moves after exploring "
                            f"{metrics.states_explored} states ({metrics.computation_time_ms:.1f}ms)")
                return Solution(snapshots=snapshots, moves=moves, size=size, metrics=metrics)

            for new_blocks, move in self.find_all_moves(board, blocks):
                new_board = BoardState.from_blocks(new_blocks, size)
                if store.has_visited(new_board):
                    continue
                store.record_first_arrival(new_board, move, board)
                queue.append((depth + 1, new_blocks, new_board))
                metrics.states_enqueued += 1

        metrics.computation_time_ms = context.elapsed_time() * 1000
        logger.info(f"No solution: exhausted {metrics.states_explored} states "
                    f"({metrics.computation_time_ms:.1f}ms)")
        return NoSolution(metrics=metrics)

    def _backtrack(
        self,
        store: StateStore,
        blocks: Tuple[Block, ...],
        board: BoardState,
        size: int
    ) -> Tuple[List[Tuple[Block, ...]], List[Move]]:
        """
        Rebuild the path from the initial state to a winning state.

        Walks the recorded moves backward, undoing each one on the block
        it names, until the sentinel of the initial board is reached.

        Returns:
            (snapshots, moves), both oldest first
        """
        snapshots = [blocks]
        moves: List[Move] = []

        # A path can never be longer than the number of recorded boards
        for _ in range(len(store) + 1):
            move = store.lookup(board)
            if move is None:
                raise RuntimeError(f"Board {board.key()} was never recorded during the search")
            if move.is_sentinel:
                break
            blocks = apply_move(blocks, move.inverse())
            board = BoardState.from_blocks(blocks, size)
            snapshots.append(blocks)
            moves.append(move)
        else:
            raise RuntimeError("Backtracking did not reach the initial board")

        snapshots.reverse()
        moves.reverse()
        return snapshots, moves
