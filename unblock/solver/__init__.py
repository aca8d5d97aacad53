"""
Solver Package - State-space search for the Unblock sliding-block puzzle.

A 6x6 grid holds horizontal and vertical blocks plus one prisoner that
must reach the exit on the right edge of its row. The solver finds the
fewest slides that free it.

Public API:
    - Block, Orientation, TileKind: Puzzle pieces
    - BoardState: Immutable occupancy snapshot, hashed by content
    - Move, Direction: One block slide
    - moves_for(), successors(): Move generation
    - StateStore: Visited set and parent pointers
    - Solution, NoSolution, SolutionMetrics, SolutionPlayback: Outcomes
    - SolutionContext: Shared context for strategies
    - SolverStrategy: Abstract base for strategies
    - solve(): Entry point
    - create_strategy(): Factory function

Usage:
    from unblock.solver import Block, solve

    blocks = [
        Block.horizontal(0, 2, 0, prisoner=True),
        Block.vertical(1, 1, 3),
    ]
    result = solve(blocks)
    if result:
        for move in result.moves:
            print(move)
"""

# Core data structures
from .block import Block, Orientation, TileKind
from .board import BoardState, DEFAULT_BOARD_SIZE, find_prisoner, render, validate_blocks
from .move import Direction, Move, SENTINEL_BLOCK_ID
from .errors import DetectionError, InvalidConfiguration, LayoutError, UnblockError
from .generator import apply_move, moves_for, successors
from .store import StateStore
from .solution import NoSolution, Solution, SolutionMetrics, SolutionPlayback
from .context import SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    DEFAULT_STRATEGY,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .engine import solve

__all__ = [
    # Data structures
    "Block",
    "Orientation",
    "TileKind",
    "BoardState",
    "DEFAULT_BOARD_SIZE",
    "find_prisoner",
    "render",
    "validate_blocks",
    "Direction",
    "Move",
    "SENTINEL_BLOCK_ID",
    # Errors
    "UnblockError",
    "InvalidConfiguration",
    "LayoutError",
    "DetectionError",
    # Search building blocks
    "apply_move",
    "moves_for",
    "successors",
    "StateStore",
    "Solution",
    "NoSolution",
    "SolutionMetrics",
    "SolutionPlayback",
    "SolutionContext",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "DEFAULT_STRATEGY",
    "register_strategy",
    # Entry point
    "solve",
]
