"""
Detection Result Dataclasses

Shared data structures for board detector results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..solver.block import Block, TileKind


class BorderKind(str, Enum):
    """Colour class of a tile's top or bottom edge."""
    NONE = " "
    WHITE = "-"
    BLACK = "="


@dataclass(frozen=True)
class TileBorders:
    """Top and bottom edge classes of one tile."""
    top: BorderKind = BorderKind.NONE
    bottom: BorderKind = BorderKind.NONE


@dataclass
class GridInfo:
    """Where the tiles were sampled in the image."""
    size: int
    scale: Tuple[float, float]  # (x, y) factors relative to the reference screenshot
    tile_positions: List[List[Tuple[int, int]]] = field(default_factory=list)  # [row][col] = (x, y)
    border_offset: int = 0  # Vertical distance from a tile centre to its edge samples


@dataclass
class DetectionResult:
    """Complete detection result for one screenshot."""
    tiles: List[List[TileKind]]          # [row][col] body classification
    borders: List[List[TileBorders]]     # [row][col] edge classification
    blocks: List[Block]                  # Blocks assembled from tiles and borders
    grid_info: Optional[GridInfo]        # Sample positions
    processing_time_ms: float            # Time taken

    @property
    def prisoner_found(self) -> bool:
        return any(block.is_prisoner for block in self.blocks)
