"""
Block Span Scanner

Turns per-tile body and border classes into a list of blocks.

Horizontal blocks show a white top edge and a black bottom edge on every
tile. Vertical blocks show a white top edge on their first tile only and
a black bottom edge on their last tile only.
"""

import logging
from typing import List

from ..solver.block import Block, Orientation, TileKind
from .result import BorderKind, TileBorders

logger = logging.getLogger(__name__)

# The game only has blocks of length 2 and 3
MAX_BLOCK_LENGTH = 3


def scan_blocks(tiles: List[List[TileKind]], borders: List[List[TileBorders]]) -> List[Block]:
    """
    Scan tiles row by row and emit the blocks they form.

    Ids are assigned in scan order starting from 0.

    Args:
        tiles: [row][col] body classes
        borders: [row][col] edge classes

    Returns:
        Detected blocks
    """
    size = len(tiles)
    known = [[False] * size for _ in range(size)]
    blocks: List[Block] = []

    for y in range(size):
        for x in range(size):
            if known[y][x]:
                continue
            known[y][x] = True
            kind = tiles[y][x]
            if kind is TileKind.EMPTY:
                continue

            edge = borders[y][x]
            if edge.top is BorderKind.WHITE and edge.bottom is BorderKind.BLACK:
                lengths = _horizontal_span(y, x, tiles, borders, known)
                col = x
                for length in lengths:
                    blocks.append(Block(id=len(blocks), row=y, col=col,
                                        orientation=Orientation.HORIZONTAL,
                                        kind=tiles[y][col], length=length))
                    col += length
            elif edge.top is BorderKind.WHITE:
                length = _vertical_span(y, x, tiles, borders, known)
                logger.debug(f"Vertical   block  at {y},{x} of length {length}")
                blocks.append(Block(id=len(blocks), row=y, col=x,
                                    orientation=Orientation.VERTICAL,
                                    kind=kind, length=length))
            # Anything else is the body of a block already emitted

    logger.info(f"Detected {len(blocks)} blocks")
    return blocks


def _horizontal_span(y: int, x: int, tiles: List[List[TileKind]],
                     borders: List[List[TileBorders]], known: List[List[bool]]) -> List[int]:
    """
    Measure a horizontal run starting at (y, x).

    Two adjacent length-2 blocks look like one run of 4, which no single
    block can be, so such a run is split in two.

    Returns:
        Lengths of the blocks making up the run, left to right
    """
    size = len(tiles)
    kind = tiles[y][x]
    end = x + 1
    while (end < size
           and tiles[y][end] is kind
           and borders[y][end].top is BorderKind.WHITE
           and borders[y][end].bottom is BorderKind.BLACK):
        known[y][end] = True
        end += 1

    run = end - x
    if run == 4:
        logger.debug(f"Horizontal blocks at {y},{x} of length 2 (split run of 4)")
        return [2, 2]
    if run > MAX_BLOCK_LENGTH:
        logger.warning(f"Ambiguous horizontal run of {run} tiles at {y},{x}")
    logger.debug(f"Horizontal block  at {y},{x} of length {run}"
                 f"{' (prisoner)' if kind is TileKind.PRISONER else ''}")
    return [run]


def _vertical_span(y: int, x: int, tiles: List[List[TileKind]],
                   borders: List[List[TileBorders]], known: List[List[bool]]) -> int:
    """
    Measure a vertical run starting at (y, x).

    The run continues downward until a tile with a black bottom edge,
    which is the block's last tile.
    """
    size = len(tiles)
    end = y + 1
    while end < size and tiles[end][x] is not TileKind.EMPTY and not known[end][x]:
        known[end][x] = True
        end += 1
        if borders[end - 1][x].bottom is BorderKind.BLACK:
            break
    return end - y
