"""
Text layout loader.

A layout is a square of characters, one per tile, for example::

    # row 2 holds the prisoner
    AA...B
    C....B
    CZZ..B
    C.DDD.
    ......
    ......

'.' marks an empty tile and 'Z' (or 'z', '*') the prisoner. Any other letter
or digit names a block; all tiles carrying the same character must form
one straight run. Text after '#' is a comment; spaces are ignored.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Tuple, Union

from .solver.block import Block, Orientation, TileKind
from .solver.errors import LayoutError

logger = logging.getLogger(__name__)

EMPTY_CHARS = {"."}
PRISONER_CHARS = {"Z", "z", "*"}
_BLOCK_CHAR = re.compile(r"^[A-Za-z0-9*]$")


def _normalize(line: str) -> str:
    """Strip comments and all whitespace from a raw line."""
    line = line.split("#", 1)[0]
    return re.sub(r"\s+", "", line)


def parse_layout(text: str) -> Tuple[List[Block], int]:
    """
    Parse a text layout into blocks.

    Block ids follow the order in which each block's first tile appears,
    reading row by row.

    Args:
        text: Layout text

    Returns:
        (blocks, size)

    Raises:
        LayoutError: If the layout is not square or a block is malformed
    """
    rows = [_normalize(ln) for ln in text.splitlines()]
    rows = [ln for ln in rows if ln]
    if not rows:
        raise LayoutError("Layout is empty")

    size = len(rows)
    for r, row in enumerate(rows):
        if len(row) != size:
            raise LayoutError(f"Layout must be square: {size} rows but row {r} has {len(row)} tiles")

    cells: Dict[str, List[Tuple[int, int]]] = {}
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch in EMPTY_CHARS:
                continue
            if not _BLOCK_CHAR.match(ch):
                raise LayoutError(f"Unexpected character '{ch}' at ({r},{c})")
            key = "Z" if ch in PRISONER_CHARS else ch
            cells.setdefault(key, []).append((r, c))

    blocks = []
    for ch, positions in cells.items():
        blocks.append(_make_block(len(blocks), ch, positions))

    logger.debug(f"Parsed layout of {size}x{size} with {len(blocks)} blocks")
    return blocks, size


def _make_block(block_id: int, ch: str, positions: List[Tuple[int, int]]) -> Block:
    """Build one block from the tiles carrying the same character."""
    if len(positions) < 2:
        raise LayoutError(f"Block '{ch}' covers a single tile; blocks need at least 2")

    rows = {r for r, _ in positions}
    cols = {c for _, c in positions}
    row, col = positions[0]
    length = len(positions)

    if len(rows) == 1:
        orientation = Orientation.HORIZONTAL
        expected = [(row, col + i) for i in range(length)]
    elif len(cols) == 1:
        orientation = Orientation.VERTICAL
        expected = [(row + i, col) for i in range(length)]
    else:
        raise LayoutError(f"Block '{ch}' is not a straight line")

    if sorted(positions) != expected:
        raise LayoutError(f"Block '{ch}' has a gap")

    kind = TileKind.PRISONER if ch == "Z" else TileKind.BLOCK
    return Block(id=block_id, row=row, col=col, orientation=orientation,
                 kind=kind, length=length)


def load_layout(path: Union[str, Path]) -> Tuple[List[Block], int]:
    """
    Load a layout file.

    Raises:
        LayoutError: If the file cannot be read or parsed
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise LayoutError(f"Cannot read layout {path}: {e}") from e
    return parse_layout(text)
