"""
Detection Debug Utilities

Functions for saving annotated debug images and printing raw tile data.
"""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from ..solver.block import TileKind
from .result import BorderKind, DetectionResult

logger = logging.getLogger(__name__)


# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Marker colours per tile class
TILE_COLORS = {
    TileKind.EMPTY: "gray",
    TileKind.BLOCK: "cyan",
    TileKind.PRISONER: "red",
}
BORDER_COLORS = {
    BorderKind.NONE: None,
    BorderKind.WHITE: "white",
    BorderKind.BLACK: "black",
}


def save_debug_image(
    image: Image.Image,
    result: Optional[DetectionResult],
    path: str
) -> None:
    """
    Save an annotated debug image showing where tiles were sampled.

    Annotations include:
    - A dot at each tile centre coloured by body class
    - A tick at each edge sample coloured by border class
    - The id of each detected block at its origin tile

    Args:
        image: Original PIL Image
        result: Detection result (can be None)
        path: Output file path
    """
    DEBUG_DIR.mkdir(parents=True, exist_ok=True)

    debug_img = image.convert("RGB")
    draw = ImageDraw.Draw(debug_img)

    try:
        font = ImageFont.truetype("arial.ttf", 12)
    except OSError:
        font = ImageFont.load_default()

    if result and result.grid_info:
        grid = result.grid_info
        for y, row in enumerate(grid.tile_positions):
            for x, (cx, cy) in enumerate(row):
                color = TILE_COLORS[result.tiles[y][x]]
                draw.ellipse([cx - 3, cy - 3, cx + 3, cy + 3], outline=color, width=2)

                edges = result.borders[y][x]
                for kind, ey in ((edges.top, cy - grid.border_offset),
                                 (edges.bottom, cy + grid.border_offset)):
                    edge_color = BORDER_COLORS[kind]
                    if edge_color:
                        draw.line([cx - 6, ey, cx + 6, ey], fill=edge_color, width=2)

        for block in result.blocks:
            cx, cy = grid.tile_positions[block.row][block.col]
            label = "Z" if block.is_prisoner else str(block.id)
            draw.text((cx + 5, cy - 12), label, fill="yellow", font=font)

        summary = f"Blocks: {len(result.blocks)}, Time: {result.processing_time_ms:.1f}ms"
        draw.text((10, 10), summary, fill="yellow", font=font)

    debug_img.save(path, "PNG")
    logger.debug(f"Debug image saved: {path}")

    _cleanup_debug_images()


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Could not remove old debug image {old_file}: {e}")


def format_tiles(result: DetectionResult) -> str:
    """
    Format raw tile and border classes for inspection.

    Each tile prints as three lines: top edge, body, bottom edge.
    """
    body = {TileKind.EMPTY: "      ", TileKind.BLOCK: "OOOOOO", TileKind.PRISONER: "XXXXXX"}
    edge = {BorderKind.NONE: "      ", BorderKind.WHITE: "------", BorderKind.BLACK: "======"}

    lines = []
    for tiles, borders in zip(result.tiles, result.borders):
        lines.append(" ".join(edge[b.top] for b in borders))
        lines.append(" ".join(body[t] for t in tiles))
        lines.append(" ".join(edge[b.bottom] for b in borders))
    return "\n".join(lines)
