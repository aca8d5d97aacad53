"""
Pixel Heuristic Detector

Board detector that classifies tiles from a handful of sample pixels.
Calibrated on 320x480 iPhone screenshots of the game; other sizes are
handled by scaling the sample positions.
"""

import logging
import time
from pathlib import Path
from typing import List, Tuple, Union

import cv2
import numpy as np
from PIL import Image

from ..solver.block import TileKind
from ..solver.errors import DetectionError
from .base import BoardDetector
from .result import BorderKind, DetectionResult, GridInfo, TileBorders
from .spans import scan_blocks

logger = logging.getLogger(__name__)


# Board constants (6x6 tiles)
GRID_SIZE = 6

# Reference dimensions (calibration size for hardcoded pixel values)
REFERENCE_WIDTH = 320
REFERENCE_HEIGHT = 480

# Centre of tile (0, 0) and distance between tile centres - at reference scale
FIRST_TILE_X_REF = 34
FIRST_TILE_Y_REF = 145
TILE_STRIDE_REF = 50

# Distance from a tile centre to its top/bottom edge samples - at reference scale
BORDER_OFFSET_REF = 23

# Body thresholds: bluish background means empty, the prisoner has no green
EMPTY_BLUE_MIN = 30
PRISONER_GREEN_MAX = 30

# Edge thresholds: light highlight on top edges, dark shadow on bottom edges
WHITE_RED_MIN = 200
WHITE_GREEN_MIN = 160
BLACK_RED_MAX = 40
BLACK_GREEN_MAX = 30


def load_rgb_dump(path: Union[str, Path],
                  width: int = REFERENCE_WIDTH,
                  height: int = REFERENCE_HEIGHT) -> Image.Image:
    """
    Load a raw interleaved RGB dump, as written by `convert IMG.PNG data.rgb`.

    Args:
        path: Dump file path
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        RGB PIL Image

    Raises:
        DetectionError: If the file is missing or has the wrong size
    """
    expected = width * height * 3
    try:
        data = np.fromfile(str(path), dtype=np.uint8)
    except OSError as e:
        raise DetectionError(f"Cannot read RGB dump {path}: {e}") from e

    if data.size != expected:
        raise DetectionError(
            f"Failed to read {height}x{width}x3 bytes from {path} (got {data.size})"
        )
    return Image.fromarray(data.reshape(height, width, 3), "RGB")


def load_image(path: Union[str, Path]) -> Image.Image:
    """
    Load a screenshot, accepting raw .rgb dumps as well as image files.

    Raises:
        DetectionError: If the file cannot be read
    """
    path = Path(path)
    if path.suffix.lower() == ".rgb":
        return load_rgb_dump(path)
    try:
        with Image.open(path) as image:
            return image.convert("RGB")
    except OSError as e:
        raise DetectionError(f"Cannot open image {path}: {e}") from e


def classify_body(green: int, blue: int) -> TileKind:
    """Classify a tile from its centre pixel. The red channel is not needed."""
    if blue > EMPTY_BLUE_MIN:
        return TileKind.EMPTY
    if green < PRISONER_GREEN_MAX:
        return TileKind.PRISONER
    return TileKind.BLOCK


def classify_border(red: int, green: int) -> BorderKind:
    """Classify a tile edge from one pixel."""
    if red > WHITE_RED_MIN and green > WHITE_GREEN_MIN:
        return BorderKind.WHITE
    if red < BLACK_RED_MAX and green < BLACK_GREEN_MAX:
        return BorderKind.BLACK
    return BorderKind.NONE


class PixelHeuristicDetector(BoardDetector):
    """
    Detector using centre and edge pixel colours.

    Each tile is sampled three times: at its centre to tell empty tiles,
    ordinary blocks and the prisoner apart, and just inside its top and
    bottom edges to tell horizontal blocks from vertical ones.
    """

    def __init__(self):
        self._size = GRID_SIZE

    @property
    def name(self) -> str:
        return "pixel"

    def configure(self, **kwargs) -> None:
        """
        Configure detector parameters.

        Args:
            size: Number of tiles per side (default 6)
        """
        if 'size' in kwargs:
            self._size = int(kwargs['size'])

    def process(self, image: Image.Image) -> DetectionResult:
        """
        Process an image and extract the board.

        Args:
            image: PIL Image of the game screen

        Returns:
            DetectionResult with tiles, borders and blocks
        """
        start_time = time.perf_counter()

        # Convert to BGR for processing
        cv_image = cv2.cvtColor(np.array(image.convert("RGB")), cv2.COLOR_RGB2BGR)
        b, g, r = cv2.split(cv_image)

        grid_info = self._locate_tiles(cv_image.shape[1], cv_image.shape[0])
        tiles = self._detect_tile_bodies(g, b, grid_info)
        borders = self._detect_tile_borders(r, g, grid_info)
        blocks = scan_blocks(tiles, borders)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(f"Detection finished in {elapsed_ms:.1f}ms")
        return DetectionResult(
            tiles=tiles,
            borders=borders,
            blocks=blocks,
            grid_info=grid_info,
            processing_time_ms=elapsed_ms
        )

    def _locate_tiles(self, img_width: int, img_height: int) -> GridInfo:
        """Compute tile centre positions for an image of the given size."""
        scale_x = img_width / REFERENCE_WIDTH
        scale_y = img_height / REFERENCE_HEIGHT

        positions: List[List[Tuple[int, int]]] = []
        for y in range(self._size):
            row = []
            for x in range(self._size):
                cx = int((FIRST_TILE_X_REF + x * TILE_STRIDE_REF) * scale_x)
                cy = int((FIRST_TILE_Y_REF + y * TILE_STRIDE_REF) * scale_y)
                if not (0 <= cx < img_width and 0 <= cy < img_height):
                    raise DetectionError(
                        f"Tile ({y},{x}) falls outside the {img_width}x{img_height} image"
                    )
                row.append((cx, cy))
            positions.append(row)

        return GridInfo(
            size=self._size,
            scale=(scale_x, scale_y),
            tile_positions=positions,
            border_offset=int(BORDER_OFFSET_REF * scale_y)
        )

    def _detect_tile_bodies(self, g: np.ndarray, b: np.ndarray,
                            grid_info: GridInfo) -> List[List[TileKind]]:
        """Classify every tile from its centre pixel."""
        tiles = []
        for row in grid_info.tile_positions:
            tiles.append([classify_body(int(g[cy, cx]), int(b[cy, cx])) for cx, cy in row])
        return tiles

    def _detect_tile_borders(self, r: np.ndarray, g: np.ndarray,
                             grid_info: GridInfo) -> List[List[TileBorders]]:
        """Classify the top and bottom edge of every tile."""
        height = r.shape[0]
        offset = grid_info.border_offset
        borders = []
        for row in grid_info.tile_positions:
            line = []
            for cx, cy in row:
                top_y = max(0, cy - offset)
                bottom_y = min(height - 1, cy + offset)
                line.append(TileBorders(
                    top=classify_border(int(r[top_y, cx]), int(g[top_y, cx])),
                    bottom=classify_border(int(r[bottom_y, cx]), int(g[bottom_y, cx])),
                ))
            borders.append(line)
        return borders
