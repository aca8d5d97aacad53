#!/usr/bin/env python3
"""
Test script for board detection.

Paints synthetic screenshots with the game's colours at the calibrated
tile positions and checks that the detector reads back the same blocks.

Usage:
    python tests/test_detect.py
    pytest tests/
"""

import sys
import tempfile
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from script_runner import run_tests

import unblock.detect.debug as detect_debug
from unblock.detect import (
    BorderKind,
    PixelHeuristicDetector,
    available_detectors,
    classify_body,
    classify_border,
    create_detector,
    format_tiles,
    load_image,
    load_rgb_dump,
    save_debug_image,
)
from unblock.solver import Block, DetectionError, TileKind, solve

# Screenshot colours (RGB)
BACKGROUND = (40, 80, 200)
BODY = (180, 120, 20)
PRISONER = (200, 10, 10)
HIGHLIGHT = (255, 255, 255)
SHADOW = (0, 0, 0)

TILE_HALF = 24
EDGE_WIDTH = 3


def tile_centre(row, col):
    return 34 + 50 * col, 145 + 50 * row


def paint_screenshot(blocks) -> Image.Image:
    """
    Paint a 320x480 screenshot of the given blocks.

    Horizontal blocks get a highlight on top and a shadow below on every
    tile; vertical blocks only on their first and last tile.
    """
    pixels = np.zeros((480, 320, 3), dtype=np.uint8)
    pixels[:, :] = BACKGROUND

    for block in blocks:
        colour = PRISONER if block.is_prisoner else BODY
        cells = block.cells()
        for i, (row, col) in enumerate(cells):
            cx, cy = tile_centre(row, col)
            left, right = cx - TILE_HALF, cx + TILE_HALF + 1
            pixels[cy - TILE_HALF:cy + TILE_HALF + 1, left:right] = colour
            if block.is_horizontal or i == 0:
                pixels[cy - TILE_HALF:cy - TILE_HALF + EDGE_WIDTH, left:right] = HIGHLIGHT
            if block.is_horizontal or i == len(cells) - 1:
                pixels[cy + TILE_HALF - EDGE_WIDTH + 1:cy + TILE_HALF + 1, left:right] = SHADOW

    return Image.fromarray(pixels, "RGB")


def sample_blocks():
    """Blocks listed in the row-major order the detector emits them."""
    return [
        Block.horizontal(0, 0, 0),
        Block.vertical(1, 0, 5, length=3),
        Block.vertical(2, 1, 2),
        Block.horizontal(3, 2, 0, prisoner=True),
        Block.horizontal(4, 3, 3, length=3),
        Block.vertical(5, 4, 0),
        Block.horizontal(6, 5, 4),
    ]


# -- classifiers ------------------------------------------------------------------


def test_classifiers():
    assert classify_body(BACKGROUND[1], BACKGROUND[2]) is TileKind.EMPTY
    assert classify_body(BODY[1], BODY[2]) is TileKind.BLOCK
    assert classify_body(PRISONER[1], PRISONER[2]) is TileKind.PRISONER

    assert classify_border(*HIGHLIGHT[:2]) is BorderKind.WHITE
    assert classify_border(*SHADOW[:2]) is BorderKind.BLACK
    assert classify_border(*BODY[:2]) is BorderKind.NONE
    assert classify_border(*PRISONER[:2]) is BorderKind.NONE
    assert classify_border(*BACKGROUND[:2]) is BorderKind.NONE


# -- detection --------------------------------------------------------------------


def test_detects_painted_board():
    blocks = sample_blocks()
    result = create_detector("pixel").process(paint_screenshot(blocks))

    assert result.blocks == blocks
    assert result.prisoner_found
    assert result.tiles[2][0] is TileKind.PRISONER
    assert result.tiles[0][1] is TileKind.BLOCK
    assert result.tiles[0][2] is TileKind.EMPTY
    assert result.borders[0][5].top is BorderKind.WHITE
    assert result.borders[1][5].top is BorderKind.NONE
    assert result.borders[2][5].bottom is BorderKind.BLACK
    assert result.grid_info.tile_positions[0][0] == (34, 145)


def test_detected_board_is_solvable():
    result = create_detector().process(paint_screenshot(sample_blocks()))
    solution = solve(result.blocks)
    assert solution
    assert solution.move_count >= 1


def test_run_of_four_splits_into_two_blocks():
    painted = [
        Block.horizontal(0, 0, 0),
        Block.horizontal(1, 0, 2),
        Block.horizontal(2, 2, 0, prisoner=True),
    ]
    result = PixelHeuristicDetector().process(paint_screenshot(painted))
    assert result.blocks == painted


def test_prisoner_next_to_block_is_kept_apart():
    painted = [
        Block.horizontal(0, 2, 0, prisoner=True),
        Block.horizontal(1, 2, 2),
    ]
    result = PixelHeuristicDetector().process(paint_screenshot(painted))
    assert result.blocks == painted


def test_stacked_vertical_blocks():
    painted = [
        Block.vertical(0, 0, 4),
        Block.horizontal(1, 2, 0, prisoner=True),
        Block.vertical(2, 2, 4, length=3),
    ]
    result = PixelHeuristicDetector().process(paint_screenshot(painted))
    assert result.blocks == painted


def test_scaled_screenshot():
    """Sample positions follow the image size."""
    blocks = sample_blocks()
    image = paint_screenshot(blocks).resize((640, 960), Image.NEAREST)
    result = create_detector().process(image)
    assert result.grid_info.scale == (2.0, 2.0)
    assert result.blocks == blocks


def test_smaller_configured_grid():
    painted = [Block.vertical(0, 0, 3), Block.horizontal(1, 1, 0, prisoner=True)]
    result = create_detector("pixel", size=4).process(paint_screenshot(painted))
    assert len(result.tiles) == 4
    assert result.blocks == painted


def test_grid_larger_than_image():
    with pytest.raises(DetectionError):
        create_detector("pixel", size=8).process(paint_screenshot([]))


def test_factory():
    assert "pixel" in available_detectors()
    assert create_detector().name == "pixel"
    with pytest.raises(ValueError):
        create_detector("template")


# -- loading ----------------------------------------------------------------------


def test_rgb_dump_round_trip():
    blocks = sample_blocks()
    image = paint_screenshot(blocks)
    with tempfile.TemporaryDirectory() as tmp:
        dump = Path(tmp) / "data.rgb"
        dump.write_bytes(np.asarray(image).tobytes())

        loaded = load_rgb_dump(dump)
        assert loaded.size == (320, 480)
        assert create_detector().process(load_image(dump)).blocks == blocks

        png = Path(tmp) / "shot.png"
        image.save(png)
        assert create_detector().process(load_image(png)).blocks == blocks


def test_rgb_dump_wrong_size():
    with tempfile.TemporaryDirectory() as tmp:
        dump = Path(tmp) / "short.rgb"
        dump.write_bytes(b"\x00" * 1000)
        with pytest.raises(DetectionError):
            load_rgb_dump(dump)
        with pytest.raises(DetectionError):
            load_image(Path(tmp) / "missing.png")


# -- debug output -----------------------------------------------------------------


def test_format_tiles():
    result = create_detector().process(paint_screenshot(sample_blocks()))
    lines = format_tiles(result).splitlines()
    assert len(lines) == 3 * 6
    # Row 2: top edges, bodies, bottom edges
    assert lines[6].startswith("------ ------")
    assert lines[7].startswith("XXXXXX XXXXXX OOOOOO")
    assert lines[8].startswith("====== ======")


def test_save_debug_image():
    image = paint_screenshot(sample_blocks())
    result = create_detector().process(image)
    saved_dir = detect_debug.DEBUG_DIR
    with tempfile.TemporaryDirectory() as tmp:
        detect_debug.DEBUG_DIR = Path(tmp)
        try:
            out = Path(tmp) / "debug_test.png"
            save_debug_image(image, result, str(out))
            assert out.exists()
            with Image.open(out) as annotated:
                assert annotated.size == image.size
        finally:
            detect_debug.DEBUG_DIR = saved_dir


def main():
    """Run all tests."""
    return run_tests("DETECTION TESTS", globals())


if __name__ == "__main__":
    sys.exit(main())
