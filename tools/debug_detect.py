"""
Diagnostic script to analyze tile sampling on screenshots.
Prints the raw pixel values behind every tile classification so the
colour thresholds can be checked against new screenshots.
"""

import sys
from pathlib import Path

import cv2
import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from unblock.detect import create_detector, format_tiles, load_image
from unblock.detect.pixel_engine import (
    BLACK_GREEN_MAX,
    BLACK_RED_MAX,
    EMPTY_BLUE_MIN,
    PRISONER_GREEN_MAX,
    WHITE_GREEN_MIN,
    WHITE_RED_MIN,
)

# Values this close to a threshold are flagged
MARGIN = 15


def near(value: int, threshold: int) -> bool:
    return abs(value - threshold) <= MARGIN


def analyze_image(image_path: str):
    """Analyze an image and report sampled values for every tile."""
    print(f"\n{'='*60}")
    print(f"Analyzing: {image_path}")
    print(f"{'='*60}")

    image = load_image(image_path)
    cv_image = cv2.cvtColor(np.array(image), cv2.COLOR_RGB2BGR)
    b, g, r = cv2.split(cv_image)

    result = create_detector().process(image)
    grid = result.grid_info
    print(f"Image size: {image.size}, scale: {grid.scale[0]:.2f}x{grid.scale[1]:.2f}")
    print(format_tiles(result))

    print(f"\n--- Tile Samples ---")
    print(f"{'Row':>3} {'Col':>3} {'Body':>9} {'G':>4} {'B':>4} {'Top R,G':>9} {'Bot R,G':>9}")
    print("-" * 50)

    suspicious = 0
    for y, row in enumerate(grid.tile_positions):
        for x, (cx, cy) in enumerate(row):
            top_y = max(0, cy - grid.border_offset)
            bottom_y = min(r.shape[0] - 1, cy + grid.border_offset)
            body_g, body_b = int(g[cy, cx]), int(b[cy, cx])
            top = (int(r[top_y, cx]), int(g[top_y, cx]))
            bottom = (int(r[bottom_y, cx]), int(g[bottom_y, cx]))

            flag = ""
            if (near(body_b, EMPTY_BLUE_MIN) or near(body_g, PRISONER_GREEN_MAX)
                    or any(near(v, t) for v, t in ((top[0], WHITE_RED_MIN), (top[1], WHITE_GREEN_MIN)))
                    or any(near(v, t) for v, t in ((bottom[0], BLACK_RED_MAX), (bottom[1], BLACK_GREEN_MAX)))):
                flag = " <-- close to a threshold"
                suspicious += 1

            print(f"{y:>3} {x:>3} {result.tiles[y][x].name:>9} {body_g:>4} {body_b:>4} "
                  f"{top[0]:>4},{top[1]:<4} {bottom[0]:>4},{bottom[1]:<4}{flag}")

    print(f"\n{len(result.blocks)} blocks, {suspicious} suspicious samples")


if __name__ == "__main__":
    images = sys.argv[1:] or ["data.rgb"]
    for path in images:
        analyze_image(path)
