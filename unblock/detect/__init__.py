"""
Detection Module for the Unblock solver

Pluggable detection architecture for reading the starting blocks from a
screenshot of the game.

Usage:
    from unblock.detect import create_detector, load_image

    detector = create_detector()
    result = detector.process(load_image("IMG_0354.PNG"))

    # Blocks ready for unblock.solver.solve()
    blocks = result.blocks
"""

# Public API - Result types
from .result import (
    BorderKind,
    TileBorders,
    GridInfo,
    DetectionResult,
)

# Public API - Base class for custom detectors
from .base import BoardDetector

# Public API - Factory functions
from .factory import (
    create_detector,
    available_detectors,
)

# Public API - Pixel heuristic detector
from .pixel_engine import (
    PixelHeuristicDetector,
    GRID_SIZE,
    REFERENCE_WIDTH,
    REFERENCE_HEIGHT,
    classify_body,
    classify_border,
    load_image,
    load_rgb_dump,
)
from .spans import scan_blocks

# Debug utilities
from .debug import DEBUG_DIR, save_debug_image, format_tiles

__all__ = [
    # Result types
    "BorderKind",
    "TileBorders",
    "GridInfo",
    "DetectionResult",
    # Base class
    "BoardDetector",
    # Factory
    "create_detector",
    "available_detectors",
    # Detectors
    "PixelHeuristicDetector",
    # Constants
    "GRID_SIZE",
    "REFERENCE_WIDTH",
    "REFERENCE_HEIGHT",
    # Functions
    "classify_body",
    "classify_border",
    "load_image",
    "load_rgb_dump",
    "scan_blocks",
    "save_debug_image",
    "format_tiles",
    # Debug
    "DEBUG_DIR",
]
