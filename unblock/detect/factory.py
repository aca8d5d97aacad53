"""
Board Detector Factory

Factory for creating board detector instances.
"""

import importlib
from typing import Dict, Type

from .base import BoardDetector


# Registry of available detectors: "module.Class" relative to this package
_DETECTOR_REGISTRY: Dict[str, str] = {
    "pixel": "pixel_engine.PixelHeuristicDetector",
}

# Cache for loaded detector classes
_DETECTOR_CACHE: Dict[str, Type[BoardDetector]] = {}


def _load_detector_class(detector_type: str) -> Type[BoardDetector]:
    """Lazily load a detector class by type."""
    if detector_type in _DETECTOR_CACHE:
        return _DETECTOR_CACHE[detector_type]

    module_name, class_name = _DETECTOR_REGISTRY[detector_type].rsplit(".", 1)
    module = importlib.import_module(f".{module_name}", package=__package__)
    detector_class = getattr(module, class_name)

    _DETECTOR_CACHE[detector_type] = detector_class
    return detector_class


def create_detector(detector_type: str = "pixel", **config) -> BoardDetector:
    """
    Create a board detector by type.

    Args:
        detector_type: Detector type identifier. Available types:
            - "pixel" (default): centre/edge pixel heuristics calibrated
              on 320x480 phone screenshots
        **config: Detector-specific configuration options passed to
            configure()

    Returns:
        Configured BoardDetector instance

    Raises:
        ValueError: If detector_type is not recognized

    Example:
        detector = create_detector()
        result = detector.process(image)
        blocks = result.blocks
    """
    if detector_type not in _DETECTOR_REGISTRY:
        available = ", ".join(_DETECTOR_REGISTRY.keys())
        raise ValueError(f"Unknown detector type: {detector_type}. Available: {available}")

    detector = _load_detector_class(detector_type)()
    if config:
        detector.configure(**config)
    return detector


def available_detectors() -> list[str]:
    """
    List available detector types.

    Returns:
        List of registered detector type names
    """
    return list(_DETECTOR_REGISTRY.keys())
