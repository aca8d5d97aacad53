"""
Board Detector Base Interface

Abstract base class defining the board detector contract.
"""

from abc import ABC, abstractmethod
from PIL import Image

from .result import DetectionResult


class BoardDetector(ABC):
    """
    Abstract base class for board detectors.

    All detectors must inherit from this class and implement the
    process() method to extract the starting blocks from an image.
    """

    @abstractmethod
    def process(self, image: Image.Image) -> DetectionResult:
        """
        Process an image and extract the board.

        Args:
            image: PIL Image of the game screen

        Returns:
            DetectionResult containing:
            - tiles: List[List[TileKind]] - body class per tile
            - borders: List[List[TileBorders]] - edge classes per tile
            - blocks: List[Block] - starting blocks, ids in scan order
            - grid_info: GridInfo - sample positions for debug rendering
            - processing_time_ms: float - processing duration
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Detector identifier.

        Returns:
            String name identifying this detector type (e.g., "pixel")
        """
        pass

    def configure(self, **kwargs) -> None:
        """
        Configure detector parameters.

        Override in subclasses to support runtime configuration.
        Default implementation does nothing.

        Args:
            **kwargs: Detector-specific configuration options
        """
        pass
