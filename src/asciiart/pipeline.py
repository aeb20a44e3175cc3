import logging

import numpy as np

from asciiart.brightness import brightness_matrix
from asciiart.cache import ConversionCache
from asciiart.image import Image
from asciiart.matcher import CharBrightnessIndex
from asciiart.partition import divide, pad

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """Turns images into character grids: pad, tile, score, then match each tile.

    Tile scores go through the pipeline's cache, so converting the same image
    object at the same resolution again (say after changing the character set)
    skips straight to matching.
    """

    def __init__(self, cache: ConversionCache | None = None):
        self.cache = cache if cache is not None else ConversionCache()

    def brightness_matrix(self, image: Image, resolution: int) -> np.ndarray:
        def compute() -> np.ndarray:
            return brightness_matrix(divide(pad(image), resolution))

        return self.cache.get_or_compute(image, resolution, compute)

    def convert(self, image: Image, resolution: int, index: CharBrightnessIndex) -> list[str]:
        """Return one string per tile row."""
        matrix = self.brightness_matrix(image, resolution)
        logger.debug("Matching %d tiles against %d characters", matrix.size, len(index))
        return ["".join(index.match_brightness(value) for value in row) for row in matrix]
