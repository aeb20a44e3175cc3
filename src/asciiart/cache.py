import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from asciiart.image import Image

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    image: Image
    resolution: int
    matrix: np.ndarray


class ConversionCache:
    """Remembers the brightness matrix of the most recent (image, resolution) pair.

    Images are matched by object identity, not by content: only re-running on
    the very same Image instance is a hit. The entry keeps a reference to the
    image so its identity cannot be recycled while cached.
    """

    def __init__(self):
        self._entry: CacheEntry | None = None
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return 0 if self._entry is None else 1

    def get_or_compute(self, image: Image, resolution: int, compute: Callable[[], np.ndarray]) -> np.ndarray:
        entry = self._entry
        if entry is not None and entry.image is image and entry.resolution == resolution:
            self.hits += 1
            logger.debug("Cache hit for %r at resolution %d", image, resolution)
            return entry.matrix

        self.misses += 1
        logger.debug("Cache miss for %r at resolution %d", image, resolution)
        matrix = np.array(compute(), dtype=np.float64)
        matrix.setflags(write=False)
        self._entry = CacheEntry(image=image, resolution=resolution, matrix=matrix)
        return matrix

    def clear(self) -> None:
        self._entry = None
