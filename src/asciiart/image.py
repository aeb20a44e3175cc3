from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from asciiart.errors import ImageFormatError


class Image:
    """An immutable RGB pixel grid backed by a read-only (height, width, 3) uint8 array.

    Two images are only ever equal if they are the same object; the conversion
    cache depends on that.
    """

    def __init__(self, pixels):
        try:
            arr = np.asarray(pixels)
        except ValueError as e:
            raise ImageFormatError("All pixel rows must have the same length") from e

        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ImageFormatError(f"Expected rows of RGB triples, got array of shape {arr.shape}")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ImageFormatError("Image must have at least one pixel")
        if not np.issubdtype(arr.dtype, np.integer):
            raise ImageFormatError(f"Channel values must be integers, got {arr.dtype}")
        if arr.dtype != np.uint8 and (arr.min() < 0 or arr.max() > 255):
            raise ImageFormatError("Channel values must lie in 0-255")

        arr = np.array(arr, dtype=np.uint8, copy=True)
        arr.setflags(write=False)
        self._pixels = arr
        self.height, self.width = arr.shape[:2]

    def __repr__(self) -> str:
        return f"<Image {self.width}x{self.height}>"

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    def get_pixel(self, row: int, col: int) -> tuple[int, int, int]:
        r, g, b = self._pixels[row, col]
        return (int(r), int(g), int(b))

    @classmethod
    def from_pil(cls, image: PILImage.Image) -> "Image":
        return cls(np.asarray(image.convert("RGB")))

    @classmethod
    def open(cls, path: str | Path) -> "Image":
        with PILImage.open(path) as image:
            return cls.from_pil(image)
