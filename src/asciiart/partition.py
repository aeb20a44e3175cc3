import logging

import numpy as np

from asciiart.errors import GeometryError
from asciiart.image import Image

logger = logging.getLogger(__name__)

WHITE = 255


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n. Returns 1 for n <= 1."""
    power = 1
    while power < n:
        power *= 2
    return power


def pad(image: Image) -> Image:
    """Pad an image with white so both dimensions are powers of two.

    The original pixels are centred; any odd leftover goes to the right and
    bottom. An image that is already power-of-two sized is returned as is.
    """
    new_width = next_power_of_two(image.width)
    new_height = next_power_of_two(image.height)
    if new_width == image.width and new_height == image.height:
        return image

    top = (new_height - image.height) // 2
    left = (new_width - image.width) // 2
    canvas = np.full((new_height, new_width, 3), WHITE, dtype=np.uint8)
    canvas[top : top + image.height, left : left + image.width] = image.pixels

    logger.debug("Padded %dx%d to %dx%d at offset (%d, %d)", image.width, image.height, new_width, new_height, left, top)
    return Image(canvas)


def tile_geometry(image: Image, resolution: int) -> tuple[int, int, int]:
    """Return (tile_size, rows, cols) for splitting an image into `resolution` tiles per row.

    A resolution that does not divide the width evenly is accepted and leaves
    the right and bottom remainders uncovered.
    """
    if resolution < 1 or resolution > image.width:
        raise GeometryError(f"Resolution {resolution} out of range for image width {image.width}")
    tile_size = image.width // resolution
    rows = image.height // tile_size
    return tile_size, rows, resolution


def divide(image: Image, resolution: int) -> list[list[Image]]:
    """Cut a (padded) image into a row-major grid of equal square tiles."""
    tile_size, rows, cols = tile_geometry(image, resolution)
    logger.debug("Dividing %r into %dx%d tiles of %dpx", image, rows, cols, tile_size)

    # Trim to exact grid and reshape into (rows, cols, tile, tile, 3)
    trimmed = image.pixels[: rows * tile_size, : cols * tile_size]
    cells = trimmed.reshape(rows, tile_size, cols, tile_size, 3).transpose(0, 2, 1, 3, 4)
    return [[Image(cells[r, c]) for c in range(cols)] for r in range(rows)]
