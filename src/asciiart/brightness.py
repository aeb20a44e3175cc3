import numpy as np

from asciiart.image import Image

# Rec. 709 luma coefficients for (R, G, B)
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def brightness_of_pixels(image: Image) -> float:
    """Mean luminance of an image, scaled to 0-1."""
    grey = image.pixels.astype(np.float64) @ LUMA_WEIGHTS
    return float(np.clip(grey.mean() / 255.0, 0.0, 1.0))


def brightness_of_glyph(grid) -> float:
    """Fraction of set cells in a boolean glyph bitmap."""
    arr = np.asarray(grid, dtype=bool)
    if arr.size == 0:
        raise ValueError("Glyph bitmap is empty")
    return np.count_nonzero(arr) / arr.size


def brightness_matrix(tiles: list[list[Image]]) -> np.ndarray:
    """Score every tile of a grid. Returns array of shape (rows, cols)."""
    return np.array([[brightness_of_pixels(tile) for tile in row] for row in tiles], dtype=np.float64)
