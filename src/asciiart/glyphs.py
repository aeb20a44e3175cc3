import numpy as np
from PIL import Image, ImageDraw, ImageFont

GLYPH_SIZE = 16
# Point size that keeps ascenders and descenders inside the GLYPH_SIZE canvas
DEFAULT_FONT_SIZE = 12


def _load_font(font_path: str | None, font_size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    if font_path is None:
        return ImageFont.load_default(font_size)
    return ImageFont.truetype(font_path, font_size)


class GlyphTable:
    """Renders characters to GLYPH_SIZE x GLYPH_SIZE boolean bitmaps.

    Each character is drawn white on black, centred by its ink bounding box,
    and thresholded at half intensity. Bitmaps are memoised per character, so
    repeated lookups are cheap and always return the same array.
    """

    def __init__(self, font_path: str | None = None, font_size: int = DEFAULT_FONT_SIZE):
        self.font = _load_font(font_path, font_size)
        self.size = GLYPH_SIZE
        self._cache: dict[str, np.ndarray] = {}

    def __call__(self, char: str) -> np.ndarray:
        bitmap = self._cache.get(char)
        if bitmap is None:
            bitmap = self._render(char)
            bitmap.setflags(write=False)
            self._cache[char] = bitmap
        return bitmap

    def _render(self, char: str) -> np.ndarray:
        img = Image.new("L", (self.size, self.size), 0)
        draw = ImageDraw.Draw(img)
        left, top, right, bottom = draw.textbbox((0, 0), char, font=self.font)
        x = (self.size - (right - left)) // 2 - left
        y = (self.size - (bottom - top)) // 2 - top
        draw.text((x, y), char, fill=255, font=self.font)
        return np.asarray(img) > 127
