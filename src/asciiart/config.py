from dataclasses import dataclass

from asciiart.charsets import DEFAULT_CHARS
from asciiart.glyphs import DEFAULT_FONT_SIZE

OUTPUTS = ("console", "html")


@dataclass
class Config:
    charset: str = DEFAULT_CHARS
    resolution: int = 2
    output: str = "console"
    html_path: str = "out.html"
    html_font: str = "Courier New"
    # None selects Pillow's built-in font for glyph rendering
    font_path: str | None = None
    font_size: int = DEFAULT_FONT_SIZE

    def __post_init__(self):
        if self.output not in OUTPUTS:
            raise ValueError(f"Unknown output: {self.output!r}")
        # Only powers of two divide a padded image into whole tiles
        if self.resolution < 1 or self.resolution & (self.resolution - 1):
            raise ValueError(f"Resolution must be a power of two: {self.resolution}")
