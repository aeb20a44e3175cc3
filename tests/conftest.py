import shutil
import subprocess
from pathlib import Path

import numpy as np
import pytest

from asciiart.glyphs import GLYPH_SIZE
from asciiart.image import Image

FONT_DIRS = [Path("/usr/share/fonts"), Path("/usr/local/share/fonts"), Path.home() / ".fonts"]
MONO_FONT_FILES = ("DejaVuSansMono.ttf", "LiberationMono-Regular.ttf")


def system_mono_font() -> str | None:
    """Path of a TrueType monospace font, searched by file name then via fontconfig."""
    for font_dir in FONT_DIRS:
        if not font_dir.is_dir():
            continue
        for name in MONO_FONT_FILES:
            match = next(font_dir.rglob(name), None)
            if match is not None:
                return str(match)
    if shutil.which("fc-match") is None:
        return None
    found = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True).stdout.strip()
    return found if found.lower().endswith((".ttf", ".otf")) else None


MONO_FONT = system_mono_font()
requires_mono_font = pytest.mark.skipif(MONO_FONT is None, reason="no TrueType monospace font installed")


def glyph_with_ink(count: int) -> np.ndarray:
    """A GLYPH_SIZE x GLYPH_SIZE bitmap with exactly `count` cells set."""
    flat = np.zeros(GLYPH_SIZE * GLYPH_SIZE, dtype=bool)
    flat[:count] = True
    return flat.reshape(GLYPH_SIZE, GLYPH_SIZE)


class FakeGlyphs:
    """Glyph provider with hand-picked ink counts, recording every lookup."""

    def __init__(self, ink: dict[str, int]):
        self.ink = ink
        self.calls: list[str] = []

    def __call__(self, char: str) -> np.ndarray:
        self.calls.append(char)
        return glyph_with_ink(self.ink[char])


@pytest.fixture
def make_glyphs():
    return FakeGlyphs


@pytest.fixture
def digit_glyphs():
    # '0' has no ink, each following digit 16 more cells: raw brightness k/16
    return FakeGlyphs({str(k): 16 * k for k in range(10)})


def solid(width: int, height: int, rgb=(255, 255, 255)) -> Image:
    return Image(np.full((height, width, 3), rgb, dtype=np.uint8))
