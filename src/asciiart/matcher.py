import logging
from bisect import bisect_left, bisect_right, insort
from collections.abc import Callable, Iterable

from asciiart.brightness import brightness_of_glyph
from asciiart.errors import EmptyCharsetError
from asciiart.glyphs import GlyphTable

logger = logging.getLogger(__name__)


class CharBrightnessIndex:
    """Registry of characters keyed by the raw brightness of their glyph.

    Characters sharing a brightness are kept together in code-point order, and
    the distinct brightness levels are kept sorted so lookups can bisect for
    the nearest level on either side of a target.

    Lookups stretch the target linearly over the registered range: 0.0 maps
    to the dimmest character and 1.0 to the brightest, whatever their raw
    values are. With the reverse flag set the target is flipped first.
    """

    def __init__(self, chars: Iterable[str] = (), glyphs: Callable[[str], object] | None = None):
        self.glyphs = glyphs if glyphs is not None else GlyphTable()
        self.reverse = False
        self._levels: list[float] = []
        self._groups: dict[float, list[str]] = {}
        self._raw: dict[str, float] = {}
        for char in chars:
            self.add(char)

    def __len__(self) -> int:
        return len(self._raw)

    def __contains__(self, char: str) -> bool:
        return char in self._raw

    def brightness(self, char: str) -> float:
        """Raw brightness a registered character is filed under."""
        return self._raw[char]

    def chars(self) -> list[str]:
        return sorted(self._raw)

    def add(self, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        if char in self._raw:
            return
        level = brightness_of_glyph(self.glyphs(char))
        group = self._groups.get(level)
        if group is None:
            group = self._groups[level] = []
            insort(self._levels, level)
        insort(group, char)
        self._raw[char] = level
        logger.debug("Added %r at brightness %.4f", char, level)

    def remove(self, char: str) -> None:
        level = self._raw.pop(char, None)
        if level is None:
            return
        group = self._groups[level]
        group.remove(char)
        if not group:
            del self._groups[level]
            del self._levels[bisect_left(self._levels, level)]
        logger.debug("Removed %r from brightness %.4f", char, level)

    def set_reverse(self, reverse: bool) -> None:
        self.reverse = bool(reverse)

    def match_brightness(self, brightness: float) -> str:
        """Character whose stretched brightness is closest to `brightness` (0-1).

        Ties between the level below and the level above go to the level below;
        within a level the lowest code point wins.
        """
        if not self._levels:
            raise EmptyCharsetError("Character set is empty.")

        lo = self._levels[0]
        hi = self._levels[-1]
        if lo == hi:
            return self._groups[lo][0]

        if self.reverse:
            brightness = 1.0 - brightness
        target = brightness * (hi - lo) + lo

        i = bisect_right(self._levels, target)
        j = bisect_left(self._levels, target)
        if i == 0:
            return self._groups[self._levels[j]][0]
        if j == len(self._levels):
            return self._groups[self._levels[i - 1]][0]

        floor = self._levels[i - 1]
        ceiling = self._levels[j]
        if abs(floor - target) <= abs(ceiling - target):
            return self._groups[floor][0]
        return self._groups[ceiling][0]
