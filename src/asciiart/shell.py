import logging
import sys
from typing import TextIO

from asciiart.charsets import ASCII_PRINTABLE, char_range, is_supported
from asciiart.config import Config
from asciiart.errors import (
    AsciiArtError,
    CharsetError,
    CommandFormatError,
    InvalidCommandError,
    ResolutionError,
)
from asciiart.glyphs import GlyphTable
from asciiart.image import Image
from asciiart.matcher import CharBrightnessIndex
from asciiart.output import ConsoleOutput, HtmlOutput, Output
from asciiart.partition import next_power_of_two
from asciiart.pipeline import ConversionPipeline

logger = logging.getLogger(__name__)

PROMPT = ">>> "
EXIT_COMMAND = "exit"
MIN_RENDER_CHARS = 2


class Shell:
    """Line-oriented command interpreter around one image.

    Commands: chars, add, remove, res, reverse, output, asciiArt, exit.
    Errors raised by a command are printed and the loop carries on.
    """

    def __init__(
        self,
        image: Image,
        config: Config | None = None,
        index: CharBrightnessIndex | None = None,
        pipeline: ConversionPipeline | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.config = config if config is not None else Config()
        self.image = image
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        if index is None:
            index = CharBrightnessIndex(self.config.charset, GlyphTable(self.config.font_path, self.config.font_size))
        self.index = index
        self.pipeline = pipeline if pipeline is not None else ConversionPipeline()
        self.output = self._make_output(self.config.output)

        # Bounds are taken on the padded image so every power-of-two resolution
        # reached by "res up"/"res down" divides its width exactly.
        padded_width = next_power_of_two(image.width)
        padded_height = next_power_of_two(image.height)
        self.max_resolution = padded_width
        self.min_resolution = max(1, padded_width // padded_height)
        self.resolution = min(max(self.config.resolution, self.min_resolution), self.max_resolution)
        if self.resolution != self.config.resolution:
            logger.debug("Clamped resolution %d to %d", self.config.resolution, self.resolution)

        self._commands = {
            "chars": self._chars,
            "add": self._add,
            "remove": self._remove,
            "res": self._res,
            "reverse": self._reverse,
            "output": self._output,
            "asciiArt": self._ascii_art,
        }

    def run(self) -> None:
        """Read and execute commands until "exit" or end of input."""
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                return
            args = line.split()
            if not args:
                continue
            if args[0] == EXIT_COMMAND:
                return
            try:
                self.execute(args)
            except AsciiArtError as e:
                logger.debug("Command %r failed: %s", line.strip(), e)
                self._print(str(e))

    def execute(self, args: list[str]) -> None:
        handler = self._commands.get(args[0])
        if handler is None:
            raise InvalidCommandError("Did not execute due to incorrect command.")
        handler(args[1:])

    def render(self) -> list[str]:
        if len(self.index) < MIN_RENDER_CHARS:
            raise CharsetError("Did not execute. Charset is too small.")
        return self.pipeline.convert(self.image, self.resolution, self.index)

    def _print(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def _make_output(self, name: str) -> Output:
        if name == "console":
            return ConsoleOutput(self.stdout)
        if name == "html":
            return HtmlOutput(self.config.html_path, self.config.html_font)
        raise CommandFormatError("Did not change output method due to incorrect format.")

    def _chars(self, args: list[str]) -> None:
        self._print(" ".join(self.index.chars()))

    def _parse_chars(self, args: list[str], verb: str) -> str:
        """Expand a char argument: a single char, "space", "all" or a range like "a-z"."""
        if not args:
            raise CommandFormatError(f"Did not {verb} due to incorrect format.")
        arg = args[0]
        if arg == "all":
            chars = ASCII_PRINTABLE
        elif arg == "space":
            chars = " "
        elif len(arg) == 1:
            chars = arg
        elif len(arg) == 3 and arg[1] == "-":
            chars = char_range(arg[0], arg[2])
        else:
            raise CommandFormatError(f"Did not {verb} due to incorrect format.")
        if not all(is_supported(c) for c in chars):
            raise CommandFormatError(f"Did not {verb} due to incorrect format.")
        return chars

    def _add(self, args: list[str]) -> None:
        for char in self._parse_chars(args, "add"):
            self.index.add(char)

    def _remove(self, args: list[str]) -> None:
        for char in self._parse_chars(args, "remove"):
            self.index.remove(char)

    def _res(self, args: list[str]) -> None:
        if args:
            if args[0] == "up":
                self._set_resolution(self.resolution * 2)
            elif args[0] == "down":
                self._set_resolution(self.resolution // 2)
            else:
                raise CommandFormatError("Did not change resolution due to incorrect format.")
        self._print(f"Resolution set to {self.resolution}.")

    def _set_resolution(self, resolution: int) -> None:
        if resolution > self.max_resolution or resolution < self.min_resolution:
            raise ResolutionError("Did not change resolution due to exceeding boundaries.")
        self.resolution = resolution

    def _reverse(self, args: list[str]) -> None:
        self.index.set_reverse(not self.index.reverse)

    def _output(self, args: list[str]) -> None:
        if not args:
            raise CommandFormatError("Did not change output method due to incorrect format.")
        self.output = self._make_output(args[0])

    def _ascii_art(self, args: list[str]) -> None:
        self.output.out(self.render())
