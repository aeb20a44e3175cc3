import argparse
import logging
import sys
from pathlib import Path

from asciiart.config import OUTPUTS, Config
from asciiart.errors import AsciiArtError
from asciiart.image import Image
from asciiart.shell import Shell

logger = logging.getLogger("asciiart")


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-r",
        "--resolution",
        type=int,
        default=defaults.resolution,
        help=f"Characters per row (default: {defaults.resolution})",
    )
    parser.add_argument(
        "-c", "--chars", default=defaults.charset, help=f"Initial character set (default: {defaults.charset})"
    )
    parser.add_argument(
        "-o", "--output", default=defaults.output, choices=OUTPUTS, help="Where asciiArt writes its result"
    )
    parser.add_argument("--html-file", default=defaults.html_path, help="HTML output path (default: out.html)")
    parser.add_argument("--font", default=None, help="TrueType font used to measure glyphs (default: Pillow's)")
    parser.add_argument("--font-size", type=int, default=defaults.font_size, help="Glyph font size in points")
    parser.add_argument(
        "--render", action="store_true", default=False, help="Render once and exit instead of starting the shell"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = Config(
            charset=args.chars,
            resolution=args.resolution,
            output=args.output,
            html_path=args.html_file,
            font_path=args.font,
            font_size=args.font_size,
        )
    except ValueError as e:
        print(e, file=sys.stderr)
        sys.exit(2)

    image_path = Path(args.image)
    try:
        image = Image.open(image_path)
    except OSError:
        print(f"Error loading image {image_path}", file=sys.stderr)
        sys.exit(1)

    shell = Shell(image, config)
    if not args.render:
        shell.run()
        return

    try:
        shell.output.out(shell.render())
    except AsciiArtError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
