class AsciiArtError(Exception):
    """Base class for everything this package raises on purpose."""


class ImageFormatError(AsciiArtError, ValueError):
    """Pixel data is not a non-empty rectangular grid of RGB triples."""


class GeometryError(AsciiArtError, ValueError):
    """An image cannot be divided at the requested resolution."""


class CharsetError(AsciiArtError):
    pass


class EmptyCharsetError(CharsetError):
    """A brightness lookup was made against an index with no characters."""


class CommandError(AsciiArtError):
    pass


class CommandFormatError(CommandError):
    pass


class InvalidCommandError(CommandError):
    pass


class ResolutionError(CommandError):
    pass
