class AsciiArtError(Exception):
    """Base class for errors raised while turning an image into text."""


class InvalidDimension(AsciiArtError, ValueError):
    """A requested width or height is not a positive integer."""


class DecodeError(AsciiArtError, OSError):
    """The image could not be located or decoded."""


class InvalidArgument(AsciiArtError, ValueError):
    """Malformed render configuration."""
