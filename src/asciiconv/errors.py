class AsciiConvError(Exception):
    """Base class for everything the conversion pipeline raises on purpose."""


class InvalidInput(AsciiConvError, ValueError):
    """The image or config can't be converted (e.g. zero width, short buffer)."""


class UnsupportedFormat(AsciiConvError, ValueError):
    """Input bytes are not an image Pillow can decode."""


class RenderingUnavailable(AsciiConvError, RuntimeError):
    """The scaling surface could not be built or resized."""
