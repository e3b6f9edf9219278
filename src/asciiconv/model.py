from dataclasses import dataclass

import numpy as np
from PIL import Image

from asciiconv.errors import InvalidInput

OUTPUT_WIDTH = 50
# Monospace cells are roughly twice as tall as wide
VERTICAL_SCALE = 0.5
# Cells brighter than this are emitted as a space without consulting the ramp
WHITE_THRESHOLD = 240.0


@dataclass(frozen=True)
class SourceImage:
    """Decoded image as a row-major RGBA byte buffer (4 bytes per pixel)."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidInput(f"Image dimensions must be positive, got {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise InvalidInput(
                f"Pixel buffer holds {len(self.pixels)} bytes, expected {expected} for {self.width}x{self.height} RGBA"
            )

    @classmethod
    def from_pil(cls, image: Image.Image) -> "SourceImage":
        rgba = image.convert("RGBA")
        return cls(width=rgba.width, height=rgba.height, pixels=rgba.tobytes())

    @classmethod
    def from_array(cls, array: np.ndarray) -> "SourceImage":
        """Build from a (height, width, 4) uint8 array."""
        if array.ndim != 3 or array.shape[2] != 4:
            raise InvalidInput(f"Expected a (height, width, 4) array, got shape {array.shape}")
        height, width, _ = array.shape
        return cls(width=width, height=height, pixels=np.ascontiguousarray(array, dtype=np.uint8).tobytes())

    def as_array(self) -> np.ndarray:
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(self.height, self.width, 4)


@dataclass(frozen=True)
class ConverterConfig:
    width: int = OUTPUT_WIDTH
    vertical_scale: float = VERTICAL_SCALE
    white_threshold: float = WHITE_THRESHOLD

    def __post_init__(self):
        if self.width < 1:
            raise InvalidInput(f"Output width must be at least 1, got {self.width}")
        if self.vertical_scale <= 0:
            raise InvalidInput(f"Vertical scale must be positive, got {self.vertical_scale}")


@dataclass(frozen=True)
class AsciiGrid:
    rows: tuple[str, ...]  # one string per row, each exactly `width` characters
    width: int

    @property
    def height(self) -> int:
        return len(self.rows)

    def to_text(self) -> str:
        """Join rows, terminating every row (the last one too) with a newline."""
        return "".join(row + "\n" for row in self.rows)
