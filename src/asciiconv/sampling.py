import logging
import math

import numpy as np
from PIL import Image

from asciiconv.charsets import LIGHTEST
from asciiconv.errors import RenderingUnavailable
from asciiconv.model import WHITE_THRESHOLD, SourceImage

logger = logging.getLogger(__name__)


def output_size(width: int, height: int, columns: int, vertical_scale: float) -> tuple[int, int]:
    """Return (columns, rows) of the character grid for a width x height source.

    Rows are truncated, so very wide and short images collapse to zero rows.
    """
    rows = math.floor(height * (columns / width) * vertical_scale)
    return columns, rows


def resample(image: SourceImage, columns: int, rows: int) -> np.ndarray:
    """Nearest-neighbour scale the image to one RGBA sample per cell.

    Returns a uint8 array of shape (rows, columns, 4).
    """
    if rows == 0 or columns == 0:
        return np.zeros((rows, columns, 4), dtype=np.uint8)
    try:
        surface = Image.frombytes("RGBA", (image.width, image.height), image.pixels)
        scaled = surface.resize((columns, rows), Image.NEAREST)
    except (ValueError, OSError, MemoryError) as exc:
        raise RenderingUnavailable(f"Could not scale {image.width}x{image.height} image to {columns}x{rows}") from exc
    return np.asarray(scaled, dtype=np.uint8).reshape(rows, columns, 4)


def brightness(samples: np.ndarray) -> np.ndarray:
    """Unweighted mean of the R, G and B channels; alpha is ignored."""
    return samples[..., :3].sum(axis=-1, dtype=np.float64) / 3


def quantize(levels: np.ndarray, white_threshold: float = WHITE_THRESHOLD) -> np.ndarray:
    """Map brightness (0-255) to palette indices, 0 darkest.

    Anything above ``white_threshold`` goes straight to the blank slot. Note
    this is not the same as the ramp formula, which would give the
    second-lightest glyph for 241-254.
    """
    levels = np.asarray(levels, dtype=np.float64)
    indices = np.floor((levels / 255) * LIGHTEST).astype(np.intp)
    return np.where(levels > white_threshold, LIGHTEST, indices)
