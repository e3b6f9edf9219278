import numpy as np
import pytest
from PIL import Image

from asciiconv.model import SourceImage


def solid(width, height, rgb, alpha=255):
    """A single-colour SourceImage."""
    array = np.empty((height, width, 4), dtype=np.uint8)
    array[..., :3] = rgb
    array[..., 3] = alpha
    return SourceImage.from_array(array)


@pytest.fixture
def png_file(tmp_path):
    """Factory writing a solid-colour PNG under tmp_path and returning its path."""

    def _write(width=100, height=100, rgb=(128, 128, 128), name="image.png"):
        path = tmp_path / name
        Image.new("RGB", (width, height), rgb).save(path)
        return path

    return _write
