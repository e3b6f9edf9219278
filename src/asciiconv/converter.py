import logging
from pathlib import Path

import numpy as np
from PIL import Image

from asciiconv.charsets import PALETTE
from asciiconv.model import AsciiGrid, ConverterConfig, SourceImage
from asciiconv.pipeline import decode, load_image
from asciiconv.sampling import brightness, output_size, quantize, resample

logger = logging.getLogger(__name__)

_GLYPHS = np.array(list(PALETTE))


class AsciiConverter:
    """Turns a SourceImage into a grid of palette characters.

    Holds only its config, so one instance can be shared between threads.
    """

    def __init__(self, config: ConverterConfig | None = None):
        self.config = config if config is not None else ConverterConfig()

    def render(self, image: SourceImage) -> AsciiGrid:
        columns, rows = output_size(image.width, image.height, self.config.width, self.config.vertical_scale)
        logger.debug("Converting %dx%d image to %dx%d cells", image.width, image.height, columns, rows)
        if rows == 0:
            return AsciiGrid(rows=(), width=columns)

        samples = resample(image, columns, rows)
        indices = quantize(brightness(samples), self.config.white_threshold)
        chars = _GLYPHS[indices]
        return AsciiGrid(rows=tuple("".join(row) for row in chars), width=columns)

    def convert(self, image: SourceImage) -> str:
        return self.render(image).to_text()


def convert(image: SourceImage, config: ConverterConfig | None = None) -> str:
    return AsciiConverter(config).convert(image)


def image_to_ascii(
    image: SourceImage | Image.Image | bytes | str | Path,
    width: int | None = None,
) -> str:
    """Decode ``image`` if needed and return its ASCII art.

    Accepts an already decoded SourceImage, a Pillow image, raw encoded bytes
    or a path to an image file.
    """
    if isinstance(image, Image.Image):
        image = SourceImage.from_pil(image)
    elif isinstance(image, bytes):
        image = decode(image)
    elif not isinstance(image, SourceImage):
        image = load_image(image)

    config = ConverterConfig() if width is None else ConverterConfig(width=width)
    return convert(image, config)
