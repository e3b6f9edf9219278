"""I/O boundaries around the converter: decode bytes to a SourceImage, export text to bytes."""

import io
import logging
import mimetypes
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from asciiconv.errors import UnsupportedFormat
from asciiconv.model import SourceImage

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "ascii-art.txt"
TEXT_ENCODING = "utf-8"


def decode(data: bytes, content_type: str | None = None) -> SourceImage:
    """Decode an encoded image (PNG, JPEG, ...) into RGBA pixels.

    When ``content_type`` is given it must name an image type. The image is
    fully loaded here so truncated files fail now rather than mid-conversion.
    """
    if content_type is not None and "image" not in content_type:
        raise UnsupportedFormat(f"Invalid file type: {content_type}; please supply an image file")
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            source = SourceImage.from_pil(image)
    except Image.DecompressionBombError as exc:
        raise UnsupportedFormat(f"Image too large to decode safely: {exc}") from exc
    except UnidentifiedImageError as exc:
        raise UnsupportedFormat("Input is not a recognised image format") from exc
    # Pillow reports some corrupt PNG chunks as SyntaxError
    except (OSError, SyntaxError) as exc:
        raise UnsupportedFormat(f"Could not decode image: {exc}") from exc
    logger.debug("Decoded %d bytes to %dx%d image", len(data), source.width, source.height)
    return source


def load_image(path: str | Path) -> SourceImage:
    path = Path(path)
    content_type, _ = mimetypes.guess_type(path.name)
    return decode(path.read_bytes(), content_type)


def export(text: str) -> bytes:
    return text.encode(TEXT_ENCODING)


def write_ascii(text: str, path: str | Path) -> Path:
    """Write ``text`` to ``path``, or to ``ascii-art.txt`` inside it if it is a directory."""
    path = Path(path)
    if path.is_dir():
        path = path / DEFAULT_FILENAME
    data = export(text)
    path.write_bytes(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path
