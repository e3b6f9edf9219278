import argparse
import logging
import sys
from pathlib import Path

from asciiconv.converter import convert
from asciiconv.errors import AsciiConvError
from asciiconv.model import OUTPUT_WIDTH, ConverterConfig
from asciiconv.pipeline import load_image, write_ascii
from asciiconv.terminal import terminal_columns

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    width_group = parser.add_mutually_exclusive_group()
    width_group.add_argument(
        "-s", "--size", type=int, default=None, help=f"Output width in columns (default: {OUTPUT_WIDTH})"
    )
    width_group.add_argument(
        "--fit", action="store_true", default=False, help="Use the terminal width as the output width"
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write to this file (or ascii-art.txt inside this directory) instead of stdout",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.fit:
        width = terminal_columns()
    else:
        width = args.size if args.size is not None else OUTPUT_WIDTH

    image_path = Path(args.image)
    if not image_path.is_file():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = ConverterConfig(width=width)
        text = convert(load_image(image_path), config)
    except (AsciiConvError, OSError) as exc:
        print(f"{image_path}: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.output is None:
        sys.stdout.write(text)
        return
    try:
        written = write_ascii(text, args.output)
    except OSError as exc:
        print(f"{args.output}: {exc}", file=sys.stderr)
        sys.exit(1)
    logger.info("Wrote %s", written)
