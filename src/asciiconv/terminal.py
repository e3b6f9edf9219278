import os
import sys

from asciiconv.model import OUTPUT_WIDTH


def terminal_columns(stream=None, default: int = OUTPUT_WIDTH) -> int:
    """Return the column count of the terminal behind ``stream``, or ``default`` if it isn't one."""
    stream = stream if stream is not None else sys.stdout
    if not stream.isatty():
        return default
    try:
        return os.get_terminal_size(stream.fileno()).columns
    except OSError:
        return default
