import dataclasses

import numpy as np
import pytest
from PIL import Image

from asciiconv.errors import AsciiConvError, InvalidInput
from asciiconv.model import AsciiGrid, ConverterConfig, SourceImage


def test_source_image_rejects_zero_width():
    with pytest.raises(InvalidInput, match="must be positive"):
        SourceImage(width=0, height=10, pixels=b"")


def test_source_image_rejects_zero_height():
    with pytest.raises(InvalidInput):
        SourceImage(width=10, height=0, pixels=b"")


def test_source_image_rejects_short_buffer():
    with pytest.raises(InvalidInput, match="expected 16"):
        SourceImage(width=2, height=2, pixels=b"\x00" * 15)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        SourceImage(width=-1, height=1, pixels=b"")
    assert issubclass(InvalidInput, AsciiConvError)


def test_source_image_is_immutable():
    image = SourceImage(width=1, height=1, pixels=b"\x00\x00\x00\xff")
    with pytest.raises(dataclasses.FrozenInstanceError):
        image.width = 2


def test_from_pil_converts_to_rgba():
    image = SourceImage.from_pil(Image.new("L", (3, 2), 77))
    assert (image.width, image.height) == (3, 2)
    assert image.as_array()[0, 0].tolist() == [77, 77, 77, 255]


def test_from_array_roundtrip():
    array = np.arange(2 * 3 * 4, dtype=np.uint8).reshape(2, 3, 4)
    image = SourceImage.from_array(array)
    assert (image.width, image.height) == (3, 2)
    np.testing.assert_array_equal(image.as_array(), array)


def test_from_array_rejects_rgb():
    with pytest.raises(InvalidInput, match="shape"):
        SourceImage.from_array(np.zeros((2, 2, 3), dtype=np.uint8))


def test_config_defaults():
    config = ConverterConfig()
    assert config.width == 50
    assert config.vertical_scale == 0.5
    assert config.white_threshold == 240


def test_config_rejects_bad_vertical_scale():
    with pytest.raises(InvalidInput):
        ConverterConfig(vertical_scale=0)


def test_grid_to_text_terminates_every_row():
    grid = AsciiGrid(rows=("@@", "  "), width=2)
    assert grid.height == 2
    assert grid.to_text() == "@@\n  \n"


def test_empty_grid_is_empty_text():
    assert AsciiGrid(rows=(), width=50).to_text() == ""
