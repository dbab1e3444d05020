import math

import pytest

from twisty_puzzle_sdk import Color as palette
from twisty_puzzle_sdk.Color import Color, ColorAtlas
from twisty_puzzle_sdk.PuzzleDataTypes import InvalidColor


def test_bytes_truncate_not_round():
    atlas = ColorAtlas([palette.BLUE])
    # 255 * 0.506 = 129.03, 255 * 0.965 = 246.075
    assert atlas.to_bytes() == bytes([60, 129, 246, 255])


def test_interior_slot_is_last():
    atlas = ColorAtlas([palette.RED, palette.GREEN], interior=palette.GRAY)
    assert atlas.slot_count == 3
    assert atlas.interior_slot == 2
    assert atlas.color(2) == palette.GRAY
    assert atlas.to_bytes()[-4:] == bytes([56, 56, 56, 255])


def test_no_interior_slot():
    atlas = ColorAtlas([palette.GOLD])
    assert atlas.interior_slot is None
    assert atlas.to_bytes() == bytes([255, 219, 157, 255])


def test_texture_shape():
    atlas = ColorAtlas([palette.RED, palette.ORANGE, palette.YELLOW], interior=palette.GRAY)
    image = atlas.create_texture()
    assert (image.width, image.height) == (4, 1)
    assert len(image.data) == 16
    assert image.pixels().shape == (1, 4, 4)


def test_u_coordinate_is_slot_centre():
    atlas = ColorAtlas([palette.RED] * 6, interior=palette.GRAY)
    assert math.isclose(atlas.u(0), 0.5 / 7)
    assert math.isclose(atlas.u(6), 6.5 / 7)
    with pytest.raises(IndexError):
        atlas.u(7)


def test_out_of_range_channel_rejected():
    with pytest.raises(InvalidColor):
        ColorAtlas([Color(1.2, 0.0, 0.0)])
    with pytest.raises(InvalidColor):
        ColorAtlas([palette.RED], interior=Color(0.0, -0.1, 0.0))


def test_empty_atlas_rejected():
    with pytest.raises(InvalidColor):
        ColorAtlas([])


def test_from_hex():
    assert Color.from_hex("#ff0000") == Color(1.0, 0.0, 0.0, 1.0)
    c = Color.from_hex("00ff0080")
    assert c.g == 1.0 and math.isclose(c.a, 128 / 255)
    for bad in ("#ff00", "red", "#gg0000"):
        with pytest.raises(InvalidColor):
            Color.from_hex(bad)
