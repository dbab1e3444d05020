import pytest
from PIL import Image

from twisty_puzzle_sdk.Examples.ExportAtlas import export_atlas, main
from twisty_puzzle_sdk.Puzzles import Mirror


def test_export_upscales_without_blending(tmp_path):
    out = export_atlas(Mirror(), tmp_path / "mirror.png", scale=8)
    with Image.open(out) as img:
        assert img.size == (8, 8)
        assert img.getpixel((7, 7)) == (255, 219, 157, 255)


def test_main_writes_rubik_atlas(tmp_path):
    out = tmp_path / "rubik.png"
    main([str(out), "--scale", "4", "--color", "right=#ffffff"])
    with Image.open(out) as img:
        assert img.size == (28, 4)
        assert img.getpixel((0, 0)) == (255, 255, 255, 255)
        assert img.getpixel((27, 3)) == (56, 56, 56, 255)


@pytest.mark.parametrize("color", ["front=blue", "front", "up=#000000"])
def test_bad_colour_is_a_usage_error(tmp_path, capsys, color):
    out = tmp_path / "bad.png"
    with pytest.raises(SystemExit):
        main([str(out), "--color", color])
    assert "error" in capsys.readouterr().err
    assert not out.exists()
