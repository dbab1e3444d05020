#!/usr/bin/env python3
# ExportAtlas.py – write a puzzle's colour atlas to a PNG, optionally upscaled
import argparse
import logging
from pathlib import Path

from PIL import Image

from twisty_puzzle_sdk.Config import color_override_arg
from twisty_puzzle_sdk.PuzzleDataTypes import InvalidColor
from twisty_puzzle_sdk.Puzzles import MirrorFinish, PuzzleKind, create_puzzle


def export_atlas(puzzle, output: Path, scale: int = 1) -> Path:
    img = puzzle.create_texture().to_pil()
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.NEAREST)
    img.save(output)
    logging.info("atlas %dx%d saved to %s", img.width, img.height, output)
    return output


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Save a puzzle colour atlas as PNG.")
    parser.add_argument("output", type=Path, help="PNG file to write")
    parser.add_argument("--puzzle", choices=[k.value for k in PuzzleKind], default=PuzzleKind.RUBIK.value)
    parser.add_argument("--finish", choices=[f.value for f in MirrorFinish], default=MirrorFinish.GOLD.value)
    parser.add_argument("--color", metavar="FACE=#RRGGBB", type=color_override_arg, action="append", default=[])
    parser.add_argument("--scale", type=int, default=32, help="pixels per atlas slot (default: 32)")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        puzzle = create_puzzle(args.puzzle, colors=dict(args.color), finish=args.finish)
    except InvalidColor as e:
        parser.error(str(e))
    export_atlas(puzzle, args.output, args.scale)


if __name__ == "__main__":
    main()
