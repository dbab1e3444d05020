#!/usr/bin/env python3
# ViewPuzzle.py – thin CLI wrapper; geometry comes from Puzzles/, drawing from
# Rendering/Render.py

import logging

from twisty_puzzle_sdk.Config import parse_settings


def main(argv=None) -> None:
    _, puzzle_settings, camera, viewer = parse_settings(argv)
    logging.basicConfig(
        level=logging.DEBUG if viewer.debug else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
    )

    puzzle = puzzle_settings.build()
    logging.info("showing %r", puzzle)

    # GL is imported only once a window is actually wanted
    from twisty_puzzle_sdk.Rendering.Render import Render

    with Render(puzzle, camera, viewer) as render:
        render.run()


if __name__ == "__main__":
    main()
