# Config.py – viewer settings and the command line that fills them
import argparse
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

from .Color import Color
from .PuzzleDataTypes import InvalidColor, InvalidDimension
from .Puzzles import MirrorFinish, Puzzle, PuzzleKind, PyraminxShape, RubikColors, create_puzzle
from .Rendering.Camera import CameraMode


@dataclass
class PuzzleSettings:
    kind: PuzzleKind = PuzzleKind.RUBIK
    dimension: int = 3
    colors: Dict[str, Color] = field(default_factory=dict)
    finish: MirrorFinish = MirrorFinish.GOLD
    pyraminx_shape: PyraminxShape = PyraminxShape.TETRAHEDRON

    def build(self) -> Puzzle:
        return create_puzzle(self.kind, self.dimension, colors=self.colors,
                             finish=self.finish, shape=self.pyraminx_shape)


@dataclass
class StaticCameraSettings:
    pos: Tuple[float, float, float] = (0.0, 0.0, 5.0)
    looking_at: Tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass
class FlyingCameraSettings:
    movement_speed: float = 2.5
    sensitivity: float = 0.25


@dataclass
class CameraSettings:
    mode: CameraMode = CameraMode.STATIC
    static: StaticCameraSettings = field(default_factory=StaticCameraSettings)
    flying: FlyingCameraSettings = field(default_factory=FlyingCameraSettings)
    view_sensitivity: float = 0.25
    fov: float = 45.0
    near: float = 0.1
    far: float = 100.0


@dataclass
class ViewerSettings:
    width: int = 800
    height: int = 600
    title: str = "Twisty Puzzles"
    wireframe: bool = False
    debug: bool = False
    light_illuminance: float = 50_000.0
    light_direction: Tuple[float, float, float] = (-0.4, -1.0, -0.6)


# ------------------------------------------------ argparse helpers
def parse_color_override(text: str) -> Tuple[str, Color]:
    """``FACE=#RRGGBB`` → (face, Color)."""
    face, sep, value = text.partition("=")
    if not sep or not face.strip():
        raise InvalidColor(f"Expected FACE=#RRGGBB, got {text!r}")
    return face.strip().lower(), Color.from_hex(value)


def color_override_arg(text: str) -> Tuple[str, Color]:
    try:
        return parse_color_override(text)
    except InvalidColor as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _dimension_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid dimension {text!r}") from e
    if value < 1:
        raise argparse.ArgumentTypeError(str(InvalidDimension(value)))
    return value


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="Show a procedurally generated twisty puzzle.")

    puzzle = parser.add_argument_group("puzzle")
    puzzle.add_argument("--puzzle", choices=[k.value for k in PuzzleKind], default=PuzzleKind.RUBIK.value,
                        help="puzzle variant (default: rubik)")
    puzzle.add_argument("--dimension", "-n", type=_dimension_arg, default=3,
                        help="cubies per edge; ignored by the mirror cube (default: 3)")
    face_names = ", ".join(RubikColors.__dataclass_fields__)
    puzzle.add_argument("--color", metavar="FACE=#RRGGBB", type=color_override_arg, action="append", default=[],
                        help=f"override a cube face colour; FACE is one of {face_names}")
    puzzle.add_argument("--finish", choices=[f.value for f in MirrorFinish], default=MirrorFinish.GOLD.value,
                        help="mirror cube finish (default: gold)")
    puzzle.add_argument("--shape", choices=[s.value for s in PyraminxShape],
                        default=PyraminxShape.TETRAHEDRON.value,
                        help="pyraminx body (default: tetrahedron)")

    view = parser.add_argument_group("viewer")
    view.add_argument("--width",  type=int, default=800)
    view.add_argument("--height", type=int, default=600)
    view.add_argument("--wireframe", action="store_true", help="draw triangle edges on top of the shading")
    view.add_argument("--camera-pos", metavar=("X", "Y", "Z"), type=float, nargs=3, default=[0.0, 0.0, 5.0])
    view.add_argument("--fly", action="store_true", help="start with the free-fly camera")
    view.add_argument("--debug", action="store_true", help="verbose logging and GL error checks")
    return parser


def settings_from_args(args: argparse.Namespace) -> Tuple[PuzzleSettings, CameraSettings, ViewerSettings]:
    puzzle = PuzzleSettings(
        kind=PuzzleKind(args.puzzle),
        dimension=args.dimension,
        colors=dict(args.color),
        finish=MirrorFinish(args.finish),
        pyraminx_shape=PyraminxShape(args.shape),
    )
    camera = CameraSettings(
        mode=CameraMode.FLYING if args.fly else CameraMode.STATIC,
        static=StaticCameraSettings(pos=tuple(args.camera_pos)),
    )
    viewer = ViewerSettings(width=args.width, height=args.height,
                            wireframe=args.wireframe, debug=args.debug)
    return puzzle, camera, viewer


def parse_settings(argv: Optional[Sequence[str]] = None):
    """Parse ``argv`` into (args, puzzle, camera, viewer); bad face names are usage errors."""
    parser = build_parser()
    args = parser.parse_args(argv)
    puzzle, camera, viewer = settings_from_args(args)
    try:
        RubikColors().with_overrides(puzzle.colors)
    except InvalidColor as e:
        parser.error(str(e))
    return args, puzzle, camera, viewer
