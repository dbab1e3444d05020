# Camera.py – view/projection math for the puzzle viewer (no GL calls)
import math
from enum import Enum
from typing import Iterable, Optional, Sequence

import numpy as np

TAU = 2.0 * math.pi


class CameraMode(Enum):
    STATIC = "static"
    FLYING = "flying"


# ------------------------------------------------ matrix builders
def look_at(eye: Sequence[float], target: Sequence[float],
            up: Sequence[float] = (0.0, 1.0, 0.0)) -> np.ndarray:
    """World-to-camera matrix for a camera at ``eye`` looking at ``target``."""
    eye = np.asarray(eye, dtype=np.float32)
    f = np.asarray(target, dtype=np.float32) - eye
    f /= np.linalg.norm(f)
    s = np.cross(f, np.asarray(up, dtype=np.float32))
    s /= np.linalg.norm(s)
    u = np.cross(s, f)

    m = np.eye(4, dtype=np.float32)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[:3, 3] = -m[:3, :3] @ eye
    return m


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    f = 1.0 / math.tan(fov_y / 2.0)
    m = np.zeros((4, 4), dtype=np.float32)
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (far + near) / (near - far)
    m[2, 3] = (2 * far * near) / (near - far)
    m[3, 2] = -1.0
    return m


def rotation_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1, 0, 0], [0, c, -s], [0, s, c]], dtype=np.float32)


def rotation_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]], dtype=np.float32)


def homogeneous(rotation: np.ndarray, translation: Optional[Sequence[float]] = None) -> np.ndarray:
    m = np.eye(4, dtype=np.float32)
    m[:3, :3] = rotation
    if translation is not None:
        m[:3, 3] = translation
    return m


# ------------------------------------------------ drag-to-rotate puzzle view
class ViewRotation:
    """Pitch/yaw applied to the puzzle while the left mouse button is held."""

    PITCH_LIMIT = math.pi / 4.0

    def __init__(self, sensitivity: float = 0.25):
        self.sensitivity = sensitivity
        self.pitch = 0.0
        self.yaw = 0.0

    def drag(self, dx: float, dy: float, delta_time: float) -> None:
        self.pitch += dy * delta_time * self.sensitivity
        self.yaw += dx * delta_time * self.sensitivity

        self.pitch = max(-self.PITCH_LIMIT, min(self.PITCH_LIMIT, self.pitch))
        while abs(self.yaw) > TAU:
            self.yaw -= math.copysign(TAU, self.yaw)

    def matrix(self) -> np.ndarray:
        # Euler XYZ: Rx(pitch) @ Ry(yaw)
        return homogeneous(rotation_x(self.pitch) @ rotation_y(self.yaw))


# ------------------------------------------------ free-fly camera
class FlyCamera:
    """First-person camera that starts from the static pose and moves freely."""

    PITCH_LIMIT = 1.5

    def __init__(self, position: Sequence[float], looking_at: Sequence[float],
                 movement_speed: float = 2.5, sensitivity: float = 0.25):
        self.home = np.asarray(position, dtype=np.float32)
        self.looking_at = np.asarray(looking_at, dtype=np.float32)
        self.movement_speed = movement_speed
        self.sensitivity = sensitivity
        self.reset()

    def reset(self) -> None:
        self.position = self.home.copy()
        self.pitch = 0.0
        self.yaw = 0.0

    def _base_rotation(self) -> np.ndarray:
        # camera-to-world rotation of the static pose
        return look_at(self.home, self.looking_at)[:3, :3].T

    def rotation(self) -> np.ndarray:
        return rotation_y(self.yaw) @ rotation_x(self.pitch) @ self._base_rotation()

    def forward(self) -> np.ndarray:
        return self.rotation() @ np.array([0.0, 0.0, -1.0], dtype=np.float32)

    def right(self) -> np.ndarray:
        return self.rotation() @ np.array([1.0, 0.0, 0.0], dtype=np.float32)

    def look(self, dx: float, dy: float, delta_time: float) -> None:
        self.pitch -= dy * delta_time * self.sensitivity
        self.yaw -= dx * delta_time * self.sensitivity
        self.pitch = max(-self.PITCH_LIMIT, min(self.PITCH_LIMIT, self.pitch))

    def move(self, directions: Iterable[str], delta_time: float) -> None:
        """``directions`` holds any of forward, back, left, right, up, down."""
        forward, right = self.forward(), self.right()
        up = np.array([0.0, 1.0, 0.0], dtype=np.float32)
        lookup = {
            "forward": forward, "back": -forward,
            "right": right, "left": -right,
            "up": up, "down": -up,
        }
        total = np.zeros(3, dtype=np.float32)
        for d in directions:
            total += lookup[d]
        n = np.linalg.norm(total)
        if n > 0:
            self.position = self.position + total / n * delta_time * self.movement_speed

    def view_matrix(self) -> np.ndarray:
        r = self.rotation()
        return homogeneous(r.T, -r.T @ self.position)
