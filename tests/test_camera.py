import math

import numpy as np
import pytest

from twisty_puzzle_sdk.Rendering.Camera import FlyCamera, ViewRotation, look_at, perspective


def test_look_at_maps_target_onto_view_axis():
    view = look_at((0.0, 0.0, 5.0), (0.0, 0.0, 0.0))
    target = view @ np.array([0.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(target[:3], [0.0, 0.0, -5.0], atol=1e-6)


def test_perspective_depth_range():
    proj = perspective(math.radians(45.0), 4 / 3, 0.1, 100.0)
    near = proj @ np.array([0.0, 0.0, -0.1, 1.0])
    far = proj @ np.array([0.0, 0.0, -100.0, 1.0])
    assert near[2] / near[3] == pytest.approx(-1.0, abs=1e-4)
    assert far[2] / far[3] == pytest.approx(1.0, abs=1e-4)


def test_view_rotation_clamps_pitch():
    rot = ViewRotation(sensitivity=1.0)
    rot.drag(0.0, 100.0, 1.0)
    assert rot.pitch == pytest.approx(math.pi / 4)
    rot.drag(0.0, -1000.0, 1.0)
    assert rot.pitch == pytest.approx(-math.pi / 4)


def test_view_rotation_wraps_yaw():
    rot = ViewRotation(sensitivity=1.0)
    rot.drag(2.5 * math.pi, 0.0, 1.0)
    assert rot.yaw == pytest.approx(0.5 * math.pi)
    rot.drag(-5.0 * math.pi, 0.0, 1.0)
    assert abs(rot.yaw) <= 2.0 * math.pi


def test_view_rotation_starts_at_identity():
    np.testing.assert_allclose(ViewRotation().matrix(), np.eye(4))


def test_fly_camera_home_pose_matches_static_view():
    cam = FlyCamera((0.0, 0.0, 5.0), (0.0, 0.0, 0.0))
    np.testing.assert_allclose(cam.view_matrix(), look_at((0.0, 0.0, 5.0), (0.0, 0.0, 0.0)), atol=1e-6)
    np.testing.assert_allclose(cam.forward(), [0.0, 0.0, -1.0], atol=1e-6)


def test_fly_camera_moves_and_resets():
    cam = FlyCamera((0.0, 0.0, 5.0), (0.0, 0.0, 0.0), movement_speed=2.0)
    cam.move(["forward"], 1.0)
    np.testing.assert_allclose(cam.position, [0.0, 0.0, 3.0], atol=1e-6)
    cam.move(["forward", "back"], 1.0)
    np.testing.assert_allclose(cam.position, [0.0, 0.0, 3.0], atol=1e-6)
    cam.move(["up", "right"], 1.0)
    assert cam.position[1] > 0 and cam.position[0] > 0
    cam.look(10.0, 10.0, 1.0)
    cam.reset()
    np.testing.assert_allclose(cam.position, [0.0, 0.0, 5.0])
    assert cam.pitch == cam.yaw == 0.0


def test_fly_camera_pitch_limit():
    cam = FlyCamera((0.0, 0.0, 5.0), (0.0, 0.0, 0.0), sensitivity=1.0)
    cam.look(0.0, -100.0, 1.0)
    assert cam.pitch == pytest.approx(FlyCamera.PITCH_LIMIT)


def test_view_rotation_pitches_after_yaw():
    rot = ViewRotation()
    rot.pitch, rot.yaw = 0.5, 1.0
    cp, sp = math.cos(0.5), math.sin(0.5)
    cy, sy = math.cos(1.0), math.sin(1.0)
    expected = np.array([
        [cy, 0.0, sy],
        [sp * sy, cp, -sp * cy],
        [-cp * sy, sp, cp * cy],
    ])
    np.testing.assert_allclose(rot.matrix()[:3, :3], expected, atol=1e-6)
    # the puzzle's own Y axis tilts towards the viewer with the pitch
    np.testing.assert_allclose(rot.matrix()[:3, 1], [0.0, cp, sp], atol=1e-6)
