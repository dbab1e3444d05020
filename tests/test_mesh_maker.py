import math

import numpy as np
import pytest

from twisty_puzzle_sdk.Geometry import MeshMaker
from twisty_puzzle_sdk.PuzzleDataTypes import Face

SIX_SIDES = (0, 1, 2, 3, 4, 5)


def test_box_counts():
    mesh = MeshMaker.create_box((0.5, 0.5, 0.5), SIX_SIDES, 7)
    assert mesh.positions.shape == (24, 3)
    assert mesh.normals.shape == (24, 3)
    assert mesh.uvs.shape == (24, 2)
    assert mesh.indices.size == 36
    assert mesh.indices.max() < 24
    assert mesh.colors is None


@pytest.mark.parametrize("half", [(0.5, 0.5, 0.5), (0.1, 0.2, 0.3), (0.02, 0.4, 0.05)])
def test_box_faces_point_outward(half, assert_outward, assert_winding_matches_normals):
    mesh = MeshMaker.create_box(half, SIX_SIDES, 7)
    assert_outward(mesh)
    assert_winding_matches_normals(mesh)
    np.testing.assert_allclose(mesh.positions.max(axis=0), half, rtol=1e-6)
    np.testing.assert_allclose(mesh.positions.min(axis=0), np.negative(half), rtol=1e-6)


def test_box_side_normals_follow_face_order():
    mesh = MeshMaker.create_box((0.5, 0.5, 0.5), SIX_SIDES, 7)
    for face in Face:
        np.testing.assert_allclose(mesh.normals[4 * face:4 * face + 4], [face.normal] * 4)


def test_box_uvs_sample_slot_centres():
    color_map = (0, 6, 2, 6, 4, 6)
    mesh = MeshMaker.create_box((0.1, 0.1, 0.1), color_map, 7)
    for side, slot in enumerate(color_map):
        block = mesh.uvs[4 * side:4 * side + 4]
        np.testing.assert_allclose(block[:, 0], (slot + 0.5) / 7, rtol=1e-6)
        np.testing.assert_allclose(block[:, 1], 0.5 / 7, rtol=1e-6)


def test_box_single_slot_atlas():
    mesh = MeshMaker.create_box((0.2, 0.2, 0.2), (0,) * 6, 1)
    np.testing.assert_allclose(mesh.uvs, 0.5)


@pytest.mark.parametrize("half, color_map, slots", [
    ((0.5, 0.5), SIX_SIDES, 7),
    ((0.5, 0.0, 0.5), SIX_SIDES, 7),
    ((0.5, 0.5, 0.5), (0, 1, 2), 7),
    ((0.5, 0.5, 0.5), (0, 1, 2, 3, 4, 7), 7),
    ((0.5, 0.5, 0.5), SIX_SIDES, 0),
])
def test_box_rejects_bad_input(half, color_map, slots):
    with pytest.raises(ValueError):
        MeshMaker.create_box(half, color_map, slots)


def _edge_lengths(mesh):
    corners = np.unique(np.round(mesh.positions, 5), axis=0)
    lengths = set()
    for tri in mesh.positions.reshape(-1, 3, 3):
        for i in range(3):
            lengths.add(round(float(np.linalg.norm(tri[i] - tri[(i + 1) % 3])), 5))
    return corners, lengths


FOUR_COLORS = [(1, 0, 0, 1), (0, 1, 0, 1), (0, 0, 1, 1), (1, 1, 0, 1)]


def test_tetrahedron_shape(assert_outward, assert_winding_matches_normals):
    mesh = MeshMaker.create_tetrahedron(FOUR_COLORS)
    assert mesh.positions.shape == (12, 3)
    assert mesh.triangle_count == 4
    assert mesh.uvs is None
    assert_outward(mesh, kind="triangles")
    assert_winding_matches_normals(mesh)

    corners, lengths = _edge_lengths(mesh)
    assert len(corners) == 4
    assert lengths == {1.0}

    height = math.sqrt(6.0) / 3.0
    assert mesh.positions[:, 1].min() == pytest.approx(-height / 2, abs=1e-6)
    assert mesh.positions[:, 1].max() == pytest.approx(height / 2, abs=1e-6)


def test_tetrahedron_face_colors_and_bottom():
    mesh = MeshMaker.create_tetrahedron(FOUR_COLORS)
    for face, rgba in enumerate(FOUR_COLORS):
        np.testing.assert_allclose(mesh.colors[3 * face:3 * face + 3], [rgba] * 3)
    np.testing.assert_allclose(mesh.normals[0], (0.0, -1.0, 0.0), atol=1e-6)


def test_tetrahedron_vertices():
    back, left, right, apex, height = MeshMaker.tetrahedron_vertices(2.0)
    assert height == pytest.approx(2.0 / 3.0 * math.sqrt(6.0))
    assert np.linalg.norm(left - right) == pytest.approx(2.0)
    assert np.linalg.norm(apex - back) == pytest.approx(2.0)
    np.testing.assert_allclose((back + left + right) / 3.0, 0.0, atol=1e-12)


def test_bipyramid_shape(assert_outward, assert_winding_matches_normals):
    colors = FOUR_COLORS[:3] + [FOUR_COLORS[3]] * 3
    mesh = MeshMaker.create_bipyramid(colors)
    assert mesh.positions.shape == (18, 3)
    assert mesh.triangle_count == 6
    assert_outward(mesh, kind="triangles")
    assert_winding_matches_normals(mesh)

    corners, lengths = _edge_lengths(mesh)
    assert len(corners) == 5
    assert lengths == {1.0}

    height = math.sqrt(6.0) / 3.0
    assert mesh.positions[:, 1].max() == pytest.approx(height, abs=1e-6)
    assert mesh.positions[:, 1].min() == pytest.approx(-height, abs=1e-6)
    assert np.all(mesh.normals[9:, 1] < 0)
    np.testing.assert_allclose(mesh.colors[9:], [FOUR_COLORS[3]] * 9)


def test_polyhedra_need_one_colour_per_face():
    with pytest.raises(ValueError):
        MeshMaker.create_tetrahedron(FOUR_COLORS[:3])
    with pytest.raises(ValueError):
        MeshMaker.create_bipyramid(FOUR_COLORS)


def test_side_faces_are_anchored_at_the_apex():
    mesh = MeshMaker.create_tetrahedron(FOUR_COLORS)
    apex = mesh.positions[:, 1].max()
    for face in range(1, 4):
        assert mesh.positions[3 * face, 1] == pytest.approx(apex)

    mesh = MeshMaker.create_bipyramid(FOUR_COLORS[:3] + [FOUR_COLORS[3]] * 3)
    np.testing.assert_allclose(mesh.positions[0:9:3, 1], mesh.positions[:, 1].max())
    np.testing.assert_allclose(mesh.positions[9::3, 1], mesh.positions[:, 1].min())
