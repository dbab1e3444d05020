import numpy as np
import pytest

from twisty_puzzle_sdk import Mirror, MirrorFinish, create_puzzle
from twisty_puzzle_sdk.Puzzles.Mirror import (
    BOTTOM_THICKNESS,
    FRONT_THICKNESS,
    RIGHT_THICKNESS,
    TOP_THICKNESS,
)


def _world_positions(meshes):
    return np.vstack([placement.apply(mesh.positions) for mesh, placement in meshes])


def test_cubie_count_and_single_slot():
    meshes = Mirror().create_meshes()
    assert len(meshes) == 26
    for mesh, _ in meshes:
        assert mesh.vertex_count == 24
        np.testing.assert_allclose(mesh.uvs, 0.5)


def test_outer_faces_are_flush():
    points = _world_positions(Mirror().create_meshes())
    np.testing.assert_allclose(points.max(axis=0), 0.5, atol=1e-5)
    np.testing.assert_allclose(points.min(axis=0), -0.5, atol=1e-5)


def test_layers_have_unequal_thickness():
    tiles = {t.coordinate: t for t in Mirror().layout.tiles()}
    corner = tiles[(1, 1, 1)]
    assert corner.half_extents == pytest.approx((RIGHT_THICKNESS / 2, TOP_THICKNESS / 2, FRONT_THICKNESS / 2))
    assert tiles[(2, 3, 1)].half_extents[1] == pytest.approx(BOTTOM_THICKNESS / 2)
    assert TOP_THICKNESS > 3 * BOTTOM_THICKNESS


def test_finish_texture():
    assert Mirror().create_texture().data == bytes([255, 219, 157, 255])
    assert Mirror(MirrorFinish.SILVER).create_texture().data == bytes([255, 249, 244, 255])


def test_material_is_metallic():
    material = Mirror().create_material("tex")
    assert material.base_color_texture == "tex"
    assert material.perceptual_roughness == pytest.approx(0.05)
    assert material.metallic == pytest.approx(0.75)


def test_factory_ignores_dimension():
    puzzle = create_puzzle("mirror", 7, finish="silver")
    assert puzzle.dimension == 3
    assert puzzle.finish is MirrorFinish.SILVER
    assert len(puzzle.create_meshes()) == 26
