import numpy as np
import pytest


def _box_face_checks(mesh):
    """(normal, face centroid - body centroid) pairs, one per 4-vertex box side."""
    centroid = mesh.positions.mean(axis=0)
    for side in range(6):
        block = slice(4 * side, 4 * side + 4)
        normal = mesh.normals[block][0]
        yield normal, mesh.positions[block].mean(axis=0) - centroid


def _triangle_face_checks(mesh):
    corners = np.unique(np.round(mesh.positions, 6), axis=0)
    centroid = corners.mean(axis=0)
    for tri in mesh.indices:
        yield mesh.normals[tri[0]], mesh.positions[tri].mean(axis=0) - centroid


@pytest.fixture
def assert_outward():
    def check(mesh, kind="box"):
        faces = _box_face_checks(mesh) if kind == "box" else _triangle_face_checks(mesh)
        for normal, direction in faces:
            assert np.dot(normal, direction) > 0
    return check


@pytest.fixture
def assert_winding_matches_normals():
    def check(mesh):
        implied = mesh.triangle_normals()
        stored = mesh.normals[mesh.indices[:, 0]]
        assert np.all(np.einsum("ij,ij->i", implied, stored) > 0.999)
    return check
