import math

import pytest

from oledlab.cube import (
    CUBE_EDGES,
    CUBE_VERTICES,
    color565,
    project,
    rotate,
    shaded_faces,
    wireframe_lines,
)


def test_rotate_zero_angles_is_identity():
    assert rotate(CUBE_VERTICES, 0, 0, 0) == [tuple(float(c) for c in v) for v in CUBE_VERTICES]


@pytest.mark.parametrize("angles", [(5, 2, 1), (90, 0, 0), (33, 147, 270)])
def test_rotate_preserves_length(angles):
    for original, turned in zip(CUBE_VERTICES, rotate(CUBE_VERTICES, *angles)):
        assert math.isclose(math.hypot(*original), math.hypot(*turned), rel_tol=1e-9)


def test_full_turn_returns_to_start():
    for original, turned in zip(CUBE_VERTICES, rotate(CUBE_VERTICES, 360, 360, 360)):
        for a, b in zip(original, turned):
            assert math.isclose(a, b, abs_tol=1e-9)


def test_project_origin_and_symmetry():
    points = project([(0, 0, 0), (10, 10, 0), (-10, -10, 0)], 3.0, 30.0, 20.0)
    assert points[0] == (0, 0)
    assert points[1] == (-points[2][0], -points[2][1])


def test_project_rejects_vertex_in_plane():
    with pytest.raises(ValueError):
        project([(0, 0, 33.0)], 3.0, 30.0, 20.0)


def test_wireframe_symmetric_at_rest():
    lines = wireframe_lines(0, 0, 0)
    xs = sorted({x for line in lines for x, _ in line})
    assert [84 - x for x in xs] == [x - 84 for x in reversed(xs)]


def test_color565_known_values():
    assert color565(255, 255, 255) == 0xFFFF
    assert color565(0, 0, 0) == 0
    assert color565(255, 0, 0) == 0xF800


def test_color565_rejects_out_of_range():
    with pytest.raises(ValueError):
        color565(0, 256, 0)


def test_shaded_faces_at_rest_show_front_face_only():
    faces = shaded_faces(0, 0, 0)
    assert len(faces) == 2
    assert all(shade == color565(0, 0, 255) for _, shade in faces)


def test_shaded_faces_come_in_pairs():
    faces = shaded_faces(40, 70, 15)
    assert len(faces) % 2 == 0
    assert 2 <= len(faces) <= 6
    for _, shade in faces:
        assert shade <= color565(0, 0, 255)