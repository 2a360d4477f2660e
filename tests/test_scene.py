import math

import pytest

from cpblobs.scene import (
    CUBE_VERTICES,
    Screensaver,
    gradient_background,
    look_at_lh,
    perspective_fov_lh,
    yaw_pitch_roll_matrix,
)
from cpblobs.settings import Settings

IDENTITY = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def _transform(point, matrix):
    vec = (*point, 1.0)
    return tuple(sum(vec[r] * matrix[r][c] for r in range(4)) for c in range(4))


def _flat(matrix):
    return [value for row in matrix for value in row]


def test_gradient_background_corners():
    verts = gradient_background(640, 480, 0xFF000001, 0xFF000002)
    assert len(verts) == 4
    assert [v.color for v in verts] == [0xFF000001, 0xFF000002, 0xFF000001, 0xFF000002]
    xs = sorted({v.position[0] for v in verts})
    ys = sorted({v.position[1] for v in verts})
    assert xs == [-0.5, 639.5]
    assert ys == [-0.5, 479.5]
    assert all(v.position[2:] == (0.0, 1.0) for v in verts)


def test_yaw_pitch_roll_zero_is_identity():
    matrix = yaw_pitch_roll_matrix(0.0, 0.0, 0.0)
    assert len(matrix) == 4
    assert _flat(matrix) == pytest.approx(_flat(IDENTITY), abs=1e-9)


def test_yaw_pitch_roll_is_orthonormal():
    m = yaw_pitch_roll_matrix(0.7, -1.2, 2.3)
    for i in range(3):
        for j in range(3):
            dot = sum(m[i][k] * m[j][k] for k in range(3))
            assert dot == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)


def test_yaw_rotates_x_axis():
    m = yaw_pitch_roll_matrix(math.pi / 2, 0.0, 0.0)
    x, y, z, _ = _transform((1.0, 0.0, 0.0), m)
    assert (x, y, z) == pytest.approx((0.0, 0.0, -1.0), abs=1e-9)


def test_look_at_maps_eye_to_origin():
    eye = (0.0, 0.0, -0.8)
    view = look_at_lh(eye, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert _transform(eye, view) == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=1e-9)
    assert _transform((0.0, 0.0, 0.0), view) == pytest.approx((0.0, 0.0, 0.8, 1.0), abs=1e-9)


def test_look_at_degenerate():
    with pytest.raises(ValueError):
        look_at_lh((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))


def test_perspective_depth_range():
    proj = perspective_fov_lh(math.radians(45.0), 1.33, 0.05, 100.0)
    near = _transform((0.0, 0.0, 0.05), proj)
    far = _transform((0.0, 0.0, 100.0), proj)
    assert near[2] / near[3] == pytest.approx(0.0, abs=1e-9)
    assert far[2] / far[3] == pytest.approx(1.0)


def test_perspective_errors():
    with pytest.raises(ValueError):
        perspective_fov_lh(1.0, 1.0, 5.0, 5.0)
    with pytest.raises(ValueError):
        perspective_fov_lh(1.0, 0.0, 0.1, 5.0)


def test_frames_advance_ticks():
    saver = Screensaver(Settings(density=6), 320, 240)
    first = saver.frame()
    second = saver.frame()
    assert first.ticks == 0.0
    assert second.ticks == pytest.approx(0.01)
    assert _flat(first.world) == pytest.approx(_flat(IDENTITY), abs=1e-9)
    expected = yaw_pitch_roll_matrix(0.01, 0.005, 0.0025)
    assert _flat(second.world) == pytest.approx(_flat(expected), abs=1e-9)


def test_frame_geometry_consistent():
    saver = Screensaver(Settings(density=8, target_value=10.0), 320, 240)
    frame = saver.frame()
    assert frame.face_count > 0
    assert len(frame.vertices) == 3 * frame.face_count
    assert all(-0.5 <= c <= 0.5 for v in frame.vertices for c in v.position)


def test_show_cube_selects_cube():
    frame = Screensaver(Settings(density=4), 320, 240).frame()
    assert frame.cube == CUBE_VERTICES
    assert frame.background is None


def test_hidden_cube_uses_background():
    settings = Settings(density=4, show_cube=False, bg_top_color=7, bg_bottom_color=9)
    frame = Screensaver(settings, 100, 50).frame()
    assert frame.cube is None
    assert frame.background == gradient_background(100, 50, 7, 9)