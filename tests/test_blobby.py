import math

import pytest

from cpblobs.blobby import MAX_BLOB_POINTS, BlobPoint, Blobby


def _point(x=0.5, y=0.5, z=0.5, influence=1.0, speeds=(0.0, 0.0, 0.0)):
    return BlobPoint((x, y, z), influence, speeds)


def test_sample_single_point():
    blobby = Blobby([_point(influence=1.0)], density=4, target_value=1.0)
    assert blobby.sample(1.5, 0.5, 0.5) == pytest.approx(1.0)


def test_sample_is_sum_of_points():
    a = _point(0.2, 0.3, 0.4, 0.25)
    b = _point(0.7, 0.6, 0.5, 0.5)
    both = Blobby([_point(0.2, 0.3, 0.4, 0.25), _point(0.7, 0.6, 0.5, 0.5)])
    only_a = Blobby([a])
    only_b = Blobby([b])
    where = (0.1, 0.9, 0.35)
    assert both.sample(*where) == pytest.approx(only_a.sample(*where) + only_b.sample(*where))


def test_sample_decreases_with_distance():
    blobby = Blobby([_point()])
    assert blobby.sample(0.6, 0.5, 0.5) > blobby.sample(0.8, 0.5, 0.5)


def test_sample_at_centre_is_infinite():
    blobby = Blobby([_point()])
    assert blobby.sample(0.5, 0.5, 0.5) == math.inf


def test_empty_blobby_samples_zero():
    assert Blobby().sample(0.1, 0.2, 0.3) == 0.0


def test_too_many_points_raises():
    with pytest.raises(ValueError):
        Blobby([_point() for _ in range(MAX_BLOB_POINTS + 1)])


def test_animate_at_zero_ticks_centres_moving_axes():
    point = _point(0.1, 0.2, 0.3, speeds=(2.0, 0.0, -1.0))
    blobby = Blobby([point], move_scale=0.3)
    blobby.animate_points(0.0)
    assert point.position == pytest.approx((0.5, 0.2, 0.5))


def test_animate_keeps_still_axes():
    point = _point(0.1, 0.2, 0.3, speeds=(0.0, 0.0, 0.0))
    blobby = Blobby([point])
    blobby.animate_points(5.0)
    assert point.position == (0.1, 0.2, 0.3)


@pytest.mark.parametrize("ticks", [0.3, 1.7, 12.5, -4.0])
def test_animate_stays_within_move_scale(ticks):
    point = _point(speeds=(2.0, 4.0, -3.0))
    blobby = Blobby([point], move_scale=0.3)
    blobby.animate_points(ticks)
    for coord in point.position:
        assert 0.2 - 1e-9 <= coord <= 0.8 + 1e-9


def test_animate_matches_sine_motion():
    point = _point(speeds=(2.0, 0.0, 0.0))
    blobby = Blobby([point], move_scale=0.25)
    blobby.animate_points(0.7)
    assert point.position[0] == pytest.approx(math.sin(1.4) * 0.25 + 0.5)


def test_march_builds_closed_triangles():
    blobby = Blobby(
        [_point(0.5, 0.5, 0.5, 0.25), _point(0.6, 0.5, 0.5, 0.51)],
        density=8,
        target_value=24.0,
    )
    blobby.march()
    assert blobby.face_count > 0
    assert len(blobby.vertices) == 3 * blobby.face_count
    for normal in blobby.normals:
        assert math.sqrt(sum(c * c for c in normal)) == pytest.approx(1.0)