import numpy as np
import pytest

from tessa.core.intersection import segment_intersection, segment_intersections


CASES = [
    ((0.0, -2.0), (-5.0, 2.0), (-5.0, 0.0), (-11.0, 5.0)),
    ((0.0, 0.0), (1.0, 1.0), (0.0, 1.0), (1.0, 0.0)),
    ((0.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0)),
    ((0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0)),
    ((0.0, 0.0), (2.0, 0.0), (1.0, 0.0), (3.0, 0.0)),
    ((3.0, 0.0), (1.0, 0.0), (2.0, 0.0), (4.0, 0.0)),
    ((2.0, 0.0), (4.0, 0.0), (3.0, 0.0), (1.0, 0.0)),
    ((1.0, 0.0), (4.0, 0.0), (2.0, 0.0), (3.0, 0.0)),
    ((2.0, 0.0), (3.0, 0.0), (1.0, 0.0), (4.0, 0.0)),
    ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)),
    ((0.0, 0.0), (1.0, 0.0), (0.0, 0.0), (2.0, 0.0)),
    ((0.0, 0.0), (2.0, 2.0), (1.0, 1.0), (1.0, 1.0)),
    ((1.0, 1.0), (1.0, 1.0), (0.0, 0.0), (2.0, 2.0)),
    ((0.0, 0.0), (1.0, 1.0), (1.0, 1.0), (2.0, 0.0)),
    ((0.0, 0.0), (1.0, 0.0), (0.99995, -1.0), (0.99995, 1.0)),
    ((0.0, 0.0), (3.0, 1.0), (0.0, 1.0), (3.0, 0.0)),
]


def test_matches_scalar_row_for_row():
    a1, b1, a2, b2 = (np.array(col) for col in zip(*CASES))
    mask, points = segment_intersections(a1, b1, a2, b2)
    assert mask.shape == (len(CASES),)
    assert points.shape == (len(CASES), 2) and points.dtype == np.float32
    for i, case in enumerate(CASES):
        expected = segment_intersection(*case)
        if expected is None:
            assert not mask[i], case
            assert np.all(np.isnan(points[i]))
        else:
            assert mask[i], case
            assert np.array_equal(points[i], expected), case


def test_random_segments_match_scalar():
    rng = np.random.RandomState(4)
    segs = rng.randint(-4, 5, size=(4, 300, 2)).astype(float)
    mask, points = segment_intersections(*segs)
    for i in range(segs.shape[1]):
        expected = segment_intersection(segs[0, i], segs[1, i], segs[2, i], segs[3, i])
        assert mask[i] == (expected is not None)
        if expected is not None:
            assert np.array_equal(points[i], expected)


def test_empty():
    mask, points = segment_intersections([], [], [], [])
    assert mask.shape == (0,)
    assert points.shape == (0, 2)


def test_bad_shapes():
    with pytest.raises(ValueError):
        segment_intersections([[0, 0]], [[1, 1]], [[0, 1]], [[1, 0], [2, 2]])
    with pytest.raises(ValueError):
        segment_intersections([0, 0, 1], [1, 1, 1], [0, 1, 1], [1, 0, 1])


def test_logs_summary(capture_test_logs):
    segment_intersections([[0, 0]], [[1, 1]], [[0, 1]], [[1, 0]])
    assert "segment_intersections: pairs=1 crossing=1" in capture_test_logs.getvalue()
