import numpy
import pytest

from mfcurve.curve import bezier

LINE = [(0, 0), (1, 0), (2, 0), (3, 0)]
HUMP = [(0, 0), (0, 1), (1, 1), (1, 0)]


def test_evaluate_endpoints():
    numpy.testing.assert_allclose(bezier.evaluate(HUMP, 0), [0, 0])
    numpy.testing.assert_allclose(bezier.evaluate(HUMP, 1), [1, 0])
    numpy.testing.assert_allclose(bezier.evaluate(HUMP, 0.5), [0.5, 0.75])


def test_evaluate_array():
    points = bezier.evaluate(LINE, [0, 0.25, 0.5, 1])
    numpy.testing.assert_allclose(points, [(0, 0), (0.75, 0), (1.5, 0), (3, 0)])


def test_evaluate_derivatives():
    numpy.testing.assert_allclose(bezier.evaluate(HUMP, 0, derivative=1), [0, 3])
    numpy.testing.assert_allclose(bezier.evaluate(HUMP, 1, derivative=1), [0, -3])
    numpy.testing.assert_allclose(bezier.evaluate(LINE, 0.3, derivative=2), [0, 0], atol=1e-12)
    with pytest.raises(ValueError):
        bezier.evaluate(HUMP, 0, derivative=3)


def test_bezier_points_shares_endpoints():
    second = [(3, 0), (4, 0), (5, 0), (6, 0)]
    points = bezier.bezier_points([LINE, second], num_points=4)
    assert points.shape == (7, 2)
    numpy.testing.assert_allclose(points[:, 0], [0, 1, 2, 3, 4, 5, 6])


def test_arc_length():
    assert bezier.arc_length([LINE]) == pytest.approx(3)
    assert bezier.arc_length([HUMP], num_points=500) == pytest.approx(2, rel=0.1)
