import numpy
import pytest

from mfcurve.curve import geometry


def test_cumulative_distances():
    points = [(0, 0), (3, 4), (3, 5)]
    numpy.testing.assert_allclose(geometry.cumulative_distances(points, unit=False), [0, 5, 6])
    numpy.testing.assert_allclose(geometry.cumulative_distances(points), [0, 5/6, 1])


def test_points_equal():
    assert geometry.points_equal((1, 2), (1.0, 2.0))
    assert not geometry.points_equal((1, 2), (1, 2.1))


def test_points_equal_far_from_origin():
    assert not geometry.points_equal((1e6, 0), (1e6 + 5, 0))
    assert not geometry.points_equal((1e9, 1e9), (1e9 + 1, 1e9))
    assert geometry.points_equal((1e6, 0), (1e6, 0))


def test_unit_vector():
    numpy.testing.assert_allclose(geometry.unit_vector((3, 4)), [0.6, 0.8])
    numpy.testing.assert_allclose(geometry.unit_vector([(2, 0), (0, -5)]), [(1, 0), (0, -1)])


def test_rotate():
    numpy.testing.assert_allclose(geometry.rotate((1, 0), numpy.pi/2), [0, 1], atol=1e-12)
    numpy.testing.assert_allclose(geometry.rotate([(1, 0), (0, 1)], [numpy.pi, -numpy.pi/2]),
        [(-1, 0), (1, 0)], atol=1e-12)


def test_angle_between_vectors_is_signed():
    assert geometry.angle_between_vectors((1, 0), (0, 1)) == pytest.approx(numpy.pi/2)
    assert geometry.angle_between_vectors((0, 1), (1, 0)) == pytest.approx(-numpy.pi/2)
    assert geometry.angle_between_vectors((1, 1), (2, 2)) == pytest.approx(0)


def test_angle_between_vectors_arrays():
    angles = geometry.angle_between_vectors([(1, 0), (1, 0)], [(1, 1), (1, -1)])
    numpy.testing.assert_allclose(angles, [numpy.pi/4, -numpy.pi/4])


def test_normalize_angle():
    assert geometry.normalize_angle(0.5) == 0.5
    assert geometry.normalize_angle(numpy.pi) == numpy.pi
    assert geometry.normalize_angle(-numpy.pi) == pytest.approx(numpy.pi)
    assert geometry.normalize_angle(-3*numpy.pi) == pytest.approx(numpy.pi)
    assert geometry.normalize_angle(1.5*numpy.pi) == pytest.approx(-0.5*numpy.pi)
    assert geometry.normalize_angle(-1.5*numpy.pi) == pytest.approx(0.5*numpy.pi)
    assert geometry.normalize_angle(4.5*numpy.pi) == pytest.approx(0.5*numpy.pi)
