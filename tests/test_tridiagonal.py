import numpy
import pytest

from mfcurve.curve import tridiagonal


def _dense(lower, diag, upper, lower_left=0, upper_right=0):
    n = len(diag)
    matrix = numpy.diag(diag) + numpy.diag(lower, -1) + numpy.diag(upper, 1)
    matrix[-1, 0] += lower_left
    matrix[0, -1] += upper_right
    return matrix


def test_solve_tridiagonal():
    lower = [1, 2, -1, 0.5]
    diag = [4, 5, 6, 4, 3]
    upper = [1, -1, 2, 1]
    rhs = [1, 2, 3, 4, 5]
    x = tridiagonal.solve_tridiagonal(lower, diag, upper, rhs)
    numpy.testing.assert_allclose(_dense(lower, diag, upper).dot(x), rhs)


def test_solve_tridiagonal_single_equation():
    numpy.testing.assert_allclose(tridiagonal.solve_tridiagonal([], [2], [], [3]), [1.5])


def test_solve_tridiagonal_bad_shape():
    with pytest.raises(ValueError):
        tridiagonal.solve_tridiagonal([1, 1], [1, 2], [1], [1, 2])


def test_solve_tridiagonal_singular():
    with pytest.raises(numpy.linalg.LinAlgError):
        tridiagonal.solve_tridiagonal([0], [0, 0], [0], [1, 1])


@pytest.mark.parametrize('n', [2, 3, 6])
def test_solve_cyclic_tridiagonal(n):
    rng = numpy.random.RandomState(0)
    lower = rng.uniform(-1, 1, n-1)
    upper = rng.uniform(-1, 1, n-1)
    diag = rng.uniform(4, 5, n)
    rhs = rng.uniform(-1, 1, n)
    lower_left, upper_right = 0.7, -0.3
    x = tridiagonal.solve_cyclic_tridiagonal(lower, diag, upper, rhs, lower_left, upper_right)
    numpy.testing.assert_allclose(_dense(lower, diag, upper, lower_left, upper_right).dot(x), rhs)


def test_solve_cyclic_tridiagonal_uniform():
    # every equation reads x[i-1] + 4*x[i] + x[i+1] = 6
    x = tridiagonal.solve_cyclic_tridiagonal([1]*3, [4]*4, [1]*3, [6]*4, 1, 1)
    numpy.testing.assert_allclose(x, [1]*4)


def test_solve_cyclic_tridiagonal_too_small():
    with pytest.raises(ValueError):
        tridiagonal.solve_cyclic_tridiagonal([], [1], [], [1], 0, 0)
