import numpy
from scipy import linalg

def solve_tridiagonal(lower, diag, upper, rhs):
    """Solve a tridiagonal system of n linear equations.

    Parameters:
        lower: n-1 sub-diagonal coefficients; lower[i] multiplies x[i] in
            equation i+1.
        diag: n diagonal coefficients.
        upper: n-1 super-diagonal coefficients; upper[i] multiplies x[i+1]
            in equation i.
        rhs: n right-hand-side values.

    Returns: array of shape (n,) containing the solution x.

    Raises numpy.linalg.LinAlgError if the system is singular.
    """
    diag = numpy.asarray(diag, dtype=float)
    n = len(diag)
    lower = numpy.asarray(lower, dtype=float)
    upper = numpy.asarray(upper, dtype=float)
    if len(lower) != n - 1 or len(upper) != n - 1 or len(rhs) != n:
        raise ValueError('Tridiagonal system needs n diagonal and right-hand-side values, and n-1 off-diagonal values.')
    # pack the matrix into the (upper, diagonal, lower) band format used by LAPACK
    bands = numpy.zeros((3, n), dtype=float)
    bands[0, 1:] = upper
    bands[1] = diag
    bands[2, :-1] = lower
    return linalg.solve_banded((1, 1), bands, numpy.asarray(rhs, dtype=float))

def solve_cyclic_tridiagonal(lower, diag, upper, rhs, lower_left, upper_right):
    """Solve a cyclic tridiagonal system of n >= 2 linear equations.

    The coefficients are as for solve_tridiagonal(), plus two corner values:
    lower_left multiplies x[0] in the last equation and upper_right multiplies
    x[n-1] in the first. (For n == 2 the corners simply add to the off-diagonal
    terms.)

    The cyclic system is reduced to two ordinary tridiagonal solves with the
    Sherman-Morrison formula.

    Raises numpy.linalg.LinAlgError if the system is singular.
    """
    diag = numpy.array(diag, dtype=float)
    n = len(diag)
    if n < 2:
        raise ValueError('A cyclic tridiagonal system needs at least two equations.')
    gamma = -diag[0] if diag[0] != 0 else -1.0
    diag[0] -= gamma
    diag[-1] -= lower_left * upper_right / gamma
    u = numpy.zeros(n)
    u[0] = gamma
    u[-1] = lower_left
    v = numpy.zeros(n)
    v[0] = 1
    v[-1] = upper_right / gamma
    y = solve_tridiagonal(lower, diag, upper, rhs)
    z = solve_tridiagonal(lower, diag, upper, u)
    denominator = 1 + v.dot(z)
    if denominator == 0:
        raise numpy.linalg.LinAlgError('Singular cyclic tridiagonal system.')
    return y - (v.dot(y) / denominator) * z
