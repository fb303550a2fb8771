import numpy

from . import geometry

def evaluate(bezier, t, derivative=0):
    """Evaluate a cubic Bezier curve (or its derivative) at parameter values t.

    Parameters:
        bezier: array of shape (4, d) giving the endpoints and control points
            (p0, p1, p2, p3).
        t: scalar or array of parameter values in [0, 1].
        derivative: 0 for the curve itself, 1 or 2 for its derivatives.

    Returns: array of shape (d,) for scalar t, else (len(t), d).
    """
    p0, p1, p2, p3 = numpy.asarray(bezier, dtype=float)
    t = numpy.asarray(t, dtype=float)[..., numpy.newaxis]
    s = 1 - t
    if derivative == 0:
        return s**3*p0 + 3*s**2*t*p1 + 3*s*t**2*p2 + t**3*p3
    elif derivative == 1:
        return 3*s**2*(p1 - p0) + 6*s*t*(p2 - p1) + 3*t**2*(p3 - p2)
    elif derivative == 2:
        return 6*s*(p2 - 2*p1 + p0) + 6*t*(p3 - 2*p2 + p1)
    raise ValueError('Only derivatives of order 0, 1, or 2 are supported.')

def bezier_points(beziers, num_points=None):
    """Sample a sequence of cubic Bezier curves as a polyline.

    Parameters:
        beziers: array of shape (n, 4, d): n connected cubic curves, each
            starting where the previous one ends.
        num_points: number of points to sample along each curve, including
            its endpoints, or None, which causes the code to try to guess a
            good number of points. Specifically, the code will use the length
            of the control polygon or 10, whichever is greater.

    Returns: array of shape (m, d), where the shared endpoints between
        consecutive curves are included only once.
    """
    beziers = numpy.asarray(beziers, dtype=float)
    points = []
    for i, bezier in enumerate(beziers):
        if num_points is None:
            n = max(10, int(round(geometry.cumulative_distances(bezier, unit=False)[-1])))
        else:
            n = num_points
        samples = evaluate(bezier, numpy.linspace(0, 1, n))
        if i > 0:
            samples = samples[1:]
        points.append(samples)
    return numpy.concatenate(points, axis=0)

def arc_length(beziers, num_points=None):
    """Approximate the arc-length of a sequence of cubic curves by evaluating
    them at num_points positions each and calculating the length of the
    resulting polyline. If num_points is None, try to guess a sane default."""
    points = bezier_points(beziers, num_points)
    return geometry.cumulative_distances(points, unit=False)[-1]
