import numpy

def cumulative_distances(points, unit=True):
    """Return cumulative distances along a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths."""
    points = numpy.asarray(points, dtype=float)
    distances = numpy.concatenate([[0], numpy.add.accumulate(numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1)))])
    if unit:
        distances /= distances[-1]
    return distances

def points_equal(p0, p1):
    """Return True if two points coincide, up to floating-point noise. The
    tolerance is absolute, so it does not grow with distance from the origin."""
    return numpy.allclose(p0, p1, rtol=0)

def unit_vector(v):
    """Return the vector (or array of shape (n,2) of vectors) scaled to unit length."""
    v = numpy.asarray(v, dtype=float)
    return v / numpy.sqrt((v**2).sum(axis=-1, keepdims=True))

def rotate(v, angle):
    """Rotate 2d vector(s) counterclockwise by angle (in radians).

    v may be a single vector of shape (2) or an array of shape (n,2); angle
    may be a scalar or an array of n angles."""
    v = numpy.asarray(v, dtype=float)
    c = numpy.cos(angle)
    s = numpy.sin(angle)
    return numpy.stack([c*v[...,0] - s*v[...,1], s*v[...,0] + c*v[...,1]], axis=-1)

def angle_between_vectors(v_from, v_to):
    """Calculate the signed angle in radians from v_from to v_to: that is,
    the angle by which v_from must be rotated counterclockwise to point along
    v_to. Works on single 2d vectors or on arrays of shape (n,2).

    The result lies in [-pi, pi]."""
    v_from = numpy.asarray(v_from, dtype=float)
    v_to = numpy.asarray(v_to, dtype=float)
    cross = v_from[...,0]*v_to[...,1] - v_from[...,1]*v_to[...,0]
    return numpy.arctan2(cross, (v_from * v_to).sum(axis=-1))

def normalize_angle(angle):
    """Reduce an angle in radians to lie within half a turn of zero.

    The result lies in (-pi, pi]: a reversal is always a turn of +pi, whichever
    way round it was measured."""
    turns = angle / (2*numpy.pi)
    if abs(turns) > 0.5:
        angle -= 2*numpy.pi*numpy.round(turns)
    if angle <= -numpy.pi:
        angle += 2*numpy.pi
    return angle
