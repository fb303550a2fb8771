'''
Metafont
--------
Fit piecewise-cubic curves through points given sparse tangent directions, curls, and tensions.
 - metafont.path: immutable path, segment, direction, and tension types, and make\_path() to build a path from points.
 - metafont.defaults: fill in unspecified directions with deterministic default rules.
 - metafont.solve: solve Hobby's curvature equations for the remaining tangent directions.
 - metafont.controls: turn tangent directions and tensions into Bezier control points.
'''

import collections

import numpy

from . import controls
from . import path
from . import solve

BezierPath = collections.namedtuple('BezierPath', ('beziers', 'closed'))

def hobby_path(mf_path):
    """Solve a Path all the way to Bezier control points.

    Returns: a Path of BezierSegments.
    """
    resolved = solve.solve(mf_path)
    return path.Path([controls.compute_controls(s) for s in resolved.segments], resolved.closed)

def to_beziers(bezier_path):
    """Convert a Path of BezierSegments into a BezierPath whose beziers
    attribute is an array of shape (n, 4, 2): the control polygon
    (start, u, v, end) of each of the n cubic segments."""
    beziers = numpy.array([numpy.array(s, dtype=float) for s in bezier_path.segments], dtype=float).reshape(-1, 4, 2)
    return BezierPath(beziers, bezier_path.closed)

def hobby_curve(points, closed=False, directions=None, tensions=None, controls=None):
    """Fit a smooth curve through the given points with Hobby's algorithm.

    Parameters are as for path.make_path(): points is a sequence of (x, y)
    points, closed determines whether the curve is a loop back to the first
    point, directions maps point indices to tangent directions or Curl values,
    tensions gives the segment tensions, and controls maps segment indices to
    explicit (u, v) control-point pairs.

    Returns: array of shape (n, 4, 2) containing the control polygon of each
        of the n cubic Bezier segments of the curve.
    """
    mf_path = path.make_path(points, closed, directions, tensions, controls)
    return to_beziers(hobby_path(mf_path)).beziers
