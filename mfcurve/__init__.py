'''
# mfcurve

Python modules for constructing smooth curves through points with John Hobby's
algorithm, as used in METAFONT and MetaPost.

Curve
-----
Functions for computations over plane curves, approximated as polylines or as sequences of cubic Bezier segments.
 - curve.geometry: basic vector and polyline algorithms.
 - curve.tridiagonal: solve ordinary and cyclic tridiagonal linear systems (using scipy.linalg.solve_banded).
 - curve.bezier: evaluate and sample cubic Bezier curves.

Metafont
--------
Fit piecewise-cubic curves through points given sparse tangent directions, curls, and tensions.
 - metafont.path: immutable path, segment, direction, and tension types, and make\_path() to build a path from points.
 - metafont.defaults: fill in unspecified directions with deterministic default rules.
 - metafont.solve: solve Hobby's curvature equations for the remaining tangent directions.
 - metafont.controls: turn tangent directions and tensions into Bezier control points.

Example:
    from mfcurve import metafont
    beziers = metafont.hobby_curve([(0, 0), (1, 1), (2, 0)], directions={0: (0, 1)})
'''
