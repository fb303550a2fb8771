'''
Curve
-----
Functions for computations over plane curves, approximated as polylines or as sequences of cubic Bezier segments.
 - curve.geometry: basic vector and polyline algorithms.
 - curve.tridiagonal: solve ordinary and cyclic tridiagonal linear systems (using scipy.linalg.solve_banded).
 - curve.bezier: evaluate and sample cubic Bezier curves.
 '''
