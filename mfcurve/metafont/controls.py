"""Turn segments with known end directions and tensions into cubic Bezier
segments, using John Hobby's velocity function."""

import logging

import numpy

from ..curve import geometry
from . import path as mfpath

logger = logging.getLogger(__name__)

SQRT2 = numpy.sqrt(2)
SQRT5 = numpy.sqrt(5)

def hobby_f(theta, phi):
    """Hobby's "velocity" function: the distance (as a fraction of the chord
    length) from an endpoint to its control point, for offset angles theta
    and phi in radians at the near and far ends, with tension 1."""
    st, ct = numpy.sin(theta), numpy.cos(theta)
    sp, cp = numpy.sin(phi), numpy.cos(phi)
    numerator = 2 + SQRT2 * (st - sp/16) * (sp - st/16) * (ct - cp)
    denominator = 3 * (1 + (SQRT5 - 1)/2 * ct + (3 - SQRT5)/2 * cp)
    return numerator / denominator

def bounding_triangle_exists(theta, phi):
    """Return True if the tangent lines at the two ends of a segment meet on
    the same side of the chord as both tangents point, so that the segment can
    be kept inside that triangle."""
    st = numpy.sign(numpy.sin(theta))
    sp = numpy.sign(numpy.sin(phi))
    return st != 0 and st == sp and st == numpy.sign(numpy.sin(theta + phi))

def _velocity(tension, hobby_value, cap, triangle):
    velocity = hobby_value / tension.tension
    if tension.at_least and triangle:
        if cap < velocity:
            logger.debug('Capping velocity %g at %g to avoid an inflection point.', velocity, cap)
        velocity = min(velocity, cap)
    return velocity

def velocities(theta, phi, join):
    """Return the velocities (as fractions of the chord length) at the start
    and end of a segment with the given offset angles and TensionJoin.

    A tension marked at_least is relaxed where necessary so that, if the two
    tangents form a bounding triangle with the chord, the control points stay
    inside it."""
    triangle = bounding_triangle_exists(theta, phi)
    if triangle:
        s = numpy.sin(theta + phi)
        cap_a, cap_b = numpy.sin(phi) / s, numpy.sin(theta) / s
    else:
        cap_a = cap_b = None
    va = _velocity(join.entry, hobby_f(theta, phi), cap_a, triangle)
    vb = _velocity(join.exit, hobby_f(phi, theta), cap_b, triangle)
    return va, vb

def control_points(z0, w0, va, vb, w1, z1):
    """Place the control points of a cubic from z0 to z1, leaving z0 in
    direction w0 and arriving at z1 in direction w1, at the given velocities
    (as fractions of the chord length)."""
    z0 = numpy.asarray(z0, dtype=float)
    z1 = numpy.asarray(z1, dtype=float)
    offset = z1 - z0
    theta = geometry.angle_between_vectors(offset, w0)
    phi = geometry.angle_between_vectors(w1, offset)
    u = z0 + geometry.rotate(offset, theta) * va
    v = z1 - geometry.rotate(offset, -phi) * vb
    return u, v

def compute_controls(segment):
    """Return the BezierSegment for a ResolvedSegment.

    If the segment already has control points, they are used as they are and
    the directions are ignored. Otherwise the control points are placed along
    the resolved directions, at distances given by hobby_f() and the tensions.
    """
    if isinstance(segment.join, mfpath.ControlJoin):
        u, v = segment.join
        return mfpath.BezierSegment(segment.start, u, v, segment.end)
    offset = mfpath.segment_offset(segment)
    theta = geometry.angle_between_vectors(offset, segment.entry)
    phi = geometry.angle_between_vectors(segment.exit, offset)
    va, vb = velocities(theta, phi, segment.join)
    u, v = control_points(segment.start, segment.entry, va, vb, segment.exit, segment.end)
    return mfpath.BezierSegment(segment.start, tuple(map(float, u)), tuple(map(float, v)), segment.end)
