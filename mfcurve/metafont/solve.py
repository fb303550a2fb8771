"""Solve for the tangent directions at every point of a path, using John
Hobby's equations as implemented in METAFONT (mf.web, paragraphs 271-285).

Angles here are all "offset angles" in radians, measured from a segment's
chord (the straight line between its endpoints) to its tangent: a segment's
entry tangent is its chord rotated by theta, and its exit tangent is its chord
rotated by -phi. At each point between two segments, the turning angle psi
between the chords satisfies theta + phi + psi = 0, and the curvature
continuity condition gives one linear equation per point.
"""

import logging

from ..curve import geometry
from ..curve import tridiagonal
from . import defaults
from . import path as mfpath

logger = logging.getLogger(__name__)

def solve(path):
    """Fill in default directions, then solve for the remaining ones.

    Returns: a Path of ResolvedSegments, with a concrete Direction at both
        ends of every segment. Joins are left as they were.
    """
    return solve_path(defaults.fill_directions(path))

def solve_path(path):
    """Calculate the tangent direction at all points of a path whose
    directions have already been filled in with defaults.fill_directions().

    There are three cases:
        - a closed path with no directions given anywhere, which gives a
          cyclic system of equations;
        - a closed path with one or more directions given, which is cut at
          the given directions and solved as a set of lines;
        - an open path, which is cut at every given direction into lines
          that are solved independently.
    """
    segments = list(path.segments)
    if not path.closed:
        runs = group_segments(segments)
        logger.debug('Solving open path as %d line(s).', len(runs))
        resolved = [s for run in runs for s in solve_line(run)]
    elif all(s.entry is None for s in segments):
        logger.debug('Solving closed path of %d segments as a free loop.', len(segments))
        resolved = solve_loop(segments)
    else:
        runs = group_segments(segments)
        # any given entry, curl included, can start a run; a curl moved into
        # the middle of a run would be ignored by the line equations
        if runs[0][0].entry is not None:
            rotation = 0
        else:
            # the first run does not start at a known direction: join it onto
            # the end of the last run, which wraps around to it
            rotation = len(runs[0])
            runs = runs[1:-1] + [runs[-1] + runs[0]]
        logger.debug('Solving closed path as %d line(s).', len(runs))
        resolved = [s for run in runs for s in solve_line(run)]
        if rotation:
            resolved = resolved[-rotation:] + resolved[:-rotation]
    return mfpath.Path(resolved, path.closed)

def group_segments(segments):
    """Split a list of segments into runs that can each be solved as a line:
    in each run, the first segment's entry and the last segment's exit are
    given, and no other directions are.

    (Only the entries are examined: after defaults.fill_directions(), a
    segment's exit is given exactly when the next segment's entry is.)"""
    runs = []
    for segment in segments:
        if not runs or segment.entry is not None:
            runs.append([segment])
        else:
            runs[-1].append(segment)
    return runs

def _alpha(segment):
    return 1 / segment.join.entry.tension

def _beta(segment):
    return 1 / segment.join.exit.tension

def coefficients(segment):
    """Return the coefficients (a, b, c, d) that a segment contributes to the
    curvature equations at its two ends (mf.web paragraphs 272-273)."""
    alpha = _alpha(segment)
    beta = _beta(segment)
    length = mfpath.segment_length(segment)
    a = alpha / (beta**2 * length)
    b = (3 - alpha) / (beta**2 * length)
    c = (3 - beta) / (alpha**2 * length)
    d = beta / (alpha**2 * length)
    return a, b, c, d

def turning_angle(segment_in, segment_out):
    """Return the angle psi by which the chord turns from one segment to the
    following one, reduced to within half a turn."""
    angle = geometry.angle_between_vectors(mfpath.segment_offset(segment_in), mfpath.segment_offset(segment_out))
    return geometry.normalize_angle(float(angle))

def _direction_offset(spec, segment):
    """Angle from the chord of a segment to an explicit direction."""
    angle = geometry.angle_between_vectors(mfpath.segment_offset(segment), spec)
    return geometry.normalize_angle(float(angle))

def end_coefficients(segment):
    """Return the coefficients (a, c, r) of the equation
        a * theta + c * (-phi) = r
    that the direction or curl at the end of the given segment imposes on its
    offset angles theta (at the start) and phi (at the end).

    Raises PreconditionError if the end of the segment has neither a
    direction nor a curl."""
    spec = segment.exit
    if isinstance(spec, mfpath.Direction):
        return 0, 1, _direction_offset(spec, segment)
    elif isinstance(spec, mfpath.Curl):
        alpha = _alpha(segment)
        beta = _beta(segment)
        gamma = spec.curl
        a = (3 - beta) * beta**2 * gamma / alpha**2 + alpha
        c = beta**3 * gamma / alpha**2 + 3 - alpha
        return a, c, 0
    raise mfpath.PreconditionError('Segment ending at {} has neither a direction nor a curl at its end.'.format(segment.end))

def line_equations(segments):
    """Return (lower, diag, upper, rhs) for the tridiagonal system giving the
    offset angles along a line of two or more segments.

    The n+1 unknowns are the entry offset angle theta of each of the n
    segments, then minus the exit offset angle of the last segment. The first
    and last equations come from the direction or curl at the ends of the
    line, and the rest are the curvature equations at the interior points."""
    n = len(segments)
    psis = [turning_angle(segments[i], segments[i+1]) for i in range(n - 1)] + [0]
    a, b, c, d = zip(*[coefficients(s) for s in segments])
    first = segments[0]
    d0, c0, _ = end_coefficients(mfpath.reverse_segment(first))
    if isinstance(first.entry, mfpath.Direction):
        r0 = _direction_offset(first.entry, first)
    else:
        r0 = -d0 * psis[0]
    an, cn, rn = end_coefficients(segments[-1])
    lower = list(a[:-1]) + [an]
    diag = [c0] + [b[i] + c[i+1] for i in range(n - 1)] + [cn]
    upper = [d0] + list(d[1:])
    rhs = [r0] + [-b[i] * psis[i] - d[i+1] * psis[i+1] for i in range(n - 1)] + [rn]
    return lower, diag, upper, rhs

def line_angles(segments):
    """Return the n+1 offset angles for a line of n segments (see
    line_equations() for their meaning).

    Raises PreconditionError if segments is empty or does not have a
    direction or curl at both ends."""
    if not segments:
        raise mfpath.PreconditionError('Cannot solve a line with no segments.')
    if len(segments) > 1:
        return list(tridiagonal.solve_tridiagonal(*line_equations(segments)))
    segment = segments[0]
    if mfpath.is_curl(segment.entry) and mfpath.is_curl(segment.exit):
        return [0.0, 0.0]
    if isinstance(segment.entry, mfpath.Direction):
        theta = _direction_offset(segment.entry, segment)
        a, c, r = end_coefficients(segment)
        return list(tridiagonal.solve_tridiagonal([a], [1, c], [0], [theta, r]))
    if mfpath.is_curl(segment.entry):
        # solve from the known end instead
        return line_angles([mfpath.reverse_segment(segment)])[::-1]
    raise mfpath.PreconditionError('Segment starting at {} has neither a direction nor a curl at its start.'.format(segment.start))

def solve_line(segments):
    """Resolve the directions along a line: a list of segments where only the
    first segment's entry and the last segment's exit are given."""
    if not segments:
        raise mfpath.PreconditionError('Cannot solve a line with no segments.')
    if len(segments) == 1:
        segment = segments[0]
        if isinstance(segment.entry, mfpath.Direction) and isinstance(segment.exit, mfpath.Direction):
            return [mfpath.ResolvedSegment(*segment)]
        if isinstance(segment.join, mfpath.ControlJoin):
            # the control points decide the curve; any curl end just follows the chord
            return [set_directions(segment, 0, 0)]
    thetas = line_angles(segments)
    psis = [turning_angle(segments[i], segments[i+1]) for i in range(len(segments) - 1)] + [0]
    phis = [-(psi + theta) for psi, theta in zip(psis, thetas[1:])]
    return [set_directions(s, theta, phi) for s, theta, phi in zip(segments, thetas, phis)]

def loop_equations(segments):
    """Return (lower, diag, upper, rhs, lower_left, upper_right) for the cyclic
    tridiagonal system giving the entry offset angle of each segment of a
    closed loop with no given directions."""
    n = len(segments)
    psis = [turning_angle(segments[(i-1) % n], segments[i]) for i in range(n)]
    a, b, c, d = zip(*[coefficients(s) for s in segments])
    lower = list(a[:-1])
    diag = [b[(i-1) % n] + c[i] for i in range(n)]
    upper = list(d[:-1])
    rhs = [-b[(i-1) % n] * psis[i] - d[i] * psis[(i+1) % n] for i in range(n)]
    return lower, diag, upper, rhs, d[-1], a[-1]

def solve_loop(segments):
    """Resolve the directions around a closed loop with no given directions."""
    n = len(segments)
    if n == 0:
        return []
    thetas = tridiagonal.solve_cyclic_tridiagonal(*loop_equations(segments))
    psis = [turning_angle(segments[(i-1) % n], segments[i]) for i in range(n)]
    phis = [-(psis[(i+1) % n] + thetas[(i+1) % n]) for i in range(n)]
    return [set_directions(s, theta, phi) for s, theta, phi in zip(segments, thetas, phis)]

def set_directions(segment, theta, phi):
    """Return a ResolvedSegment with the given offset angles at its start
    (theta) and end (phi). Directions already given explicitly are kept."""
    chord = mfpath.chord_direction(segment)
    entry = segment.entry
    if not isinstance(entry, mfpath.Direction):
        entry = mfpath.direction(geometry.rotate(chord, theta))
    exit = segment.exit
    if not isinstance(exit, mfpath.Direction):
        exit = mfpath.direction(geometry.rotate(chord, -phi))
    return mfpath.ResolvedSegment(segment.start, entry, segment.join, exit, segment.end)
