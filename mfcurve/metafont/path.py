import collections
import collections.abc
import numbers

import numpy

from ..curve import geometry

DEFAULT_TENSION = 1
DEFAULT_CURL = 1

class PreconditionError(ValueError):
    """Raised when the solver is handed a path that the direction-filling
    stage should have made impossible (e.g. a line run with no direction or
    curl at one of its ends)."""
    pass

Curl = collections.namedtuple('Curl', ('curl',))
Curl.__doc__ = """Curl boundary condition at one end of a segment.

A curl of 1 (the default) makes the curve near the endpoint approximate a
circular arc; larger values make the curve bend more near the end and smaller
values make it straighter."""

Direction = collections.namedtuple('Direction', ('x', 'y'))
Direction.__doc__ = """Explicit unit tangent direction at one end of a segment.
Use direction() or angle_direction() to construct one from an arbitrary vector or angle."""

Tension = collections.namedtuple('Tension', ('tension', 'at_least'))
Tension.__new__.__defaults__ = (False,)
Tension.__doc__ = """Tension at one end of a segment. If at_least is True, the
tension may be increased automatically to keep the segment from acquiring an
inflection point where the tangents form a bounding triangle."""

TensionJoin = collections.namedtuple('TensionJoin', ('entry', 'exit'))
TensionJoin.__doc__ = """Unresolved join: a pair of Tensions for the start and end of a segment."""

ControlJoin = collections.namedtuple('ControlJoin', ('u', 'v'))
ControlJoin.__doc__ = """Resolved join: the two explicit control points of a cubic segment."""

Segment = collections.namedtuple('Segment', ('start', 'entry', 'join', 'exit', 'end'))
Segment.__doc__ = """One segment of a path before solving.

start, end: (x, y) points
entry, exit: None (unspecified), Curl, or Direction at the start and end
join: TensionJoin or ControlJoin. If a ControlJoin is given, the control points
    take precedence over any entry or exit direction."""

ResolvedSegment = collections.namedtuple('ResolvedSegment', ('start', 'entry', 'join', 'exit', 'end'))
ResolvedSegment.__doc__ = """A segment whose entry and exit are both concrete Direction values."""

BezierSegment = collections.namedtuple('BezierSegment', ('start', 'u', 'v', 'end'))
BezierSegment.__doc__ = """Cubic Bezier segment: two endpoints and two control points.
numpy.array(bezier_segment) gives the (4, 2) control polygon."""

class Path(collections.namedtuple('Path', ('segments', 'closed'))):
    """Ordered sequence of segments (Segment, ResolvedSegment or BezierSegment)
    and a flag stating whether the path is a closed loop.

    For a closed path, the last segment must end where the first one starts.
    """
    __slots__ = ()

    def __new__(cls, segments, closed=False):
        segments = tuple(segments)
        if closed and segments and not geometry.points_equal(segments[-1].end, segments[0].start):
            raise ValueError('A closed path must end at the point where it starts.')
        return super().__new__(cls, segments, bool(closed))

def direction(vector):
    """Return the Direction of a non-zero 2d vector."""
    vector = numpy.asarray(vector, dtype=float)
    if not numpy.any(vector):
        raise ValueError('Cannot take the direction of a zero-length vector.')
    x, y = geometry.unit_vector(vector)
    return Direction(float(x), float(y))

def angle_direction(degrees):
    """Return the Direction making the given angle (in degrees) with the x-axis."""
    radians = numpy.deg2rad(degrees)
    return Direction(float(numpy.cos(radians)), float(numpy.sin(radians)))

def is_curl(spec):
    return isinstance(spec, Curl)

def segment_offset(segment):
    """Return the chord vector from the start to the end of a segment."""
    return numpy.subtract(segment.end, segment.start, dtype=float)

def segment_length(segment):
    return float(numpy.sqrt((segment_offset(segment)**2).sum()))

def chord_direction(segment):
    """Return the unit vector along the chord of a segment. Zero-length chords
    only survive in control-joined segments, whose directions are not used for
    anything, so they get the x-axis."""
    offset = segment_offset(segment)
    length = numpy.sqrt((offset**2).sum())
    if length == 0:
        return numpy.array([1.0, 0.0])
    return offset / length

def _reverse_direction(spec):
    if isinstance(spec, Direction):
        return Direction(-spec.x, -spec.y)
    return spec

def reverse_segment(segment):
    """Reverse a segment: swap its endpoints, swap and negate its directions,
    and swap the tensions or control points of its join."""
    join = segment.join
    if isinstance(join, TensionJoin):
        join = TensionJoin(join.exit, join.entry)
    else:
        join = ControlJoin(join.v, join.u)
    return type(segment)(segment.end, _reverse_direction(segment.exit), join,
        _reverse_direction(segment.entry), segment.start)

def reverse_path(path):
    """Return the path traversed in the opposite order."""
    if path.segments and isinstance(path.segments[0], BezierSegment):
        segments = [BezierSegment(s.end, s.v, s.u, s.start) for s in reversed(path.segments)]
    else:
        segments = [reverse_segment(s) for s in reversed(path.segments)]
    return Path(segments, path.closed)

def _as_point(point):
    x, y = point
    return (float(x), float(y))

def _as_tension(value):
    if isinstance(value, Tension):
        tension = value
    else:
        tension = Tension(value)
    if not tension.tension > 0:
        raise ValueError('Tensions must be positive, not {}.'.format(tension.tension))
    return tension

def _as_tension_join(value):
    if isinstance(value, TensionJoin):
        entry, exit = value
    elif isinstance(value, (numbers.Number, Tension)):
        entry = exit = value
    else:
        entry, exit = value
    return TensionJoin(_as_tension(entry), _as_tension(exit))

def _as_direction_spec(value):
    if value is None or isinstance(value, Direction):
        return value
    if isinstance(value, Curl):
        if not value.curl > 0:
            raise ValueError('Curl values must be positive, not {}.'.format(value.curl))
        return value
    return direction(value)

def make_path(points, closed=False, directions=None, tensions=None, controls=None):
    """Construct a Path through a sequence of points.

    Parameters:
        points: sequence of n (x, y) points. For a closed path, do not repeat
            the first point at the end: the closing segment from the last
            point back to the first is added automatically.
        closed: if True, construct a closed loop.
        directions: optional mapping from point index to a direction spec,
            which is applied to both sides of that point. A spec may be a
            Curl, a Direction, or any non-zero (x, y) vector.
        tensions: tension for every segment (a number, Tension, or an
            (entry, exit) pair of either), or a mapping from segment index to
            such a value. Segments without a given tension get DEFAULT_TENSION
            at both ends.
        controls: optional mapping from segment index to an explicit (u, v)
            pair of control points for that segment.

    Returns: Path
    """
    points = [_as_point(p) for p in points]
    if len(points) < 2:
        raise ValueError('A path needs at least two points.')
    if closed:
        points.append(points[0])
    n = len(points) - 1
    directions = {} if directions is None else directions
    controls = {} if controls is None else controls
    if tensions is None:
        tensions = {}
    elif not isinstance(tensions, collections.abc.Mapping):
        tensions = {i: tensions for i in range(n)}
    point_specs = [None] * len(points)
    for i, spec in directions.items():
        point_specs[i] = _as_direction_spec(spec)
    if closed:
        # the first and last entries of points are the same knot
        point_specs[-1] = point_specs[0]
    segments = []
    for i in range(n):
        if i in controls:
            u, v = controls[i]
            join = ControlJoin(_as_point(u), _as_point(v))
        else:
            join = _as_tension_join(tensions.get(i, DEFAULT_TENSION))
        segments.append(Segment(points[i], point_specs[i], join, point_specs[i+1], points[i+1]))
    return Path(segments, closed)
