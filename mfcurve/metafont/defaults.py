"""Fill in unspecified directions of a Path before solving.

The rules, applied in this order, are:

1. An empty direction at the start or end of an open path becomes curl 1.
   (Closed paths have no start or end.)
2. For a closed path, if exactly one of the first segment's entry and the
   last segment's exit is given, it is copied to the other.
3. A segment with explicit control points u, v between z0 and z1 gets the
   direction of u - z0 at its start and z1 - v at its end, or curl 1 where the
   control point coincides with the endpoint. A segment with coincident
   endpoints is first turned into such a segment, with both control points at
   the knot.
4. Where a segment's exit is empty and the next segment's entry is given, the
   entry is copied back into the exit.
5. Where a segment's exit is given and the next segment's entry is empty, the
   exit is copied forward into the entry.
"""

import numpy

from ..curve import geometry
from . import path as mfpath

def fill_directions(path):
    """Return a copy of path with as many empty directions filled in as
    possible, following the rules given in the module docstring."""
    path = copy_loop_directions(curl_ends(path))
    segments = [control_point_directions(collapse_coincident(s)) for s in path.segments]
    segments = copy_directions_back(segments, path.closed)
    segments = copy_directions_forward(segments, path.closed)
    return path._replace(segments=tuple(segments))

def _curl_if_empty(spec):
    if spec is None:
        return mfpath.Curl(mfpath.DEFAULT_CURL)
    return spec

def curl_ends(path):
    """Set empty directions at the two ends of an open path to curl 1."""
    if path.closed or not path.segments:
        return path
    segments = list(path.segments)
    segments[0] = segments[0]._replace(entry=_curl_if_empty(segments[0].entry))
    segments[-1] = segments[-1]._replace(exit=_curl_if_empty(segments[-1].exit))
    return path._replace(segments=tuple(segments))

def copy_loop_directions(path):
    """For a closed path, copy a direction given on only one side of the
    starting point to the other side."""
    if not path.closed or not path.segments:
        return path
    first, last = path.segments[0], path.segments[-1]
    if first.entry is not None and last.exit is None:
        last = last._replace(exit=first.entry)
    elif first.entry is None and last.exit is not None:
        first = first._replace(entry=last.exit)
    else:
        return path
    if len(path.segments) == 1:
        segments = (first._replace(exit=last.exit),)
    else:
        segments = (first,) + path.segments[1:-1] + (last,)
    return path._replace(segments=segments)

def collapse_coincident(segment):
    """Replace a tension-joined segment that starts and ends at the same
    point with one whose control points both sit on that point."""
    if isinstance(segment.join, mfpath.TensionJoin) and geometry.points_equal(segment.start, segment.end):
        return segment._replace(join=mfpath.ControlJoin(segment.start, segment.start))
    return segment

def _control_direction(p0, p1):
    if geometry.points_equal(p0, p1):
        return mfpath.Curl(mfpath.DEFAULT_CURL)
    return mfpath.direction(numpy.subtract(p1, p0))

def control_point_directions(segment):
    """Derive the directions at both ends of a control-joined segment from
    its control points."""
    if not isinstance(segment.join, mfpath.ControlJoin):
        return segment
    u, v = segment.join
    return segment._replace(entry=_control_direction(segment.start, u),
        exit=_control_direction(v, segment.end))

def _adjacent_pairs(n, closed):
    """Indices (i, j) of each segment and the segment following it; for a
    closed path this includes the pair across the starting point."""
    pairs = [(i, i+1) for i in range(n - 1)]
    if closed and n > 1:
        pairs.append((n - 1, 0))
    return pairs

def copy_directions_back(segments, closed=False):
    """Copy each given entry direction into an empty exit direction of the
    preceding segment."""
    segments = list(segments)
    for i, j in _adjacent_pairs(len(segments), closed):
        if segments[i].exit is None and segments[j].entry is not None:
            segments[i] = segments[i]._replace(exit=segments[j].entry)
    return segments

def copy_directions_forward(segments, closed=False):
    """Copy each given exit direction into an empty entry direction of the
    following segment."""
    segments = list(segments)
    for i, j in _adjacent_pairs(len(segments), closed):
        if segments[i].exit is not None and segments[j].entry is None:
            segments[j] = segments[j]._replace(entry=segments[i].exit)
    return segments
