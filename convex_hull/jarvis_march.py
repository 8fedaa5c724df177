import logging

from convex_hull import geometry
from convex_hull.models import LineCategory, LineSegment, State, as_points

logger = logging.getLogger(__name__)


class WrappingError(RuntimeError):
    """The wrap failed to return to its start point."""


class _TraceRecorder:
    # Owns the hull and the recorded states for a single trace() call

    def __init__(self):
        self.hull = []
        self.states = []

    def push(self, *lines):
        self.states.append(State(lines=tuple(lines), hull=tuple(self.hull)))


def _lowest_point(points):
    # Min y, then min x; the first of equal points wins
    bottommost = points[0]
    for p in points[1:]:
        if p.y < bottommost.y or (p.y == bottommost.y and p.x < bottommost.x):
            bottommost = p
    return bottommost


def trace(points, is_ccw=geometry.is_ccw):
    """
    Runs the Jarvis March and records every step of it.

    Starts from the lowest point and, for each hull vertex, scans all points
    in input order keeping the best candidate for the next vertex. A probe p
    replaces the candidate when is_ccw(current, p, candidate) holds.

    Args:
        points: Sequence of Points or (x, y) pairs
        is_ccw: Orientation test, called once per probe

    Returns:
        List of States. The last one holds the closed hull, counter-clockwise.
        Fewer than 2 points give an empty list.
    """
    points = as_points(points)
    if len(points) < 2:
        return []

    rec = _TraceRecorder()
    start = _lowest_point(points)
    logger.debug(f"Wrapping {len(points)} points from {start}")

    current = start
    while len(rec.hull) < 2 or rec.hull[0] is not current:
        rec.hull.append(current)
        if len(rec.hull) > len(points):
            raise WrappingError(
                f"Hull grew to {len(rec.hull)} vertices from {len(points)} points "
                f"without returning to {start}"
            )
        rec.push()

        candidate = None
        for p in points:
            if p is current or p is candidate:
                continue

            if candidate is None:
                candidate = p
                rec.push(LineSegment(current, candidate, LineCategory.CANDIDATE))
                continue

            rec.push(
                LineSegment(current, candidate, LineCategory.CANDIDATE),
                LineSegment(current, p, LineCategory.PROBE),
            )
            if is_ccw(current, p, candidate):
                candidate = p
                rec.push(LineSegment(current, candidate, LineCategory.CANDIDATE))

        if candidate is None:
            raise WrappingError(f"No point other than {current} to wrap to")
        logger.debug(f"Next hull vertex after {current}: {candidate}")
        current = candidate

    rec.hull.append(current)  # close the loop
    rec.push()
    return rec.states


def final_hull(states):
    """Closed hull of a finished trace, or [] for an empty one."""
    if not states:
        return []
    return list(states[-1].hull)


def gift_wrapping(points):
    return final_hull(trace(points))
