"""
Convex hulls by gift wrapping (Jarvis March), with a step-by-step trace
of every candidate and probe for playback.
"""
from convex_hull.geometry import is_ccw, orientation
from convex_hull.jarvis_march import WrappingError, final_hull, gift_wrapping, trace
from convex_hull.models import LineCategory, LineSegment, LineStyle, Point, State, as_points

__all__ = [
    "LineCategory",
    "LineSegment",
    "LineStyle",
    "Point",
    "State",
    "WrappingError",
    "as_points",
    "final_hull",
    "gift_wrapping",
    "is_ccw",
    "orientation",
    "trace",
]
