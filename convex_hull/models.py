"""
Data model for a traced gift wrap.

Points compare by identity: two input points with the same coordinates are
still two different points, and the tracer tells them apart with `is`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from convex_hull import config


@dataclass(frozen=True, eq=False)
class Point:
    x: float
    y: float
    index: Optional[int] = None  # position in the input sequence

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self):
        return 2

    def __getitem__(self, i):
        return (self.x, self.y)[i]

    def __repr__(self):
        return f"Point({self.x}, {self.y}, index={self.index})"


def as_points(points):
    """
    Wraps raw (x, y) pairs into Points, in input order.

    Entries that already are Points are kept as they are, so identities the
    caller holds on to stay valid in the trace.
    """
    wrapped = []
    for i, p in enumerate(points):
        if isinstance(p, Point):
            wrapped.append(p)
            continue
        try:
            size = len(p)
        except TypeError:
            size = None
        if size != 2:
            raise ValueError(f"Point {i} is not an (x, y) pair: {p!r}")
        wrapped.append(Point(p[0], p[1], index=i))
    return wrapped


@dataclass(frozen=True)
class LineStyle:
    color: str
    width: float
    dash: str
    name: str


class LineCategory(Enum):
    CANDIDATE = "candidate"
    PROBE = "probe"

    @property
    def style(self) -> LineStyle:
        return _LINE_STYLES[self]


_LINE_STYLES = {
    LineCategory.CANDIDATE: LineStyle(**config.CANDIDATE_LINE_STYLE),
    LineCategory.PROBE: LineStyle(**config.PROBE_LINE_STYLE),
}


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point
    category: LineCategory

    @property
    def style(self) -> LineStyle:
        return self.category.style

    def to_dict(self):
        return {
            "points": [[self.start.x, self.start.y], [self.end.x, self.end.y]],
            "category": self.category.value,
        }


@dataclass(frozen=True)
class State:
    """
    One recorded step of the gift wrap.

    Attributes:
        lines: Active segments (none, the candidate, or candidate and probe)
        hull: Snapshot of the hull accumulated so far
    """
    lines: Tuple[LineSegment, ...]
    hull: Tuple[Point, ...]

    def to_dict(self):
        return {
            "lines": [line.to_dict() for line in self.lines],
            "hull": [[p.x, p.y] for p in self.hull],
        }
