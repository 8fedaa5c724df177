def orientation(p1, p2, p3):
    # Returns 1 if counter-clockwise, -1 if clockwise, 0 if collinear
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    d = (y3 - y2) * (x2 - x1) - (y2 - y1) * (x3 - x2)
    if d > 0:
        return 1
    elif d < 0:
        return -1
    else:
        return 0


def distance_sq(p1, p2):
    """Square of the distance between two points."""
    return (p1[0] - p2[0]) ** 2 + (p1[1] - p2[1]) ** 2


def is_ccw(a, b, c):
    """
    True if the turn from edge (a -> b) to edge (a -> c) is counter-clockwise.

    A collinear triple counts as a turn when b is strictly farther from a
    than c and b is not on the opposite ray from a. That covers two cases:
    b on the same ray as c, so the gift wrap keeps the farthest collinear
    point and skips the ones in between; and c coinciding with a, so any b
    distinct from a replaces a candidate sitting on the current vertex.
    """
    orient = orientation(a, b, c)
    if orient != 0:
        return orient == 1

    # c coinciding with a gives a zero dot product
    dot = (b[0] - a[0]) * (c[0] - a[0]) + (b[1] - a[1]) * (c[1] - a[1])
    if dot < 0:
        return False
    return distance_sq(a, b) > distance_sq(a, c)
