import matplotlib

matplotlib.use("Agg")

import pytest

from convex_hull.models import as_points


@pytest.fixture
def square_points():
    """Square with one interior point."""
    return as_points([(0, 0), (2, 0), (2, 2), (0, 2), (1, 1)])
