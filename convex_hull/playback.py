import logging

import matplotlib.pyplot as plt
import matplotlib.animation as animation

from convex_hull import config
from convex_hull.jarvis_march import final_hull, trace
from convex_hull.models import LineCategory, as_points

logger = logging.getLogger(__name__)

# Line style names used by the tracer -> matplotlib linestyles
DASH_PATTERNS = {"solid": "-", "dash": "--", "dot": ":", "dashdot": "-."}


def _line_kwargs(style):
    return {
        "color": style.color,
        "lw": style.width,
        "linestyle": DASH_PATTERNS.get(style.dash, "-"),
        "label": style.name,
    }


def init_artists(ax, points):
    """Creates the scatter, hull and segment artists for a point set."""
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    ax.set_xlim(min(xs) - config.AXIS_MARGIN, max(xs) + config.AXIS_MARGIN)
    ax.set_ylim(min(ys) - config.AXIS_MARGIN, max(ys) + config.AXIS_MARGIN)
    ax.set_aspect('equal', adjustable='box')
    ax.set_title("Jarvis March (Gift Wrapping) Visualization")

    artists = {
        'points': ax.scatter(xs, ys, c=config.POINT_COLOR, s=config.POINT_SIZE, label="All Points"),
        'hull': ax.plot([], [], color=config.HULL_COLOR, lw=config.HULL_WIDTH, label="Convex Hull")[0],
    }
    for category in LineCategory:
        artists[category] = ax.plot([], [], **_line_kwargs(category.style))[0]
    ax.legend(fontsize='small', loc='lower right')
    return artists


def update_artists(artists, state, final=False):
    """Draws one recorded state: the hull so far plus its active segments."""
    hull_line = artists['hull']
    hull_line.set_data([p.x for p in state.hull], [p.y for p in state.hull])
    if final:
        hull_line.set_color(config.FINAL_HULL_COLOR)
        hull_line.set_linewidth(config.FINAL_HULL_WIDTH)
    else:
        hull_line.set_color(config.HULL_COLOR)
        hull_line.set_linewidth(config.HULL_WIDTH)

    active = {line.category: line for line in state.lines}
    for category in LineCategory:
        line = active.get(category)
        if line is None:
            artists[category].set_data([], [])
        else:
            artists[category].set_data([line.start.x, line.end.x], [line.start.y, line.end.y])

    return (artists['points'], hull_line) + tuple(artists[c] for c in LineCategory)


def animate_trace(states, points, ax=None, interval=config.PLAYBACK_INTERVAL_MS):
    """
    Builds an animation with one frame per recorded state.

    The last state is drawn as the finished hull.
    """
    if not states:
        raise ValueError("Nothing to animate: the trace is empty")

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))
    artists = init_artists(ax, points)
    last = len(states) - 1

    def update(i):
        return update_artists(artists, states[i], final=(i == last))

    return animation.FuncAnimation(ax.figure,
                                   update,
                                   frames=len(states),
                                   interval=interval,
                                   blit=False,
                                   repeat=False,
                                   cache_frame_data=False)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    points = as_points(config.SAMPLE_POINTS)
    states = trace(points)
    logger.info(f"Recorded {len(states)} states for {len(points)} points")
    logger.info(f"Convex hull: {[(p.x, p.y) for p in final_hull(states)]}")

    ani = animate_trace(states, points)  # noqa: F841
    plt.tight_layout()
    plt.show()


if __name__ == '__main__':
    main()
