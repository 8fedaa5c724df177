"""
Configuration for the Jarvis March tracer and its playback.

Line styles are presentation metadata only: the tracer tags each segment
with a category and never looks at these values.
"""

# ---------------------------------------------------------------
# LINE STYLES (per segment category)
# ---------------------------------------------------------------

CANDIDATE_LINE_STYLE = {"color": "red", "width": 1, "dash": "dash", "name": "Candidate"}

PROBE_LINE_STYLE = {"color": "blue", "width": 1, "dash": "dot", "name": "Probe"}


# ---------------------------------------------------------------
# PLAYBACK
# ---------------------------------------------------------------

POINT_COLOR = "black"
POINT_SIZE = 40

HULL_COLOR = "green"
HULL_WIDTH = 2

FINAL_HULL_COLOR = "purple"
FINAL_HULL_WIDTH = 3

PLAYBACK_INTERVAL_MS = 700   # milliseconds between frames
AXIS_MARGIN = 1


# ---------------------------------------------------------------
# DEMO INPUT
# ---------------------------------------------------------------

SAMPLE_POINTS = [(2, 2), (4, 1), (3, 4), (5, 3), (1, 5), (6, 5), (4, 6), (2, 7), (5, 0)]
