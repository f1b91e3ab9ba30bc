"""Default configuration values for the Starling crop engine."""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Crop box sizing
# ---------------------------------------------------------------------------

# Upper limit for the minimum distance between two opposing crop edges.  The
# box computes a quarter of the smallest viewport dimension and caps it with
# this value so tiny images still allow a usable crop.
CROP_MIN_SIZE_PX: Final[float] = 64.0

# Radius around a corner point (and perpendicular distance to an edge) that
# still counts as touching that handle.
CROP_HANDLER_BOUNDS_PX: Final[float] = 16.0

# ---------------------------------------------------------------------------
# Auto-pan while dragging the whole box
# ---------------------------------------------------------------------------

# The raw drag delta has to exceed this distance beyond a pinned edge before
# the underlying image starts scrolling.
CROP_THRESHOLD_PX: Final[float] = 56.0

# Step size of a single auto-pan tick at zoom level 1.
CROP_BASE_TRANSLATE_PX: Final[float] = 8.0

CROP_AUTO_PAN_INTERVAL_MS: Final[int] = 100

# ---------------------------------------------------------------------------
# Auto zoom
# ---------------------------------------------------------------------------

# Holding a resize handle outside the image waits this long before the first
# zoom-out request, then repeats at the slower interval.
CROP_ZOOM_OUT_DELAY_MS: Final[int] = 500
CROP_ZOOM_OUT_REPEAT_MS: Final[int] = 1000

# A finished gesture requests a zoom-in once both box dimensions are at most
# this fraction of the viewport.
CROP_ZOOM_IN_FRACTION: Final[float] = 0.5

# After zooming in the box is enlarged to this fraction of the viewport.
CROP_SCALE_FRACTION: Final[float] = 0.75
