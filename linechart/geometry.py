"""Coordinate mapping between data samples, plot space and pixel space.

Plot space is the data after vertical scaling and inversion but before the
horizontal pitch, zoom and pan are applied.  Pixel space is what ends up on
the drawing surface.  Every drawn coordinate and every hit-test goes through
the functions in this module, so they stay free of any state.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence, Tuple

from .log import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from .config import ChartConfig
    from .transform import Transform

XY = Tuple[float, float]

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Sample:
    """One raw data sample. ``x`` doubles as the sample's identity."""

    x: float
    y: float


@dataclass(frozen=True)
class PlotPoint:
    """A sample in plot space: ``x`` is passed through, ``y`` is a pixel offset."""

    x: float
    y: float


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def to_plot_space(samples: Sequence[Sample], config: "ChartConfig") -> List[PlotPoint]:
    """Scale ``samples`` to fill the vertical amplitude, larger values higher.

    When no sample rises above the baseline the scale is undefined; the line
    is then drawn flat at mid amplitude.
    """

    if not samples:
        return []
    amplitude = config.amplitude
    ys = [s.y for s in samples]
    baseline = 0.0 if config.start_from_zero else min(ys)
    value_range = max(ys) - baseline

    if value_range <= 0:
        logger.warning(
            "No value range above baseline %s across %d samples; drawing a flat line",
            baseline,
            len(samples),
        )
        return [PlotPoint(s.x, amplitude / 2.0) for s in samples]

    scale = amplitude / value_range
    points = []
    for s in samples:
        y = amplitude - (s.y - baseline) * scale
        # values under a zero baseline are pinned to the bottom edge
        points.append(PlotPoint(s.x, min(amplitude, max(0.0, y))))
    return points


def pixel_x(x: float, zoom: float, config: "ChartConfig") -> float:
    return x * config.dimensions.points_spacing * zoom + config.spacing.left


def pixel_y(y: float, config: "ChartConfig") -> float:
    return y + config.spacing.top


def to_pixel_space(point: PlotPoint, transform: "Transform", config: "ChartConfig") -> XY:
    """Return ``(px, py)`` for ``point`` before the pan translation."""
    return pixel_x(point.x, transform.zoom, config), pixel_y(point.y, config)


def index_at(px: float, zoom: float, config: "ChartConfig") -> int:
    """Invert :func:`pixel_x` to the nearest whole sample index, never below 0."""
    raw = (px - config.spacing.left) / (config.dimensions.points_spacing * zoom)
    # halves round up, as on screen
    index = int(math.floor(raw + 0.5))
    return max(0, index)


__all__ = [
    "XY",
    "Sample",
    "PlotPoint",
    "to_plot_space",
    "to_pixel_space",
    "pixel_x",
    "pixel_y",
    "index_at",
]
