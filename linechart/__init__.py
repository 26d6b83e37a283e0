"""Top-level package for the interactive line chart.

The package maps data samples to pixels, keeps the horizontal pan/zoom state
in bounds, resolves hover positions to samples and draws everything onto an
SVG surface that the NiceGUI page and the HTTP service can display.
"""

from .config import ChartConfig, ChartConfigurationError, Dimensions, Margin
from .geometry import PlotPoint, Sample
from .chart import LineChart
from .surface import SvgSurface

__all__ = [
    "ChartConfig",
    "ChartConfigurationError",
    "Dimensions",
    "Margin",
    "PlotPoint",
    "Sample",
    "LineChart",
    "SvgSurface",
]
