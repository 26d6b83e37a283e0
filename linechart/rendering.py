"""Draw the chart's line segments and sample markers onto a surface.

Every render restyles all primitives; there is no incremental diffing.  That
keeps the draw path trivially idempotent and is fast enough for the tens to
low thousands of samples a chart is meant to hold.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .config import ChartConfig
from .geometry import PlotPoint, to_pixel_space
from .log import get_logger
from .surface.svg import format_number
from .transform import Transform

logger = get_logger(__name__)

TransformSource = Callable[[], Transform]


@dataclass
class RenderOptions:
    line_color: str = "#00848C"
    point_fill: str = "#F1F2F2"
    group_class: str = "chart"


class ChartRenderer:
    """Render :class:`PlotPoint` s through the live transform into one group."""

    def __init__(
        self,
        surface,
        points: Sequence[PlotPoint],
        config: ChartConfig,
        transform: TransformSource,
        *,
        options: Optional[RenderOptions] = None,
    ) -> None:
        self.surface = surface
        self.points: List[PlotPoint] = list(points)
        self.config = config
        self.options = options or RenderOptions()
        self._transform = transform
        self.group = surface.append("g").attr("class", self.options.group_class)
        self.render_count = 0

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def render(self, full_clear: bool = True) -> None:
        """Redraw ``n - 1`` segments and ``n`` markers.

        With ``full_clear`` everything previously drawn is removed first;
        otherwise existing primitives are updated in place and missing ones
        appended.
        """
        if full_clear:
            self.group.clear()

        transform = self._transform()
        pixels = [to_pixel_space(p, transform, self.config) for p in self.points]

        lines = self.group.select_all("line")
        for i, ((x1, y1), (x2, y2)) in enumerate(zip(pixels, pixels[1:])):
            line = lines[i] if i < len(lines) else self.group.append("line")
            (
                line.attr("x1", x1)
                .attr("y1", y1)
                .attr("x2", x2)
                .attr("y2", y2)
                .style("stroke", self.options.line_color)
            )
        for stale in lines[max(0, len(pixels) - 1):]:
            stale.remove()

        circles = self.group.select_all("circle")
        for i, (cx, cy) in enumerate(pixels):
            circle = circles[i] if i < len(circles) else self.group.append("circle")
            (
                circle.attr("r", self.config.dimensions.point)
                .attr("cx", cx)
                .attr("cy", cy)
                .style("fill", self.options.point_fill)
            )
        for stale in circles[len(pixels):]:
            stale.remove()

        self.render_count += 1

    def translate(self, pan_x: float) -> None:
        """Apply the pan as a horizontal translation of the whole group."""
        self.group.attr("transform", f"translate({format_number(pan_x)} 0)")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def rendered_width(self) -> float:
        box = self.group.bbox()
        return box.width if box is not None else 0.0

    @property
    def segment_count(self) -> int:
        return len(self.group.select_all("line"))

    @property
    def marker_count(self) -> int:
        return len(self.group.select_all("circle"))

    def dispose(self) -> None:
        self.group.remove()


__all__ = ["ChartRenderer", "RenderOptions"]
