"""Hover guide line and tooltip box."""
from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .config import TooltipSize
from .geometry import Sample
from .surface.svg import format_number

TOOLTIP_GAP = 3.0
EDGE_MARGIN = 8.0


def format_value(value: float) -> str:
    """Lossless text for a sample value: ``7`` for whole numbers, else ``repr``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class OverlayState(str, Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"


def tooltip_position(mouse_x: float, mouse_y: float, size: TooltipSize) -> Tuple[float, float]:
    """Place the tooltip up-left of the pointer, flipping near the top or left edge."""
    x = mouse_x - size.width - TOOLTIP_GAP
    y = mouse_y - size.height - TOOLTIP_GAP
    if mouse_x < size.width + EDGE_MARGIN:
        x = mouse_x + TOOLTIP_GAP
    if mouse_y < size.height + EDGE_MARGIN:
        y = mouse_y + TOOLTIP_GAP
    return x, y


class TooltipOverlay:
    """Vertical guide line plus a two-line tooltip group on a surface."""

    def __init__(self, surface, size: TooltipSize) -> None:
        self.size = size
        rect = surface.bounding_client_rect()
        self.guide = (
            surface.append("line")
            .attr("y1", 0)
            .attr("y2", rect.height)
            .style("stroke", "rgb(200, 200, 200)")
            .style("stroke-width", "2")
        )
        self.group = surface.append("g")
        self.box = (
            self.group.append("rect")
            .attr("width", size.width)
            .attr("height", size.height)
            .attr("rx", "1")
            .attr("ry", "1")
            .style("fill", "rgba(255, 255, 255, .2)")
        )
        self.lines: List = []
        for i in range(2):
            self.lines.append(
                self.group.append("text")
                .attr("x", 10)
                .attr("y", i * 20 + 20)
                .style("fill", "#FFFFFF")
            )
        self.position: Tuple[float, float] = (0.0, 0.0)
        self.guide_x: float = 0.0
        self.state = OverlayState.HIDDEN
        self._apply_visibility()

    # ------------------------------------------------------------------
    def show(self) -> None:
        self.state = OverlayState.VISIBLE
        self._apply_visibility()

    def hide(self) -> None:
        self.state = OverlayState.HIDDEN
        self._apply_visibility()

    @property
    def visible(self) -> bool:
        return self.state is OverlayState.VISIBLE

    def _apply_visibility(self) -> None:
        value = "visible" if self.visible else "hidden"
        self.guide.style("visibility", value)
        self.group.style("visibility", value)

    # ------------------------------------------------------------------
    def move_guide(self, x: float) -> None:
        self.guide_x = x
        self.guide.attr("x1", x).attr("x2", x)

    def place(self, mouse_x: float, mouse_y: float) -> Tuple[float, float]:
        self.position = tooltip_position(mouse_x, mouse_y, self.size)
        x, y = self.position
        self.group.attr("transform", f"translate({format_number(x)} {format_number(y)})")
        return self.position

    def describe(self, sample: Sample) -> None:
        self.lines[0].text(f"x: {format_value(sample.x)}")
        self.lines[1].text(f"y: {format_value(sample.y)}")

    @property
    def texts(self) -> Tuple[str, str]:
        return (self.lines[0].text_content or "", self.lines[1].text_content or "")

    def dispose(self) -> None:
        self.guide.remove()
        self.group.remove()


__all__ = ["OverlayState", "TooltipOverlay", "format_value", "tooltip_position", "TOOLTIP_GAP", "EDGE_MARGIN"]
