"""Pan and zoom state of a chart."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .log import get_logger

logger = get_logger(__name__)

MeasureCallback = Callable[[], float]
RedrawCallback = Callable[[], None]

WHEEL_STEP = 240.0
MIN_ZOOM = 1.0


@dataclass
class Transform:
    """Horizontal pan offset in pixels and zoom factor."""

    pan_x: float = 0.0
    zoom: float = 1.0


class TransformState:
    """Own a :class:`Transform` and keep it inside its clamp band.

    ``measure`` returns the current on-screen width of the drawn content and
    ``redraw`` re-renders it with the live transform.  Zooming changes that
    width, so :meth:`apply_zoom` redraws, measures and re-clamps the pan.
    """

    def __init__(
        self,
        visible_width: float,
        *,
        measure: MeasureCallback,
        redraw: Optional[RedrawCallback] = None,
    ) -> None:
        self.visible_width = float(visible_width)
        self._measure = measure
        self._redraw = redraw or (lambda: None)
        self._transform = Transform()

    # ------------------------------------------------------------------
    @property
    def transform(self) -> Transform:
        """Snapshot of the current transform."""
        return Transform(pan_x=self._transform.pan_x, zoom=self._transform.zoom)

    @property
    def pan_x(self) -> float:
        return self._transform.pan_x

    @property
    def zoom(self) -> float:
        return self._transform.zoom

    def pan_bounds(self, rendered_width: Optional[float] = None) -> tuple[float, float]:
        """Return ``(lowest, highest)`` allowed pan for the given content width."""
        if rendered_width is None:
            rendered_width = self._measure()
        overflow = rendered_width - self.visible_width
        if overflow <= 0:
            return 0.0, 0.0
        return -overflow, 0.0

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------
    def apply_pan(self, delta: float) -> bool:
        """Shift the pan by ``delta`` pixels; out of band moves are dropped."""
        if not delta:
            return False
        lowest, highest = self.pan_bounds()
        candidate = self._transform.pan_x + delta
        if lowest <= candidate <= highest:
            self._transform.pan_x = candidate
            return True
        logger.debug("Pan to %.2f dropped, band is [%.2f, %.2f]", candidate, lowest, highest)
        return False

    def apply_zoom(self, delta_wheel: float) -> bool:
        """Zoom by one step per ``WHEEL_STEP`` wheel units, never below 1.0.

        Returns whether the zoom factor changed.
        """
        if not delta_wheel:
            return False
        previous = self._transform.zoom
        candidate = previous - delta_wheel / WHEEL_STEP
        if candidate < MIN_ZOOM:
            candidate = MIN_ZOOM
        self._transform.zoom = candidate
        self._redraw()

        self.clamp_pan()
        self._redraw()
        logger.debug("Zoom %.3f -> %.3f (pan %.2f)", previous, candidate, self._transform.pan_x)
        return candidate != previous

    def clamp_pan(self) -> float:
        """Pull the pan back into the band for a fresh width measurement."""
        lowest, highest = self.pan_bounds()
        self._transform.pan_x = min(highest, max(lowest, self._transform.pan_x))
        return self._transform.pan_x


__all__ = ["Transform", "TransformState", "WHEEL_STEP", "MIN_ZOOM"]
