"""Pointer and gesture handling for a chart."""
from __future__ import annotations

from typing import Callable, List, Optional

from .config import ChartConfig
from .geometry import Sample, pixel_x
from .log import get_logger
from .lookup import NearestSampleIndex
from .overlay import TooltipOverlay
from .rendering import ChartRenderer
from .surface.events import (
    GESTURE,
    POINTER_ENTER,
    POINTER_LEAVE,
    POINTER_MOVE,
    GestureEvent,
    PointerEvent,
)
from .transform import TransformState

logger = get_logger(__name__)


class InteractionController:
    """Translate surface events into transform updates, redraws and hover output."""

    def __init__(
        self,
        surface,
        config: ChartConfig,
        state: TransformState,
        renderer: ChartRenderer,
        index: NearestSampleIndex,
        overlay: TooltipOverlay,
    ) -> None:
        self.surface = surface
        self.config = config
        self.state = state
        self.renderer = renderer
        self.index = index
        self.overlay = overlay
        self.hovered: Optional[Sample] = None
        self._unsubscribers: List[Callable[[], None]] = []

    # ------------------------------------------------------------------
    # Listener lifecycle
    # ------------------------------------------------------------------
    def bind(self) -> None:
        if self._unsubscribers:
            return
        self._unsubscribers = [
            self.surface.on(POINTER_MOVE, self.on_pointer_move),
            self.surface.on(POINTER_LEAVE, self.on_pointer_leave),
            self.surface.on(POINTER_ENTER, self.on_pointer_enter),
            self.surface.on(GESTURE, self.on_gesture),
        ]

    def unbind(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    @property
    def bound(self) -> bool:
        return bool(self._unsubscribers)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _relative(self, x: float, y: float) -> tuple[float, float]:
        rect = self.surface.bounding_client_rect()
        return x - rect.x, y - rect.y

    def _screen_x(self, sample: Sample) -> float:
        return pixel_x(sample.x, self.state.zoom, self.config) + self.state.pan_x

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def on_gesture(self, event: GestureEvent) -> None:
        """One pan-or-zoom tick.

        A zoom keeps the sample that was nearest the pointer at the same
        screen position by following up with a corrective pan.
        """
        self.overlay.hide()

        if event.movement_x:
            self.state.apply_pan(event.movement_x)

        if event.delta_y:
            # anchor is resolved after the drag so the corrective pan keeps it
            mouse_x, _ = self._relative(event.x, event.y)
            anchor = self.index.lookup(mouse_x - self.state.pan_x, self.state.zoom)
            anchor_x = self._screen_x(anchor) if anchor is not None else 0.0
            self.state.apply_zoom(event.delta_y)
            if anchor is not None:
                self.state.apply_pan(anchor_x - self._screen_x(anchor))

        self.renderer.translate(self.state.pan_x)

    def on_pointer_move(self, event: PointerEvent) -> None:
        self.overlay.show()
        mouse_x, mouse_y = self._relative(event.x, event.y)
        sample = self.index.lookup(mouse_x - self.state.pan_x, self.state.zoom)
        if sample is None:
            return
        self.hovered = sample
        self.overlay.move_guide(self._screen_x(sample))
        self.overlay.place(mouse_x, mouse_y)
        self.overlay.describe(sample)

    def on_pointer_leave(self, event: Optional[PointerEvent] = None) -> None:
        self.overlay.hide()

    def on_pointer_enter(self, event: Optional[PointerEvent] = None) -> None:
        self.overlay.show()


__all__ = ["InteractionController"]
