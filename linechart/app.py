"""NiceGUI page that shows an interactive line chart."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from nicegui import events, ui

from .chart import LineChart
from .config import ChartConfig
from .demo import generate_data
from .log import get_logger
from .surface import GESTURE, POINTER_ENTER, POINTER_LEAVE, POINTER_MOVE, GestureEvent, PointerEvent, SvgSurface

logger = get_logger(__name__)

BACKGROUND = "#1d2530"
SAMPLE_COUNT = 200
SAMPLE_LOW = 500
SAMPLE_HIGH = 5000


class ChartPage:
    """Per-client page state: one surface, one chart, the browser event bridge."""

    def __init__(self, config: Optional[ChartConfig] = None) -> None:
        self.config = config or ChartConfig(line_data=generate_data(SAMPLE_COUNT, SAMPLE_LOW, SAMPLE_HIGH))
        self.surface: Optional[SvgSurface] = None
        self.chart: Optional[LineChart] = None
        self.image: Optional[ui.interactive_image] = None  # type: ignore[assignment]
        self.status_label: Optional[ui.label] = None  # type: ignore[assignment]
        self._drag_x: Optional[float] = None

    # ------------------------------------------------------------------
    # Chart lifecycle
    # ------------------------------------------------------------------
    def _load(self, config: ChartConfig) -> None:
        if self.chart is not None:
            self.chart.close()
        self.config = config
        self.surface = SvgSurface(config.dimensions.width, config.dimensions.height)
        self.chart = LineChart(self.surface, config)
        self._refresh()

    def _new_data(self) -> None:
        self._load(replace(self.config, line_data=generate_data(SAMPLE_COUNT, SAMPLE_LOW, SAMPLE_HIGH)))

    def _set_start_from_zero(self, value: bool) -> None:
        self._load(replace(self.config, start_from_zero=bool(value)))

    def _refresh(self) -> None:
        if self.image is not None and self.surface is not None:
            self.image.content = self.surface.inner_svg()
        if self.status_label is not None and self.chart is not None:
            t = self.chart.transform
            self.status_label.text = f"zoom {t.zoom:.2f} · pan {t.pan_x:.0f} px"

    # ------------------------------------------------------------------
    # Browser events
    # ------------------------------------------------------------------
    def _on_mouse(self, e: events.MouseEventArguments) -> None:
        if self.surface is None:
            return
        if e.type == "mousedown":
            self._drag_x = e.image_x
            return
        if e.type == "mouseup":
            self._drag_x = None
            return
        if e.type == "mouseover":
            self.surface.dispatch(POINTER_ENTER, PointerEvent(e.image_x, e.image_y))
        elif e.type == "mouseout":
            self._drag_x = None
            self.surface.dispatch(POINTER_LEAVE, PointerEvent(e.image_x, e.image_y))
        elif e.type == "mousemove":
            if self._drag_x is not None and e.buttons & 1:
                movement = e.image_x - self._drag_x
                self._drag_x = e.image_x
                self.surface.dispatch(GESTURE, GestureEvent(movement_x=movement, x=e.image_x, y=e.image_y))
            else:
                self.surface.dispatch(POINTER_MOVE, PointerEvent(e.image_x, e.image_y))
        self._refresh()

    def _on_wheel(self, e: events.GenericEventArguments) -> None:
        if self.surface is None:
            return
        args = e.args or {}
        try:
            gesture = GestureEvent(
                delta_y=float(args.get("deltaY", 0.0)),
                x=float(args.get("offsetX", 0.0)),
                y=float(args.get("offsetY", 0.0)),
            )
        except (TypeError, ValueError):
            logger.debug("Ignoring malformed wheel event: %r", args)
            return
        self.surface.dispatch(GESTURE, gesture)
        self._refresh()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------
    def build(self) -> None:
        width = int(self.config.dimensions.width)
        height = int(self.config.dimensions.height)

        ui.page_title("Line Chart")
        ui.markdown("# Line Chart")

        with ui.card():
            ui.label("Drag to pan, scroll to zoom, hover for values.").classes("text-sm text-gray-500")
            self.image = ui.interactive_image(
                size=(width, height),
                on_mouse=self._on_mouse,
                events=["mousedown", "mouseup", "mousemove", "mouseover", "mouseout"],
                cross=False,
            ).style(f"width: {width}px; height: {height}px; background: {BACKGROUND};")
            self.image.on("wheel.prevent", self._on_wheel, ["deltaY", "offsetX", "offsetY"])
            with ui.row().classes("items-center gap-4"):
                ui.button("New data", on_click=self._new_data)
                ui.switch(
                    "Start from zero",
                    value=self.config.start_from_zero,
                    on_change=lambda e: self._set_start_from_zero(e.value),
                )
                self.status_label = ui.label("").classes("text-sm text-gray-500")

        self._load(self.config)


def run(**kwargs) -> None:
    ui.run(**kwargs)


@ui.page("/")
def index() -> None:
    ChartPage().build()
