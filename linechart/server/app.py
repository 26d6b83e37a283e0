"""FastAPI application that serves a line chart and accepts its input events."""
from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from ..chart import LineChart
from ..config import ChartConfig, ChartConfigurationError
from ..demo import generate_data
from ..log import get_logger
from ..surface import GESTURE, POINTER_ENTER, POINTER_LEAVE, POINTER_MOVE, GestureEvent, PointerEvent, SvgSurface

logger = get_logger(__name__)

POINTER_EVENTS = {"move": POINTER_MOVE, "enter": POINTER_ENTER, "leave": POINTER_LEAVE}


class ChartSession:
    """One chart on one surface; requests are serialised through a lock."""

    def __init__(self, config: ChartConfig) -> None:
        self._lock = threading.Lock()
        self.surface: Optional[SvgSurface] = None
        self.chart: Optional[LineChart] = None
        self.load(config)

    def load(self, config: ChartConfig) -> LineChart:
        surface = SvgSurface(config.dimensions.width, config.dimensions.height)
        chart = LineChart(surface, config)
        with self._lock:
            if self.chart is not None:
                self.chart.close()
            self.surface, self.chart = surface, chart
        return chart

    def svg(self) -> str:
        with self._lock:
            return self.surface.to_svg()

    def summary(self) -> Dict[str, Any]:
        with self._lock:
            return self.chart.summary()

    def dispatch(self, event: str, payload: Any) -> Dict[str, Any]:
        with self._lock:
            self.surface.dispatch(event, payload)
            return self.chart.summary()


def create_session() -> ChartSession:
    return ChartSession(ChartConfig(line_data=generate_data(200, 500, 5000)))


session = create_session()
app = FastAPI(title="Line Chart Server")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _number(payload: Dict[str, Any], *names: str, default: float = 0.0) -> float:
    for name in names:
        if name in payload and payload[name] is not None:
            try:
                return float(payload[name])
            except (TypeError, ValueError) as exc:
                raise HTTPException(status_code=400, detail=f"{name} must be a number") from exc
    return default


@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/api/chart")
def get_chart() -> Response:
    return Response(content=session.svg(), media_type="image/svg+xml")


@app.post("/api/chart")
def post_chart(payload: Dict[str, Any]) -> Dict[str, Any]:
    try:
        config = ChartConfig.from_dict(payload)
        chart = session.load(config)
    except ChartConfigurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"ok": True, **chart.summary()}


@app.get("/api/state")
def get_state() -> Dict[str, Any]:
    return session.summary()


@app.post("/api/events/pointer")
def post_pointer(payload: Dict[str, Any]) -> Dict[str, Any]:
    kind = str(payload.get("type", "move"))
    event = POINTER_EVENTS.get(kind)
    if event is None:
        raise HTTPException(status_code=400, detail=f"Unknown pointer event type: {kind}")
    pointer = PointerEvent(x=_number(payload, "x"), y=_number(payload, "y"))
    return session.dispatch(event, pointer)


@app.post("/api/events/gesture")
def post_gesture(payload: Dict[str, Any]) -> Dict[str, Any]:
    gesture = GestureEvent(
        movement_x=_number(payload, "movementX", "movement_x"),
        delta_y=_number(payload, "deltaY", "delta_y"),
        x=_number(payload, "x"),
        y=_number(payload, "y"),
    )
    return session.dispatch(GESTURE, gesture)


__all__ = ["app", "session", "create_session", "ChartSession"]
