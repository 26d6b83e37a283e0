"""Event payloads delivered by a drawing surface."""
from __future__ import annotations

from dataclasses import dataclass

POINTER_MOVE = "pointermove"
POINTER_ENTER = "pointerenter"
POINTER_LEAVE = "pointerleave"
GESTURE = "gesture"

EVENT_TYPES = (POINTER_MOVE, POINTER_ENTER, POINTER_LEAVE, GESTURE)


@dataclass(frozen=True)
class PointerEvent:
    """Pointer position in client coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class GestureEvent:
    """One pan-or-zoom tick: horizontal drag movement and wheel delta."""

    movement_x: float = 0.0
    delta_y: float = 0.0
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class ClientRect:
    """On-screen rectangle of the surface container."""

    x: float
    y: float
    width: float
    height: float


__all__ = [
    "POINTER_MOVE",
    "POINTER_ENTER",
    "POINTER_LEAVE",
    "GESTURE",
    "EVENT_TYPES",
    "PointerEvent",
    "GestureEvent",
    "ClientRect",
]
