"""Drawing surfaces the chart can render onto."""

from .events import (
    GESTURE,
    POINTER_ENTER,
    POINTER_LEAVE,
    POINTER_MOVE,
    ClientRect,
    GestureEvent,
    PointerEvent,
)
from .svg import BBox, SvgNode, SvgSurface

__all__ = [
    "BBox",
    "SvgNode",
    "SvgSurface",
    "ClientRect",
    "GestureEvent",
    "PointerEvent",
    "GESTURE",
    "POINTER_ENTER",
    "POINTER_LEAVE",
    "POINTER_MOVE",
]
