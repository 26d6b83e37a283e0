"""In-memory SVG drawing surface.

The chart only needs a handful of things from a drawing surface: append
groups and shape primitives, set attributes and styles, ask a node for its
bounding box, ask the container where it sits on screen, and subscribe to
pointer and gesture events.  :class:`SvgSurface` provides exactly that on top
of a small element tree which serialises to an SVG document, so the same chart
can be shown by the NiceGUI page, served over HTTP or inspected in tests.

Bounding boxes of primitives are computed with ``svgpathtools`` segments.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from html import escape
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from svgpathtools import Arc, Line, Path

from ..log import get_logger
from .events import EVENT_TYPES, ClientRect

logger = get_logger(__name__)

Handler = Callable[[Any], None]

_TRANSLATE_RE = re.compile(
    r"translate\(\s*(-?[\d.]+(?:e[-+]?\d+)?)(?:[\s,]+(-?[\d.]+(?:e[-+]?\d+)?))?\s*\)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class BBox:
    """Bounding box in the node's own user space, like ``getBBox()``."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_extents(cls, xmin: float, xmax: float, ymin: float, ymax: float) -> "BBox":
        return cls(float(xmin), float(ymin), float(xmax - xmin), float(ymax - ymin))

    def extents(self) -> Tuple[float, float, float, float]:
        return self.x, self.x + self.width, self.y, self.y + self.height

    def shifted(self, dx: float, dy: float) -> "BBox":
        return BBox(self.x + dx, self.y + dy, self.width, self.height)

    def union(self, other: "BBox") -> "BBox":
        ax0, ax1, ay0, ay1 = self.extents()
        bx0, bx1, by0, by1 = other.extents()
        return BBox.from_extents(min(ax0, bx0), max(ax1, bx1), min(ay0, by0), max(ay1, by1))


def format_number(value: Any) -> str:
    """Render numbers the way they read in markup: ``12`` rather than ``12.0``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


def parse_translate(value: Optional[str]) -> Tuple[float, float]:
    if not value:
        return 0.0, 0.0
    match = _TRANSLATE_RE.search(str(value))
    if not match:
        return 0.0, 0.0
    tx = float(match.group(1))
    ty = float(match.group(2)) if match.group(2) else 0.0
    return tx, ty


# ---------------------------------------------------------------------------
# Element tree
# ---------------------------------------------------------------------------


class SvgNode:
    """A single SVG element with chainable setters."""

    def __init__(self, tag: str, parent: Optional["SvgNode"] = None) -> None:
        self.tag = tag
        self.parent = parent
        self.attrs: Dict[str, Any] = {}
        self.styles: Dict[str, str] = {}
        self.children: List[SvgNode] = []
        self.text_content: Optional[str] = None

    def __repr__(self) -> str:
        return f"SvgNode({self.tag!r}, children={len(self.children)})"

    # ---------------------------- structure ---------------------------------
    def append(self, tag: str) -> "SvgNode":
        child = SvgNode(tag, parent=self)
        self.children.append(child)
        return child

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.children = [c for c in self.parent.children if c is not self]
            self.parent = None

    def clear(self) -> None:
        for child in self.children:
            child.parent = None
        self.children = []

    def select_all(self, tag: str) -> List["SvgNode"]:
        """Direct children with the given tag, in document order."""
        return [c for c in self.children if c.tag == tag]

    def iter(self) -> Iterator["SvgNode"]:
        yield self
        for child in self.children:
            yield from child.iter()

    # ---------------------------- attributes --------------------------------
    def attr(self, name: str, value: Any) -> "SvgNode":
        self.attrs[name] = value
        return self

    def get(self, name: str, default: Any = None) -> Any:
        return self.attrs.get(name, default)

    def style(self, name: str, value: Any) -> "SvgNode":
        self.styles[name] = str(value)
        return self

    def get_style(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.styles.get(name, default)

    def text(self, value: Any) -> "SvgNode":
        self.text_content = str(value)
        return self

    # ---------------------------- geometry ----------------------------------
    def _num(self, name: str) -> float:
        return float(self.attrs.get(name, 0.0) or 0.0)

    def bbox(self) -> Optional[BBox]:
        """Bounding box of this node, children's transforms included.

        Text has no font metrics here and does not contribute.
        """
        if self.tag == "line":
            seg = Line(
                complex(self._num("x1"), self._num("y1")),
                complex(self._num("x2"), self._num("y2")),
            )
            return BBox.from_extents(*seg.bbox())
        if self.tag == "circle":
            c = complex(self._num("cx"), self._num("cy"))
            r = self._num("r")
            if r <= 0:
                return BBox(c.real, c.imag, 0.0, 0.0)
            radius = complex(r, r)
            outline = Path(
                Arc(c - r, radius, 0.0, False, True, c + r),
                Arc(c + r, radius, 0.0, False, True, c - r),
            )
            return BBox.from_extents(*outline.bbox())
        if self.tag == "rect":
            x, y = self._num("x"), self._num("y")
            w, h = self._num("width"), self._num("height")
            corners = [complex(x, y), complex(x + w, y), complex(x + w, y + h), complex(x, y + h)]
            outline = Path(*[Line(a, b) for a, b in zip(corners, corners[1:] + corners[:1])])
            return BBox.from_extents(*outline.bbox())

        box: Optional[BBox] = None
        for child in self.children:
            child_box = child.bbox()
            if child_box is None:
                continue
            dx, dy = parse_translate(child.attrs.get("transform"))
            child_box = child_box.shifted(dx, dy)
            box = child_box if box is None else box.union(child_box)
        return box

    # ---------------------------- markup ------------------------------------
    def to_svg(self) -> str:
        parts = [self.tag]
        for name, value in self.attrs.items():
            parts.append(f'{name}="{escape(format_number(value), quote=True)}"')
        if self.styles:
            css = "; ".join(f"{k}: {v}" for k, v in self.styles.items())
            parts.append(f'style="{escape(css, quote=True)}"')
        opening = " ".join(parts)
        inner = "".join(child.to_svg() for child in self.children)
        if self.text_content is not None:
            inner = escape(self.text_content) + inner
        if not inner:
            return f"<{opening} />"
        return f"<{opening}>{inner}</{self.tag}>"


# ---------------------------------------------------------------------------
# Surface
# ---------------------------------------------------------------------------


class SvgSurface:
    """Root ``<svg>`` element plus the event plumbing a chart binds to.

    ``origin`` is where the container sits in client coordinates; hosts that
    already report element-relative pointer positions leave it at ``(0, 0)``.
    """

    def __init__(
        self,
        width: float = 600.0,
        height: float = 400.0,
        *,
        origin: Tuple[float, float] = (0.0, 0.0),
        background: Optional[str] = None,
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        self.origin = (float(origin[0]), float(origin[1]))
        self.root = SvgNode("svg")
        self.root.attr("xmlns", "http://www.w3.org/2000/svg")
        self.root.attr("width", self.width)
        self.root.attr("height", self.height)
        self.root.attr("viewBox", f"0 0 {format_number(self.width)} {format_number(self.height)}")
        if background:
            self.root.style("background", background)
        self._listeners: Dict[str, List[Handler]] = {name: [] for name in EVENT_TYPES}

    # Drawing -------------------------------------------------------------
    def append(self, tag: str) -> SvgNode:
        return self.root.append(tag)

    def bounding_client_rect(self) -> ClientRect:
        return ClientRect(self.origin[0], self.origin[1], self.width, self.height)

    def to_svg(self) -> str:
        return self.root.to_svg()

    def inner_svg(self) -> str:
        """Markup of the root's children only, for hosts that supply their own ``<svg>``."""
        return "".join(child.to_svg() for child in self.root.children)

    # Events --------------------------------------------------------------
    def on(self, event: str, handler: Handler) -> Callable[[], None]:
        """Subscribe ``handler`` to ``event``; the returned callable unsubscribes."""
        if event not in self._listeners:
            raise ValueError(f"Unknown event type: {event!r}")
        self._listeners[event].append(handler)

        def unsubscribe() -> None:
            handlers = self._listeners[event]
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def dispatch(self, event: str, payload: Any = None) -> int:
        """Deliver ``payload`` to every handler of ``event``; returns how many ran."""
        if event not in self._listeners:
            raise ValueError(f"Unknown event type: {event!r}")
        handlers = list(self._listeners[event])
        for handler in handlers:
            handler(payload)
        if not handlers:
            logger.debug("No listener for %s", event)
        return len(handlers)

    def listener_count(self, event: Optional[str] = None) -> int:
        if event is not None:
            return len(self._listeners.get(event, []))
        return sum(len(h) for h in self._listeners.values())


__all__ = ["BBox", "SvgNode", "SvgSurface", "format_number", "parse_translate"]
