"""Configuration models for the line chart."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Tuple

from .geometry import Sample


class ChartConfigurationError(ValueError):
    """Raised when a chart cannot be built from the given configuration."""


@dataclass
class Margin:
    """Outer margins of the plot area in pixels."""

    top: float = 10.0
    right: float = 10.0
    bottom: float = 10.0
    left: float = 10.0


@dataclass
class Dimensions:
    """Plot size, marker radius and horizontal sample pitch, all in pixels."""

    width: float = 600.0
    height: float = 400.0
    point: float = 2.0
    points_spacing: float = 8.0


@dataclass(frozen=True)
class Spacing:
    """Margins inflated by the marker radius so edge markers are never clipped."""

    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def from_margin(cls, margin: Margin, point: float) -> "Spacing":
        return cls(
            top=margin.top + point,
            right=margin.right + point,
            bottom=margin.bottom + point,
            left=margin.left + point,
        )


@dataclass
class TooltipSize:
    width: float = 100.0
    height: float = 50.0


@dataclass
class ChartConfig:
    """Everything a :class:`~linechart.chart.LineChart` is built from.

    ``spacing`` is derived once from ``margin`` and the marker radius.  Call
    :meth:`validate` before handing the config to geometry code.
    """

    line_data: Tuple[Sample, ...]
    margin: Margin = field(default_factory=Margin)
    dimensions: Dimensions = field(default_factory=Dimensions)
    start_from_zero: bool = False
    tooltip: TooltipSize = field(default_factory=TooltipSize)
    spacing: Spacing = field(init=False)

    def __post_init__(self) -> None:
        try:
            self.line_data = samples_from(self.line_data)
        except (TypeError, ValueError, KeyError) as exc:
            raise ChartConfigurationError(f"malformed sample in line_data: {exc}") from exc
        self.spacing = Spacing.from_margin(self.margin, self.dimensions.point)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def amplitude(self) -> float:
        return self.dimensions.height - self.spacing.top - self.spacing.bottom

    @property
    def visible_width(self) -> float:
        return self.dimensions.width - self.margin.left - self.margin.right

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def validate(self) -> "ChartConfig":
        if not self.line_data:
            raise ChartConfigurationError("line_data must contain at least one sample")
        for prev, cur in zip(self.line_data, self.line_data[1:]):
            if cur.x <= prev.x:
                raise ChartConfigurationError(
                    f"sample x values must be strictly increasing (got {prev.x} then {cur.x})"
                )
        if self.dimensions.points_spacing <= 0:
            raise ChartConfigurationError("dimensions.points_spacing must be positive")
        if self.dimensions.point < 0:
            raise ChartConfigurationError("dimensions.point must not be negative")
        if self.amplitude <= 0:
            raise ChartConfigurationError(
                f"no vertical room left: height {self.dimensions.height} with spacing "
                f"{self.spacing.top} + {self.spacing.bottom}"
            )
        if self.visible_width <= 0:
            raise ChartConfigurationError(
                f"no horizontal room left: width {self.dimensions.width} with margins "
                f"{self.margin.left} + {self.margin.right}"
            )
        return self

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "ChartConfig":
        """Build a config from the camelCase mapping used by the browser chart.

        Missing sections fall back to the defaults; unknown keys are ignored.
        """

        try:
            raw_samples = data.get("lineData", data.get("line_data"))
            if raw_samples is None:
                raise ChartConfigurationError("lineData is required")
            samples = samples_from(raw_samples)

            margin_in = data.get("margin") or {}
            margin = Margin(
                top=float(margin_in.get("top", 10.0)),
                right=float(margin_in.get("right", 10.0)),
                bottom=float(margin_in.get("bottom", 10.0)),
                left=float(margin_in.get("left", 10.0)),
            )

            dims_in = data.get("dimensions") or {}
            dimensions = Dimensions(
                width=float(dims_in.get("width", 600.0)),
                height=float(dims_in.get("height", 400.0)),
                point=float(dims_in.get("point", 2.0)),
                points_spacing=float(
                    dims_in.get("pointsSpacing", dims_in.get("points_spacing", 8.0))
                ),
            )
            start_from_zero = data.get("startFromZero", data.get("start_from_zero", False))
            if not isinstance(start_from_zero, bool):
                raise ChartConfigurationError(
                    f"startFromZero must be true or false, got {start_from_zero!r}"
                )

            tooltip_in = data.get("tooltip") or {}
            tooltip = TooltipSize(
                width=float(tooltip_in.get("width", 100.0)),
                height=float(tooltip_in.get("height", 50.0)),
            )
        except ChartConfigurationError:
            raise
        except (TypeError, ValueError, KeyError, AttributeError) as exc:
            raise ChartConfigurationError(f"malformed chart configuration: {exc}") from exc

        return ChartConfig(
            line_data=samples,
            margin=margin,
            dimensions=dimensions,
            start_from_zero=start_from_zero,
            tooltip=tooltip,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lineData": [{"x": s.x, "y": s.y} for s in self.line_data],
            "margin": {
                "top": self.margin.top,
                "right": self.margin.right,
                "bottom": self.margin.bottom,
                "left": self.margin.left,
            },
            "dimensions": {
                "width": self.dimensions.width,
                "height": self.dimensions.height,
                "point": self.dimensions.point,
                "pointsSpacing": self.dimensions.points_spacing,
            },
            "startFromZero": self.start_from_zero,
            "tooltip": {"width": self.tooltip.width, "height": self.tooltip.height},
        }


def _coerce_sample(value: Any) -> Sample:
    if isinstance(value, Sample):
        return value
    if isinstance(value, Mapping):
        return Sample(float(value["x"]), float(value["y"]))
    x, y = value
    return Sample(float(x), float(y))


def samples_from(values: Iterable[Any]) -> Tuple[Sample, ...]:
    """Accept ``Sample`` objects, ``{"x", "y"}`` mappings or ``(x, y)`` pairs."""
    return tuple(_coerce_sample(v) for v in values)


__all__ = [
    "ChartConfig",
    "ChartConfigurationError",
    "Dimensions",
    "Margin",
    "Spacing",
    "TooltipSize",
    "samples_from",
]
