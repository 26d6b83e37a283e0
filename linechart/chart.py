"""Line chart assembly: configuration in, interactive chart on a surface out."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from .config import ChartConfig, ChartConfigurationError
from .controller import InteractionController
from .geometry import PlotPoint, Sample, to_plot_space
from .log import get_logger
from .lookup import NearestSampleIndex
from .overlay import OverlayState, TooltipOverlay
from .rendering import ChartRenderer, RenderOptions
from .transform import Transform, TransformState

logger = get_logger(__name__)

SURFACE_METHODS = ("append", "bounding_client_rect", "on")


class LineChart:
    """Interactive single-series line chart bound to a drawing surface.

    The chart draws itself on construction and listens to the surface's
    pointer and gesture events until :meth:`close` is called.  It can also be
    used as a context manager.
    """

    def __init__(
        self,
        surface,
        config: Union[ChartConfig, Mapping[str, Any]],
        *,
        render_options: Optional[RenderOptions] = None,
    ) -> None:
        try:
            self.config = self._check(surface, config)
        except ChartConfigurationError as exc:
            logger.error("Cannot build line chart: %s", exc)
            raise

        self.surface = surface
        self.samples: tuple[Sample, ...] = self.config.line_data
        self.points: List[PlotPoint] = to_plot_space(self.samples, self.config)

        self.renderer = ChartRenderer(
            surface,
            self.points,
            self.config,
            lambda: self.state.transform,
            options=render_options,
        )
        self.state = TransformState(
            self.config.visible_width,
            measure=self.renderer.rendered_width,
            redraw=self.renderer.render,
        )
        self.index = NearestSampleIndex(self.samples, self.config)
        self.overlay = TooltipOverlay(surface, self.config.tooltip)
        self.controller = InteractionController(
            surface, self.config, self.state, self.renderer, self.index, self.overlay
        )

        self.renderer.render()
        self.controller.bind()
        self._closed = False
        logger.info(
            "Line chart ready: %d samples, content %.1f px wide in a %.1f px view",
            len(self.samples),
            self.renderer.rendered_width(),
            self.config.visible_width,
        )

    @staticmethod
    def _check(surface, config) -> ChartConfig:
        if surface is None:
            raise ChartConfigurationError("no drawing surface given")
        missing = [name for name in SURFACE_METHODS if not callable(getattr(surface, name, None))]
        if missing:
            raise ChartConfigurationError(
                f"{type(surface).__name__} is not a drawing surface (missing {', '.join(missing)})"
            )
        if isinstance(config, Mapping):
            config = ChartConfig.from_dict(config)
        if not isinstance(config, ChartConfig):
            raise ChartConfigurationError(f"unsupported configuration type: {type(config).__name__}")
        return config.validate()

    # ------------------------------------------------------------------
    # Public surface
    # ------------------------------------------------------------------
    @property
    def transform(self) -> Transform:
        return self.state.transform

    @property
    def overlay_state(self) -> OverlayState:
        return self.overlay.state

    @property
    def closed(self) -> bool:
        return self._closed

    def render(self, full_clear: bool = True) -> None:
        self.renderer.render(full_clear)
        self.renderer.translate(self.state.pan_x)

    def summary(self) -> Dict[str, Any]:
        transform = self.state.transform
        hovered = self.controller.hovered
        return {
            "samples": len(self.samples),
            "transform": {"pan_x": transform.pan_x, "zoom": transform.zoom},
            "rendered_width": self.renderer.rendered_width(),
            "visible_width": self.config.visible_width,
            "overlay": self.overlay.state.value,
            "hovered": None if hovered is None else {"x": hovered.x, "y": hovered.y},
        }

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Release event listeners and remove everything drawn by this chart."""
        if self._closed:
            return
        self.controller.unbind()
        self.overlay.dispose()
        self.renderer.dispose()
        self._closed = True
        logger.debug("Line chart closed")

    def __enter__(self) -> "LineChart":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["LineChart", "SURFACE_METHODS"]
