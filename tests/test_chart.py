"""End-to-end tests: events in, transform and overlay out."""

import logging

import pytest

from linechart import ChartConfig, ChartConfigurationError, LineChart, Sample, SvgSurface
from linechart.geometry import pixel_x
from linechart.overlay import OverlayState
from linechart.surface import GESTURE, POINTER_ENTER, POINTER_LEAVE, POINTER_MOVE, GestureEvent, PointerEvent


@pytest.fixture
def chart(surface, config):
    with LineChart(surface, config) as c:
        yield c


def move(surface, x, y=200.0):
    surface.dispatch(POINTER_MOVE, PointerEvent(x, y))


class TestConstruction:
    def test_initial_frame(self, chart, surface):
        assert chart.renderer.marker_count == 200
        assert chart.overlay_state is OverlayState.HIDDEN
        assert chart.transform.pan_x == 0.0 and chart.transform.zoom == 1.0
        assert surface.listener_count() == 4

    def test_accepts_camel_case_mapping(self, surface):
        chart = LineChart(surface, {"lineData": [{"x": 0, "y": 1}, {"x": 1, "y": 3}], "startFromZero": True})
        assert chart.config.start_from_zero is True
        assert chart.renderer.segment_count == 1

    @pytest.mark.parametrize("bad_surface", [None, object(), "svg"])
    def test_rejects_missing_surface(self, bad_surface, config, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(ChartConfigurationError):
                LineChart(bad_surface, config)
        assert "Cannot build line chart" in caplog.text

    @pytest.mark.parametrize(
        "samples",
        [[], [Sample(0, 1), Sample(0, 2)], [Sample(3, 1), Sample(1, 2)]],
    )
    def test_rejects_bad_samples(self, surface, samples):
        with pytest.raises(ChartConfigurationError):
            LineChart(surface, ChartConfig(line_data=samples))
        assert surface.root.children == []

    def test_render_is_idempotent(self, chart, surface):
        chart.render(True)
        first = surface.to_svg()
        chart.render(True)
        assert surface.to_svg() == first


class TestHover:
    def test_move_shows_nearest_sample(self, chart, config):
        x10 = pixel_x(10, 1.0, config)
        move(chart.surface, x10 + 2.0)
        assert chart.overlay_state is OverlayState.VISIBLE
        assert chart.overlay.guide_x == x10
        assert chart.overlay.position == (x10 + 2.0 + 3.0, 147.0)
        assert chart.overlay.texts == ("x: 10", "y: 3")
        assert chart.controller.hovered == config.line_data[10]

    def test_pointer_relative_to_container(self, config):
        surface = SvgSurface(600, 400, origin=(100, 50))
        chart = LineChart(surface, config)
        move(surface, 100 + pixel_x(4, 1.0, config), 250)
        assert chart.controller.hovered.x == 4
        assert chart.overlay.position[1] == 200 - 50 - 3

    def test_leave_and_enter(self, chart):
        move(chart.surface, 100)
        chart.surface.dispatch(POINTER_LEAVE, PointerEvent(0, 0))
        assert chart.overlay_state is OverlayState.HIDDEN
        chart.surface.dispatch(POINTER_ENTER, PointerEvent(0, 0))
        assert chart.overlay_state is OverlayState.VISIBLE

    def test_miss_leaves_previous_content(self, surface):
        samples = [Sample(i, i) for i in list(range(7)) + [8, 9]]
        chart = LineChart(surface, ChartConfig(line_data=samples))
        move(surface, pixel_x(6, 1.0, chart.config))
        before = (chart.overlay.guide_x, chart.overlay.position, chart.overlay.texts)
        move(surface, pixel_x(7, 1.0, chart.config), 300)
        assert (chart.overlay.guide_x, chart.overlay.position, chart.overlay.texts) == before
        assert chart.overlay_state is OverlayState.VISIBLE

    def test_guide_follows_pan(self, chart, config):
        chart.surface.dispatch(GESTURE, GestureEvent(movement_x=-80))
        move(chart.surface, pixel_x(20, 1.0, config) - 80)
        assert chart.controller.hovered.x == 20
        assert chart.overlay.guide_x == pixel_x(20, 1.0, config) - 80

    def test_tooltip_keeps_small_and_long_values(self, surface):
        ys = [0.0001, 0.0002, 0.0003, 0.0004, 1234.56789012]
        chart = LineChart(surface, ChartConfig(line_data=[Sample(i, y) for i, y in enumerate(ys)]))
        move(surface, pixel_x(2, 1.0, chart.config))
        assert chart.overlay.texts == ("x: 2", "y: 0.0003")
        move(surface, pixel_x(4, 1.0, chart.config))
        assert chart.overlay.texts == ("x: 4", "y: 1234.56789012")


class TestGestures:
    def test_drag_pans_and_hides_overlay(self, chart):
        move(chart.surface, 100)
        chart.surface.dispatch(GESTURE, GestureEvent(movement_x=-50))
        assert chart.transform.pan_x == -50
        assert chart.renderer.group.get("transform") == "translate(-50 0)"
        assert chart.overlay_state is OverlayState.HIDDEN

    def test_drag_past_start_is_dropped(self, chart):
        chart.surface.dispatch(GESTURE, GestureEvent(movement_x=30))
        assert chart.transform.pan_x == 0.0

    def test_drag_past_end_is_dropped(self, chart):
        chart.surface.dispatch(GESTURE, GestureEvent(movement_x=-1000))
        chart.surface.dispatch(GESTURE, GestureEvent(movement_x=-20))
        assert chart.transform.pan_x == -1000
        chart.surface.dispatch(GESTURE, GestureEvent(movement_x=-16))
        assert chart.transform.pan_x == -1016

    def test_zoom_keeps_sample_under_pointer(self, chart, config):
        x50 = pixel_x(50, 1.0, config)
        renders = chart.renderer.render_count
        chart.surface.dispatch(GESTURE, GestureEvent(delta_y=-240, x=x50, y=200))
        assert chart.transform.zoom == 2.0
        assert chart.transform.pan_x == pytest.approx(-400.0)
        assert pixel_x(50, 2.0, config) + chart.transform.pan_x == pytest.approx(x50)
        assert chart.renderer.render_count == renders + 2
        assert chart.renderer.rendered_width() == pytest.approx(199 * 16 + 4)

    def test_drag_and_zoom_in_one_tick(self, chart, config):
        chart.surface.dispatch(GESTURE, GestureEvent(movement_x=-100))
        chart.surface.dispatch(GESTURE, GestureEvent(movement_x=-40, delta_y=-240, x=300, y=200))
        # sample 54 sits under the pointer once the drag is applied
        assert chart.transform.zoom == 2.0
        assert chart.transform.pan_x == pytest.approx(-572.0)
        assert abs(pixel_x(54, 2.0, config) + chart.transform.pan_x - 300) <= 4

    def test_zoom_out_at_minimum_changes_nothing(self, chart):
        chart.surface.dispatch(GESTURE, GestureEvent(delta_y=240, x=300, y=200))
        assert chart.transform.zoom == 1.0
        assert chart.transform.pan_x == 0.0

    def test_zoom_out_reclamps_pan(self, chart, config):
        chart.surface.dispatch(GESTURE, GestureEvent(delta_y=-240, x=300, y=200))
        # zooming in at x=300 already panned by -288 to keep sample 36 in place
        chart.surface.dispatch(GESTURE, GestureEvent(movement_x=-2000))
        chart.surface.dispatch(GESTURE, GestureEvent(movement_x=-300))
        assert chart.transform.pan_x == pytest.approx(-2588.0)
        chart.surface.dispatch(GESTURE, GestureEvent(delta_y=240, x=300, y=200))
        assert chart.transform.zoom == 1.0
        # pulled back to the end of the unzoomed content; the recentering pan falls outside
        assert chart.transform.pan_x == pytest.approx(-1016.0)

    def test_short_series_never_pans(self, surface):
        chart = LineChart(surface, ChartConfig(line_data=[Sample(i, i) for i in range(10)]))
        for event in (GestureEvent(movement_x=-5), GestureEvent(delta_y=-240, x=50), GestureEvent(movement_x=-5)):
            surface.dispatch(GESTURE, event)
            assert chart.transform.pan_x == 0.0


class TestTeardown:
    def test_close_releases_listeners_and_primitives(self, surface, config):
        chart = LineChart(surface, config)
        chart.close()
        assert chart.closed
        assert surface.listener_count() == 0
        assert surface.root.children == []
        assert surface.dispatch(POINTER_MOVE, PointerEvent(50, 50)) == 0
        chart.close()

    def test_context_manager_closes(self, surface, config):
        with LineChart(surface, config) as chart:
            assert chart.controller.bound
        assert not chart.controller.bound

    def test_summary(self, chart):
        move(chart.surface, pixel_x(3, 1.0, chart.config))
        summary = chart.summary()
        assert summary["samples"] == 200
        assert summary["overlay"] == "visible"
        assert summary["hovered"] == {"x": 3.0, "y": 3.0}
        assert summary["visible_width"] == 580
