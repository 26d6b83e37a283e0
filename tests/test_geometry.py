"""Tests for the sample -> plot space -> pixel space mapping."""

import random

import pytest

from linechart.config import ChartConfig, Dimensions, Margin
from linechart.geometry import PlotPoint, Sample, index_at, pixel_x, to_pixel_space, to_plot_space
from linechart.transform import Transform

from conftest import make_samples


class TestPlotSpace:
    def test_scaled_from_zero(self, tight_config):
        points = to_plot_space(tight_config.line_data, tight_config)
        assert [p.y for p in points] == pytest.approx([100.0, 0.0, 50.0])
        assert [p.x for p in points] == [0.0, 1.0, 2.0]

    def test_baseline_is_minimum_when_not_from_zero(self, tight_config):
        tight_config.start_from_zero = False
        points = to_plot_space(tight_config.line_data, tight_config)
        # minimum is 0 here, so nothing changes
        assert [p.y for p in points] == pytest.approx([100.0, 0.0, 50.0])

    def test_positive_minimum_becomes_baseline(self):
        config = ChartConfig(
            line_data=[Sample(0, 5), Sample(1, 10), Sample(2, 15)],
            margin=Margin(0, 0, 0, 0),
            dimensions=Dimensions(height=100, point=0),
        )
        points = to_plot_space(config.line_data, config)
        assert [p.y for p in points] == pytest.approx([100.0, 50.0, 0.0])

    def test_values_stay_inside_amplitude(self):
        rng = random.Random(3)
        for start_from_zero in (False, True):
            samples = [Sample(i, rng.uniform(-50, 500)) for i in range(100)]
            config = ChartConfig(line_data=samples, start_from_zero=start_from_zero)
            for p in to_plot_space(samples, config):
                assert 0.0 <= p.y <= config.amplitude

    def test_flat_data_is_drawn_at_mid_amplitude(self, caplog):
        config = ChartConfig(line_data=[Sample(i, 3.0) for i in range(5)])
        points = to_plot_space(config.line_data, config)
        assert all(p.y == pytest.approx(config.amplitude / 2) for p in points)
        assert "flat line" in caplog.text

    def test_single_sample(self):
        config = ChartConfig(line_data=[Sample(0, 42)])
        assert to_plot_space(config.line_data, config) == [PlotPoint(0, config.amplitude / 2)]


class TestPixelSpace:
    def test_spacing_zoom_and_top_offset(self, config):
        assert to_pixel_space(PlotPoint(3, 50), Transform(), config) == (36.0, 62.0)
        assert to_pixel_space(PlotPoint(3, 50), Transform(zoom=2.0), config) == (60.0, 62.0)

    def test_pan_is_not_part_of_the_mapping(self, config):
        assert to_pixel_space(PlotPoint(1, 0), Transform(pan_x=-100), config)[0] == 20.0

    @pytest.mark.parametrize("zoom", [1.0, 2.5])
    def test_inverse_recovers_sample_x(self, config, zoom):
        for point in to_plot_space(config.line_data, config):
            px, _ = to_pixel_space(point, Transform(zoom=zoom), config)
            assert index_at(px, zoom, config) == point.x

    def test_index_rounds_half_up(self, config):
        assert index_at(pixel_x(0, 1.0, config) + 4.0, 1.0, config) == 1
        assert index_at(pixel_x(0, 1.0, config) + 3.9, 1.0, config) == 0

    def test_index_is_never_negative(self, config):
        assert index_at(-500.0, 1.0, config) == 0


def test_make_samples_helper_is_dense():
    assert [s.x for s in make_samples(3)] == [0.0, 1.0, 2.0]
