"""Shared fixtures for the line chart tests."""

import pytest

from linechart.config import ChartConfig, Dimensions, Margin
from linechart.geometry import Sample
from linechart.surface import SvgSurface


def make_samples(n, fn=lambda i: float(i % 7)):
    return [Sample(float(i), fn(i)) for i in range(n)]


@pytest.fixture
def surface():
    return SvgSurface(600, 400)


@pytest.fixture
def config():
    """Default layout: spacing 12 px on every side, 8 px pitch, 580 px visible width."""
    return ChartConfig(line_data=make_samples(200))


@pytest.fixture
def tight_config():
    """100 px tall plot with no margins or markers, so amplitude is exactly 100."""
    return ChartConfig(
        line_data=[Sample(0, 0), Sample(1, 10), Sample(2, 5)],
        margin=Margin(0, 0, 0, 0),
        dimensions=Dimensions(width=600, height=100, point=0, points_spacing=8),
        start_from_zero=True,
    )
