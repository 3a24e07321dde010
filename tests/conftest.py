"""Shared test fixtures for spider chart tests."""
import pytest
from shared.color import argb
from spiderchart.backend import RecordingBackend
from spiderchart.chart import SpiderChart
from spiderchart.data import SpiderData
from spiderchart.host import StaticHost


@pytest.fixture
def host():
    """200x200 px surface at density 1."""
    return StaticHost(200, 200)


@pytest.fixture
def rec():
    """Recording backend with 0.6*size per character, height = size."""
    return RecordingBackend()


@pytest.fixture
def chart(host):
    """Empty chart on the 200x200 host."""
    return SpiderChart(host)


@pytest.fixture
def square_chart(host):
    """Four axes, no labels, no margin: radius 100 about (100, 100)."""
    c = SpiderChart(host)
    c.label_margin = 0
    c.set_data([SpiderData([100, 50, 25, 0], argb(128, 255, 0, 0))])
    return c


@pytest.fixture
def labeled_chart(host):
    """Four axes with one-letter labels and two series."""
    c = SpiderChart(host)
    c.set_labels(["A", "B", "C", "D"])
    c.set_data([
        SpiderData([10, 20, 30, 40], argb(125, 193, 230, 219)),
        SpiderData([90, 80, 70, 60], argb(125, 209, 217, 234)),
    ])
    return c
