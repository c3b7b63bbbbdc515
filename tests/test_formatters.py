from datetime import datetime

from centinela.core.models import TrendSample
from centinela.output.formatters import chart_points, format_clock, format_number
from centinela.simulation.engine import default_seed_trend


def test_format_number():
    assert format_number(8.249, 1) == "8.2"
    assert format_number("x") == "—"


def test_format_clock():
    assert format_clock(datetime(2025, 1, 1, 23, 59)) == "23:59"
    assert format_clock(None) == "—"


def test_chart_points_span_full_width_and_scale_to_max():
    points = chart_points(default_seed_trend(datetime(2025, 1, 1)))
    assert len(points) == 7
    assert points[0][0] == 50.0
    assert points[-1] == (550.0, 20.0)
    assert all(20.0 <= y <= 140.0 for _, y in points)


def test_chart_points_degenerate_inputs():
    t = datetime(2025, 1, 1)
    assert chart_points([]) == []
    assert chart_points([TrendSample(t, 4.0)]) == [(50.0, 20.0)]
    assert chart_points([TrendSample(t, 0.0), TrendSample(t, 0.0)]) == [(50.0, 140.0), (550.0, 140.0)]
