from datetime import datetime

import pandas as pd
import pytest

from centinela.analysis.indicators import ema, summarize_trend
from centinela.analysis.window import RollingWindow
from centinela.simulation.engine import default_seed_trend


def test_ema_same_length_and_first_value():
    s = pd.Series([1.0, 2.0, 3.0, 4.0, 5.0])
    out = ema(s, span=3)
    assert len(out) == len(s)
    assert out.iloc[0] == 1.0
    assert out.iloc[-1] < 5.0


def test_summarize_trend_on_seed_window():
    window = RollingWindow(7, tuple(default_seed_trend(datetime(2025, 1, 1, 12, 0))))
    summary = summarize_trend(window)
    assert summary["n_samples"] == 7
    assert summary["start"] == "00:00"
    assert summary["end"] == "03:00"
    assert summary["span_minutes"] == 180.0
    assert summary["min_mm"] == 5.2
    assert summary["max_mm"] == 8.2
    assert summary["last_mm"] == 8.2
    assert summary["change_mm"] == pytest.approx(3.0)
    assert 5.2 < summary["ema_mm"] < 8.2


def test_summarize_trend_empty_window():
    summary = summarize_trend(RollingWindow(7))
    assert summary["n_samples"] == 0
    assert summary["max_mm"] is None
    assert summary["ema_mm"] is None
