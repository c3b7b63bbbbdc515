import pytest

from centinela.analysis.thresholds import alert_info, alert_levels, classify
from centinela.core.models import AlertLevel


@pytest.mark.parametrize(
    "movement,expected",
    [
        (0.0, AlertLevel.SAFE),
        (7.0, AlertLevel.SAFE),
        (7.0001, AlertLevel.WARNING),
        (8.2, AlertLevel.WARNING),
        (10.0, AlertLevel.WARNING),
        (10.0001, AlertLevel.CRITICAL),
        (25.0, AlertLevel.CRITICAL),
    ],
)
def test_classify_boundaries_are_strict(movement, expected):
    assert classify(movement) is expected


def test_alert_levels_are_totally_ordered():
    assert AlertLevel.SAFE < AlertLevel.WARNING < AlertLevel.CRITICAL
    assert max(AlertLevel) is AlertLevel.CRITICAL


def test_alert_info_lookup():
    assert alert_info(AlertLevel.SAFE).label == "SAFE"
    assert alert_info(AlertLevel.SAFE).description == "All systems normal"
    assert alert_info(AlertLevel.WARNING).description == "Increased monitoring required"
    assert alert_info(AlertLevel.CRITICAL).color == "red"


def test_alert_levels_table_covers_every_level():
    table = alert_levels()
    assert set(table) == {"SAFE", "WARNING", "CRITICAL"}
    assert table["CRITICAL"]["range"] == "> 10 mm"
    assert table["SAFE"]["range"] == "<= 7 mm"
