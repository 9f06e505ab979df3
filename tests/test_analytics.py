"""Tests for the derived report statistics and alerts."""

import pytest

from energy_report.analytics import derive_analytics, peak_of, rank_hours


def _alerts(analytics):
    return {alert.label: alert.ok for alert in analytics.alerts}


def test_flat_curve_statistics():
    # Act
    analytics = derive_analytics([10.0] * 24)

    # Assert
    assert analytics.total == 240.0
    assert analytics.average == 10.0
    assert analytics.peak_value == 10.0
    assert analytics.peak_hour == 0
    assert analytics.night_average == 10.0


def test_flat_curve_alerts():
    # Act
    alerts = _alerts(derive_analytics([10.0] * 24))

    # Assert
    assert alerts["No extreme peak (> 2.0× average)"] is True
    assert alerts["Curve has no gaps (24/24 hours present)"] is True
    # 10.0 is above 0.75 x average, so a flat curve has high night load
    assert alerts["Night load within normal range"] is False


def test_alert_order_and_static_entries():
    # Act
    analytics = derive_analytics([10.0] * 24)

    # Assert
    assert [a.label for a in analytics.alerts] == [
        "Night load within normal range",
        "No extreme peak (> 2.0× average)",
        "Curve has no gaps (24/24 hours present)",
        "Recommendation: review HVAC schedule",
        "Recommendation: audit lighting zones",
    ]
    assert analytics.alerts[3].ok and analytics.alerts[4].ok


def test_extreme_outlier_fails_peak_alert():
    # Arrange
    hourly = [5.0] * 24
    hourly[13] = 100.0

    # Act
    analytics = derive_analytics(hourly)

    # Assert
    assert _alerts(analytics)["No extreme peak (> 2.0× average)"] is False
    assert analytics.peak_hour == 13
    assert analytics.peak_value == 100.0


def test_low_night_load_passes():
    # Arrange
    hourly = [4.0] * 6 + [12.0] * 18

    # Act
    analytics = derive_analytics(hourly)

    # Assert
    assert analytics.average == 10.0
    assert analytics.night_average == 4.0
    assert _alerts(analytics)["Night load within normal range"] is True


def test_missing_hours_fail_gap_alert():
    analytics = derive_analytics([10.0] * 23)
    assert _alerts(analytics)["Curve has no gaps (24/24 hours present)"] is False


def test_peak_hour_first_occurrence():
    # Arrange
    hourly = [8.0] * 24
    hourly[9] = 20.0
    hourly[15] = 20.0

    # Act
    value, hour = peak_of(hourly)

    # Assert
    assert value == 20.0
    assert hour == 9


def test_rank_hours_top_ten_with_peak_notes():
    # Arrange
    hourly = [5.0] * 24
    hourly[13] = 100.0
    hourly[2] = 7.0

    # Act
    rows = rank_hours(hourly, average=sum(hourly) / 24)

    # Assert
    assert len(rows) == 10
    assert (rows[0].hour, rows[0].kWh, rows[0].note) == (13, 100.0, "peak")
    assert (rows[1].hour, rows[1].note) == (2, "")
    # ties keep hour order
    assert [r.hour for r in rows[2:]] == [0, 1, 3, 4, 5, 6, 7, 8]


def test_top_hours_descending():
    # Arrange
    hourly = [float(h % 7) + 3.0 for h in range(24)]

    # Act
    analytics = derive_analytics(hourly)

    # Assert
    values = [row.kWh for row in analytics.top_hours]
    assert values == sorted(values, reverse=True)
    assert values[0] == max(hourly)
    assert analytics.top_hours[0].hour == analytics.peak_hour


def test_peak_note_threshold_is_strict():
    # Arrange: one hour exactly 1.5x the average is not flagged
    hourly = [10.0] * 24
    analytics = derive_analytics(hourly)

    # Act
    rows = rank_hours(hourly, average=analytics.average)

    # Assert
    assert all(row.note == "" for row in rows)
    assert rank_hours([15.0], average=10.0)[0].note == ""
    assert rank_hours([15.1], average=10.0)[0].note == "peak"


def test_derive_analytics_does_not_mutate_input():
    hourly = [3.0 + h for h in range(24)]
    copy = list(hourly)
    derive_analytics(hourly)
    assert hourly == copy


@pytest.mark.parametrize("seed", [0, 1, 0xC0FFEE])
def test_peak_matches_simulated_curve(seed):
    from energy_report.simulation import simulate_energy_day

    day = simulate_energy_day(seed=seed)
    analytics = derive_analytics(day.hourly_kWh)

    assert analytics.peak_value == max(day.hourly_kWh)
    assert day.hourly_kWh[analytics.peak_hour] == analytics.peak_value
    assert day.hourly_kWh.index(analytics.peak_value) == analytics.peak_hour
    assert analytics.total == pytest.approx(sum(day.hourly_kWh), rel=1e-12)
