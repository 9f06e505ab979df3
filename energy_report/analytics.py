"""Summary statistics and health-check alerts for a daily load curve."""

import numpy as np

from .config import (
    EXTREME_PEAK_FACTOR,
    HOURS_PER_DAY,
    NIGHT_HOURS,
    NIGHT_LOAD_FACTOR,
    PEAK_HOUR_FACTOR,
    TOP_HOURS,
)
from .models import Alert, DayAnalytics, HourRow

RECOMMENDATIONS = (
    "Recommendation: review HVAC schedule",
    "Recommendation: audit lighting zones",
)


def peak_of(hourly_kWh):
    """(value, hour) of the maximum; the earliest hour wins ties."""
    values = np.asarray(hourly_kWh, dtype=float)
    hour = int(np.argmax(values))
    return float(values[hour]), hour


def rank_hours(hourly_kWh, average, top_n=TOP_HOURS):
    """Highest ``top_n`` hours, flagged "peak" above 1.5x the average."""
    values = np.asarray(hourly_kWh, dtype=float)
    # stable sort on the negated values: descending, earlier hour first on ties
    order = np.argsort(-values, kind="stable")[:top_n]
    rows = []
    for hour in order:
        kWh = float(values[hour])
        note = "peak" if kWh > average * PEAK_HOUR_FACTOR else ""
        rows.append(HourRow(int(hour), kWh, note))
    return tuple(rows)


def check_alerts(hourly_kWh, average, peak_value, night_average):
    return (
        Alert("Night load within normal range", night_average <= average * NIGHT_LOAD_FACTOR),
        Alert(
            f"No extreme peak (> {EXTREME_PEAK_FACTOR:.1f}× average)",
            peak_value <= average * EXTREME_PEAK_FACTOR,
        ),
        Alert(
            f"Curve has no gaps ({HOURS_PER_DAY}/{HOURS_PER_DAY} hours present)",
            len(hourly_kWh) == HOURS_PER_DAY,
        ),
    ) + tuple(Alert(text, True) for text in RECOMMENDATIONS)


def derive_analytics(hourly_kWh):
    """
    Compute the report statistics for an hourly curve.

    Pure function of its input. The average divides by 24 regardless of
    the curve length so a curve with missing hours shows up in the gap
    alert instead of skewing the average.
    """
    hourly_kWh = tuple(float(v) for v in hourly_kWh)
    total = float(np.sum(hourly_kWh))
    average = total / HOURS_PER_DAY
    peak_value, peak_hour = peak_of(hourly_kWh)
    night_average = float(np.sum(hourly_kWh[:NIGHT_HOURS])) / NIGHT_HOURS
    return DayAnalytics(
        total=total,
        average=average,
        peak_value=peak_value,
        peak_hour=peak_hour,
        night_average=night_average,
        alerts=check_alerts(hourly_kWh, average, peak_value, night_average),
        top_hours=rank_hours(hourly_kWh, average),
    )
