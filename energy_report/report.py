"""Tabular views of an EnergyDay for the dashboard and the printed report."""

import pandas as pd

from .analytics import derive_analytics


def format_hour(hour):
    return f"{hour:02d}:00"


def summarize_day(day, analytics=None):
    if analytics is None:
        analytics = derive_analytics(day.hourly_kWh)
    return {
        "total": analytics.total,
        "cost": analytics.total * day.price_CZK_per_kWh,
        "price": day.price_CZK_per_kWh,
        "average": analytics.average,
        "peak": analytics.peak_value,
        "peak_hour": analytics.peak_hour,
        "night_average": analytics.night_average,
    }


def hourly_frame(day):
    """kWh and cost for every hour of the day, indexed by hour."""
    df = pd.DataFrame({"kWh": list(day.hourly_kWh)}, index=pd.RangeIndex(len(day.hourly_kWh), name="hour"))
    df["cost_CZK"] = df["kWh"] * day.price_CZK_per_kWh
    return df


def top_hours_frame(day, analytics=None):
    if analytics is None:
        analytics = derive_analytics(day.hourly_kWh)
    rows = [
        {
            "hour": format_hour(row.hour),
            "kWh": row.kWh,
            "cost_CZK": row.kWh * day.price_CZK_per_kWh,
            "note": row.note,
        }
        for row in analytics.top_hours
    ]
    return pd.DataFrame(rows, columns=["hour", "kWh", "cost_CZK", "note"])


def _share_frame(items):
    df = pd.DataFrame(
        [{"name": item.name, "kWh": item.kWh} for item in items],
        columns=["name", "kWh"],
    )
    total = df["kWh"].sum()
    # share of the listed rows only; top consumers do not cover the whole day
    df["share_pct"] = 100.0 * df["kWh"] / total if total > 0 else 0.0
    return df


def consumers_frame(day):
    return _share_frame(day.top_consumers)


def categories_frame(day):
    return _share_frame(day.category_breakdown)


def alerts_frame(analytics):
    return pd.DataFrame(
        [{"label": alert.label, "ok": alert.ok} for alert in analytics.alerts],
        columns=["label", "ok"],
    )
