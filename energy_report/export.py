"""
Black-and-white report page.

Renders the whole report (summary, hourly curve, top consumers, category
pie, top hours, checklist) into one monochrome figure, the form a receipt
printer would get after rasterizing. No printer commands are produced.
"""

import logging
import math

import matplotlib.pyplot as plt

from .analytics import derive_analytics
from .report import format_hour, summarize_day, top_hours_frame

logger = logging.getLogger(__name__)

# pie slices are told apart by hatch pattern, not colour
HATCHES = ["///", "\\\\\\", "---", "|||"]


def _draw_header(ax, day, summary):
    ax.axis("off")
    ax.set_title("Daily Energy Report", loc="left", fontweight="bold")
    lines = [
        day.building_name,
        f"Date: {day.date.isoformat()}",
        f"Total: {summary['total']:.1f} kWh",
        f"Estimated cost: {summary['cost']:.0f} CZK ({summary['price']:.2f} CZK/kWh)",
        f"Peak: {summary['peak']:.1f} kWh @ {format_hour(summary['peak_hour'])}",
    ]
    for i, line in enumerate(lines):
        ax.text(0.0, 0.85 - i * 0.2, line, transform=ax.transAxes,
                fontweight="bold" if i in (0, 2) else "normal")


def _draw_hourly(ax, day, analytics):
    hours = range(len(day.hourly_kWh))
    y_max = math.ceil(max(10.0, analytics.peak_value) / 5.0) * 5.0
    ax.plot(hours, day.hourly_kWh, "k-", linewidth=2)
    ax.plot([analytics.peak_hour], [analytics.peak_value], "ko", markersize=4)
    ax.annotate(f"peak {analytics.peak_value:.1f}", (analytics.peak_hour, analytics.peak_value),
                xytext=(6, 4), textcoords="offset points")
    ax.set_ylim(0, y_max)
    ax.set_xticks([0, 6, 12, 18, 23])
    ax.set_xticklabels([f"{h:02d}" for h in (0, 6, 12, 18, 23)])
    ax.grid(True, axis="y", color="0.8")
    ax.set_title("Timeline (kWh/h)", loc="left", fontweight="bold")


def _draw_consumers(ax, day):
    names = [c.name for c in day.top_consumers][::-1]
    values = [c.kWh for c in day.top_consumers][::-1]
    ax.barh(names, values, color="black", edgecolor="black")
    for i, v in enumerate(values):
        ax.text(v, i, f" {v:.1f}", va="center")
    ax.set_title("Top consumers (kWh/day)", loc="left", fontweight="bold")


def _draw_categories(ax, day):
    values = [c.kWh for c in day.category_breakdown]
    total = sum(values)
    wedges, _ = ax.pie(values, startangle=90, counterclock=False,
                       colors=["white"] * len(values),
                       wedgeprops=dict(edgecolor="black"))
    for i, wedge in enumerate(wedges):
        wedge.set_hatch(HATCHES[i % len(HATCHES)])
    labels = [
        f"{i + 1}) {c.name}  {100.0 * c.kWh / total:.0f}%" if total > 0 else f"{i + 1}) {c.name}"
        for i, c in enumerate(day.category_breakdown)
    ]
    ax.legend(wedges, labels, loc="center left", bbox_to_anchor=(1.0, 0.5), frameon=False)
    ax.set_title("Category breakdown (share)", loc="left", fontweight="bold")


def _draw_top_hours(ax, day, analytics):
    ax.axis("off")
    df = top_hours_frame(day, analytics)
    cells = [
        [row.hour, f"{row.kWh:.1f}", f"{row.cost_CZK:.0f}", row.note]
        for row in df.itertuples(index=False)
    ]
    if cells:
        ax.table(cellText=cells, colLabels=["Hour", "kWh", "CZK", "Note"], loc="upper left", edges="horizontal")
    ax.set_title(
        f"Top hours   (average {analytics.average:.1f} kWh/h, price {day.price_CZK_per_kWh:.2f} CZK/kWh)",
        loc="left", fontweight="bold",
    )


def _draw_checklist(ax, analytics):
    ax.axis("off")
    ax.set_title("Checklist / Alerts", loc="left", fontweight="bold")
    n = len(analytics.alerts)
    for i, alert in enumerate(analytics.alerts):
        mark = "[x]" if alert.ok else "[!]"
        ax.text(0.0, 1.0 - (i + 1) / (n + 1), f"{mark} {alert.label}", transform=ax.transAxes,
                fontweight="normal" if alert.ok else "bold")


def build_report_figure(day, analytics=None):
    """Draw the full report for ``day``; the caller owns the returned figure."""
    if analytics is None:
        analytics = derive_analytics(day.hourly_kWh)
    summary = summarize_day(day, analytics)

    fig = plt.figure(figsize=(6, 22))
    heights = [1.2, 2.6, 2.5, 3.0, 3.2, 2.4]
    axes = fig.subplots(len(heights), 1, gridspec_kw=dict(height_ratios=heights))
    _draw_header(axes[0], day, summary)
    _draw_hourly(axes[1], day, analytics)
    _draw_consumers(axes[2], day)
    _draw_categories(axes[3], day)
    _draw_top_hours(axes[4], day, analytics)
    _draw_checklist(axes[5], analytics)
    fig.tight_layout()
    return fig


def save_report(day, path, dpi=100, analytics=None):
    """Render the report page for ``day`` to ``path`` (format from the suffix)."""
    fig = build_report_figure(day, analytics)
    try:
        fig.savefig(path, dpi=dpi)
    finally:
        plt.close(fig)
    logger.info("Report for %s written to %s", day.building_name, path)
    return path
