"""
Synthetic daily load simulation for an office building.

Builds a 24-hour consumption curve from a seeded generator and splits
the daily total into fixed category and consumer shares.
"""

import datetime as dt
import logging
import math

import numpy as np

from .config import (
    CATEGORY_SHARES,
    CONSUMER_SHARES,
    DEFAULT_BUILDING_NAME,
    DEFAULT_SEED,
    HOURLY_FLOOR_KWH,
    HOURS_PER_DAY,
    PRICE_CZK_PER_KWH,
    TOP_CONSUMERS,
    ProfileParams,
)
from .models import Category, Consumer, EnergyDay
from .rng import SeededRNG

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = ProfileParams()


def base_load(hour, params=DEFAULT_PROFILE):
    """Base load [kWh] for the time bracket the hour falls into."""
    if hour < 6 or hour >= 23:
        return params.base_night
    if hour < 8:
        return params.base_morning
    if hour <= 18:
        return params.base_work
    return params.base_evening


def work_wave(hour, params=DEFAULT_PROFILE):
    if 8 <= hour <= 18:
        return params.work_wave_amplitude * math.sin((hour - 8) / 10 * math.pi)
    return 0.0


def simulate_hourly_profile(rng, params=DEFAULT_PROFILE):
    """
    Simulate one day of hourly consumption.

    Every hour draws a noise value and a spike check from ``rng``; the
    spike magnitude is drawn only when the check fires. Keep this order,
    the whole curve for a given seed depends on it.

    Args:
        rng: generator exposing ``next_unit_double()``, owned by this run.
        params: curve shape, see :class:`ProfileParams`.

    Returns:
        list of 24 floats [kWh], index = hour of day.
    """
    hourly = []
    for h in range(HOURS_PER_DAY):
        base = base_load(h, params)
        wave = work_wave(h, params)
        noise = (rng.next_unit_double() - 0.5) * 2.0 * params.noise_amplitude
        spike = 0.0
        if rng.next_unit_double() < params.spike_probability:
            spike = params.spike_min + rng.next_unit_double() * params.spike_range
        hourly.append(max(HOURLY_FLOOR_KWH, base + wave + noise + spike))
    return hourly


def split_total(total, table):
    """Distribute ``total`` over the (name, fraction) pairs of ``table``."""
    return [(name, total * share) for name, share in table]


def rank_consumers(total, table=CONSUMER_SHARES):
    """All consumers sorted by descending kWh, ties keep table order."""
    consumers = [Consumer(name, kWh) for name, kWh in split_total(total, table)]
    # sorted() is stable, so equal shares keep their table order
    return sorted(consumers, key=lambda c: c.kWh, reverse=True)


def decompose_shares(
    hourly_kWh,
    categories=CATEGORY_SHARES,
    consumers=CONSUMER_SHARES,
    top_n=TOP_CONSUMERS,
):
    """
    Split the daily total into the category breakdown (table order) and
    the ``top_n`` largest consumers.
    """
    total = float(np.sum(hourly_kWh))
    category_breakdown = [Category(name, kWh) for name, kWh in split_total(total, categories)]
    top_consumers = rank_consumers(total, consumers)[:top_n]
    return category_breakdown, top_consumers


def simulate_energy_day(
    seed=DEFAULT_SEED,
    building_name=DEFAULT_BUILDING_NAME,
    date=None,
    price_CZK_per_kWh=PRICE_CZK_PER_KWH,
    params=DEFAULT_PROFILE,
    categories=CATEGORY_SHARES,
    consumers=CONSUMER_SHARES,
):
    """Run the full pipeline: seed -> hourly curve -> shares -> EnergyDay."""
    rng = SeededRNG(seed)
    hourly = simulate_hourly_profile(rng, params)
    category_breakdown, top_consumers = decompose_shares(hourly, categories, consumers)
    day = EnergyDay(
        building_name=building_name,
        date=date if date is not None else dt.date.today(),
        hourly_kWh=hourly,
        top_consumers=top_consumers,
        category_breakdown=category_breakdown,
        price_CZK_per_kWh=price_CZK_per_kWh,
    )
    logger.debug(
        "Simulated %s for seed %#x: total %.2f kWh, peak %.2f kWh",
        day.building_name,
        int(seed),
        day.total_kWh,
        max(day.hourly_kWh),
    )
    return day
