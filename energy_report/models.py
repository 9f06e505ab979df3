"""Immutable records handed from the simulation to the report consumers."""

import datetime as dt
from dataclasses import dataclass

import numpy as np

from .config import ConfigurationError, HOURLY_FLOOR_KWH, HOURS_PER_DAY, TOP_CONSUMERS


@dataclass(frozen=True)
class Consumer:
    name: str
    kWh: float


@dataclass(frozen=True)
class Category:
    name: str
    kWh: float


@dataclass(frozen=True)
class Alert:
    label: str
    ok: bool


@dataclass(frozen=True)
class HourRow:
    hour: int
    kWh: float
    note: str = ""


@dataclass(frozen=True)
class EnergyDay:
    """One simulated day of building consumption."""

    building_name: str
    date: dt.date
    hourly_kWh: tuple
    top_consumers: tuple
    category_breakdown: tuple
    price_CZK_per_kWh: float

    def __post_init__(self):
        object.__setattr__(self, "hourly_kWh", tuple(float(v) for v in self.hourly_kWh))
        object.__setattr__(self, "top_consumers", tuple(self.top_consumers))
        object.__setattr__(self, "category_breakdown", tuple(self.category_breakdown))

        if len(self.hourly_kWh) != HOURS_PER_DAY:
            raise ConfigurationError(
                f"Expected {HOURS_PER_DAY} hourly values, got {len(self.hourly_kWh)}."
            )
        if min(self.hourly_kWh) < HOURLY_FLOOR_KWH:
            raise ConfigurationError(
                f"Hourly values must be at least {HOURLY_FLOOR_KWH} kWh."
            )
        if len(self.top_consumers) > TOP_CONSUMERS:
            raise ConfigurationError(
                f"At most {TOP_CONSUMERS} top consumers, got {len(self.top_consumers)}."
            )
        if self.price_CZK_per_kWh <= 0:
            raise ConfigurationError("Price per kWh must be positive.")

    @property
    def total_kWh(self):
        return float(np.sum(self.hourly_kWh))

    @property
    def cost_CZK(self):
        return self.total_kWh * self.price_CZK_per_kWh


@dataclass(frozen=True)
class DayAnalytics:
    """Summary statistics and checklist derived from an hourly curve."""

    total: float
    average: float
    peak_value: float
    peak_hour: int
    night_average: float
    alerts: tuple
    top_hours: tuple
