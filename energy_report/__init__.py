"""
Daily building energy report package.

This package simulates a reproducible day of building energy consumption
and derives the statistics, tables and figures of a daily report.
"""

__version__ = "0.1.0"

from .analytics import derive_analytics
from .config import ConfigurationError, ProfileParams, ShareTable
from .models import Alert, Category, Consumer, DayAnalytics, EnergyDay, HourRow
from .rng import SeededRNG
from .simulation import (
    decompose_shares,
    simulate_energy_day,
    simulate_hourly_profile
)

__all__ = [
    'Alert',
    'Category',
    'ConfigurationError',
    'Consumer',
    'DayAnalytics',
    'EnergyDay',
    'HourRow',
    'ProfileParams',
    'SeededRNG',
    'ShareTable',
    'decompose_shares',
    'derive_analytics',
    'simulate_energy_day',
    'simulate_hourly_profile',
    '__version__'
]
