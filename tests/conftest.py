import datetime as dt

import matplotlib
import pytest

from energy_report.models import EnergyDay
from energy_report.simulation import decompose_shares

matplotlib.use("Agg")


def build_day(hourly, price=3.20):
    categories, consumers = decompose_shares(hourly)
    return EnergyDay(
        building_name="Test building",
        date=dt.date(2024, 5, 17),
        hourly_kWh=hourly,
        top_consumers=consumers,
        category_breakdown=categories,
        price_CZK_per_kWh=price,
    )


@pytest.fixture
def flat_day():
    return build_day([10.0] * 24)


@pytest.fixture
def peaky_day():
    hourly = [5.0] * 24
    hourly[13] = 100.0
    return build_day(hourly)
