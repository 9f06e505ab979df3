"""
Report parameters and share tables.

Everything the simulation treats as fixed input lives here: the seed,
the building, the tariff and the share tables used to split the daily
total into categories and consumers.
"""

import math
from dataclasses import dataclass


class ConfigurationError(ValueError):
    """Raised when a parameter table or report value breaks an invariant."""


@dataclass(frozen=True)
class ShareTable:
    """Ordered (name, fraction) pairs whose fractions sum to 1.0."""

    entries: tuple

    def __post_init__(self):
        entries = tuple((str(name), float(share)) for name, share in self.entries)
        object.__setattr__(self, "entries", entries)
        if not entries:
            raise ConfigurationError("Share table must not be empty.")
        names = [name for name, _ in entries]
        if len(set(names)) != len(names):
            raise ConfigurationError("Share table names must be unique.")
        if any(share < 0 for _, share in entries):
            raise ConfigurationError("Share fractions must be non-negative.")
        total = math.fsum(share for _, share in entries)
        if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=1e-9):
            raise ConfigurationError(
                f"Share fractions must sum to 1.0, got {total:.12f}."
            )

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    @property
    def names(self):
        return tuple(name for name, _ in self.entries)


@dataclass(frozen=True)
class ProfileParams:
    """Shape of the synthetic daily load curve (kWh per hour)."""

    base_night: float = 6.5
    base_morning: float = 9.5
    base_work: float = 16.0
    base_evening: float = 10.0
    work_wave_amplitude: float = 7.0
    noise_amplitude: float = 1.0
    spike_probability: float = 0.08
    spike_min: float = 5.0
    spike_range: float = 10.0

    def __post_init__(self):
        if not (0 <= self.spike_probability <= 1):
            raise ConfigurationError("Spike probability must be between 0 and 1.")
        if self.noise_amplitude < 0 or self.spike_range < 0:
            raise ConfigurationError("Noise amplitude and spike range must be non-negative.")


# --- Report inputs ---
DEFAULT_SEED = 0xC0FFEE
DEFAULT_BUILDING_NAME = "Office building A (small)"
PRICE_CZK_PER_KWH = 3.20  # flat tariff [CZK/kWh]

# --- Curve and ranking parameters ---
HOURS_PER_DAY = 24
HOURLY_FLOOR_KWH = 3.0
NIGHT_HOURS = 6  # hours 00:00-05:59 count as night load
TOP_CONSUMERS = 6
TOP_HOURS = 10

# --- Alert thresholds (multiples of the hourly average) ---
NIGHT_LOAD_FACTOR = 0.75
EXTREME_PEAK_FACTOR = 2.0
PEAK_HOUR_FACTOR = 1.5

CATEGORY_SHARES = ShareTable((
    ("HVAC", 0.42),
    ("Lighting", 0.22),
    ("IT/server room", 0.18),
    ("Plug loads", 0.10),
    ("Other", 0.08),
))

CONSUMER_SHARES = ShareTable((
    ("Chiller / heat pump", 0.22),
    ("Air handling units", 0.17),
    ("Open-space lighting", 0.15),
    ("Server room UPS", 0.14),
    ("EV charging", 0.10),
    ("Elevators", 0.05),
    ("Other", 0.17),
))
