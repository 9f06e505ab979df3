"""Seeded linear congruential generator used for reproducible report data."""

_MASK_64 = (1 << 64) - 1
_MULTIPLIER = 6364136223846793005
_INCREMENT = 1
_UNIT_SCALE = float(1 << 53)


class SeededRNG:
    """
    64-bit LCG. The same seed and the same sequence of calls always give
    the same numbers; statistical quality is not a goal.

    One instance belongs to one simulation run. Do not share it between
    runs, every extra draw shifts all later values.
    """

    def __init__(self, seed):
        self.state = int(seed) & _MASK_64

    def next(self):
        self.state = (self.state * _MULTIPLIER + _INCREMENT) & _MASK_64
        return self.state

    def next_unit_double(self):
        # top 53 bits -> [0, 1)
        return (self.next() >> 11) / _UNIT_SCALE
