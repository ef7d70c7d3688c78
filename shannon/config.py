"""
Default settings and threshold handling.

Edge thresholds given on the command line are fractions of the maximum
possible entropy (8 bits/byte) unless absolute values are requested, so the
defaults 0.95/0.85 mean 7.6/6.8 bits/byte.
"""
from typing import NamedTuple

from shannon.core.entropy import MAX_ENTROPY


DEFAULT_BLOCK_SIZE = 1024
DEFAULT_WIDTH = 180
DEFAULT_HEIGHT = 100
DEFAULT_HIGH_THRESHOLD = 0.95
DEFAULT_LOW_THRESHOLD = 0.85
DEFAULT_WORKERS = 1


class Thresholds(NamedTuple):
    """Edge thresholds in bits/byte."""
    high: float
    low: float

    @property
    def is_ordered(self):
        return self.high >= self.low


def resolve_thresholds(high=DEFAULT_HIGH_THRESHOLD, low=DEFAULT_LOW_THRESHOLD, absolute=False):
    """Convert user supplied thresholds to the bits/byte scale."""
    if absolute:
        return Thresholds(float(high), float(low))
    return Thresholds(high * MAX_ENTROPY, low * MAX_ENTROPY)


DEFAULT_THRESHOLDS = resolve_thresholds()
