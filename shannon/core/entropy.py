"""
Calculates Shannon entropy of byte buffers to spot packed/encrypted data.
"""
import numpy as np
from colorama import Fore


MAX_ENTROPY = 8.0


def byte_histogram(data):
    """Count how often each of the 256 byte values shows up."""
    if not data:
        return np.zeros(256, dtype=np.int64)
    values = np.frombuffer(data, dtype=np.uint8)
    return np.bincount(values, minlength=256).astype(np.int64)


def entropy_from_histogram(counts):
    """Entropy in bits per byte from a 256-bucket byte count array."""
    counts = np.asarray(counts, dtype=np.int64)
    length = int(counts.sum())
    if length == 0:
        return 0.0

    counts = counts[counts > 0]
    probabilities = counts.astype(np.float64) / float(length)

    value = -float(np.sum(probabilities * np.log2(probabilities)))
    # a single repeated symbol gives -0.0
    return value if value > 0.0 else 0.0


def entropy(data):
    """
    Shannon entropy of a chunk of bytes, in bits per byte (0.0 to 8.0).

    An empty buffer carries no information and gives 0.0.
    """
    if not data:
        return 0.0
    return entropy_from_histogram(byte_histogram(data))


def total_entropy(data):
    """Entropy weighted by length, i.e. bits for the whole buffer."""
    if not data:
        return 0.0
    return entropy(data) * len(data)


def get_entropy_color(value):
    """Returns color based on how suspicious the entropy level is."""
    if value > 7.5:
        return Fore.RED
    elif value > 6.5:
        return Fore.YELLOW
    else:
        return Fore.GREEN
