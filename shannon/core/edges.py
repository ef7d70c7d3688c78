"""
Finds where a file switches between high and low entropy regions.

Uses two thresholds (hysteresis) so noise hovering around a single cutoff
does not produce a burst of edges. The detector only compares numbers: the
thresholds must be on the same scale as the entropy values passed in.
"""
from dataclasses import dataclass
from enum import Enum


class EdgeType(Enum):
    RISING = "rising"
    FALLING = "falling"


@dataclass(frozen=True)
class Edge:
    block_index: int
    edge_type: EdgeType
    entropy: float = 0.0


def detect_edges(sequence, high, low):
    """
    Walk the entropy sequence and report rising/falling edges.

    Starts in the low state. A value >= ``high`` while low emits a rising
    edge; a value <= ``low`` while high emits a falling edge. Values in
    between keep the current state. ``sequence`` holds (index, entropy)
    pairs, BlockEntropy entries included.
    """
    edges = []
    armed = False

    for entry in sequence:
        index, value = entry[0], entry[1]
        if not armed and value >= high:
            edges.append(Edge(index, EdgeType.RISING, value))
            armed = True
        elif armed and value <= low:
            edges.append(Edge(index, EdgeType.FALLING, value))
            armed = False

    return edges


def pair_regions(edges, block_count):
    """
    Turn alternating edges into (start_block, end_block) high entropy regions.

    The end block is the one where the falling edge fired. A rising edge
    that never falls runs to the last block.
    """
    regions = []
    start = None

    for edge in edges:
        if edge.edge_type is EdgeType.RISING:
            start = edge.block_index
        elif start is not None:
            regions.append((start, edge.block_index))
            start = None

    if start is not None:
        regions.append((start, max(block_count - 1, start)))

    return regions
