"""Core analysis functionality."""

from .entropy import (
    MAX_ENTROPY,
    byte_histogram,
    entropy,
    entropy_from_histogram,
    total_entropy,
    get_entropy_color
)
from .errors import InvalidConfiguration
from .scanner import Block, BlockEntropy, check_workers, iter_blocks, scan, scan_stream
from .edges import Edge, EdgeType, detect_edges, pair_regions

__all__ = [
    'MAX_ENTROPY',
    'byte_histogram',
    'entropy_from_histogram',
    'entropy',
    'total_entropy',
    'get_entropy_color',
    'InvalidConfiguration',
    'Block',
    'BlockEntropy',
    'check_workers',
    'iter_blocks',
    'scan',
    'scan_stream',
    'Edge',
    'EdgeType',
    'detect_edges',
    'pair_regions'
]
