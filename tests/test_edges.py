"""Tests for shannon.core.edges -- hysteresis edge detection."""

from __future__ import annotations

import random

import pytest

from shannon.config import resolve_thresholds
from shannon.core.edges import Edge, EdgeType, detect_edges, pair_regions
from shannon.core.scanner import scan


def _seq(*values):
    return list(enumerate(values))


def _kinds(edges):
    return [(e.block_index, e.edge_type) for e in edges]


R = EdgeType.RISING
F = EdgeType.FALLING


class TestDetectEdges:
    def test_empty_sequence(self) -> None:
        assert detect_edges([], 7.6, 6.8) == []

    def test_rise_then_fall(self) -> None:
        edges = detect_edges(_seq(1.0, 7.9, 7.0, 7.95, 2.0), high=7.6, low=6.8)
        assert _kinds(edges) == [(1, R), (4, F)]

    def test_starts_high(self) -> None:
        edges = detect_edges(_seq(8.0, 8.0, 8.0), high=7.6, low=6.8)
        assert _kinds(edges) == [(0, R)]

    def test_never_reaches_high(self) -> None:
        assert detect_edges(_seq(7.5, 7.0, 0.0, 7.59), high=7.6, low=6.8) == []

    def test_thresholds_are_inclusive(self) -> None:
        edges = detect_edges(_seq(7.6, 6.8), high=7.6, low=6.8)
        assert _kinds(edges) == [(0, R), (1, F)]

    def test_noise_inside_gap_does_not_chatter(self) -> None:
        edges = detect_edges(_seq(7.5, 7.7, 7.5, 7.7, 7.5, 7.7), high=7.6, low=6.8)
        assert _kinds(edges) == [(1, R)]

    def test_equal_thresholds_act_as_single_cutoff(self) -> None:
        edges = detect_edges(_seq(4.0, 6.0, 5.0, 4.0, 5.0), high=5.0, low=5.0)
        assert _kinds(edges) == [(1, R), (2, F), (4, R)]

    def test_inverted_thresholds_are_well_defined(self) -> None:
        edges = detect_edges(_seq(3.0, 3.0, 7.0, 1.0), high=2.0, low=6.0)
        assert _kinds(edges) == [(0, R), (1, F), (2, R), (3, F)]

    def test_records_entropy_at_edge(self) -> None:
        edges = detect_edges(_seq(1.0, 7.9, 2.0), high=7.6, low=6.8)
        assert edges[0] == Edge(1, R, 7.9)
        assert edges[1].entropy == 2.0

    def test_uses_sequence_indices(self) -> None:
        edges = detect_edges([(10, 8.0), (11, 1.0)], high=7.6, low=6.8)
        assert _kinds(edges) == [(10, R), (11, F)]

    def test_accepts_scan_output(self) -> None:
        data = b"\x00" * 256 + bytes(range(256)) + b"\x00" * 256
        edges = detect_edges(scan(data, 256), high=7.6, low=6.8)
        assert _kinds(edges) == [(1, R), (2, F)]

    def test_monotonic_rise_and_fall(self) -> None:
        values = [0.5, 2.0, 4.0, 6.0, 7.7, 7.9, 7.0, 5.0, 3.0, 1.0]
        edges = detect_edges(_seq(*values), high=7.6, low=6.8)
        assert _kinds(edges) == [(4, R), (7, F)]

    def test_repeatable(self) -> None:
        seq = _seq(1.0, 7.9, 7.0, 7.95, 2.0, 7.7)
        assert detect_edges(seq, 7.6, 6.8) == detect_edges(seq, 7.6, 6.8)

    @pytest.mark.parametrize("seed", range(5))
    def test_edges_alternate(self, seed) -> None:
        rng = random.Random(seed)
        seq = _seq(*(rng.uniform(0.0, 8.0) for _ in range(500)))
        edges = detect_edges(seq, high=6.0, low=3.0)
        assert edges, "random walk should cross thresholds"
        assert [e.edge_type for e in edges] == [R if i % 2 == 0 else F for i in range(len(edges))]
        indices = [e.block_index for e in edges]
        assert indices == sorted(indices)


class TestThresholdUnits:
    """Default thresholds 0.95/0.85 against a bits/byte sequence."""

    SEQUENCE = [(0, 7.8), (1, 7.9), (2, 2.0)]

    def test_raw_fractions_on_bit_scale(self) -> None:
        """Compared directly, 7.8 already exceeds 0.95 and 2.0 never drops to 0.85."""
        edges = detect_edges(self.SEQUENCE, high=0.95, low=0.85)
        assert _kinds(edges) == [(0, R)]

    def test_fractions_resolved_to_bits(self) -> None:
        thresholds = resolve_thresholds(0.95, 0.85)
        assert thresholds.high == pytest.approx(7.6)
        assert thresholds.low == pytest.approx(6.8)
        edges = detect_edges(self.SEQUENCE, thresholds.high, thresholds.low)
        assert _kinds(edges) == [(0, R), (2, F)]

    def test_absolute_thresholds_untouched(self) -> None:
        thresholds = resolve_thresholds(7.85, 3.0, absolute=True)
        edges = detect_edges(self.SEQUENCE, thresholds.high, thresholds.low)
        assert _kinds(edges) == [(1, R), (2, F)]


class TestPairRegions:
    def test_closed_region(self) -> None:
        edges = [Edge(1, R), Edge(4, F)]
        assert pair_regions(edges, 10) == [(1, 4)]

    def test_open_region_runs_to_end(self) -> None:
        edges = [Edge(1, R), Edge(4, F), Edge(6, R)]
        assert pair_regions(edges, 10) == [(1, 4), (6, 9)]

    def test_no_edges(self) -> None:
        assert pair_regions([], 10) == []
