"""
Tests for the rate graph.
"""

import math

import pytest

from fxarb.core import InvalidPair, InvalidRate, InvalidVertex, RateGraph, RateGraphError
from conftest import USD, GBP, JPY, EUR


class TestRateGraph:
    """Tests for RateGraph"""

    def test_new_graph_has_no_edges(self, graph: RateGraph):
        """Every entry, diagonal included, starts as no edge"""
        assert graph.size == 8
        for i in range(graph.size):
            for j in range(graph.size):
                assert graph.edge_weight(i, j) is None
        assert list(graph.edges()) == []

    def test_set_rate_stores_negative_log(self, graph: RateGraph):
        """Weight is -ln(rate) and only that entry changes"""
        weight = graph.set_rate(USD, GBP, 0.8)

        assert weight == pytest.approx(-math.log(0.8))
        assert graph.edge_weight(USD, GBP) == pytest.approx(-math.log(0.8))
        assert graph.edge_weight(GBP, USD) is None
        assert graph.edge_count() == 1

    def test_set_rate_overwrites_pair(self, graph: RateGraph):
        """Re-entering a pair updates it instead of duplicating"""
        graph.set_rate(USD, GBP, 0.8)
        graph.set_rate(USD, GBP, 0.75)

        assert graph.edge_weight(USD, GBP) == pytest.approx(-math.log(0.75))
        assert graph.edge_count() == 1

    def test_set_rate_idempotent(self):
        """Setting the same rate twice equals setting it once"""
        once = RateGraph(4)
        twice = RateGraph(4)

        once.set_rate(0, 1, 1.3)
        twice.set_rate(0, 1, 1.3)
        twice.set_rate(0, 1, 1.3)

        assert once == twice

    def test_integer_rate_accepted(self, graph: RateGraph):
        graph.set_rate(EUR, JPY, 130)
        assert graph.edge_weight(EUR, JPY) == pytest.approx(-math.log(130))

    def test_same_currency_rejected(self, graph: RateGraph):
        """base == quote raises InvalidPair and leaves the graph unchanged"""
        graph.set_rate(USD, GBP, 0.8)
        before = graph.copy()

        with pytest.raises(InvalidPair):
            graph.set_rate(USD, USD, 1.5)

        assert graph == before
        assert graph.edge_weight(USD, USD) is None

    def test_same_currency_checked_before_rate(self, graph: RateGraph):
        with pytest.raises(InvalidPair):
            graph.set_rate(GBP, GBP, -1)

    @pytest.mark.parametrize("rate", [-2, 0, 0.0, float("nan"), float("inf"), -float("inf"), "1.3", None, True])
    def test_invalid_rate_rejected(self, graph: RateGraph, rate):
        """Non-positive, non-finite and non-numeric rates raise InvalidRate"""
        before = graph.copy()

        with pytest.raises(InvalidRate):
            graph.set_rate(USD, GBP, rate)

        assert graph == before

    @pytest.mark.parametrize("vertex", [-1, 8, 100, "USD", 1.0])
    def test_invalid_vertex_rejected(self, graph: RateGraph, vertex):
        with pytest.raises(InvalidVertex):
            graph.set_rate(vertex, GBP, 1.1)
        with pytest.raises(InvalidVertex):
            graph.edge_weight(USD, vertex)

    def test_errors_are_value_errors(self):
        """Validation errors share the ValueError convention"""
        for error in (InvalidPair, InvalidRate, InvalidVertex):
            assert issubclass(error, RateGraphError)
            assert issubclass(error, ValueError)

    def test_reset_clears_all_edges(self, graph: RateGraph):
        graph.set_rate(USD, GBP, 0.8)
        graph.set_rate(GBP, USD, 1.3)

        graph.reset()

        assert graph.edge_count() == 0
        assert graph.edge_weight(USD, GBP) is None
        assert graph == RateGraph(8)

    def test_edges_row_major(self, graph: RateGraph):
        """edges() yields by source id, then target id"""
        graph.set_rate(EUR, USD, 1.1)
        graph.set_rate(USD, JPY, 150)
        graph.set_rate(USD, GBP, 0.8)
        graph.set_rate(GBP, USD, 1.25)

        assert [(u, v) for u, v, _ in graph.edges()] == [
            (USD, GBP), (USD, JPY), (GBP, USD), (EUR, USD),
        ]

    def test_copy_is_independent(self, graph: RateGraph):
        graph.set_rate(USD, GBP, 0.8)
        snapshot = graph.copy()

        graph.set_rate(GBP, USD, 1.3)

        assert snapshot.edge_weight(GBP, USD) is None
        assert snapshot.edge_weight(USD, GBP) == graph.edge_weight(USD, GBP)

    @pytest.mark.parametrize("size", [0, -3, 2.5, True])
    def test_invalid_size(self, size):
        with pytest.raises(ValueError):
            RateGraph(size)
