"""
Rate Graph

Dense adjacency matrix over a fixed set of currencies. Each entry holds the
additive weight of converting one currency into another:

  weight = -ln(rate)

so that a cycle whose rates multiply to more than 1 (profit) becomes a cycle
whose weights sum to less than 0 (negative cycle).
"""

import logging
import math
import numbers
from typing import Iterator, List, Optional, Tuple

from .errors import InvalidPair, InvalidRate, InvalidVertex

logger = logging.getLogger(__name__)


class RateGraph:
    """
    Directed, weighted graph of exchange rates.

    weight[i][j] is None ("no edge") until a rate from currency i to
    currency j is entered. The matrix is not symmetric and need not be
    complete.
    """

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"Graph size must be a positive integer, got {size!r}")
        self._size = size
        self._weights: List[List[Optional[float]]] = self._empty_matrix()

    @property
    def size(self) -> int:
        """Number of vertices (currencies)"""
        return self._size

    def _empty_matrix(self) -> List[List[Optional[float]]]:
        return [[None] * self._size for _ in range(self._size)]

    def reset(self):
        """Remove every edge"""
        self._weights = self._empty_matrix()
        logger.debug("Rate graph reset")

    def _check_vertex(self, vertex) -> int:
        if isinstance(vertex, bool) or not isinstance(vertex, int):
            raise InvalidVertex(f"Vertex id must be an integer, got {vertex!r}")
        if not 0 <= vertex < self._size:
            raise InvalidVertex(f"Vertex {vertex} outside 0..{self._size - 1}")
        return vertex

    @staticmethod
    def _check_rate(rate) -> float:
        if isinstance(rate, bool) or not isinstance(rate, numbers.Real):
            raise InvalidRate(f"Rate must be a number, got {rate!r}")
        rate = float(rate)
        if not math.isfinite(rate) or rate <= 0:
            raise InvalidRate(f"Rate must be finite and positive, got {rate!r}")
        return rate

    def set_rate(self, base: int, quote: int, rate: float) -> float:
        """
        Store the rate for converting base into quote.

        Args:
            base: Vertex id of the currency sold
            quote: Vertex id of the currency received
            rate: Units of quote received per 1 unit of base

        Returns:
            The stored edge weight (-ln(rate))

        Raises:
            InvalidVertex: base or quote is not a vertex of this graph
            InvalidPair: base == quote
            InvalidRate: rate is not a finite positive number

        All checks run before the matrix is touched.
        """
        base = self._check_vertex(base)
        quote = self._check_vertex(quote)
        if base == quote:
            raise InvalidPair(f"Base and quote must differ, got {base} twice")
        rate = self._check_rate(rate)

        weight = -math.log(rate)
        self._weights[base][quote] = weight
        logger.debug(f"Edge {base}->{quote} rate={rate} weight={weight:.6f}")
        return weight

    def edge_weight(self, source: int, target: int) -> Optional[float]:
        """Weight of the edge source->target, or None if no rate was entered"""
        return self._weights[self._check_vertex(source)][self._check_vertex(target)]

    def edges(self) -> Iterator[Tuple[int, int, float]]:
        """Yield (from, to, weight) for every entered rate, row-major by vertex id"""
        for source, row in enumerate(self._weights):
            for target, weight in enumerate(row):
                if weight is not None:
                    yield source, target, weight

    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    def copy(self) -> "RateGraph":
        """Independent snapshot of this graph"""
        snapshot = RateGraph(self._size)
        snapshot._weights = [list(row) for row in self._weights]
        return snapshot

    def __eq__(self, other):
        if not isinstance(other, RateGraph):
            return NotImplemented
        return self._size == other._size and self._weights == other._weights

    def __repr__(self):
        return f"RateGraph(size={self._size}, edges={self.edge_count()})"
