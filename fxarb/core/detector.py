"""
Arbitrage Detector

Finds a profitable conversion cycle in a RateGraph with Bellman-Ford
negative-cycle detection.

Because edges are directed, a single-source run only sees cycles reachable
from that source, so detection runs from every vertex in index order and
returns the first cycle found. Edges are relaxed in row-major order. Both
orders are fixed, so the same graph always yields the same cycle.
"""

import logging
import math
from typing import List, Optional

from .errors import InvalidVertex
from .graph import RateGraph

logger = logging.getLogger(__name__)

# Relative tolerance on distance improvements
REL_EPS = 1e-12


class ArbitrageDetector:
    """
    Stateless negative-cycle finder.

    Every call recomputes from scratch; distance and predecessor arrays
    are allocated per relaxation run.

    An edge only improves a distance by more than rel_eps (relative to the
    distance it starts from), so rates that multiply to exactly 1 are not
    reported as a cycle because of rounding in -ln(rate).
    """

    def __init__(self, rel_eps: float = REL_EPS):
        self.rel_eps = rel_eps

    def _improves(self, start: float, weight: float, current: float) -> bool:
        return start + weight < current - self.rel_eps * max(1.0, abs(start))

    def find_arbitrage(self, graph: RateGraph) -> List[int]:
        """
        Look for an arbitrage cycle from every source in turn.

        Returns:
            Closed cycle of vertex ids [v0, v1, ..., v0] in conversion
            order, or [] if no source exposes a negative cycle.
        """
        for source in range(graph.size):
            logger.debug(f"Relaxing from source {source}")
            cycle = self.relax(graph, source)
            if cycle:
                logger.info(f"Negative cycle found from source {source}: {cycle}")
                return cycle
        return []

    def relax(self, graph: RateGraph, source: int) -> List[int]:
        """
        Run N rounds of Bellman-Ford from source, then one check pass.

        Returns the cycle behind the first edge that can still be relaxed,
        or [] if none can.
        """
        size = graph.size
        if isinstance(source, bool) or not isinstance(source, int) or not 0 <= source < size:
            raise InvalidVertex(f"Source {source!r} outside 0..{size - 1}")

        edges = list(graph.edges())
        distance = [math.inf] * size
        predecessor: List[Optional[int]] = [None] * size
        distance[source] = 0.0

        for _ in range(size):
            for u, v, weight in edges:
                # unreached vertices cannot improve anything
                if distance[u] == math.inf:
                    continue
                if self._improves(distance[u], weight, distance[v]):
                    distance[v] = distance[u] + weight
                    predecessor[v] = u

        for u, v, weight in edges:
            if distance[u] == math.inf:
                continue
            if self._improves(distance[u], weight, distance[v]):
                cycle = self.extract_cycle(v, predecessor)
                if cycle:
                    return cycle
        return []

    @staticmethod
    def extract_cycle(start_hint: int, predecessor: List[Optional[int]]) -> List[int]:
        """
        Rebuild the cycle that start_hint's predecessor chain runs into.

        The chain from start_hint may pass through vertices that are not on
        the cycle. Walking back until a vertex repeats lands on the cycle;
        walking one full loop from there collects it.

        Returns [] if the chain ends before repeating.
        """
        visited = set()
        vertex: Optional[int] = start_hint
        while vertex is not None and vertex not in visited:
            visited.add(vertex)
            vertex = predecessor[vertex]
        if vertex is None:
            return []

        cycle_start = vertex
        cycle = [cycle_start]
        vertex = predecessor[cycle_start]
        while vertex != cycle_start:
            cycle.append(vertex)
            vertex = predecessor[vertex]
        cycle.append(cycle_start)
        cycle.reverse()
        return cycle


def find_arbitrage(graph: RateGraph) -> List[int]:
    """Shortcut for ArbitrageDetector().find_arbitrage(graph)"""
    return ArbitrageDetector().find_arbitrage(graph)
