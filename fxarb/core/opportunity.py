"""
Data classes for entered currency pairs and detected arbitrage cycles.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Sequence, Tuple

from .graph import RateGraph


@dataclass
class CurrencyPair:
    """A rate entered for converting base into quote"""
    base: str
    quote: str
    rate: float
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def pair_id(self) -> str:
        return f"{self.base}-{self.quote}"

    def __str__(self):
        return f"{self.base}/{self.quote} = {self.rate}"

    def to_dict(self) -> dict:
        return {
            "id": self.pair_id,
            "base": self.base,
            "quote": self.quote,
            "rate": self.rate,
            "label": str(self),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass
class ArbitrageCycle:
    """
    A profitable conversion cycle.

    vertices and currencies are closed (first == last); rates[i] is the
    rate used to convert currencies[i] into currencies[i + 1].
    """
    vertices: List[int]
    currencies: List[str]
    rates: List[float]
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_vertices(
        cls,
        vertices: Sequence[int],
        currencies: Sequence[str],
        graph: RateGraph,
    ) -> "ArbitrageCycle":
        """Build a cycle from detector output, recovering each rate as exp(-weight)"""
        rates = []
        for base, quote in zip(vertices, vertices[1:]):
            weight = graph.edge_weight(base, quote)
            if weight is None:
                raise ValueError(f"No rate entered for {currencies[base]}/{currencies[quote]}")
            rates.append(math.exp(-weight))
        return cls(
            vertices=list(vertices),
            currencies=[currencies[v] for v in vertices],
            rates=rates,
        )

    @property
    def product(self) -> float:
        """Units of the start currency held after one trip around the cycle, per unit"""
        return math.prod(self.rates)

    @property
    def profit_percent(self) -> float:
        return (self.product - 1) * 100

    @property
    def legs(self) -> List[Tuple[str, str]]:
        return list(zip(self.currencies, self.currencies[1:]))

    @property
    def pair_ids(self) -> List[str]:
        return [f"{base}-{quote}" for base, quote in self.legs]

    @property
    def description(self) -> str:
        return " → ".join(self.currencies)

    def to_dict(self) -> dict:
        return {
            "vertices": self.vertices,
            "currencies": self.currencies,
            "rates": self.rates,
            "pairs": self.pair_ids,
            "description": self.description,
            "product": round(self.product, 8),
            "profit_percent": round(self.profit_percent, 4),
            "timestamp": self.timestamp.isoformat(),
        }
