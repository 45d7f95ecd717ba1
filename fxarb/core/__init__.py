"""
Core arbitrage detection: rate graph, negative-cycle detector and result types.
"""

from .errors import RateGraphError, InvalidPair, InvalidRate, InvalidVertex
from .graph import RateGraph
from .detector import ArbitrageDetector, find_arbitrage
from .opportunity import ArbitrageCycle, CurrencyPair

__all__ = [
    "RateGraph",
    "ArbitrageDetector",
    "find_arbitrage",
    "ArbitrageCycle",
    "CurrencyPair",
    "RateGraphError",
    "InvalidPair",
    "InvalidRate",
    "InvalidVertex",
]
