"""Arbitrage detection engine"""
import logging
from datetime import datetime
from typing import Optional, Sequence, Union

from config import CURRENCIES, HISTORY_LIMIT
from fxarb.core import (
    ArbitrageCycle,
    ArbitrageDetector,
    CurrencyPair,
    InvalidVertex,
    RateGraph,
)

logger = logging.getLogger(__name__)

NO_ARBITRAGE_STATUS = "No arbitrage found."

Currency = Union[int, str]


class ArbitrageEngine:
    """
    Keeps the entered currency pairs and re-checks for arbitrage after
    every change.

    A rate is stored as an edge in the RateGraph; the detector is run on
    the whole graph after each entry, so the reported cycle always matches
    the current rates.
    """

    def __init__(
        self,
        currencies: Sequence[str] = CURRENCIES,
        history_limit: int = HISTORY_LIMIT,
    ):
        if len(set(currencies)) != len(currencies):
            raise ValueError(f"Currency labels must be distinct: {list(currencies)}")
        self.currencies: tuple = tuple(currencies)
        self.history_limit = history_limit
        self.graph = RateGraph(len(self.currencies))
        self.detector = ArbitrageDetector()
        # pair_id -> CurrencyPair, in order of first entry
        self.pairs: dict[str, CurrencyPair] = {}
        self.current_cycle: Optional[ArbitrageCycle] = None
        self.status = ""
        self.history: list[ArbitrageCycle] = []
        self._on_opportunity_callbacks: list = []

    def on_opportunity(self, callback):
        """Register callback for detected cycles"""
        self._on_opportunity_callbacks.append(callback)

    def vertex(self, currency: Currency) -> int:
        """Resolve a currency code or vertex id to a vertex id"""
        if isinstance(currency, str):
            code = currency.strip().upper()
            if code.isdecimal():
                try:
                    return self.vertex(int(code))
                except ValueError:
                    raise InvalidVertex(f"Unknown currency '{currency}'") from None
            try:
                return self.currencies.index(code)
            except ValueError:
                raise InvalidVertex(f"Unknown currency '{currency}'") from None
        if isinstance(currency, bool) or not isinstance(currency, int):
            raise InvalidVertex(f"Unknown currency {currency!r}")
        if not 0 <= currency < len(self.currencies):
            raise InvalidVertex(f"Unknown currency id {currency}")
        return currency

    def add_pair(self, base: Currency, quote: Currency, rate: float) -> Optional[ArbitrageCycle]:
        """
        Enter or update the rate for base -> quote and check for arbitrage.

        Raises InvalidPair / InvalidRate / InvalidVertex without changing
        any state.
        """
        base_id = self.vertex(base)
        quote_id = self.vertex(quote)
        self.graph.set_rate(base_id, quote_id, rate)

        pair = CurrencyPair(
            base=self.currencies[base_id],
            quote=self.currencies[quote_id],
            rate=float(rate),
        )
        if pair.pair_id in self.pairs:
            self.pairs[pair.pair_id].rate = pair.rate
            self.pairs[pair.pair_id].updated_at = pair.updated_at
        else:
            self.pairs[pair.pair_id] = pair
        logger.info(f"Rate entered: {pair}")

        return self.check_arbitrage()

    def check_arbitrage(self) -> Optional[ArbitrageCycle]:
        """Run detection on the current graph and update status and highlights"""
        vertices = self.detector.find_arbitrage(self.graph)

        if not vertices:
            self.current_cycle = None
            self.status = NO_ARBITRAGE_STATUS
            return None

        cycle = ArbitrageCycle.from_vertices(vertices, self.currencies, self.graph)
        self.current_cycle = cycle
        self.status = f"Arbitrage found! {cycle.description}"
        logger.info(f"💱 ARBITRAGE: {cycle.description} | Profit: {cycle.profit_percent:.4f}%")

        self.history.append(cycle)
        if len(self.history) > self.history_limit:
            self.history.pop(0)

        for callback in self._on_opportunity_callbacks:
            try:
                callback(cycle)
            except Exception as e:
                logger.error(f"Opportunity callback error: {e}")

        return cycle

    def clear(self):
        """Remove every entered pair"""
        self.graph.reset()
        self.pairs.clear()
        self.current_cycle = None
        self.status = ""
        logger.info("All currency pairs cleared")

    @property
    def highlighted(self) -> list[str]:
        """Pair ids on the current arbitrage cycle"""
        if self.current_cycle is None:
            return []
        return self.current_cycle.pair_ids

    def get_state(self) -> dict:
        """Get current state for API/dashboard"""
        highlighted = set(self.highlighted)
        return {
            "currencies": list(self.currencies),
            "pairs": [
                {**pair.to_dict(), "arbitrage": pair.pair_id in highlighted}
                for pair in self.pairs.values()
            ],
            "status": self.status,
            "cycle": self.current_cycle.to_dict() if self.current_cycle else None,
            "history": [c.to_dict() for c in self.history[-20:]],  # Last 20
            "config": {
                "history_limit": self.history_limit,
                "edges": self.graph.edge_count(),
            },
            "timestamp": datetime.now().isoformat(),
        }
