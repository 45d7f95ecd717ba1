"""
Pytest configuration and fixtures for FXArb tests.
"""

import os
import sys
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Import application
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import DEFAULT_CURRENCIES
from dashboard import app, get_engine, manager
from engine import ArbitrageEngine
from fxarb.core import ArbitrageDetector, RateGraph


# Vertex ids in DEFAULT_CURRENCIES
USD, GBP, JPY, EUR, AUD, CAD, CHF, NZD = range(8)


@pytest.fixture
def graph() -> RateGraph:
    """Empty graph over the default currency set"""
    return RateGraph(len(DEFAULT_CURRENCIES))


@pytest.fixture
def detector() -> ArbitrageDetector:
    return ArbitrageDetector()


@pytest.fixture
def engine() -> ArbitrageEngine:
    """Create a fresh engine over the default currency set"""
    return ArbitrageEngine(currencies=DEFAULT_CURRENCIES)


@pytest.fixture
def client(engine: ArbitrageEngine) -> Generator[TestClient, None, None]:
    """Test client whose routes and WebSocket broadcasts use the fresh engine"""
    previous = manager.engine
    manager.set_engine(engine)
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    manager.engine = previous


# Sample data fixtures

@pytest.fixture
def two_way_arbitrage(graph: RateGraph) -> RateGraph:
    """USD->GBP 0.8 and GBP->USD 1.3: product 1.04"""
    graph.set_rate(USD, GBP, 0.8)
    graph.set_rate(GBP, USD, 1.3)
    return graph


@pytest.fixture
def triangle_arbitrage(graph: RateGraph) -> RateGraph:
    """USD->EUR->JPY->USD: 0.9 * 130 * 0.0086 = 1.0062"""
    graph.set_rate(USD, EUR, 0.9)
    graph.set_rate(EUR, JPY, 130)
    graph.set_rate(JPY, USD, 0.0086)
    return graph
