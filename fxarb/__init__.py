"""
FXArb - Currency Arbitrage Detection

Maintains a directed graph of exchange rates over a fixed set of currencies
and reports a profitable conversion cycle when one exists.
"""

__version__ = "1.0.0"
__author__ = "FXArb Team"
