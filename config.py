"""Configuration for the FX Arbitrage Detector"""
import os

# ============================================================
# CURRENCY UNIVERSE
# ============================================================
# Vertex id of a currency is its index in this list. Fixed for the
# lifetime of the process.
DEFAULT_CURRENCIES = ["USD", "GBP", "JPY", "EUR", "AUD", "CAD", "CHF", "NZD"]

CURRENCIES = [
    code.strip().upper()
    for code in os.getenv("FXARB_CURRENCIES", ",".join(DEFAULT_CURRENCIES)).split(",")
    if code.strip()
]

# Number of detected cycles kept in engine history
HISTORY_LIMIT = int(os.getenv("FXARB_HISTORY_LIMIT", "100"))

# Logging
LOG_LEVEL = os.getenv("FXARB_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'

# Web server settings
WEB_HOST = os.getenv("FXARB_WEB_HOST", "0.0.0.0")
WEB_PORT = int(os.getenv("FXARB_WEB_PORT", "8000"))
