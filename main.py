"""
FX Arbitrage Detector - Main Entry Point

Serves a dashboard where currency pairs and exchange rates are entered.
After every entry the rate graph is checked for a negative cycle
(Bellman-Ford over -ln(rate) weights) and the profitable conversion
cycle, if any, is highlighted.
"""
import logging
import signal
import sys

import uvicorn

from config import CURRENCIES, LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL, WEB_HOST, WEB_PORT
from dashboard import app

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT
)
logger = logging.getLogger(__name__)

# Reduce noise from libraries
logging.getLogger('websockets').setLevel(logging.WARNING)
logging.getLogger('uvicorn.access').setLevel(logging.WARNING)


def handle_sigint(sig, frame):
    """Handle Ctrl+C gracefully"""
    logger.info("Received SIGINT, shutting down...")
    sys.exit(0)


def main():
    """Main entry point"""
    signal.signal(signal.SIGINT, handle_sigint)

    print(f"""
    ╔═══════════════════════════════════════════════════════════════════╗
    ║                                                                   ║
    ║     💱 FX ARBITRAGE DETECTOR 💱                                   ║
    ║                                                                   ║
    ║     Currencies: {', '.join(CURRENCIES)[:49]:<49} ║
    ║                                                                   ║
    ║     Endpoints:                                                    ║
    ║       Dashboard:        http://localhost:{WEB_PORT:<25} ║
    ║       API State:        http://localhost:{WEB_PORT}/api/state{'':<15} ║
    ║                                                                   ║
    ╚═══════════════════════════════════════════════════════════════════╝
    """)

    logger.info(f"Tracking {len(CURRENCIES)} currencies: {', '.join(CURRENCIES)}")

    uvicorn.run(
        app,
        host=WEB_HOST,
        port=WEB_PORT,
        log_level="warning"
    )


if __name__ == "__main__":
    main()
