"""Web dashboard for the FX arbitrage detector"""
import asyncio
import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, WebSocket, WebSocketDisconnect, status
from fastapi.responses import HTMLResponse

from engine import ArbitrageEngine
from fxarb import __version__
from fxarb.api.models import CurrencyInfo, RateCreate
from fxarb.core import InvalidPair, InvalidRate, InvalidVertex

logger = logging.getLogger(__name__)

app = FastAPI(title="FX Arbitrage Detector", version=__version__)

# User-facing messages for rejected entries
INVALID_PAIR_MESSAGE = "Invalid currency pair."
INVALID_RATE_MESSAGE = "Invalid exchange rate."
UNKNOWN_CURRENCY_MESSAGE = "Unknown currency."


class DashboardManager:
    """Manages WebSocket connections to dashboard clients"""

    def __init__(self):
        self.active_connections: list[WebSocket] = []
        self.engine: Optional[ArbitrageEngine] = None

    def set_engine(self, engine: ArbitrageEngine):
        """Set the arbitrage engine and register callbacks"""
        self.engine = engine
        engine.on_opportunity(self._on_opportunity)

    async def connect(self, websocket: WebSocket, engine: ArbitrageEngine):
        await websocket.accept()
        self.active_connections.append(websocket)
        logger.info(f"Dashboard client connected. Total: {len(self.active_connections)}")

        # Send current state
        await websocket.send_json({
            "type": "state",
            "data": engine.get_state()
        })

    def disconnect(self, websocket: WebSocket):
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
        logger.info(f"Dashboard client disconnected. Total: {len(self.active_connections)}")

    async def broadcast(self, message: dict):
        """Broadcast message to all connected clients"""
        for connection in list(self.active_connections):
            try:
                await connection.send_json(message)
            except Exception as e:
                logger.error(f"Broadcast error: {e}")

    async def broadcast_state(self, engine: ArbitrageEngine):
        await self.broadcast({"type": "state", "data": engine.get_state()})

    def _on_opportunity(self, cycle):
        """Handle new arbitrage cycle from engine"""
        asyncio.create_task(self.broadcast({
            "type": "arbitrage",
            "data": cycle.to_dict()
        }))


manager = DashboardManager()
manager.set_engine(ArbitrageEngine())


def get_engine() -> ArbitrageEngine:
    """Engine shared by all dashboard routes"""
    return manager.engine


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket, engine: ArbitrageEngine = Depends(get_engine)):
    await manager.connect(websocket, engine)
    try:
        while True:
            # Keep connection alive, handle any client messages
            data = await websocket.receive_text()
            if data == "ping":
                await websocket.send_text("pong")
    except WebSocketDisconnect:
        manager.disconnect(websocket)


@app.get("/api/currencies", response_model=List[CurrencyInfo])
async def get_currencies(engine: ArbitrageEngine = Depends(get_engine)):
    """List currencies in vertex id order"""
    return [CurrencyInfo(id=i, code=code) for i, code in enumerate(engine.currencies)]


@app.get("/api/state")
async def get_state(engine: ArbitrageEngine = Depends(get_engine)):
    """Get entered pairs, status and current arbitrage cycle"""
    return engine.get_state()


@app.post("/api/rates")
async def add_rate(data: RateCreate, engine: ArbitrageEngine = Depends(get_engine)):
    """
    Enter or update the rate for a currency pair.

    Arbitrage is re-checked immediately; the response carries the new state.
    """
    try:
        engine.add_pair(data.base, data.quote, data.rate)
    except InvalidPair:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_PAIR_MESSAGE,
        )
    except InvalidRate:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_RATE_MESSAGE,
        )
    except InvalidVertex:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=UNKNOWN_CURRENCY_MESSAGE,
        )

    await manager.broadcast_state(engine)
    return engine.get_state()


@app.delete("/api/rates")
async def clear_rates(engine: ArbitrageEngine = Depends(get_engine)):
    """Remove all entered pairs"""
    engine.clear()
    await manager.broadcast_state(engine)
    return engine.get_state()


@app.get("/", response_class=HTMLResponse)
async def dashboard():
    """Serve the dashboard HTML"""
    return DASHBOARD_HTML


DASHBOARD_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>FX Arbitrage Detector</title>
    <style>
        :root {
            --bg-primary: #0a0b0f;
            --bg-card: #15171e;
            --border-color: #2a2d3a;
            --text-primary: #e8eaed;
            --text-secondary: #9aa0a6;
            --accent-green: #00d26a;
            --accent-green-dim: rgba(0, 210, 106, 0.15);
            --accent-red: #ff4757;
        }
        body {
            background: var(--bg-primary);
            color: var(--text-primary);
            font-family: system-ui, sans-serif;
            max-width: 640px;
            margin: 40px auto;
        }
        .card {
            background: var(--bg-card);
            border: 1px solid var(--border-color);
            border-radius: 8px;
            padding: 16px;
            margin-bottom: 16px;
        }
        select, input, button { font: inherit; padding: 6px 10px; }
        #message { color: var(--accent-red); min-height: 1.2em; }
        #status { color: var(--text-secondary); }
        .currency-pair { font-family: monospace; margin: 4px 0; padding: 4px 8px; }
        .currency-pair.arbitrage {
            background: var(--accent-green-dim);
            color: var(--accent-green);
        }
    </style>
</head>
<body>
    <h1>FX Arbitrage Detector</h1>
    <div class="card">
        <select id="currency-menu-1"></select>
        <span>/</span>
        <select id="currency-menu-2"></select>
        <input id="exchange-input" type="number" step="any" placeholder="Rate">
        <button id="currency-button">Add</button>
        <button id="clear-button">Clear</button>
        <p id="message"></p>
    </div>
    <div class="card">
        <p id="status"></p>
        <div id="exchange-display"></div>
    </div>
    <script>
        async function loadCurrencies() {
            const res = await fetch('/api/currencies');
            const currencies = await res.json();
            for (const menuId of ['currency-menu-1', 'currency-menu-2']) {
                const menu = document.getElementById(menuId);
                for (const c of currencies) {
                    const option = document.createElement('option');
                    option.value = c.id;
                    option.textContent = c.code;
                    menu.appendChild(option);
                }
            }
        }

        function render(state) {
            document.getElementById('status').textContent = state.status;
            const display = document.getElementById('exchange-display');
            display.innerHTML = '';
            for (const pair of state.pairs) {
                const p = document.createElement('p');
                p.id = pair.id;
                p.className = 'currency-pair' + (pair.arbitrage ? ' arbitrage' : '');
                p.textContent = pair.label;
                display.appendChild(p);
            }
        }

        async function addCurrencyPair() {
            const body = {
                base: parseInt(document.getElementById('currency-menu-1').value),
                quote: parseInt(document.getElementById('currency-menu-2').value),
                rate: parseFloat(document.getElementById('exchange-input').value),
            };
            const message = document.getElementById('message');
            if (isNaN(body.rate)) {
                message.textContent = 'Invalid exchange rate.';
                return;
            }
            const res = await fetch('/api/rates', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify(body),
            });
            const data = await res.json();
            if (!res.ok) {
                message.textContent = data.detail;
                return;
            }
            message.textContent = '';
            render(data);
        }

        async function clearCurrencies() {
            const res = await fetch('/api/rates', {method: 'DELETE'});
            document.getElementById('message').textContent = '';
            render(await res.json());
        }

        function connect() {
            const ws = new WebSocket(`ws://${location.host}/ws`);
            ws.onmessage = (event) => {
                const msg = JSON.parse(event.data);
                if (msg.type === 'state') render(msg.data);
            };
            ws.onclose = () => setTimeout(connect, 2000);
        }

        document.getElementById('currency-button').addEventListener('click', addCurrencyPair);
        document.getElementById('clear-button').addEventListener('click', clearCurrencies);
        loadCurrencies();
        connect();
    </script>
</body>
</html>
"""
