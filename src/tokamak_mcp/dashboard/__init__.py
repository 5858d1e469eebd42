"""Dashboard web server for the browser wallet.

Serves the page the operator keeps open while the tool server runs, plus the
``/ws`` WebSocket that feeds the bridge's session channel.

The server is not started at import time: the bridge starts it (and opens the
browser) the first time a tool needs the wallet.
"""

from tokamak_mcp.dashboard.routes import create_app
from tokamak_mcp.dashboard.server import DashboardServer, get_static_dir

__all__ = [
    "DashboardServer",
    "create_app",
    "get_static_dir",
]
