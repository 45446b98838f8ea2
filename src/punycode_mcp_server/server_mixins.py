"""
Server Lifecycle Mixin classes for PunycodeMCPServer to separate concerns.
"""

import asyncio
import signal
import sys
from typing import Any

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def _shutdown_signals() -> tuple[int, ...]:
    if sys.platform == "win32":
        return (signal.SIGINT, signal.SIGBREAK)
    return (signal.SIGINT, signal.SIGTERM)


class ServerLifecycleMixin:
    """Mixin for server lifecycle management (signals, startup, shutdown).

    Note: This mixin assumes the class has 'server' (FastMCP), 'config' (dict) and
    'logger' attributes available when lifecycle methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary
    logger: Any  # Logger instance

    def setup_signal_handlers(self) -> None:
        """Set up signal handlers for graceful shutdown."""
        for sig in _shutdown_signals():
            try:
                asyncio.get_running_loop().add_signal_handler(
                    sig, lambda s=sig: asyncio.create_task(self._signal_handler(s))
                )
            except NotImplementedError:
                signal.signal(sig, lambda s, f: asyncio.create_task(self._signal_handler(s)))

    async def _signal_handler(self, sig: int) -> None:
        """Handle shutdown signals.

        Args:
            sig: Signal number that triggered the handler
        """
        self.logger.info("Received shutdown signal %s", signal.Signals(sig).name)
        await self.stop()

    def listen_address(self) -> tuple[str, int]:
        """Return the (host, port) pair from the `server` config section."""
        server_cfg = self.config.get("server", {})
        return server_cfg.get("host", DEFAULT_HOST), int(server_cfg.get("port", DEFAULT_PORT))

    async def start(self, host: str | None = None, port: int | None = None) -> None:
        """Start the MCP server using HTTP transport.

        Args:
            host: The host to bind to. Defaults to `server.host` from the config
            port: The port to listen on. Defaults to `server.port` from the config
        """
        cfg_host, cfg_port = self.listen_address()
        host = host or cfg_host
        port = port or cfg_port

        self.setup_signal_handlers()
        try:
            self.logger.info("Starting Punycode MCP Server on %s:%d", host, port)
            await self.server.run_async(transport="http", host=host, port=port)
        except (OSError, RuntimeError) as e:
            self.logger.error("Error starting server: %s", e)
            await self.stop()
            raise
        except KeyboardInterrupt:
            self.logger.info("Received keyboard interrupt")
            await self.stop()

    async def stop(self) -> None:
        """Stop the MCP server gracefully."""
        self.logger.info("Shutting down Punycode MCP Server...")
        current = asyncio.current_task()
        pending = [t for t in asyncio.all_tasks() if t is not current]

        if pending:
            self.logger.debug("Cancelling %d pending tasks", len(pending))
            for task in pending:
                task.cancel()
            try:
                await asyncio.wait_for(
                    asyncio.gather(*pending, return_exceptions=True),
                    timeout=5.0,
                )
            except asyncio.TimeoutError:
                self.logger.warning("Timeout waiting for tasks to stop")

        for sig in _shutdown_signals():
            try:
                asyncio.get_running_loop().remove_signal_handler(sig)
            except (NotImplementedError, ValueError):
                pass
        self.logger.info("Punycode MCP Server stopped")
