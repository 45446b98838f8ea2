"""
Punycode MCP Server - An MCP server for converting Unicode labels to and from Punycode.
"""

import asyncio
import sys

import yaml
from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger

from punycode_mcp_server.prompt_mixins import PromptRegistrationMixin
from punycode_mcp_server.resource_mixins import ResourceRegistrationMixin
from punycode_mcp_server.server_mixins import ServerLifecycleMixin
from punycode_mcp_server.tool_mixins import ToolRegistrationMixin

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yaml"
CONFIG_SECTIONS = ("server", "codec", "features")


class PunycodeMCPServer(
    ToolRegistrationMixin,
    PromptRegistrationMixin,
    ResourceRegistrationMixin,
    ServerLifecycleMixin,
):
    """MCP Server implementation for Punycode operations.

    Uses mixin classes to separate concerns:
    - ToolRegistrationMixin: Registers codec tools
    - PromptRegistrationMixin: Registers prompts
    - ResourceRegistrationMixin: Registers codec parameter and sample resources
    - ServerLifecycleMixin: Manages server startup/shutdown and signals
    """

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH) -> None:
        """Initialize the Punycode MCP server.

        Args:
            config_path: Path to the configuration file.
                Defaults to "config/config.yaml"
        """
        self.config_path = config_path
        self.server = FastMCP(
            name="Punycode MCP Server",
            instructions=(
                "An MCP server that encodes Unicode domain labels into Punycode (RFC 3492) "
                "and decodes Punycode labels back into Unicode."
            ),
        )
        self.logger = get_logger(__name__)
        self.config = self.load_config(config_path)

        # Register all server components (tools, prompts, resources)
        # These must be called after self.server and self.config are initialized
        self._register_all_components()

    def load_config(self, config_path: str) -> dict:
        """Load the YAML configuration, falling back to an empty config."""
        try:
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            self.logger.info("Config file %s not found, using default settings", config_path)
            return {}
        except (yaml.YAMLError, OSError) as e:
            self.logger.error("Error loading config: %s", e)
            return {}

        if not isinstance(config, dict):
            if config is not None:
                self.logger.error("Config file %s does not contain a mapping", config_path)
            return {}

        # An empty section (`features:` with nothing under it) loads as None
        for section in CONFIG_SECTIONS:
            if config.get(section) is None:
                config[section] = {}
            elif not isinstance(config[section], dict):
                self.logger.error("Config section %s is not a mapping, ignoring it", section)
                config[section] = {}
        return config

    def _register_all_components(self) -> None:
        """Register all tools, prompts, and resources with the server.

        This method coordinates registration across all mixins.
        Must be called after self.server and self.config are initialized.
        """
        self.register_tools()
        self.register_tools_prompts()
        self.register_codec_resources()
        if self.config.get("features", {}).get("samples_resource", True):
            self.register_sample_resources()


async def main(
    config_path: str = DEFAULT_CONFIG_PATH, host: str | None = None, port: int | None = None
) -> None:
    """Main entry point for the Punycode MCP server."""
    server = PunycodeMCPServer(config_path=config_path)
    try:
        await server.start(host, port)
    except KeyboardInterrupt:
        await server.stop()
    except (OSError, RuntimeError) as e:
        logger.error("Unexpected error: %s", e)
        await server.stop()
        sys.exit(1)


def run_server(
    config_path: str = DEFAULT_CONFIG_PATH, host: str | None = None, port: int | None = None
) -> None:
    """Run the server with proper asyncio event loop handling."""
    loop = None
    try:
        if sys.platform == "win32":
            loop = asyncio.ProactorEventLoop()
        else:
            loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)

        loop.run_until_complete(main(config_path, host, port))
    except KeyboardInterrupt:
        if loop is not None:
            loop.run_until_complete(asyncio.sleep(0))
    finally:
        if loop is not None:
            loop.close()


if __name__ == "__main__":
    run_server()
