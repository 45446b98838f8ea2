"""Unit tests for the punycode_mcp_server server module.

This test suite covers:
- Initialization and configuration loading
- Tool, prompt and resource registration
- Resource implementations
- Server start/stop lifecycle

The HTTP transport is mocked to keep tests fast and deterministic.
"""

import os
import tempfile
from unittest.mock import AsyncMock, patch

import pytest

from punycode_mcp_server import codec
from punycode_mcp_server.server import PunycodeMCPServer

DEFAULT_TEST_CONFIG = """
server:
  host: "127.0.0.1"
  port: 3001

codec:
  max_input_length: 64

features:
  code_point_tools: true
  trace_tool: true
  samples_resource: true
"""


@pytest.fixture
def temp_config():
    """Create a temporary config file for tests."""
    config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    config.write(DEFAULT_TEST_CONFIG)
    config.close()
    yield config.name
    os.unlink(config.name)


@pytest.fixture
def server(temp_config):
    """Create test server."""
    return PunycodeMCPServer(config_path=temp_config)


class TestPunycodeMCPServerInitialization:
    """Test suite for PunycodeMCPServer initialization."""

    @pytest.mark.server
    @pytest.mark.unit
    def test_initialization_with_valid_config(self, server, temp_config):
        """Test that server initializes successfully with valid config."""
        assert server is not None
        assert hasattr(server, "config")
        assert hasattr(server, "server")
        assert hasattr(server, "logger")
        assert server.config_path == temp_config

    @pytest.mark.server
    @pytest.mark.unit
    def test_config_parsing(self, server):
        """Test that the config sections are parsed."""
        assert server.config["codec"]["max_input_length"] == 64
        assert server.config["features"]["trace_tool"] is True
        assert server.max_input_length == 64

    @pytest.mark.server
    @pytest.mark.unit
    def test_config_file_not_found(self):
        """Test server initialization when config file doesn't exist."""
        server = PunycodeMCPServer(config_path="/nonexistent/path/config.yaml")

        assert server.config == {}
        assert server.max_input_length is None

    @pytest.mark.server
    @pytest.mark.unit
    def test_invalid_yaml(self):
        """Test that invalid YAML falls back to an empty config."""
        config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
        config.write("features: [unclosed\n  - value: {")
        config.close()

        try:
            server = PunycodeMCPServer(config_path=config.name)
            assert server.config == {}
        finally:
            os.unlink(config.name)

    @pytest.mark.server
    @pytest.mark.unit
    def test_non_mapping_yaml(self):
        """Test that a YAML list instead of a mapping is ignored."""
        config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
        config.write("- one\n- two\n")
        config.close()

        try:
            server = PunycodeMCPServer(config_path=config.name)
            assert server.config == {}
        finally:
            os.unlink(config.name)

    @pytest.mark.server
    @pytest.mark.unit
    def test_empty_sections(self):
        """Test that sections with nothing under them behave like missing ones."""
        config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
        config.write("server:\nfeatures:\ncodec:\n")
        config.close()

        try:
            server = PunycodeMCPServer(config_path=config.name)
            assert server.config == {"server": {}, "features": {}, "codec": {}}
            assert server.max_input_length is None
            assert server.listen_address() == ("0.0.0.0", 3000)
        finally:
            os.unlink(config.name)

    @pytest.mark.server
    @pytest.mark.unit
    def test_non_mapping_section(self):
        """Test that a section holding a scalar or list is ignored."""
        config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
        config.write("features: true\ncodec:\n  - 64\n")
        config.close()

        try:
            server = PunycodeMCPServer(config_path=config.name)
            assert server.config["features"] == {}
            assert server.config["codec"] == {}
        finally:
            os.unlink(config.name)

    @pytest.mark.server
    @pytest.mark.unit
    def test_listen_address_from_config(self, server):
        """Test that host and port come from the server section."""
        assert server.listen_address() == ("127.0.0.1", 3001)

    @pytest.mark.server
    @pytest.mark.unit
    def test_listen_address_defaults(self):
        """Test the default host and port."""
        server = PunycodeMCPServer(config_path="/nonexistent/path/config.yaml")

        assert server.listen_address() == ("0.0.0.0", 3000)


class TestPunycodeMCPServerRegistration:
    """Test suite for tool, prompt and resource registration."""

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_tools_registered(self, server):
        """Test that the codec tools are registered with FastMCP."""
        tools = await server.server.get_tools()

        for name in (
            "punycode_encode",
            "punycode_decode",
            "code_points_encode",
            "code_points_decode",
            "punycode_trace",
        ):
            assert name in tools

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_prompts_registered(self, server):
        """Test that the prompts are registered with FastMCP."""
        prompts = await server.server.get_prompts()

        assert "punycode_encode" in prompts
        assert "punycode_decode" in prompts
        assert "explain_punycode_label" in prompts

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_resources_registered(self, server):
        """Test that the static resources are registered with FastMCP."""
        resources = await server.server.get_resources()

        assert "resource://punycode_parameters" in resources
        assert "resource://rfc3492_samples" in resources

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_empty_sections_register_defaults(self):
        """Test that empty sections still register the default components."""
        config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
        config.write("features:\ncodec:\n")
        config.close()

        try:
            server = PunycodeMCPServer(config_path=config.name)
            tools = await server.server.get_tools()
            resources = await server.server.get_resources()
            parameters = await server._get_punycode_parameters_impl()
        finally:
            os.unlink(config.name)

        assert "punycode_encode" in tools
        assert "resource://rfc3492_samples" in resources
        assert parameters["max_input_length"] is None

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_samples_resource_disabled(self):
        """Test that the samples resource can be switched off."""
        config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
        config.write("features:\n  samples_resource: false\n")
        config.close()

        try:
            server = PunycodeMCPServer(config_path=config.name)
            resources = await server.server.get_resources()
            assert "resource://punycode_parameters" in resources
            assert "resource://rfc3492_samples" not in resources
        finally:
            os.unlink(config.name)


class TestPunycodeMCPServerResources:
    """Test suite for the resource implementations."""

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_punycode_parameters(self, server):
        """Test the codec parameter resource."""
        parameters = await server._get_punycode_parameters_impl()

        assert parameters["base"] == codec.BASE
        assert parameters["initial_n"] == 0x80
        assert parameters["delimiter"] == "-"
        assert parameters["max_input_length"] == 64

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_rfc3492_samples(self, server):
        """Test listing all samples."""
        samples = await server._get_rfc3492_samples_impl()

        assert samples["count"] == 19
        assert samples["samples"]["L"]["punycode"] == "3B-ww4c5e180e575a65lsy2b"

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_rfc3492_sample_by_id(self, server):
        """Test getting a sample by letter, case-insensitively."""
        sample = await server._get_rfc3492_sample_impl("r")

        assert sample["id"] == "R"
        assert sample["text"] == "そのスピードで"
        assert sample["punycode"] == "d9juau41awczczp"

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_rfc3492_sample_not_found(self, server):
        """Test the error for an unknown sample."""
        sample = await server._get_rfc3492_sample_impl("Z")

        assert "error" in sample
        assert "A" in sample["available_samples"]


class TestPunycodeMCPServerLifecycle:
    """Test suite for server start and stop."""

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_start_uses_config_address(self, server):
        """Test that start() runs the HTTP transport on the configured address."""
        with patch.object(server.server, "run_async", new_callable=AsyncMock) as mock_run, \
                patch.object(server, "setup_signal_handlers"):
            await server.start()

        mock_run.assert_awaited_once_with(transport="http", host="127.0.0.1", port=3001)

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_start_explicit_address(self, server):
        """Test that explicit host and port win over the config."""
        with patch.object(server.server, "run_async", new_callable=AsyncMock) as mock_run, \
                patch.object(server, "setup_signal_handlers"):
            await server.start("localhost", 9000)

        mock_run.assert_awaited_once_with(transport="http", host="localhost", port=9000)

    @pytest.mark.asyncio
    @pytest.mark.server
    @pytest.mark.unit
    async def test_start_error_stops_server(self, server):
        """Test that a startup error stops the server and is re-raised."""
        with patch.object(
            server.server, "run_async", new_callable=AsyncMock, side_effect=OSError("in use")
        ), patch.object(server, "setup_signal_handlers"), patch.object(
            server, "stop", new_callable=AsyncMock
        ) as mock_stop:
            with pytest.raises(OSError):
                await server.start()

        mock_stop.assert_awaited_once()
