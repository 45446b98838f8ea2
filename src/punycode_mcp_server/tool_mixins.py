"""
Tool Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any

from fastmcp import Context

from punycode_mcp_server.tools import (
    code_points_decode_impl,
    code_points_encode_impl,
    punycode_decode_impl,
    punycode_encode_impl,
    punycode_trace_impl,
)
from punycode_mcp_server.typedefs import ToolResult


class ToolRegistrationMixin:
    """Mixin for registering Punycode tools with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    @property
    def max_input_length(self) -> int | None:
        """Maximum accepted input length, None when unlimited."""
        return self.config.get("codec", {}).get("max_input_length")

    def register_tools(self) -> None:
        """Register all Punycode-related tools with the MCP server."""
        max_length = self.max_input_length

        @self.server.tool(
            name="punycode_encode",
            description=(
                "Use this tool to encode a single Unicode domain label into Punycode. "
                "The label must not contain dots and no `xn--` prefix is added."
            ),
            tags=set(("punycode", "idn", "encode", "converter")),
            enabled=True,
        )
        async def punycode_encode(text: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Encoding label `{text}` into punycode.")
            return await punycode_encode_impl(text, max_length=max_length)

        @self.server.tool(
            name="punycode_decode",
            description=(
                "Use this tool to decode a single Punycode label back into Unicode. "
                "Pass the label without the `xn--` prefix."
            ),
            tags=set(("punycode", "idn", "decode", "converter")),
            enabled=True,
        )
        async def punycode_decode(label: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Decoding punycode label `{label}`.")
            return await punycode_decode_impl(label, max_length=max_length)

        @self.server.tool(
            name="code_points_encode",
            description=(
                "Use this tool to encode a list of Unicode code points (U+XXXX, 0xXXXX "
                "or decimal) into a Punycode label."
            ),
            tags=set(("punycode", "unicode", "code points", "encode")),
            enabled=self.config.get("features", {}).get("code_point_tools", False),
        )
        async def code_points_encode(code_points: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Encoding code points `{code_points}` into punycode.")
            return await code_points_encode_impl(code_points, max_length=max_length)

        @self.server.tool(
            name="code_points_decode",
            description="Use this tool to decode a Punycode label into its Unicode code points.",
            tags=set(("punycode", "unicode", "code points", "decode")),
            enabled=self.config.get("features", {}).get("code_point_tools", False),
        )
        async def code_points_decode(label: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Decoding punycode label `{label}` into code points.")
            return await code_points_decode_impl(label, max_length=max_length)

        @self.server.tool(
            name="punycode_trace",
            description=(
                "Use this tool to show every step of a Punycode conversion: deltas, "
                "bias adaptation and the digits written for each non-ASCII character. "
                "Set direction to `encode` for Unicode input or `decode` for a label."
            ),
            tags=set(("punycode", "troubleshooting", "trace")),
            enabled=self.config.get("features", {}).get("trace_tool", False),
        )
        async def punycode_trace(value: str, ctx: Context, direction: str = "encode") -> ToolResult:
            await ctx.info(f"Tracing punycode {direction} of `{value}`.")
            return await punycode_trace_impl(value, direction)
