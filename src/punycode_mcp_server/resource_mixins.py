"""Mixin classes for PunycodeMCPServer to separate concerns and improve maintainability."""

from typing import Any

from punycode_mcp_server import codec
from punycode_mcp_server.samples import RFC3492_SAMPLES


class ResourceRegistrationMixin:
    """Mixin for registering resources with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when registration methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_codec_resources(self) -> None:
        """Register codec resources such as the bootstring parameters."""

        @self.server.resource(
            uri="resource://punycode_parameters",
            name="punycode_parameters",
            description="The bootstring parameters used by this Punycode codec (RFC 3492).",
        )
        async def get_punycode_parameters() -> dict[str, Any]:
            return await self._get_punycode_parameters_impl()

    def register_sample_resources(self) -> None:
        """Register the RFC 3492 sample strings as MCP resources."""

        @self.server.resource(
            uri="resource://rfc3492_samples",
            name="rfc3492_samples",
            description="The sample strings from RFC 3492 section 7.1 with their punycode.",
        )
        async def get_rfc3492_samples() -> dict[str, Any]:
            return await self._get_rfc3492_samples_impl()

        @self.server.resource(
            uri="resource://rfc3492_samples/{sample_id}",
            name="rfc3492_sample",
            description="A single RFC 3492 sample string by letter (A to S).",
        )
        async def get_rfc3492_sample(sample_id: str) -> dict[str, Any]:
            return await self._get_rfc3492_sample_impl(sample_id)

    async def _get_punycode_parameters_impl(self) -> dict[str, Any]:
        """Implementation to describe the codec parameters."""
        return {
            "base": codec.BASE,
            "tmin": codec.TMIN,
            "tmax": codec.TMAX,
            "skew": codec.SKEW,
            "damp": codec.DAMP,
            "initial_bias": codec.INITIAL_BIAS,
            "initial_n": codec.INITIAL_N,
            "delimiter": codec.DELIMITER,
            "max_code_point": codec.MAX_CODE_POINT,
            "max_input_length": self.config.get("codec", {}).get("max_input_length"),
        }

    async def _get_rfc3492_samples_impl(self) -> dict[str, Any]:
        """Implementation to list all RFC 3492 samples."""
        samples = {
            sample_id: {"description": description, "punycode": punycode}
            for sample_id, (description, _, punycode) in RFC3492_SAMPLES.items()
        }
        return {"samples": samples, "count": len(samples)}

    async def _get_rfc3492_sample_impl(self, sample_id: str) -> dict[str, Any]:
        """Implementation to get a single RFC 3492 sample by letter."""
        sample = RFC3492_SAMPLES.get(sample_id.strip().upper())
        if sample is None:
            return {
                "error": f"RFC 3492 sample '{sample_id}' not found",
                "available_samples": list(RFC3492_SAMPLES.keys()),
            }
        description, code_points, punycode = sample
        return {
            "id": sample_id.strip().upper(),
            "description": description,
            "code_points": [f"U+{code_point:04X}" for code_point in code_points],
            "text": "".join(chr(code_point) for code_point in code_points),
            "punycode": punycode,
        }
