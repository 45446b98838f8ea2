"""
Prompt Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any


class PromptRegistrationMixin:
    """Mixin for registering prompts with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools_prompts() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_tools_prompts(self) -> None:
        """Register prompts that guide clients towards the Punycode tools."""

        @self.server.prompt(
            name="punycode_encode",
            description="Return the punycode version of a single Unicode domain label.",
            tags=set(("punycode", "idn", "encode")),
            enabled=True,
        )
        def punycode_encode(label: str) -> str:
            """Convert a Unicode label to punycode."""
            return (
                f"Convert the label {label} to punycode format. Treat it as a single "
                "label: do not split on dots and do not add an `xn--` prefix."
            )

        @self.server.prompt(
            name="punycode_decode",
            description="Return the Unicode text of a single punycode label.",
            tags=set(("punycode", "idn", "decode")),
            enabled=True,
        )
        def punycode_decode(label: str) -> str:
            """Convert a punycode label to Unicode."""
            return (
                f"Decode the punycode label {label} back into Unicode. If the label starts "
                "with `xn--`, remove that prefix before decoding."
            )

        @self.server.prompt(
            name="explain_punycode_label",
            description="Explain step by step how a punycode label encodes its characters.",
            tags=set(("punycode", "troubleshooting", "trace")),
            enabled=self.config.get("features", {}).get("trace_tool", False),
        )
        def explain_punycode_label(label: str) -> str:
            """Explain the structure of a punycode label."""
            return (
                f"Use the punycode trace tool with direction `decode` on {label} and explain "
                "which characters are copied as-is, which delta each digit group encodes "
                "and where every non-ASCII character is inserted."
            )
