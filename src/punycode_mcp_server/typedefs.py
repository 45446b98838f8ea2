"""Type definitions for Punycode codec and tool operations.

This module provides the dataclasses shared by the codec, the tool
implementations and the MCP server. They describe tool results and the
individual steps of an encoding or decoding run.

The types defined here are used to:
- Structure tool results returned to MCP clients
- Record each inserted code point of an encoding run
- Record each decoded delta of a decoding run
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class ToolResult:
    """Stores the result of a Punycode tool operation."""

    success: bool
    output: str | list[str] | dict[str, Any] | list[dict[str, Any]] | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EncodeStep:
    """One non-basic code point emitted by the encoder.

    Attributes:
        code_point (int): The inserted code point.
        delta (int): The delta encoded for this insertion.
        bias (int): Bias in effect while the digits were generated.
        digits (str): The generalized variable-length integer written out.
    """

    code_point: int
    delta: int
    bias: int
    digits: str

    def to_dict(self) -> dict[str, Any]:
        result = asdict(self)
        result["notation"] = f"U+{self.code_point:04X}"
        return result


@dataclass(frozen=True)
class DecodeStep:
    """One delta read by the decoder.

    Attributes:
        digits (str): The label characters forming the variable-length integer.
        delta (int): The delta those digits decode to.
        bias (int): Bias in effect while the digits were read.
        code_point (int): The code point the delta resolves to.
        position (int): Index in the output where the code point is inserted.
    """

    digits: str
    delta: int
    bias: int
    code_point: int
    position: int

    def to_dict(self) -> dict[str, Any]:
        result = asdict(self)
        result["notation"] = f"U+{self.code_point:04X}"
        return result
