"""Punycode (RFC 3492) codec with an MCP server and command line surface."""

from punycode_mcp_server.codec import (
    decode,
    decode_text,
    encode,
    encode_text,
    iter_decode_steps,
    iter_encode_steps,
)
from punycode_mcp_server.exceptions import (
    CodecOverflowError,
    InvalidCodePointError,
    MalformedInputError,
    PunycodeError,
)

__version__ = "1.0.0"
__all__ = [
    "encode",
    "decode",
    "encode_text",
    "decode_text",
    "iter_encode_steps",
    "iter_decode_steps",
    "PunycodeError",
    "MalformedInputError",
    "CodecOverflowError",
    "InvalidCodePointError",
]
