"""Tools related submodule to keep all things tool related in one place."""

from .converter import (
    code_points_decode_impl,
    code_points_encode_impl,
    format_code_points,
    parse_code_points,
    punycode_decode_impl,
    punycode_encode_impl,
)
from .trace import PunycodeTrace, punycode_trace_impl

__all__ = [
    "punycode_encode_impl",
    "punycode_decode_impl",
    "code_points_encode_impl",
    "code_points_decode_impl",
    "punycode_trace_impl",
    "PunycodeTrace",
    "parse_code_points",
    "format_code_points",
]
