"""Exception handling and error processing for Punycode operations.

This module provides the exception types raised by the Punycode codec and an
error handling helper for the Model Context Protocol (MCP) server and the
command line interface. The codec raises these exceptions synchronously and
never returns partial results.

The module serves two main purposes:
1. Define the exception hierarchy for malformed labels, arithmetic overflow and
   invalid code points
2. Map codec exceptions to human-readable messages for the tool surfaces

Note: every codec error is a ``ValueError`` so callers that treat the codec like
the standard library ``codecs`` machinery keep working.
"""


class PunycodeError(ValueError):
    """Base exception for Punycode encoding and decoding errors."""

    kind = "PunycodeError"


class MalformedInputError(PunycodeError):
    """Raised when a label cannot have been produced by a valid encoding."""

    kind = "MalformedInput"

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


class CodecOverflowError(PunycodeError):
    """Raised when an intermediate value leaves the representable range."""

    kind = "Overflow"


class InvalidCodePointError(PunycodeError):
    """Raised when encode input holds a surrogate or an out-of-range value."""

    kind = "InvalidCodePoint"

    def __init__(self, code_point: int, index: int):
        super().__init__(f"Invalid code point {code_point:#x} at index {index}")
        self.code_point = code_point
        self.index = index


def handle_codec_error(error: Exception) -> str:
    """Convert codec-related exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(error)}"
    if isinstance(error, ValueError):
        err_str = f"Invalid input: {str(error)}"
    if isinstance(error, MalformedInputError):
        err_str = f"Malformed Punycode label: {str(error)}"
        if error.position is not None:
            err_str = f"{err_str} (position {error.position})"
    if isinstance(error, CodecOverflowError):
        err_str = f"Punycode arithmetic overflow: {str(error)}"
    if isinstance(error, InvalidCodePointError):
        if 0xD800 <= error.code_point <= 0xDFFF:
            err_str = f"Surrogate code point U+{error.code_point:04X} cannot be encoded"
        else:
            err_str = f"Code point {error.code_point:#x} is outside the Unicode range"
    if isinstance(error, TypeError):
        err_str = f"Invalid input type: {str(error)}"
    return err_str
