import re
from typing import Any

from fastmcp.utilities.logging import get_logger

from punycode_mcp_server.codec import decode, decode_text, encode, encode_text
from punycode_mcp_server.exceptions import PunycodeError, handle_codec_error
from punycode_mcp_server.typedefs import ToolResult

logger = get_logger(__name__)

CODE_POINT_TOKEN = re.compile(r"^(?:[Uu]\+([0-9A-Fa-f]{1,6})|0[xX]([0-9A-Fa-f]{1,6})|([0-9]{1,7}))$")


def parse_code_points(value: str | list[int] | list[str]) -> list[int]:
    """Parse code points given as integers or as text tokens.

    Text input is split on whitespace and commas. Each token is ``U+XXXX``,
    ``0xXXXX`` or a decimal number.

    Raises:
        ValueError: If a token is not a recognised code point notation.
    """
    if isinstance(value, str):
        tokens: list[Any] = [t for t in re.split(r"[\s,]+", value.strip()) if t]
    else:
        tokens = list(value)

    code_points = []
    for token in tokens:
        if isinstance(token, int) and not isinstance(token, bool):
            code_points.append(token)
            continue
        match = CODE_POINT_TOKEN.match(str(token).strip())
        if not match:
            raise ValueError(f"Unrecognised code point token {token!r}")
        unicode_hex, plain_hex, decimal = match.groups()
        if decimal is not None:
            code_points.append(int(decimal))
        else:
            code_points.append(int(unicode_hex or plain_hex, 16))
    return code_points


def format_code_points(code_points: list[int]) -> list[str]:
    """Render code points in U+XXXX notation."""
    return [f"U+{code_point:04X}" for code_point in code_points]


def _check_length(value: str, max_length: int | None) -> str | None:
    if max_length is not None and len(value) > max_length:
        return f"Input length {len(value)} exceeds maximum of {max_length} characters"
    return None


def _error_result(error: Exception, value: Any) -> ToolResult:
    logger.debug("Punycode conversion of %r failed: %s", value, error)
    error_type = error.kind if isinstance(error, PunycodeError) else type(error).__name__
    return ToolResult(
        success=False,
        error=handle_codec_error(error),
        details={"input": value, "error_type": error_type},
    )


async def punycode_encode_impl(text: str, max_length: int | None = None) -> ToolResult:
    """Encode a single Unicode label into Punycode.

    Args:
        text (str): The Unicode label to encode. No ``xn--`` prefix is added.
        max_length (int | None): Optional limit on the input length.

    Returns:
        ToolResult: Punycode label or error details.
    """
    text = text.strip()
    if too_long := _check_length(text, max_length):
        return ToolResult(success=False, error=too_long, details={"input": text})
    try:
        punycode = encode_text(text)
    except (PunycodeError, TypeError) as e:
        return _error_result(e, text)
    return ToolResult(success=True, output={"text": text, "punycode": punycode})


async def punycode_decode_impl(label: str, max_length: int | None = None) -> ToolResult:
    """Decode a single Punycode label back into Unicode.

    Args:
        label (str): The Punycode label without ``xn--`` prefix.
        max_length (int | None): Optional limit on the input length.

    Returns:
        ToolResult: Decoded text or error details.
    """
    label = label.strip()
    if too_long := _check_length(label, max_length):
        return ToolResult(success=False, error=too_long, details={"input": label})
    try:
        text = decode_text(label)
    except (PunycodeError, TypeError) as e:
        return _error_result(e, label)
    return ToolResult(success=True, output={"punycode": label, "text": text})


async def code_points_encode_impl(
    code_points: str | list[int], max_length: int | None = None
) -> ToolResult:
    """Encode a list of code points into Punycode.

    Args:
        code_points: Integers, or a string of ``U+XXXX``, ``0xXXXX`` or decimal tokens.
        max_length (int | None): Optional limit on the number of code points.

    Returns:
        ToolResult: Punycode label or error details.
    """
    try:
        points = parse_code_points(code_points)
        if max_length is not None and len(points) > max_length:
            return ToolResult(
                success=False,
                error=f"{len(points)} code points exceed maximum of {max_length}",
                details={"input": code_points},
            )
        punycode = encode(points)
    except (PunycodeError, TypeError, ValueError) as e:
        return _error_result(e, code_points)
    return ToolResult(
        success=True,
        output={"code_points": format_code_points(points), "punycode": punycode},
    )


async def code_points_decode_impl(label: str, max_length: int | None = None) -> ToolResult:
    """Decode a Punycode label into its code points."""
    label = label.strip()
    if too_long := _check_length(label, max_length):
        return ToolResult(success=False, error=too_long, details={"input": label})
    try:
        points = decode(label)
    except (PunycodeError, TypeError) as e:
        return _error_result(e, label)
    return ToolResult(
        success=True,
        output={
            "punycode": label,
            "code_points": points,
            "notation": format_code_points(points),
        },
    )
