"""Punycode codec as defined in RFC 3492.

Punycode represents a sequence of Unicode code points with the limited
alphabet permitted in DNS labels. Basic code points (below 0x80) are copied
verbatim, followed by a delimiter and a run of generalized variable-length
integers describing where each non-basic code point is inserted.

The codec is pure: every call keeps its working state on the stack, so the
functions can be used concurrently without locking. Python integers never wrap
around, so the 32-bit accumulator width of the reference algorithm is enforced
with explicit overflow checks instead.
"""

from collections.abc import Iterable, Iterator

from punycode_mcp_server.exceptions import (
    CodecOverflowError,
    InvalidCodePointError,
    MalformedInputError,
)
from punycode_mcp_server.typedefs import DecodeStep, EncodeStep

# Bootstring parameters for Punycode (RFC 3492 section 5)
BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 0x80
DELIMITER = "-"

MAXINT = 0xFFFFFFFF  # width of every accumulator
MAX_CODE_POINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

DIGITS = "abcdefghijklmnopqrstuvwxyz0123456789"


def is_basic(code_point: int) -> bool:
    """Return True for code points copied verbatim into the label."""
    return code_point < INITIAL_N


def is_scalar_value(code_point: int) -> bool:
    """Return True if the code point is a Unicode scalar value."""
    return 0 <= code_point <= MAX_CODE_POINT and not (
        SURROGATE_MIN <= code_point <= SURROGATE_MAX
    )


def encode_digit(digit: int) -> str:
    """Map a digit value 0..35 to its basic code point (a-z, 0-9)."""
    if not 0 <= digit < BASE:
        raise ValueError(f"Digit {digit} is outside 0..{BASE - 1}")
    return DIGITS[digit]


def decode_digit(char: str, position: int | None = None) -> int:
    """Map a label character back to its digit value.

    Args:
        char: A single character of the label.
        position: Index of the character, reported on failure.

    Returns:
        The digit value in the range 0..35.

    Raises:
        MalformedInputError: If the character is not a letter or a digit.
    """
    code = ord(char)
    if 0x30 <= code <= 0x39:  # 0-9
        return code - 22
    if 0x41 <= code <= 0x5A:  # A-Z
        return code - 0x41
    if 0x61 <= code <= 0x7A:  # a-z
        return code - 0x61
    raise MalformedInputError(f"Invalid digit character {char!r}", position)


def adapt_threshold(k: int, bias: int) -> int:
    """Return the threshold t for digit position k (k = BASE, 2*BASE, ...)."""
    if k <= bias + TMIN:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def adapt_bias(delta: int, num_points: int, first_time: bool) -> int:
    """Bias adaptation function (RFC 3492 section 6.1).

    Args:
        delta: The delta that was just encoded or decoded.
        num_points: Number of code points handled so far, including this one.
        first_time: True for the very first delta of a label.

    Returns:
        The bias to use for the next delta.
    """
    delta = delta // DAMP if first_time else delta // 2
    delta += delta // num_points

    k = 0
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta //= BASE - TMIN
        k += BASE

    return k + (BASE - TMIN + 1) * delta // (delta + SKEW)


def encode_integer(value: int, bias: int) -> str:
    """Write value as a generalized variable-length integer."""
    digits = []
    k = BASE
    while True:
        t = adapt_threshold(k, bias)
        if value < t:
            digits.append(encode_digit(value))
            return "".join(digits)
        digits.append(encode_digit(t + (value - t) % (BASE - t)))
        value = (value - t) // (BASE - t)
        k += BASE


def validate_code_points(points: Iterable[int]) -> tuple[int, ...]:
    """Return the code points as a tuple after checking every value.

    Raises:
        TypeError: If an element is not an integer.
        InvalidCodePointError: If an element is not a Unicode scalar value.
    """
    validated = tuple(points)
    for index, code_point in enumerate(validated):
        if isinstance(code_point, bool) or not isinstance(code_point, int):
            raise TypeError(
                f"Code points must be integers, got {type(code_point).__name__} at index {index}"
            )
        if not is_scalar_value(code_point):
            raise InvalidCodePointError(code_point, index)
    return validated


def _encode_steps(points: tuple[int, ...]) -> Iterator[EncodeStep]:
    b = sum(1 for c in points if is_basic(c))
    h = b

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS

    while h < len(points):
        m = min(c for c in points if c >= n)

        if m - n > (MAXINT - delta) // (h + 1):
            raise CodecOverflowError(f"Delta overflow before code point {m:#x}")
        delta += (m - n) * (h + 1)
        n = m

        for c in points:
            if c < n:
                delta += 1
                if delta > MAXINT:
                    raise CodecOverflowError(f"Delta overflow at code point {n:#x}")
            elif c == n:
                yield EncodeStep(
                    code_point=n,
                    delta=delta,
                    bias=bias,
                    digits=encode_integer(delta, bias),
                )
                bias = adapt_bias(delta, h + 1, h == b)
                delta = 0
                h += 1

        delta += 1
        n += 1


def iter_encode_steps(points: Iterable[int]) -> Iterator[EncodeStep]:
    """Yield one EncodeStep per non-basic code point, in emission order.

    The digits of all steps, concatenated, form the part of the label that
    follows the delimiter.
    """
    return _encode_steps(validate_code_points(points))


def encode(points: Iterable[int]) -> str:
    """Encode a sequence of code points into a Punycode label.

    Basic code points keep their case; digits are emitted in lowercase.

    Args:
        points: Unicode scalar values in label order.

    Returns:
        The ASCII label.

    Raises:
        InvalidCodePointError: If a code point is a surrogate or above 0x10FFFF.
        CodecOverflowError: If a delta does not fit into 32 bits.
    """
    points = validate_code_points(points)
    basic = "".join(chr(c) for c in points if is_basic(c))
    extended = "".join(step.digits for step in _encode_steps(points))
    if basic:
        return basic + DELIMITER + extended
    return extended


def _as_label(label: str | bytes) -> str:
    if isinstance(label, (bytes, bytearray)):
        try:
            return bytes(label).decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedInputError("Label contains non-ASCII bytes", e.start) from e
    if not isinstance(label, str):
        raise TypeError(f"Label must be str or bytes, got {type(label).__name__}")
    return label


def _split_label(label: str) -> tuple[list[int], int]:
    """Return the basic code points and the index where the digits start."""
    b = label.rfind(DELIMITER)
    if b < 0:
        b = 0

    basic = []
    for position, char in enumerate(label[:b]):
        if not is_basic(ord(char)):
            raise MalformedInputError(f"Non-ASCII character {char!r} in basic segment", position)
        basic.append(ord(char))

    return basic, b + 1 if b > 0 else 0


def _decode_steps(label: str, out: int, pos: int) -> Iterator[DecodeStep]:
    """Read the deltas of label from pos on, out basic code points already placed."""
    n = INITIAL_N
    i = 0
    bias = INITIAL_BIAS

    while pos < len(label):
        start = pos
        old_i = i
        w = 1
        k = BASE
        while True:
            if pos >= len(label):
                raise MalformedInputError("Label ends inside a variable-length integer", pos)
            digit = decode_digit(label[pos], pos)
            pos += 1

            if digit > (MAXINT - i) // w:
                raise CodecOverflowError(f"Delta overflow at position {pos - 1}")
            i += digit * w

            t = adapt_threshold(k, bias)
            if digit < t:
                break
            if w > MAXINT // (BASE - t):
                raise CodecOverflowError(f"Weight overflow at position {pos - 1}")
            w *= BASE - t
            k += BASE

        delta = i - old_i
        used_bias = bias
        bias = adapt_bias(delta, out + 1, old_i == 0)

        if i // (out + 1) > MAXINT - n:
            raise CodecOverflowError(f"Code point overflow at position {start}")
        n += i // (out + 1)
        i %= out + 1

        if not is_scalar_value(n):
            raise CodecOverflowError(f"Decoded value {n:#x} is not a Unicode scalar value")

        yield DecodeStep(
            digits=label[start:pos],
            delta=delta,
            bias=used_bias,
            code_point=n,
            position=i,
        )
        out += 1
        i += 1


def iter_decode_steps(label: str | bytes) -> Iterator[DecodeStep]:
    """Yield one DecodeStep per delta found after the delimiter."""
    label = _as_label(label)
    basic, pos = _split_label(label)
    return _decode_steps(label, len(basic), pos)


def decode(label: str | bytes) -> list[int]:
    """Decode a Punycode label into its code points.

    The basic segment ends at the last delimiter. When that delimiter is the
    first character there is no basic segment and the delimiter is read as a
    digit, so labels such as ``"-abc"`` are rejected. Every accepted label
    encodes back to itself, apart from the case of its digits.

    Args:
        label: The ASCII label, as ``str`` or ``bytes``.

    Returns:
        A new list of code points.

    Raises:
        MalformedInputError: On invalid characters or a truncated digit sequence.
        CodecOverflowError: If a value leaves the 32-bit or Unicode range.
    """
    label = _as_label(label)
    output, pos = _split_label(label)
    for step in _decode_steps(label, len(output), pos):
        output.insert(step.position, step.code_point)
    return output


def encode_text(text: str) -> str:
    """Encode a Python string into a Punycode label."""
    return encode(ord(char) for char in text)


def decode_text(label: str | bytes) -> str:
    """Decode a Punycode label into a Python string."""
    return "".join(chr(code_point) for code_point in decode(label))
