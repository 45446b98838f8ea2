"""Punycode trace tool that shows every step of an encoding or decoding run.
For each non-basic code point it reports the delta, the bias in effect and
the digits written to (or read from) the label.
"""

from typing import Any

from punycode_mcp_server.codec import (
    DELIMITER,
    INITIAL_BIAS,
    INITIAL_N,
    decode,
    encode_text,
    is_basic,
    iter_decode_steps,
    iter_encode_steps,
)
from punycode_mcp_server.exceptions import PunycodeError, handle_codec_error
from punycode_mcp_server.typedefs import DecodeStep, EncodeStep, ToolResult

DIRECTIONS = ("encode", "decode")


class PunycodeTrace:
    """
    Step recorder for the Punycode codec.
    Runs the codec step iterators and keeps every step for later reporting.
    """

    def __init__(self, direction: str = "encode"):
        """
        Initializes the PunycodeTrace object.

        Args:
            direction: Either "encode" (Unicode input) or "decode" (label input).
        """
        if direction not in DIRECTIONS:
            raise ValueError(f"Direction must be one of {', '.join(DIRECTIONS)}, got {direction!r}")
        self.direction = direction
        self.trace_steps: list[EncodeStep | DecodeStep] = []
        self.basic = ""
        self.result = ""

    def perform_trace(self, value: str) -> dict[str, Any]:
        """
        Run the codec over value and store each step in self.trace_steps.

        Args:
            value: Unicode text when encoding, a Punycode label when decoding.

        Returns:
            A dictionary with the input, the basic segment, all steps and the result.
        """
        self.trace_steps.clear()
        if self.direction == "encode":
            self.trace_steps.extend(iter_encode_steps(ord(char) for char in value))
            self.basic = "".join(char for char in value if is_basic(ord(char)))
            self.result = encode_text(value)
        else:
            self.trace_steps.extend(iter_decode_steps(value))
            self.result = "".join(chr(code_point) for code_point in decode(value))
            self.basic = value[: max(value.rfind(DELIMITER), 0)]

        return {
            "input": value,
            "direction": self.direction,
            "basic": self.basic,
            "steps": [step.to_dict() for step in self.trace_steps],
            "result": self.result,
        }

    def get_text_report(self) -> str:
        """Return the recorded trace as a human-readable report.

        Returns:
            Formatted string with one line per step.
        """
        output_lines = [f";; PUNYCODE {self.direction.upper()} TRACE"]
        output_lines.append(f";; initial n={INITIAL_N:#x} bias={INITIAL_BIAS}")
        output_lines.append(f";; basic segment: {self.basic!r} ({len(self.basic)} code points)")

        for step_idx, step in enumerate(self.trace_steps, start=1):
            output_lines.append(
                f";; Step {step_idx}: U+{step.code_point:04X} delta={step.delta} "
                f"bias={step.bias} digits={step.digits!r}"
                + (f" position={step.position}" if isinstance(step, DecodeStep) else "")
            )

        output_lines.append(f";; result: {self.result!r}")
        return "\n".join(output_lines)


async def punycode_trace_impl(value: str, direction: str = "encode") -> ToolResult:
    """Trace a Punycode conversion step by step.

    Args:
        value (str): Unicode text to encode or a Punycode label to decode.
        direction (str): "encode" or "decode".

    Returns:
        ToolResult: The recorded steps or error details.
    """
    value = value.strip()
    try:
        tracer = PunycodeTrace(direction=direction.strip().lower())
        trace = tracer.perform_trace(value)
    except (PunycodeError, TypeError, ValueError) as e:
        return ToolResult(
            success=False,
            error=handle_codec_error(e),
            details={"input": value, "direction": direction},
        )
    return ToolResult(
        success=True,
        output=trace["steps"],
        details={"result": trace["result"], "text": tracer.get_text_report()},
    )
