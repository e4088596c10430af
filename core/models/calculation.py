# =============================================================================
# core/models/calculation.py - Calculation Schemas
# =============================================================================
# These models define the API contract for the /calculate endpoint:
# - Operation: Enum of the supported operation names
# - CalculationRequest: Operation name plus two operands
# - CalculationResult: The computed value
#
# Operands are NOT validated. Anything that isn't a number is coerced the way
# JavaScript's Number() would (missing -> NaN, null -> 0, "4" -> 4.0,
# "abc" -> NaN) so arithmetic always proceeds.
# =============================================================================

import math
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Operation(str, Enum):
    """Supported arithmetic operations. Matching is case-sensitive."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


# Decimal literal accepted by JavaScript's Number(): no underscores, no "inf"/"nan"
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
# Prefixed integers are unsigned: Number("-0x10") is NaN
_RADIX_RES = {
    16: re.compile(r"0[xX]([0-9a-fA-F]+)"),
    8: re.compile(r"0[oO]([0-7]+)"),
    2: re.compile(r"0[bB]([01]+)"),
}
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _string_to_number(value: str) -> float:
    text = value.strip()
    if not text:
        return 0.0

    if text in _INFINITIES:
        return _INFINITIES[text]

    for radix, pattern in _RADIX_RES.items():
        match = pattern.fullmatch(text)
        if match:
            try:
                return float(int(match.group(1), radix))
            except OverflowError:
                return math.inf

    if _DECIMAL_RE.fullmatch(text) is None:
        return math.nan
    return float(text)


def coerce_operand(value: Any) -> float:
    """
    Coerce a raw JSON value to a float the way JavaScript's Number() does.

    Never raises. A missing field is handled by the model default (NaN);
    an explicit null is 0.

    Examples:
        5 -> 5.0
        True -> 1.0
        None -> 0.0
        " 4 " -> 4.0
        "" -> 0.0
        "0x1F" -> 31.0
        "Infinity" -> inf
        "infinity" -> nan
        "1_000" -> nan
        [] -> 0.0
        ["7"] -> 7.0
        [1, 2] -> nan
        {"a": 1} -> nan
    """
    if value is None:
        return 0.0

    # bool is an int subclass, float(True) == 1.0
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf

    if isinstance(value, str):
        return _string_to_number(value)

    # Arrays convert through their comma-joined string form
    if isinstance(value, list):
        if not value:
            return 0.0
        if len(value) > 1:
            return math.nan
        item = value[0]
        # String([true]) is "true" and String([{}]) is "[object Object]"
        if isinstance(item, (bool, dict)):
            return math.nan
        return coerce_operand(item)

    return math.nan


class CalculationRequest(BaseModel):
    """
    Schema for a calculation request.

    Built from the parsed JSON body of POST /calculate.

    Example:
        {
            "operation": "multiply",
            "number1": 6,
            "number2": 7
        }
    """

    # Raw operation name; None when absent or not a string
    operation: str | None = Field(
        default=None,
        description="One of: add, subtract, multiply, divide"
    )

    number1: float = Field(
        default=math.nan,
        description="Left operand"
    )

    number2: float = Field(
        default=math.nan,
        description="Right operand"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"operation": "multiply", "number1": 6, "number2": 7},
                {"operation": "divide", "number1": 5, "number2": 0},
            ]
        }
    }

    @field_validator("operation", mode="before")
    @classmethod
    def _operation_as_string(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("number1", "number2", mode="before")
    @classmethod
    def _coerce_operand(cls, value: Any) -> float:
        return coerce_operand(value)

    @classmethod
    def from_payload(cls, payload: Any) -> "CalculationRequest":
        """
        Build a request from a decoded JSON body.

        Anything other than a JSON object is treated as an empty object.
        Missing fields keep their defaults (operation=None, operands=NaN).
        """
        if not isinstance(payload, dict):
            payload = {}

        fields = {
            name: payload[name]
            for name in ("operation", "number1", "number2")
            if name in payload
        }
        return cls(**fields)


class CalculationResult(BaseModel):
    """
    Schema for the calculation result.

    Example:
        {"result": 42}
    """

    result: float = Field(
        ...,
        description="Computed value (may be Infinity or NaN)"
    )
