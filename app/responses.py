# =============================================================================
# app/responses.py - Response Classes
# =============================================================================
# Starlette's JSONResponse refuses NaN/Infinity (allow_nan=False).
# Calculation results may legitimately be non-finite, so they are written
# using Python's JSON encoding: Infinity, -Infinity, NaN.
#
# Integral results are written without a fractional part ({"result":42}),
# matching how JavaScript clients print doubles.
# =============================================================================

import json
import math
from typing import Any

from fastapi.responses import JSONResponse

# Largest integer a double represents exactly (2**53)
MAX_SAFE_INTEGER = 9007199254740992


def compact_number(value: Any) -> Any:
    """Return integral floats in the safe-integer range as int."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        if abs(value) <= MAX_SAFE_INTEGER:
            return int(value)
    return value


class CalculationJSONResponse(JSONResponse):
    """JSON response that allows non-finite floats and compacts integral ones."""

    def render(self, content: Any) -> bytes:
        if isinstance(content, dict):
            content = {key: compact_number(value) for key, value in content.items()}

        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=True,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")
