# =============================================================================
# app/routers/calculate.py - Calculation Endpoint
# =============================================================================
# POST /calculate: {"operation", "number1", "number2"} -> {"result"}
#
# The body is read by hand rather than declared as a Pydantic body parameter
# so FastAPI never answers 422: a non-JSON or non-object body becomes an
# empty request, which is then rejected as "Invalid operation".
# =============================================================================

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from app.exceptions import MalformedBodyError
from app.responses import CalculationJSONResponse
from core.models.calculation import CalculationRequest, CalculationResult
from core.services.calculation_service import CalculationService

logger = logging.getLogger(__name__)

router = APIRouter()


def is_json_content_type(content_type: str | None) -> bool:
    """True for application/json and structured-syntax types like application/vnd.api+json."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not valid JSON
    raise ValueError(f"Invalid JSON literal: {name}")


async def read_json_body(request: Request) -> Any:
    """
    Decode the request body as JSON.

    Returns an empty dict when the body isn't declared as JSON or is empty.

    Raises:
        MalformedBodyError: If a JSON body cannot be decoded
    """
    if not is_json_content_type(request.headers.get("content-type")):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.info(f"Rejected malformed JSON body: {e}")
        raise MalformedBodyError(str(e)) from e


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "/calculate",
    response_model=CalculationResult,
    response_class=CalculationJSONResponse,
    responses={400: {"description": "Invalid operation", "content": {"text/plain": {}}}},
)
async def calculate(payload: Any = Depends(read_json_body)):
    """
    Perform one arithmetic operation.

    Supported operations: add, subtract, multiply, divide.
    Operands are not validated; missing or non-numeric values produce NaN.
    """
    calculation = CalculationRequest.from_payload(payload)
    result = CalculationService.calculate(calculation)

    # Returned directly so non-finite results bypass FastAPI's serializer
    return CalculationJSONResponse(content=result.model_dump())
