# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Calculator errors are reported to clients as plain text with a fixed message.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import PlainTextResponse


class CalculatorException(Exception):
    """
    Base exception for the Calculator API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "CALCULATOR_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidOperationError(CalculatorException):
    """Raised when the operation is not one of the supported literals."""

    def __init__(self, operation: Any):
        super().__init__(
            message="Invalid operation",
            code="INVALID_OPERATION",
            status_code=400,
            details={"operation": operation},
        )


class MalformedBodyError(CalculatorException):
    """Raised when a JSON request body cannot be decoded."""

    def __init__(self, error: str):
        super().__init__(
            message="Malformed JSON body",
            code="MALFORMED_BODY",
            status_code=400,
            details={"error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def calculator_exception_handler(
    request: Request,
    exc: CalculatorException
) -> PlainTextResponse:
    """Convert CalculatorException to a plain-text response."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)
