# =============================================================================
# core/services/calculation_service.py - Arithmetic Business Logic
# =============================================================================
# Dispatches a CalculationRequest to the matching arithmetic operation.
#
# Arithmetic is IEEE-754 double precision done through numpy with
# floating-point warnings silenced, so 5 / 0 -> inf and 0 / 0 -> nan
# instead of raising ZeroDivisionError.
# =============================================================================

import logging
from typing import Callable

import numpy as np

from app.exceptions import InvalidOperationError
from core.models.calculation import CalculationRequest, CalculationResult, Operation

logger = logging.getLogger(__name__)


OperationFunc = Callable[[float, float], float]

# Global registry: operation name -> function
OPERATION_REGISTRY: dict[str, OperationFunc] = {}


def register_operation(operation: Operation) -> Callable[[OperationFunc], OperationFunc]:
    """
    Decorator to register an arithmetic operation.

    Usage:
        @register_operation(Operation.ADD)
        def add(a, b):
            ...
    """
    def decorator(func: OperationFunc) -> OperationFunc:
        if operation.value in OPERATION_REGISTRY:
            raise ValueError(f"Operation '{operation.value}' is already registered")
        OPERATION_REGISTRY[operation.value] = func
        return func

    return decorator


def get_operation(name: str | None) -> OperationFunc | None:
    """Get an operation by exact (case-sensitive) name."""
    if name is None:
        return None
    return OPERATION_REGISTRY.get(name)


def list_operations() -> list[str]:
    """List all registered operation names."""
    return list(OPERATION_REGISTRY.keys())


# =============================================================================
# Operations
# =============================================================================

@register_operation(Operation.ADD)
def add(a: float, b: float) -> float:
    return float(np.add(a, b))


@register_operation(Operation.SUBTRACT)
def subtract(a: float, b: float) -> float:
    return float(np.subtract(a, b))


@register_operation(Operation.MULTIPLY)
def multiply(a: float, b: float) -> float:
    return float(np.multiply(a, b))


@register_operation(Operation.DIVIDE)
def divide(a: float, b: float) -> float:
    # Division by zero is not special-cased: inf, -inf or nan propagate
    return float(np.true_divide(a, b))


# =============================================================================
# Service
# =============================================================================

class CalculationService:
    """
    Service for arithmetic operations.

    Stateless: every call depends only on its request.
    """

    @staticmethod
    def calculate(request: CalculationRequest) -> CalculationResult:
        """
        Apply the requested operation to the two operands.

        Args:
            request: Operation name and (already coerced) operands

        Returns:
            CalculationResult holding the float result

        Raises:
            InvalidOperationError: If the operation isn't registered
        """
        func = get_operation(request.operation)
        if func is None:
            logger.debug(f"Rejected operation: {request.operation!r}")
            raise InvalidOperationError(request.operation)

        with np.errstate(all="ignore"):
            result = func(request.number1, request.number2)

        logger.debug(
            f"{request.operation}({request.number1}, {request.number2}) = {result}"
        )
        return CalculationResult(result=result)
