# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - calculation.py: Calculation request/result schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .calculation import (
    CalculationRequest,
    CalculationResult,
    Operation,
    coerce_operand,
)

__all__ = [
    "CalculationRequest",
    "CalculationResult",
    "Operation",
    "coerce_operand",
]
