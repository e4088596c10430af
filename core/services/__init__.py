# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .calculation_service import (
    CalculationService,
    get_operation,
    list_operations,
    register_operation,
)

__all__ = [
    "CalculationService",
    "get_operation",
    "list_operations",
    "register_operation",
]
