# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Calculator API:
# - test_models.py: Request/result models and operand coercion
# - test_calculation_service.py: Operation registry and arithmetic dispatch
# - test_api.py: HTTP endpoints, static files and error responses
# - test_config.py: Settings loading
#
# Run tests with: pytest
# =============================================================================
