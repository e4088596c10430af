# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the calculator's business logic:
# - models/: Pydantic schemas for requests and results
# - services/: Arithmetic dispatch
#
# Services raise the exceptions defined in app.exceptions, so core depends on
# the app package (and through it on FastAPI).
# =============================================================================
