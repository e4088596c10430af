# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, logging, error handlers, static files
# - config.py: Environment variable loading and settings
# - server.py: uvicorn bootstrap
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# arithmetic to the core/ package.
# =============================================================================

__version__ = "1.0.0"
