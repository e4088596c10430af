# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Calculator API.
# It configures the FastAPI application with handlers, routers and static files.
#
# Usage:
#   uvicorn app.main:app --port 3000 --reload
#   python -m app
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from app import __version__
from app.config import Settings, settings
from app.exceptions import CalculatorException, calculator_exception_handler
from app.routers import calculate, health

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to build the app with (defaults to the
            environment-loaded instance)

    Returns:
        FastAPI: Configured application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Log readiness on startup and shutdown."""
        logger.info(f"Starting Calculator API in {app_settings.ENVIRONMENT} mode")
        logger.info(f"Server is running on port {app_settings.PORT}")

        yield

        logger.info("Shutting down Calculator API")

    app = FastAPI(
        title="Calculator API",
        description="""
## Arithmetic over HTTP

POST two numbers and an operation name, get the result back as JSON.

| operation | result |
|-----------|--------|
| `add` | number1 + number2 |
| `subtract` | number1 - number2 |
| `multiply` | number1 * number2 |
| `divide` | number1 / number2 |

Any other operation is rejected with `400 Invalid operation`.

### Quick Start

```bash
curl -X POST http://localhost:3000/calculate \\
  -H "Content-Type: application/json" \\
  -d '{"operation": "multiply", "number1": 6, "number2": 7}'
```
""",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Calculate",
                "description": "Arithmetic on two operands",
            },
            {
                "name": "Health",
                "description": "API health and liveness checks",
            },
        ],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    @app.exception_handler(CalculatorException)
    async def handle_calculator_exception(request: Request, exc: CalculatorException):
        """Handle custom Calculator exceptions."""
        return await calculator_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # =========================================================================
    # Routers
    # =========================================================================

    # Arithmetic endpoint
    app.include_router(
        calculate.router,
        tags=["Calculate"]
    )

    # Health check endpoints
    app.include_router(
        health.router,
        prefix="/api/v1",
        tags=["Health"]
    )

    # =========================================================================
    # Landing Page & Static Files
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def index():
        """Serve the landing document."""
        return FileResponse(app_settings.index_file)

    # Mounted last: it matches every path the routes above don't
    app.mount(
        "/",
        StaticFiles(directory=app_settings.STATIC_DIR, html=True),
        name="static",
    )

    return app


app = create_app()
