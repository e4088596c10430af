#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - HTTP Server Entry Point
# =============================================================================
# Starts the Calculator API.
#
# Usage:
#   python scripts/start_server.py
#
#   # Different port
#   PORT=8080 python scripts/start_server.py
#
#   # Or use uvicorn directly
#   uvicorn app.main:app --port 3000
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from app.server import serve


def main():
    """Start the HTTP server."""
    print("=" * 60)
    print("Calculator API")
    print("=" * 60)
    print()
    print(f"Listening on {settings.HOST}:{settings.PORT}")
    print("Press Ctrl+C to stop")
    print()

    serve(settings)


if __name__ == "__main__":
    main()
