#!/usr/bin/env python3
"""Run the FastAPI server for the Contos para Dormir API."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from contos.api import config


def main():
    """Run the API server."""
    uvicorn.run(
        "contos.api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=not config.IS_PRODUCTION,  # Auto-reload outside production
    )


if __name__ == "__main__":
    main()
