from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app


def create_app() -> FastAPI:
    """Create the full app served by `run()` and the CLI."""
    return create_api_app()


# Convenience for uvicorn: `uvicorn moviecast.runtime.app:app`
app = create_app()
