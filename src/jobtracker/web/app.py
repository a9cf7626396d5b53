"""FastAPI application factory for the Jobtracker web API."""

from __future__ import annotations

from fastapi import FastAPI

from jobtracker.storage.schema import DEFAULT_DATABASE_PATH
from jobtracker.web.routes import health_router, router


def create_app(database_path: str = DEFAULT_DATABASE_PATH) -> FastAPI:
    """Build the API over the store at database_path."""
    app = FastAPI(title="Jobtracker", docs_url="/api/docs")
    app.state.database_path = database_path
    app.include_router(health_router)
    app.include_router(router, prefix="/api/v1")
    return app
