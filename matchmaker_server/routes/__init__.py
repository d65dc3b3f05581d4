"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .catalog import router as catalog_router
from .interactions import router as interactions_router
from .matches import router as matches_router
from .root import router as root_router
from .sessions import router as sessions_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(matches_router, prefix="/api/matches", tags=["matches"])
    app.include_router(interactions_router, prefix="/api/interactions", tags=["interactions"])
    app.include_router(sessions_router, prefix="/api", tags=["sessions"])
    app.include_router(catalog_router, prefix="/api", tags=["catalog"])
