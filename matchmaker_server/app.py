"""
Matchmaker API — FastAPI app factory.

Use: uvicorn matchmaker_server.app:app
Or:  from matchmaker_server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    app = FastAPI(
        title="Matchmaker API",
        description="Brand/creator matching: ranked feeds, exploration, and swipe feedback",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _startup_logging():
        state = get_state()
        ok, errors = state.config.validate()
        logger.info(
            "[startup] Matchmaker API starting: candidates=%s campaigns=%s store=%s",
            len(state.candidates.get_candidates()),
            len(state.candidates.get_campaigns()),
            type(state.interactions).__name__,
        )
        for error in errors:
            logger.warning("[startup] CONFIG %s", error)

    return app


app = create_app()
