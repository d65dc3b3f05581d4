"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    return {
        "name": "Matchmaker API",
        "version": "1.0.0",
        "status": "ready",
        "current": {
            "candidates": len(state.candidates.get_candidates()),
            "campaigns": len(state.candidates.get_campaigns()),
            "interaction_store": type(state.interactions).__name__,
            "active_sessions": state.batcher.active_sessions,
        },
        "endpoints": {
            "matches": ["/api/matches/batch", "/api/matches/feed"],
            "interactions": ["/api/interactions", "/api/interactions/swipe", "/api/interactions/{actor_id}"],
            "sessions": ["/api/sessions/reset", "/api/demo/reset"],
            "catalog": ["/api/candidates", "/api/campaigns"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    ok, errors = state.config.validate()
    return {"status": "healthy" if ok else "degraded", "errors": errors}
