"""Session and demo reset endpoints."""

from typing import Optional

from fastapi import APIRouter

from ..models import ResetSessionRequest
from ..state import get_state

router = APIRouter()


@router.post("/sessions/reset")
def reset_session(request: Optional[ResetSessionRequest] = None):
    """Clear feed/exposure state (one actor, or everyone); interactions are kept."""
    state = get_state()
    actor_id = request.actor_id if request else None
    state.batcher.reset_session(actor_id)
    return {"status": "ok", "actor_id": actor_id}


@router.post("/demo/reset")
def reset_demo():
    """Reload the seed interaction log and clear every session."""
    state = get_state()
    state.batcher.reset_demo()
    return {"status": "ok"}
