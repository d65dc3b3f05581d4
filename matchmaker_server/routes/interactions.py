"""Interaction (feedback) endpoints."""

from fastapi import APIRouter, HTTPException

from matchmaker.errors import InvalidInteractionError

from ..models import InteractionRequest, InteractionsResponse, SwipeRequest
from ..state import get_state
from ..utils import to_interaction_record

router = APIRouter()


@router.post("")
async def record_interaction(request: InteractionRequest):
    """Append a like/superlike/pass; exposure ids are stored under the canonical id."""
    state = get_state()
    try:
        interaction = await state.batcher.record_interaction(
            request.actor_id, request.target_id, request.type
        )
    except InvalidInteractionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "status": "ok",
        "interaction": to_interaction_record(interaction).model_dump(mode="json"),
    }


@router.post("/swipe")
async def record_swipe(request: SwipeRequest):
    """Record a deck swipe (left = pass, right = like, up = superlike)."""
    state = get_state()
    try:
        interaction = await state.batcher.record_swipe(
            request.actor_id, request.target_id, request.direction
        )
    except InvalidInteractionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "status": "ok",
        "interaction": to_interaction_record(interaction).model_dump(mode="json"),
    }


@router.get("/{actor_id}", response_model=InteractionsResponse)
async def get_interactions(actor_id: str):
    """Actor's interaction history in append order."""
    state = get_state()
    history = await state.batcher.get_interactions(actor_id)
    return InteractionsResponse(
        actor_id=actor_id,
        interactions=[to_interaction_record(i) for i in history],
    )
