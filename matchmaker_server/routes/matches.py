"""Ranked match feed endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException

from matchmaker.models import BrandCampaign

from ..models import BatchRequest, BatchResponse
from ..state import AppState, get_state
from ..utils import to_match_cards

router = APIRouter()


def _resolve_campaign(state: AppState, request: BatchRequest) -> Optional[BrandCampaign]:
    """Inline campaign wins; otherwise look up campaign_id; otherwise None (fallback scoring)."""
    if request.campaign is not None:
        return request.campaign
    if request.campaign_id:
        campaign = state.candidates.get_campaign(request.campaign_id)
        if campaign is None:
            raise HTTPException(status_code=404, detail=f"Campaign not found: {request.campaign_id}")
        return campaign
    return None


@router.post("/batch", response_model=BatchResponse)
async def ranked_batch(request: BatchRequest):
    """Page of ranked candidates; a short page means the pool is exhausted."""
    state = get_state()
    campaign = _resolve_campaign(state, request)
    batch = await state.batcher.get_ranked_batch(
        request.actor_id,
        request.role,
        campaign,
        cursor=request.cursor,
        filters=request.filters,
        page_size=request.page_size,
    )
    return BatchResponse(
        page=to_match_cards(batch.page, request.cursor),
        next_cursor=batch.next_cursor,
        has_more=len(batch.page) == batch.page_size,
    )


@router.post("/feed", response_model=BatchResponse)
async def cycling_feed(request: BatchRequest):
    """Endless feed: wraps around the ranking with per-exposure ids."""
    state = get_state()
    campaign = _resolve_campaign(state, request)
    batch = await state.batcher.get_cycling_batch(
        request.actor_id,
        request.role,
        campaign,
        cursor=request.cursor,
        filters=request.filters,
        page_size=request.page_size,
    )
    return BatchResponse(
        page=to_match_cards(batch.page, request.cursor),
        next_cursor=batch.next_cursor,
        has_more=bool(batch.page),
    )
