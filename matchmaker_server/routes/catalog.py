"""Candidate pool and demo campaign listing."""

from fastapi import APIRouter, HTTPException

from ..state import get_state

router = APIRouter()


@router.get("/candidates")
def list_candidates():
    state = get_state()
    candidates = state.candidates.get_candidates()
    return {
        "total": len(candidates),
        "candidates": [c.model_dump(mode="json") for c in candidates],
    }


@router.get("/candidates/{candidate_id}")
def get_candidate(candidate_id: str):
    state = get_state()
    candidate = state.candidates.get_candidate(candidate_id)
    if candidate is None:
        raise HTTPException(status_code=404, detail="Candidate not found")
    return candidate.model_dump(mode="json")


@router.get("/campaigns")
def list_campaigns():
    state = get_state()
    return {"campaigns": [c.model_dump(mode="json") for c in state.candidates.get_campaigns()]}
