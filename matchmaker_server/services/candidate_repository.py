"""
Candidate Repository abstraction.

Supplies the influencer pool and the demo brand campaigns to the matching
engine. Implementations: in-memory (tests) and JSON files (demo data).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

from matchmaker.models import (
    BrandCampaign,
    Influencer,
    Interaction,
    ensure_influencers,
    ensure_interactions,
)

logger = logging.getLogger(__name__)


class CandidateRepository(Protocol):
    """Protocol for candidate pool access."""

    def get_candidates(self) -> List[Influencer]:
        """Return the full candidate pool."""
        ...

    def get_candidate(self, candidate_id: str) -> Optional[Influencer]:
        """Get one candidate by canonical id."""
        ...

    def get_campaigns(self) -> List[BrandCampaign]:
        """Return the known campaigns."""
        ...

    def get_campaign(self, campaign_id: str) -> Optional[BrandCampaign]:
        """Get one campaign by id."""
        ...


class InMemoryCandidateRepository:
    """Candidate repository over lists already in memory."""

    def __init__(
        self,
        candidates: List[Union[Influencer, Dict[str, Any]]],
        campaigns: Optional[List[Union[BrandCampaign, Dict[str, Any]]]] = None,
    ):
        self._candidates = ensure_influencers(candidates)
        self._by_id = {c.id: c for c in self._candidates}
        self._campaigns = [
            BrandCampaign.model_validate(c) if isinstance(c, dict) else c
            for c in (campaigns or [])
        ]

    def get_candidates(self) -> List[Influencer]:
        return list(self._candidates)

    def get_candidate(self, candidate_id: str) -> Optional[Influencer]:
        return self._by_id.get(candidate_id)

    def get_campaigns(self) -> List[BrandCampaign]:
        return list(self._campaigns)

    def get_campaign(self, campaign_id: str) -> Optional[BrandCampaign]:
        for campaign in self._campaigns:
            if campaign.id == campaign_id:
                return campaign
        return None


def _read_json_list(path: Path, key: str) -> List[Dict]:
    with open(path) as f:
        data = json.load(f)
    return data.get(key, []) if isinstance(data, dict) else data


class JsonCandidateRepository(InMemoryCandidateRepository):
    """Candidate repository loaded once from JSON files (e.g. the bundled demo data)."""

    def __init__(self, candidates_path: Union[Path, str], campaigns_path: Optional[Union[Path, str]] = None):
        candidates_path = Path(candidates_path)
        candidates = _read_json_list(candidates_path, "influencers")
        campaigns: List[Dict] = []
        if campaigns_path and Path(campaigns_path).exists():
            campaigns = _read_json_list(Path(campaigns_path), "campaigns")
        super().__init__(candidates, campaigns)
        logger.info(
            "[candidates] LOADED influencers=%s campaigns=%s path=%s",
            len(self._candidates), len(self._campaigns), candidates_path,
        )


def load_seed_interactions(path: Optional[Union[Path, str]]) -> List[Interaction]:
    """Seed interaction log for resetDemo; empty when the file is missing."""
    if not path or not Path(path).exists():
        return []
    return ensure_interactions(_read_json_list(Path(path), "interactions"))
