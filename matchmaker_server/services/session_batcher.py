"""
Session batcher — paged ranked feeds, exposure tracking, and the interaction log boundary.

Each actor has one SessionState: the ranking materialized for the current
role/campaign/filters, the cursor, and the set of canonical ids already shown.
A new ranking (cursor 0, or different role/campaign/filters) resets all three
together. The async operations await the simulated latency before touching
any state, so a caller that abandons the call leaves nothing half-written.
"""

import asyncio
import hashlib
import json
import logging
import random
import threading
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from matchmaker.models import (
    SWIPE_DIRECTIONS,
    BrandCampaign,
    Interaction,
    InteractionType,
    MatchFilters,
    MatchmakerConfig,
    ScoredCandidate,
    SessionState,
    canonical_id,
    exposure_id_for,
    parse_interaction_type,
    resolve_config,
)
from matchmaker.errors import InvalidInteractionError
from matchmaker.stages import rank_candidates

from .candidate_repository import CandidateRepository
from .interaction_store import InteractionStore

logger = logging.getLogger(__name__)


@dataclass
class RankedBatch:
    """One page of the feed and the cursor for the next request."""

    page: List[ScoredCandidate]
    next_cursor: int
    # Effective page size after clamping to max_page_size
    page_size: int


def _ranking_key(
    role: str,
    campaign: Optional[BrandCampaign],
    filters: Optional[MatchFilters],
) -> str:
    """Stable fingerprint of everything that changes the ranking."""
    payload = {
        "role": role,
        "campaign": campaign.model_dump(mode="json") if campaign else None,
        "filters": filters.model_dump(mode="json") if filters else None,
    }
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()[:16]


class SessionBatcher:
    """Serves ranked pages per actor and records their feedback."""

    def __init__(
        self,
        candidates: CandidateRepository,
        interactions: InteractionStore,
        config: Optional[MatchmakerConfig] = None,
        rng: Optional[random.Random] = None,
        seed_interactions: Optional[Iterable[Interaction]] = None,
        batch_latency: float = 0.0,
        interaction_latency: float = 0.0,
    ):
        self._candidates = candidates
        self._interactions = interactions
        self._config = resolve_config(config)
        self._rng = rng if rng is not None else random.Random()
        self._seed_interactions = list(seed_interactions or [])
        self._batch_latency = batch_latency
        self._interaction_latency = interaction_latency
        self._sessions: Dict[str, SessionState] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> MatchmakerConfig:
        return self._config

    # ------------------------------------------------------------------
    # Ranking
    # ------------------------------------------------------------------

    def _page_size(self, page_size: Optional[int]) -> int:
        if page_size is None:
            return self._config.default_page_size
        return max(1, min(page_size, self._config.max_page_size))

    def _session_ranking(
        self,
        actor_id: str,
        role: str,
        campaign: Optional[BrandCampaign],
        cursor: int,
        filters: Optional[MatchFilters],
    ) -> SessionState:
        """Return the actor's session, re-ranking (after a full reset) when needed. Caller holds the lock."""
        key = _ranking_key(role, campaign, filters)
        session = self._sessions.get(actor_id)
        if session is None:
            session = SessionState(actor_id=actor_id)
            self._sessions[actor_id] = session
        if cursor == 0 or session.ranking_key != key or not session.is_materialized:
            session.reset(key)
            history = self._interactions.list_for_actor(actor_id)
            session.ranked = rank_candidates(
                role,
                campaign,
                self._candidates.get_candidates(),
                history,
                filters=filters,
                config=self._config,
                rng=self._rng,
            )
            logger.info(
                "[sessions] RANKED actor_id=%s role=%s size=%s history=%s",
                actor_id, role, len(session.ranked), len(history),
            )
        return session

    def ranked_batch(
        self,
        actor_id: str,
        role: str,
        campaign: Optional[BrandCampaign],
        cursor: int = 0,
        filters: Optional[MatchFilters] = None,
        page_size: Optional[int] = None,
    ) -> RankedBatch:
        """Synchronous core of get_ranked_batch."""
        size = self._page_size(page_size)
        cursor = max(0, cursor)
        with self._lock:
            session = self._session_ranking(actor_id, role, campaign, cursor, filters)
            page = []
            for scored in session.ranked[cursor:cursor + size]:
                if scored.canonical_id in session.exposed_ids:
                    continue
                session.exposed_ids.add(scored.canonical_id)
                page.append(scored)
            session.cursor = cursor + size
        return RankedBatch(page=page, next_cursor=cursor + size, page_size=size)

    def cycling_batch(
        self,
        actor_id: str,
        role: str,
        campaign: Optional[BrandCampaign],
        cursor: int = 0,
        filters: Optional[MatchFilters] = None,
        page_size: Optional[int] = None,
    ) -> RankedBatch:
        """
        Synchronous core of get_cycling_batch.

        Positions wrap modulo the ranking length; every item carries an
        exposure id "<id>::<position>" so repeats never collide downstream.
        """
        size = self._page_size(page_size)
        cursor = max(0, cursor)
        with self._lock:
            session = self._session_ranking(actor_id, role, campaign, cursor, filters)
            ranked = session.ranked
            if not ranked:
                return RankedBatch(page=[], next_cursor=cursor, page_size=size)
            page = []
            for position in range(cursor, cursor + size):
                scored = ranked[position % len(ranked)]
                page.append(
                    scored.model_copy(
                        update={"exposure_id": exposure_id_for(scored.canonical_id, position)}
                    )
                )
                session.exposed_ids.add(scored.canonical_id)
            session.cursor = cursor + size
        return RankedBatch(page=page, next_cursor=cursor + size, page_size=size)

    async def get_ranked_batch(
        self,
        actor_id: str,
        role: str,
        campaign: Optional[BrandCampaign],
        cursor: int = 0,
        filters: Optional[MatchFilters] = None,
        page_size: Optional[int] = None,
    ) -> RankedBatch:
        """
        Page of ranked candidates starting at cursor.

        A page shorter than page_size means the pool is exhausted.
        """
        await asyncio.sleep(self._batch_latency)
        return self.ranked_batch(actor_id, role, campaign, cursor, filters, page_size)

    async def get_cycling_batch(
        self,
        actor_id: str,
        role: str,
        campaign: Optional[BrandCampaign],
        cursor: int = 0,
        filters: Optional[MatchFilters] = None,
        page_size: Optional[int] = None,
    ) -> RankedBatch:
        """Endless-scroll variant of get_ranked_batch over a finite pool."""
        await asyncio.sleep(self._batch_latency)
        return self.cycling_batch(actor_id, role, campaign, cursor, filters, page_size)

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------

    async def record_interaction(
        self,
        actor_id: str,
        target_id: str,
        interaction_type: Union[str, InteractionType],
    ) -> Interaction:
        """
        Append one interaction for actor_id.

        Raises InvalidInteractionError for unknown types before anything is written.
        Exposure ids from the cycling feed are stored under their canonical id.
        """
        parsed = parse_interaction_type(interaction_type)
        await asyncio.sleep(self._interaction_latency)
        interaction = Interaction(
            actor_id=actor_id,
            target_id=canonical_id(target_id),
            type=parsed,
        )
        self._interactions.append(interaction)
        return interaction

    async def record_swipe(self, actor_id: str, target_id: str, direction: str) -> Interaction:
        """Record a deck swipe: left = pass, right = like, up = superlike."""
        interaction_type = SWIPE_DIRECTIONS.get(direction)
        if interaction_type is None:
            raise InvalidInteractionError(direction)
        return await self.record_interaction(actor_id, target_id, interaction_type)

    async def get_interactions(self, actor_id: str) -> List[Interaction]:
        """The actor's interaction history in append order."""
        return self._interactions.list_for_actor(actor_id)

    # ------------------------------------------------------------------
    # Resets
    # ------------------------------------------------------------------

    def reset_session(self, actor_id: Optional[str] = None) -> None:
        """Clear feed state (cursor, ranking, exposure set) for one actor or all; the log is untouched."""
        with self._lock:
            if actor_id is None:
                sessions = list(self._sessions.values())
            else:
                sessions = [s for s in (self._sessions.get(actor_id),) if s is not None]
            for session in sessions:
                session.reset()
        logger.info("[sessions] RESET actor_id=%s", actor_id or "*")

    def reset_demo(self) -> None:
        """Reload the interaction log from the seed data and clear every session."""
        self._interactions.reset(self._seed_interactions)
        self.reset_session()
        logger.info("[sessions] DEMO_RESET seed_interactions=%s", len(self._seed_interactions))

    def session(self, actor_id: str) -> Optional[SessionState]:
        return self._sessions.get(actor_id)

    @property
    def active_sessions(self) -> int:
        return sum(1 for s in self._sessions.values() if s.is_materialized)
