"""Application state: candidate repository, interaction store, and the session batcher."""

import json
import logging
import random
from typing import Optional

from matchmaker.models import DEFAULT_CONFIG, MatchmakerConfig

from .config import ServerConfig, get_config
from .services import (
    CandidateRepository,
    InMemoryInteractionStore,
    InteractionStore,
    JsonCandidateRepository,
    JsonInteractionStore,
    SessionBatcher,
    load_seed_interactions,
)

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        candidates: Optional[CandidateRepository] = None,
        interactions: Optional[InteractionStore] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.algorithm_config = self._load_algorithm_config(config)

        if candidates is None:
            candidates = JsonCandidateRepository(
                config.candidates_json_path, config.campaigns_json_path
            )
        self.candidates = candidates
        seed = load_seed_interactions(config.seed_interactions_path)
        if interactions is None:
            interactions = self._create_interaction_store(config, seed)
        self.interactions = interactions
        logger.info("[startup] Interaction store: %s", type(self.interactions).__name__)

        if rng is None:
            rng = random.Random(config.exploration_seed)
        self.batcher = SessionBatcher(
            self.candidates,
            self.interactions,
            config=self.algorithm_config,
            rng=rng,
            seed_interactions=seed,
            batch_latency=config.batch_latency_ms / 1000,
            interaction_latency=config.interaction_latency_ms / 1000,
        )

    @staticmethod
    def _load_algorithm_config(config: ServerConfig) -> MatchmakerConfig:
        """MatchmakerConfig from ALGORITHM_CONFIG_PATH, else defaults."""
        if not config.algorithm_config_path:
            return DEFAULT_CONFIG
        with open(config.algorithm_config_path) as f:
            loaded = MatchmakerConfig.from_dict(json.load(f))
        logger.info("[startup] Algorithm config: %s", config.algorithm_config_path)
        return loaded

    @staticmethod
    def _create_interaction_store(config: ServerConfig, seed) -> InteractionStore:
        """Create interaction store (JSON file when configured, else in-memory seeded log)."""
        if config.interaction_store == "json":
            return JsonInteractionStore(config.interactions_json_path, seed=seed)
        return InMemoryInteractionStore(seed)


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Install (or clear, with None) the global state; used by tests and embedding apps."""
    global _state
    _state = state
