"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_BASE_DIR = Path(__file__).resolve().parent.parent
_DATA_DIR = Path(__file__).resolve().parent / "data"
_USER_DIR = Path.home() / ".matchmaker"

root_env = _BASE_DIR / ".env"
if root_env.exists():
    load_dotenv(root_env)


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # Interaction log: "memory" | "json"
    interaction_store: str = "memory"
    # When interaction_store=json: file holding the ordered interaction log.
    # Defaults to ~/.matchmaker, outside the package directory.
    interactions_json_path: Path = _USER_DIR / "interactions.json"

    # Candidate pool, demo campaigns, and the seed log used by resetDemo
    candidates_json_path: Path = _DATA_DIR / "influencers.json"
    campaigns_json_path: Path = _DATA_DIR / "campaigns.json"
    seed_interactions_path: Path = _DATA_DIR / "seed_interactions.json"

    # Optional JSON file with a sectioned MatchmakerConfig
    algorithm_config_path: Optional[Path] = None

    # Simulated round-trip latency for batch retrieval and feedback calls
    batch_latency_ms: int = 0
    interaction_latency_ms: int = 0

    # Seed for the exploration random source; None = unseeded process generator
    exploration_seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        store = os.getenv("INTERACTION_STORE", "").strip().lower() or "memory"
        if store not in ("memory", "json"):
            store = "memory"

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (Path.cwd() / p).resolve()

        seed = os.getenv("EXPLORATION_SEED")
        defaults = cls()
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            interaction_store=store,
            interactions_json_path=_path_env("INTERACTIONS_JSON_PATH", defaults.interactions_json_path),
            candidates_json_path=_path_env("CANDIDATES_JSON_PATH", defaults.candidates_json_path),
            campaigns_json_path=_path_env("CAMPAIGNS_JSON_PATH", defaults.campaigns_json_path),
            seed_interactions_path=_path_env("SEED_INTERACTIONS_PATH", defaults.seed_interactions_path),
            algorithm_config_path=_path_env("ALGORITHM_CONFIG_PATH"),
            batch_latency_ms=int(os.getenv("BATCH_LATENCY_MS", "0")),
            interaction_latency_ms=int(os.getenv("INTERACTION_LATENCY_MS", "0")),
            exploration_seed=int(seed) if seed else None,
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if not self.candidates_json_path.exists():
            errors.append(f"Candidates file not found: {self.candidates_json_path}")

        if self.algorithm_config_path and not self.algorithm_config_path.exists():
            errors.append(f"Algorithm config not found: {self.algorithm_config_path}")

        if self.batch_latency_ms < 0 or self.interaction_latency_ms < 0:
            errors.append("Simulated latency must be >= 0")

        return len(errors) == 0, errors


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
