"""
Algorithm configuration — scoring, diversity, exploration, and feedback parameters.

MatchmakerConfig defaults are defined here. The server may pass a dict
(e.g. loaded from a JSON file); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, model_validator

from .weights import ScoringWeights


class MatchmakerConfig(BaseModel):
    """Configuration for the matching pipeline."""

    # -------------------------------------------------------------------------
    # Scoring
    # final = sum(w_i * positive_i) - sum(w_j * penalty_j), clamped to [0, 1]
    # -------------------------------------------------------------------------

    weights: ScoringWeights = Field(default_factory=ScoringWeights)

    # Engagement rate (percent) is normalized against this range.
    engagement_range_min: float = 0.0
    engagement_range_max: float = 10.0
    # Content quality is a 1-5 rating.
    content_quality_min: float = 1.0
    content_quality_max: float = 5.0
    # Past-brand similarity saturates at this many category-matching brands.
    past_brand_saturation: int = 3
    # Platform fit when the campaign states no platform preference.
    no_platform_preference_fit: float = 0.5

    # -------------------------------------------------------------------------
    # Rationale thresholds (a sentence is added when a factor crosses these)
    # -------------------------------------------------------------------------

    niche_rationale_threshold: float = 0.6
    geo_rationale_threshold: float = 0.5
    engagement_rationale_threshold: float = 4.5
    content_quality_rationale_threshold: float = 4.5
    price_fit_rationale_threshold: float = 0.7
    platform_rationale_threshold: float = 0.8
    past_brand_rationale_threshold: float = 0.6

    # -------------------------------------------------------------------------
    # Diversity re-ranking
    # penalty *= niche_penalty (or geo_penalty) per tag whose share > threshold
    # -------------------------------------------------------------------------

    diversity_enabled: bool = True
    diversity_share_threshold: float = 0.4
    niche_penalty: float = Field(default=0.8, gt=0, le=1)
    geo_penalty: float = Field(default=0.85, gt=0, le=1)

    # -------------------------------------------------------------------------
    # Exploration (epsilon-greedy)
    # epsilon = initial_epsilon * epsilon_decay ** (interaction_count / decay_interval)
    # -------------------------------------------------------------------------

    exploration_enabled: bool = True
    initial_epsilon: float = Field(default=0.12, ge=0, le=1)
    epsilon_decay: float = Field(default=0.98, gt=0, le=1)
    epsilon_decay_interval: int = Field(default=10, gt=0)
    # Fraction of the ranked list replaced by novel candidates when triggered.
    exploration_fraction: float = Field(default=0.15, ge=0, le=1)
    novel_score: float = 0.5

    # -------------------------------------------------------------------------
    # Feedback weight adaptation
    # -------------------------------------------------------------------------

    # Only the most recent N positive interactions are considered.
    feedback_window: int = 10
    # Below this many positives, adaptation is a no-op.
    feedback_min_positive: int = 3

    # -------------------------------------------------------------------------
    # Fallback and paging
    # -------------------------------------------------------------------------

    # Score given to every candidate when no campaign/brand role is available.
    fallback_score: float = 0.5
    default_page_size: int = 10
    max_page_size: int = 50

    @model_validator(mode="after")
    def ranges_are_ordered(self):
        if self.engagement_range_max < self.engagement_range_min:
            raise ValueError("engagement_range_max must be >= engagement_range_min")
        if self.content_quality_max < self.content_quality_min:
            raise ValueError("content_quality_max must be >= content_quality_min")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "MatchmakerConfig":
        """Create config from a sectioned dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "weights" in config_dict:
            flat["weights"] = ScoringWeights.model_validate(config_dict["weights"])
        if "scoring" in config_dict:
            flat.update(config_dict["scoring"])
        if "rationale" in config_dict:
            flat.update(
                {f"{k}_rationale_threshold": v for k, v in config_dict["rationale"].items()}
            )
        if "diversity" in config_dict:
            dv = config_dict["diversity"]
            if "enabled" in dv:
                flat["diversity_enabled"] = dv["enabled"]
            if "share_threshold" in dv:
                flat["diversity_share_threshold"] = dv["share_threshold"]
            if "niche_penalty" in dv:
                flat["niche_penalty"] = dv["niche_penalty"]
            if "geo_penalty" in dv:
                flat["geo_penalty"] = dv["geo_penalty"]
        if "exploration" in config_dict:
            ex = config_dict["exploration"]
            if "enabled" in ex:
                flat["exploration_enabled"] = ex["enabled"]
            for key in ("initial_epsilon", "epsilon_decay", "epsilon_decay_interval", "novel_score"):
                if key in ex:
                    flat[key] = ex[key]
            if "fraction" in ex:
                flat["exploration_fraction"] = ex["fraction"]
        if "feedback" in config_dict:
            fb = config_dict["feedback"]
            if "window" in fb:
                flat["feedback_window"] = fb["window"]
            if "min_positive" in fb:
                flat["feedback_min_positive"] = fb["min_positive"]
        if "paging" in config_dict:
            pg = config_dict["paging"]
            if "default_page_size" in pg:
                flat["default_page_size"] = pg["default_page_size"]
            if "max_page_size" in pg:
                flat["max_page_size"] = pg["max_page_size"]
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = MatchmakerConfig()


def resolve_config(config: Optional["MatchmakerConfig"]) -> "MatchmakerConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
