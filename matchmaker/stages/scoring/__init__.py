"""
Fit scoring: eleven factors blended into a score in [0, 1], plus rationale.

Public API: score_candidate, score_candidates, compute_factors, build_rationale.
"""

from .core import blend_factors, score_candidate, score_candidates
from .factors import compute_factors
from .rationale import build_rationale

__all__ = [
    "blend_factors",
    "build_rationale",
    "compute_factors",
    "score_candidate",
    "score_candidates",
]
