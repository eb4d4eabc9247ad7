"""Thought radar package."""

from .config import RadarConfig, SubmissionConfig, SummaryConfig
from .engine.tfidf import SimilarityEngine, cosine_similarity
from .service.orchestrator import ThoughtRadar

__all__ = [
    "RadarConfig",
    "SimilarityEngine",
    "SubmissionConfig",
    "SummaryConfig",
    "ThoughtRadar",
    "cosine_similarity",
]
