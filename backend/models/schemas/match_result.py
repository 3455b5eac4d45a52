"""Scorer and classifier outputs for a resume/job-description pair."""

from enum import Enum

from pydantic import BaseModel


class MatchStatus(str, Enum):
    """Decision outcomes, ordered by descending fit."""
    SHORTLISTED = "shortlisted"
    LOW_PRIORITY = "low_priority"
    REJECTED = "rejected"


class ScoreResult(BaseModel):
    """Structured output of the scorer.

    ``matched_keywords`` and ``missing_keywords`` partition the job
    description's keywords and keep their relevance order.
    """
    match_score: float = 0.0  # raw weighted score, 0.0-1.0
    match_percentage: int = 0  # 0-100
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []

    # Scoring transparency fields
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    skill_overlap: float = 0.0
    keyword_overlap: float = 0.0


class MatchResult(ScoreResult):
    """Score plus the threshold decision derived from ``match_percentage``."""
    status: MatchStatus = MatchStatus.REJECTED
