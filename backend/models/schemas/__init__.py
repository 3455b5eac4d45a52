"""Internal contracts passed between the matching engine's components."""

from models.schemas.extracted_terms import ExtractedTerms
from models.schemas.match_result import MatchResult, MatchStatus, ScoreResult
from models.schemas.parsed_resume import (
    Education,
    ParsedResume,
    ResumeSections,
    WorkExperience,
)

__all__ = [
    "ExtractedTerms",
    "ParsedResume",
    "WorkExperience",
    "Education",
    "ResumeSections",
    "ScoreResult",
    "MatchResult",
    "MatchStatus",
]
