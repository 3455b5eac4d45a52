from pydantic import BaseModel

from models.schemas.match_result import MatchStatus
from models.schemas.parsed_resume import ParsedResume


class MatchResponse(BaseModel):
    match_score: float = 0.0
    match_percentage: int = 0
    status: MatchStatus = MatchStatus.REJECTED
    threshold: int = 80
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    parsed_resume: ParsedResume = ParsedResume()


class BulkMatchItem(BaseModel):
    """Per-resume outcome of a bulk run. ``error`` is set instead of the scores on failure."""
    file_name: str = "resume"
    match_score: float | None = None
    match_percentage: int | None = None
    status: MatchStatus | None = None
    email: str = ""
    skills: list[str] = []
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    application_id: str | None = None
    application_status: str | None = None
    error: str | None = None


class BulkMatchResponse(BaseModel):
    success: bool = True
    processed: int = 0
    results: list[BulkMatchItem] = []
