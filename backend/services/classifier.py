"""Threshold policy mapping a match percentage to a screening decision."""

from config import settings
from models.schemas.match_result import MatchStatus

SHORTLIST_THRESHOLD = settings.shortlist_threshold
LOW_PRIORITY_THRESHOLD = settings.low_priority_threshold

# Follow-up status for a linked job application; low_priority leaves it unchanged
APPLICATION_STATUS: dict[MatchStatus, str | None] = {
    MatchStatus.SHORTLISTED: "interview",
    MatchStatus.LOW_PRIORITY: None,
    MatchStatus.REJECTED: "rejected",
}


def classify(
    match_percentage: int,
    shortlist_threshold: int = SHORTLIST_THRESHOLD,
    low_priority_threshold: int = LOW_PRIORITY_THRESHOLD,
) -> MatchStatus:
    if match_percentage >= shortlist_threshold:
        return MatchStatus.SHORTLISTED
    if match_percentage >= low_priority_threshold:
        return MatchStatus.LOW_PRIORITY
    return MatchStatus.REJECTED


def application_status(status: MatchStatus) -> str | None:
    """Application status implied by a screening decision, if any."""
    return APPLICATION_STATUS[status]
