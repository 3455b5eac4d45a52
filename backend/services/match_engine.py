"""Match engine: the single entry point for resume/job-description screening.

Flow:
    resume_text ──> resume_parser.parse_resume ──> ParsedResume
                                                      │ keywords, skills
    job_description ─────────────> scorer.score <─────┘
                                        │ match_percentage
                                  classifier.classify ──> MatchResult

Every call is a pure function of its arguments and the read-only
vocabulary, so calls can run concurrently without locking.
"""

import logging
from collections.abc import Iterable

from models.requests import MatchRequest
from models.responses import MatchResponse
from models.schemas.match_result import MatchResult
from services import classifier, scorer
from services.resume_parser import parse_resume
from services.skill_taxonomy import SkillVocabulary

logger = logging.getLogger(__name__)


def match_resume_to_jd(
    resume_keywords: Iterable[str],
    resume_skills: Iterable[str],
    resume_text: str,
    job_description: str,
    vocabulary: SkillVocabulary | None = None,
) -> MatchResult:
    """Score a parsed resume against a job description and classify the result."""
    score = scorer.score(resume_keywords, resume_skills, resume_text, job_description, vocabulary)
    status = classifier.classify(score.match_percentage)
    return MatchResult(**score.model_dump(), status=status)


def analyze(request: MatchRequest) -> MatchResponse:
    """Parse a resume fresh and match it, returning the parse alongside the decision."""
    parsed = parse_resume(request.resume_text)
    result = match_resume_to_jd(
        parsed.keywords, parsed.skills, request.resume_text, request.job_description
    )
    logger.info("Resume matched at %d%% (%s)", result.match_percentage, result.status.value)
    return MatchResponse(
        match_score=result.match_score,
        match_percentage=result.match_percentage,
        status=result.status,
        threshold=classifier.SHORTLIST_THRESHOLD,
        matched_keywords=result.matched_keywords,
        missing_keywords=result.missing_keywords,
        parsed_resume=parsed,
    )
