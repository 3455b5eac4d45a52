"""Weighted skill + keyword overlap scoring of a resume against a job description.

    match_score = SKILL_WEIGHT * |resume skills & job skills| / |job skills|
                + KEYWORD_WEIGHT * |matched keywords| / |job keywords|

The job description runs through the same extractor as resumes, so both
sides are compared in one canonical vocabulary.
"""

import logging
from collections.abc import Iterable

from config import settings
from models.schemas.match_result import ScoreResult
from services import keyword_extractor
from services.skill_taxonomy import SkillVocabulary
from services.text_normalizer import normalize_text

logger = logging.getLogger(__name__)

SKILL_WEIGHT = settings.skill_weight
KEYWORD_WEIGHT = settings.keyword_weight


def compute_match_percentage(match_score: float) -> int:
    """Clamp to [0, 1] and express as a rounded 0-100 integer."""
    return round(min(1.0, max(0.0, match_score)) * 100)


def score(
    resume_keywords: Iterable[str],
    resume_skills: Iterable[str],
    resume_text: str,
    job_description: str,
    vocabulary: SkillVocabulary | None = None,
    skill_weight: float = SKILL_WEIGHT,
    keyword_weight: float = KEYWORD_WEIGHT,
) -> ScoreResult:
    """Score a parsed resume against job description text.

    ``resume_text`` is accepted for callers holding the original text but does
    not affect the score: only the extracted keyword and skill sets are compared.
    """
    job = keyword_extractor.extract(normalize_text(job_description), vocabulary)
    job_keywords = job.keywords

    if not job_keywords:
        logger.debug("Job description yielded no keywords; scoring as 0")
        return ScoreResult()

    resume_skill_set = set(resume_skills)
    resume_terms = set(resume_keywords) | resume_skill_set

    matched = [kw for kw in job_keywords if kw in resume_terms]
    missing = [kw for kw in job_keywords if kw not in resume_terms]

    matched_skills = sorted(job.skills & resume_skill_set)
    missing_skills = sorted(job.skills - resume_skill_set)

    skill_overlap = len(matched_skills) / max(1, len(job.skills))
    keyword_overlap = len(matched) / max(1, len(job_keywords))
    match_score = skill_weight * skill_overlap + keyword_weight * keyword_overlap

    result = ScoreResult(
        match_score=match_score,
        match_percentage=compute_match_percentage(match_score),
        matched_keywords=matched,
        missing_keywords=missing,
        matched_skills=matched_skills,
        missing_skills=missing_skills,
        skill_overlap=skill_overlap,
        keyword_overlap=keyword_overlap,
    )
    logger.debug(
        "Scored resume (%d chars): skills %d/%d, keywords %d/%d -> %d%%",
        len(resume_text or ""), len(matched_skills), len(job.skills),
        len(matched), len(job_keywords), result.match_percentage,
    )
    return result
