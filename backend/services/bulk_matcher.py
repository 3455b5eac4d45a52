"""Bulk screening: many resumes against one job description.

Each resume is matched independently; a resume that cannot be read or
fails to match is reported as an item with ``error`` set and never aborts
the run. Results keep input order whether items run sequentially, on a
thread pool, or as asyncio tasks.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Literal

from config import settings
from models.requests import BulkMatchRequest, ResumeSource
from models.responses import BulkMatchItem, BulkMatchResponse
from models.schemas.match_result import MatchStatus
from services.classifier import application_status
from services.match_engine import match_resume_to_jd
from services.resume_parser import parse_resume
from services.text_normalizer import decode_text

logger = logging.getLogger(__name__)

UNREADABLE_ERROR = "Could not extract text from resume file"


def _source_text(source: ResumeSource) -> str:
    if source.text is not None:
        return source.text
    if source.content is not None:
        return decode_text(source.content)
    return ""


def match_one(
    source: ResumeSource,
    job_description: str,
    top_n: int | None = None,
) -> BulkMatchItem:
    """Match a single bulk item, converting any failure into an error item."""
    top_n = settings.top_keywords_limit if top_n is None else top_n
    try:
        resume_text = _source_text(source)
        if source.parsed_resume is not None:
            parsed = source.parsed_resume
        elif len(resume_text.strip()) < settings.min_text_length:
            return BulkMatchItem(
                file_name=source.file_name,
                application_id=source.application_id,
                error=UNREADABLE_ERROR,
            )
        else:
            parsed = parse_resume(resume_text)

        result = match_resume_to_jd(parsed.keywords, parsed.skills, resume_text, job_description)
    except Exception as e:
        logger.warning("Failed to process resume %s: %s", source.file_name, e)
        return BulkMatchItem(
            file_name=source.file_name,
            application_id=source.application_id,
            error=f"Failed to process resume: {e}",
        )

    return BulkMatchItem(
        file_name=source.file_name,
        match_score=result.match_score,
        match_percentage=result.match_percentage,
        status=result.status,
        email=parsed.email,
        skills=sorted(parsed.skills),
        matched_keywords=result.matched_keywords[:top_n],
        missing_keywords=result.missing_keywords[:top_n],
        application_id=source.application_id,
        application_status=application_status(result.status),
    )


def _summarize(results: list[BulkMatchItem]) -> BulkMatchResponse:
    failed = sum(1 for r in results if r.error)
    logger.info("Bulk match processed %d resumes (%d failed)", len(results), failed)
    return BulkMatchResponse(success=True, processed=len(results), results=results)


def match_bulk(
    request: BulkMatchRequest,
    concurrent: bool = False,
    max_workers: int | None = None,
) -> BulkMatchResponse:
    """Match every resume in the request, optionally on a thread pool."""
    if concurrent:
        workers = max_workers or settings.bulk_max_workers
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(
                lambda source: match_one(source, request.job_description),
                request.resumes,
            ))
    else:
        results = [match_one(source, request.job_description) for source in request.resumes]
    return _summarize(results)


async def match_bulk_async(request: BulkMatchRequest) -> BulkMatchResponse:
    """Async variant: each resume is matched in a worker thread."""
    results = await asyncio.gather(*[
        asyncio.to_thread(match_one, source, request.job_description)
        for source in request.resumes
    ])
    return _summarize(list(results))


def rank_results(
    results: list[BulkMatchItem],
    status: MatchStatus | None = None,
    sort_by: Literal["match_score", "match_percentage"] = "match_score",
    order: Literal["asc", "desc"] = "desc",
    limit: int = 100,
) -> list[BulkMatchItem]:
    """Rank successful items for review, optionally filtered by decision.

    Sorting is stable: items with equal scores keep their input order.
    """
    if sort_by not in ("match_score", "match_percentage"):
        sort_by = "match_score"
    ranked = [r for r in results if r.error is None]
    if status is not None:
        ranked = [r for r in ranked if r.status == status]
    ranked.sort(key=lambda r: getattr(r, sort_by) or 0, reverse=order != "asc")
    return ranked[:limit]
