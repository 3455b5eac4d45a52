from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from models.requests import MatchRequest
from models.schemas import MatchStatus
from services.match_engine import analyze, match_resume_to_jd
from services.resume_parser import parse_resume

JD = "Looking for Python developer with AWS and Docker skills"
PARTIAL_RESUME = "5 years of Python and AWS experience, B.S. Computer Science 2018"
STRONG_RESUME = "Python, AWS, Docker developer"
WEAK_RESUME = "Accountant with tax and audit background"


def _match(resume_text, job_description=JD):
    parsed = parse_resume(resume_text)
    return match_resume_to_jd(parsed.keywords, parsed.skills, resume_text, job_description)


def test_partial_match_is_low_priority():
    result = _match(PARTIAL_RESUME)
    assert result.match_percentage == 62
    assert result.status == MatchStatus.LOW_PRIORITY
    assert "docker" in result.missing_keywords


def test_strong_match_is_shortlisted():
    result = _match(STRONG_RESUME)
    assert result.match_percentage == 100
    assert result.status == MatchStatus.SHORTLISTED
    assert result.matched_keywords == ["python", "developer", "aws", "docker"]
    assert result.missing_keywords == []


def test_weak_match_is_rejected():
    result = _match(WEAK_RESUME)
    assert result.match_percentage == 0
    assert result.status == MatchStatus.REJECTED


def test_empty_job_description_is_rejected():
    result = _match(PARTIAL_RESUME, "")
    assert result.match_percentage == 0
    assert result.status == MatchStatus.REJECTED
    assert result.matched_keywords == []


def test_synonym_resumes_match_identically():
    a = _match("Frontend developer: JS, Python, AWS")
    b = _match("Frontend developer: JavaScript, Python, AWS")
    assert a == b


@pytest.mark.parametrize("resume_text", [PARTIAL_RESUME, STRONG_RESUME, WEAK_RESUME])
def test_percentage_follows_score(resume_text):
    result = _match(resume_text)
    assert 0.0 <= result.match_score <= 1.0
    assert result.match_percentage == round(min(1.0, max(0.0, result.match_score)) * 100)


def test_deterministic():
    assert _match(PARTIAL_RESUME).model_dump() == _match(PARTIAL_RESUME).model_dump()


@pytest.mark.concurrency
def test_concurrent_calls_match_sequential():
    resumes = [PARTIAL_RESUME, STRONG_RESUME, WEAK_RESUME] * 4
    sequential = [_match(r) for r in resumes]
    with ThreadPoolExecutor(max_workers=6) as pool:
        concurrent = list(pool.map(_match, resumes))
    assert concurrent == sequential


def test_analyze():
    response = analyze(MatchRequest(resume_text=PARTIAL_RESUME, job_description=JD))
    assert response.match_percentage == 62
    assert response.status == MatchStatus.LOW_PRIORITY
    assert response.threshold == 80
    assert response.matched_keywords == ["python", "aws"]
    assert response.parsed_resume.skills == {"python", "aws"}


def test_match_request_rejects_short_text():
    with pytest.raises(ValidationError):
        MatchRequest(resume_text="Python", job_description=JD)
    with pytest.raises(ValidationError):
        MatchRequest(resume_text=PARTIAL_RESUME, job_description="short")
