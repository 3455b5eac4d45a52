import pytest

from models.schemas import MatchStatus
from services.classifier import (
    LOW_PRIORITY_THRESHOLD,
    SHORTLIST_THRESHOLD,
    application_status,
    classify,
)


def test_default_thresholds():
    assert SHORTLIST_THRESHOLD == 80
    assert LOW_PRIORITY_THRESHOLD == 50


@pytest.mark.parametrize(
    "percentage,expected",
    [
        (100, MatchStatus.SHORTLISTED),
        (80, MatchStatus.SHORTLISTED),
        (79, MatchStatus.LOW_PRIORITY),
        (62, MatchStatus.LOW_PRIORITY),
        (50, MatchStatus.LOW_PRIORITY),
        (49, MatchStatus.REJECTED),
        (0, MatchStatus.REJECTED),
    ],
)
def test_classify_boundaries(percentage, expected):
    assert classify(percentage) == expected


def test_classify_custom_thresholds():
    assert classify(70, shortlist_threshold=70, low_priority_threshold=40) == MatchStatus.SHORTLISTED
    assert classify(45, shortlist_threshold=70, low_priority_threshold=40) == MatchStatus.LOW_PRIORITY
    assert classify(39, shortlist_threshold=70, low_priority_threshold=40) == MatchStatus.REJECTED


def test_status_values():
    assert MatchStatus.SHORTLISTED.value == "shortlisted"
    assert MatchStatus.LOW_PRIORITY.value == "low_priority"
    assert MatchStatus.REJECTED.value == "rejected"


def test_application_status():
    assert application_status(MatchStatus.SHORTLISTED) == "interview"
    assert application_status(MatchStatus.REJECTED) == "rejected"
    assert application_status(MatchStatus.LOW_PRIORITY) is None
