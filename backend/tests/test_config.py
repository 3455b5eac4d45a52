import pytest
from pydantic import ValidationError

from config import Settings


def test_defaults():
    s = Settings()
    assert s.skill_weight == 0.7
    assert s.keyword_weight == 0.3
    assert s.shortlist_threshold == 80
    assert s.low_priority_threshold == 50
    assert s.skills_taxonomy_path == ""


def test_env_override(monkeypatch):
    monkeypatch.setenv("MATCHER_SHORTLIST_THRESHOLD", "90")
    assert Settings().shortlist_threshold == 90


def test_valid_custom_weights():
    s = Settings(skill_weight=0.8, keyword_weight=0.2)
    assert s.skill_weight == 0.8


def test_weights_must_sum_to_one():
    with pytest.raises(ValidationError, match="sum to 1"):
        Settings(skill_weight=0.6, keyword_weight=0.3)


def test_skill_weight_must_dominate():
    with pytest.raises(ValidationError, match="greater than"):
        Settings(skill_weight=0.4, keyword_weight=0.6)


def test_thresholds_must_be_ordered():
    with pytest.raises(ValidationError, match="thresholds"):
        Settings(shortlist_threshold=40, low_priority_threshold=50)
    with pytest.raises(ValidationError, match="thresholds"):
        Settings(shortlist_threshold=120)


def test_only_used_settings_are_declared():
    assert "debug" not in Settings.model_fields
