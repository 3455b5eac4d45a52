from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Scoring weights: skills are curated taxonomy terms, so they carry more weight
    skill_weight: float = 0.7
    keyword_weight: float = 0.3

    # Decision thresholds on match percentage (0-100)
    shortlist_threshold: int = 80
    low_priority_threshold: int = 50

    min_text_length: int = 10
    top_keywords_limit: int = 10
    bulk_max_workers: int = 8

    # Optional JSON file {canonical: [variants, ...]} merged into the built-in taxonomy
    skills_taxonomy_path: str = ""

    model_config = {"env_prefix": "MATCHER_", "env_file": ".env", "env_file_encoding": "utf-8"}

    @model_validator(mode="after")
    def _check_policy(self) -> "Settings":
        if abs(self.skill_weight + self.keyword_weight - 1.0) > 1e-9:
            raise ValueError("skill_weight and keyword_weight must sum to 1")
        if self.skill_weight <= self.keyword_weight:
            raise ValueError("skill_weight must be greater than keyword_weight")
        if not 0 <= self.low_priority_threshold < self.shortlist_threshold <= 100:
            raise ValueError("thresholds must satisfy 0 <= low_priority < shortlist <= 100")
        return self


settings = Settings()
