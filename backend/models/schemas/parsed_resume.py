"""Resume parser output: structured candidate profile extracted from resume text."""

from pydantic import BaseModel, field_serializer


class WorkExperience(BaseModel):
    """A single work experience entry."""
    company: str = ""
    position: str = ""
    duration: str = ""  # date-range substring as written, e.g. "Jan 2020 - Present"
    description: str = ""


class Education(BaseModel):
    """A single education entry."""
    degree: str = ""  # as written, e.g. "B.S.", "Master of Science"
    institution: str = ""
    year: str = ""
    field: str = ""


class ParsedResume(BaseModel):
    """Structured output of the resume parser.

    ``skills`` holds canonical taxonomy names only. ``keywords`` is ordered by
    relevance (frequency, then first occurrence) and contains no duplicates.
    """
    skills: set[str] = set()
    keywords: list[str] = []
    email: str = ""
    experience: list[WorkExperience] = []
    education: list[Education] = []
    certificates: list[str] = []

    @field_serializer("skills")
    def _serialize_skills(self, skills: set[str]) -> list[str]:
        return sorted(skills)


class ResumeSections(BaseModel):
    """Structured sub-records found by the section segmenter."""
    email: str = ""
    experience: list[WorkExperience] = []
    education: list[Education] = []
    certificates: list[str] = []
