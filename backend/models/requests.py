from pydantic import BaseModel, Field

from models.schemas.parsed_resume import ParsedResume


class MatchRequest(BaseModel):
    resume_text: str = Field(..., min_length=10, max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., min_length=10, max_length=10000, description="Job description text")


class ResumeSource(BaseModel):
    """One resume in a bulk run: raw text, raw file bytes, or a stored parse."""
    file_name: str = "resume"
    text: str | None = None
    content: bytes | None = None
    parsed_resume: ParsedResume | None = None
    application_id: str | None = None


class BulkMatchRequest(BaseModel):
    job_description: str = Field(..., min_length=10, max_length=10000, description="Job description text")
    resumes: list[ResumeSource] = Field(..., min_length=1, max_length=50)
