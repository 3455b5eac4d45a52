"""Keyword extractor output, shared by resumes and job descriptions."""

from pydantic import BaseModel


class ExtractedTerms(BaseModel):
    skills: set[str] = set()
    keywords: list[str] = []
