"""Resume parser: normalize, then extract terms and segment sections independently."""

import logging

from models.schemas.parsed_resume import ParsedResume
from services import keyword_extractor, section_parser
from services.skill_taxonomy import SkillVocabulary
from services.text_normalizer import normalize_text

logger = logging.getLogger(__name__)


def parse_resume(resume_text: str, vocabulary: SkillVocabulary | None = None) -> ParsedResume:
    """Convert raw resume text into a structured candidate profile."""
    text = normalize_text(resume_text)
    terms = keyword_extractor.extract(text, vocabulary)
    sections = section_parser.segment(text)

    logger.debug(
        "Parsed resume: %d skills, %d keywords, %d jobs, %d degrees, %d certificates",
        len(terms.skills), len(terms.keywords), len(sections.experience),
        len(sections.education), len(sections.certificates),
    )
    return ParsedResume(
        skills=terms.skills,
        keywords=terms.keywords,
        email=sections.email,
        experience=sections.experience,
        education=sections.education,
        certificates=sections.certificates,
    )
