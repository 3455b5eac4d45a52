"""Keyword and skill extraction for resume-JD matching.

Resumes and job descriptions go through the same extractor so both sides
share one vocabulary. Skill mentions are resolved through the taxonomy to
their canonical name ("JS", "ES6" and "JavaScript" all become "javascript")
and that canonical name also stands in for the mention in the keyword stream.
"""

import logging
import re
import unicodedata
from collections import Counter

from models.schemas.extracted_terms import ExtractedTerms
from services.skill_taxonomy import RAW_TOKEN_RE, SkillVocabulary, get_vocabulary

logger = logging.getLogger(__name__)

# Emails and URLs would otherwise shatter into "gmail", "com", "www", ...
# Bare profile links ("github.com/jdoe") count as URLs too.
# Every branch starts at a whitespace boundary.
_CONTACT_RE = re.compile(
    r"(?<!\S)\S+@\S+"
    r"|(?<!\S)(?:https?://|www\.)\S+"
    r"|(?<!\S)\S+\.(?:com|org|net|io|dev|me|co)/\S*"
)
_COMPOUND_SPLIT_RE = re.compile(r"[.+#]+")
_NUMERIC_RE = re.compile(r"\d+")
_VERSION_RE = re.compile(r"\d+(?:\.\d+)+")
# Plain release numbers kept after a skill ("java 11"); longer numbers are usually years
_RELEASE_RE = re.compile(r"\d{1,2}")
_DIGITS = "0123456789"

MIN_TOKEN_LENGTH = 2


def tokenize(text: str, vocabulary: SkillVocabulary | None = None) -> list[str]:
    """Split text into lower-cased tokens.

    Tokens break on non-alphanumeric characters, except for taxonomy
    spellings that embed ".", "+" or "#" ("node.js", "c++") and dotted
    version numbers ("3.10"), which stay whole. A release number glued to
    such a spelling is split off ("c++17" -> "c++", "17").
    """
    if not text:
        return []
    vocabulary = vocabulary or get_vocabulary()

    tokens: list[str] = []
    text = unicodedata.normalize("NFC", text.lower())
    for raw in RAW_TOKEN_RE.findall(_CONTACT_RE.sub(" ", text)):
        raw = raw.rstrip(".")
        if not raw:
            continue
        prefix = raw.rstrip(_DIGITS)
        if raw in vocabulary.compound_tokens or _VERSION_RE.fullmatch(raw):
            tokens.append(raw)
        elif prefix != raw and prefix in vocabulary.compound_tokens:
            tokens.extend((prefix, raw[len(prefix):]))
        else:
            tokens.extend(part for part in _COMPOUND_SPLIT_RE.split(raw) if part)
    return tokens


def _is_numeric(token: str) -> bool:
    return bool(_NUMERIC_RE.fullmatch(token) or _VERSION_RE.fullmatch(token))


def _is_significant(token: str, stop_words: frozenset[str]) -> bool:
    """Check if a non-skill token is worth keeping as a keyword."""
    return (
        len(token) >= MIN_TOKEN_LENGTH
        and not _is_numeric(token)
        and token not in stop_words
    )


def _match_skill(
    tokens: list[str], start: int, vocabulary: SkillVocabulary
) -> tuple[str | None, int]:
    """Longest taxonomy match starting at ``start``. Returns (canonical, width)."""
    for width in range(min(vocabulary.max_ngram, len(tokens) - start), 0, -1):
        canonical = vocabulary.lookup(" ".join(tokens[start:start + width]))
        if canonical is not None:
            return canonical, width
    return None, 0


def rank_terms(terms: list[str]) -> list[str]:
    """Deduplicate terms, most frequent first; ties keep first-occurrence order."""
    counts = Counter(terms)
    first_seen: dict[str, int] = {}
    for i, term in enumerate(terms):
        first_seen.setdefault(term, i)
    return sorted(counts, key=lambda term: (-counts[term], first_seen[term]))


def extract(text: str, vocabulary: SkillVocabulary | None = None) -> ExtractedTerms:
    """Extract the canonical skill set and the relevance-ranked keyword list."""
    if not text or not text.strip():
        return ExtractedTerms()
    vocabulary = vocabulary or get_vocabulary()
    tokens = tokenize(text, vocabulary)

    skills: set[str] = set()
    terms: list[str] = []
    after_skill = False
    i = 0
    while i < len(tokens):
        canonical, width = _match_skill(tokens, i, vocabulary)
        if canonical is not None:
            skills.add(canonical)
            terms.append(canonical)
            after_skill = True
            i += width
            continue

        token = tokens[i]
        # A version number right after a skill ("python 3.10", "java 11") is a technical term
        if _is_significant(token, vocabulary.stop_words) or (
            after_skill and (_VERSION_RE.fullmatch(token) or _RELEASE_RE.fullmatch(token))
        ):
            terms.append(token)
        after_skill = False
        i += 1

    keywords = rank_terms(terms)
    logger.debug("Extracted %d skills and %d keywords from %d tokens",
                 len(skills), len(keywords), len(tokens))
    return ExtractedTerms(skills=skills, keywords=keywords)


def extract_keywords(text: str, top_n: int | None = None) -> list[str]:
    """Relevance-ordered keywords, optionally sliced to the top ``top_n``."""
    keywords = extract(text).keywords
    return keywords[:top_n] if top_n is not None else keywords


def extract_skills(text: str) -> set[str]:
    """Canonical taxonomy skills mentioned in text."""
    return extract(text).skills
