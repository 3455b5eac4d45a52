"""Static skills taxonomy and stop-word vocabulary.

The taxonomy maps a canonical skill name to the spellings it is known by.
Both tables are read-only: they are compiled once into a frozen
:class:`SkillVocabulary` that every extractor call shares.
"""

import json
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from config import settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Skills taxonomy: canonical name -> synonym variants
# The canonical name itself always counts as a variant.
# Single-letter names ("c", "r") and the bare verb "go" are left out on purpose:
# they collide with initials and ordinary prose far more often than they name a skill.
# ---------------------------------------------------------------------------
SKILL_TAXONOMY: dict[str, tuple[str, ...]] = {
    # Programming languages
    "python": ("py", "python3", "python 3", "python2"),
    "javascript": ("js", "es6", "es2015", "ecmascript", "java script"),
    "typescript": ("ts",),
    "java": ("java 8", "java se", "java ee", "j2ee"),
    "c++": ("cpp", "c plus plus"),
    "c#": ("csharp", "c sharp"),
    "golang": ("go lang",),
    "rust": (),
    "ruby": ("rb",),
    "php": (),
    "swift": (),
    "kotlin": (),
    "scala": (),
    "matlab": (),
    "perl": (),
    "sql": ("t-sql", "tsql", "pl/sql", "plsql"),
    "bash": ("shell scripting", "shell script", "bash scripting"),
    "powershell": (),
    # Frontend
    "react": ("react.js", "reactjs"),
    "react native": (),
    "angular": ("angular.js", "angularjs"),
    "vue": ("vue.js", "vuejs"),
    "svelte": (),
    "next.js": ("nextjs",),
    "html": ("html5",),
    "css": ("css3",),
    "sass": ("scss",),
    "tailwind": ("tailwindcss", "tailwind css"),
    "bootstrap": (),
    "jquery": (),
    "webpack": (),
    "redux": (),
    # Backend
    "node.js": ("nodejs", "node js"),
    "express": ("express.js", "expressjs"),
    "django": (),
    "flask": (),
    "fastapi": ("fast api",),
    "spring boot": ("springboot",),
    "ruby on rails": ("rails", "ror"),
    ".net": ("dotnet", "asp.net", "asp.net core", ".net core"),
    "graphql": ("graph ql",),
    "rest api": ("restful", "rest apis", "restful api", "restful apis", "restful services"),
    "grpc": (),
    "microservices": ("microservice", "micro services"),
    # Cloud & DevOps
    "aws": ("amazon web services", "amazon aws"),
    "azure": ("microsoft azure",),
    "gcp": ("google cloud", "google cloud platform"),
    "docker": ("docker compose",),
    "kubernetes": ("k8s", "kube"),
    "terraform": (),
    "ansible": (),
    "jenkins": (),
    "github actions": ("gh actions",),
    "gitlab ci": (),
    "ci/cd": ("cicd", "ci cd", "continuous integration", "continuous delivery", "continuous deployment"),
    "linux": ("unix",),
    "nginx": (),
    "helm": (),
    "prometheus": (),
    "grafana": (),
    # Databases & data platforms
    "postgresql": ("postgres", "psql"),
    "mysql": ("my sql",),
    "sql server": ("mssql", "ms sql"),
    "oracle": (),
    "sqlite": (),
    "mongodb": ("mongo", "mongo db"),
    "redis": (),
    "elasticsearch": ("elastic search",),
    "dynamodb": ("dynamo db",),
    "cassandra": (),
    "kafka": ("apache kafka",),
    "rabbitmq": (),
    "snowflake": (),
    "bigquery": ("big query",),
    "redshift": (),
    "spark": ("apache spark", "pyspark"),
    "hadoop": (),
    "airflow": ("apache airflow",),
    "firebase": (),
    # Data science & ML
    "pandas": (),
    "numpy": (),
    "scikit-learn": ("sklearn", "scikit learn"),
    "tensorflow": ("tensor flow",),
    "pytorch": ("torch",),
    "keras": (),
    "machine learning": ("ml",),
    "deep learning": ("dl",),
    "natural language processing": ("nlp",),
    "computer vision": (),
    "generative ai": ("gen ai", "genai"),
    "llm": ("llms", "large language model", "large language models"),
    "data analysis": ("data analytics",),
    "tableau": (),
    "power bi": ("powerbi",),
    # Tools
    "git": (),
    "github": (),
    "gitlab": (),
    "jira": (),
    "confluence": (),
    "figma": (),
    "postman": (),
    # Testing
    "pytest": (),
    "jest": (),
    "selenium": (),
    "cypress": (),
    "junit": (),
    # Mobile
    "android": (),
    "ios": (),
    "flutter": (),
    # Methodologies & soft skills
    "agile": ("agile methodology", "agile/scrum"),
    "scrum": (),
    "kanban": (),
    "project management": ("project mgmt",),
    "leadership": (),
    "communication": ("communication skills",),
    "teamwork": ("team work",),
    "problem solving": ("problem-solving",),
}

# ---------------------------------------------------------------------------
# Stop words: scikit-learn's English list plus resume/JD filler that carries no
# matching signal. "computer" and "system" are generic in prose but meaningful
# in resumes ("Computer Science", "system design"), so they are kept.
# ---------------------------------------------------------------------------
RESUME_STOPWORDS: frozenset[str] = frozenset({
    # Requirement phrasing
    "looking", "seeking", "required", "requirement", "requirements",
    "preferred", "plus", "must", "ability", "able", "knowledge",
    "familiarity", "familiar", "proficiency", "proficient", "understanding",
    "experience", "experienced", "skills", "skill", "years", "year",
    "strong", "excellent", "good", "great", "solid", "including", "etc",
    # Common verbs
    "use", "used", "using", "work", "worked", "working", "make", "made",
    "help", "helped", "want", "need", "needs", "join", "apply",
    # Role boilerplate
    "role", "position", "candidate", "candidates", "opportunity", "responsibilities",
    "responsible", "team", "company", "ideal",
})

STOP_WORDS: frozenset[str] = (
    frozenset(ENGLISH_STOP_WORDS) - {"computer", "system"}
) | RESUME_STOPWORDS

# Greedy n-gram window for multi-word skills ("natural language processing")
MAX_SKILL_NGRAM = 3

# Lower-cased raw token: an optional leading dot (".net"), then Unicode
# alphanumerics with embedded ".", "+" or "#" ("node.js", "c++", "c#", "résumé")
RAW_TOKEN_RE = re.compile(r"(?:(?<![^\W_])\.)?[^\W_](?:[^\W_]|[.+#])*")
_COMPOUND_CHARS = frozenset(".+#")


def phrase_tokens(phrase: str) -> list[str]:
    """Split a lower-cased phrase into raw tokens with trailing dots removed."""
    tokens = []
    for raw in RAW_TOKEN_RE.findall(phrase.lower()):
        raw = raw.rstrip(".")
        if raw:
            tokens.append(raw)
    return tokens


@dataclass(frozen=True)
class SkillVocabulary:
    """Compiled, read-only lookup tables shared by every extraction call."""

    variants: Mapping[str, str]
    canonical: frozenset[str]
    stop_words: frozenset[str]
    compound_tokens: frozenset[str]
    max_ngram: int = MAX_SKILL_NGRAM

    def lookup(self, phrase: str) -> str | None:
        """Return the canonical skill for a space-joined token phrase, if any."""
        return self.variants.get(phrase)


def build_vocabulary(
    taxonomy: Mapping[str, tuple[str, ...] | list[str]] = SKILL_TAXONOMY,
    stop_words: frozenset[str] = STOP_WORDS,
) -> SkillVocabulary:
    """Compile a taxonomy into variant lookups keyed by normalized token phrases."""
    variants: dict[str, str] = {}
    compound: set[str] = set()
    max_ngram = 1

    for canonical, synonyms in taxonomy.items():
        canonical = canonical.lower().strip()
        for spelling in (canonical, *synonyms):
            tokens = phrase_tokens(spelling)
            if not tokens:
                continue
            key = " ".join(tokens)
            if key in variants and variants[key] != canonical:
                logger.warning(
                    "Skill variant %r maps to both %r and %r; keeping %r",
                    key, variants[key], canonical, variants[key],
                )
                continue
            variants[key] = canonical
            compound.update(t for t in tokens if _COMPOUND_CHARS & set(t))
            max_ngram = max(max_ngram, len(tokens))

    return SkillVocabulary(
        variants=MappingProxyType(variants),
        canonical=frozenset(variants.values()),
        stop_words=stop_words,
        compound_tokens=frozenset(compound),
        max_ngram=min(max_ngram, MAX_SKILL_NGRAM),
    )


def load_taxonomy_file(path: str | Path) -> dict[str, list[str]]:
    """Load an extra taxonomy from a JSON object of ``{canonical: [variants]}``."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Could not read skills taxonomy {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Skills taxonomy {path} must be a JSON object")

    taxonomy: dict[str, list[str]] = {}
    for canonical, synonyms in data.items():
        if not isinstance(synonyms, list) or not all(isinstance(s, str) for s in synonyms):
            raise ValueError(f"Variants for skill {canonical!r} must be a list of strings")
        taxonomy[str(canonical)] = synonyms
    logger.info("Loaded %d skills from %s", len(taxonomy), path)
    return taxonomy


def merge_taxonomies(
    base: Mapping[str, tuple[str, ...] | list[str]],
    extra: Mapping[str, tuple[str, ...] | list[str]],
) -> dict[str, tuple[str, ...]]:
    """Union two taxonomies; variants of a shared canonical name are combined."""
    merged = {k.lower(): tuple(v) for k, v in base.items()}
    for canonical, synonyms in extra.items():
        key = canonical.lower()
        existing = merged.get(key, ())
        merged[key] = existing + tuple(s for s in synonyms if s not in existing)
    return merged


@lru_cache(maxsize=1)
def get_vocabulary() -> SkillVocabulary:
    """Build the process-wide vocabulary on first use."""
    taxonomy: Mapping[str, tuple[str, ...] | list[str]] = SKILL_TAXONOMY
    if settings.skills_taxonomy_path:
        taxonomy = merge_taxonomies(SKILL_TAXONOMY, load_taxonomy_file(settings.skills_taxonomy_path))
    vocabulary = build_vocabulary(taxonomy)
    logger.info("Skills vocabulary ready: %d skills, %d variants",
                len(vocabulary.canonical), len(vocabulary.variants))
    return vocabulary
