"""Resume section segmentation and structured entry extraction.

Every scanner here is best-effort: a missing or unrecognizable section yields
an empty result, and no scanner depends on another's output.
"""

import re

from models.schemas.parsed_resume import Education, ResumeSections, WorkExperience

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"work\s*history",
        r"career\s*(?:history|summary|path)",
        r"(?:positions?\s*held|roles)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?\s*(?:&|and)?\s*certific(?:ations?|ates?)",
        r"(?:professional\s+)?credentials",
    ],
    # Sections below are only used as zone boundaries
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
        r"(?:programming\s+)?languages",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
    ],
    "projects": [
        r"(?:key|notable|selected|personal)?\s*projects",
        r"portfolio",
    ],
    "achievements": [
        r"(?:key\s+)?achievements?",
        r"(?:awards?|honors?|accomplishments)",
    ],
}

# A heading is a line holding nothing but the marker, optionally followed by punctuation
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"^\s*(?:{combined})\s*[:.\-–—]*\s*$", re.IGNORECASE
    )

# Anchored at the start of the local part
EMAIL_RE = re.compile(r"(?<![\w.+-])[\w.+-]+@[\w-]+\.[\w.-]+")

# Date ranges: "Jan 2019 - Present", "2020 - 2023", "March 2018 – Nov 2022", "06/2017 to 12/2019"
_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_DATE = rf"(?:{_MONTHS}\.?,?\s*\d{{4}}|\d{{1,2}}/\d{{4}}|\d{{4}})"
DATE_RANGE_RE = re.compile(
    rf"{_DATE}\s*(?:[-–—]+|to|until)\s*(?:{_DATE}|present|current|now|today)",
    re.IGNORECASE,
)
YEAR_RE = re.compile(r"(?<!\d)(?:19|20)\d{2}(?!\d)")
_GPA_RE = re.compile(r"\(?\bGPA\b\s*:?\s*[\d.]+(?:\s*/\s*[\d.]+)?\)?", re.IGNORECASE)

BULLET_MARKERS = frozenset("•-–—►▪✓*○◆⚫→▸▹◇■□●")
_NUMBERED_BULLET_RE = re.compile(r"^\d{1,2}[.)]\s")

# Separators inside a header line: "Title | Company", "Title, Company", "Title at Company"
_PART_SPLIT_RE = re.compile(r"\s*[|,;•·]\s*|\s+[-–—]+\s+|\s+(?:at|@)\s+")

_TITLE_RE = re.compile(
    r"\b(?:engineer|developer|programmer|architect|manager|lead|director|head|"
    r"analyst|scientist|researcher|consultant|designer|specialist|administrator|"
    r"officer|assistant|associate|coordinator|supervisor|executive|intern|trainee|"
    r"technician|accountant|representative|teacher|founder|president|owner|"
    r"senior|junior|swe|sde|cto|ceo|cfo|vp)\b",
    re.IGNORECASE,
)
_COMPANY_RE = re.compile(
    r"\b(?:inc|llc|ltd|corp|corporation|company|co|gmbh|plc|technologies|"
    r"solutions|labs|group|systems|software|consulting|bank)\b\.?",
    re.IGNORECASE,
)
_INSTITUTION_RE = re.compile(
    r"\b(?:university|college|institute|school|academy|polytechnic|universit[éy])\b",
    re.IGNORECASE,
)

# Degree phrases as written. Spelled-out degrees match case-insensitively;
# bare abbreviations must be upper-case so "as" or "ms" in prose never match.
_DEGREE_RE = re.compile(
    r"(?<![A-Za-z])(?:"
    r"(?i:bachelor|master|associate)(?:['’]?s)?"
    r"(?:\s+(?i:of|in)\s+(?i:science|arts|engineering|technology|business\s+administration|"
    r"fine\s+arts|applied\s+science|commerce|education|computer\s+applications))?"
    r"|(?i:doctor(?:ate)?)(?:\s+(?i:of\s+philosophy))?"
    r"|(?i:ph\.?\s?d)\.?"
    r"|M\.?B\.?A\.?"
    r"|[BM]\.\s?(?:Sc|Tech|Eng|S|A|E)\.?"
    r"|(?:BSc|BTech|BEng|MSc|MTech|MEng|BS|BA|BE|MS|MA|AA|AS)"
    r")(?![A-Za-z])"
)
_FIELD_PREFIX_RE = re.compile(r"^(?:[\s,:;\-–—]|degree\b|(?:in|of)\b)+", re.IGNORECASE)

MAX_HEADER_LINES = 3
MAX_HEADER_WORDS = 14


# ---------------------------------------------------------------------------
# Zones
# ---------------------------------------------------------------------------

def _heading_for(line: str) -> str | None:
    stripped = line.strip()
    if not stripped:
        return None
    for section_name, pattern in _COMPILED.items():
        if pattern.match(stripped):
            return section_name
    return None


def parse_sections(text: str) -> dict[str, str]:
    """Split resume text into named zones.

    Returns a dict mapping section name -> zone body. Text before the first
    heading goes into 'header'. A repeated heading appends to its zone.
    """
    sections: dict[str, str] = {}
    current_section = "header"
    current_lines: list[str] = []

    def _flush() -> None:
        body = "\n".join(current_lines).strip()
        if not body:
            return
        if current_section in sections:
            sections[current_section] += "\n\n" + body
        else:
            sections[current_section] = body

    for line in text.split("\n"):
        matched_section = _heading_for(line)
        if matched_section:
            _flush()
            current_section = matched_section
            current_lines = []
        else:
            current_lines.append(line)

    _flush()
    return sections


def extract_email(text: str) -> str:
    """First email address anywhere in the text, or empty string."""
    match = EMAIL_RE.search(text)
    return match.group().rstrip(".") if match else ""


# ---------------------------------------------------------------------------
# Line helpers
# ---------------------------------------------------------------------------

def _is_bullet(line: str) -> bool:
    return line[:1] in BULLET_MARKERS or bool(_NUMBERED_BULLET_RE.match(line))


def _strip_bullet(line: str) -> str:
    line = _NUMBERED_BULLET_RE.sub("", line, count=1)
    return line.lstrip("".join(BULLET_MARKERS) + " ").strip()


def _is_header_line(line: str) -> bool:
    """Short non-bullet line without sentence punctuation: a title/company/date line."""
    return (
        not _is_bullet(line)
        and len(line.split()) <= MAX_HEADER_WORDS
        and not line.rstrip().endswith(".")
    )


def _split_blocks(body: str) -> list[list[str]]:
    """Blank-line separated blocks of stripped, non-empty lines."""
    blocks = []
    for chunk in re.split(r"\n\s*\n", body):
        lines = [line.strip() for line in chunk.split("\n") if line.strip()]
        if lines:
            blocks.append(lines)
    return blocks


def _header_parts(lines: list[str]) -> list[str]:
    """Split header lines into fields with dates, years and GPA removed."""
    parts: list[str] = []
    for line in lines:
        cleaned = DATE_RANGE_RE.sub(" ", line)
        cleaned = _GPA_RE.sub(" ", cleaned)
        for part in _PART_SPLIT_RE.split(cleaned):
            part = YEAR_RE.sub(" ", part)
            part = re.sub(r"\s+", " ", part).strip(" |,;:-–—()")
            if part and not re.fullmatch(r"(?i)present|current|now", part):
                parts.append(part)
    return parts


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

def _carry_header_lines(current: list[str]) -> list[str]:
    """Pop trailing title/company lines that belong to the next entry."""
    carried: list[str] = []
    while (
        len(current) > 1
        and len(carried) < MAX_HEADER_LINES - 1
        and _is_header_line(current[-1])
        and not DATE_RANGE_RE.search(current[-1])
    ):
        carried.insert(0, current.pop())
    return carried


def _split_experience_entries(body: str) -> list[list[str]]:
    """Group experience lines into entries.

    Boundaries are blank lines, a second date range inside one entry, and a
    capitalized title line following bullet points.
    """
    entries: list[list[str]] = []
    for block in _split_blocks(body):
        # A bullet-only block continues the previous entry's description
        if entries and _is_bullet(block[0]) and not DATE_RANGE_RE.search("\n".join(block)):
            entries[-1].extend(block)
            continue

        current: list[str] = []
        has_date = False
        for line in block:
            line_has_date = bool(DATE_RANGE_RE.search(line))
            if line_has_date and has_date:
                carried = _carry_header_lines(current)
                entries.append(current)
                current, has_date = carried, False
            elif (
                has_date
                and current
                and _is_bullet(current[-1])
                and _is_header_line(line)
                and line[:1].isupper()
            ):
                entries.append(current)
                current, has_date = [], False
            current.append(line)
            has_date = has_date or line_has_date
        if current:
            entries.append(current)
    return entries


def _pick_position_and_company(parts: list[str]) -> tuple[str, str]:
    position = next((p for p in parts if _TITLE_RE.search(p)), "")
    rest = [p for p in parts if p != position]
    company = next((p for p in rest if _COMPANY_RE.search(p)), "")
    others = [p for p in rest if p != company]

    if not company and others:
        if position or len(others) == 1:
            company = others.pop(0)
        else:
            # Two unlabeled fields: the usual order is "Title | Company"
            position, company = others[0], others[1]
    elif not position and company and others:
        position = others[0]
    return position, company


def _parse_experience_entry(lines: list[str]) -> WorkExperience:
    match = DATE_RANGE_RE.search("\n".join(lines))
    duration = re.sub(r"\s+", " ", match.group(0)).strip() if match else ""

    header: list[str] = []
    description: list[str] = []
    for line in lines:
        if not description and len(header) < MAX_HEADER_LINES and _is_header_line(line):
            header.append(line)
        else:
            description.append(_strip_bullet(line))

    position, company = _pick_position_and_company(_header_parts(header))
    return WorkExperience(
        company=company,
        position=position,
        duration=duration,
        description="\n".join(d for d in description if d),
    )


def extract_experience(body: str) -> list[WorkExperience]:
    """Best-effort work history entries from an experience zone body."""
    return [_parse_experience_entry(lines) for lines in _split_experience_entries(body)]


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

def _split_education_entries(body: str) -> list[list[str]]:
    entries: list[list[str]] = []
    for block in _split_blocks(body):
        current: list[str] = []
        has_degree = False
        for line in block:
            line_has_degree = bool(_DEGREE_RE.search(line))
            if line_has_degree and has_degree:
                carried: list[str] = []
                # Institution-first layout: "Stanford University" on its own line
                # introduces the next degree
                if (
                    len(current) > 1
                    and not _DEGREE_RE.search(current[0])
                    and _INSTITUTION_RE.search(current[-1])
                    and not _DEGREE_RE.search(current[-1])
                ):
                    carried = [current.pop()]
                entries.append(current)
                current, has_degree = carried, False
            current.append(line)
            has_degree = has_degree or line_has_degree
        if current:
            entries.append(current)
    return entries


def _clean_field(text: str) -> str:
    text = _GPA_RE.sub(" ", DATE_RANGE_RE.sub(" ", text))
    text = YEAR_RE.sub(" ", text)
    text = _FIELD_PREFIX_RE.sub("", text)
    return re.sub(r"\s+", " ", text).strip(" |,;:-–—()")


def _parse_education_entry(lines: list[str]) -> Education:
    years = YEAR_RE.findall("\n".join(lines))
    parts = _header_parts(lines)

    degree = ""
    field = ""
    degree_index = -1
    for i, part in enumerate(parts):
        match = _DEGREE_RE.search(part)
        if match:
            degree = match.group(0).strip()
            field = _clean_field(part[match.end():])
            degree_index = i
            break

    remaining = [p for i, p in enumerate(parts) if i != degree_index]
    institution = next((p for p in remaining if _INSTITUTION_RE.search(p)), "")
    remaining = [p for p in remaining if p != institution]
    if not institution and degree and remaining:
        institution = remaining.pop(0)
    if not field and degree and remaining:
        field = _clean_field(remaining[0])

    return Education(
        degree=degree,
        institution=institution,
        # Graduation year is the last one mentioned ("2015 - 2019" -> "2019")
        year=years[-1] if years else "",
        field=field,
    )


def extract_education(body: str) -> list[Education]:
    """Best-effort education entries from an education zone body."""
    return [_parse_education_entry(lines) for lines in _split_education_entries(body)]


# ---------------------------------------------------------------------------
# Certificates
# ---------------------------------------------------------------------------

def extract_certificates(body: str) -> list[str]:
    """One certificate per non-empty line of a certifications zone body."""
    certificates = []
    for line in body.split("\n"):
        cleaned = _strip_bullet(line.strip())
        if cleaned:
            certificates.append(cleaned)
    return certificates


def segment(text: str) -> ResumeSections:
    """Run every zone scanner over the resume text."""
    sections = parse_sections(text)
    return ResumeSections(
        email=extract_email(text),
        experience=extract_experience(sections.get("experience", "")),
        education=extract_education(sections.get("education", "")),
        certificates=extract_certificates(sections.get("certifications", "")),
    )
