"""Canonical whitespace cleanup for text handed over by extraction collaborators."""

import re

# Line-ending variants, including the unicode line/paragraph separators
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\u2028|\u2029|\x85")

# Control characters except tab (\x09) and newline (\x0a)
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")

_HSPACE_RE = re.compile(r"[^\S\n]+")
_EDGE_SPACE_RE = re.compile(r" ?\n ?")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Normalize line endings and whitespace.

    Casing is preserved: the section segmenter relies on capitalization cues,
    and the keyword extractor lower-cases on its own.
    """
    if not text:
        return ""
    text = _LINE_BREAK_RE.sub("\n", text)
    # \x0b and \x0c are form feeds / vertical tabs: treat them as spaces
    text = text.replace("\x0b", " ").replace("\x0c", " ")
    text = _CONTROL_RE.sub("", text)
    text = _HSPACE_RE.sub(" ", text)
    text = _EDGE_SPACE_RE.sub("\n", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def decode_text(data: bytes) -> str:
    """Decode raw file bytes, preferring UTF-8 and falling back to Latin-1."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")
