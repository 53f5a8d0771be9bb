"""
Markdown Utilities

Helpers for study notes written in markdown: heading outlines, title
derivation, normalization and similarity for duplicate detection.

Outline Rules:
==============
    # Title                 → level 1 (ATX, closing #'s are dropped)
    Title                   → level 1 (setext)
    =====
    Title                   → level 2 (setext)
    -----

    Headings inside ``` or ~~~ fences are ignored.
    A ``---`` line that follows a blank line is a thematic break, not a heading.

Usage:
======
    from src.shared.utils.markdown import extract_outline, similarity

    headings = extract_outline("# REST\\n\\n## HTTP verbs")
    [h.anchor for h in headings]  # ["rest", "http-verbs"]

    similarity(note_a.body, note_b.body)  # 0.0 .. 1.0
"""

import hashlib
import re
from dataclasses import asdict, dataclass
from difflib import SequenceMatcher
from typing import Any, Optional


MAX_TITLE_LENGTH = 255

_ATX_RE = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
_SETEXT_RE = re.compile(r"^ {0,3}(=+|-+)[ \t]*$")
_FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_INLINE_MARKUP_RE = re.compile(r"[*`]")
_SLUG_STRIP_RE = re.compile(r"[^\w\- ]")
_MARKUP_RE = re.compile(r"[#*_`>\[\]()|~=-]+")


@dataclass(frozen=True)
class Heading:
    """A single entry in a note's outline."""

    level: int
    title: str
    anchor: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _clean_title(raw: str) -> str:
    title = _LINK_RE.sub(r"\1", raw)
    title = _INLINE_MARKUP_RE.sub("", title)
    return " ".join(title.split())


def _slugify(title: str) -> str:
    slug = _SLUG_STRIP_RE.sub("", title.lower())
    slug = re.sub(r"\s+", "-", slug.strip())
    return slug or "section"


def extract_outline(text: str) -> list[Heading]:
    """
    Extract the heading outline of a markdown document.

    Args:
        text: Markdown source

    Returns:
        Headings in document order, with unique anchors
    """
    headings: list[tuple[int, str]] = []
    fence: Optional[str] = None
    paragraph_line: Optional[str] = None

    for line in text.splitlines():
        fence_match = _FENCE_RE.match(line)
        if fence is not None:
            # Closing fence: same character, at least as long
            if fence_match and fence_match.group(1)[0] == fence[0] and len(fence_match.group(1)) >= len(fence):
                fence = None
            continue
        if fence_match:
            fence = fence_match.group(1)
            paragraph_line = None
            continue

        if not line.strip():
            paragraph_line = None
            continue

        atx = _ATX_RE.match(line)
        if atx:
            headings.append((len(atx.group(1)), atx.group(2)))
            paragraph_line = None
            continue

        setext = _SETEXT_RE.match(line)
        if setext and paragraph_line is not None:
            level = 1 if setext.group(1).startswith("=") else 2
            headings.append((level, paragraph_line))
            paragraph_line = None
            continue

        paragraph_line = line.strip()

    outline: list[Heading] = []
    used: set[str] = set()
    for level, raw_title in headings:
        title = _clean_title(raw_title)
        if not title:
            continue
        base = _slugify(title)
        anchor = base
        suffix = 0
        while anchor in used:
            suffix += 1
            anchor = f"{base}-{suffix}"
        used.add(anchor)
        outline.append(Heading(level=level, title=title, anchor=anchor))

    return outline


def derive_title(text: str, fallback: str) -> str:
    """
    Pick a title for a note.

    Preference order: first level-1 heading, first heading of any level,
    first non-blank line, then ``fallback``.
    """
    outline = extract_outline(text)
    for heading in outline:
        if heading.level == 1:
            return heading.title[:MAX_TITLE_LENGTH]
    if outline:
        return outline[0].title[:MAX_TITLE_LENGTH]

    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            return stripped[:MAX_TITLE_LENGTH]

    return fallback[:MAX_TITLE_LENGTH]


def normalize_text(text: str) -> str:
    """Lower-case, drop markdown markup characters and collapse whitespace."""
    return " ".join(_MARKUP_RE.sub(" ", text.lower()).split())


def content_fingerprint(text: str) -> str:
    """SHA256 of the normalized text; equal for copies that differ only in markup or spacing."""
    return hashlib.sha256(normalize_text(text).encode("utf-8")).hexdigest()


def similarity(first: str, second: str) -> float:
    """
    Word-sequence similarity of two documents.

    Returns:
        Ratio between 0.0 (nothing in common) and 1.0 (same words in the same order)
    """
    first_words = normalize_text(first).split()
    second_words = normalize_text(second).split()
    if not first_words and not second_words:
        return 1.0
    if not first_words or not second_words:
        return 0.0
    return SequenceMatcher(None, first_words, second_words, autojunk=False).ratio()


def word_count(text: str) -> int:
    return len(text.split())
