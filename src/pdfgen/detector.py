"""Content-type sniffing for input that arrives without a declared type."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Optional, Union

from pdfgen.exceptions import UnsupportedTypeError
from pdfgen.models import AUTO, ContentType

_HTML_TAG = re.compile(r"</?[a-z][\s\S]*>", re.IGNORECASE)

# Anchored patterns only look at the start of the document.
_MARKDOWN_PATTERNS = [
    re.compile(r"^#{1,6}\s+"),  # headings
    re.compile(r"^\*\s+"),  # unordered list
    re.compile(r"^\d+\.\s+"),  # ordered list
    re.compile(r"\*\*.*\*\*"),  # bold
    re.compile(r"\*.*\*"),  # italic
    re.compile(r"```"),  # fenced code
    re.compile(r"^>"),  # blockquote
]

# Only tried when "](" occurs; on bracket-heavy input without it the
# backtracking is quadratic.
_MARKDOWN_LINK = re.compile(r"\[.*\]\(.*\)")

EXTENSION_TYPES = {
    ".txt": ContentType.TEXT,
    ".html": ContentType.HTML,
    ".htm": ContentType.HTML,
    ".json": ContentType.JSON,
    ".md": ContentType.MARKDOWN,
    ".markdown": ContentType.MARKDOWN,
}


def _looks_like_json(trimmed: str) -> bool:
    bracketed = (trimmed.startswith("{") and trimmed.endswith("}")) or (
        trimmed.startswith("[") and trimmed.endswith("]")
    )
    if not bracketed:
        return False
    try:
        json.loads(trimmed)
    except (ValueError, RecursionError):
        # Very deep nesting exhausts the decoder; treat it as not JSON.
        return False
    return True


def _has_markdown_link(trimmed: str) -> bool:
    return "](" in trimmed and bool(_MARKDOWN_LINK.search(trimmed))


def detect_content_type(content: str) -> ContentType:
    """Guess the format of ``content``.

    Checks run in priority order: JSON, HTML, Markdown, then plain text.
    Never raises; anything unrecognised is text.
    """
    trimmed = (content or "").strip()

    if _looks_like_json(trimmed):
        return ContentType.JSON

    if "<" in trimmed and ">" in trimmed and _HTML_TAG.search(trimmed):
        return ContentType.HTML

    if any(pattern.search(trimmed) for pattern in _MARKDOWN_PATTERNS) or _has_markdown_link(trimmed):
        return ContentType.MARKDOWN

    return ContentType.TEXT


def content_type_from_extension(path: Union[str, Path]) -> Optional[ContentType]:
    return EXTENSION_TYPES.get(Path(path).suffix.lower())


def content_type_for_path(path: Union[str, Path]) -> ContentType:
    """Extension-based type; unknown extensions are treated as text."""
    return content_type_from_extension(path) or ContentType.TEXT


def resolve_content_type(declared: Union[str, ContentType, None], content: str) -> ContentType:
    """Explicit type wins; ``None``, empty or ``"auto"`` runs the detector."""
    if isinstance(declared, ContentType):
        return declared
    if declared is None or not str(declared).strip() or str(declared).strip().lower() == AUTO:
        return detect_content_type(content)
    try:
        return ContentType(str(declared).strip().lower())
    except ValueError:
        raise UnsupportedTypeError(declared) from None
