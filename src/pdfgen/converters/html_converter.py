"""HTML passthrough with print-oriented styling.

Markup is trusted: nothing is sanitized or validated before it reaches the
renderer.
"""

from __future__ import annotations

import re
from typing import Optional

from pdfgen.converters.base import Converter
from pdfgen.models import ContentType, ConversionOptions
from pdfgen.styles import HTML_CSS, PRINT_CSS

_FULL_DOCUMENT = re.compile(r"<!doctype|<html", re.IGNORECASE)
_HEAD_CLOSE = re.compile(r"</head\s*>", re.IGNORECASE)
_HTML_OPEN = re.compile(r"<html\b[^>]*>", re.IGNORECASE)
_BODY_OPEN = re.compile(r"<body\b", re.IGNORECASE)
_DOCTYPE = re.compile(r"\s*<!doctype[^>]*>", re.IGNORECASE)

DEFAULT_DOCUMENT_TITLE = "PDF Document"


def is_full_document(markup: str) -> bool:
    return bool(_FULL_DOCUMENT.search(markup))


def inject_print_styles(document: str) -> str:
    """Insert the print stylesheet into ``document``'s head, creating one if needed."""
    style_tag = f"<style>\n{PRINT_CSS}\n</style>"

    match = _HEAD_CLOSE.search(document)
    if match:
        return document[: match.start()] + style_tag + document[match.start():]

    head = f"<head><title>{DEFAULT_DOCUMENT_TITLE}</title>{style_tag}</head>"
    match = _HTML_OPEN.search(document)
    if match:
        return document[: match.end()] + head + document[match.end():]

    # Doctype only: keep it at the top and wrap the rest.
    body = document
    doctype = _DOCTYPE.match(body)
    if doctype:
        body = body[doctype.end():]
    if not _BODY_OPEN.search(body):
        body = f"<body>{body}</body>"
    return f"<!DOCTYPE html><html>{head}{body}</html>"


class HtmlConverter(Converter):
    content_type = ContentType.HTML
    stylesheet = HTML_CSS

    def convert(self, content: str, options: Optional[ConversionOptions] = None) -> str:
        options = options or ConversionOptions()
        if is_full_document(content):
            return inject_print_styles(content)
        return self.wrap(content, options.title)
