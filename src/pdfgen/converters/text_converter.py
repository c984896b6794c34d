"""Plain text → HTML paragraphs."""

from __future__ import annotations

import re
from typing import Optional

from pdfgen.converters.base import Converter
from pdfgen.models import ContentType, ConversionOptions
from pdfgen.styles import TEXT_CSS
from pdfgen.utils import escape_html

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def text_to_paragraphs(text: str) -> str:
    """Escape ``text`` and split it into ``<p>`` elements on blank lines.

    Single newlines inside a paragraph become ``<br>``.
    """
    escaped = escape_html(text.replace("\r\n", "\n"))
    paragraphs = [
        f"<p>{chunk.replace(chr(10), '<br>')}</p>"
        for chunk in _PARAGRAPH_BREAK.split(escaped)
        if chunk.strip()
    ]
    return "\n".join(paragraphs)


class TextConverter(Converter):
    content_type = ContentType.TEXT
    stylesheet = TEXT_CSS

    def convert(self, content: str, options: Optional[ConversionOptions] = None) -> str:
        options = options or ConversionOptions()
        return self.wrap(text_to_paragraphs(content), options.title)
