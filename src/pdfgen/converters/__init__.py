"""Format converters - one per ContentType."""

from typing import Dict, Optional

from pdfgen.models import ContentType
from pdfgen.template import TemplateBinder

from .base import Converter
from .html_converter import HtmlConverter
from .json_converter import JsonConverter
from .markdown_converter import MarkdownConverter
from .text_converter import TextConverter

CONVERTER_CLASSES = {
    ContentType.TEXT: TextConverter,
    ContentType.HTML: HtmlConverter,
    ContentType.JSON: JsonConverter,
    ContentType.MARKDOWN: MarkdownConverter,
}


def build_converters(binder: Optional[TemplateBinder] = None) -> Dict[ContentType, Converter]:
    binder = binder or TemplateBinder()
    return {content_type: cls(binder) for content_type, cls in CONVERTER_CLASSES.items()}


__all__ = [
    "Converter",
    "TextConverter",
    "HtmlConverter",
    "JsonConverter",
    "MarkdownConverter",
    "CONVERTER_CLASSES",
    "build_converters",
]
