"""Converter interface shared by all input formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from pdfgen.models import ContentType, ConversionOptions
from pdfgen.template import TemplateBinder


class Converter(ABC):
    """Turns raw content of one format into a complete HTML document."""

    content_type: ClassVar[ContentType]
    stylesheet: ClassVar[str] = ""

    def __init__(self, binder: Optional[TemplateBinder] = None) -> None:
        self.binder = binder or TemplateBinder()

    @abstractmethod
    def convert(self, content: Any, options: Optional[ConversionOptions] = None) -> str:
        """Return a complete HTML document for ``content``."""

    def wrap(self, fragment: str, title: Optional[str]) -> str:
        return self.binder.bind(fragment, title or "", self.stylesheet)
