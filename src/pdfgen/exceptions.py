"""Exceptions raised by the conversion core.

Hierarchy::

    PdfGenError
    ├── ParseError             malformed JSON handed to the JSON converter
    ├── UnsupportedTypeError   declared/resolved type is not a known converter
    ├── ValidationError        invalid page-layout options (list of messages)
    ├── RenderError            the browser failed to navigate or print
    ├── ConversionError        the Markdown engine blew up
    └── ConversionFailedError  wrapper surfaced by the orchestrator
"""

from __future__ import annotations

from typing import List, Optional


class PdfGenError(Exception):
    """Base class for every error raised by pdfgen."""

    def __init__(self, message: str, original_error: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ParseError(PdfGenError):
    pass


class UnsupportedTypeError(PdfGenError):
    def __init__(self, content_type: object) -> None:
        super().__init__(f"Unsupported content type: {content_type}")
        self.content_type = content_type


class ValidationError(PdfGenError):
    """Invalid page-layout options.

    ``errors`` holds one message per offending field so HTTP callers can
    report them individually.
    """

    def __init__(self, errors: List[str]) -> None:
        super().__init__("Invalid PDF options: " + "; ".join(errors))
        self.errors = list(errors)


class RenderError(PdfGenError):
    pass


class ConversionError(PdfGenError):
    pass


class ConversionFailedError(PdfGenError):
    """Catch-all wrapper; ``original_error`` keeps the failure that caused it."""
