"""Conversion constants."""

from pdfgen.models import PAGE_FORMATS, ContentType, JsonDisplayMode

SUPPORTED_TYPES = [content_type.value for content_type in ContentType]
JSON_DISPLAY_MODES = [mode.value for mode in JsonDisplayMode]
PAGE_FORMAT_CHOICES = list(PAGE_FORMATS)

PDF_MEDIA_TYPE = "application/pdf"
UPLOAD_ACCEPT = ".txt,.html,.htm,.json,.md,.markdown"
