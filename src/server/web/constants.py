"""Homepage template location and copy."""

from pathlib import Path

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
HOMEPAGE_TEMPLATE = "index.html"

PAGE_TITLE = "PDF Generation Engine"
PAGE_TAGLINE = "Convert text, HTML, JSON, and Markdown to PDF files."
