"""Web UI service helpers."""

from __future__ import annotations

from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape

from server.config import settings
from server.conversion.constants import JSON_DISPLAY_MODES, PAGE_FORMAT_CHOICES, SUPPORTED_TYPES, UPLOAD_ACCEPT
from server.web.constants import HOMEPAGE_TEMPLATE, PAGE_TAGLINE, PAGE_TITLE, TEMPLATE_DIR

_ENV = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)


def render_homepage() -> HTMLResponse:
    html = _ENV.get_template(HOMEPAGE_TEMPLATE).render(
        page_title=PAGE_TITLE,
        page_tagline=PAGE_TAGLINE,
        api_prefix=settings.api_prefix,
        content_types=SUPPORTED_TYPES,
        json_modes=JSON_DISPLAY_MODES,
        page_formats=PAGE_FORMAT_CHOICES,
        upload_accept=UPLOAD_ACCEPT,
        max_upload_mb=max(1, settings.max_upload_bytes // (1024 * 1024)),
    )
    return HTMLResponse(content=html)
