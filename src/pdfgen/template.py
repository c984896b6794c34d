"""Outer HTML shell that wraps converter fragments into a renderable document."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, Union

from pdfgen.utils import escape_html

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_TEMPLATE = "default.html"

_PLACEHOLDER = re.compile(r"\{\{(title|content|style)\}\}")

DEFAULT_SHELL = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{title}}</title>
    <style>
        {{style}}
    </style>
</head>
<body>
    <div class="content">
        <h1 class="document-title">{{title}}</h1>
        <div class="document-content">
            {{content}}
        </div>
    </div>
</body>
</html>"""


class TemplateBinder:
    """Substitutes ``{{title}}``, ``{{content}}`` and ``{{style}}`` into a shell.

    The shell is read from ``template_dir / template_name``; when it is
    missing or unreadable the embedded :data:`DEFAULT_SHELL` is used instead.
    """

    def __init__(
        self,
        template_dir: Optional[Union[str, Path]] = None,
        template_name: str = DEFAULT_TEMPLATE,
    ) -> None:
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR
        self.template_name = template_name

    @property
    def template_path(self) -> Path:
        return self.template_dir / self.template_name

    def load(self) -> str:
        try:
            return self.template_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Falling back to built-in template (%s): %s", self.template_path, exc)
            return DEFAULT_SHELL

    def bind(self, content: str, title: str = "", style: str = "") -> str:
        # Single pass so placeholder text inside content or style is left alone.
        values = {
            "title": escape_html(title or ""),
            "content": content,
            "style": style,
        }
        return _PLACEHOLDER.sub(lambda match: values[match.group(1)], self.load())
