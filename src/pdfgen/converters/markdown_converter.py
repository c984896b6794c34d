"""Markdown → HTML using markdown-it-py with PDF-oriented render rules.

Frontmatter support is deliberately naive: a leading ``---`` block of flat
``key: value`` lines. Nesting, lists and multi-line values are not parsed.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Optional, Tuple

from markdown_it import MarkdownIt

from pdfgen.converters.base import Converter
from pdfgen.exceptions import ConversionError
from pdfgen.models import ContentType, ConversionOptions
from pdfgen.styles import MARKDOWN_CSS
from pdfgen.utils import escape_html

logger = logging.getLogger(__name__)

_FRONTMATTER = re.compile(r"^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)(.*)$", re.DOTALL)
_QUOTES = re.compile(r"^[\"']|[\"']$")
_FIRST_HEADING = re.compile(r"^#+\s+(.+)$", re.MULTILINE)
_NON_WORD = re.compile(r"[^\w]+", re.ASCII)
_LANGUAGE = re.compile(r"^[A-Za-z0-9_-]+$")


def extract_frontmatter(content: str) -> Tuple[str, Dict[str, str]]:
    """Split ``content`` into ``(body, metadata)``.

    Without a well-formed frontmatter block the whole input is the body and
    the metadata is empty.
    """
    match = _FRONTMATTER.match(content)
    if not match:
        return content, {}

    metadata: Dict[str, str] = {}
    for line in match.group(1).splitlines():
        colon = line.find(":")
        if colon <= 0:
            continue
        key = line[:colon].strip()
        value = _QUOTES.sub("", line[colon + 1:].strip())
        metadata[key] = value
    return match.group(2), metadata


def extract_first_heading(body: str) -> Optional[str]:
    match = _FIRST_HEADING.search(body)
    return match.group(1).strip() if match else None


def slugify(text: str) -> str:
    """Lowercase ``text`` and collapse each run of non-word characters to ``-``."""
    return _NON_WORD.sub("-", text.lower())


def _heading_text(inline) -> str:
    if inline is None or not inline.children:
        return inline.content if inline is not None else ""
    return "".join(child.content for child in inline.children if child.type in ("text", "code_inline"))


def _render_heading_open(self, tokens, idx, options, env):
    token = tokens[idx]
    inline = tokens[idx + 1] if idx + 1 < len(tokens) and tokens[idx + 1].type == "inline" else None
    token.attrSet("id", slugify(_heading_text(inline)))
    token.attrJoin("class", "markdown-heading")
    return self.renderToken(tokens, idx, options, env)


def _with_class(class_name: str):
    def rule(self, tokens, idx, options, env):
        tokens[idx].attrJoin("class", class_name)
        return self.renderToken(tokens, idx, options, env)

    return rule


def _code_block_html(code: str, language: str = "") -> str:
    lang_class = f' class="language-{language}"' if _LANGUAGE.match(language) else ""
    return f'<pre class="code-block"><code{lang_class}>{escape_html(code)}</code></pre>\n'


def _render_fence(self, tokens, idx, options, env):
    token = tokens[idx]
    info = token.info.strip() if token.info else ""
    language = info.split()[0] if info else ""
    return _code_block_html(token.content, language)


def _render_code_block(self, tokens, idx, options, env):
    return _code_block_html(tokens[idx].content)


def _render_code_inline(self, tokens, idx, options, env):
    token = tokens[idx]
    return f"<code{self.renderAttrs(token)}>{escape_html(token.content)}</code>"


def _render_text(self, tokens, idx, options, env):
    # markdown-it leaves single quotes alone; escape the full set.
    return escape_html(tokens[idx].content)


def _escaped_attrs(token) -> str:
    return "".join(f' {escape_html(name)}="{escape_html(str(value))}"' for name, value in token.attrItems())


def _render_link_open(self, tokens, idx, options, env):
    return f"<a{_escaped_attrs(tokens[idx])}>"


def _render_image(self, tokens, idx, options, env):
    token = tokens[idx]
    token.attrSet("alt", self.renderInlineAsText(token.children or [], options, env))
    closing = " />" if options.xhtmlOut else ">"
    return f"<img{_escaped_attrs(token)}{closing}"


def build_markdown_parser() -> MarkdownIt:
    md = MarkdownIt("commonmark", {"breaks": True, "html": True, "typographer": True})
    md.enable(["table", "strikethrough", "replacements", "smartquotes"])

    md.add_render_rule("heading_open", _render_heading_open)
    md.add_render_rule("table_open", _with_class("markdown-table"))
    md.add_render_rule("blockquote_open", _with_class("markdown-blockquote"))
    md.add_render_rule("bullet_list_open", _with_class("markdown-list"))
    md.add_render_rule("ordered_list_open", _with_class("markdown-list"))
    md.add_render_rule("fence", _render_fence)
    md.add_render_rule("code_block", _render_code_block)
    md.add_render_rule("code_inline", _render_code_inline)
    md.add_render_rule("text", _render_text)
    md.add_render_rule("link_open", _render_link_open)
    md.add_render_rule("image", _render_image)
    return md


class MarkdownConverter(Converter):
    content_type = ContentType.MARKDOWN
    stylesheet = MARKDOWN_CSS

    def __init__(self, binder=None, parser: Optional[MarkdownIt] = None) -> None:
        super().__init__(binder)
        self.parser = parser or build_markdown_parser()

    def render_body(self, body: str) -> str:
        return self.parser.render(body)

    def convert(self, content: str, options: Optional[ConversionOptions] = None) -> str:
        options = options or ConversionOptions()
        body, metadata = extract_frontmatter(content)
        if metadata:
            logger.debug("Frontmatter keys: %s", ", ".join(metadata))

        try:
            html_body = self.render_body(body)
        except Exception as exc:
            raise ConversionError(f"Markdown conversion failed: {exc}", original_error=exc) from exc

        title = options.title or metadata.get("title") or extract_first_heading(body) or ""
        return self.wrap(html_body, title)
