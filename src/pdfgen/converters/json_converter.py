"""JSON → HTML in one of three display modes.

``structured``
    Recursive tree with typed markers for scalars and indented
    key/value or index/value lists for containers.
``table``
    Arrays of objects become one column per key (union of keys in
    first-seen order); other arrays and objects become two-column tables.
``raw``
    Pretty-printed JSON (2-space indent) inside an escaped code block.

Every JSON string value and object key is HTML-escaped before insertion.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pdfgen.converters.base import Converter
from pdfgen.exceptions import ParseError
from pdfgen.models import ContentType, ConversionOptions, JsonDisplayMode
from pdfgen.styles import JSON_CSS
from pdfgen.utils import escape_html

INDENT_PX = 20


def parse_json(content: Any) -> Any:
    """Parse ``content`` when it is text; anything else is taken as already parsed."""
    if not isinstance(content, (str, bytes, bytearray)):
        return content
    try:
        return json.loads(content)
    except ValueError as exc:
        raise ParseError(f"Invalid JSON: {exc}", original_error=exc) from exc


def pretty_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _is_object(value: Any) -> bool:
    return isinstance(value, dict)


def render_structured(value: Any, level: int = 0) -> str:
    if value is None:
        return '<span class="json-null">null</span>'
    if isinstance(value, str):
        return f'<span class="json-string">"{escape_html(value)}"</span>'
    # bool is a subclass of int, so check it first.
    if isinstance(value, bool):
        return f'<span class="json-boolean">{json.dumps(value)}</span>'
    if isinstance(value, (int, float)):
        return f'<span class="json-number">{json.dumps(value)}</span>'

    if isinstance(value, (list, tuple)):
        if not value:
            return '<span class="json-empty">[]</span>'
        items = "".join(
            '<div class="json-array-item">'
            f'<span class="json-index">[{index}]</span>'
            f"{render_structured(item, level + 1)}"
            "</div>"
            for index, item in enumerate(value)
        )
        return (
            f'<div class="json-array" style="margin-left: {level * INDENT_PX}px;">'
            '<div class="json-bracket">[</div>'
            f"{items}"
            '<div class="json-bracket">]</div>'
            "</div>"
        )

    if _is_object(value):
        if not value:
            return '<span class="json-empty">{}</span>'
        items = "".join(
            '<div class="json-object-item">'
            f'<span class="json-key">"{escape_html(str(key))}":</span>'
            f'<div class="json-value">{render_structured(item, level + 1)}</div>'
            "</div>"
            for key, item in value.items()
        )
        return (
            f'<div class="json-object" style="margin-left: {level * INDENT_PX}px;">'
            '<div class="json-bracket">{</div>'
            f"{items}"
            '<div class="json-bracket">}</div>'
            "</div>"
        )

    return escape_html(str(value))


def _format_cell(value: Any) -> str:
    if isinstance(value, (dict, list, tuple)):
        return f'<pre class="json-nested">{escape_html(pretty_json(value))}</pre>'
    return render_structured(value)


def _table(headers: List[str], rows: List[str]) -> str:
    header_row = "".join(f"<th>{header}</th>" for header in headers)
    return (
        '<table class="json-table">'
        f"<thead><tr>{header_row}</tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
    )


def _union_keys(records: List[Dict[str, Any]]) -> List[str]:
    keys: Dict[str, None] = {}
    for record in records:
        for key in record:
            keys.setdefault(key, None)
    return list(keys)


def _array_table(items: List[Any]) -> str:
    if not items:
        return '<p class="json-empty">Empty array</p>'

    if all(_is_object(item) for item in items):
        keys = _union_keys(items)
        rows = [
            "<tr>"
            + "".join(
                f"<td>{_format_cell(item[key]) if key in item else ''}</td>" for key in keys
            )
            + "</tr>"
            for item in items
        ]
        return _table([escape_html(str(key)) for key in keys], rows)

    rows = [
        f'<tr><td class="json-index">{index}</td><td>{_format_cell(item)}</td></tr>'
        for index, item in enumerate(items)
    ]
    return _table(["Index", "Value"], rows)


def _object_table(obj: Dict[str, Any]) -> str:
    if not obj:
        return '<p class="json-empty">Empty object</p>'
    rows = [
        f'<tr><td class="json-key">{escape_html(str(key))}</td><td>{render_structured(value)}</td></tr>'
        for key, value in obj.items()
    ]
    return _table(["Key", "Value"], rows)


def render_table(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return _array_table(list(value))
    if _is_object(value):
        return _object_table(value)
    return f'<div class="json-simple-value">{render_structured(value)}</div>'


def render_raw(value: Any) -> str:
    return f'<pre class="json-raw"><code>{escape_html(pretty_json(value))}</code></pre>'


RENDERERS = {
    JsonDisplayMode.STRUCTURED: render_structured,
    JsonDisplayMode.TABLE: render_table,
    JsonDisplayMode.RAW: render_raw,
}


def resolve_title(data: Any, options: ConversionOptions) -> str:
    if options.title:
        return options.title
    if _is_object(data) and isinstance(data.get("title"), str):
        return data["title"]
    return ""


class JsonConverter(Converter):
    content_type = ContentType.JSON
    stylesheet = JSON_CSS

    def convert(self, content: Any, options: Optional[ConversionOptions] = None) -> str:
        options = options or ConversionOptions()
        data = parse_json(content)
        mode = JsonDisplayMode.parse(options.json_display_mode)
        fragment = RENDERERS[mode](data)
        return self.wrap(fragment, resolve_title(data, options))
