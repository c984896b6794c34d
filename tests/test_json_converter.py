"""Tests for the JSON converter's three display modes."""

import html
import json
import re

import pytest

from pdfgen.converters import JsonConverter
from pdfgen.converters.json_converter import render_raw, render_structured, render_table, resolve_title
from pdfgen.exceptions import ParseError
from pdfgen.models import ConversionOptions, JsonDisplayMode


def _convert(data, mode="structured", title=None):
    options = ConversionOptions(title=title, json_display_mode=mode)
    return JsonConverter().convert(data, options)


class TestStructured:

    def test_scalars_get_typed_markers(self):
        assert render_structured(None) == '<span class="json-null">null</span>'
        assert render_structured(True) == '<span class="json-boolean">true</span>'
        assert render_structured(3) == '<span class="json-number">3</span>'
        assert render_structured(2.5) == '<span class="json-number">2.5</span>'
        assert render_structured("hi") == '<span class="json-string">"hi"</span>'

    def test_empty_containers_are_marked(self):
        assert render_structured([]) == '<span class="json-empty">[]</span>'
        assert render_structured({}) == '<span class="json-empty">{}</span>'

    def test_nesting_increases_indentation(self):
        rendered = render_structured({"outer": {"inner": [1]}})
        assert 'class="json-object" style="margin-left: 0px;"' in rendered
        assert 'class="json-object" style="margin-left: 20px;"' in rendered
        assert 'class="json-array" style="margin-left: 40px;"' in rendered
        assert '<span class="json-index">[0]</span>' in rendered

    def test_keys_and_values_escaped(self):
        rendered = render_structured({"<key>": "a & \"b\" 'c' <d>"})
        assert "<key>" not in rendered
        assert '"&lt;key&gt;":' in rendered
        assert "a &amp; &quot;b&quot; &#x27;c&#x27; &lt;d&gt;" in rendered


class TestTable:

    def test_array_of_objects_uses_key_union(self):
        rendered = render_table(json.loads('[{"name":"Alice","age":30},{"name":"Bob"}]'))
        headers = re.findall(r"<th>(.*?)</th>", rendered)
        assert headers == ["name", "age"]
        rows = re.findall(r"<tr>(.*?)</tr>", rendered)
        assert len(rows) == 3
        assert rows[2] == '<td><span class="json-string">"Bob"</span></td><td></td>'

    def test_present_null_differs_from_missing_key(self):
        rendered = render_table([{"a": None}, {}])
        assert '<td><span class="json-null">null</span></td>' in rendered
        assert "<td></td>" in rendered

    def test_nested_cell_values_are_pretty_json(self):
        rendered = render_table([{"tags": ["<x>", "y"]}])
        assert '<pre class="json-nested">[\n  &quot;&lt;x&gt;&quot;,\n  &quot;y&quot;\n]</pre>' in rendered

    def test_array_of_scalars_gets_index_column(self):
        rendered = render_table(["a", 1, {"k": "v"}])
        assert "<th>Index</th><th>Value</th>" in rendered
        assert '<td class="json-index">2</td>' in rendered
        assert "json-nested" in rendered

    def test_object_uses_key_value_rows_with_structured_values(self):
        rendered = render_table({"user": {"name": "Ann"}, "<k>": 1})
        assert "<th>Key</th><th>Value</th>" in rendered
        assert '<td class="json-key">user</td>' in rendered
        assert 'class="json-object"' in rendered
        assert '<td class="json-key">&lt;k&gt;</td>' in rendered

    def test_empty_and_scalar_roots(self):
        assert "Empty array" in render_table([])
        assert render_table(42) == '<div class="json-simple-value"><span class="json-number">42</span></div>'

    def test_header_keys_escaped(self):
        rendered = render_table([{"a<b": 1}])
        assert "<th>a&lt;b</th>" in rendered


class TestRaw:

    @pytest.mark.parametrize(
        "value",
        [
            {"title": "x", "nested": {"list": [1, 2.5, None, True]}},
            ["<script>alert('x')</script>", "a & b", {"q": "\"quoted\""}],
            "just a string",
            0,
            {"unicode": "café ✓"},
        ],
    )
    def test_unescaped_output_reparses(self, value):
        rendered = render_raw(value)
        code = re.search(r"<code>(.*)</code>", rendered, re.DOTALL).group(1)
        assert "<script>" not in code
        assert json.loads(html.unescape(code)) == value

    def test_two_space_indent(self):
        rendered = render_raw({"a": [1]})
        assert "{\n  &quot;a&quot;: [\n    1\n  ]\n}" in rendered


class TestJsonConverter:

    def test_invalid_json_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            JsonConverter().convert("{broken")
        assert exc_info.value.message.startswith("Invalid JSON:")

    def test_accepts_parsed_values(self):
        assert _convert({"k": "v"}) == _convert('{"k": "v"}')

    def test_title_resolution(self):
        assert resolve_title({"title": "From data"}, ConversionOptions(title="Explicit")) == "Explicit"
        assert resolve_title({"title": "From data"}, ConversionOptions()) == "From data"
        assert resolve_title([{"title": "row"}], ConversionOptions()) == ""
        assert resolve_title({"title": 5}, ConversionOptions()) == ""

    def test_title_is_escaped(self):
        rendered = _convert({"title": "Q&A <2024>"})
        assert "<title>Q&amp;A &lt;2024&gt;</title>" in rendered

    @pytest.mark.parametrize("mode", ["structured", "table", "raw", "bogus"])
    def test_modes_are_deterministic(self, mode):
        data = '[{"name": "Alice", "age": 30}, {"name": "Bob"}]'
        assert _convert(data, mode) == _convert(data, mode)

    def test_unknown_mode_falls_back_to_structured(self):
        data = {"a": 1}
        assert _convert(data, "bogus") == _convert(data, JsonDisplayMode.STRUCTURED)

    def test_input_not_mutated(self):
        data = {"b": [3, {"c": None}], "a": "x"}
        snapshot = json.dumps(data)
        for mode in ("structured", "table", "raw"):
            _convert(data, mode)
        assert json.dumps(data) == snapshot
