"""CLI tests driven through click's CliRunner."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from conftest import FAKE_PDF
from pdfgen.cli import cli


@pytest.fixture
def run(engine, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    def invoke(*args):
        with patch("pdfgen.cli._engine", return_value=engine):
            return runner.invoke(cli, list(args))

    return invoke


class TestConvertCommand:

    def test_converts_file(self, run, renderer, tmp_path):
        source = tmp_path / "doc.md"
        source.write_text("# Doc\n\ntext", encoding="utf-8")

        result = run("convert", str(source), "-o", str(tmp_path / "out" / "doc.pdf"))

        assert result.exit_code == 0, result.output
        assert "✓ Converted doc.md" in result.output
        assert (tmp_path / "out" / "doc.pdf").read_bytes() == FAKE_PDF
        assert renderer.closed is True

    def test_default_output_path(self, run, tmp_path):
        source = tmp_path / "data.json"
        source.write_text('{"k": 1}', encoding="utf-8")

        result = run("convert", str(source))

        assert result.exit_code == 0, result.output
        assert (tmp_path / "output" / "data.pdf").exists()

    def test_layout_flags(self, run, renderer, tmp_path):
        source = tmp_path / "a.txt"
        source.write_text("hi", encoding="utf-8")

        result = run("convert", str(source), "--page-format", "letter", "--margin", "top=2cm,left=1in",
                     "--no-background", "--title", "Flags")

        assert result.exit_code == 0, result.output
        html, layout = renderer.calls[0]
        assert "<title>Flags</title>" in html
        assert layout.to_pdf_kwargs()["format"] == "Letter"
        assert layout.margins.top == "2cm"
        assert layout.margins.left == "1in"
        assert layout.margins.right == "1cm"
        assert layout.print_background is False

    def test_html_only(self, run, renderer, tmp_path):
        source = tmp_path / "page.txt"
        source.write_text("plain words", encoding="utf-8")

        result = run("convert", str(source), "--html-only")

        assert result.exit_code == 0, result.output
        html = (tmp_path / "output" / "page.html").read_text(encoding="utf-8")
        assert "<p>plain words</p>" in html
        assert renderer.calls == []

    def test_bad_margin_key(self, run, tmp_path):
        source = tmp_path / "a.txt"
        source.write_text("hi", encoding="utf-8")

        result = run("convert", str(source), "--margin", "middle=1cm")

        assert result.exit_code == 1
        assert "Invalid margin key: middle" in result.output

    def test_invalid_format_in_config_file(self, run, tmp_path):
        (tmp_path / "config.json").write_text(json.dumps({"pdf": {"format": "B5"}}), encoding="utf-8")
        source = tmp_path / "a.txt"
        source.write_text("hi", encoding="utf-8")

        result = run("convert", str(source))

        assert result.exit_code == 1
        assert "Invalid format: B5" in result.output

    def test_conversion_failure_exits_nonzero(self, run, tmp_path):
        source = tmp_path / "bad.json"
        source.write_text("{broken", encoding="utf-8")

        result = run("convert", str(source))

        assert result.exit_code == 1
        assert "Error: PDF generation failed" in result.output


class TestTextCommand:

    def test_writes_pdf(self, run, renderer, tmp_path):
        result = run("text", "Hello from the command line", "-o", str(tmp_path / "t.pdf"))

        assert result.exit_code == 0, result.output
        assert "Text converted to PDF" in result.output
        assert (tmp_path / "t.pdf").read_bytes() == FAKE_PDF
        html, _ = renderer.calls[0]
        assert "<p>Hello from the command line</p>" in html


class TestBatchCommand:

    def test_reports_each_item(self, run, tmp_path):
        (tmp_path / "a.txt").write_text("a", encoding="utf-8")
        batch_file = tmp_path / "batch.json"
        batch_file.write_text(
            json.dumps(
                {
                    "files": [
                        {"input": "a.txt", "output": "out/a.pdf"},
                        {"input": "missing.txt", "output": "out/m.pdf"},
                    ]
                }
            ),
            encoding="utf-8",
        )

        result = run("batch", str(batch_file))

        assert result.exit_code == 1
        assert "✓ out/a.pdf" in result.output
        assert "✗ missing.txt" in result.output
        assert (tmp_path / "out" / "a.pdf").exists()

    def test_malformed_entries_are_reported(self, run, tmp_path):
        (tmp_path / "a.txt").write_text("a", encoding="utf-8")
        batch_file = tmp_path / "batch.json"
        batch_file.write_text(
            json.dumps({"files": ["bad-entry", {"input": None, "output": "out/n.pdf"},
                                  {"input": "a.txt", "output": "out/a.pdf"}]}),
            encoding="utf-8",
        )

        result = run("batch", str(batch_file))

        assert result.exit_code == 1
        assert "expected an object" in result.output
        assert "Invalid field 'input'" in result.output
        assert "✓ out/a.pdf" in result.output

    def test_files_must_be_a_list(self, run, tmp_path):
        batch_file = tmp_path / "batch.json"
        batch_file.write_text('{"files": 5}', encoding="utf-8")

        result = run("batch", str(batch_file))

        assert result.exit_code == 1
        assert "Error reading batch file" in result.output

    def test_unreadable_batch_file(self, run, tmp_path):
        batch_file = tmp_path / "batch.json"
        batch_file.write_text("[]", encoding="utf-8")

        result = run("batch", str(batch_file))

        assert result.exit_code == 1
        assert "Error reading batch file" in result.output


class TestExamplesCommand:

    def test_writes_examples_once(self, run, tmp_path):
        result = run("examples", "samples")
        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in (tmp_path / "samples").iterdir()) == [
            "example.html",
            "example.json",
            "example.md",
            "example.txt",
        ]

        (tmp_path / "samples" / "example.txt").write_text("edited", encoding="utf-8")
        result = run("examples", "samples")
        assert "0 example file(s)" in result.output
        assert (tmp_path / "samples" / "example.txt").read_text(encoding="utf-8") == "edited"
