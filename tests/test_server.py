"""API tests for the FastAPI app with an in-memory renderer."""

import base64
import io
import json

import pytest
from fastapi.testclient import TestClient

from conftest import FAKE_PDF, FakeRenderer
from pdfgen.engine import PdfEngine
from server.main import create_app


@pytest.fixture
def client(renderer):
    with TestClient(create_app(engine=PdfEngine(renderer=renderer))) as test_client:
        yield test_client


class TestHealthAndFormats:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_formats(self, client):
        data = client.get("/api/formats").json()
        assert data["supported_types"] == ["text", "html", "json", "markdown"]
        assert data["json_display_modes"] == ["structured", "table", "raw"]
        assert "Letter" in data["pdf_formats"]
        assert data["default_options"]["format"] == "A4"
        assert data["default_options"]["margin"]["top"] == "1cm"

    def test_homepage(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "<title>PDF Generation Engine</title>" in resp.text
        assert "Convert text, HTML, JSON, and Markdown to PDF files." in resp.text
        assert "/api/upload" in resp.text


class TestConvert:

    def test_returns_pdf_attachment(self, client, renderer):
        resp = client.post(
            "/api/convert",
            json={"content": "Hello World!", "type": "text", "options": {"filename": "report", "title": "Report"}},
        )
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/pdf"
        assert resp.headers["content-disposition"] == 'attachment; filename="report.pdf"'
        assert resp.content == FAKE_PDF
        html, _ = renderer.calls[0]
        assert "<title>Report</title>" in html

    def test_non_ascii_filename_option(self, client):
        resp = client.post("/api/convert", json={"content": "x", "options": {"filename": "Résumé"}})
        assert resp.status_code == 200
        disposition = resp.headers["content-disposition"]
        assert 'filename="R_sum_.pdf"' in disposition
        assert "filename*=UTF-8''R%C3%A9sum%C3%A9.pdf" in disposition

    def test_default_filename_and_detection(self, client, renderer):
        resp = client.post("/api/convert", json={"content": '{"a": [1, 2]}'})
        assert resp.status_code == 200
        assert 'filename="document.pdf"' in resp.headers["content-disposition"]
        html, _ = renderer.calls[0]
        assert 'class="json-object"' in html

    def test_layout_options_reach_renderer(self, client, renderer):
        options = {"pageFormat": "Letter", "margin": "2cm", "printBackground": False, "jsonDisplayMode": "table"}
        client.post("/api/convert", json={"content": "[1]", "type": "json", "options": options})
        html, layout = renderer.calls[0]
        assert layout.to_pdf_kwargs()["format"] == "Letter"
        assert layout.margins.left == "2cm"
        assert layout.print_background is False
        assert '<table class="json-table">' in html

    def test_missing_content(self, client, renderer):
        resp = client.post("/api/convert", json={"type": "text"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Content is required"
        assert renderer.calls == []

    def test_invalid_page_format_lists_details(self, client, renderer):
        resp = client.post(
            "/api/convert",
            json={"content": "x", "options": {"pageFormat": "B5", "margin": {"middle": "1cm"}}},
        )
        assert resp.status_code == 400
        data = resp.json()
        assert data["error"] == "invalid_options"
        assert len(data["details"]) == 2
        assert data["details"][0].startswith("Invalid format: B5")
        assert data["details"][1].startswith("Invalid margin key: middle")
        assert renderer.calls == []

    def test_unsupported_type(self, client):
        resp = client.post("/api/convert", json={"content": "x", "type": "xml"})
        assert resp.status_code == 400
        assert "Unsupported content type: xml" in resp.json()["message"]

    def test_malformed_json_content(self, client):
        resp = client.post("/api/convert", json={"content": "{oops", "type": "json"})
        assert resp.status_code == 400
        assert "Invalid JSON" in resp.json()["message"]

    def test_render_failure_is_server_error(self):
        app = create_app(engine=PdfEngine(renderer=FakeRenderer(fail=True)))
        with TestClient(app) as client:
            resp = client.post("/api/convert", json={"content": "x", "type": "text"})
        assert resp.status_code == 500
        assert resp.json()["error"] == "convert_failed"


class TestPreview:

    def test_returns_html(self, client, renderer):
        resp = client.post("/api/preview", json={"content": "# Hi", "type": "markdown"})
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert '<h1 id="hi" class="markdown-heading">Hi</h1>' in resp.text
        assert renderer.calls == []


class TestUpload:

    def test_markdown_file(self, client, renderer):
        files = {"file": ("notes.md", io.BytesIO(b"# Notes\n\n*item*"), "text/markdown")}
        resp = client.post("/api/upload", files=files)
        assert resp.status_code == 200
        assert resp.headers["content-disposition"] == 'attachment; filename="notes.pdf"'
        html, _ = renderer.calls[0]
        assert 'class="markdown-heading"' in html

    def test_non_ascii_filename(self, client):
        files = {"file": ("文档.md", io.BytesIO(b"# Doc"), "text/markdown")}
        resp = client.post("/api/upload", files=files)
        assert resp.status_code == 200
        assert resp.headers["content-disposition"] == (
            "attachment; filename=\"__.pdf\"; filename*=UTF-8''%E6%96%87%E6%A1%A3.pdf"
        )

    def test_type_field_overrides_extension(self, client, renderer):
        files = {"file": ("page.md", io.BytesIO(b"# not a heading"), "text/plain")}
        resp = client.post("/api/upload", files=files, data={"type": "text"})
        assert resp.status_code == 200
        html, _ = renderer.calls[0]
        assert "<p># not a heading</p>" in html

    def test_options_json(self, client, renderer):
        files = {"file": ("a.txt", io.BytesIO(b"hello"), "text/plain")}
        data = {"options_json": json.dumps({"title": "Uploaded", "pageFormat": "A5"})}
        client.post("/api/upload", files=files, data=data)
        html, layout = renderer.calls[0]
        assert "<title>Uploaded</title>" in html
        assert layout.to_pdf_kwargs()["format"] == "A5"

    def test_bad_options_json(self, client):
        files = {"file": ("a.txt", io.BytesIO(b"hello"), "text/plain")}
        resp = client.post("/api/upload", files=files, data={"options_json": "{nope"})
        assert resp.status_code == 400

    def test_empty_file(self, client):
        files = {"file": ("empty.txt", io.BytesIO(b""), "text/plain")}
        resp = client.post("/api/upload", files=files)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Uploaded file is empty"

    def test_binary_file(self, client):
        files = {"file": ("blob.txt", io.BytesIO(b"\xff\xfe\x00bad"), "application/octet-stream")}
        resp = client.post("/api/upload", files=files)
        assert resp.status_code == 400


class TestBatch:

    def test_partial_failure(self, client):
        payload = {
            "files": [
                {"content": "hello", "type": "text", "filename": "first"},
                {"content": ""},
                {"content": "x", "type": "xml"},
                {"content": "# Title"},
            ]
        }
        resp = client.post("/api/batch", json=payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["total_files"] == 4
        assert data["success_count"] == 2

        first, empty, unsupported, last = data["results"]
        assert first["filename"] == "first.pdf"
        assert base64.b64decode(first["pdf"]) == FAKE_PDF
        assert empty["error"] == "Content is required"
        assert unsupported["success"] is False
        assert "Unsupported content type" in unsupported["error"]
        assert last["filename"] == "document-4.pdf"

    def test_empty_files(self, client):
        resp = client.post("/api/batch", json={"files": []})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Files array is required"


def test_lifespan_closes_engine(renderer):
    with TestClient(create_app(engine=PdfEngine(renderer=renderer))):
        pass
    assert renderer.closed is True
