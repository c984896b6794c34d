"""Shared fixtures: an in-memory renderer so no browser is needed."""

import pytest

from pdfgen.engine import PdfEngine
from pdfgen.exceptions import RenderError

FAKE_PDF = b"%PDF-1.4\n% fake document\n%%EOF"


class FakeRenderer:
    """Records every render call and returns a fixed PDF payload."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []
        self.closed = False

    async def render(self, html, layout):
        self.calls.append((html, layout))
        if self.fail:
            raise RenderError("PDF generation failed: browser crashed")
        return FAKE_PDF

    async def close(self):
        self.closed = True


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def engine(renderer):
    return PdfEngine(renderer=renderer)
