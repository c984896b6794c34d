"""Conversion dependency helpers."""

from fastapi import Form, Request

from pdfgen.engine import PdfEngine

from server.conversion.schemas import ConvertOptions
from server.exceptions import BadRequest


async def parse_options(options_json: str | None = Form(default=None)) -> ConvertOptions:
    if not options_json:
        return ConvertOptions()
    try:
        return ConvertOptions.model_validate_json(options_json)
    except ValueError as exc:
        raise BadRequest(f"Invalid options JSON: {exc}") from exc


def get_engine(request: Request) -> PdfEngine:
    return request.app.state.engine
