"""Conversion API routes."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import HTMLResponse

from pdfgen.config import settings as engine_settings
from pdfgen.engine import PdfEngine

from server.conversion.constants import JSON_DISPLAY_MODES, PAGE_FORMAT_CHOICES, SUPPORTED_TYPES
from server.conversion.dependencies import get_engine, parse_options
from server.conversion.schemas import BatchRequest, BatchResponse, ConvertOptions, ConvertRequest, FormatsResponse
from server.conversion.service import convert_batch, convert_content, preview_content, resolve_upload_type
from server.conversion.utils import pdf_response, read_upload_text
from server.exceptions import BadRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversion"])


def _require_content(content: str | None) -> str:
    if not content:
        raise BadRequest("Content is required")
    return content


@router.post("/convert")
async def convert(payload: ConvertRequest, engine: PdfEngine = Depends(get_engine)):
    content = _require_content(payload.content)
    result = await convert_content(engine, content, payload.type, payload.options)
    return pdf_response(result.pdf, result.filename)


@router.post("/preview", response_class=HTMLResponse)
async def preview(payload: ConvertRequest, engine: PdfEngine = Depends(get_engine)):
    content = _require_content(payload.content)
    return HTMLResponse(content=preview_content(engine, content, payload.type, payload.options))


@router.post("/upload")
async def upload(
    file: UploadFile = File(...),
    declared_type: str | None = Form(default=None, alias="type"),
    options: ConvertOptions = Depends(parse_options),
    engine: PdfEngine = Depends(get_engine),
):
    content = await read_upload_text(file)
    content_type = resolve_upload_type(declared_type, file.filename, content)
    logger.info("Processing uploaded file: %s (%s)", file.filename, content_type)

    stem = Path(file.filename).stem or "converted"
    result = await convert_content(engine, content, content_type, options, filename=f"{stem}.pdf")
    return pdf_response(result.pdf, result.filename)


@router.get("/formats", response_model=FormatsResponse)
async def formats():
    layout = engine_settings.default_layout()
    return FormatsResponse(
        supported_types=SUPPORTED_TYPES,
        json_display_modes=JSON_DISPLAY_MODES,
        pdf_formats=PAGE_FORMAT_CHOICES,
        default_options={
            "format": layout.page_format.value,
            "margin": layout.margins.to_dict(),
            "print_background": layout.print_background,
            "prefer_css_page_size": layout.prefer_css_page_size,
        },
    )


@router.post("/batch", response_model=BatchResponse)
async def batch(payload: BatchRequest, engine: PdfEngine = Depends(get_engine)):
    if not payload.files:
        raise BadRequest("Files array is required")
    return await convert_batch(engine, payload)
