"""Conversion service orchestration."""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Optional

from pdfgen.config import resolve_layout
from pdfgen.detector import content_type_from_extension, detect_content_type
from pdfgen.engine import PdfEngine
from pdfgen.exceptions import PdfGenError, ValidationError
from pdfgen.models import ConversionOptions
from pdfgen.utils import format_file_size, sanitize_filename

from server.config import settings
from server.conversion.exceptions import InvalidOptions, to_app_error
from server.conversion.schemas import BatchFileResult, BatchRequest, BatchResponse, ConvertOptions

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    pdf: bytes
    filename: str
    content_type: str


def build_options(options: ConvertOptions) -> ConversionOptions:
    try:
        layout = resolve_layout(options.layout_overrides())
    except ValidationError as exc:
        raise InvalidOptions(exc.errors) from exc
    return ConversionOptions(
        title=options.title,
        json_display_mode=options.json_display_mode,
        page_layout=layout,
    )


def pdf_filename(name: Optional[str], fallback: Optional[str] = None) -> str:
    filename = sanitize_filename(name or fallback or settings.default_filename)
    if not filename.lower().endswith(".pdf"):
        filename = f"{filename}.pdf"
    return filename


def resolve_upload_type(declared: Optional[str], filename: Optional[str], content: str) -> str:
    """Form field first, then the file extension, then content sniffing."""
    if declared:
        return declared
    by_extension = content_type_from_extension(filename or "")
    if by_extension is not None:
        return by_extension.value
    return detect_content_type(content).value


async def convert_content(
    engine: PdfEngine,
    content: str,
    content_type: Optional[str],
    options: ConvertOptions,
    filename: Optional[str] = None,
) -> ConversionResult:
    conversion_options = build_options(options)
    resolved_type = content_type or detect_content_type(content).value
    logger.info(
        "Converting %s content to PDF (json mode: %s)",
        resolved_type,
        conversion_options.json_display_mode.value,
    )
    try:
        pdf = await engine.convert(content, resolved_type, conversion_options)
    except PdfGenError as exc:
        logger.error("Conversion error: %s", exc)
        raise to_app_error(exc) from exc

    result = ConversionResult(
        pdf=pdf,
        filename=pdf_filename(options.filename, filename),
        content_type=resolved_type,
    )
    logger.info("PDF generated successfully: %s (%s)", result.filename, format_file_size(len(pdf)))
    return result


def preview_content(engine: PdfEngine, content: str, content_type: Optional[str], options: ConvertOptions) -> str:
    conversion_options = build_options(options)
    try:
        return engine.render_html(content, content_type or "auto", conversion_options)
    except PdfGenError as exc:
        raise to_app_error(exc) from exc


async def convert_batch(engine: PdfEngine, request: BatchRequest) -> BatchResponse:
    """Convert each entry in order; one failure never aborts the rest."""
    conversion_options = build_options(request.options)
    logger.info("Processing batch of %d files", len(request.files))

    results = []
    for index, item in enumerate(request.files):
        filename = pdf_filename(item.filename, f"document-{index + 1}.pdf")
        if not item.content:
            results.append(BatchFileResult(index=index, filename=filename, success=False,
                                           error="Content is required"))
            continue
        try:
            pdf = await engine.convert(item.content, item.type or "auto", conversion_options)
        except PdfGenError as exc:
            logger.error("Batch item %d failed: %s", index, exc)
            results.append(BatchFileResult(index=index, filename=filename, success=False, error=str(exc)))
            continue
        results.append(
            BatchFileResult(
                index=index,
                filename=filename,
                success=True,
                size=len(pdf),
                pdf=base64.b64encode(pdf).decode("ascii"),
            )
        )

    success_count = sum(1 for result in results if result.success)
    logger.info("Batch processing complete: %d/%d successful", success_count, len(results))
    return BatchResponse(total_files=len(results), success_count=success_count, results=results)
