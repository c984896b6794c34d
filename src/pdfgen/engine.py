"""Conversion orchestration: detect → convert to HTML → render to PDF."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pdfgen.converters import Converter, build_converters
from pdfgen.detector import content_type_for_path, resolve_content_type
from pdfgen.exceptions import ConversionFailedError, PdfGenError, UnsupportedTypeError, ValidationError
from pdfgen.models import AUTO, BatchItem, BatchResult, ContentType, ConversionOptions
from pdfgen.template import TemplateBinder
from pdfgen.utils import format_file_size, write_bytes

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _default_renderer():
    from pdfgen.config import settings
    from pdfgen.renderer import PdfRenderer

    return PdfRenderer(
        headless=settings.browser_headless,
        launch_args=settings.browser_args,
        executable_path=settings.browser_executable,
        timeout_seconds=settings.render_timeout_seconds,
        shutdown_grace_seconds=settings.shutdown_grace_seconds,
    )


class PdfEngine:
    """Entry point used by the CLI and the HTTP server.

    Args:
        renderer: Object with ``async render(html, layout) -> bytes`` and
            ``async close()``. Defaults to a lazily started Chromium renderer.
        converters: Mapping of content type to converter.
        binder: Template binder shared by the default converters.
    """

    def __init__(
        self,
        renderer: Optional[Any] = None,
        converters: Optional[Mapping[ContentType, Converter]] = None,
        binder: Optional[TemplateBinder] = None,
    ) -> None:
        self._renderer = renderer
        self.converters: Dict[ContentType, Converter] = dict(converters or build_converters(binder))

    @property
    def renderer(self):
        if self._renderer is None:
            self._renderer = _default_renderer()
        return self._renderer

    async def __aenter__(self) -> "PdfEngine":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._renderer is not None:
            await self._renderer.close()

    def render_html(
        self,
        content: Any,
        content_type: Union[str, ContentType, None] = "auto",
        options: Optional[ConversionOptions] = None,
    ) -> str:
        """Produce the HTML document that would be handed to the renderer."""
        options = options or ConversionOptions()
        if not isinstance(content, str) and content_type in (None, "", AUTO):
            # Already-parsed values can only be JSON.
            resolved = ContentType.JSON
        else:
            resolved = resolve_content_type(content_type, content)
        converter = self.converters.get(resolved)
        if converter is None:
            raise UnsupportedTypeError(resolved.value)
        logger.info("Converting %s content", resolved.value)
        return converter.convert(content, options)

    async def convert(
        self,
        content: Any,
        content_type: Union[str, ContentType, None] = "auto",
        options: Optional[ConversionOptions] = None,
    ) -> bytes:
        """Convert ``content`` to PDF bytes.

        Raises:
            ValidationError: page layout options are invalid (nothing else runs).
            ConversionFailedError: type resolution, conversion or rendering failed.
        """
        options = options or ConversionOptions()
        errors = options.page_layout.validate()
        if errors:
            raise ValidationError(errors)

        try:
            html = self.render_html(content, content_type, options)
            pdf = await self.renderer.render(html, options.page_layout)
        except PdfGenError as exc:
            raise ConversionFailedError(f"PDF generation failed: {exc.message}", original_error=exc) from exc
        except Exception as exc:
            raise ConversionFailedError(f"PDF generation failed: {exc}", original_error=exc) from exc

        logger.info("PDF generated (%s)", format_file_size(len(pdf)))
        return pdf

    async def convert_file(
        self,
        input_path: PathLike,
        output_path: PathLike,
        content_type: Union[str, ContentType, None] = None,
        options: Optional[ConversionOptions] = None,
    ) -> Path:
        """Convert a UTF-8 file and write the PDF, creating parent directories.

        Without ``content_type`` the type comes from the file extension
        (unknown extensions are text). Filesystem errors propagate as-is.
        """
        input_path = Path(input_path)
        content = input_path.read_text(encoding="utf-8")
        resolved_type = content_type or content_type_for_path(input_path)

        pdf = await self.convert(content, resolved_type, options)
        output = write_bytes(output_path, pdf)
        logger.info("PDF generated successfully: %s", output)
        return output

    async def batch_convert(
        self,
        items: Iterable[Union[BatchItem, Mapping[str, Any]]],
        options: Optional[ConversionOptions] = None,
    ) -> List[BatchResult]:
        """Convert files one after another; a failing item never stops the rest."""
        results: List[BatchResult] = []
        for raw in items:
            source = _batch_source(raw)
            try:
                item = _batch_item(raw)
            except ValueError as exc:
                logger.error("Invalid batch entry %r: %s", raw, exc)
                results.append(BatchResult(success=False, file=source, error=str(exc)))
                continue

            try:
                output = await self.convert_file(item.input, item.output, item.type, options)
            except (PdfGenError, OSError, UnicodeDecodeError) as exc:
                logger.error("Failed to convert %s: %s", source, exc)
                results.append(BatchResult(success=False, file=source, error=str(exc)))
            else:
                results.append(BatchResult(success=True, file=str(output)))

        succeeded = sum(1 for result in results if result.success)
        logger.info("Batch complete: %d/%d successful", succeeded, len(results))
        return results


def _batch_source(raw: Any) -> str:
    if isinstance(raw, BatchItem):
        return str(raw.input)
    if isinstance(raw, Mapping) and isinstance(raw.get("input"), str):
        return raw["input"]
    return ""


def _batch_item(raw: Any) -> BatchItem:
    """Validate one batch entry; malformed entries raise ``ValueError``."""
    if isinstance(raw, BatchItem):
        item = raw
    elif isinstance(raw, Mapping):
        missing = [key for key in ("input", "output") if key not in raw]
        if missing:
            raise ValueError(f"Missing field: {', '.join(missing)}")
        item = BatchItem.from_dict(raw)
    else:
        raise ValueError(f"Invalid batch entry: expected an object, got {type(raw).__name__}")

    for name in ("input", "output"):
        value = getattr(item, name)
        if not isinstance(value, (str, Path)) or not str(value).strip():
            raise ValueError(f"Invalid field '{name}': expected a non-empty path")
    if item.type is not None and not isinstance(item.type, str):
        raise ValueError("Invalid field 'type': expected a string")
    return item
