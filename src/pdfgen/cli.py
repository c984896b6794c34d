"""pdfgen - CLI Entry Point."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Dict, Optional

import click

from pdfgen.config import resolve_layout, settings
from pdfgen.detector import content_type_for_path
from pdfgen.engine import PdfEngine
from pdfgen.exceptions import PdfGenError, ValidationError
from pdfgen.logging_utils import configure_logging
from pdfgen.models import MARGIN_KEYS, PAGE_FORMATS, ContentType, ConversionOptions, JsonDisplayMode
from pdfgen.samples import create_example_files
from pdfgen.template import TemplateBinder
from pdfgen.utils import format_file_size, write_bytes

TYPE_CHOICES = ["auto"] + [content_type.value for content_type in ContentType]
JSON_MODE_CHOICES = [mode.value for mode in JsonDisplayMode]


def _parse_margin(value: Optional[str]) -> Optional[object]:
    """``1cm`` applies to every side; ``top=2cm,left=1in`` sets individual sides."""
    if not value:
        return None
    if "=" not in value:
        return value
    margins: Dict[str, str] = {}
    for part in value.split(","):
        key, _, length = part.partition("=")
        margins[key.strip()] = length.strip()
    return margins


def _build_options(
    ctx: click.Context,
    title: Optional[str] = None,
    json_mode: Optional[str] = None,
    page_format: Optional[str] = None,
    margin: Optional[str] = None,
    background: Optional[bool] = None,
    header_template: Optional[Path] = None,
    footer_template: Optional[Path] = None,
) -> ConversionOptions:
    overrides = {
        "format": page_format,
        "margin": _parse_margin(margin),
        "print_background": background,
        "header_template": header_template.read_text(encoding="utf-8") if header_template else None,
        "footer_template": footer_template.read_text(encoding="utf-8") if footer_template else None,
    }
    try:
        layout = resolve_layout(overrides, config_path=ctx.obj.get("config"))
    except ValidationError as exc:
        for error in exc.errors:
            click.echo(f"Error: {error}", err=True)
        sys.exit(1)
    except ValueError as exc:
        click.echo(f"Error reading config: {exc}", err=True)
        sys.exit(1)
    return ConversionOptions(title=title, json_display_mode=json_mode, page_layout=layout)


def _engine() -> PdfEngine:
    return PdfEngine(binder=TemplateBinder(settings.template_dir))


async def _run(engine: PdfEngine, coro):
    try:
        return await coro
    finally:
        await engine.close()


def layout_options(func):
    """Page layout flags shared by ``convert`` and ``text``."""
    decorators = [
        click.option("--page-format", type=click.Choice(PAGE_FORMATS, case_sensitive=False),
                     help="Paper size (default: A4)"),
        click.option("--margin", help=f"One length for every side (1cm) or per side ({','.join(MARGIN_KEYS)}), "
                                      "e.g. top=2cm,left=1in"),
        click.option("--background/--no-background", default=None, help="Print background colors and images"),
        click.option("--header-template", type=click.Path(exists=True, dir_okay=False, path_type=Path),
                     help="HTML snippet file used as the page header"),
        click.option("--footer-template", type=click.Path(exists=True, dir_okay=False, path_type=Path),
                     help="HTML snippet file used as the page footer"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="JSON config file with a 'pdf' section (default: ./config.json)")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Optional[Path]):
    """Convert text, HTML, JSON and Markdown to PDF."""
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config_path
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", "output_path", type=click.Path(path_type=Path),
              help="Output PDF path (default: output/<name>.pdf)")
@click.option("--type", "content_type", type=click.Choice(TYPE_CHOICES),
              help="Content type (default: from the file extension)")
@click.option("--json-mode", type=click.Choice(JSON_MODE_CHOICES), default="structured",
              show_default=True, help="How JSON input is displayed")
@click.option("--title", help="Document title")
@click.option("--html-only", is_flag=True, help="Write the intermediate HTML instead of a PDF")
@layout_options
@click.pass_context
def convert(ctx, input_path: Path, output_path: Optional[Path], content_type: Optional[str],
            json_mode: str, title: Optional[str], html_only: bool, page_format: Optional[str],
            margin: Optional[str], background: Optional[bool], header_template: Optional[Path],
            footer_template: Optional[Path]):
    """Convert INPUT_PATH to PDF."""
    options = _build_options(ctx, title, json_mode, page_format, margin, background,
                             header_template, footer_template)
    content_type = content_type or content_type_for_path(input_path).value
    suffix = ".html" if html_only else ".pdf"
    output_path = output_path or Path(settings.output_dir) / f"{input_path.stem}{suffix}"

    if ctx.obj["verbose"]:
        click.echo(f"Converting: {input_path} ({content_type})")

    engine = _engine()
    try:
        if html_only:
            html = engine.render_html(input_path.read_text(encoding="utf-8"), content_type, options)
            write_bytes(output_path, html.encode("utf-8"))
        else:
            asyncio.run(_run(engine, engine.convert_file(input_path, output_path, content_type, options)))
    except (PdfGenError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Converted {input_path.name} → {output_path}")


@cli.command()
@click.argument("content")
@click.option("-o", "--output", "output_path", type=click.Path(path_type=Path),
              help="Output PDF path (default: output/text-output.pdf)")
@click.option("--title", help="Document title")
@layout_options
@click.pass_context
def text(ctx, content: str, output_path: Optional[Path], title: Optional[str],
         page_format: Optional[str], margin: Optional[str], background: Optional[bool],
         header_template: Optional[Path], footer_template: Optional[Path]):
    """Convert CONTENT given on the command line as plain text."""
    options = _build_options(ctx, title, None, page_format, margin, background,
                             header_template, footer_template)
    output_path = output_path or Path(settings.output_dir) / "text-output.pdf"

    engine = _engine()
    try:
        pdf = asyncio.run(_run(engine, engine.convert(content, ContentType.TEXT, options)))
        write_bytes(output_path, pdf)
    except (PdfGenError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Text converted to PDF: {output_path} ({format_file_size(len(pdf))})")


@cli.command()
@click.argument("batch_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json-mode", type=click.Choice(JSON_MODE_CHOICES), default="structured", show_default=True)
@click.pass_context
def batch(ctx, batch_file: Path, json_mode: str):
    """Convert every entry of BATCH_FILE ({"files": [{"input", "output", "type"}]})."""
    try:
        files = json.loads(batch_file.read_text(encoding="utf-8"))["files"]
        if not isinstance(files, list):
            raise TypeError("'files' must be a list")
    except (ValueError, KeyError, TypeError) as e:
        click.echo(f"Error reading batch file: {e}", err=True)
        sys.exit(1)

    options = _build_options(ctx, json_mode=json_mode)
    engine = _engine()
    results = asyncio.run(_run(engine, engine.batch_convert(files, options)))

    click.echo("Batch conversion results:")
    for result in results:
        if result.success:
            click.echo(f"  ✓ {result.file}")
        else:
            click.echo(f"  ✗ {result.file}: {result.error}")

    if not all(result.success for result in results):
        sys.exit(1)


@cli.command()
@click.option("--host", default=None, help="Bind address (default: server settings)")
@click.option("--port", type=int, default=None, help="Port (default: server settings)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Start the HTTP API server."""
    import uvicorn

    from server.config import settings as server_settings

    uvicorn.run(
        "server.main:app",
        host=host or server_settings.host,
        port=port or server_settings.port,
        reload=reload,
        log_level=server_settings.log_level.lower(),
    )


@cli.command()
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path), default=Path("examples"))
def examples(directory: Path):
    """Write example input files into DIRECTORY."""
    written = create_example_files(directory)
    click.echo(f"✓ {len(written)} example file(s) written to {directory}")


if __name__ == "__main__":
    cli()
