"""Utility functions shared by converters, the CLI and the server."""

import html
import logging
import math
import re
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` so text is safe inside HTML text nodes and attributes."""
    if not text:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return html.escape(text, quote=True)


def sanitize_filename(filename: str) -> str:
    """Replace characters that are invalid in file names with hyphens.

    Whitespace runs become a single hyphen and repeated hyphens collapse.
    """
    name = _INVALID_FILENAME_CHARS.sub("-", filename)
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"-+", "-", name)
    return name.strip()


def format_file_size(size: int) -> str:
    units = ["Bytes", "KB", "MB", "GB"]
    if size <= 0:
        return "0 Bytes"
    exponent = min(int(math.log(size, 1024)), len(units) - 1)
    value = round(size / (1024 ** exponent), 2)
    if value == int(value):
        value = int(value)
    return f"{value} {units[exponent]}"


def ensure_directory(path: Union[str, Path]) -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_bytes(path: Union[str, Path], data: bytes) -> Path:
    path = Path(path)
    ensure_directory(path.parent)
    path.write_bytes(data)
    logger.debug("Wrote %s to %s", format_file_size(len(data)), path)
    return path
