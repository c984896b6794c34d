"""Utility helpers for conversion responses."""

from __future__ import annotations

from urllib.parse import quote

from fastapi import UploadFile
from fastapi.responses import Response

from server.config import settings
from server.conversion.constants import PDF_MEDIA_TYPE
from server.exceptions import BadRequest, PayloadTooLarge


def content_disposition(filename: str) -> str:
    """Attachment header safe for any file name.

    Non-ASCII names get an ASCII fallback plus an RFC 5987 ``filename*``.
    """
    fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_").replace('"', "_")
    if fallback == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def pdf_response(pdf: bytes, filename: str) -> Response:
    return Response(
        content=pdf,
        media_type=PDF_MEDIA_TYPE,
        headers={
            "Content-Disposition": content_disposition(filename),
            "Content-Length": str(len(pdf)),
        },
    )


async def read_upload_text(upload: UploadFile) -> str:
    if not upload.filename:
        raise BadRequest("Missing upload filename")
    data = await upload.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise PayloadTooLarge(f"File exceeds the {settings.max_upload_bytes} byte upload limit")
    if not data:
        raise BadRequest("Uploaded file is empty")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BadRequest("Uploaded file is not valid UTF-8 text") from exc
