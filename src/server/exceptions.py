"""Shared API exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class AppError(Exception):
    message: str
    status_code: int = 400
    code: str = "app_error"
    details: list[str] = field(default_factory=list)
    headers: Optional[dict[str, str]] = None


class BadRequest(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, status_code=400, code="bad_request")


class PayloadTooLarge(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, status_code=413, code="payload_too_large")
