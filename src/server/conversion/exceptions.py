"""Translate conversion-core failures into API errors."""

from pdfgen.exceptions import (
    ConversionFailedError,
    ParseError,
    PdfGenError,
    UnsupportedTypeError,
    ValidationError,
)

from server.exceptions import AppError

# Failures caused by the request itself rather than by the server.
CLIENT_ERRORS = (UnsupportedTypeError, ParseError)


class InvalidOptions(AppError):
    def __init__(self, errors: list[str]) -> None:
        super().__init__(
            message="Invalid PDF options",
            status_code=400,
            code="invalid_options",
            details=list(errors),
        )


class ConvertFailed(AppError):
    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message=message, status_code=status_code, code="convert_failed")


def to_app_error(exc: PdfGenError) -> AppError:
    if isinstance(exc, ValidationError):
        return InvalidOptions(exc.errors)
    cause = exc.original_error if isinstance(exc, ConversionFailedError) else exc
    if isinstance(cause, CLIENT_ERRORS):
        return ConvertFailed(exc.message, status_code=400)
    return ConvertFailed(exc.message)
