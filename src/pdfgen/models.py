"""Request-scoped data structures shared by the detector, converters and renderer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pdfgen.exceptions import ValidationError


class ContentType(str, Enum):
    TEXT = "text"
    HTML = "html"
    JSON = "json"
    MARKDOWN = "markdown"


AUTO = "auto"


class JsonDisplayMode(str, Enum):
    STRUCTURED = "structured"
    TABLE = "table"
    RAW = "raw"

    @classmethod
    def parse(cls, value: Union[str, "JsonDisplayMode", None]) -> "JsonDisplayMode":
        """Return the matching mode, falling back to ``structured`` for anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.STRUCTURED


class PageFormat(str, Enum):
    A4 = "A4"
    A3 = "A3"
    A5 = "A5"
    LEGAL = "Legal"
    LETTER = "Letter"
    TABLOID = "Tabloid"


PAGE_FORMATS = [fmt.value for fmt in PageFormat]
MARGIN_KEYS = ("top", "right", "bottom", "left")
DEFAULT_MARGIN = "1cm"

# Loose option names accepted from config files, JSON bodies and the CLI.
_LAYOUT_ALIASES = {
    "format": "page_format",
    "pageFormat": "page_format",
    "page_format": "page_format",
    "margin": "margins",
    "margins": "margins",
    "printBackground": "print_background",
    "print_background": "print_background",
    "preferCSSPageSize": "prefer_css_page_size",
    "preferCssPageSize": "prefer_css_page_size",
    "prefer_css_page_size": "prefer_css_page_size",
    "headerTemplate": "header_template",
    "header_template": "header_template",
    "footerTemplate": "footer_template",
    "footer_template": "footer_template",
    "displayHeaderFooter": "display_header_footer",
    "display_header_footer": "display_header_footer",
}


@dataclass
class Margins:
    top: str = DEFAULT_MARGIN
    right: str = DEFAULT_MARGIN
    bottom: str = DEFAULT_MARGIN
    left: str = DEFAULT_MARGIN

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class PageLayoutOptions:
    """Page setup handed to the renderer alongside the HTML document."""

    page_format: Union[PageFormat, str] = PageFormat.A4
    margins: Margins = field(default_factory=Margins)
    print_background: bool = True
    prefer_css_page_size: bool = True
    header_template: Optional[str] = None
    footer_template: Optional[str] = None
    display_header_footer: Optional[bool] = None

    def validate(self) -> List[str]:
        errors: List[str] = []
        fmt = self.page_format.value if isinstance(self.page_format, PageFormat) else self.page_format
        if fmt not in PAGE_FORMATS:
            errors.append(f"Invalid format: {fmt}. Valid formats: {', '.join(PAGE_FORMATS)}")
        for key in MARGIN_KEYS:
            value = getattr(self.margins, key)
            if not isinstance(value, str) or not value.strip():
                errors.append(f"Invalid margin value for {key}: {value!r}")
        return errors

    @property
    def shows_header_footer(self) -> bool:
        if self.display_header_footer is not None:
            return self.display_header_footer
        return bool(self.header_template or self.footer_template)

    def to_pdf_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for Playwright's ``page.pdf``."""
        fmt = self.page_format.value if isinstance(self.page_format, PageFormat) else str(self.page_format)
        kwargs: Dict[str, Any] = {
            "format": fmt,
            "margin": self.margins.to_dict(),
            "print_background": self.print_background,
            "prefer_css_page_size": self.prefer_css_page_size,
            "display_header_footer": self.shows_header_footer,
        }
        if kwargs["display_header_footer"]:
            # Chromium prints its own default header when the template is empty.
            kwargs["header_template"] = self.header_template or "<span></span>"
            kwargs["footer_template"] = self.footer_template or "<span></span>"
        return kwargs

    @classmethod
    def from_mapping(
        cls,
        data: Optional[Mapping[str, Any]],
        base: Optional["PageLayoutOptions"] = None,
    ) -> "PageLayoutOptions":
        """Build layout options from a loose mapping, on top of ``base``.

        Unknown top-level keys are ignored (they usually belong to the
        converter, e.g. ``title``). Invalid formats and margin keys raise a
        :class:`ValidationError` listing every problem at once.
        """
        base = base or cls()
        values: Dict[str, Any] = {f.name: getattr(base, f.name) for f in fields(cls)}
        values["margins"] = Margins(**base.margins.to_dict())
        errors: List[str] = []

        for raw_key, value in (data or {}).items():
            key = _LAYOUT_ALIASES.get(raw_key)
            if key is None or value is None:
                continue
            if key == "margins":
                errors.extend(_merge_margins(values["margins"], value))
            elif key == "page_format":
                values[key] = _coerce_page_format(value)
            elif key in {"print_background", "prefer_css_page_size", "display_header_footer"}:
                values[key] = _coerce_bool(value)
            else:
                values[key] = str(value)

        layout = cls(**values)
        errors = layout.validate() + errors
        if errors:
            raise ValidationError(errors)
        return layout


def _coerce_page_format(value: Any) -> Union[PageFormat, str]:
    text = str(value).strip()
    for fmt in PageFormat:
        if fmt.value.lower() == text.lower():
            return fmt
    return text


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return bool(value)


def _merge_margins(margins: Margins, value: Any) -> List[str]:
    if isinstance(value, str):
        for key in MARGIN_KEYS:
            setattr(margins, key, value)
        return []
    if not isinstance(value, Mapping):
        return [f"Invalid margin: {value!r}. Expected an object or a length string"]
    errors = []
    for key, length in value.items():
        if key not in MARGIN_KEYS:
            errors.append(f"Invalid margin key: {key}. Valid keys: {', '.join(MARGIN_KEYS)}")
            continue
        setattr(margins, key, str(length) if isinstance(length, (int, float)) else length)
    return errors


@dataclass
class ConversionOptions:
    title: Optional[str] = None
    json_display_mode: JsonDisplayMode = JsonDisplayMode.STRUCTURED
    page_layout: PageLayoutOptions = field(default_factory=PageLayoutOptions)

    def __post_init__(self) -> None:
        self.json_display_mode = JsonDisplayMode.parse(self.json_display_mode)


@dataclass
class ConversionRequest:
    content: str
    declared_type: Optional[str] = None
    options: ConversionOptions = field(default_factory=ConversionOptions)


@dataclass
class BatchItem:
    input: str
    output: str
    type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BatchItem":
        return cls(input=data["input"], output=data["output"], type=data.get("type"))


@dataclass
class BatchResult:
    success: bool
    file: str
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        if self.error is None:
            result.pop("error")
        return result
