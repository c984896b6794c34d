"""Pydantic models for conversion requests and responses."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConvertOptions(BaseModel):
    """Converter and page-layout options.

    Layout fields stay loosely typed here; the conversion core validates
    them and reports every invalid field at once.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    filename: Optional[str] = None
    title: Optional[str] = None
    json_display_mode: Optional[str] = Field(default=None, alias="jsonDisplayMode")
    page_format: Optional[str] = Field(default=None, alias="pageFormat")
    margin: Optional[Any] = None
    print_background: Optional[bool] = Field(default=None, alias="printBackground")
    prefer_css_page_size: Optional[bool] = Field(default=None, alias="preferCSSPageSize")
    header_template: Optional[str] = Field(default=None, alias="headerTemplate")
    footer_template: Optional[str] = Field(default=None, alias="footerTemplate")
    display_header_footer: Optional[bool] = Field(default=None, alias="displayHeaderFooter")

    def layout_overrides(self) -> Dict[str, Any]:
        return {
            "page_format": self.page_format,
            "margin": self.margin,
            "print_background": self.print_background,
            "prefer_css_page_size": self.prefer_css_page_size,
            "header_template": self.header_template,
            "footer_template": self.footer_template,
            "display_header_footer": self.display_header_footer,
        }


class ConvertRequest(BaseModel):
    content: Optional[str] = None
    type: Optional[str] = None
    options: ConvertOptions = Field(default_factory=ConvertOptions)


class BatchFile(BaseModel):
    content: Optional[str] = None
    type: Optional[str] = None
    filename: Optional[str] = None


class BatchRequest(BaseModel):
    files: List[BatchFile] = Field(default_factory=list)
    options: ConvertOptions = Field(default_factory=ConvertOptions)


class BatchFileResult(BaseModel):
    index: int
    filename: str
    success: bool
    size: Optional[int] = None
    pdf: Optional[str] = None
    error: Optional[str] = None


class BatchResponse(BaseModel):
    success: bool = True
    total_files: int
    success_count: int
    results: List[BatchFileResult]


class FormatsResponse(BaseModel):
    supported_types: List[str]
    json_display_modes: List[str]
    pdf_formats: List[str]
    default_options: Dict[str, Any]
