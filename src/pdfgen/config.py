"""Engine settings (environment / .env) and optional ``config.json`` loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic_settings import BaseSettings, SettingsConfigDict

from pdfgen.models import Margins, PageLayoutOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.json"


class Settings(BaseSettings):
    page_format: str = "A4"
    margin_top: str = "1cm"
    margin_right: str = "1cm"
    margin_bottom: str = "1cm"
    margin_left: str = "1cm"
    print_background: bool = True
    prefer_css_page_size: bool = True

    template_dir: Optional[str] = None
    output_dir: str = "output"

    browser_headless: bool = True
    browser_args: List[str] = ["--no-sandbox", "--disable-setuid-sandbox"]
    browser_executable: Optional[str] = None
    render_timeout_seconds: float = 60.0
    shutdown_grace_seconds: float = 10.0

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="PDFGEN_", env_file=".env", extra="ignore")

    def default_layout(self) -> PageLayoutOptions:
        return PageLayoutOptions.from_mapping(
            {
                "format": self.page_format,
                "print_background": self.print_background,
                "prefer_css_page_size": self.prefer_css_page_size,
            },
            base=PageLayoutOptions(
                margins=Margins(
                    top=self.margin_top,
                    right=self.margin_right,
                    bottom=self.margin_bottom,
                    left=self.margin_left,
                )
            ),
        )


settings = Settings()


def load_config_file(path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """Read a ``{"pdf": {...}, "server": {...}}`` config file.

    A missing file is not an error: the caller gets empty sections and
    falls back to :class:`Settings`.
    """
    config_path = Path(path) if path else Path.cwd() / DEFAULT_CONFIG_FILE
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.debug("No config file at %s, using defaults", config_path)
        return {"pdf": {}, "server": {}}

    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a JSON object")
    return {"pdf": dict(data.get("pdf") or {}), "server": dict(data.get("server") or {})}


def resolve_layout(
    overrides: Optional[Dict[str, Any]] = None,
    config_path: Union[str, Path, None] = None,
    base_settings: Optional[Settings] = None,
) -> PageLayoutOptions:
    """Settings defaults, then ``config.json`` ``pdf`` section, then ``overrides``."""
    base = (base_settings or settings).default_layout()
    layout = PageLayoutOptions.from_mapping(load_config_file(config_path)["pdf"], base=base)
    return PageLayoutOptions.from_mapping(overrides, base=layout)
