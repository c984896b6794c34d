"""Root logger setup shared by the CLI and the HTTP server."""

from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: Union[int, str] = "INFO") -> logging.Logger:
    resolved = level if isinstance(level, int) else getattr(logging, str(level).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    # Playwright's driver and asyncio are chatty at DEBUG.
    logging.getLogger("asyncio").setLevel(max(resolved, logging.INFO))
    return root
