"""Chromium print-to-PDF adapter built on Playwright's async API.

One browser process is launched lazily and shared by every render call.
Each call gets its own browser context and page, which are always closed
when the call finishes.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Sequence

from playwright.async_api import Browser, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from pdfgen.exceptions import RenderError
from pdfgen.models import PageLayoutOptions

logger = logging.getLogger(__name__)

DEFAULT_LAUNCH_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")

_WAIT_FOR_FONTS = "() => document.fonts ? document.fonts.ready.then(() => true) : true"


class PdfRenderer:
    """Renders complete HTML documents to PDF bytes.

    Args:
        headless: Launch Chromium without a window.
        launch_args: Extra command-line switches for Chromium.
        executable_path: Use a system Chromium/Chrome instead of Playwright's.
        timeout_seconds: Upper bound for a single render (load + print).
        shutdown_grace_seconds: How long :meth:`close` waits for in-flight renders.
    """

    def __init__(
        self,
        headless: bool = True,
        launch_args: Sequence[str] = DEFAULT_LAUNCH_ARGS,
        executable_path: Optional[str] = None,
        timeout_seconds: float = 60.0,
        shutdown_grace_seconds: float = 10.0,
    ) -> None:
        self.headless = headless
        self.launch_args = list(launch_args)
        self.executable_path = executable_path
        self.timeout_seconds = timeout_seconds
        self.shutdown_grace_seconds = shutdown_grace_seconds

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._lock = asyncio.Lock()
        self._inflight = 0
        self._idle = asyncio.Event()
        self._idle.set()
        self._closing = False

    @property
    def is_running(self) -> bool:
        return self._browser is not None

    async def __aenter__(self) -> "PdfRenderer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_browser(self) -> Browser:
        async with self._lock:
            if self._closing:
                raise RenderError("PDF generation failed: renderer is shutting down")
            if self._browser is None:
                logger.info("Launching Chromium (headless=%s)", self.headless)
                try:
                    self._playwright = await async_playwright().start()
                    self._browser = await self._playwright.chromium.launch(
                        headless=self.headless,
                        args=self.launch_args,
                        executable_path=self.executable_path,
                    )
                except PlaywrightError as exc:
                    await self._stop_playwright()
                    raise RenderError(f"PDF generation failed: {exc}", original_error=exc) from exc
            return self._browser

    async def _print(self, browser: Browser, html: str, layout: PageLayoutOptions) -> bytes:
        context = await browser.new_context()
        try:
            page = await context.new_page()
            await page.set_content(html, wait_until="networkidle")
            await page.evaluate(_WAIT_FOR_FONTS)
            return await page.pdf(**layout.to_pdf_kwargs())
        finally:
            await context.close()

    async def render(self, html: str, layout: Optional[PageLayoutOptions] = None) -> bytes:
        layout = layout or PageLayoutOptions()
        browser = await self._get_browser()

        self._inflight += 1
        self._idle.clear()
        try:
            return await asyncio.wait_for(self._print(browser, html, layout), self.timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise RenderError(
                f"PDF generation failed: render timed out after {self.timeout_seconds:g}s",
                original_error=exc,
            ) from exc
        except PlaywrightError as exc:
            raise RenderError(f"PDF generation failed: {exc}", original_error=exc) from exc
        finally:
            self._inflight -= 1
            if self._inflight == 0:
                self._idle.set()

    async def close(self) -> None:
        """Wait briefly for in-flight renders, then shut the browser down."""
        async with self._lock:
            self._closing = True
        try:
            if self._inflight:
                logger.info("Waiting for %d in-flight render(s)", self._inflight)
                try:
                    await asyncio.wait_for(self._idle.wait(), self.shutdown_grace_seconds)
                except asyncio.TimeoutError:
                    logger.warning("Closing browser with %d render(s) still running", self._inflight)
            async with self._lock:
                if self._browser is not None:
                    await self._browser.close()
                    self._browser = None
                    logger.info("Chromium closed")
                await self._stop_playwright()
        finally:
            self._closing = False

    async def _stop_playwright(self) -> None:
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None
