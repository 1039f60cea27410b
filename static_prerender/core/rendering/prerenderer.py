"""
Prerenderer
===========

Playwright-based page capture. Launches one headless Chromium, loads the
served page once, lets it settle and serializes the rendered DOM.
"""

from typing import Optional, Dict, Any
import asyncio

from playwright.async_api import async_playwright, Browser, Page, Playwright

from static_prerender.config.logging import get_logger
from static_prerender.config.settings import Settings, get_settings
from static_prerender.core.exceptions import CaptureError

logger = get_logger(__name__)

DOCTYPE = "<!doctype html>"

# Plain serialization drops values set through interaction or script.
SYNC_INPUT_VALUES = """
() => {
  document.querySelectorAll("input").forEach(el => {
    el.setAttribute("value", el.value);
  });
}
"""

SERIALIZE_DOCUMENT = "() => document.documentElement.outerHTML"

BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
]


class Prerenderer:
    """Capture the fully rendered markup of a single page."""

    def __init__(
        self,
        viewport: Optional[Dict[str, int]] = None,
        settle_ms: int = 1000,
        navigation_timeout_ms: int = 30000,
        headless: bool = True,
    ):
        self.viewport = viewport or {"width": 1280, "height": 720}
        self.settle_ms = settle_ms
        self.navigation_timeout_ms = navigation_timeout_ms
        self.headless = headless
        self.logger: Any = logger.bind(component="prerenderer")  # structlog.BoundLoggerBase

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Prerenderer":
        settings = settings or get_settings()
        return cls(
            viewport={"width": settings.viewport_width, "height": settings.viewport_height},
            settle_ms=settings.settle_ms,
            navigation_timeout_ms=settings.navigation_timeout_ms,
            headless=settings.headless,
        )

    async def capture(self, url: str) -> str:
        """
        Load ``url`` in a fresh browser and return its serialized DOM.

        Args:
            url: Address of the served page, including any prerender marker

        Returns:
            Markup prefixed with a doctype declaration

        Raises:
            CaptureError: If launch, navigation or evaluation fails. The
                browser is closed before the error propagates.
        """
        self.logger.info("Capturing page", url=url, viewport=self.viewport)

        playwright: Optional[Playwright] = None
        browser: Optional[Browser] = None
        try:
            playwright = await async_playwright().start()
            browser = await playwright.chromium.launch(headless=self.headless, args=BROWSER_ARGS)
            page = await browser.new_page()
            await page.set_viewport_size(self.viewport)  # type: ignore[arg-type]

            markup = await self._grab_markup(page, url)
        except CaptureError:
            raise
        except Exception as e:
            error_msg = f"Page capture failed for {url}: {e}"
            self.logger.error("Page capture failed", url=url, error=str(e))
            raise CaptureError(error_msg) from e
        finally:
            await self._shutdown(playwright, browser)

        self.logger.info("Page captured", url=url, markup_length=len(markup))
        return DOCTYPE + markup

    async def _grab_markup(self, page: Page, url: str) -> str:
        """Navigate, settle, normalize inputs and serialize."""
        page.set_default_timeout(self.navigation_timeout_ms)

        response = await page.goto(url, wait_until="load", timeout=self.navigation_timeout_ms)
        if response is not None and not response.ok:
            raise CaptureError(f"Navigation to {url} returned HTTP {response.status}")

        # No readiness signal from the page; a fixed settle interval covers
        # post-load animation frames.
        await asyncio.sleep(self.settle_ms / 1000)

        await page.evaluate(SYNC_INPUT_VALUES)
        markup = await page.evaluate(SERIALIZE_DOCUMENT)
        if not isinstance(markup, str):
            raise CaptureError(f"Document serialization returned {type(markup).__name__}")
        return markup

    async def _shutdown(self, playwright: Optional[Playwright], browser: Optional[Browser]) -> None:
        """
        Close the browser and stop Playwright, whatever state capture ended in.

        Shutdown failures are logged, not raised, so they never mask the
        capture result or the CaptureError already propagating.
        """
        try:
            if browser is not None:
                await browser.close()
        except Exception as e:
            self.logger.warning("Browser shutdown failed", error=str(e))
        finally:
            if playwright is not None:
                try:
                    await playwright.stop()
                except Exception as e:
                    self.logger.warning("Playwright shutdown failed", error=str(e))
        self.logger.debug("Browser closed")


async def capture_page(url: str, settings: Optional[Settings] = None) -> str:
    """Capture ``url`` with a Prerenderer configured from settings."""
    return await Prerenderer.from_settings(settings).capture(url)
