"""
Playwright Page Reader

Renders Polymarket pages in headless Chromium. Polymarket is a client-side
rendered app, so plain HTTP fetches do not contain the outcome rows.
"""

from typing import Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    Page,
    Playwright,
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeoutError,
)

from ..config import config
from ..errors import ScrapeError
from ..monitoring import get_logger
from .page_reader import PageReader

logger = get_logger("browser")


class PlaywrightPageReader(PageReader):
    """PageReader backed by a fresh Chromium instance."""

    def __init__(self, headless: Optional[bool] = None):
        self.headless = config.scraper.headless if headless is None else headless

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None

    async def _start(self):
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(headless=self.headless)
        self._page = await self._browser.new_page()

    async def open(self, url: str, timeout: float) -> None:
        try:
            if self._page is None:
                await self._start()
            logger.debug(f"Loading {url}")
            await self._page.goto(url, wait_until="networkidle", timeout=timeout * 1000)
        except PlaywrightTimeoutError as e:
            raise ScrapeError(f"Timed out loading {url} after {timeout:.0f}s") from e
        except PlaywrightError as e:
            raise ScrapeError(f"Browser failed loading {url}: {e.message}") from e

    async def wait_for(self, selector: str, timeout: float) -> bool:
        try:
            await self._page.wait_for_selector(selector, timeout=timeout * 1000)
            return True
        except PlaywrightTimeoutError:
            return False
        except PlaywrightError as e:
            raise ScrapeError(f"Browser failed waiting for {selector}: {e.message}") from e

    async def _query(self, selector: str):
        try:
            return await self._page.query_selector_all(selector)
        except PlaywrightError as e:
            raise ScrapeError(f"Browser failed querying {selector}: {e.message}") from e

    @staticmethod
    async def _inner_text(element) -> Optional[str]:
        # A single detached element only costs that field
        try:
            return await element.inner_text()
        except PlaywrightError as e:
            logger.debug(f"Could not read element text: {e.message}")
            return None

    async def read_text(self, selector: str) -> Optional[str]:
        elements = await self._query(selector)
        if not elements:
            return None
        return await self._inner_text(elements[0])

    async def read_rows(
        self,
        row_selector: str,
        fields: dict[str, str],
        limit: int,
    ) -> list[dict[str, Optional[str]]]:
        rows = await self._query(row_selector)

        results = []
        for row in rows[:limit]:
            values: dict[str, Optional[str]] = {}
            for name, selector in fields.items():
                try:
                    element = await row.query_selector(selector)
                except PlaywrightError:
                    element = None
                values[name] = await self._inner_text(element) if element else None
            results.append(values)

        return results

    async def close(self) -> None:
        browser, playwright = self._browser, self._playwright
        self._browser = None
        self._playwright = None
        self._page = None

        try:
            if browser is not None:
                await browser.close()
        except PlaywrightError as e:
            raise ScrapeError(f"Browser failed to close: {e.message}") from e
        finally:
            if playwright is not None:
                await playwright.stop()
