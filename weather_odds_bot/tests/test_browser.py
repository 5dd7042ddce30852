"""
Tests for the Playwright page reader against a mocked page.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from playwright.async_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError

from weather_odds_bot.errors import ScrapeError
from weather_odds_bot.polymarket.browser import PlaywrightPageReader

CLOSED = "Target page, context or browser has been closed"


def _element(text=None, error=None):
    element = MagicMock()
    element.inner_text = AsyncMock(return_value=text, side_effect=error)
    return element


def _row(fields: dict):
    row = MagicMock()
    row.query_selector = AsyncMock(side_effect=lambda selector: fields.get(selector))
    return row


class TestPlaywrightPageReader:

    @pytest.fixture
    def reader(self):
        reader = PlaywrightPageReader(headless=True)
        reader._page = MagicMock()
        return reader

    @pytest.mark.asyncio
    async def test_goto_timeout_is_scrape_error(self, reader):
        reader._page.goto = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 30000ms exceeded"))

        with pytest.raises(ScrapeError) as exc_info:
            await reader.open("https://polymarket.com/event/x", timeout=30)

        assert "Timed out" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, PlaywrightTimeoutError)

    @pytest.mark.asyncio
    async def test_goto_error_is_scrape_error(self, reader):
        reader._page.goto = AsyncMock(side_effect=PlaywrightError("net::ERR_NAME_NOT_RESOLVED"))

        with pytest.raises(ScrapeError) as exc_info:
            await reader.open("https://polymarket.com/event/x", timeout=30)

        assert "ERR_NAME_NOT_RESOLVED" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_readiness_timeout_returns_false(self, reader):
        reader._page.wait_for_selector = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 8000ms exceeded"))

        assert await reader.wait_for('[data-testid="market-outcome"]', timeout=8) is False

    @pytest.mark.asyncio
    async def test_readiness_on_closed_page_is_scrape_error(self, reader):
        reader._page.wait_for_selector = AsyncMock(side_effect=PlaywrightError(CLOSED))

        with pytest.raises(ScrapeError) as exc_info:
            await reader.wait_for('[data-testid="market-outcome"]', timeout=8)

        assert CLOSED in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_read_rows_limit_and_missing_fields(self, reader):
        rows = [
            _row({".name": _element("15°C"), ".tag": _element("Hot")}),
            _row({".name": _element("16°C"), ".tag": _element(error=PlaywrightError("detached"))}),
            _row({".name": _element("17°C")}),
        ]
        reader._page.query_selector_all = AsyncMock(return_value=rows)

        result = await reader.read_rows("row", {"name": ".name", "tag": ".tag"}, limit=2)

        assert result == [
            {"name": "15°C", "tag": "Hot"},
            {"name": "16°C", "tag": None},
        ]
        rows[2].query_selector.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_read_text(self, reader):
        reader._page.query_selector_all = AsyncMock(return_value=[_element("$1,100 Vol.")])
        assert await reader.read_text("volume") == "$1,100 Vol."

        reader._page.query_selector_all = AsyncMock(return_value=[])
        assert await reader.read_text("volume") is None

    @pytest.mark.asyncio
    async def test_read_on_closed_page_is_scrape_error(self, reader):
        reader._page.query_selector_all = AsyncMock(side_effect=PlaywrightError(CLOSED))

        with pytest.raises(ScrapeError):
            await reader.read_text("volume")
        with pytest.raises(ScrapeError):
            await reader.read_rows("row", {"name": ".name"}, limit=3)

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, reader):
        browser = MagicMock()
        browser.close = AsyncMock()
        playwright = MagicMock()
        playwright.stop = AsyncMock()
        reader._browser = browser
        reader._playwright = playwright

        await reader.close()
        await reader.close()

        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()
        assert reader._page is None

    @pytest.mark.asyncio
    async def test_close_failure_still_stops_playwright(self, reader):
        browser = MagicMock()
        browser.close = AsyncMock(side_effect=PlaywrightError(CLOSED))
        playwright = MagicMock()
        playwright.stop = AsyncMock()
        reader._browser = browser
        reader._playwright = playwright

        with pytest.raises(ScrapeError):
            await reader.close()

        playwright.stop.assert_awaited_once()
        await reader.close()
