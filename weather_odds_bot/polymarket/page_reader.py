"""
Page Reader Capability

The extractor only talks to this interface, so the browser engine can be
swapped out or faked in tests. One session per instance; sessions are
never reused across extractions.
"""

from abc import ABC, abstractmethod
from typing import Optional


class PageReader(ABC):
    """Loads one remote page and reads text out of it by CSS selector."""

    @abstractmethod
    async def open(self, url: str, timeout: float) -> None:
        """
        Navigate to a page and wait for network activity to settle.

        Args:
            url: Page to load
            timeout: Navigation timeout in seconds

        Raises:
            ScrapeError: If the page cannot be loaded in time
        """

    @abstractmethod
    async def wait_for(self, selector: str, timeout: float) -> bool:
        """
        Poll until an element matching selector exists.

        Returns:
            True if the element appeared before the timeout
        """

    @abstractmethod
    async def read_text(self, selector: str) -> Optional[str]:
        """Inner text of the first match, or None if there is none."""

    @abstractmethod
    async def read_rows(
        self,
        row_selector: str,
        fields: dict[str, str],
        limit: int,
    ) -> list[dict[str, Optional[str]]]:
        """
        Read named fields out of repeated rows.

        Args:
            row_selector: Selector matching each row
            fields: Mapping of field name to selector, relative to the row
            limit: Maximum number of rows to read

        Returns:
            One dict per row; a field is None when its element is missing
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the browser session."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
