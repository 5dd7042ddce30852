"""
Telegram Bot API Client

Minimal async client for the two calls the bot needs:
- getUpdates (long polling for commands)
- sendMessage (replies and scheduled reports)
"""

import httpx
from typing import Optional

from ..config import config
from ..errors import TelegramError


class TelegramClient:
    """
    Client for the Telegram Bot HTTP API.
    """

    def __init__(
        self,
        bot_token: Optional[str] = None,
        api_url: Optional[str] = None,
        poll_timeout: Optional[int] = None,
    ):
        """
        Initialize Telegram client.

        Args:
            bot_token: Bot token from BotFather
            api_url: Bot API base URL
            poll_timeout: Long-poll duration for getUpdates, in seconds
        """
        self.bot_token = bot_token or config.telegram.bot_token
        self.api_url = api_url or config.telegram.api_url
        self.poll_timeout = poll_timeout or config.telegram.poll_timeout_seconds

        # Read timeout must outlast the long poll
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(10.0, read=self.poll_timeout + 10.0)
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _method_url(self, method: str) -> str:
        return f"{self.api_url}/bot{self.bot_token}/{method}"

    async def _call(self, method: str, payload: dict):
        """
        Call a Bot API method.

        Returns:
            The "result" field of the response

        Raises:
            TelegramError: On transport errors or an "ok": false response
        """
        try:
            response = await self.client.post(self._method_url(method), json=payload)
        except httpx.HTTPError as e:
            raise TelegramError(f"{method} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise TelegramError(
                f"{method} returned non-JSON response", status_code=response.status_code
            ) from e

        if response.status_code != 200 or not data.get("ok"):
            raise TelegramError(
                f"{method} rejected: {data.get('description', 'unknown error')}",
                status_code=response.status_code,
            )

        return data.get("result")

    async def get_me(self) -> dict:
        """Return the bot's own User object; verifies the token."""
        return await self._call("getMe", {})

    async def get_updates(self, offset: Optional[int] = None, timeout: Optional[int] = None) -> list[dict]:
        """
        Long-poll for new updates.

        Args:
            offset: First update_id to return; earlier updates are confirmed
            timeout: Long-poll duration in seconds

        Returns:
            List of update dictionaries
        """
        payload = {
            "timeout": self.poll_timeout if timeout is None else timeout,
            "allowed_updates": ["message"],
        }
        if offset is not None:
            payload["offset"] = offset

        return await self._call("getUpdates", payload) or []

    async def send_message(self, chat_id, text: str) -> dict:
        """
        Send a plain text message.

        Args:
            chat_id: Target chat
            text: Message body

        Returns:
            The sent Message object
        """
        payload = {
            "chat_id": chat_id,
            "text": text,
            "disable_web_page_preview": True,
        }

        return await self._call("sendMessage", payload)
