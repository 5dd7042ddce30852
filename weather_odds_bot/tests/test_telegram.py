"""
Tests for the Telegram Bot API client.
"""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from weather_odds_bot.errors import TelegramError
from weather_odds_bot.telegram import TelegramClient


def _response(payload, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


class TestTelegramClient:

    @pytest.fixture
    def client(self):
        return TelegramClient(bot_token="123:abc", api_url="https://api.telegram.org", poll_timeout=1)

    @pytest.mark.asyncio
    async def test_get_updates(self, client):
        updates = [{"update_id": 7, "message": {"chat": {"id": 1}, "text": "/start"}}]

        with patch.object(client.client, "post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = _response({"ok": True, "result": updates})

            result = await client.get_updates(offset=7)

            assert result == updates
            url = mock_post.call_args.args[0]
            assert url == "https://api.telegram.org/bot123:abc/getUpdates"
            assert mock_post.call_args.kwargs["json"]["offset"] == 7

        await client.close()

    @pytest.mark.asyncio
    async def test_send_message(self, client):
        with patch.object(client.client, "post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = _response({"ok": True, "result": {"message_id": 3}})

            result = await client.send_message(42, "Total: $1,100")

            assert result == {"message_id": 3}
            payload = mock_post.call_args.kwargs["json"]
            assert payload["chat_id"] == 42
            assert payload["text"] == "Total: $1,100"
            assert "parse_mode" not in payload

        await client.close()

    @pytest.mark.asyncio
    async def test_api_rejection(self, client):
        with patch.object(client.client, "post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = _response(
                {"ok": False, "description": "Bad Request: chat not found"}, status_code=400
            )

            with pytest.raises(TelegramError) as exc_info:
                await client.send_message(42, "hi")

            assert exc_info.value.status_code == 400
            assert "chat not found" in str(exc_info.value)

        await client.close()

    @pytest.mark.asyncio
    async def test_transport_error(self, client):
        with patch.object(client.client, "post", new_callable=AsyncMock) as mock_post:
            mock_post.side_effect = httpx.ConnectError("connection refused")

            with pytest.raises(TelegramError):
                await client.get_updates()

        await client.close()

    @pytest.mark.asyncio
    async def test_get_me(self, client):
        with patch.object(client.client, "post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = _response({"ok": True, "result": {"username": "odds_bot"}})

            me = await client.get_me()

            assert me["username"] == "odds_bot"
            assert mock_post.call_args.args[0].endswith("/getMe")

        await client.close()
