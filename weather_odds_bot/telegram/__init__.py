"""
Telegram integration module.

Handles:
- Long polling for chat commands
- Sending replies and scheduled reports
"""

from .client import TelegramClient

__all__ = ["TelegramClient"]
