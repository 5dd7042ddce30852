"""
Chat Command Handling

Parses incoming Telegram updates and dispatches bot commands:
- /start, /help
- /current <market>
- /track <market>, /untrack <market>
- /status

Usage errors are answered directly and never reach the extractor.
Scrape errors are caught here and reported to the chat as free text.
"""

from typing import Awaitable, Callable, Optional

from .config import MARKET_CONFIGS, get_all_markets
from .errors import ScrapeError, UsageError
from .formatting import (
    format_error,
    format_help,
    format_start,
    format_usage,
    timestamp,
)
from .monitoring import get_logger, snapshot_logger
from .reporter import MarketReporter
from .storage import TrackingState

logger = get_logger("commands")

SendFunc = Callable[[object, str], Awaitable[object]]


def parse_command(text: str) -> tuple[Optional[str], Optional[str]]:
    """
    Split a message into command name and first argument.

    "/current@OddsBot London" -> ("current", "london")
    "hello" -> (None, None)
    """
    parts = (text or "").strip().split()
    if not parts or not parts[0].startswith("/"):
        return None, None

    command = parts[0][1:].split("@", 1)[0].lower()
    argument = parts[1].lower() if len(parts) > 1 else None
    return command or None, argument


class CommandHandler:
    """
    Answers commands from the configured chat.
    """

    def __init__(
        self,
        reporter: MarketReporter,
        tracking: TrackingState,
        send: SendFunc,
        chat_id,
    ):
        """
        Initialize command handler.

        Args:
            reporter: Produces market reports
            tracking: Persistent tracking flags
            send: Coroutine sending (chat_id, text) to Telegram
            chat_id: The only chat whose commands are answered
        """
        self.reporter = reporter
        self.tracking = tracking
        self.send = send
        self.chat_id = str(chat_id)

        self._handlers = {
            "start": self._start,
            "help": self._help,
            "current": self._current,
            "track": self._track,
            "untrack": self._untrack,
            "status": self._status,
        }

    async def handle_update(self, update: dict) -> Optional[str]:
        """
        Handle one getUpdates entry.

        Returns:
            The reply text sent, or None if the update was ignored
        """
        message = update.get("message") or {}
        text = message.get("text")
        chat_id = (message.get("chat") or {}).get("id")

        if not text or chat_id is None:
            return None

        if str(chat_id) != self.chat_id:
            logger.warning(f"Ignoring message from unknown chat {chat_id}")
            return None

        reply = await self.dispatch(text)
        if reply is not None:
            await self.send(chat_id, reply)
        return reply

    async def dispatch(self, text: str) -> Optional[str]:
        """Route a command to its handler and return the reply text."""
        command, argument = parse_command(text)
        handler = self._handlers.get(command)
        if handler is None:
            return None

        logger.info(f"Command /{command} {argument or ''}".rstrip())

        try:
            return await handler(argument)
        except UsageError as e:
            return str(e)

    def _require_market(self, argument: Optional[str], command: str) -> str:
        if argument not in MARKET_CONFIGS:
            raise UsageError(format_usage(command))
        return argument

    async def _start(self, argument: Optional[str]) -> str:
        return format_start()

    async def _help(self, argument: Optional[str]) -> str:
        return format_help()

    async def _current(self, argument: Optional[str]) -> str:
        market_key = self._require_market(argument, "current")

        try:
            report = await self.reporter.report(market_key)
        except ScrapeError as e:
            snapshot_logger.log_scrape_failure(market_key, str(e))
            return format_error(e)

        return report.text

    async def _track(self, argument: Optional[str]) -> str:
        market_key = self._require_market(argument, "track")
        name = MARKET_CONFIGS[market_key].name

        if not self.tracking.set_tracked(market_key, True):
            return f"Already tracking {name}"
        return f"Tracking {name}. Reports will be pushed to this chat."

    async def _untrack(self, argument: Optional[str]) -> str:
        market_key = self._require_market(argument, "untrack")
        name = MARKET_CONFIGS[market_key].name

        if not self.tracking.set_tracked(market_key, False):
            return f"{name} was not being tracked"
        return f"Stopped tracking {name}"

    async def _status(self, argument: Optional[str]) -> str:
        lines = ["Tracking status:"]
        for key in get_all_markets():
            state = "on" if self.tracking.is_tracked(key) else "off"
            line = f"• {MARKET_CONFIGS[key].name}: {state}"
            last = self.tracking.last_pushed(key)
            if last is not None:
                line += f" (last push {timestamp(last)})"
            lines.append(line)
        return "\n".join(lines)
