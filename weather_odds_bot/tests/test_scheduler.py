"""
Tests for scheduled pushes of tracked markets.
"""

import pytest

from weather_odds_bot.errors import ScrapeError, TelegramError
from weather_odds_bot.reporter import MarketReporter
from weather_odds_bot.scheduler import TrackingScheduler
from weather_odds_bot.storage import InMemoryBaselineStore, TrackingState

from .fakes import FakeExtractor, RecordingSender

CHAT_ID = "4242"


@pytest.fixture
def tracking(tmp_path):
    return TrackingState(tmp_path / "tracking.json")


def _scheduler(extractor, tracking, sender):
    reporter = MarketReporter(extractor, InMemoryBaselineStore())
    return TrackingScheduler(reporter, tracking, sender, CHAT_ID, interval_minutes=5)


class TestTrackingScheduler:

    @pytest.mark.asyncio
    async def test_nothing_tracked(self, tracking):
        extractor = FakeExtractor()
        sender = RecordingSender()

        assert await _scheduler(extractor, tracking, sender).push_tracked() == 0
        assert extractor.calls == []

    @pytest.mark.asyncio
    async def test_pushes_each_tracked_market(self, tracking):
        tracking.set_tracked("london", True)
        tracking.set_tracked("nyc", True)
        extractor = FakeExtractor(100, 200)
        sender = RecordingSender()

        delivered = await _scheduler(extractor, tracking, sender).push_tracked()

        assert delivered == 2
        assert extractor.calls == ["london", "nyc"]
        assert [chat for chat, _ in sender.sent] == [CHAT_ID, CHAT_ID]
        assert "LONDON TOP 3" in sender.sent[0][1]
        assert tracking.last_pushed("nyc") is not None

    @pytest.mark.asyncio
    async def test_scrape_failure_does_not_stop_others(self, tracking):
        tracking.set_tracked("london", True)
        tracking.set_tracked("nyc", True)
        extractor = FakeExtractor(ScrapeError("boom"), 200)
        sender = RecordingSender()

        delivered = await _scheduler(extractor, tracking, sender).push_tracked()

        assert delivered == 2
        assert sender.sent[0][1] == "Error: boom"
        assert "NYC TOP 3" in sender.sent[1][1]

    @pytest.mark.asyncio
    async def test_send_failure_not_marked(self, tracking):
        tracking.set_tracked("london", True)
        sender = RecordingSender(fail=TelegramError("sendMessage rejected: chat not found"))

        delivered = await _scheduler(FakeExtractor(100), tracking, sender).push_tracked()

        assert delivered == 0
        assert tracking.last_pushed("london") is None
