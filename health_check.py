"""Health check - verify Telegram credentials and that both markets scrape."""
import asyncio
import sys
from datetime import datetime

from weather_odds_bot.config import config, get_all_markets, get_market_config
from weather_odds_bot.errors import ScrapeError, TelegramError
from weather_odds_bot.polymarket import SnapshotExtractor
from weather_odds_bot.telegram import TelegramClient


async def main() -> int:
    print("=== Weather Odds Bot Health Check ===")
    print(f"Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
    healthy = True

    # 1. Check Telegram credentials
    print("1. Telegram")
    if not config.telegram.is_configured:
        print("   ❌ TELEGRAM_BOT_TOKEN / TELEGRAM_CHAT_ID not configured!")
        healthy = False
    else:
        async with TelegramClient() as client:
            try:
                me = await client.get_me()
                print(f"   ✅ Bot @{me.get('username')} (chat {config.telegram.chat_id})")
            except TelegramError as e:
                print(f"   ❌ Token rejected: {e}")
                healthy = False

    # 2. Check each market page
    print("\n2. Market Pages")
    extractor = SnapshotExtractor()
    for market_key in get_all_markets():
        market = get_market_config(market_key)
        try:
            snapshot = await extractor.extract(market_key)
        except ScrapeError as e:
            print(f"   ❌ {market.name}: {e}")
            healthy = False
            continue

        if not snapshot.outcomes:
            print(f"   ⚠️ {market.name}: page loaded but no outcome rows found ({market.url})")
            continue
        print(f"   ✅ {market.name}: {len(snapshot.outcomes)} outcomes, ${snapshot.total_volume:,} volume")
        for o in snapshot.outcomes:
            print(f"      - {o.name}: {o.probability}% ({o.yes_price}¢/{o.no_price}¢)")

    # 3. State directory
    print("\n3. State Files")
    print(f"   Data dir: {config.storage.data_dir}")
    print(f"   Tracking interval: {config.track_interval_minutes} min")

    print("\n=== Health Check Complete ===")
    return 0 if healthy else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
