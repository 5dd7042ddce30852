"""
Weather Odds Bot - Polymarket Weather Market Reporter

A Telegram bot that scrapes Polymarket temperature markets, tracks
their volume trend and reports the top outcomes to a chat.
"""

__version__ = "0.1.0"
