"""
Shared fixtures for the test suite.
"""

import pytest


@pytest.fixture
def outcome_rows():
    return [
        {
            "name": " 15°C ",
            "probability": "45%",
            "yes_price": "46¢",
            "no_price": "55¢",
            "change": " ▲3% ",
            "volume": "$12,000 Vol.",
            "tag": "Hot",
        },
        {
            "name": "16°C",
            "probability": "30%",
            "yes_price": "31¢",
            "no_price": "70¢",
            "change": "",
            "volume": "$8,500",
            "tag": None,
        },
        {
            "name": "14°C",
            "probability": "<1%",
            "yes_price": "0.5¢",
            "no_price": None,
            "change": None,
            "volume": None,
            "tag": "  ",
        },
        {
            "name": "17°C",
            "probability": "5%",
            "yes_price": "5¢",
            "no_price": "96¢",
            "change": "",
            "volume": "$100",
            "tag": "",
        },
    ]
