"""Pytest configuration and shared fakes."""

from types import SimpleNamespace
from typing import Any

import pytest
from langchain_core.messages import AIMessage

from price_factor.domain.entities.price_point import PricePoint
from price_factor.domain.errors import FetchError
from price_factor.domain.ports.llm_port import ILanguageModel
from price_factor.domain.ports.market_data_port import IMarketDataProvider


class FakeMarketDataProvider(IMarketDataProvider):
    """Returns a canned series (or raises) and records every request."""

    def __init__(self, prices: list[PricePoint] | None = None, error: Exception | None = None):
        self.prices = prices or []
        self.error = error
        self.requests: list[tuple[str, int]] = []

    def fetch_historical_prices(self, token_id: str, days: int = 30) -> list[PricePoint]:
        self.requests.append((token_id, days))
        if self.error is not None:
            raise self.error
        return list(self.prices)


class FakeLanguageModel(ILanguageModel):
    """Answers every call with the same content and records the messages."""

    def __init__(self, content: Any = '{"priceFactor": 1.42}'):
        self.content = content
        self.calls: list[list[Any]] = []

    def invoke(self, messages: list[Any]) -> Any:
        self.calls.append(messages)
        if self.content is None:
            return SimpleNamespace(content=None)
        return AIMessage(content=self.content)


def daily_series(prices: list[float], month: int = 3) -> list[PricePoint]:
    """One point per day at midnight UTC starting on the 1st of *month* 2024."""
    return [
        PricePoint(timestamp=f"2024-{month:02d}-{day:02d}T00:00:00.000Z", price=price)
        for day, price in enumerate(prices, start=1)
    ]


@pytest.fixture
def thirty_day_series() -> list[PricePoint]:
    """Prices 1.0 .. 30.0 on 2024-03-01 .. 2024-03-30."""
    return daily_series([float(p) for p in range(1, 31)])


@pytest.fixture
def fake_provider_factory():
    return FakeMarketDataProvider


@pytest.fixture
def fake_llm_factory():
    return FakeLanguageModel


@pytest.fixture
def failing_provider() -> FakeMarketDataProvider:
    return FakeMarketDataProvider(error=FetchError("Failed to fetch historical prices"))
