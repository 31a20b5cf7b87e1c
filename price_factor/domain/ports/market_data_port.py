"""
Port (interface) for market-data providers.
Infrastructure adapters (e.g. CoinGeckoMarketDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from price_factor.domain.entities.price_point import PricePoint


class IMarketDataProvider(ABC):
    @abstractmethod
    def fetch_historical_prices(self, token_id: str, days: int = 30) -> list[PricePoint]:
        """Return the USD price series for *token_id* over the last *days* days.

        Raises:
            FetchError: on any transport, status or payload failure.
        """
        ...
