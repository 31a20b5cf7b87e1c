"""
Use-case: retrieve the historical USD price series of a token.
Depends only on Domain ports and entities, no infrastructure imports.
"""

from price_factor.domain.entities.price_point import PricePoint
from price_factor.domain.ports.market_data_port import IMarketDataProvider

DEFAULT_LOOKBACK_DAYS = 30


class FetchHistoricalPricesUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    def execute(self, token_id: str, days: int = DEFAULT_LOOKBACK_DAYS) -> list[PricePoint]:
        """Fetch the price series of *token_id* over the last *days* days.

        Args:
            token_id: Market-data provider identifier (e.g. 'bitcoin', 'sonic-3').
                      Stripped and lower-cased before the request.
            days:     Lookback window, a positive integer.

        Raises:
            ValueError: if *token_id* is blank or *days* is not a positive integer.
            FetchError: propagated from the IMarketDataProvider on API failure.
        """
        if not token_id or not token_id.strip():
            raise ValueError("token_id must be a non-empty string")
        if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
            raise ValueError(f"days must be a positive integer, got {days!r}")
        return self._provider.fetch_historical_prices(token_id.strip().lower(), days=days)
