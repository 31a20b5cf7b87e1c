"""
Infrastructure adapter: CoinGecko market chart → IMarketDataProvider.
All httpx / CoinGecko payload details are confined here; the rest of the
codebase depends only on IMarketDataProvider.
"""

from datetime import datetime, timezone
from typing import Optional

import httpx
import structlog

from price_factor.domain.entities.price_point import PricePoint
from price_factor.domain.errors import FetchError
from price_factor.domain.ports.market_data_port import IMarketDataProvider

logger = structlog.get_logger(__name__)

COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3"


def epoch_ms_to_iso(epoch_ms: float) -> str:
    """Render Unix milliseconds as an ISO-8601 UTC string, e.g. '2024-03-01T00:00:00.000Z'."""
    moment = datetime.fromtimestamp(epoch_ms / 1000.0, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CoinGeckoMarketDataProvider(IMarketDataProvider):
    """Fetches USD price history from the public CoinGecko API (no key required)."""

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        base_url: str = COINGECKO_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self._client = client or httpx.Client(timeout=timeout)
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def fetch_historical_prices(self, token_id: str, days: int = 30) -> list[PricePoint]:
        try:
            response = self._client.get(
                f"{self._base_url}/coins/{token_id}/market_chart",
                params={"vs_currency": "usd", "days": days},
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
            return [
                PricePoint(timestamp=epoch_ms_to_iso(item[0]), price=float(item[1]))
                for item in payload["prices"]
            ]
        except (httpx.HTTPError, ValueError, KeyError, TypeError, IndexError) as exc:
            logger.error(
                "Error fetching historical prices",
                token_id=token_id,
                days=days,
                error_kind=type(exc).__name__,
                error=str(exc),
            )
            raise FetchError("Failed to fetch historical prices") from exc

    def close(self) -> None:
        """Release the pooled HTTP connections."""
        self._client.close()
