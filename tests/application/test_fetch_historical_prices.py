"""Tests for FetchHistoricalPricesUseCase."""

import pytest

from price_factor.application.use_cases.fetch_historical_prices import FetchHistoricalPricesUseCase
from price_factor.domain.errors import FetchError


class TestFetchHistoricalPricesUseCase:
    def test_defaults_to_thirty_days(self, fake_provider_factory, thirty_day_series):
        provider = fake_provider_factory(thirty_day_series)
        prices = FetchHistoricalPricesUseCase(provider).execute("bitcoin")

        assert prices == thirty_day_series
        assert provider.requests == [("bitcoin", 30)]

    def test_token_id_is_normalized(self, fake_provider_factory):
        provider = fake_provider_factory()
        FetchHistoricalPricesUseCase(provider).execute("  Sonic-3 ", days=7)
        assert provider.requests == [("sonic-3", 7)]

    @pytest.mark.parametrize("token_id", ["", "   "])
    def test_blank_token_rejected(self, fake_provider_factory, token_id):
        provider = fake_provider_factory()
        with pytest.raises(ValueError):
            FetchHistoricalPricesUseCase(provider).execute(token_id)
        assert provider.requests == []

    @pytest.mark.parametrize("days", [0, -1, 1.5, True])
    def test_non_positive_integer_days_rejected(self, fake_provider_factory, days):
        with pytest.raises(ValueError):
            FetchHistoricalPricesUseCase(fake_provider_factory()).execute("bitcoin", days)

    def test_fetch_error_propagates(self, failing_provider):
        with pytest.raises(FetchError):
            FetchHistoricalPricesUseCase(failing_provider).execute("bitcoin")
