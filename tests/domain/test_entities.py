"""Tests for domain entities."""

import dataclasses

import pytest

from price_factor.domain.entities.price_point import AnalysisResult, PricePoint


class TestEntities:
    def test_price_point_is_immutable(self):
        point = PricePoint(timestamp="2024-03-01T00:00:00.000Z", price=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.price = 2.0  # type: ignore[misc]

    def test_analysis_result_wire_keys(self):
        result = AnalysisResult(
            moving_average_7_day=1.0,
            moving_average_30_day=2.0,
            price_change_percentage=3.0,
            price_factor=1.2,
        )
        assert result.to_dict() == {
            "movingAverage7Day": 1.0,
            "movingAverage30Day": 2.0,
            "priceChangePercentage": 3.0,
            "priceFactor": 1.2,
        }
