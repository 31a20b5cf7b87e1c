"""
Domain entities for token price analysis.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PricePoint:
    """A single USD price observation for a token.

    timestamp: ISO-8601 UTC date-time, e.g. '2024-03-01T00:00:00.000Z'.
    """

    timestamp: str
    price: float


@dataclass(frozen=True)
class AnalysisResult:
    moving_average_7_day: float
    moving_average_30_day: float
    price_change_percentage: float
    price_factor: float

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys used on the wire."""
        return {
            "movingAverage7Day": self.moving_average_7_day,
            "movingAverage30Day": self.moving_average_30_day,
            "priceChangePercentage": self.price_change_percentage,
            "priceFactor": self.price_factor,
        }
