"""
Degraded result returned whenever any analysis stage fails.

The price factor choice compares a literal zero against zero, so the high
fallback can never be selected and the degraded factor is always 0.5.
"""

from price_factor.domain.entities.price_point import AnalysisResult

DEFAULT_PRICE_CHANGE = 0.0
HIGH_FALLBACK_PRICE_FACTOR = 1.5
LOW_FALLBACK_PRICE_FACTOR = 0.5


def degraded_result() -> AnalysisResult:
    default_price_change = DEFAULT_PRICE_CHANGE
    return AnalysisResult(
        moving_average_7_day=0.0,
        moving_average_30_day=0.0,
        price_change_percentage=default_price_change,
        price_factor=(
            HIGH_FALLBACK_PRICE_FACTOR
            if default_price_change > 0
            else LOW_FALLBACK_PRICE_FACTOR
        ),
    )
