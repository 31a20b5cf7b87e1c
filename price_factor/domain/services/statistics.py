"""
Descriptive statistics over a fetched price series.
Pure functions, no I/O. Errors propagate to the caller unchanged.
"""

from datetime import datetime, timezone

from price_factor.domain.entities.price_point import PricePoint
from price_factor.domain.errors import InsufficientDataError


def calculate_moving_average(prices: list[PricePoint], period: int) -> float:
    """Arithmetic mean of the last *period* points, in series order.

    Raises:
        ValueError: if *period* is not positive.
        InsufficientDataError: if the series holds fewer than *period* points.
    """
    if period <= 0:
        raise ValueError("period must be a positive integer")
    if len(prices) < period:
        raise InsufficientDataError(
            "Not enough price data to calculate moving average",
            required_count=period,
            available_count=len(prices),
        )

    recent = prices[-period:]
    return sum(point.price for point in recent) / period


def utc_day_key(timestamp: str) -> str:
    """Return the UTC calendar day ('YYYY-MM-DD') of an ISO-8601 timestamp."""
    moment = datetime.fromisoformat(timestamp)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%d")


def group_by_day(prices: list[PricePoint]) -> list[tuple[str, list[PricePoint]]]:
    """Bucket points by UTC day, buckets sorted by key, series order kept inside."""
    buckets: dict[str, list[PricePoint]] = {}
    for point in prices:
        buckets.setdefault(utc_day_key(point.timestamp), []).append(point)
    return sorted(buckets.items(), key=lambda item: item[0])


def calculate_price_change_percentage(prices: list[PricePoint]) -> float:
    """Percentage change between the two most recent calendar days.

    Compares the last sample of the second-to-last day with the last sample of
    the last day. The result depends on how many samples per day the provider
    returned; it is not a 24-hour-apart comparison.

    Raises:
        InsufficientDataError: on fewer than 2 points, fewer than 2 distinct
            days, or a zero reference price.
    """
    if len(prices) < 2:
        raise InsufficientDataError(
            "Not enough price data to calculate price change",
            required_count=2,
            available_count=len(prices),
        )

    days = group_by_day(prices)
    if len(days) < 2:
        raise InsufficientDataError(
            "Not enough days of price data to calculate day-over-day change",
            required_count=2,
            available_count=len(days),
        )

    old_price = days[-2][1][-1].price
    current_price = days[-1][1][-1].price
    if old_price == 0:
        raise InsufficientDataError(
            "Previous day closed at zero, percentage change is undefined",
            context={"day": days[-2][0]},
        )
    return (current_price - old_price) / old_price * 100
