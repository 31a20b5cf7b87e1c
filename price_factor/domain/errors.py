"""
Error taxonomy for the price analysis pipeline.

Statistics functions and adapters raise these; only AnalyzeTokenPriceUseCase
collapses them into the degraded result.
"""

from typing import Any, Dict, Optional


class PriceAnalysisError(Exception):
    """Base class for every failure the analysis pipeline knows about."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class FetchError(PriceAnalysisError):
    """The market-data provider could not be reached or answered badly."""


class InsufficientDataError(PriceAnalysisError):
    """Not enough price points (or calendar days) for a calculation."""

    def __init__(
        self,
        message: str,
        required_count: Optional[int] = None,
        available_count: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context=context)
        self.required_count = required_count
        self.available_count = available_count


class ScoringError(PriceAnalysisError):
    """The language model returned no usable price factor."""
