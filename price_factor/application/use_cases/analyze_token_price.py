"""
Use-case: run the full price analysis for a token through the compiled pipeline.
Callers never observe an exception; any failure yields the degraded result.
"""

from typing import Any

import structlog

from price_factor.application.pipeline.fallback import degraded_result
from price_factor.application.pipeline.graph import build_analysis_graph
from price_factor.application.scoring.price_factor_scorer import PriceFactorScorer
from price_factor.application.use_cases.fetch_historical_prices import (
    DEFAULT_LOOKBACK_DAYS,
    FetchHistoricalPricesUseCase,
)
from price_factor.domain.entities.price_point import AnalysisResult
from price_factor.domain.ports.llm_port import ILanguageModel
from price_factor.domain.ports.market_data_port import IMarketDataProvider
from price_factor.domain.ports.observability_port import IObservabilityHandler

logger = structlog.get_logger(__name__)


class AnalyzeTokenPriceUseCase:
    def __init__(
        self,
        graph: Any,
        observability: IObservabilityHandler,
        days: int = DEFAULT_LOOKBACK_DAYS,
    ) -> None:
        """
        Args:
            graph:         Compiled LangGraph StateGraph returned by build_analysis_graph().
            observability: IObservabilityHandler implementation (e.g. Langfuse adapter).
            days:          Lookback window requested from the market-data provider.
        """
        self._graph = graph
        self._observability = observability
        self._days = days

    @classmethod
    def from_dependencies(
        cls,
        provider: IMarketDataProvider,
        llm: ILanguageModel,
        observability: IObservabilityHandler,
        days: int = DEFAULT_LOOKBACK_DAYS,
    ) -> "AnalyzeTokenPriceUseCase":
        """Wire the pipeline from a market-data provider and a language model."""
        graph = build_analysis_graph(
            FetchHistoricalPricesUseCase(provider),
            PriceFactorScorer(llm),
        )
        return cls(graph, observability, days=days)

    def execute(self, token_id: str) -> AnalysisResult:
        """Analyze *token_id*: fetch, compute statistics, score.

        Returns the degraded result (factor 0.5, everything else zero) when any
        stage fails.
        """
        callback = self._observability.as_callback()
        config = {
            "callbacks": [callback] if callback is not None else [],
            "metadata": {"token_id": token_id, "days": self._days},
            "run_name": "analyze_token_price",
        }
        try:
            final_state = self._graph.invoke(
                {"token_id": token_id, "days": self._days},
                config=config,
            )
            return AnalysisResult(
                moving_average_7_day=final_state["moving_average_7_day"],
                moving_average_30_day=final_state["moving_average_30_day"],
                price_change_percentage=final_state["price_change_percentage"],
                price_factor=final_state["price_factor"],
            )
        except Exception as exc:
            logger.error(
                "Price analysis pipeline failed",
                token_id=token_id,
                error_kind=type(exc).__name__,
                error=str(exc),
            )
            return degraded_result()
