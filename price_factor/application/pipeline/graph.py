"""
LangGraph price analysis pipeline factory.

Dependency-injection contract:
  - Receives the fetch use case and a PriceFactorScorer.
  - Never imports httpx, langchain_openai, langchain_aws or boto3 directly.

Stages run strictly in order: fetch -> compute -> score -> END. Every stage
catches its own failure, records the error kind and routes to the absorbing
fallback node; there is no transition back to an earlier stage.
"""

import structlog
from langgraph.graph import END, START, StateGraph

from price_factor.application.pipeline.fallback import degraded_result
from price_factor.application.pipeline.state import AnalysisState
from price_factor.application.scoring.price_factor_scorer import PriceFactorScorer
from price_factor.application.use_cases.fetch_historical_prices import (
    DEFAULT_LOOKBACK_DAYS,
    FetchHistoricalPricesUseCase,
)
from price_factor.domain.services.statistics import (
    calculate_moving_average,
    calculate_price_change_percentage,
)

logger = structlog.get_logger(__name__)

SHORT_PERIOD = 7
LONG_PERIOD = 30


def _failure(stage: str, state: AnalysisState, exc: Exception) -> dict:
    logger.warning(
        "Price analysis stage failed",
        stage=stage,
        token_id=state.get("token_id"),
        error_kind=type(exc).__name__,
        error=str(exc),
    )
    return {"error": str(exc), "error_kind": type(exc).__name__, "failed_stage": stage}


def build_analysis_graph(
    fetch_prices: FetchHistoricalPricesUseCase,
    scorer: PriceFactorScorer,
):
    """Build and compile the analysis pipeline.

    Args:
        fetch_prices: Use case wrapping an IMarketDataProvider.
        scorer:       PriceFactorScorer wrapping an ILanguageModel.

    Returns:
        Compiled LangGraph CompiledStateGraph ready for invoke() calls.
    """

    def fetch_node(state: AnalysisState) -> dict:
        try:
            prices = fetch_prices.execute(
                state["token_id"], state.get("days", DEFAULT_LOOKBACK_DAYS)
            )
        except Exception as exc:
            return _failure("fetch", state, exc)
        return {"prices": prices}

    def compute_node(state: AnalysisState) -> dict:
        prices = state["prices"]
        try:
            return {
                "moving_average_7_day": calculate_moving_average(prices, SHORT_PERIOD),
                "moving_average_30_day": calculate_moving_average(prices, LONG_PERIOD),
                "price_change_percentage": calculate_price_change_percentage(prices),
            }
        except Exception as exc:
            return _failure("compute", state, exc)

    def score_node(state: AnalysisState) -> dict:
        try:
            price_factor = scorer.score(
                state["token_id"],
                state["moving_average_7_day"],
                state["moving_average_30_day"],
                state["price_change_percentage"],
            )
        except Exception as exc:
            return _failure("score", state, exc)
        return {"price_factor": price_factor}

    def fallback_node(state: AnalysisState) -> dict:
        """Discard every partial statistic and publish the degraded result."""
        result = degraded_result()
        logger.info(
            "Returning degraded price analysis",
            token_id=state.get("token_id"),
            failed_stage=state.get("failed_stage"),
            error_kind=state.get("error_kind"),
        )
        return {
            "moving_average_7_day": result.moving_average_7_day,
            "moving_average_30_day": result.moving_average_30_day,
            "price_change_percentage": result.price_change_percentage,
            "price_factor": result.price_factor,
        }

    def route_to(next_node: str):
        def should_continue(state: AnalysisState) -> str:
            """Route: on a recorded error go to fallback, otherwise advance."""
            if state.get("error_kind"):
                return "fallback"
            return next_node

        return should_continue

    workflow = StateGraph(AnalysisState)
    workflow.add_node("fetch", fetch_node)
    workflow.add_node("compute", compute_node)
    workflow.add_node("score", score_node)
    workflow.add_node("fallback", fallback_node)
    workflow.add_edge(START, "fetch")
    workflow.add_conditional_edges("fetch", route_to("compute"), ["compute", "fallback"])
    workflow.add_conditional_edges("compute", route_to("score"), ["score", "fallback"])
    workflow.add_conditional_edges("score", route_to(END), [END, "fallback"])
    workflow.add_edge("fallback", END)
    return workflow.compile()
