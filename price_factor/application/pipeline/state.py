"""
LangGraph analysis state definition.
langgraph is the orchestration framework and is allowed in the application layer.
"""

from typing import Optional, TypedDict

from price_factor.domain.entities.price_point import PricePoint


class AnalysisState(TypedDict, total=False):
    """State threaded through the fetch -> compute -> score pipeline.

    token_id / days: inputs, set by the caller.
    prices:          series returned by the fetch stage.
    error / error_kind / failed_stage: set by whichever stage failed; any of
                     them being present routes the graph to the fallback node.
    """

    token_id: str
    days: int
    prices: list[PricePoint]
    moving_average_7_day: float
    moving_average_30_day: float
    price_change_percentage: float
    price_factor: float
    error: Optional[str]
    error_kind: Optional[str]
    failed_stage: Optional[str]
