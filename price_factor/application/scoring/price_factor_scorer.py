"""
Turns computed price statistics into a model-produced price factor.

Dependency-injection contract:
  - Receives ILanguageModel, never imports an LLM SDK directly.
  - langchain_core messages are the orchestration-framework vocabulary and are
    acceptable in the application layer.
"""

import json
import math

import structlog
from langchain_core.messages import HumanMessage, SystemMessage

from price_factor.application.scoring.prompts import SYSTEM_PROMPT, build_user_prompt
from price_factor.domain.errors import ScoringError
from price_factor.domain.ports.llm_port import ILanguageModel

logger = structlog.get_logger(__name__)

PRICE_FACTOR_FIELD = "priceFactor"


class PriceFactorScorer:
    def __init__(self, llm: ILanguageModel) -> None:
        self._llm = llm

    def build_messages(
        self,
        token_id: str,
        moving_average_7_day: float,
        moving_average_30_day: float,
        price_change_percentage: float,
    ) -> list:
        return [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(
                content=build_user_prompt(
                    token_id,
                    moving_average_7_day,
                    moving_average_30_day,
                    price_change_percentage,
                )
            ),
        ]

    def score(
        self,
        token_id: str,
        moving_average_7_day: float,
        moving_average_30_day: float,
        price_change_percentage: float,
    ) -> float:
        """Ask the model for a price factor in [0, 2].

        Raises:
            ScoringError: if the reply is empty, not a JSON object, or has no
                numeric ``priceFactor`` field.
        """
        messages = self.build_messages(
            token_id, moving_average_7_day, moving_average_30_day, price_change_percentage
        )
        response = self._llm.invoke(messages)
        content = _message_text(response)
        if not content:
            raise ScoringError("Language model response content is empty")

        try:
            analysis = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ScoringError(
                "Language model response is not valid JSON", context={"content": content}
            ) from exc

        logger.info("Price factor analysis received", token_id=token_id, analysis=analysis)

        if not isinstance(analysis, dict) or PRICE_FACTOR_FIELD not in analysis:
            raise ScoringError(
                f"Language model response has no {PRICE_FACTOR_FIELD!r} field",
                context={"content": content},
            )

        value = analysis[PRICE_FACTOR_FIELD]
        if isinstance(value, bool):
            raise ScoringError(f"{PRICE_FACTOR_FIELD!r} is not a number: {value!r}")
        try:
            price_factor = float(value)
        except (TypeError, ValueError) as exc:
            raise ScoringError(f"{PRICE_FACTOR_FIELD!r} is not a number: {value!r}") from exc
        if not math.isfinite(price_factor):
            raise ScoringError(f"{PRICE_FACTOR_FIELD!r} is not a finite number: {value!r}")
        return price_factor


def _message_text(response) -> str:
    """Extract the text of a chat response; content may be a str or a list of parts."""
    content = getattr(response, "content", response)
    if content is None:
        return ""
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, dict):
                parts.append(part.get("text", ""))
            else:
                parts.append(str(part))
        content = "".join(parts)
    return str(content).strip()
