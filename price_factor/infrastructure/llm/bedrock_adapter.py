"""
Infrastructure adapter: Amazon Bedrock (ChatBedrock) → ILanguageModel.

All ChatBedrock / langchain_aws details are confined here. Bedrock has no
JSON response mode; the scoring rubric already instructs the model to answer
with a bare JSON object.
"""

from typing import Any

from langchain_aws import ChatBedrock

from price_factor.domain.ports.llm_port import ILanguageModel


class BedrockChatAdapter(ILanguageModel):
    """Wraps ChatBedrock and exposes the ILanguageModel interface."""

    MODEL_ID = "us.amazon.nova-pro-v1:0"

    def __init__(
        self,
        model_id: str = MODEL_ID,
        region: str = "us-east-1",
        _runnable: Any = None,
    ) -> None:
        if _runnable is not None:
            self._llm = _runnable
        else:
            self._llm = ChatBedrock(
                model=model_id,
                model_kwargs={"temperature": 0.0},
                region_name=region,
            )

    def invoke(self, messages: list[Any]) -> Any:
        return self._llm.invoke(messages)
