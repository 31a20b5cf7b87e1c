"""
Infrastructure adapter: OpenAI chat completions (ChatOpenAI) → ILanguageModel.

All ChatOpenAI / langchain_openai details are confined here. The model is bound
to JSON-object responses so every reply is a parseable JSON document.
"""

from typing import Any

from langchain_openai import ChatOpenAI

from price_factor.domain.ports.llm_port import ILanguageModel


class OpenAIChatAdapter(ILanguageModel):
    """Wraps ChatOpenAI and exposes the ILanguageModel interface."""

    MODEL_ID = "gpt-4o"

    def __init__(self, api_key: str = "", model: str = MODEL_ID, _runnable: Any = None) -> None:
        """
        Args:
            api_key:   OpenAI API key, passed explicitly from Settings.
            model:     Chat model name.
            _runnable: Optional pre-configured Runnable (used by tests to
                       substitute a fake without constructing ChatOpenAI).
        """
        if _runnable is not None:
            self._llm = _runnable
        else:
            self._llm = ChatOpenAI(
                model=model,
                api_key=api_key,
                temperature=0.0,
            ).bind(response_format={"type": "json_object"})

    def invoke(self, messages: list[Any]) -> Any:
        return self._llm.invoke(messages)
