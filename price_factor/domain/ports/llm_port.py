"""
Port (interface) for language model providers.
Infrastructure adapters (e.g. OpenAIChatAdapter, BedrockChatAdapter) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILanguageModel(ABC):
    @abstractmethod
    def invoke(self, messages: list[Any]) -> Any:
        """Invoke the model synchronously and return a response message.

        Implementations are configured to answer with a JSON object in the
        message content.
        """
        ...
