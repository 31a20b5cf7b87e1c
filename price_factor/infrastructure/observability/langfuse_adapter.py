"""
Infrastructure adapter: Langfuse → IObservabilityHandler.

Langfuse is imported lazily inside the methods so the module can be loaded
even when LANGFUSE_* environment variables are not yet set (e.g. during testing).
The secret bootstrap in the FastAPI composition root must run before this
adapter is first constructed.
"""

from typing import Any, Optional

from price_factor.domain.ports.observability_port import IObservabilityHandler


class LangfuseObservabilityHandler(IObservabilityHandler):
    """Wraps the Langfuse LangChain CallbackHandler."""

    def __init__(self) -> None:
        from langfuse.langchain import CallbackHandler
        self._handler = CallbackHandler()

    def as_callback(self) -> Any:
        """Return the Langfuse CallbackHandler for use in LangChain/LangGraph configs."""
        return self._handler

    def flush(self) -> None:
        """Flush pending traces to the Langfuse backend before the process exits."""
        from langfuse import get_client
        get_client().flush()


class NullObservabilityHandler(IObservabilityHandler):
    """Used when Langfuse credentials are not configured: no callback, nothing to flush."""

    def as_callback(self) -> Optional[Any]:
        return None

    def flush(self) -> None:
        return None


def create_observability_handler(enabled: bool) -> IObservabilityHandler:
    return LangfuseObservabilityHandler() if enabled else NullObservabilityHandler()
