"""Tests for observability handlers and logging setup."""

from unittest.mock import patch

import structlog

from price_factor.infrastructure.observability.langfuse_adapter import (
    NullObservabilityHandler,
    create_observability_handler,
)
from price_factor.infrastructure.observability.logging_config import configure_logging


class TestObservability:
    def test_disabled_tracing_uses_null_handler(self):
        handler = create_observability_handler(False)
        assert isinstance(handler, NullObservabilityHandler)
        assert handler.as_callback() is None
        handler.flush()

    def test_enabled_tracing_uses_langfuse(self):
        with patch(
            "price_factor.infrastructure.observability.langfuse_adapter.LangfuseObservabilityHandler"
        ) as langfuse_cls:
            handler = create_observability_handler(True)
        assert handler is langfuse_cls.return_value

    def test_configure_logging_json(self):
        configure_logging("DEBUG", format_json=True)
        try:
            assert structlog.is_configured()
        finally:
            structlog.reset_defaults()
