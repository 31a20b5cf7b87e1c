"""Factory for creating the configured language model adapter."""

import structlog

from price_factor.domain.ports.llm_port import ILanguageModel
from price_factor.infrastructure.config.settings import ConfigurationError, Settings

logger = structlog.get_logger(__name__)


def create_language_model(settings: Settings) -> ILanguageModel:
    """Create the adapter named by ``settings.llm_provider``.

    - "openai"  → OpenAIChatAdapter (requires settings.openai_api_key)
    - "bedrock" → BedrockChatAdapter (AWS credentials from the default chain)
    """
    if settings.llm_provider == "openai":
        from price_factor.infrastructure.llm.openai_adapter import OpenAIChatAdapter

        logger.info("Language model: OpenAI", model=settings.openai_model)
        return OpenAIChatAdapter(api_key=settings.openai_api_key, model=settings.openai_model)
    if settings.llm_provider == "bedrock":
        from price_factor.infrastructure.llm.bedrock_adapter import BedrockChatAdapter

        logger.info("Language model: Amazon Bedrock", model=settings.bedrock_model_id)
        return BedrockChatAdapter(
            model_id=settings.bedrock_model_id, region=settings.aws_region
        )
    raise ConfigurationError(f"Unknown LLM provider: {settings.llm_provider!r}")
