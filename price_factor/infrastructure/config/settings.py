"""
Process configuration read once at the composition root.

Adapters and use cases receive plain values from Settings; nothing below the
entrypoints reads os.environ. python-dotenv is loaded by the entrypoint before
Settings.from_env() runs.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BEDROCK_MODEL_ID = "us.amazon.nova-pro-v1:0"
DEFAULT_COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3"

LLM_PROVIDERS = ("openai", "bedrock")


class ConfigurationError(Exception):
    """Raised at startup when the environment cannot produce valid Settings."""


@dataclass(frozen=True)
class Settings:
    llm_provider: str = "openai"
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    bedrock_model_id: str = DEFAULT_BEDROCK_MODEL_ID
    aws_region: str = "us-east-1"
    coingecko_base_url: str = DEFAULT_COINGECKO_BASE_URL
    http_timeout_seconds: float = 30.0
    price_history_days: int = 30
    log_level: str = "INFO"
    log_format_json: bool = False
    langfuse_enabled: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings from *environ* (defaults to os.environ).

        Raises:
            ConfigurationError: on unparsable numbers, an unknown provider, or
                a missing OPENAI_API_KEY when the OpenAI provider is selected.
        """
        env = os.environ if environ is None else environ

        provider = env.get("LLM_PROVIDER", "openai").strip().lower() or "openai"
        if provider not in LLM_PROVIDERS:
            raise ConfigurationError(
                f"LLM_PROVIDER must be one of {LLM_PROVIDERS}, got {provider!r}"
            )

        api_key = env.get("OPENAI_API_KEY", "").strip()
        if provider == "openai" and not api_key:
            raise ConfigurationError("OPENAI_API_KEY is required when LLM_PROVIDER=openai")

        days = _parse_number(env, "PRICE_HISTORY_DAYS", "30", int)
        if days <= 0:
            raise ConfigurationError(f"PRICE_HISTORY_DAYS must be positive, got {days}")
        timeout = _parse_number(env, "HTTP_TIMEOUT_SECONDS", "30", float)
        if timeout <= 0:
            raise ConfigurationError(f"HTTP_TIMEOUT_SECONDS must be positive, got {timeout}")

        return cls(
            llm_provider=provider,
            openai_api_key=api_key,
            openai_model=env.get("OPENAI_MODEL", "gpt-4o").strip() or "gpt-4o",
            bedrock_model_id=env.get("BEDROCK_MODEL_ID", DEFAULT_BEDROCK_MODEL_ID),
            aws_region=env.get("AWS_DEFAULT_REGION", "us-east-1"),
            coingecko_base_url=env.get("COINGECKO_BASE_URL", DEFAULT_COINGECKO_BASE_URL),
            http_timeout_seconds=timeout,
            price_history_days=days,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            log_format_json=env.get("LOG_FORMAT_JSON", "").strip().lower() in ("1", "true", "yes"),
            langfuse_enabled=bool(
                env.get("LANGFUSE_PUBLIC_KEY", "").strip()
                and env.get("LANGFUSE_SECRET_KEY", "").strip()
            ),
        )


def _parse_number(env: Mapping[str, str], name: str, default: str, kind: type):
    raw = env.get(name, default).strip() or default
    try:
        return kind(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
