"""
FastAPI entry point.

create_app() builds the HTTP surface around already-wired use cases so tests can
inject fakes. build_default_app() is the Composition Root: it loads .env, pulls
the optional JSON secret from AWS Secrets Manager, reads Settings and wires all
infrastructure adapters once.

Run locally:
    uvicorn price_factor.infrastructure.entrypoints.fastapi_app:build_default_app --factory --port 8000
"""

import os
from contextlib import asynccontextmanager
from typing import Callable, Iterable

import httpx
import structlog
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from price_factor.application.use_cases.analyze_token_price import AnalyzeTokenPriceUseCase
from price_factor.application.use_cases.fetch_historical_prices import (
    DEFAULT_LOOKBACK_DAYS,
    FetchHistoricalPricesUseCase,
)
from price_factor.domain.errors import FetchError

logger = structlog.get_logger(__name__)


class AnalysisResponse(BaseModel):
    movingAverage7Day: float
    movingAverage30Day: float
    priceChangePercentage: float
    priceFactor: float


class PricePointResponse(BaseModel):
    timestamp: str
    price: float


def create_app(
    analyze_use_case: AnalyzeTokenPriceUseCase,
    fetch_use_case: FetchHistoricalPricesUseCase,
    shutdown_hooks: Iterable[Callable[[], None]] = (),
) -> FastAPI:
    hooks = list(shutdown_hooks)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        for hook in hooks:
            try:
                hook()
            except Exception:
                logger.exception(
                    "Shutdown hook failed",
                    hook=getattr(hook, "__qualname__", repr(hook)),
                )

    app = FastAPI(title="Token Price Factor API", lifespan=lifespan)

    @app.get("/analysis/{token_id}", response_model=AnalysisResponse)
    def analyze(token_id: str):
        """Full analysis. Always 200; failures yield the degraded result."""
        return analyze_use_case.execute(token_id).to_dict()

    @app.get("/prices/{token_id}", response_model=list[PricePointResponse])
    def prices(token_id: str, days: int = Query(DEFAULT_LOOKBACK_DAYS)):
        try:
            series = fetch_use_case.execute(token_id, days)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except FetchError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return [{"timestamp": p.timestamp, "price": p.price} for p in series]

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


def build_default_app() -> FastAPI:
    """Wire every adapter from the environment and return the application."""
    load_dotenv()

    secret_arn = os.environ.get("PRICE_FACTOR_SECRET_ARN")
    if secret_arn:
        from price_factor.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter
        SecretsManagerAdapter().load_into_env(secret_arn)

    from price_factor.infrastructure.config.settings import Settings
    from price_factor.infrastructure.llm.factory import create_language_model
    from price_factor.infrastructure.market_data.coingecko_adapter import CoinGeckoMarketDataProvider
    from price_factor.infrastructure.observability.langfuse_adapter import create_observability_handler
    from price_factor.infrastructure.observability.logging_config import configure_logging

    settings = Settings.from_env()
    configure_logging(settings.log_level, settings.log_format_json)

    provider = CoinGeckoMarketDataProvider(
        client=httpx.Client(timeout=settings.http_timeout_seconds),
        base_url=settings.coingecko_base_url,
        timeout=settings.http_timeout_seconds,
    )
    llm = create_language_model(settings)
    observability = create_observability_handler(settings.langfuse_enabled)

    analyze_use_case = AnalyzeTokenPriceUseCase.from_dependencies(
        provider, llm, observability, days=settings.price_history_days
    )
    fetch_use_case = FetchHistoricalPricesUseCase(provider)
    logger.info(
        "Price factor service wired",
        llm_provider=settings.llm_provider,
        tracing=settings.langfuse_enabled,
        days=settings.price_history_days,
    )
    return create_app(
        analyze_use_case,
        fetch_use_case,
        shutdown_hooks=[observability.flush, provider.close],
    )
