"""FastAPI dependency injection wiring."""

from __future__ import annotations

import logging

from fastapi import Depends, Request

from lecture_demos.domain.exceptions import ChatModelNotConfiguredError
from lecture_demos.domain.ports.llm_gateway import ChatModel
from lecture_demos.infrastructure.config import Settings, get_settings
from lecture_demos.infrastructure.openai_adapter import OpenAIAdapter
from lecture_demos.services.extract_key_phrases import ExtractKeyPhrasesUseCase
from lecture_demos.services.forecasts import ForecastService

logger = logging.getLogger(__name__)

_openai_adapter: OpenAIAdapter | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _openai_adapter  # noqa: PLW0603

    settings = get_settings()
    missing = settings.missing_ai_settings()
    if missing:
        for name in missing:
            logger.critical("AI setting %s is null or empty; chat demo disabled.", name)
        return

    assert settings.ai_deployment_uri is not None
    assert settings.ai_api_key is not None
    _openai_adapter = OpenAIAdapter(
        endpoint=settings.ai_deployment_uri,
        api_key=settings.ai_api_key.get_secret_value(),
        model=settings.ai_deployment_model_name,
        api_version=settings.ai_api_version,
    )
    logger.info("AI settings loaded successfully.")


async def shutdown() -> None:
    """Release shared resources."""
    global _openai_adapter  # noqa: PLW0603

    if _openai_adapter:
        await _openai_adapter.close()
        _openai_adapter = None


def get_chat_model() -> ChatModel:
    """Return the shared chat model adapter created at startup."""
    if _openai_adapter is None:
        raise ChatModelNotConfiguredError("AI settings are not configured.")
    return _openai_adapter


def get_key_phrase_use_case(
    chat_model: ChatModel = Depends(get_chat_model),
    settings: Settings = Depends(get_settings),
) -> ExtractKeyPhrasesUseCase:
    return ExtractKeyPhrasesUseCase(
        chat_model=chat_model,
        temperature=settings.ai_temperature,
        top_p=settings.ai_top_p,
        max_output_tokens=settings.ai_max_output_tokens,
    )


def get_forecast_service(request: Request) -> ForecastService:
    """Wrap the application's single forecast store in a service."""
    return ForecastService(request.app.state.forecast_store)
