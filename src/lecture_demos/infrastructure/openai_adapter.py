"""OpenAI adapter — implements the ChatModel port."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx
from openai import AsyncAzureOpenAI, AsyncOpenAI

from lecture_demos.domain.entities import ChatMessage, ChatOptions
from lecture_demos.domain.exceptions import LlmCallError

logger = logging.getLogger(__name__)


class OpenAIAdapter:
    """Concrete ``ChatModel`` backed by the OpenAI chat-completions API.

    When *api_version* is given the Azure OpenAI client is used and *model*
    is the deployment name; otherwise *endpoint* is treated as an
    OpenAI-compatible base URL.  No retries are attempted.
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        model: str = "gpt-5-mini",
        api_version: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if api_version:
            self._client: AsyncOpenAI = AsyncAzureOpenAI(
                azure_endpoint=endpoint,
                api_key=api_key,
                api_version=api_version,
                max_retries=0,
                http_client=http_client,
            )
        else:
            self._client = AsyncOpenAI(
                base_url=endpoint,
                api_key=api_key,
                max_retries=0,
                http_client=http_client,
            )
        self._model = model

    async def complete(
        self, messages: Sequence[ChatMessage], options: ChatOptions
    ) -> str | None:
        """Send *messages* with *options* and return the first choice's text."""
        kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": m.role.value, "content": m.content} for m in messages
            ],
            "temperature": options.temperature,
            "top_p": options.top_p,
            "max_completion_tokens": options.max_output_tokens,
        }
        if options.response_format is not None:
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": options.response_format.name,
                    "description": options.response_format.description,
                    "schema": options.response_format.schema,
                },
            }

        logger.debug("Calling %s with %d message(s)", self._model, len(messages))
        try:
            response = await self._client.chat.completions.create(**kwargs)
        except Exception as exc:
            raise LlmCallError(f"Error calling AI model: {exc}") from exc

        if not response.choices:
            return None
        return response.choices[0].message.content

    async def close(self) -> None:
        """Release underlying HTTP resources."""
        await self._client.close()
