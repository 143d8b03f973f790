"""Extract-key-phrases use case — the chat demo.

Shapes the caller's prompt with one of two demo strategies, makes a single
structured-output call through the :class:`ChatModel` port, and validates
the reply against :class:`KeyPhrases`.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError as SchemaMismatch

from lecture_demos.domain.entities import (
    ChatMessage,
    ChatOptions,
    ChatRole,
    DemoVariant,
    ResponseSchema,
)
from lecture_demos.domain.exceptions import (
    EmptyModelOutputError,
    InvalidModelOutputError,
    LlmCallError,
)
from lecture_demos.domain.ports.llm_gateway import ChatModel
from lecture_demos.domain.value_objects import KeyPhrases

logger = logging.getLogger(__name__)

# ── Prompt templates ────────────────────────────────────────────────────────

ENHANCED_PROMPT_TEMPLATE = (
    "Identify and return a JSON list of the most important 3 key phrases "
    "from the following text: {prompt}"
)

SYSTEM_PROMPT = (
    "You will identify and return a JSON list of the most important 3 key "
    "phrases from the users input"
)

RESPONSE_SCHEMA = ResponseSchema(
    name="ChatResponse",
    description="Chat response schema",
    schema=KeyPhrases.model_json_schema(),
)


def build_messages(prompt: str, variant: DemoVariant) -> list[ChatMessage]:
    """Turn *prompt* into the message list for the chosen *variant*."""
    match variant:
        case DemoVariant.DEMO02:
            return [
                ChatMessage(ChatRole.SYSTEM, SYSTEM_PROMPT),
                ChatMessage(ChatRole.USER, prompt),
            ]
        case _:
            return [
                ChatMessage(ChatRole.USER, ENHANCED_PROMPT_TEMPLATE.format(prompt=prompt)),
            ]


def parse_key_phrases(raw: str | None) -> KeyPhrases:
    """Validate the model's raw text; never returns a partial result."""
    if raw is None or not raw.strip():
        logger.error("AI model returned null or empty response")
        raise EmptyModelOutputError("AI model returned null or empty response")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.error("Failed to deserialize response from AI model. Response text: %s", raw)
        raise InvalidModelOutputError("Failed to deserialize response from AI model") from exc

    if data is None:
        logger.error("Failed to deserialize response - result was null")
        raise InvalidModelOutputError("Failed to deserialize response from AI model")

    try:
        return KeyPhrases.model_validate(data)
    except SchemaMismatch as exc:
        logger.error("AI model response does not match schema: %s", exc)
        raise InvalidModelOutputError("Failed to deserialize response from AI model") from exc


class ExtractKeyPhrasesUseCase:
    """Ask the chat model for the 3 most important key phrases of a prompt.

    Parameters
    ----------
    chat_model:
        Adapter that performs one chat-completion round trip.
    temperature, top_p, max_output_tokens:
        Sampling options sent with every call.
    """

    def __init__(
        self,
        chat_model: ChatModel,
        temperature: float = 1.0,
        top_p: float = 1.0,
        max_output_tokens: int = 500,
    ) -> None:
        self._model = chat_model
        self._options = ChatOptions(
            temperature=temperature,
            top_p=top_p,
            max_output_tokens=max_output_tokens,
            response_format=RESPONSE_SCHEMA,
        )

    async def execute(
        self, prompt: str, variant: DemoVariant = DemoVariant.DEMO01
    ) -> KeyPhrases:
        """Run one model call and return the parsed key phrases."""
        messages = build_messages(prompt, variant)
        logger.info("Extracting key phrases using %s", variant.name)

        try:
            raw = await self._model.complete(messages, self._options)
        except LlmCallError:
            logger.exception("Error calling AI model")
            raise
        except Exception as exc:
            logger.exception("Error calling AI model")
            raise LlmCallError(f"Error calling AI model: {exc}") from exc

        logger.info("Raw AI response: %s", raw if raw is not None else "(null)")
        return parse_key_phrases(raw)
