"""Port: chat model — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol, Sequence

from lecture_demos.domain.entities import ChatMessage, ChatOptions


class ChatModel(Protocol):
    """Abstract contract for a single chat-completion round trip."""

    async def complete(
        self, messages: Sequence[ChatMessage], options: ChatOptions
    ) -> str | None:
        """Send *messages* and return the raw reply text (may be empty)."""
        ...
