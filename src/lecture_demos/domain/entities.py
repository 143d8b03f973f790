"""Domain entities — pure data structures with no framework dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


# ── Weather forecasts ───────────────────────────────────────────────────────


@dataclass(slots=True)
class ForecastRecord:
    """A single stored forecast. Mutable: PATCH updates it in place."""

    date: datetime
    temperature_c: int
    summary: str


@dataclass(frozen=True, slots=True)
class StoredForecast:
    """A forecast paired with the key it is stored under."""

    id: str
    record: ForecastRecord


@dataclass(frozen=True, slots=True)
class ForecastDraft:
    """Unvalidated create/replace payload as received from a caller."""

    date: datetime
    temperature_c: int
    summary: str | None


@dataclass(frozen=True, slots=True)
class ForecastPatch:
    """Partial update; ``None`` means "leave the stored value alone"."""

    date: datetime | None = None
    temperature_c: int | None = None
    summary: str | None = None


# ── Chat ────────────────────────────────────────────────────────────────────


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"


@dataclass(frozen=True, slots=True)
class ChatMessage:
    role: ChatRole
    content: str


@dataclass(frozen=True, slots=True)
class ResponseSchema:
    """A named JSON schema the model reply must conform to."""

    name: str
    description: str
    schema: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ChatOptions:
    """Sampling options and structured-output format for one model call."""

    temperature: float
    top_p: float
    max_output_tokens: int
    response_format: ResponseSchema | None = None


class DemoVariant(int, Enum):
    """Prompt-shaping strategy used by the chat endpoint."""

    DEMO01 = 1
    DEMO02 = 2

    @classmethod
    def parse(cls, raw: str | None) -> DemoVariant:
        """Accept ``1``/``2`` or ``Demo01``/``Demo02`` (any case).

        Anything else falls back to :attr:`DEMO01`.
        """
        if raw is None:
            return cls.DEMO01
        value = raw.strip()
        if value.isdigit():
            try:
                return cls(int(value))
            except ValueError:
                return cls.DEMO01
        for member in cls:
            if member.name.lower() == value.lower():
                return member
        return cls.DEMO01
