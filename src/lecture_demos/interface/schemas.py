"""Pydantic request / response DTOs for the API boundary.

Forecast payloads use camelCase on the wire (``temperatureC``).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from lecture_demos.domain.entities import (
    ForecastDraft,
    ForecastPatch,
    ForecastRecord,
    StoredForecast,
)
from lecture_demos.domain.value_objects import KeyPhrases


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Forecasts ───────────────────────────────────────────────────────────────


class ForecastCreate(_CamelModel):
    """Body for ``POST`` and ``PUT /api/weatherforecast``.

    ``summary`` is optional here so a missing value reaches the service and
    is reported with the forecast error envelope.
    """

    date: datetime
    temperature_c: int
    summary: str | None = None

    def to_draft(self) -> ForecastDraft:
        return ForecastDraft(
            date=self.date, temperature_c=self.temperature_c, summary=self.summary
        )


class ForecastUpdate(_CamelModel):
    """Body for ``PATCH /api/weatherforecast/{id}``; null fields are skipped."""

    date: datetime | None = None
    temperature_c: int | None = None
    summary: str | None = None

    def to_patch(self) -> ForecastPatch:
        return ForecastPatch(
            date=self.date, temperature_c=self.temperature_c, summary=self.summary
        )


class ForecastResponse(_CamelModel):
    """A single forecast without its key."""

    date: datetime
    summary: str
    temperature_c: int

    @classmethod
    def from_record(cls, record: ForecastRecord) -> ForecastResponse:
        return cls(
            date=record.date, summary=record.summary, temperature_c=record.temperature_c
        )


class ForecastResult(_CamelModel):
    """A forecast together with the key it is stored under."""

    id: str
    date: datetime
    summary: str
    temperature_c: int

    @classmethod
    def from_stored(cls, stored: StoredForecast) -> ForecastResult:
        return cls(
            id=stored.id,
            date=stored.record.date,
            summary=stored.record.summary,
            temperature_c=stored.record.temperature_c,
        )


class ValidationErrorResponse(_CamelModel):
    """400 body: ``{errorMessage, errorNumber, propertyName}``."""

    error_message: str
    error_number: int
    property_name: str


# ── Chat ────────────────────────────────────────────────────────────────────


class KeyPhrasesResponse(BaseModel):
    """Successful response from ``POST /chat``."""

    phrases: list[str]

    @classmethod
    def from_domain(cls, key_phrases: KeyPhrases) -> KeyPhrasesResponse:
        return cls(phrases=list(key_phrases.phrases))


# ── Errors ──────────────────────────────────────────────────────────────────


class ErrorResponse(_CamelModel):
    """Standard envelope for server-side failures."""

    status: str = "error"
    message: str
    correlation_id: str | None = None
