"""Forecast CRUD use cases.

Depends only on the :class:`ForecastRepository` port.  Every operation
either returns its result or raises a domain exception; the interface
layer picks the status code from the exception type.
"""

from __future__ import annotations

import logging

from lecture_demos.domain.entities import (
    ForecastDraft,
    ForecastPatch,
    ForecastRecord,
    StoredForecast,
)
from lecture_demos.domain.exceptions import (
    ErrorNumber,
    NotFoundError,
    SimulatedInternalError,
    ValidationError,
)
from lecture_demos.domain.ports.forecast_repository import ForecastRepository
from lecture_demos.domain.value_objects import new_forecast_id

logger = logging.getLogger(__name__)

# Any id containing this marker makes GET fail on purpose.
FAULT_INJECTION_MARKER = "BadRobot"

MAX_SUMMARY_LENGTH = 60


def validate_summary(summary: str | None) -> str:
    """Return *summary* when it is non-blank and at most 60 characters."""
    if summary is None or not summary.strip():
        raise ValidationError(
            "Input must not be null",
            property_name="Summary",
            error_number=ErrorNumber.MUST_NOT_BE_NULL,
        )
    if len(summary) > MAX_SUMMARY_LENGTH:
        raise ValidationError(
            f"Summary must be between 1 and {MAX_SUMMARY_LENGTH} characters",
            property_name="Summary",
            error_number=ErrorNumber.STRING_LENGTH_OUT_OF_RANGE,
        )
    return summary


def _to_record(draft: ForecastDraft | None) -> ForecastRecord:
    if draft is None:
        raise ValidationError(
            "Input body must not be null",
            property_name="body",
            error_number=ErrorNumber.MUST_NOT_BE_NULL,
        )
    return ForecastRecord(
        date=draft.date,
        temperature_c=draft.temperature_c,
        summary=validate_summary(draft.summary),
    )


class ForecastService:
    """Full CRUD over forecasts held by a :class:`ForecastRepository`."""

    def __init__(self, repository: ForecastRepository) -> None:
        self._repo = repository

    def list_forecasts(self) -> list[StoredForecast]:
        return self._repo.list_all()

    def get_forecast(self, key: str) -> ForecastRecord:
        if FAULT_INJECTION_MARKER in key:
            raise SimulatedInternalError("Error simulation")

        record = self._repo.get(key)
        if record is None:
            raise NotFoundError(f"Forecast {key!r} not found.")
        return record

    def create_forecast(self, draft: ForecastDraft | None) -> StoredForecast:
        record = _to_record(draft)
        key = new_forecast_id()
        self._repo.put(key, record)
        logger.info("Created forecast %s", key)
        return StoredForecast(id=key, record=record)

    def patch_forecast(self, key: str, patch: ForecastPatch) -> None:
        """Overwrite only the non-null fields of *patch*."""
        record = self._repo.get(key)
        if record is None:
            raise NotFoundError(f"Forecast {key!r} not found.")

        if patch.summary is not None:
            validate_summary(patch.summary)

        if patch.date is not None:
            record.date = patch.date
        if patch.temperature_c is not None:
            record.temperature_c = patch.temperature_c
        if patch.summary is not None:
            record.summary = patch.summary

    def replace_forecast(
        self, key: str, draft: ForecastDraft | None
    ) -> StoredForecast | None:
        """Replace the forecast under *key*, creating it when absent.

        Returns the stored forecast when it was created, ``None`` when an
        existing one was replaced.
        """
        record = _to_record(draft)
        created = not self._repo.contains(key)
        self._repo.put(key, record)
        if created:
            logger.info("Created forecast %s with caller-supplied id", key)
            return StoredForecast(id=key, record=record)
        return None

    def delete_forecast(self, key: str) -> None:
        if not self._repo.remove(key):
            raise NotFoundError(f"Forecast {key!r} not found.")
        logger.info("Deleted forecast %s", key)
