"""In-memory forecast store — implements the ForecastRepository port.

A plain ``dict`` owned by one store instance per application.  There is no
locking: concurrent writers to the same key race and the last one wins.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta

from lecture_demos.domain.entities import ForecastRecord, StoredForecast
from lecture_demos.domain.value_objects import new_forecast_id

logger = logging.getLogger(__name__)

SUMMARIES: tuple[str, ...] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)


class InMemoryForecastStore:
    """Concrete ``ForecastRepository`` backed by a process-local dict."""

    def __init__(self) -> None:
        self._forecasts: dict[str, ForecastRecord] = {}

    @classmethod
    def seeded(cls, count: int = 5, rng: random.Random | None = None) -> InMemoryForecastStore:
        """Build a store pre-filled with *count* random forecasts.

        Dates run 1..count days from now; temperatures fall in [-20, 55).
        """
        rng = rng or random.Random()
        store = cls()
        now = datetime.now()
        for index in range(1, count + 1):
            store.put(
                new_forecast_id(),
                ForecastRecord(
                    date=now + timedelta(days=index),
                    temperature_c=rng.randrange(-20, 55),
                    summary=rng.choice(SUMMARIES),
                ),
            )
        logger.info("Seeded forecast store with %d record(s)", count)
        return store

    def list_all(self) -> list[StoredForecast]:
        return [StoredForecast(id=key, record=rec) for key, rec in self._forecasts.items()]

    def get(self, key: str) -> ForecastRecord | None:
        return self._forecasts.get(key)

    def contains(self, key: str) -> bool:
        return key in self._forecasts

    def put(self, key: str, record: ForecastRecord) -> None:
        self._forecasts[key] = record

    def remove(self, key: str) -> bool:
        return self._forecasts.pop(key, None) is not None

    def __len__(self) -> int:
        return len(self._forecasts)
