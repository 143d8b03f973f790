"""Port: forecast repository — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from lecture_demos.domain.entities import ForecastRecord, StoredForecast


class ForecastRepository(Protocol):
    """Abstract contract for a key → forecast mapping."""

    def list_all(self) -> list[StoredForecast]:
        """Return every stored forecast, in no particular order."""
        ...

    def get(self, key: str) -> ForecastRecord | None:
        """Return the record stored under *key*, or ``None``."""
        ...

    def contains(self, key: str) -> bool:
        ...

    def put(self, key: str, record: ForecastRecord) -> None:
        """Store *record* under *key*, replacing any existing entry."""
        ...

    def remove(self, key: str) -> bool:
        """Delete *key*; return ``False`` when it was not present."""
        ...
