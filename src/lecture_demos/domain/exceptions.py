"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations

from enum import IntEnum


class LectureDemoError(Exception):
    """Base exception for the entire application."""


# ── Forecast resource errors ────────────────────────────────────────────────


class ErrorNumber(IntEnum):
    """Stable error codes reported in the ``errorNumber`` field of a 400."""

    MUST_NOT_BE_NULL = 1
    STRING_LENGTH_OUT_OF_RANGE = 2
    INVALID_FORMAT = 3


class ValidationError(LectureDemoError):
    """A required field is missing, blank or out of range (400)."""

    def __init__(
        self, message: str, property_name: str, error_number: ErrorNumber
    ) -> None:
        super().__init__(message)
        self.message = message
        self.property_name = property_name
        self.error_number = error_number


class NotFoundError(LectureDemoError):
    """No forecast is stored under the requested key (404)."""


class SimulatedInternalError(LectureDemoError):
    """Deliberately triggered internal failure used for fault-injection tests."""


# ── Chat model errors ───────────────────────────────────────────────────────


class UpstreamModelError(LectureDemoError):
    """Any error originating from the external chat model."""


class ChatModelNotConfiguredError(UpstreamModelError):
    """The AI settings were missing at startup so no model client exists."""


class LlmCallError(UpstreamModelError):
    """The call to the chat model itself failed."""


class EmptyModelOutputError(UpstreamModelError):
    """The model answered with no text (or only whitespace)."""


class InvalidModelOutputError(UpstreamModelError):
    """The model text is not JSON or does not match the key-phrase schema."""
