"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import uuid
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

KEY_PHRASE_COUNT = 3

Phrase = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class KeyPhrases(BaseModel):
    """The structured reply expected from the chat model.

    Used twice: its JSON schema is sent to the model as the required
    response format, and the model's raw text is validated against it.
    """

    model_config = ConfigDict(extra="ignore")

    phrases: list[Phrase] = Field(
        min_length=KEY_PHRASE_COUNT, max_length=KEY_PHRASE_COUNT
    )


def new_forecast_id() -> str:
    """Allocate a fresh opaque forecast key."""
    return str(uuid.uuid4())
