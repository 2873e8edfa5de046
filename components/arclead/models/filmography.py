from typing import Any

from pydantic import BaseModel, ConfigDict


class Filmography(BaseModel):
    """Credits per category. Entries are whatever the admin tool sends."""

    model_config = ConfigDict(extra="allow")

    dramas: list[Any] = []
    movies: list[Any] = []
    commercials: list[Any] = []

    def document(self) -> dict[str, Any]:
        # Only what the client sent, so a stored document reads back unchanged
        return self.model_dump(exclude_unset=True)
