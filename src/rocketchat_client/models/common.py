"""Shared reference models and timestamp parsing."""

from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# Pseudo-users addressed by @here / @all mentions
BROADCAST_USER_IDS = frozenset({"here", "all"})

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: Any) -> Any:
    """Normalize a wire timestamp to integer epoch milliseconds.

    Accepts plain integers, the Mongo-style ``{"$date": <millis>}`` wrapper
    and ISO-8601 strings. Anything else is passed through for pydantic to
    reject.
    """
    if isinstance(value, dict) and "$date" in value:
        value = value["$date"]
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return (parsed - _EPOCH) // timedelta(milliseconds=1)
    return value


Timestamp = Annotated[int, BeforeValidator(parse_timestamp)]


class WireModel(BaseModel):
    """Base for models decoded from server payloads."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        """Re-encode into the wire shape, keeping only fields present on decode."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class SimpleUser(WireModel):
    """User reference: a message sender, editor or mention."""

    id: str = Field(alias="_id")
    username: str | None = None
    name: str | None = None

    @property
    def is_broadcast(self) -> bool:
        return self.id in BROADCAST_USER_IDS


class SimpleRoom(WireModel):
    """Channel reference resolved by the server from a #mention."""

    id: str = Field(alias="_id")
    name: str | None = None


class Url(WireModel):
    """A URL extracted from a message body by the server."""

    url: str
