"""Request bodies for the chat endpoints.

Separate from the response models since these are never decoded from the
server; they only shape what the client sends.
"""

from pydantic import BaseModel, ConfigDict, Field


class RequestPayload(BaseModel):
    """Base for JSON request bodies."""

    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> dict:
        """Serialize with wire names, omitting optional fields that were not given."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PostMessagePayload(RequestPayload):
    """Body of chat.postMessage."""

    room_id: str = Field(alias="roomId")
    text: str
    alias: str | None = None
    emoji: str | None = None
    avatar: str | None = None


class DeleteMessagePayload(RequestPayload):
    """Body of chat.delete."""

    room_id: str = Field(alias="roomId")
    msg_id: str = Field(alias="msgId")
    as_user: bool = Field(default=False, alias="asUser")


class UpdateMessagePayload(RequestPayload):
    """Body of chat.update."""

    room_id: str = Field(alias="roomId")
    msg_id: str = Field(alias="msgId")
    text: str


class UploadDescriptor(BaseModel):
    """A file upload to rooms.upload. Request-only, never persisted."""

    room_id: str
    filename: str
    content: bytes
    mime_type: str
    msg: str | None = None
    description: str | None = None

    def form_fields(self) -> dict[str, str]:
        """Return the non-file multipart fields that were provided."""
        fields = {"msg": self.msg, "description": self.description}
        return {key: value for key, value in fields.items() if value is not None}
