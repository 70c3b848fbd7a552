"""Message and delete result models decoded from chat endpoints."""

from pydantic import AliasChoices, Field

from rocketchat_client.models.common import SimpleRoom, SimpleUser, Timestamp, Url, WireModel


class Message(WireModel):
    """A chat message as returned by chat.postMessage and chat.update.

    The server is authoritative for ``id``, timestamps and the derived
    ``urls``/``mentions``/``channels`` lists. Those lists are ``None`` when
    the server did not evaluate them for this message and ``[]`` when it
    did but found nothing.
    """

    id: str = Field(alias="_id")
    room_id: str = Field(alias="rid")
    message: str = Field(alias="msg")
    timestamp: Timestamp = Field(alias="ts")
    updated_at: Timestamp = Field(alias="_updatedAt")
    sender: SimpleUser = Field(alias="u")
    sender_alias: str | None = Field(default=None, alias="alias")
    avatar: str | None = None
    emoji: str | None = None
    message_type: str | None = Field(default=None, alias="t")
    parse_urls: bool = Field(default=False, alias="parseUrls")
    groupable: bool = False
    urls: list[Url] | None = None
    mentions: list[SimpleUser] | None = None
    channels: list[SimpleRoom] | None = None
    edited_at: Timestamp | None = Field(default=None, alias="editedAt")
    edited_by: SimpleUser | None = Field(default=None, alias="editedBy")

    @property
    def is_edited(self) -> bool:
        return self.edited_at is not None


class DeleteResult(WireModel):
    """Returned by chat.delete."""

    id: str = Field(alias="_id", validation_alias=AliasChoices("_id", "id"))
    timestamp: Timestamp = Field(alias="ts")
    success: bool
