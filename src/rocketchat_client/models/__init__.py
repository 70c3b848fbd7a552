"""Data models for the chat REST client."""

from rocketchat_client.models.common import SimpleRoom, SimpleUser, Url
from rocketchat_client.models.message import DeleteResult, Message
from rocketchat_client.models.requests import (
    DeleteMessagePayload,
    PostMessagePayload,
    UpdateMessagePayload,
    UploadDescriptor,
)
from rocketchat_client.models.token import Token

__all__ = [
    "Token",
    "SimpleUser",
    "SimpleRoom",
    "Url",
    "Message",
    "DeleteResult",
    "PostMessagePayload",
    "DeleteMessagePayload",
    "UpdateMessagePayload",
    "UploadDescriptor",
]
