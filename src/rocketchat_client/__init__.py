"""Async client for the Rocket.Chat REST API."""

from rocketchat_client.errors import (
    AuthError,
    DecodeError,
    RequestError,
    RocketChatError,
    TransportError,
)
from rocketchat_client.models import DeleteResult, Message, SimpleRoom, SimpleUser, Token, Url
from rocketchat_client.rest import RocketChatClient
from rocketchat_client.tokens import InMemoryTokenRepository, SettingsTokenRepository, TokenRepository

__version__ = "0.1.0"

__all__ = [
    "AuthError",
    "DecodeError",
    "DeleteResult",
    "InMemoryTokenRepository",
    "Message",
    "RequestError",
    "RocketChatClient",
    "RocketChatError",
    "SettingsTokenRepository",
    "SimpleRoom",
    "SimpleUser",
    "Token",
    "TokenRepository",
    "TransportError",
    "Url",
]
