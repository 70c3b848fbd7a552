"""Token repositories supplying credentials to the REST client.

The client only ever calls ``get()``; storing and rotating tokens is the
repository's business.
"""

from typing import Protocol, runtime_checkable

from rocketchat_client.config import get_settings
from rocketchat_client.models.token import Token


@runtime_checkable
class TokenRepository(Protocol):
    """Anything that can hand out the current token, or None when logged out."""

    def get(self) -> Token | None: ...


class InMemoryTokenRepository:
    """Holds a single token in memory. Useful after an explicit login."""

    def __init__(self, token: Token | None = None):
        self._token = token

    def get(self) -> Token | None:
        return self._token

    def save(self, token: Token) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class SettingsTokenRepository:
    """Reads the token from ``rocketchat_user_id``/``rocketchat_auth_token`` settings.

    Settings are read on every call so a refreshed cache is picked up.
    Returns None unless both values are configured.
    """

    def get(self) -> Token | None:
        settings = get_settings()
        if not settings.rocketchat_user_id or not settings.rocketchat_auth_token:
            return None
        return Token(
            user_id=settings.rocketchat_user_id,
            auth_token=settings.rocketchat_auth_token,
        )
