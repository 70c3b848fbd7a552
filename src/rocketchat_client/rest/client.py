"""Async REST client with an injected token repository.

Wraps an ``httpx.AsyncClient``: each call reads the current token, performs
one POST round trip and returns ``(status_code, body)`` for the decoder.
Connection failures, timeouts, undecodable content encodings and redirect
loops become ``TransportError``.

A cached default instance built from settings is available through
``get_rocketchat_client()``, following the lazy-init pattern used for the
other service clients.
"""

import logging
from pathlib import Path
from typing import Any, BinaryIO

import httpx

from rocketchat_client.config import get_settings
from rocketchat_client.errors import TransportError
from rocketchat_client.models.message import DeleteResult, Message
from rocketchat_client.rest import messages
from rocketchat_client.tokens import SettingsTokenRepository, TokenRepository

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1/"


class RocketChatClient:
    """Entry point for the chat REST API."""

    def __init__(
        self,
        rest_url: str,
        token_repository: TokenRepository,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self.rest_url = rest_url.rstrip("/") + "/"
        self.token_repository = token_repository
        self.timeout = timeout
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @classmethod
    def from_settings(
        cls,
        token_repository: TokenRepository | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "RocketChatClient":
        """Build a client from ``rocketchat_url`` and ``request_timeout`` settings.

        Defaults to reading credentials from settings as well.
        """
        settings = get_settings()
        return cls(
            rest_url=settings.rocketchat_url,
            token_repository=token_repository or SettingsTokenRepository(),
            http_client=http_client,
            timeout=settings.request_timeout,
        )

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._http_client

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "RocketChatClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def url_for(self, path: str) -> str:
        """Return the absolute URL of an API method, e.g. ``chat.delete``."""
        return self.rest_url + API_PREFIX.lstrip("/") + path.lstrip("/")

    def auth_headers(self) -> dict[str, str]:
        """Headers for the current token; empty when logged out.

        The token is fetched on every call and never cached here.
        """
        token = self.token_repository.get()
        if token is None:
            logger.debug("No token available, sending unauthenticated request")
            return {}
        return token.to_headers()

    async def post_json(self, path: str, payload: dict) -> tuple[int, Any]:
        """POST a JSON body and return ``(status_code, body)``."""
        return await self._post(path, json=payload)

    async def post_multipart(
        self,
        path: str,
        data: dict[str, str],
        files: dict[str, tuple[str, bytes, str]],
    ) -> tuple[int, Any]:
        """POST a multipart form and return ``(status_code, body)``."""
        return await self._post(path, data=data, files=files)

    async def _post(self, path: str, **kwargs) -> tuple[int, Any]:
        url = self.url_for(path)
        try:
            response = await self.http_client.post(url, headers=self.auth_headers(), **kwargs)
        except httpx.RequestError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise TransportError(f"Could not reach {url}: {exc}") from exc

        logger.debug("POST %s -> %d", url, response.status_code)
        return response.status_code, _parse_body(response)

    # Chat operations

    async def send_message(
        self,
        room_id: str,
        text: str,
        alias: str | None = None,
        emoji: str | None = None,
        avatar: str | None = None,
    ) -> Message:
        return await messages.send_message(
            self, room_id=room_id, text=text, alias=alias, emoji=emoji, avatar=avatar
        )

    async def upload_file(
        self,
        room_id: str,
        file: str | Path | BinaryIO,
        mime_type: str,
        msg: str | None = None,
        description: str | None = None,
    ) -> None:
        await messages.upload_file(
            self,
            room_id=room_id,
            file=file,
            mime_type=mime_type,
            msg=msg,
            description=description,
        )

    async def delete_message(self, room_id: str, msg_id: str, as_user: bool = False) -> DeleteResult:
        return await messages.delete_message(self, room_id=room_id, msg_id=msg_id, as_user=as_user)

    async def update_message(self, room_id: str, text: str, message_id: str) -> Message:
        return await messages.update_message(
            self, room_id=room_id, text=text, message_id=message_id
        )


def _parse_body(response: httpx.Response) -> Any:
    """Return the JSON body, or the raw text when the body is not JSON."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


_client: RocketChatClient | None = None


def get_rocketchat_client() -> RocketChatClient:
    """Return a cached client instance configured from settings.

    Creates the client on first call. Subsequent calls return the cached
    instance.
    """
    global _client
    if _client is None:
        _client = RocketChatClient.from_settings()
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None


async def close_client() -> None:
    """Close the cached client's connections, then reset it."""
    global _client
    if _client is not None:
        await _client.aclose()
    _client = None
