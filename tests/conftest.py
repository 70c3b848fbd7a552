"""Shared test fixtures: mock chat server, client and canned payloads."""

import copy

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from rocketchat_client.models.token import Token
from rocketchat_client.rest.client import RocketChatClient
from rocketchat_client.tokens import InMemoryTokenRepository

MOCK_SERVER_URL = "http://mockserver/"

MESSAGE_TEXT = (
    "Sending message from SDK to #general and @here with url "
    "https://github.com/RocketChat/Rocket.Chat.Kotlin.SDK/"
)
AVATAR_URL = "https://avatars2.githubusercontent.com/u/224255?s=88&v=4"

SEND_MESSAGE_OK = {
    "ts": 1511443964798,
    "channel": "general",
    "message": {
        "alias": "TestingAlias",
        "msg": MESSAGE_TEXT,
        "parseUrls": True,
        "groupable": False,
        "avatar": AVATAR_URL,
        "emoji": ":smirk:",
        "ts": 1511443964798,
        "u": {"_id": "userId", "username": "testuser", "name": "testuser"},
        "rid": "GENERAL",
        "mentions": [{"_id": "here", "username": "here"}],
        "channels": [{"_id": "GENERAL", "name": "general"}],
        "urls": [{"url": "https://github.com/RocketChat/Rocket.Chat.Kotlin.SDK/"}],
        "_updatedAt": 1511443964808,
        "_id": "messageId",
    },
    "success": True,
}

SEND_MESSAGE_OK_UPDATED = {
    "message": {
        "alias": "TestingAlias",
        "msg": "Updating a message previously sent to #general",
        "parseUrls": True,
        "groupable": False,
        "avatar": AVATAR_URL,
        "emoji": ":smirk:",
        "ts": 1511443964798,
        "u": {"_id": "userId", "username": "testuser", "name": "testuser"},
        "rid": "GENERAL",
        "channels": [{"_id": "GENERAL", "name": "general"}],
        "_updatedAt": 1511443964808,
        "editedAt": {"$date": 1511443970012},
        "editedBy": {"_id": "userId", "username": "testuser"},
        "_id": "messageId",
    },
    "success": True,
}

DELETE_MESSAGE_OK = {"_id": "messageId", "ts": 1511443964815, "success": True}

SUCCESS = {"success": True}

MUST_BE_LOGGED_ERROR = {"status": "error", "message": "You must be logged in to do this."}


class MockServer:
    """Programmable chat server served in-process through ASGI.

    Expectations are matched on method and path and consumed once.
    Unexpected requests get a 404. Every request is recorded.
    """

    def __init__(self):
        self.expectations: list[tuple[str, str, int, object]] = []
        self.requests: list[dict] = []
        self.app = FastAPI()
        self.app.add_api_route(
            "/{path:path}", self._handle, methods=["GET", "POST", "PUT", "DELETE"]
        )

    def expect(self, method: str, path: str, status_code: int, body: object) -> None:
        self.expectations.append((method.upper(), path, status_code, copy.deepcopy(body)))

    async def _handle(self, path: str, request: Request) -> Response:
        self.requests.append(
            {
                "method": request.method,
                "path": request.url.path,
                "raw_path": request.scope.get("raw_path", b"").decode(),
                "headers": dict(request.headers),
                "body": await request.body(),
            }
        )
        for index, (method, expected_path, status_code, body) in enumerate(self.expectations):
            if method == request.method and expected_path == request.url.path:
                del self.expectations[index]
                if isinstance(body, str):
                    return PlainTextResponse(body, status_code=status_code)
                return JSONResponse(body, status_code=status_code)
        return JSONResponse({"success": False, "error": "Not found"}, status_code=404)

    @property
    def last_request(self) -> dict:
        return self.requests[-1]


@pytest.fixture
def auth_token() -> Token:
    return Token(user_id="userId", auth_token="authToken")


@pytest.fixture
def token_repository(auth_token: Token) -> InMemoryTokenRepository:
    return InMemoryTokenRepository(auth_token)


@pytest.fixture
def mock_server() -> MockServer:
    return MockServer()


@pytest.fixture
async def client(mock_server: MockServer, token_repository: InMemoryTokenRepository):
    """RocketChatClient wired to the mock server."""
    http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=mock_server.app))
    sut = RocketChatClient(
        rest_url=MOCK_SERVER_URL,
        token_repository=token_repository,
        http_client=http_client,
    )
    yield sut
    await http_client.aclose()


@pytest.fixture
def send_message_ok() -> dict:
    return copy.deepcopy(SEND_MESSAGE_OK)


@pytest.fixture
def send_message_ok_updated() -> dict:
    return copy.deepcopy(SEND_MESSAGE_OK_UPDATED)


@pytest.fixture
def delete_message_ok() -> dict:
    return copy.deepcopy(DELETE_MESSAGE_OK)


@pytest.fixture
def success_body() -> dict:
    return copy.deepcopy(SUCCESS)


@pytest.fixture
def must_be_logged_error() -> dict:
    return copy.deepcopy(MUST_BE_LOGGED_ERROR)
