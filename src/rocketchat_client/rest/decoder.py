"""Response decoder: (status code, body) -> typed model or typed error.

Pure transform with no I/O. The REST client hands every response here;
the decoder decides between success and one of the ``RocketChatError``
kinds, then validates the success payload with pydantic.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from rocketchat_client.errors import AuthError, DecodeError, RequestError
from rocketchat_client.models.message import DeleteResult, Message

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Error texts the server uses for an unauthenticated caller
AUTH_ERROR_MESSAGES = frozenset(
    {
        "You must be logged in to do this.",
        "You must be logged in to do this",
        "Unauthorized",
    }
)

_MAX_TEXT_ERROR = 200


def error_message(body: Any) -> str | None:
    """Extract the server-provided error text from a response body.

    Rocket.Chat uses ``error`` for application errors and ``message`` for
    framework-level ones (``{"status": "error", "message": ...}``). Plain
    text bodies (proxies, HTML error pages) are truncated.
    """
    if isinstance(body, dict):
        for key in ("error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
        return None
    if isinstance(body, str) and body.strip():
        return body.strip()[:_MAX_TEXT_ERROR]
    return None


def is_auth_failure(status_code: int, body: Any) -> bool:
    """Return True for a 401 or a body saying the caller is not logged in."""
    if status_code == 401:
        return True
    return isinstance(body, dict) and error_message(body) in AUTH_ERROR_MESSAGES


def raise_for_error(status_code: int, body: Any) -> None:
    """Raise the matching error for a failed response; return for success.

    A 2xx envelope with ``success: false`` counts as a failure.
    """
    if is_auth_failure(status_code, body):
        raise AuthError(error_message(body) or "Unauthorized", status_code=status_code, body=body)
    if not 200 <= status_code < 300:
        raise RequestError(status_code, error_message(body), body=body)
    if isinstance(body, dict) and body.get("success") is False:
        raise RequestError(status_code, error_message(body), body=body)


def decode_response(
    status_code: int,
    body: Any,
    model: type[ModelT] | None = None,
    key: str | None = None,
) -> ModelT | None:
    """Decode a response into ``model`` or raise a typed error.

    Args:
        status_code: HTTP status of the response.
        body: Parsed JSON body, or the raw text when it was not JSON.
        model: Expected success shape. None means the caller only cares
            that the call succeeded.
        key: Envelope key holding the object (e.g. ``"message"``). None
            validates the whole body.

    Raises:
        AuthError: 401 or a "must be logged in" body.
        RequestError: Any other non-success status, or ``success: false``.
        DecodeError: 2xx body that does not match ``model``.
    """
    raise_for_error(status_code, body)
    if model is None:
        return None

    if not isinstance(body, dict):
        raise DecodeError(f"Expected a JSON object for {model.__name__}, got {type(body).__name__}")

    payload = body
    if key is not None:
        if key not in body:
            raise DecodeError(f"Response envelope has no '{key}' field")
        payload = body[key]

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Failed to decode %s: %s", model.__name__, exc.errors())
        raise DecodeError(f"Invalid {model.__name__} payload: {exc}") from exc


def decode_message(status_code: int, body: Any) -> Message:
    """Decode a chat.postMessage / chat.update envelope."""
    return decode_response(status_code, body, Message, key="message")


def decode_delete_result(status_code: int, body: Any) -> DeleteResult:
    """Decode a chat.delete response."""
    return decode_response(status_code, body, DeleteResult)


def decode_ok(status_code: int, body: Any) -> None:
    """Check a response that carries no payload the client consumes."""
    decode_response(status_code, body)
