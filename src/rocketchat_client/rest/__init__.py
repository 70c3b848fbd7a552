"""REST transport, response decoding and chat operations."""

from rocketchat_client.rest.client import (
    RocketChatClient,
    close_client,
    get_rocketchat_client,
    reset_client,
)
from rocketchat_client.rest.decoder import (
    decode_delete_result,
    decode_message,
    decode_ok,
    decode_response,
)
from rocketchat_client.rest.messages import (
    delete_message,
    send_message,
    update_message,
    upload_file,
)

__all__ = [
    "RocketChatClient",
    "close_client",
    "decode_delete_result",
    "decode_message",
    "decode_ok",
    "decode_response",
    "delete_message",
    "get_rocketchat_client",
    "reset_client",
    "send_message",
    "update_message",
    "upload_file",
]
