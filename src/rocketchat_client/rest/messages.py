"""Chat message operations: send, upload, delete, update.

Each operation builds its request body, performs a single round trip
through the client and decodes the response. Errors from the decoder or
the transport propagate unchanged; nothing is retried.
"""

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO
from urllib.parse import quote

from rocketchat_client.models.message import DeleteResult, Message
from rocketchat_client.models.requests import (
    DeleteMessagePayload,
    PostMessagePayload,
    UpdateMessagePayload,
    UploadDescriptor,
)
from rocketchat_client.rest.decoder import decode_delete_result, decode_message, decode_ok

if TYPE_CHECKING:
    from rocketchat_client.rest.client import RocketChatClient

logger = logging.getLogger(__name__)


async def send_message(
    client: "RocketChatClient",
    room_id: str,
    text: str,
    alias: str | None = None,
    emoji: str | None = None,
    avatar: str | None = None,
) -> Message:
    """Post a message to a room.

    Optional fields are left out of the request when not given. The
    returned Message is exactly what the server sent back, including the
    server-assigned id and the extracted urls, mentions and channels.
    """
    payload = PostMessagePayload(
        room_id=room_id, text=text, alias=alias, emoji=emoji, avatar=avatar
    )
    status_code, body = await client.post_json("chat.postMessage", payload.to_json())
    message = decode_message(status_code, body)
    logger.info("Sent message %s to room %s", message.id, room_id)
    return message


async def upload_file(
    client: "RocketChatClient",
    room_id: str,
    file: str | Path | BinaryIO,
    mime_type: str,
    msg: str | None = None,
    description: str | None = None,
) -> None:
    """Upload a file to a room, optionally with a message and description.

    ``file`` is a path or a binary file handle opened by the caller; a
    handle is read from its current position and left open.

    Returns nothing on success. Raises AuthError on 401 and RequestError on
    any other failed status. Local read failures (e.g. FileNotFoundError)
    propagate unchanged before any request is sent.
    """
    filename, content = await _read_file(file)
    upload = UploadDescriptor(
        room_id=room_id,
        filename=filename,
        content=content,
        mime_type=mime_type,
        msg=msg,
        description=description,
    )

    status_code, body = await client.post_multipart(
        f"rooms.upload/{quote(upload.room_id, safe='')}",
        data=upload.form_fields(),
        files={"file": (upload.filename, upload.content, upload.mime_type)},
    )
    decode_ok(status_code, body)
    logger.info("Uploaded %s (%d bytes) to room %s", upload.filename, len(content), room_id)


async def _read_file(file: str | Path | BinaryIO) -> tuple[str, bytes]:
    """Return ``(filename, content)`` for a path or an open binary handle.

    Reads are sync, so they run in a worker thread.
    """
    if isinstance(file, (str, Path)):
        path = Path(file)
        return path.name, await asyncio.to_thread(path.read_bytes)
    content = await asyncio.to_thread(file.read)
    return Path(str(getattr(file, "name", "upload"))).name, content


async def delete_message(
    client: "RocketChatClient",
    room_id: str,
    msg_id: str,
    as_user: bool = False,
) -> DeleteResult:
    """Delete a message.

    ``as_user`` attributes the deletion to the authenticated user instead
    of performing it with elevated privilege.
    """
    payload = DeleteMessagePayload(room_id=room_id, msg_id=msg_id, as_user=as_user)
    status_code, body = await client.post_json("chat.delete", payload.to_json())
    result = decode_delete_result(status_code, body)
    logger.info("Deleted message %s from room %s", result.id, room_id)
    return result


async def update_message(
    client: "RocketChatClient",
    room_id: str,
    text: str,
    message_id: str,
) -> Message:
    """Replace the text of an existing message and return its updated state."""
    payload = UpdateMessagePayload(room_id=room_id, msg_id=message_id, text=text)
    status_code, body = await client.post_json("chat.update", payload.to_json())
    message = decode_message(status_code, body)
    logger.info("Updated message %s in room %s", message.id, room_id)
    return message
