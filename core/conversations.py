# =============================================================================
# core/conversations.py  —  Conversation Threads & Message History
# =============================================================================
#
# Reads and updates conversations on the Conversations API, and replies
# inside an existing thread.
#
# NOTE ON ARCHIVED CONVERSATIONS:
#   Replying to an archived conversation makes MessageBird open a new one.
#   That is provider behavior; reply_to_conversation sends the same request
#   either way.
# =============================================================================

from typing import Any, Optional

from core.client import MessageBirdClient, path_segment
from core.messaging import MEDIA_TYPES, location_content, media_content
from core.models import ToolResult
from core.results import InvalidToolInput, run_tool


def _conversation_path(conversation_id: str, *rest: str) -> str:
    parts = ["conversations", path_segment(conversation_id), *(path_segment(p) for p in rest)]
    return "/" + "/".join(parts)


def _page(offset: Optional[str], limit: Optional[str]) -> dict[str, Optional[str]]:
    return {"offset": offset, "limit": limit}


# -----------------------------------------------------------------------------
# Reply content — one builder per variant
# -----------------------------------------------------------------------------
def reply_content(
    kind: str,
    text: Optional[str] = None,
    media_url: Optional[str] = None,
    caption: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> dict[str, Any]:
    """Build the ``content`` object of a conversation reply.

    Raises:
        InvalidToolInput: For an unknown type, a media type without a URL,
                          or a location without both coordinates.
    """
    if kind == "text":
        return {"text": text or ""}
    if kind in MEDIA_TYPES:
        if not media_url:
            raise InvalidToolInput(f"media_url is required for type={kind}")
        return media_content(kind, media_url, caption)
    if kind == "location":
        if latitude is None or longitude is None:
            raise InvalidToolInput("latitude and longitude are required for type=location")
        return location_content(latitude, longitude)
    raise InvalidToolInput(f"Unsupported message type: {kind}")


def reply_body(kind: str, content: dict[str, Any], channel_id: Optional[str] = None) -> dict[str, Any]:
    body: dict[str, Any] = {"type": kind, "content": content}
    if channel_id:
        body["channelId"] = channel_id
    return body


# -----------------------------------------------------------------------------
# Handlers
# -----------------------------------------------------------------------------
async def list_conversations(
    client: MessageBirdClient,
    offset: Optional[str] = None,
    limit: Optional[str] = None,
) -> ToolResult:
    async def operation():
        return await client.request("/conversations", "GET", None, _page(offset, limit))

    return await run_tool("Failed to list conversations", operation)


async def get_conversation(client: MessageBirdClient, conversation_id: str) -> ToolResult:
    async def operation():
        return await client.request(_conversation_path(conversation_id))

    return await run_tool("Failed to get conversation", operation)


async def update_conversation(client: MessageBirdClient, conversation_id: str, status: str) -> ToolResult:
    async def operation():
        return await client.request(_conversation_path(conversation_id), "PATCH", {"status": status})

    return await run_tool("Failed to update conversation", operation)


async def list_conversation_messages(
    client: MessageBirdClient,
    conversation_id: str,
    offset: Optional[str] = None,
    limit: Optional[str] = None,
) -> ToolResult:
    async def operation():
        return await client.request(
            _conversation_path(conversation_id, "messages"),
            "GET",
            None,
            _page(offset, limit),
        )

    return await run_tool("Failed to list messages", operation)


async def get_message(client: MessageBirdClient, conversation_id: str, message_id: str) -> ToolResult:
    async def operation():
        return await client.request(_conversation_path(conversation_id, "messages", message_id))

    return await run_tool("Failed to get message", operation)


async def reply_to_conversation(
    client: MessageBirdClient,
    conversation_id: str,
    kind: str,
    text: Optional[str] = None,
    media_url: Optional[str] = None,
    caption: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    channel_id: Optional[str] = None,
) -> ToolResult:
    async def operation():
        content = reply_content(kind, text, media_url, caption, latitude, longitude)
        return await client.request(
            _conversation_path(conversation_id, "messages"),
            "POST",
            reply_body(kind, content, channel_id),
        )

    return await run_tool("Failed to reply to conversation", operation)


async def list_messages(
    client: MessageBirdClient,
    offset: Optional[str] = None,
    limit: Optional[str] = None,
) -> ToolResult:
    async def operation():
        return await client.request("/messages", "GET", None, _page(offset, limit))

    return await run_tool("Failed to list messages", operation)
