# =============================================================================
# tools/conversations.py  —  Conversation & Message History Tools
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from core import conversations
from core.client import MessageBirdClient
from tools.logs import log_request, respond
from tools.schemas import READ_ONLY, WRITE, ConversationStatus, Limit, Offset, ReplyType, Url

ConversationId = Annotated[str, Field(description="Conversation ID")]


def register_conversation_tools(mcp: FastMCP, client: MessageBirdClient) -> None:
    """Register conversation tools on ``mcp``, bound to ``client``."""

    @mcp.tool(name="list_conversations", title="List Conversations", annotations=READ_ONLY)
    async def list_conversations(offset: Offset = None, limit: Limit = None):
        """List all conversations. Returns paginated list of conversation threads across all channels."""
        log_request("list_conversations", offset=offset, limit=limit)
        return respond("list_conversations", await conversations.list_conversations(client, offset, limit))

    @mcp.tool(name="get_conversation", title="Get Conversation", annotations=READ_ONLY)
    async def get_conversation(conversation_id: ConversationId):
        """Get details of a specific conversation by its ID."""
        log_request("get_conversation", conversation_id=conversation_id)
        return respond("get_conversation", await conversations.get_conversation(client, conversation_id))

    @mcp.tool(name="update_conversation", title="Update Conversation", annotations=WRITE)
    async def update_conversation(
        conversation_id: ConversationId,
        status: Annotated[ConversationStatus, Field(description="New conversation status")],
    ):
        """Update a conversation (e.g. change status to archived or active)."""
        log_request("update_conversation", conversation_id=conversation_id, status=status)
        result = await conversations.update_conversation(client, conversation_id, status)
        return respond("update_conversation", result)

    @mcp.tool(name="list_conversation_messages", title="List Conversation Messages", annotations=READ_ONLY)
    async def list_conversation_messages(
        conversation_id: ConversationId,
        offset: Offset = None,
        limit: Limit = None,
    ):
        """List all messages in a specific conversation. Returns paginated message history."""
        log_request("list_conversation_messages", conversation_id=conversation_id, offset=offset, limit=limit)
        result = await conversations.list_conversation_messages(client, conversation_id, offset, limit)
        return respond("list_conversation_messages", result)

    @mcp.tool(name="get_message", title="Get Message", annotations=READ_ONLY)
    async def get_message(
        conversation_id: ConversationId,
        message_id: Annotated[str, Field(description="Message ID")],
    ):
        """Get details of a specific message by conversation and message ID."""
        log_request("get_message", conversation_id=conversation_id, message_id=message_id)
        return respond("get_message", await conversations.get_message(client, conversation_id, message_id))

    @mcp.tool(name="reply_to_conversation", title="Reply to Conversation", annotations=WRITE)
    async def reply_to_conversation(
        conversation_id: Annotated[str, Field(description="Conversation ID to reply to")],
        kind: Annotated[ReplyType, Field(alias="type", description="Message type")],
        text: Annotated[Optional[str], Field(description="Text content (required for type=text)")] = None,
        media_url: Annotated[
            Optional[Url], Field(description="Media URL (required for image/video/audio/file types)")
        ] = None,
        caption: Annotated[Optional[str], Field(description="Media caption (for image/video/file)")] = None,
        latitude: Annotated[Optional[float], Field(description="Latitude (required for type=location)")] = None,
        longitude: Annotated[Optional[float], Field(description="Longitude (required for type=location)")] = None,
        channel_id: Annotated[
            Optional[str], Field(description="Channel ID (uses most recent channel if omitted)")
        ] = None,
    ):
        """Send a reply message in an existing conversation. If the conversation is archived, a new one is created."""
        log_request("reply_to_conversation", conversation_id=conversation_id, type=kind, text=text,
                    media_url=media_url, caption=caption, latitude=latitude,
                    longitude=longitude, channel_id=channel_id)
        result = await conversations.reply_to_conversation(
            client,
            conversation_id,
            kind,
            text=text,
            media_url=media_url,
            caption=caption,
            latitude=latitude,
            longitude=longitude,
            channel_id=channel_id,
        )
        return respond("reply_to_conversation", result)

    @mcp.tool(name="list_messages", title="List All Messages", annotations=READ_ONLY)
    async def list_messages(offset: Offset = None, limit: Limit = None):
        """List messages across all conversations. Useful for searching or monitoring all messaging activity."""
        log_request("list_messages", offset=offset, limit=limit)
        return respond("list_messages", await conversations.list_messages(client, offset, limit))
