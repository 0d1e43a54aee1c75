# =============================================================================
# tools/messaging.py  —  Send-Message Tools
# =============================================================================
# Six tools, all POST /send on the Conversations API.  Each one validates
# its arguments (via the signature), hands them to core/messaging.py, and
# converts the ToolResult with respond().
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from core import messaging
from core.client import MessageBirdClient
from tools.logs import log_request, respond
from tools.schemas import (
    WRITE,
    ListSectionInput,
    MediaType,
    Recipient,
    ReplyButtonInput,
    Sender,
    Url,
)


def register_messaging_tools(mcp: FastMCP, client: MessageBirdClient) -> None:
    """Register the send_* tools on ``mcp``, bound to ``client``."""

    @mcp.tool(name="send_text", title="Send Text Message", annotations=WRITE)
    async def send_text(
        to: Recipient,
        from_: Sender,
        text: Annotated[str, Field(min_length=1, description="Message text content")],
        disable_url_preview: Annotated[
            Optional[bool], Field(description="Disable URL preview in text messages (default: false)")
        ] = None,
        report_url: Annotated[Optional[str], Field(description="HTTPS URL for delivery status updates")] = None,
    ):
        """Send a WhatsApp text message to a phone number. Use for simple text messages within or outside the 24h window (if template not required)."""
        log_request("send_text", to=to, from_=from_, text=text,
                    disable_url_preview=disable_url_preview, report_url=report_url)
        result = await messaging.send_text(client, to, from_, text, disable_url_preview, report_url)
        return respond("send_text", result)

    @mcp.tool(name="send_media", title="Send Media Message", annotations=WRITE)
    async def send_media(
        to: Recipient,
        from_: Sender,
        media_type: Annotated[MediaType, Field(description="Type of media to send")],
        media_url: Annotated[Url, Field(description="Publicly accessible URL of the media file")],
        caption: Annotated[Optional[str], Field(description="Optional caption (not supported for audio)")] = None,
    ):
        """Send a WhatsApp media message (image, video, audio, or file). Media URL must be publicly accessible."""
        log_request("send_media", to=to, from_=from_, media_type=media_type,
                    media_url=media_url, caption=caption)
        result = await messaging.send_media(client, to, from_, media_type, media_url, caption)
        return respond("send_media", result)

    @mcp.tool(name="send_location", title="Send Location Message", annotations=WRITE)
    async def send_location(
        to: Recipient,
        from_: Sender,
        latitude: Annotated[float, Field(description="Latitude coordinate")],
        longitude: Annotated[float, Field(description="Longitude coordinate")],
        name: Annotated[Optional[str], Field(description="Location name")] = None,
        address: Annotated[Optional[str], Field(description="Location address")] = None,
    ):
        """Send a WhatsApp location message with coordinates."""
        log_request("send_location", to=to, from_=from_, latitude=latitude,
                    longitude=longitude, name=name, address=address)
        result = await messaging.send_location(client, to, from_, latitude, longitude, name, address)
        return respond("send_location", result)

    @mcp.tool(name="send_template", title="Send Template Message", annotations=WRITE)
    async def send_template(
        to: Recipient,
        from_: Sender,
        namespace: Annotated[str, Field(description="Template namespace UUID (from WhatsApp Template Manager)")],
        template_name: Annotated[str, Field(description="Template name (lowercase with underscores)")],
        language_code: Annotated[str, Field(description="Language code (e.g. en, pt_BR, es)")],
        parameters: Annotated[
            Optional[list[str]],
            Field(description="Template body parameter values in order (e.g. ['John', 'Order #123'])"),
        ] = None,
        header_image_url: Annotated[
            Optional[Url], Field(description="Public URL for image header (if template has image header)")
        ] = None,
        header_video_url: Annotated[
            Optional[Url], Field(description="Public URL for video header (if template has video header)")
        ] = None,
        header_document_url: Annotated[
            Optional[Url], Field(description="Public URL for document header (if template has document header)")
        ] = None,
        button_url_suffix: Annotated[
            Optional[str], Field(description="Dynamic suffix for URL button (appended to template URL)")
        ] = None,
    ):
        """Send a WhatsApp template (HSM) message. Required to initiate conversations outside the 24h window. Template must be pre-approved by Meta."""
        log_request("send_template", to=to, from_=from_, namespace=namespace,
                    template_name=template_name, language_code=language_code,
                    parameters=parameters, header_image_url=header_image_url,
                    header_video_url=header_video_url, header_document_url=header_document_url,
                    button_url_suffix=button_url_suffix)
        result = await messaging.send_template(
            client,
            to,
            from_,
            namespace,
            template_name,
            language_code,
            parameters=parameters,
            header_image_url=header_image_url,
            header_video_url=header_video_url,
            header_document_url=header_document_url,
            button_url_suffix=button_url_suffix,
        )
        return respond("send_template", result)

    @mcp.tool(name="send_interactive_buttons", title="Send Interactive Button Message", annotations=WRITE)
    async def send_interactive_buttons(
        to: Recipient,
        from_: Sender,
        body_text: Annotated[str, Field(description="Main message body text")],
        buttons: Annotated[
            list[ReplyButtonInput], Field(min_length=1, max_length=3, description="Reply buttons (1-3)")
        ],
        header_text: Annotated[Optional[str], Field(description="Optional header text")] = None,
        header_image_url: Annotated[Optional[Url], Field(description="Optional header image URL")] = None,
        footer_text: Annotated[Optional[str], Field(description="Optional footer text")] = None,
    ):
        """Send a WhatsApp interactive message with quick reply buttons (max 3 buttons)."""
        log_request("send_interactive_buttons", to=to, from_=from_, body_text=body_text,
                    buttons=len(buttons), header_text=header_text,
                    header_image_url=header_image_url, footer_text=footer_text)
        result = await messaging.send_interactive_buttons(
            client,
            to,
            from_,
            body_text,
            [b.to_core() for b in buttons],
            header_text=header_text,
            header_image_url=header_image_url,
            footer_text=footer_text,
        )
        return respond("send_interactive_buttons", result)

    @mcp.tool(name="send_interactive_list", title="Send Interactive List Message", annotations=WRITE)
    async def send_interactive_list(
        to: Recipient,
        from_: Sender,
        body_text: Annotated[str, Field(description="Main message body text")],
        button_label: Annotated[str, Field(description="Text displayed on the menu trigger button")],
        sections: Annotated[
            list[ListSectionInput], Field(min_length=1, max_length=10, description="Menu sections (1-10)")
        ],
        header_text: Annotated[Optional[str], Field(description="Optional header text")] = None,
        footer_text: Annotated[Optional[str], Field(description="Optional footer text")] = None,
    ):
        """Send a WhatsApp interactive list message with selectable menu options organized in sections."""
        log_request("send_interactive_list", to=to, from_=from_, body_text=body_text,
                    button_label=button_label, sections=len(sections),
                    header_text=header_text, footer_text=footer_text)
        result = await messaging.send_interactive_list(
            client,
            to,
            from_,
            body_text,
            button_label,
            [s.to_core() for s in sections],
            header_text=header_text,
            footer_text=footer_text,
        )
        return respond("send_interactive_list", result)
