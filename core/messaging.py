# =============================================================================
# core/messaging.py  —  Outbound WhatsApp Messages (POST /send)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds the nested JSON bodies MessageBird's /send endpoint expects and
#   dispatches them.  Every message shares the same envelope:
#
#       {"to": ..., "from": ..., "type": <kind>, "content": {...}}
#
#   Only "content" differs per kind, so there is one builder per kind.  Each
#   builder returns a complete, fresh dict; nothing is patched in afterwards.
#
# TEMPLATE (HSM) MESSAGES:
#   Two wire shapes exist and are never mixed:
#     - "params":     ordered body values, for plain text templates
#     - "components": typed header/body/button blocks, used as soon as a
#                     media header or a URL button suffix is requested
# =============================================================================

from typing import Any, Optional, Sequence

from core.client import MessageBirdClient
from core.models import ListSection, ReplyButton, ToolResult
from core.results import InvalidToolInput, run_tool


MEDIA_TYPES = ("image", "video", "audio", "file")

# Captions are accepted by every media kind except audio.
_CAPTIONLESS = {"audio"}

# First present wins, in this order.
HEADER_MEDIA_ORDER = ("image", "video", "document")


# -----------------------------------------------------------------------------
# Content builders
# -----------------------------------------------------------------------------
def message_envelope(to: str, sender: str, kind: str, content: dict[str, Any]) -> dict[str, Any]:
    return {"to": to, "from": sender, "type": kind, "content": content}


def text_content(text: str, disable_url_preview: Optional[bool] = None) -> dict[str, Any]:
    content: dict[str, Any] = {"text": text}
    if disable_url_preview is not None:
        content["disableUrlPreview"] = disable_url_preview
    return content


def media_content(media_type: str, url: str, caption: Optional[str] = None) -> dict[str, Any]:
    """Build ``{<media_type>: {"url": ..., "caption": ...}}``.

    The caption is dropped for audio, and when empty.
    """
    if media_type not in MEDIA_TYPES:
        raise InvalidToolInput(f"Unsupported media type: {media_type}")
    media: dict[str, Any] = {"url": url}
    if caption and media_type not in _CAPTIONLESS:
        media["caption"] = caption
    return {media_type: media}


def location_content(
    latitude: float,
    longitude: float,
    name: Optional[str] = None,
    address: Optional[str] = None,
) -> dict[str, Any]:
    location: dict[str, Any] = {"latitude": latitude, "longitude": longitude}
    if name:
        location["name"] = name
    if address:
        location["address"] = address
    return {"location": location}


def text_message(
    to: str,
    sender: str,
    text: str,
    disable_url_preview: Optional[bool] = None,
    report_url: Optional[str] = None,
) -> dict[str, Any]:
    body = message_envelope(to, sender, "text", text_content(text, disable_url_preview))
    if report_url:
        body["reportUrl"] = report_url
    return body


def media_message(
    to: str,
    sender: str,
    media_type: str,
    media_url: str,
    caption: Optional[str] = None,
) -> dict[str, Any]:
    return message_envelope(to, sender, media_type, media_content(media_type, media_url, caption))


def location_message(
    to: str,
    sender: str,
    latitude: float,
    longitude: float,
    name: Optional[str] = None,
    address: Optional[str] = None,
) -> dict[str, Any]:
    return message_envelope(to, sender, "location", location_content(latitude, longitude, name, address))


# -----------------------------------------------------------------------------
# Template (HSM) builders
# -----------------------------------------------------------------------------
def _header_component(kind: str, url: str) -> dict[str, Any]:
    return {"type": "header", "parameters": [{"type": kind, kind: {"url": url}}]}


def _body_component(parameters: Sequence[str]) -> dict[str, Any]:
    return {"type": "body", "parameters": [{"type": "text", "text": p} for p in parameters]}


def _url_button_component(suffix: str) -> dict[str, Any]:
    return {
        "type": "button",
        "sub_type": "url",
        "parameters": [{"type": "text", "text": suffix}],
    }


def hsm_content(
    namespace: str,
    template_name: str,
    language_code: str,
    parameters: Optional[Sequence[str]] = None,
    header_image_url: Optional[str] = None,
    header_video_url: Optional[str] = None,
    header_document_url: Optional[str] = None,
    button_url_suffix: Optional[str] = None,
) -> dict[str, Any]:
    """Assemble the ``hsm`` object of a template message.

    Returns a dict carrying either ``params`` or ``components``, never both.
    Header media is picked in image → video → document order.
    """
    hsm: dict[str, Any] = {
        "namespace": namespace,
        "templateName": template_name,
        "language": {"policy": "deterministic", "code": language_code},
    }
    values = list(parameters or [])

    header_urls = dict(zip(HEADER_MEDIA_ORDER, (header_image_url, header_video_url, header_document_url)))
    header = next(((kind, url) for kind, url in header_urls.items() if url), None)

    if header is None and not button_url_suffix:
        if values:
            hsm["params"] = [{"default": p} for p in values]
        return hsm

    components: list[dict[str, Any]] = []
    if header is not None:
        components.append(_header_component(*header))
    if values:
        components.append(_body_component(values))
    if button_url_suffix:
        components.append(_url_button_component(button_url_suffix))
    hsm["components"] = components
    return hsm


def template_message(to: str, sender: str, hsm: dict[str, Any]) -> dict[str, Any]:
    return message_envelope(to, sender, "hsm", {"hsm": hsm})


# -----------------------------------------------------------------------------
# Interactive builders
# -----------------------------------------------------------------------------
def buttons_interactive(
    body_text: str,
    buttons: Sequence[ReplyButton],
    header_text: Optional[str] = None,
    header_image_url: Optional[str] = None,
    footer_text: Optional[str] = None,
) -> dict[str, Any]:
    interactive: dict[str, Any] = {
        "type": "button",
        "body": {"text": body_text},
        "action": {
            "buttons": [{"id": b.id, "type": "reply", "title": b.title} for b in buttons],
        },
    }
    # Text header is checked first; the two are mutually exclusive.
    if header_text:
        interactive["header"] = {"type": "text", "text": header_text}
    elif header_image_url:
        interactive["header"] = {"type": "image", "image": {"url": header_image_url}}
    if footer_text:
        interactive["footer"] = {"text": footer_text}
    return interactive


def _section_payload(section: ListSection) -> dict[str, Any]:
    rows = []
    for row in section.rows:
        entry: dict[str, Any] = {"id": row.id, "title": row.title}
        if row.description is not None:
            entry["description"] = row.description
        rows.append(entry)
    return {"title": section.title, "rows": rows}


def list_interactive(
    body_text: str,
    button_label: str,
    sections: Sequence[ListSection],
    header_text: Optional[str] = None,
    footer_text: Optional[str] = None,
) -> dict[str, Any]:
    interactive: dict[str, Any] = {
        "type": "list",
        "body": {"text": body_text},
        "action": {
            "button": button_label,
            "sections": [_section_payload(s) for s in sections],
        },
    }
    if header_text:
        interactive["header"] = {"type": "text", "text": header_text}
    if footer_text:
        interactive["footer"] = {"text": footer_text}
    return interactive


def interactive_message(to: str, sender: str, interactive: dict[str, Any]) -> dict[str, Any]:
    return message_envelope(to, sender, "interactive", {"interactive": interactive})


# -----------------------------------------------------------------------------
# Handlers
# -----------------------------------------------------------------------------
async def _send(client: MessageBirdClient, body: dict[str, Any]) -> Any:
    return await client.request("/send", "POST", body)


async def send_text(
    client: MessageBirdClient,
    to: str,
    sender: str,
    text: str,
    disable_url_preview: Optional[bool] = None,
    report_url: Optional[str] = None,
) -> ToolResult:
    async def operation():
        return await _send(client, text_message(to, sender, text, disable_url_preview, report_url))

    return await run_tool("Failed to send text message", operation)


async def send_media(
    client: MessageBirdClient,
    to: str,
    sender: str,
    media_type: str,
    media_url: str,
    caption: Optional[str] = None,
) -> ToolResult:
    async def operation():
        return await _send(client, media_message(to, sender, media_type, media_url, caption))

    return await run_tool("Failed to send media message", operation)


async def send_location(
    client: MessageBirdClient,
    to: str,
    sender: str,
    latitude: float,
    longitude: float,
    name: Optional[str] = None,
    address: Optional[str] = None,
) -> ToolResult:
    async def operation():
        return await _send(client, location_message(to, sender, latitude, longitude, name, address))

    return await run_tool("Failed to send location", operation)


async def send_template(
    client: MessageBirdClient,
    to: str,
    sender: str,
    namespace: str,
    template_name: str,
    language_code: str,
    parameters: Optional[Sequence[str]] = None,
    header_image_url: Optional[str] = None,
    header_video_url: Optional[str] = None,
    header_document_url: Optional[str] = None,
    button_url_suffix: Optional[str] = None,
) -> ToolResult:
    async def operation():
        hsm = hsm_content(
            namespace,
            template_name,
            language_code,
            parameters=parameters,
            header_image_url=header_image_url,
            header_video_url=header_video_url,
            header_document_url=header_document_url,
            button_url_suffix=button_url_suffix,
        )
        return await _send(client, template_message(to, sender, hsm))

    return await run_tool("Failed to send template message", operation)


async def send_interactive_buttons(
    client: MessageBirdClient,
    to: str,
    sender: str,
    body_text: str,
    buttons: Sequence[ReplyButton],
    header_text: Optional[str] = None,
    header_image_url: Optional[str] = None,
    footer_text: Optional[str] = None,
) -> ToolResult:
    async def operation():
        interactive = buttons_interactive(body_text, buttons, header_text, header_image_url, footer_text)
        return await _send(client, interactive_message(to, sender, interactive))

    return await run_tool("Failed to send interactive buttons", operation)


async def send_interactive_list(
    client: MessageBirdClient,
    to: str,
    sender: str,
    body_text: str,
    button_label: str,
    sections: Sequence[ListSection],
    header_text: Optional[str] = None,
    footer_text: Optional[str] = None,
) -> ToolResult:
    async def operation():
        interactive = list_interactive(body_text, button_label, sections, header_text, footer_text)
        return await _send(client, interactive_message(to, sender, interactive))

    return await run_tool("Failed to send interactive list", operation)
