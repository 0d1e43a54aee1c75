# =============================================================================
# core/templates.py  —  WhatsApp Template Management (Integrations API)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Lists, reads, creates, updates and deletes WhatsApp message templates.
#   Reads and deletes use the v3 endpoints; create and update use v2.
#
# TEMPLATE CREATION:
#   The components array is assembled in a fixed order:
#
#       HEADER (optional) → BODY (required) → FOOTER (optional) → BUTTONS (optional)
#
#   Meta reviews new templates against example values, so the body carries
#   its examples and URL buttons with a {{n}} placeholder get a synthetic
#   example URL.
# =============================================================================

import json
import re
from typing import Any, Optional, Sequence

from core.client import MessageBirdClient, path_segment
from core.models import ApiTarget, ToolResult
from core.results import InvalidToolInput, run_tool


V3_TEMPLATES = "/v3/platforms/whatsapp/templates"
V2_TEMPLATES = "/v2/platforms/whatsapp/templates"

PLACEHOLDER_PATTERN = re.compile(r"\{\{\d+\}\}")
PLACEHOLDER_EXAMPLE = "example_value"


def _variant_path(base: str, name: str, language: Optional[str] = None) -> str:
    path = f"{base}/{path_segment(name)}"
    if language is not None:
        path += f"/{path_segment(language)}"
    return path


# -----------------------------------------------------------------------------
# Component builders
# -----------------------------------------------------------------------------
def header_component(
    header_format: str,
    header_text: Optional[str] = None,
    example_url: Optional[str] = None,
) -> dict[str, Any]:
    header: dict[str, Any] = {"type": "HEADER", "format": header_format}
    if header_format == "TEXT":
        if header_text:
            header["text"] = header_text
    elif example_url:
        header["example"] = {"header_url": [example_url]}
    return header


def body_component(body_text: str, examples: Optional[Sequence[str]] = None) -> dict[str, Any]:
    body: dict[str, Any] = {"type": "BODY", "text": body_text}
    if examples:
        body["example"] = {"body_text": [list(examples)]}
    return body


def footer_component(footer_text: str) -> dict[str, Any]:
    return {"type": "FOOTER", "text": footer_text}


def url_example(url: str) -> str:
    """Replace every ``{{n}}`` placeholder with a fixed example value."""
    return PLACEHOLDER_PATTERN.sub(PLACEHOLDER_EXAMPLE, url)


def button(button_type: str, text: str, value: Optional[str] = None) -> dict[str, Any]:
    entry: dict[str, Any] = {"type": button_type, "text": text}
    if button_type == "PHONE_NUMBER" and value:
        entry["phone_number"] = value
    elif button_type == "URL" and value:
        entry["url"] = value
        if "{{" in value:
            entry["example"] = [url_example(value)]
    return entry


def buttons_component(buttons: Sequence[dict[str, Any]]) -> dict[str, Any]:
    return {"type": "BUTTONS", "buttons": list(buttons)}


def template_components(
    body_text: str,
    header_type: Optional[str] = None,
    header_text: Optional[str] = None,
    header_example_url: Optional[str] = None,
    footer_text: Optional[str] = None,
    button_type: Optional[str] = None,
    button_text: Optional[str] = None,
    button_value: Optional[str] = None,
    body_examples: Optional[Sequence[str]] = None,
) -> list[dict[str, Any]]:
    """Build the ordered components array of a new template."""
    components: list[dict[str, Any]] = []
    if header_type:
        components.append(header_component(header_type, header_text, header_example_url))
    components.append(body_component(body_text, body_examples))
    if footer_text:
        components.append(footer_component(footer_text))
    if button_type and button_text:
        components.append(buttons_component([button(button_type, button_text, button_value)]))
    return components


def create_template_body(
    name: str,
    language: str,
    category: str,
    components: list[dict[str, Any]],
    waba_id: Optional[str] = None,
    allow_category_change: Optional[bool] = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "name": name,
        "language": language,
        "category": category,
        "components": components,
    }
    if waba_id:
        body["wabaId"] = waba_id
    if allow_category_change is not None:
        body["allowCategoryChange"] = allow_category_change
    return body


def parse_components(raw: str) -> Any:
    """Decode the JSON-string ``components`` argument of update_template."""
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        raise InvalidToolInput("Invalid JSON in components parameter") from None


# -----------------------------------------------------------------------------
# Handlers
# -----------------------------------------------------------------------------
async def list_templates(
    client: MessageBirdClient,
    offset: Optional[str] = None,
    limit: Optional[str] = None,
    waba_id: Optional[str] = None,
    channel_id: Optional[str] = None,
) -> ToolResult:
    async def operation():
        query = {"offset": offset, "limit": limit, "wabaId": waba_id, "channelId": channel_id}
        return await client.request(V3_TEMPLATES, "GET", None, query, ApiTarget.INTEGRATIONS)

    return await run_tool("Failed to list templates", operation)


async def get_template(client: MessageBirdClient, name: str, language: str) -> ToolResult:
    async def operation():
        return await client.request(
            _variant_path(V3_TEMPLATES, name, language), "GET", None, None, ApiTarget.INTEGRATIONS
        )

    return await run_tool("Failed to get template", operation)


async def create_template(
    client: MessageBirdClient,
    name: str,
    language: str,
    category: str,
    body_text: str,
    header_type: Optional[str] = None,
    header_text: Optional[str] = None,
    header_example_url: Optional[str] = None,
    footer_text: Optional[str] = None,
    button_type: Optional[str] = None,
    button_text: Optional[str] = None,
    button_value: Optional[str] = None,
    body_examples: Optional[Sequence[str]] = None,
    waba_id: Optional[str] = None,
    allow_category_change: Optional[bool] = None,
) -> ToolResult:
    async def operation():
        components = template_components(
            body_text,
            header_type=header_type,
            header_text=header_text,
            header_example_url=header_example_url,
            footer_text=footer_text,
            button_type=button_type,
            button_text=button_text,
            button_value=button_value,
            body_examples=body_examples,
        )
        body = create_template_body(name, language, category, components, waba_id, allow_category_change)
        return await client.request(V2_TEMPLATES, "POST", body, None, ApiTarget.INTEGRATIONS)

    return await run_tool("Failed to create template", operation)


async def update_template(
    client: MessageBirdClient,
    name: str,
    language: str,
    waba_id: str,
    components: str,
    category: Optional[str] = None,
) -> ToolResult:
    async def operation():
        body: dict[str, Any] = {"wabaId": waba_id, "components": parse_components(components)}
        if category:
            body["category"] = category
        return await client.request(
            _variant_path(V2_TEMPLATES, name, language), "PUT", body, None, ApiTarget.INTEGRATIONS
        )

    return await run_tool("Failed to update template", operation)


async def delete_template(client: MessageBirdClient, name: str) -> ToolResult:
    async def operation():
        await client.request(_variant_path(V3_TEMPLATES, name), "DELETE", None, None, ApiTarget.INTEGRATIONS)
        return {"deleted": True, "name": name}

    return await run_tool("Failed to delete template", operation)


async def delete_template_variant(client: MessageBirdClient, name: str, language: str) -> ToolResult:
    async def operation():
        await client.request(
            _variant_path(V3_TEMPLATES, name, language), "DELETE", None, None, ApiTarget.INTEGRATIONS
        )
        return {"deleted": True, "name": name, "language": language}

    return await run_tool("Failed to delete template variant", operation)
