# =============================================================================
# tools/templates.py  —  WhatsApp Template Tools
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from core import templates
from core.client import MessageBirdClient
from tools.logs import log_request, respond
from tools.schemas import DESTRUCTIVE, READ_ONLY, WRITE, ButtonType, HeaderFormat, Offset, TemplateCategory, Url


def register_template_tools(mcp: FastMCP, client: MessageBirdClient) -> None:
    """Register template management tools on ``mcp``, bound to ``client``."""

    @mcp.tool(name="list_templates", title="List WhatsApp Templates", annotations=READ_ONLY)
    async def list_templates(
        offset: Offset = None,
        limit: Annotated[Optional[str], Field(description="Max items per page (max: 50, default: 50)")] = None,
        waba_id: Annotated[Optional[str], Field(description="Filter by WhatsApp Business Account ID")] = None,
        channel_id: Annotated[Optional[str], Field(description="Filter by channel ID")] = None,
    ):
        """List all WhatsApp message templates. Returns paginated list with status, category, and components."""
        log_request("list_templates", offset=offset, limit=limit, waba_id=waba_id, channel_id=channel_id)
        result = await templates.list_templates(client, offset, limit, waba_id, channel_id)
        return respond("list_templates", result)

    @mcp.tool(name="get_template", title="Get Template Details", annotations=READ_ONLY)
    async def get_template(
        name: Annotated[str, Field(description="Template name (lowercase with underscores)")],
        language: Annotated[str, Field(description="Language code (e.g. en, pt_BR)")],
    ):
        """Get details of a specific WhatsApp template by name and language code."""
        log_request("get_template", name=name, language=language)
        return respond("get_template", await templates.get_template(client, name, language))

    @mcp.tool(name="create_template", title="Create WhatsApp Template", annotations=WRITE)
    async def create_template(
        name: Annotated[str, Field(description="Template name (lowercase, underscores, no spaces)")],
        language: Annotated[str, Field(description="Language code (e.g. en, pt_BR)")],
        category: Annotated[TemplateCategory, Field(description="Template category")],
        body_text: Annotated[str, Field(description="Body text with {{1}}, {{2}} etc. for variables")],
        header_type: Annotated[Optional[HeaderFormat], Field(description="Header format type")] = None,
        header_text: Annotated[Optional[str], Field(description="Header text (when header_type=TEXT)")] = None,
        header_example_url: Annotated[
            Optional[Url],
            Field(description="Example media URL for header (when header_type=IMAGE/VIDEO/DOCUMENT)"),
        ] = None,
        footer_text: Annotated[Optional[str], Field(description="Footer text")] = None,
        button_type: Annotated[
            Optional[ButtonType], Field(description="Button type (max 2 buttons per template)")
        ] = None,
        button_text: Annotated[Optional[str], Field(description="Button display text")] = None,
        button_value: Annotated[
            Optional[str], Field(description="Button value (phone number or URL depending on type)")
        ] = None,
        body_examples: Annotated[
            Optional[list[str]], Field(description="Example values for body variables (for Meta approval)")
        ] = None,
        waba_id: Annotated[Optional[str], Field(description="WhatsApp Business Account ID")] = None,
        allow_category_change: Annotated[
            Optional[bool], Field(description="Allow Meta to reassign category")
        ] = None,
    ):
        """Create a new WhatsApp message template for Meta approval. Templates are required to initiate conversations outside the 24h window."""
        log_request("create_template", name=name, language=language, category=category,
                    header_type=header_type, button_type=button_type, waba_id=waba_id)
        result = await templates.create_template(
            client,
            name,
            language,
            category,
            body_text,
            header_type=header_type,
            header_text=header_text,
            header_example_url=header_example_url,
            footer_text=footer_text,
            button_type=button_type,
            button_text=button_text,
            button_value=button_value,
            body_examples=body_examples,
            waba_id=waba_id,
            allow_category_change=allow_category_change,
        )
        return respond("create_template", result)

    @mcp.tool(name="update_template", title="Update WhatsApp Template", annotations=WRITE)
    async def update_template(
        name: Annotated[str, Field(description="Template name")],
        language: Annotated[str, Field(description="Language code")],
        waba_id: Annotated[str, Field(description="WhatsApp Business Account ID")],
        components: Annotated[
            str, Field(description="Updated components as JSON string (array of component objects)")
        ],
        category: Annotated[Optional[TemplateCategory], Field(description="New category")] = None,
    ):
        """Update an existing WhatsApp template. Only the components can be modified."""
        log_request("update_template", name=name, language=language, waba_id=waba_id, category=category)
        result = await templates.update_template(client, name, language, waba_id, components, category)
        return respond("update_template", result)

    @mcp.tool(name="delete_template", title="Delete Template", annotations=DESTRUCTIVE)
    async def delete_template(name: Annotated[str, Field(description="Template name to delete")]):
        """Delete a WhatsApp template and ALL its language variants. This action cannot be undone."""
        log_request("delete_template", name=name)
        return respond("delete_template", await templates.delete_template(client, name))

    @mcp.tool(name="delete_template_variant", title="Delete Template Variant", annotations=DESTRUCTIVE)
    async def delete_template_variant(
        name: Annotated[str, Field(description="Template name")],
        language: Annotated[str, Field(description="Language code to delete (e.g. en, pt_BR)")],
    ):
        """Delete a specific language variant of a WhatsApp template. This action cannot be undone."""
        log_request("delete_template_variant", name=name, language=language)
        result = await templates.delete_template_variant(client, name, language)
        return respond("delete_template_variant", result)
