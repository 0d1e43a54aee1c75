# =============================================================================
# core/contacts.py  —  Contacts (REST API)
# =============================================================================
#
# CRUD over MessageBird contacts.  Tool input uses snake_case; the REST API
# wants camelCase for the name fields, so contact_fields() does the mapping
# and drops anything not supplied.
# =============================================================================

from typing import Any, Optional

from core.client import MessageBirdClient, path_segment
from core.models import ApiTarget, ToolResult
from core.results import run_tool


def _contact_path(contact_id: str) -> str:
    return f"/contacts/{path_segment(contact_id)}"


def contact_fields(
    msisdn: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    custom1: Optional[str] = None,
    custom2: Optional[str] = None,
    custom3: Optional[str] = None,
    custom4: Optional[str] = None,
) -> dict[str, Any]:
    """Map supplied contact fields to their REST names; empty values are skipped."""
    fields = {
        "msisdn": msisdn,
        "firstName": first_name,
        "lastName": last_name,
        "custom1": custom1,
        "custom2": custom2,
        "custom3": custom3,
        "custom4": custom4,
    }
    return {key: value for key, value in fields.items() if value}


async def list_contacts(
    client: MessageBirdClient,
    offset: Optional[str] = None,
    limit: Optional[str] = None,
) -> ToolResult:
    async def operation():
        return await client.request("/contacts", "GET", None, {"offset": offset, "limit": limit}, ApiTarget.REST)

    return await run_tool("Failed to list contacts", operation)


async def get_contact(
    client: MessageBirdClient,
    contact_id: Optional[str] = None,
    msisdn: Optional[str] = None,
    name: Optional[str] = None,
) -> ToolResult:
    """Fetch one contact by ID, or search by phone number and/or name."""

    async def operation():
        if contact_id:
            return await client.request(_contact_path(contact_id), "GET", None, None, ApiTarget.REST)

        query: dict[str, Optional[str]] = {}
        if msisdn:
            query["msisdn"] = msisdn
        if name:
            query["name"] = name
        return await client.request("/contacts", "GET", None, query, ApiTarget.REST)

    return await run_tool("Failed to get contact", operation)


async def create_contact(
    client: MessageBirdClient,
    msisdn: str,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    custom1: Optional[str] = None,
    custom2: Optional[str] = None,
    custom3: Optional[str] = None,
    custom4: Optional[str] = None,
) -> ToolResult:
    async def operation():
        body = {"msisdn": msisdn}
        body.update(contact_fields(None, first_name, last_name, custom1, custom2, custom3, custom4))
        return await client.request("/contacts", "POST", body, None, ApiTarget.REST)

    return await run_tool("Failed to create contact", operation)


async def update_contact(
    client: MessageBirdClient,
    contact_id: str,
    msisdn: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    custom1: Optional[str] = None,
    custom2: Optional[str] = None,
    custom3: Optional[str] = None,
    custom4: Optional[str] = None,
) -> ToolResult:
    async def operation():
        body = contact_fields(msisdn, first_name, last_name, custom1, custom2, custom3, custom4)
        return await client.request(_contact_path(contact_id), "PATCH", body, None, ApiTarget.REST)

    return await run_tool("Failed to update contact", operation)


async def delete_contact(client: MessageBirdClient, contact_id: str) -> ToolResult:
    async def operation():
        # The response body is discarded; success is reported from the input.
        await client.request(_contact_path(contact_id), "DELETE", None, None, ApiTarget.REST)
        return {"deleted": True, "id": contact_id}

    return await run_tool("Failed to delete contact", operation)
