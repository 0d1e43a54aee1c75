# =============================================================================
# tools/contacts.py  —  Contact Tools
# =============================================================================

from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from core import contacts
from core.client import MessageBirdClient
from tools.logs import log_request, log_status, respond
from tools.schemas import DESTRUCTIVE, READ_ONLY, WRITE

Custom = Annotated[Optional[str], Field(description="Custom field")]


def register_contact_tools(mcp: FastMCP, client: MessageBirdClient) -> None:
    """Register contact tools on ``mcp``, bound to ``client``."""

    @mcp.tool(name="list_contacts", title="List Contacts", annotations=READ_ONLY)
    async def list_contacts(
        offset: Annotated[Optional[str], Field(description="Number of items to skip")] = None,
        limit: Annotated[Optional[str], Field(description="Max items per page")] = None,
    ):
        """List all contacts in the MessageBird account."""
        log_request("list_contacts", offset=offset, limit=limit)
        return respond("list_contacts", await contacts.list_contacts(client, offset, limit))

    @mcp.tool(name="get_contact", title="Get Contact", annotations=READ_ONLY)
    async def get_contact(
        contact_id: Annotated[Optional[str], Field(description="Contact ID")] = None,
        msisdn: Annotated[Optional[str], Field(description="Phone number to look up (E.164 format)")] = None,
        name: Annotated[Optional[str], Field(description="Contact name to search")] = None,
    ):
        """Get details of a specific contact by ID, phone number (msisdn), or name."""
        log_request("get_contact", contact_id=contact_id, msisdn=msisdn, name=name)
        log_status("exact fetch by ID" if contact_id else "filtered contact search")
        return respond("get_contact", await contacts.get_contact(client, contact_id, msisdn, name))

    @mcp.tool(name="create_contact", title="Create Contact", annotations=WRITE)
    async def create_contact(
        msisdn: Annotated[str, Field(description="Phone number in E.164 format (e.g. +5511999999999)")],
        first_name: Annotated[Optional[str], Field(description="Contact first name")] = None,
        last_name: Annotated[Optional[str], Field(description="Contact last name")] = None,
        custom1: Custom = None,
        custom2: Custom = None,
        custom3: Custom = None,
        custom4: Custom = None,
    ):
        """Create a new contact with a phone number."""
        log_request("create_contact", msisdn=msisdn, first_name=first_name, last_name=last_name)
        result = await contacts.create_contact(
            client, msisdn, first_name, last_name, custom1, custom2, custom3, custom4
        )
        return respond("create_contact", result)

    @mcp.tool(name="update_contact", title="Update Contact", annotations=WRITE)
    async def update_contact(
        contact_id: Annotated[str, Field(description="Contact ID to update")],
        msisdn: Annotated[Optional[str], Field(description="New phone number")] = None,
        first_name: Annotated[Optional[str], Field(description="New first name")] = None,
        last_name: Annotated[Optional[str], Field(description="New last name")] = None,
        custom1: Custom = None,
        custom2: Custom = None,
        custom3: Custom = None,
        custom4: Custom = None,
    ):
        """Update an existing contact's information."""
        log_request("update_contact", contact_id=contact_id, msisdn=msisdn,
                    first_name=first_name, last_name=last_name)
        result = await contacts.update_contact(
            client, contact_id, msisdn, first_name, last_name, custom1, custom2, custom3, custom4
        )
        return respond("update_contact", result)

    @mcp.tool(name="delete_contact", title="Delete Contact", annotations=DESTRUCTIVE)
    async def delete_contact(contact_id: Annotated[str, Field(description="Contact ID to delete")]):
        """Permanently delete a contact. This action cannot be undone."""
        log_request("delete_contact", contact_id=contact_id)
        return respond("delete_contact", await contacts.delete_contact(client, contact_id))
