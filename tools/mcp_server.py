# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (all tool families in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server instance and registers every tool family on
#   it.  Each tool is a thin wrapper around a core/ handler: it takes the
#   validated arguments, calls the handler, and returns the handler's
#   ToolResult in MCP form.
#
# HOW IT WORKS (the flow):
#   1. The agent host calls a tool by name via MCP (e.g., "send_text")
#   2. FastMCP validates the arguments against the tool's input schema
#   3. The decorated function calls the matching core/ handler
#   4. The handler builds the request body and calls MessageBirdClient
#   5. The result comes back as pretty JSON text, or as an error result
#
# TOOL FAMILIES:
#   - messaging      → send_* (POST /send)
#   - conversations  → conversation threads and message history
#   - templates      → WhatsApp template management (Integrations API)
#   - contacts       → contact CRUD (REST API)
#
# RUNNING THIS SERVER:
#   main.py loads the credential, builds the client and calls run() on the
#   server returned by create_server().  The host talks to it over stdio.
# =============================================================================

from fastmcp import FastMCP

from core.client import MessageBirdClient
from tools.contacts import register_contact_tools
from tools.conversations import register_conversation_tools
from tools.logs import log_status
from tools.messaging import register_messaging_tools
from tools.templates import register_template_tools

SERVER_NAME = "mcp-messagebird"
SERVER_VERSION = "1.0.0"

_REGISTRARS = (
    register_messaging_tools,
    register_conversation_tools,
    register_template_tools,
    register_contact_tools,
)


def create_server(client: MessageBirdClient) -> FastMCP:
    """Create the MCP server with every tool bound to ``client``.

    Args:
        client: The dispatch client shared (read-only) by all tools.

    Returns:
        A FastMCP instance ready for ``run()``.
    """
    mcp = FastMCP(SERVER_NAME)
    for register in _REGISTRARS:
        register(mcp, client)
    log_status(f"{SERVER_NAME} v{SERVER_VERSION}: {len(_REGISTRARS)} tool families registered")
    return mcp
