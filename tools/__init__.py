# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool declarations.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP host and core/.  Each
#   family module here:
#     1. Declares tools with a name, title, description and annotations
#     2. Types every parameter so FastMCP can validate input up front
#     3. Calls one core/ handler per tool
#     4. Converts the handler's ToolResult into MCP output (tools/logs.py)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build request bodies (that's core/)
#   - They do NOT talk HTTP (that's core/client.py)
#   - They do NOT read the environment (main.py does, once)
# =============================================================================
