# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL request/response translation logic for the
# MessageBird tools: configuration, the HTTP dispatch client, payload
# builders and the per-tool handlers.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  Handlers take plain values
#   and return ToolResult objects, so they can be exercised directly in
#   tests with a faked HTTP transport.
# =============================================================================
