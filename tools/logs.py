# =============================================================================
# tools/logs.py  —  Tool-Call Logging & Result Conversion
# =============================================================================
# We log to STDERR because the MCP server talks to its host over STDOUT.
# A single stray print to stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + arguments)
#     - GREEN for successful responses
#     - YELLOW for status lines and error results
#
# Only the tools/ layer logs.  core/ stays silent and reports through
# ToolResult values and exceptions.
# =============================================================================

import logging
import os
import sys

from fastmcp.exceptions import ToolError

from core.models import ToolResult

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

LOG_LEVEL_ENV = "MESSAGEBIRD_LOG_LEVEL"

logging.basicConfig(
    level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def respond(tool_name: str, result: ToolResult) -> str:
    """Log a handler's result and hand it to FastMCP.

    Success text becomes the tool's single text content.  An error result is
    raised as ToolError, which FastMCP reports with ``isError: true`` and the
    message as the only content.
    """
    if result.is_error:
        logging.warning(f"{_YELLOW}  ← {tool_name} failed: {result.text}{_RESET}")
        raise ToolError(result.text)
    logging.info(f"{_GREEN}  ← {tool_name} response: {len(result.text)} chars{_RESET}")
    return result.text
