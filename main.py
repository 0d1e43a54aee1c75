# =============================================================================
# main.py  —  Entry Point for the MessageBird MCP Server
# =============================================================================
#
# HOW TO RUN:
#   MESSAGEBIRD_API_KEY=... python main.py
#   (or, once installed:  mcp-messagebird)
#
# WHAT HAPPENS:
#   1. Loads a local .env file, if present
#   2. Reads MESSAGEBIRD_API_KEY (exits with a diagnostic if it is missing)
#   3. Builds the MessageBirdClient with those settings
#   4. Registers all tools on a FastMCP server (tools/mcp_server.py)
#   5. Serves MCP over stdio until the host closes the pipe
#
# STDOUT BELONGS TO MCP:
#   Diagnostics go to stderr only.  Anything printed to stdout would be
#   read by the host as protocol traffic.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Load .env BEFORE importing the tools package: its logging setup reads
# MESSAGEBIRD_LOG_LEVEL at import time.
load_dotenv()

from core.client import MessageBirdClient
from core.config import ConfigError, load_settings
from tools.mcp_server import SERVER_NAME, create_server


def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    client = MessageBirdClient(settings)
    server = create_server(client)

    logging.info(f"{SERVER_NAME} server running on stdio")
    server.run()


if __name__ == "__main__":
    main()
