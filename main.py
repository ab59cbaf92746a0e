# =============================================================================
# main.py  -  Entry Point for the Clawsfund MCP Server
# =============================================================================
#
# HOW TO RUN:
#   python main.py                 (or the `clawsfund-mcp` console script)
#
# WHAT HAPPENS:
#   1. Loads .env so CLAWSFUND_API_URL can be set locally
#   2. Imports the FastMCP server (tools/mcp_server.py), which resolves the
#      API base URL exactly once
#   3. Logs that it is starting, then serves MCP over stdio until the host
#      closes the pipe
#
#   If building the server or the transport fails, the fault is logged and
#   the process exits with status 1.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv


def main() -> None:
    """Serve the Clawsfund tools over stdio."""
    # .env must be loaded BEFORE core/ is imported: core/config.py reads
    # CLAWSFUND_API_URL at import time.
    load_dotenv()
    try:
        from tools.mcp_server import client, mcp

        logging.info(f"Clawsfund MCP server starting on stdio (API: {client.base_url})")
        mcp.run(transport="stdio")
    except Exception:
        logging.exception("Fatal error starting MCP server")
        sys.exit(1)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
