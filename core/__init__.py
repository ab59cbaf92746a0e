# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the request/response logic for the Clawsfund
# MCP server: the HTTP transport client, the result types it returns, and
# the five tool handlers that turn upstream JSON into readable text.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  Every handler here is a plain
#   async function of (client, arguments) -> str, so it can be tested with a
#   stubbed HTTP transport and no MCP runtime at all.
#
#   The tools/ layer registers these handlers with FastMCP; the core is the
#   engine, tools/ is the wiring.
# =============================================================================
