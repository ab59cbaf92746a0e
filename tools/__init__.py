# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP host and core/.
#   mcp_server.py:
#     1. Imports a handler from core/
#     2. Wraps it in a FastMCP tool decorator
#     3. Declares the input schema through type hints and the docstring
#     4. Logs every request and response to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT call HTTP directly (that's core/client.py)
#   - They do NOT format output (that's the core/ handlers)
#
# TOOL CONTRACT QUALITY:
#   The host LLM decides WHEN to call a tool from its name and docstring,
#   and WHAT to pass from its typed parameters.  Keep both accurate.
# =============================================================================
