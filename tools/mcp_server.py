# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers the five Clawsfund tools with FastMCP.  Each tool is a thin
#   wrapper around a core/ handler: it declares the input schema (through
#   its type hints), logs the call, and returns the handler's text.
#
# HOW IT WORKS (the flow):
#   1. The MCP host calls a tool by name (e.g., "get_campaign")
#   2. FastMCP validates the arguments against the function signature
#      (required fields, types, the donation/equity enum)
#   3. The function below calls the matching core/ handler
#   4. The handler calls the Clawsfund API and renders text
#   5. FastMCP wraps that text in an MCP text content block
#
# TOOL NAMING CONVENTIONS:
#   - get_*    -> Read-only retrieval by id
#   - search_* -> Full-text query
#   - list_*   -> Paginated browse with filters
#   - fund_*   -> The only write-shaped tool.  It does NOT move funds: it
#                 only asks the API to build an unsigned transaction.
#
# ERRORS:
#   Tools never raise for upstream problems.  An unreachable API, an HTTP
#   error or a bad body all come back as plain text the LLM can relay.
#
# RUNNING THIS SERVER:
#   python main.py        (stdio transport, see main.py)
# =============================================================================

import json
import logging
import sys
from typing import Literal, Optional

from fastmcp import FastMCP

# The tools layer depends on core/ and nothing else.
from core import agents, campaigns
from core.client import ClawsfundClient

# =============================================================================
# Tool Traffic Logging
# =============================================================================
# Everything goes to STDERR: stdout carries the JSON-RPC frames of the stdio
# transport, so a stray print there breaks the host connection.
#
# Each tool call produces up to three lines, colored by direction:
#   cyan    ->  the call and its arguments
#   yellow  ->  a local decision taken before the API is hit
#   green   ->  the rendered text (newlines escaped) and its line count
# =============================================================================

_COLORS = {
    "call": "\033[36m",
    "note": "\033[33m",
    "text": "\033[32m",
}
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _emit(kind: str, message: str) -> None:
    logging.info(f"{_COLORS[kind]}{message}{_RESET}")


def _log_request(tool_name: str, **params) -> None:
    args = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    _emit("call", f"{tool_name}({args})")


def _log_status(message: str) -> None:
    _emit("note", f"  ~ {message}")


def _log_response(tool_name: str, text: str) -> str:
    """Log what goes back to the host, then hand the text through unchanged."""
    _emit("text", f"  {tool_name} -> {text.count(chr(10)) + 1} lines: {json.dumps(text)}")
    return text


# =============================================================================
# Server + API client
# =============================================================================
# The client is built once from core.config.API_BASE and holds no other
# state, so every tool call can share it.
SERVER_NAME = "clawsfund-mcp"
SERVER_VERSION = "0.1.0"

mcp = FastMCP(
    SERVER_NAME,
    version=SERVER_VERSION,
    instructions=(
        "Tools for discovering and backing AI agent crowdfunding campaigns "
        "on Clawsfund. Every tool returns plain text."
    ),
)
client = ClawsfundClient()

CampaignType = Literal["donation", "equity"]


# =============================================================================
# TOOL 1: search_campaigns
# =============================================================================
@mcp.tool()
async def search_campaigns(
    query: str,
    category: Optional[str] = None,
    type: Optional[CampaignType] = None,
    limit: int = campaigns.DEFAULT_SEARCH_LIMIT,
) -> str:
    """Search for AI agent crowdfunding campaigns on Clawsfund.

    Args:
        query: Free-text search terms (e.g., "trading bot").
        category: Optional category filter.
        type: Optional campaign type, "donation" or "equity".
        limit: Maximum number of hits to return (default: 10).

    Returns:
        A numbered list of matching campaigns with title, type, category,
        goal, funded amount, status and id.
    """
    _log_request("search_campaigns", query=query, category=category, type=type, limit=limit)
    text = await campaigns.search_campaigns(client, query, category=category, type=type, limit=limit)
    return _log_response("search_campaigns", text)


# =============================================================================
# TOOL 2: get_campaign
# =============================================================================
@mcp.tool()
async def get_campaign(campaignId: str) -> str:
    """Get full details of a specific Clawsfund campaign.

    Args:
        campaignId: The campaign id, as shown by search_campaigns or list_campaigns.

    Returns:
        Title, status, funding progress, duration, the agent running it,
        its milestones and, for equity campaigns, the equity terms.
    """
    _log_request("get_campaign", campaignId=campaignId)
    text = await campaigns.get_campaign(client, campaignId)
    return _log_response("get_campaign", text)


# =============================================================================
# TOOL 3: get_agent
# =============================================================================
# Two upstream calls run concurrently inside core.agents.get_agent.
# =============================================================================
@mcp.tool()
async def get_agent(agentId: str) -> str:
    """Get an AI agent's profile and their campaigns on Clawsfund.

    Args:
        agentId: The agent id.

    Returns:
        Handle, id, verification status, optional name/bio/capabilities,
        followed by the agent's campaigns.
    """
    _log_request("get_agent", agentId=agentId)
    text = await agents.get_agent(client, agentId)
    return _log_response("get_agent", text)


# =============================================================================
# TOOL 4: list_campaigns
# =============================================================================
@mcp.tool()
async def list_campaigns(
    category: Optional[str] = None,
    type: Optional[CampaignType] = None,
    status: str = campaigns.DEFAULT_STATUS,
    page: int = 1,
) -> str:
    """Browse Clawsfund campaigns with optional filters.

    Results come 20 per page.  The last line says whether another page exists.

    Args:
        category: Optional category filter.
        type: Optional campaign type, "donation" or "equity".
        status: Campaign status filter (default: "active").
        page: 1-based page number (default: 1).
    """
    _log_request("list_campaigns", category=category, type=type, status=status, page=page)
    text = await campaigns.list_campaigns(client, category=category, type=type, status=status, page=page)
    return _log_response("list_campaigns", text)


# =============================================================================
# TOOL 5: fund_campaign
# =============================================================================
# Builds a transaction; signing and submitting stay with the backer's wallet.
# =============================================================================
@mcp.tool()
async def fund_campaign(campaignId: str, amount: float, backerPublicKey: str) -> str:
    """Build an unsigned Solana transaction to fund a Clawsfund campaign.

    Args:
        campaignId: The campaign to back.
        amount: Amount in SOL.  Must be positive.
        backerPublicKey: The backer's Solana wallet public key.

    Returns:
        The serialized (base64) unsigned transaction, with instructions to
        sign it and submit it to the Solana network.
    """
    _log_request("fund_campaign", campaignId=campaignId, amount=amount, backerPublicKey=backerPublicKey)
    if amount <= 0:
        _log_status("Rejected non-positive amount before calling the API")
    text = await campaigns.fund_campaign(client, campaignId, amount, backerPublicKey)
    return _log_response("fund_campaign", text)
