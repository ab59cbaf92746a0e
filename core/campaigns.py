# =============================================================================
# core/campaigns.py  -  Campaign Tool Handlers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Implements the four campaign-facing tools:
#
#     search_campaigns  ->  GET  /search?q=...
#     get_campaign      ->  GET  /campaigns/{id}
#     list_campaigns    ->  GET  /campaigns?limit=20&offset=...
#     fund_campaign     ->  POST /campaigns/{id}/back
#
#   Each handler builds a path, makes ONE upstream call, and renders either
#   the failure message verbatim or a formatted text view.  A failed call is
#   the whole output: no partial rendering.
# =============================================================================

import json
from typing import Optional

import httpx

from core.client import ClawsfundClient
from core.models import RequestOptions
from core.render import (
    campaign_summary,
    join_lines,
    milestone_line,
    number_or,
    record_id,
    records,
    string_or,
    unwrap,
)

PAGE_SIZE = 20
DEFAULT_SEARCH_LIMIT = 10
DEFAULT_STATUS = "active"


def _query(params: dict) -> str:
    # Optional filters are left out entirely rather than sent empty
    return str(httpx.QueryParams({k: v for k, v in params.items() if v}))


# =============================================================================
# search_campaigns
# =============================================================================
async def search_campaigns(
    client: ClawsfundClient,
    query: str,
    category: Optional[str] = None,
    type: Optional[str] = None,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> str:
    """Full-text search over campaigns, rendered as a numbered list."""
    params = _query({"q": query, "limit": str(limit), "category": category, "type": type})
    result = await client.call(f"/search?{params}")
    if not result.ok:
        return result.message

    hits = records(result.payload, "hits")
    if not hits:
        return f'No campaigns found for "{query}".'

    total = number_or(result.payload.get("totalHits"), len(hits))
    return join_lines([
        f'Found {total} campaigns for "{query}":',
        "",
        *(campaign_summary(i, hit) for i, hit in enumerate(hits, start=1)),
    ])


# =============================================================================
# get_campaign
# =============================================================================
def _agent_line(agent) -> str:
    # The API returns either an embedded agent object or a bare agent id
    if isinstance(agent, dict):
        identity = agent.get("handle")
        if identity is None:
            identity = agent.get("id")
        return f"Agent: {string_or(identity, 'unknown')}"
    return f"Agent ID: {string_or(agent, 'unknown')}"


async def get_campaign(client: ClawsfundClient, campaign_id: str) -> str:
    """Detail view of one campaign: funding, agent, milestones, equity terms."""
    result = await client.call(f"/campaigns/{campaign_id}")
    if not result.ok:
        return result.message

    c = unwrap(result.payload, "campaign")

    milestones = records(c, "milestones")
    milestone_lines = [milestone_line(m) for m in milestones] or ["  None"]

    lines = [
        f"Campaign: {string_or(c.get('title'), 'Untitled')}",
        f"ID: {record_id(c)}",
        f"Type: {string_or(c.get('type'), 'n/a')} | Category: {string_or(c.get('category'), 'n/a')}",
        f"Status: {string_or(c.get('status'), 'unknown')}",
        (
            f"Goal: {number_or(c.get('goalAmount'), '?')} {string_or(c.get('currency'), 'SOL')}"
            f" | Funded: {number_or(c.get('fundedAmount'), 0)}"
            f" | Backers: {number_or(c.get('backerCount'), 0)}"
        ),
        f"Duration: {number_or(c.get('durationDays'), '?')} days",
        _agent_line(c.get("agent")),
        "",
        "Milestones:",
        *milestone_lines,
    ]

    equity = c.get("equityTerms")
    if equity:
        equity = equity if isinstance(equity, dict) else {}
        lines += [
            "",
            "Equity Terms:",
            f"  Pre-money valuation: {number_or(equity.get('premoneyValuation'), '?')}",
            f"  Equity offered: {number_or(equity.get('equityPercentage'), '?')}%",
            f"  Min investment: {number_or(equity.get('minimumInvestment'), '?')}",
        ]

    return join_lines(lines)


# =============================================================================
# list_campaigns
# =============================================================================
async def list_campaigns(
    client: ClawsfundClient,
    category: Optional[str] = None,
    type: Optional[str] = None,
    status: str = DEFAULT_STATUS,
    page: int = 1,
) -> str:
    """Paginated browse; numbering continues across pages (page 2 starts at 21)."""
    offset = (page - 1) * PAGE_SIZE
    params = _query({
        "limit": str(PAGE_SIZE),
        "offset": str(offset),
        "status": status,
        "category": category,
        "type": type,
    })
    result = await client.call(f"/campaigns?{params}")
    if not result.ok:
        return result.message

    campaigns = records(result.payload, "campaigns")
    if not campaigns:
        return "No campaigns found with the given filters."

    pagination = result.payload.get("pagination")
    if not isinstance(pagination, dict):
        pagination = {}

    if pagination.get("hasMore"):
        footer = "More results available; increase the page number."
    else:
        footer = "No more results."

    return join_lines([
        f"Campaigns (page {page}, total {number_or(pagination.get('total'), '?')}):",
        "",
        *(
            campaign_summary(offset + i, c, with_backers=True)
            for i, c in enumerate(campaigns, start=1)
        ),
        "",
        footer,
    ])


# =============================================================================
# fund_campaign
# =============================================================================
async def fund_campaign(
    client: ClawsfundClient,
    campaign_id: str,
    amount: float,
    backer_public_key: str,
) -> str:
    """Ask the API for an unsigned Solana transaction backing a campaign.

    Nothing is signed or submitted here: the caller gets the base64
    transaction back and signs it with their own wallet.
    """
    if amount <= 0:
        return "Amount must be positive."

    result = await client.call(
        f"/campaigns/{campaign_id}/back",
        RequestOptions(
            method="POST",
            headers={"Content-Type": "application/json"},
            body=json.dumps({"amount": amount, "backerPublicKey": backer_public_key}),
        ),
    )
    if not result.ok:
        return result.message

    # "transaction" wins whenever present, even if empty
    tx = result.payload.get("transaction")
    if tx is None:
        tx = result.payload.get("serializedTransaction")
    if not tx:
        return (
            "Fund request accepted but no transaction was returned. "
            f"Response: {json.dumps(result.payload)}"
        )

    return join_lines([
        "Unsigned transaction created successfully.",
        "",
        f"Campaign: {campaign_id}",
        f"Amount: {number_or(amount, '?')} SOL",
        f"Backer: {backer_public_key}",
        "",
        "Serialized transaction (base64):",
        str(tx),
        "",
        "Sign this transaction with your wallet and submit it to the Solana network.",
    ])
