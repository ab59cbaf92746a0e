# =============================================================================
# core/agents.py  -  Agent Profile Tool Handler
# =============================================================================
#
# get_agent is the only tool that needs TWO upstream calls:
#
#     GET /agents/{id}              ->  profile (required)
#     GET /agents/{id}/campaigns    ->  campaign list (optional)
#
# Both are issued concurrently with asyncio.gather().  Because
# ClawsfundClient.call() never raises, gather always waits for both results:
# one failing call cannot cut the other short.
#
# The two results are NOT equally important:
#   - profile failed    ->  the failure message is the whole output
#   - campaigns failed  ->  degrade to "No campaigns found for this agent."
# =============================================================================

import asyncio

from core.client import ClawsfundClient
from core.render import join_lines, number_or, record_id, records, string_or, unwrap


def _campaign_line(c) -> str:
    return (
        f"  - {string_or(c.get('title'), 'Untitled')} ({string_or(c.get('status'), '?')})"
        f" - Goal: {number_or(c.get('goalAmount'), '?')}, Funded: {number_or(c.get('fundedAmount'), 0)}"
        f" | ID: {record_id(c)}"
    )


async def get_agent(client: ClawsfundClient, agent_id: str) -> str:
    """Render an agent's profile followed by the campaigns they run."""
    agent_result, campaigns_result = await asyncio.gather(
        client.call(f"/agents/{agent_id}"),
        client.call(f"/agents/{agent_id}/campaigns"),
    )

    if not agent_result.ok:
        return agent_result.message

    a = unwrap(agent_result.payload, "agent")
    profile = a.get("profile")
    if not isinstance(profile, dict):
        profile = {}

    lines = [
        f"Agent: {string_or(a.get('handle'), 'unknown')}",
        f"ID: {string_or(a.get('id'), '?')}",
        f"Status: {string_or(a.get('verificationStatus'), 'unknown')}",
    ]

    if profile.get("name"):
        lines.append(f"Name: {profile['name']}")
    if profile.get("bio"):
        lines.append(f"Bio: {profile['bio']}")
    capabilities = profile.get("capabilities")
    if isinstance(capabilities, list) and capabilities:
        lines.append(f"Capabilities: {', '.join(str(cap) for cap in capabilities)}")

    campaigns = records(campaigns_result.payload, "campaigns") if campaigns_result.ok else []
    if campaigns:
        lines += ["", "Campaigns:", *(_campaign_line(c) for c in campaigns)]
    else:
        lines += ["", "No campaigns found for this agent."]

    return join_lines(lines)
