"""
Tests for the campaign tool handlers: request shape, rendering, and
failure propagation.
"""

import httpx
import pytest

from core import campaigns

pytestmark = pytest.mark.asyncio


# ---------------------------------------------------------------------------
# search_campaigns
# ---------------------------------------------------------------------------

async def test_search_sends_query_and_default_limit(client, fake_api):
    fake_api.routes[("GET", "/search")] = (200, {"hits": []})

    await campaigns.search_campaigns(client, "moon bot")

    params = fake_api.requests[0].url.params
    assert params["q"] == "moon bot"
    assert params["limit"] == "10"
    assert "category" not in params
    assert "type" not in params


async def test_search_sends_optional_filters(client, fake_api):
    fake_api.routes[("GET", "/search")] = (200, {"hits": []})

    await campaigns.search_campaigns(client, "x", category="defi", type="equity", limit=3)

    params = fake_api.requests[0].url.params
    assert params["category"] == "defi"
    assert params["type"] == "equity"
    assert params["limit"] == "3"


async def test_search_with_no_hits(client, fake_api):
    fake_api.routes[("GET", "/search")] = (200, {"hits": [], "totalHits": 0})

    text = await campaigns.search_campaigns(client, "nothing")

    assert text == 'No campaigns found for "nothing".'


async def test_search_renders_numbered_hits(client, fake_api):
    fake_api.routes[("GET", "/search")] = (200, {
        "totalHits": 7,
        "hits": [
            {"title": "Moon Bot", "type": "donation", "category": "ai", "goalAmount": 100,
             "fundedAmount": 12.5, "status": "active", "id": "c1"},
            {"_id": "c2"},
        ],
    })

    text = await campaigns.search_campaigns(client, "bot")

    assert text.splitlines() == [
        'Found 7 campaigns for "bot":',
        "",
        "1. Moon Bot",
        "   Type: donation | Category: ai",
        "   Goal: 100 | Funded: 12.5",
        "   Status: active | ID: c1",
        "2. Untitled",
        "   Type: n/a | Category: n/a",
        "   Goal: ? | Funded: 0",
        "   Status: unknown | ID: c2",
    ]


async def test_search_total_falls_back_to_hit_count(client, fake_api):
    fake_api.routes[("GET", "/search")] = (200, {"hits": [{"id": "c1"}]})

    text = await campaigns.search_campaigns(client, "bot")

    assert text.startswith('Found 1 campaigns for "bot":')


async def test_search_failure_is_the_whole_output(client, fake_api):
    fake_api.routes[("GET", "/search")] = (503, "maintenance")

    text = await campaigns.search_campaigns(client, "bot")

    assert text == "API returned 503: maintenance"


# ---------------------------------------------------------------------------
# get_campaign
# ---------------------------------------------------------------------------

FULL_CAMPAIGN = {
    "campaign": {
        "id": "c1",
        "title": "Moon Bot",
        "type": "equity",
        "category": "ai",
        "status": "active",
        "goalAmount": 500,
        "currency": "USDC",
        "fundedAmount": 120,
        "backerCount": 4,
        "durationDays": 30,
        "agent": {"id": "a1", "handle": "@moonbot"},
        "milestones": [
            {"number": 1, "name": "MVP", "deliverable": "Ship beta", "fundsPercentage": 40, "status": "pending"},
        ],
        "equityTerms": {"premoneyValuation": 10000, "equityPercentage": 5, "minimumInvestment": 10},
    }
}


async def test_get_campaign_renders_full_detail(client, fake_api):
    fake_api.routes[("GET", "/campaigns/c1")] = (200, FULL_CAMPAIGN)

    text = await campaigns.get_campaign(client, "c1")

    assert text.splitlines() == [
        "Campaign: Moon Bot",
        "ID: c1",
        "Type: equity | Category: ai",
        "Status: active",
        "Goal: 500 USDC | Funded: 120 | Backers: 4",
        "Duration: 30 days",
        "Agent: @moonbot",
        "",
        "Milestones:",
        "  - #1 MVP: Ship beta (40% - pending)",
        "",
        "Equity Terms:",
        "  Pre-money valuation: 10000",
        "  Equity offered: 5%",
        "  Min investment: 10",
    ]


async def test_get_campaign_defaults_for_sparse_record(client, fake_api):
    fake_api.routes[("GET", "/campaigns/c9")] = (200, {"agent": "a7"})

    text = await campaigns.get_campaign(client, "c9")

    assert text.splitlines() == [
        "Campaign: Untitled",
        "ID: ?",
        "Type: n/a | Category: n/a",
        "Status: unknown",
        "Goal: ? SOL | Funded: 0 | Backers: 0",
        "Duration: ? days",
        "Agent ID: a7",
        "",
        "Milestones:",
        "  None",
    ]
    assert "Equity Terms:" not in text


async def test_get_campaign_agent_object_without_handle_uses_id(client, fake_api):
    fake_api.routes[("GET", "/campaigns/c1")] = (200, {"agent": {"id": "a1"}})

    text = await campaigns.get_campaign(client, "c1")

    assert "Agent: a1" in text.splitlines()


async def test_get_campaign_missing_agent(client, fake_api):
    fake_api.routes[("GET", "/campaigns/c1")] = (200, {"title": "T"})

    text = await campaigns.get_campaign(client, "c1")

    assert "Agent ID: unknown" in text.splitlines()


async def test_get_campaign_failure(client):
    text = await campaigns.get_campaign(client, "missing")

    assert text == "API returned 404: Not Found"


# ---------------------------------------------------------------------------
# list_campaigns
# ---------------------------------------------------------------------------

def _page_of(n):
    return [{"title": f"Campaign {i}", "id": f"c{i}"} for i in range(n)]


async def test_list_defaults_to_active_first_page(client, fake_api):
    fake_api.routes[("GET", "/campaigns")] = (200, {"campaigns": []})

    await campaigns.list_campaigns(client)

    params = fake_api.requests[0].url.params
    assert params["limit"] == "20"
    assert params["offset"] == "0"
    assert params["status"] == "active"
    assert "category" not in params


async def test_list_second_page_numbers_from_21(client, fake_api):
    fake_api.routes[("GET", "/campaigns")] = (200, {
        "campaigns": _page_of(20),
        "pagination": {"total": 45, "hasMore": True},
    })

    text = await campaigns.list_campaigns(client, category="ai", type="donation", page=2)

    params = fake_api.requests[0].url.params
    assert params["offset"] == "20"
    assert params["category"] == "ai"
    assert params["type"] == "donation"

    lines = text.splitlines()
    assert lines[0] == "Campaigns (page 2, total 45):"
    assert lines[2] == "21. Campaign 0"
    assert lines[4] == "   Goal: ? | Funded: 0 | Backers: 0"
    assert lines[-1] == "More results available; increase the page number."


async def test_list_last_page_says_no_more(client, fake_api):
    fake_api.routes[("GET", "/campaigns")] = (200, {"campaigns": _page_of(2)})

    text = await campaigns.list_campaigns(client)

    lines = text.splitlines()
    assert lines[0] == "Campaigns (page 1, total ?):"
    assert lines[-1] == "No more results."
    assert lines[-2] == ""


async def test_list_empty(client, fake_api):
    fake_api.routes[("GET", "/campaigns")] = (200, {"campaigns": [], "pagination": {"total": 0}})

    text = await campaigns.list_campaigns(client, status="completed")

    assert text == "No campaigns found with the given filters."


async def test_list_unreachable(client, fake_api):
    fake_api.routes[("GET", "/campaigns")] = httpx.ConnectError("All connection attempts failed")

    text = await campaigns.list_campaigns(client)

    assert text.startswith("Clawsfund API is not reachable at http://localhost:3000.")


# ---------------------------------------------------------------------------
# fund_campaign
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("amount", [0, -1.5])
async def test_fund_rejects_non_positive_amount_without_calling_api(client, fake_api, amount):
    text = await campaigns.fund_campaign(client, "c1", amount, "BackerKey111")

    assert "must be positive" in text
    assert fake_api.requests == []


async def test_fund_posts_json_body(client, fake_api):
    fake_api.routes[("POST", "/campaigns/c1/back")] = (200, {"transaction": "AQID"})

    await campaigns.fund_campaign(client, "c1", 2.5, "BackerKey111")

    sent = fake_api.requests[0]
    assert sent.method == "POST"
    assert sent.headers["content-type"] == "application/json"
    assert fake_api.last_json() == {"amount": 2.5, "backerPublicKey": "BackerKey111"}


async def test_fund_renders_transaction(client, fake_api):
    fake_api.routes[("POST", "/campaigns/c1/back")] = (200, {"transaction": "AQIDBA=="})

    text = await campaigns.fund_campaign(client, "c1", 5.0, "BackerKey111")

    assert text.splitlines() == [
        "Unsigned transaction created successfully.",
        "",
        "Campaign: c1",
        "Amount: 5 SOL",
        "Backer: BackerKey111",
        "",
        "Serialized transaction (base64):",
        "AQIDBA==",
        "",
        "Sign this transaction with your wallet and submit it to the Solana network.",
    ]


async def test_fund_accepts_serialized_transaction_field(client, fake_api):
    fake_api.routes[("POST", "/campaigns/c1/back")] = (200, {"serializedTransaction": "BBBB"})

    text = await campaigns.fund_campaign(client, "c1", 1, "BackerKey111")

    assert "BBBB" in text.splitlines()


async def test_fund_empty_transaction_is_not_replaced_by_fallback_field(client, fake_api):
    fake_api.routes[("POST", "/campaigns/c1/back")] = (
        200,
        {"transaction": "", "serializedTransaction": "BBBB"},
    )

    text = await campaigns.fund_campaign(client, "c1", 1, "BackerKey111")

    assert text.startswith("Fund request accepted but no transaction was returned.")
    assert "Unsigned transaction created successfully." not in text


async def test_fund_without_transaction_echoes_response(client, fake_api):
    fake_api.routes[("POST", "/campaigns/c1/back")] = (200, {"status": "queued"})

    text = await campaigns.fund_campaign(client, "c1", 1, "BackerKey111")

    assert text == (
        "Fund request accepted but no transaction was returned. "
        'Response: {"status": "queued"}'
    )


async def test_fund_http_error(client, fake_api):
    fake_api.routes[("POST", "/campaigns/c1/back")] = (400, '{"error":"campaign closed"}')

    text = await campaigns.fund_campaign(client, "c1", 1, "BackerKey111")

    assert text == 'API returned 400: {"error":"campaign closed"}'
