# =============================================================================
# core/render.py  -  Default-on-Missing Rendering Helpers
# =============================================================================
#
# The upstream schema is assumed, not enforced: any field may be missing or
# null.  The rendering contract is that a tool NEVER fails or drops a line
# because of that.  Instead it substitutes a sentinel and keeps going:
#
#   title missing   ->  "Untitled"
#   status missing  ->  "unknown"
#   id / label      ->  "?"
#   funded, backers ->  0
#
# All of that defaulting goes through the two accessors below, so the policy
# lives in one place and can be tested without any HTTP in the picture.
# =============================================================================

from typing import Any, Mapping


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def string_or(value: Any, fallback: str) -> str:
    """Render ``value`` as text, or ``fallback`` when it is missing (None)."""
    if value is None:
        return fallback
    return _display(value)


def number_or(value: Any, fallback: Any) -> str:
    """Render a numeric field; integral floats lose their trailing ``.0``."""
    if value is None:
        return str(fallback)
    return _display(value)


def unwrap(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return ``payload[key]`` when the API nests the record, else the payload."""
    inner = payload.get(key)
    if isinstance(inner, Mapping):
        return inner
    return payload


def record_id(record: Mapping[str, Any]) -> str:
    value = record.get("id")
    if value is None:
        value = record.get("_id")
    return string_or(value, "?")


def records(payload: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    """The list under ``key``, keeping only mapping entries."""
    items = payload.get(key)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, Mapping)]


def join_lines(lines) -> str:
    return "\n".join(lines)


# -----------------------------------------------------------------------------
# Shared campaign renderers
# -----------------------------------------------------------------------------
def campaign_summary(number: int, c: Mapping[str, Any], with_backers: bool = False) -> str:
    """Four-line numbered entry used by the search and list tools."""
    funding = f"   Goal: {number_or(c.get('goalAmount'), '?')} | Funded: {number_or(c.get('fundedAmount'), 0)}"
    if with_backers:
        funding += f" | Backers: {number_or(c.get('backerCount'), 0)}"
    return join_lines([
        f"{number}. {string_or(c.get('title'), 'Untitled')}",
        f"   Type: {string_or(c.get('type'), 'n/a')} | Category: {string_or(c.get('category'), 'n/a')}",
        funding,
        f"   Status: {string_or(c.get('status'), 'unknown')} | ID: {record_id(c)}",
    ])


def milestone_line(m: Mapping[str, Any]) -> str:
    return (
        f"  - #{number_or(m.get('number'), '?')} {string_or(m.get('name'), 'Untitled')}: "
        f"{string_or(m.get('deliverable'), '?')} "
        f"({number_or(m.get('fundsPercentage'), '?')}% - {string_or(m.get('status'), 'unknown')})"
    )
