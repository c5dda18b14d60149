"""
Reshaping of GitHub GraphQL payloads into the flatter shapes the front end uses.

Everything here is pure: it takes decoded JSON and returns decoded JSON.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Optional

ONE_DECIMAL = Decimal("0.1")


def dig(payload: Any, *keys: str) -> Optional[Any]:
    """Follow ``keys`` through nested dicts, returning None on the first miss."""
    current = payload
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def flatten_contributions(calendar: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten a contribution calendar into ``{totalContributions, contributions}``.

    Days keep calendar order: weeks in the order GitHub sends them, then days
    within each week. Each day becomes ``{date, count, color}``.
    """
    contributions = []
    for week in calendar.get("weeks") or []:
        for day in week.get("contributionDays") or []:
            contributions.append({
                "date": day.get("date"),
                "count": day.get("contributionCount"),
                "color": day.get("color"),
            })

    return {
        "totalContributions": calendar.get("totalContributions"),
        "contributions": contributions,
    }


def format_percentage(size, total) -> str:
    """Return ``size / total * 100`` rounded half away from zero, as "NN.N"."""
    ratio = Decimal(size) * 100 / Decimal(total)
    return str(ratio.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))


def aggregate_languages(repositories: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Sum language byte sizes across repositories.

    Returns ``[{name, color, size, percentage}]`` sorted by size, largest
    first; languages of equal size keep the order they were first seen in.
    An empty list is returned when no language bytes were found at all.
    """
    languages: Dict[str, Dict[str, Any]] = {}
    total_size = 0

    for repo in repositories:
        edges = dig(repo, "languages", "edges") or []
        for edge in edges:
            node = edge.get("node") or {}
            name = node.get("name")
            size = edge.get("size") or 0

            if name not in languages:
                languages[name] = {"size": 0, "color": node.get("color")}

            languages[name]["size"] += size
            total_size += size

    if total_size == 0:
        return []

    result = [
        {
            "name": name,
            "color": entry["color"],
            "size": entry["size"],
            "percentage": format_percentage(entry["size"], total_size),
        }
        for name, entry in languages.items()
    ]
    # sorted() is stable, so ties stay in encounter order
    return sorted(result, key=lambda lang: lang["size"], reverse=True)
