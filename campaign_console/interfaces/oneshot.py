"""One-shot interface: run a single global search, print grouped results, exit."""

from __future__ import annotations

import asyncio
import json

from campaign_console.core.config import config
from campaign_console.core.logger import logger
from campaign_console.search.aggregator import create_default_service, normalize_query
from campaign_console.search.models import SearchResults

_GROUP_LABELS = (
    ("members", "Members"),
    ("campaigns", "Campaigns"),
    ("segments", "Segments"),
)


def format_results(results: SearchResults) -> str:
    if results.is_empty:
        return "No results."
    lines: list[str] = []
    for key, label in _GROUP_LABELS:
        group = getattr(results, key)
        if not group:
            continue
        lines.append(f"{label}:")
        for r in group:
            subtitle = f"  ({r.subtitle})" if r.subtitle else ""
            lines.append(f"  {r.title}{subtitle}  -> {r.url}")
    return "\n".join(lines)


async def run_oneshot(query: str, as_json: bool = False) -> int:
    if not normalize_query(query):
        print("Error: query must not be empty")
        return 2

    problems = config.validate()
    if problems:
        logger.warning("Configuration incomplete: " + "; ".join(problems))

    results = await create_default_service().search_all(query)
    if as_json:
        print(json.dumps(results.model_dump(mode="json", by_alias=True), indent=2))
    else:
        print(format_results(results))
    return 0


def main(query: str, as_json: bool = False) -> int:
    return asyncio.run(run_oneshot(query=query, as_json=as_json))
