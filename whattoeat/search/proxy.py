from __future__ import annotations

import logging
from typing import Iterable

import httpx

from .config import DEFAULT_KAKAO_CONFIG, KakaoConfig
from .kakao_client import keyword_search
from .models import Place

logger = logging.getLogger(__name__)


def split_categories(query: str | None, default: str = DEFAULT_KAKAO_CONFIG.default_query) -> list[str]:
    """Split a comma-separated category string into trimmed, non-empty terms."""
    categories = [c.strip() for c in (query or "").split(",") if c.strip()]
    return categories or [default]


def dedupe_places(places: Iterable[Place]) -> list[Place]:
    """Drop repeated place ids, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[Place] = []
    for place in places:
        if place.id in seen:
            continue
        seen.add(place.id)
        unique.append(place)
    return unique


async def search_places(
    lat: float,
    lng: float,
    query: str | None = None,
    radius: int | None = None,
    config: KakaoConfig = DEFAULT_KAKAO_CONFIG,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Place]:
    """
    Search every category around (lat, lng) and merge the results.

    Categories are queried one after another; the merged list keeps call
    order and contains each place id once. Any KakaoAPIError aborts the
    whole search.
    """
    categories = split_categories(query, default=config.default_query)
    radius = config.default_radius if radius is None else radius

    merged: list[Place] = []
    async with httpx.AsyncClient(transport=transport) as client:
        for category in categories:
            merged.extend(await keyword_search(client, category, lat, lng, radius, config=config))

    unique = dedupe_places(merged)
    logger.info(
        "search_places: %d categories, %d places (%d after dedupe)",
        len(categories),
        len(merged),
        len(unique),
    )
    return unique
