from __future__ import annotations

import logging

import httpx

from .config import DEFAULT_KAKAO_CONFIG, KakaoConfig
from .models import Place, SearchResponse

logger = logging.getLogger(__name__)


class KakaoAPIError(Exception):
    """Raised when a Kakao keyword search cannot be completed."""


def _auth_headers(config: KakaoConfig) -> dict[str, str]:
    return {"Authorization": f"KakaoAK {config.api_key}"}


async def keyword_search(
    client: httpx.AsyncClient,
    category: str,
    lat: float,
    lng: float,
    radius: int,
    config: KakaoConfig = DEFAULT_KAKAO_CONFIG,
) -> list[Place]:
    """
    Run one Kakao keyword search centred on (lat, lng).

    Returns the places of the first result page, in Kakao's order.
    Raises KakaoAPIError on a missing key, transport error, non-2xx
    status or a body that does not look like a search response.
    """
    if not config.api_key:
        raise KakaoAPIError("KAKAO_REST_API_KEY is not configured")

    params = {
        "query": category,
        "y": str(lat),
        "x": str(lng),
        "radius": str(radius),
    }
    try:
        response = await client.get(
            config.base_url,
            params=params,
            headers=_auth_headers(config),
            timeout=config.timeout,
        )
        response.raise_for_status()
        parsed = SearchResponse.model_validate(response.json())
    except (httpx.HTTPError, ValueError) as exc:  # ValidationError, JSONDecodeError
        raise KakaoAPIError(f"Kakao keyword search failed for {category!r}") from exc

    logger.debug(
        "Kakao keyword search: query=%s lat=%.6f lng=%.6f radius=%d got %d places",
        category,
        lat,
        lng,
        radius,
        len(parsed.documents),
    )
    return parsed.documents
