from __future__ import annotations

import logging
import math

import httpx
from fastapi import Depends, FastAPI, HTTPException, Query

from .search.config import DEFAULT_KAKAO_CONFIG, KakaoConfig
from .search.kakao_client import KakaoAPIError
from .search.models import SearchResponse
from .search.proxy import search_places
from .view.filters import CATEGORIES, DISTANCES

logger = logging.getLogger(__name__)

app = FastAPI(title="오늘 뭐 먹지 API", version="1.0.0")


def get_kakao_config() -> KakaoConfig:
    return DEFAULT_KAKAO_CONFIG


def get_upstream_transport() -> httpx.AsyncBaseTransport | None:
    """Transport for outbound Kakao calls; ``None`` means the default network transport."""
    return None


def _parse_coordinate(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    # float() accepts "nan" and "inf"
    return parsed if math.isfinite(parsed) else None


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "categories": CATEGORIES,
        "distances": [
            {"value": d.value, "label": d.label, "walk_time": d.walk_time}
            for d in DISTANCES
        ],
    }


# ── Search proxy ─────────────────────────────────────────────────────────


@app.get("/api/recommend", response_model=SearchResponse)
async def recommend(
    lat: str | None = None,
    lng: str | None = None,
    query: str = Query(default=DEFAULT_KAKAO_CONFIG.default_query),
    radius: int = Query(default=DEFAULT_KAKAO_CONFIG.default_radius, ge=0, le=DEFAULT_KAKAO_CONFIG.max_radius),
    config: KakaoConfig = Depends(get_kakao_config),
    transport: httpx.AsyncBaseTransport | None = Depends(get_upstream_transport),
) -> SearchResponse:
    latitude = _parse_coordinate(lat)
    longitude = _parse_coordinate(lng)
    if latitude is None or longitude is None:
        raise HTTPException(status_code=400, detail="Latitude and longitude are required")

    try:
        documents = await search_places(
            latitude,
            longitude,
            query=query,
            radius=radius,
            config=config,
            transport=transport,
        )
    except KakaoAPIError:
        logger.exception("Kakao API Error")
        raise HTTPException(status_code=500, detail="Failed to fetch data from Kakao API")

    return SearchResponse(documents=documents)
