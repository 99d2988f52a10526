from __future__ import annotations

import logging

import httpx

from ...search.models import Coordinate, Place, SearchResponse
from ..capabilities import SearchError
from ..config import DEFAULT_VIEW_CONFIG, ViewConfig

logger = logging.getLogger(__name__)

RECOMMEND_PATH = "/api/recommend"


class ProxyClient:
    """
    PlacesSource backed by the ``/api/recommend`` endpoint.

    Pass ``transport=httpx.ASGITransport(app=app)`` to call the FastAPI app
    in-process instead of over the network.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        config: ViewConfig = DEFAULT_VIEW_CONFIG,
    ):
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.config = config

    async def search(self, location: Coordinate, query: str, radius: int) -> list[Place]:
        params = {
            "lat": str(location.lat),
            "lng": str(location.lng),
            "query": query,
            "radius": str(radius),
        }
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                transport=self.transport,
                timeout=self.config.timeout,
            ) as client:
                response = await client.get(RECOMMEND_PATH, params=params)
                response.raise_for_status()
                documents = SearchResponse.model_validate(response.json()).documents
        except (httpx.HTTPError, ValueError) as exc:
            raise SearchError("API call failed") from exc

        logger.debug("Proxy returned %d places for query=%s radius=%d", len(documents), query, radius)
        return documents
