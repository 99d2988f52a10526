from __future__ import annotations

import logging

import httpx

from ...search.models import Coordinate
from ..capabilities import PanoramaLookupError
from ..config import DEFAULT_VIEW_CONFIG, ViewConfig

logger = logging.getLogger(__name__)

METADATA_URL = "https://maps.googleapis.com/maps/api/streetview/metadata"
EMBED_URL = "https://www.google.com/maps/embed/v1/streetview"

_NO_PANORAMA_STATUSES = {"ZERO_RESULTS", "NOT_FOUND"}


def embed_url(pano_id: str, api_key: str) -> str:
    return str(httpx.URL(EMBED_URL, params={"key": api_key, "pano": pano_id}))


class StreetViewLookup:
    """Nearest-panorama lookup through the Street View metadata endpoint (no quota charge)."""

    def __init__(
        self,
        config: ViewConfig = DEFAULT_VIEW_CONFIG,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.transport = transport

    async def nearest_pano_id(self, location: Coordinate, radius_m: int) -> str | None:
        params = {
            "location": f"{location.lat},{location.lng}",
            "radius": str(radius_m),
            "source": "outdoor",
            "key": self.config.maps_api_key,
        }
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.config.timeout) as client:
                response = await client.get(METADATA_URL, params=params)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise PanoramaLookupError("Street View metadata request failed") from exc

        if not isinstance(data, dict):
            raise PanoramaLookupError(f"Unexpected Street View metadata body: {type(data).__name__}")
        status = data.get("status")
        if status == "OK" and data.get("pano_id"):
            return str(data["pano_id"])
        if status in _NO_PANORAMA_STATUSES:
            return None
        raise PanoramaLookupError(f"Street View metadata status {status!r}: {data.get('error_message', '')}")
