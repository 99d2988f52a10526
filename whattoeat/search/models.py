from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float


class Place(BaseModel):
    """A single point of interest as returned by Kakao keyword search.

    Kakao sends coordinates as numeric strings: ``x`` is the longitude and
    ``y`` the latitude.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    place_name: str
    category_name: str = ""
    road_address_name: str = ""
    address_name: str = ""
    phone: str = ""
    distance: str = ""
    x: str
    y: str
    place_url: str = ""

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(lat=float(self.y), lng=float(self.x))


class SearchResponse(BaseModel):
    documents: list[Place]
