"""
Narrow interfaces for the collaborators the view drives.

Only the operations the recommendation flow actually invokes are exposed;
adapters for real services live in ``whattoeat.view.adapters``.
"""
from __future__ import annotations

from typing import Protocol, Sequence

from ..search.models import Coordinate, Place


class GeolocationError(Exception):
    """The current position is unavailable or permission was denied."""


class SearchError(Exception):
    """The search proxy call failed or returned an unreadable body."""


class PanoramaLookupError(Exception):
    """The nearest-panorama lookup could not be completed."""


class Geolocation(Protocol):
    async def current_position(self) -> Coordinate: ...


class PlacesSource(Protocol):
    async def search(self, location: Coordinate, query: str, radius: int) -> list[Place]: ...


class Overlay(Protocol):
    def attach(self, canvas: "MapCanvas") -> None: ...

    def detach(self) -> None: ...


class MapCanvas(Protocol):
    def set_center(self, location: Coordinate) -> None: ...

    def create_marker(self, position: Coordinate, title: str | None = None) -> Overlay: ...

    def create_polyline(self, path: Sequence[Coordinate]) -> Overlay: ...


class PanoramaLookup(Protocol):
    async def nearest_pano_id(self, location: Coordinate, radius_m: int) -> str | None: ...


class PanoramaRenderer(Protocol):
    def show_panorama(self, pano_id: str, location: Coordinate) -> None: ...

    def hide_panorama(self) -> None: ...


class Wheel(Protocol):
    async def spin(self, options: Sequence[str], prize_number: int) -> None: ...


class Screen(Protocol):
    def alert(self, message: str) -> None: ...

    def show_recommendation(self, place: Place | None) -> None: ...

    def show_roulette(self, options: Sequence[str]) -> None: ...
