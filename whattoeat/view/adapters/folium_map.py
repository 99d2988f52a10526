from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import Sequence

import folium

from ...search.models import Coordinate
from ..config import DEFAULT_VIEW_CONFIG, ViewConfig
from .streetview import embed_url

logger = logging.getLogger(__name__)

ROUTE_STYLE = {"weight": 5, "color": "#007BFF", "opacity": 0.8}


def _point(c: Coordinate) -> list[float]:
    return [c.lat, c.lng]


# branca keeps children in a private ordered dict and exposes no removal API;
# every access to it goes through these two helpers.
def _child_items(parent: folium.Element) -> list[tuple[str, folium.Element]]:
    return list(parent._children.items())


def _remove_child(parent: folium.Element, element: folium.Element) -> None:
    parent._children.pop(element.get_name(), None)


class FoliumOverlay:
    """A folium element that can be attached to and detached from one canvas."""

    def __init__(self, element: folium.Element):
        self.element = element
        self._parent: folium.Map | None = None

    @property
    def attached(self) -> bool:
        return self._parent is not None

    def attach(self, canvas: "FoliumMapCanvas") -> None:
        if self._parent is not None:
            self.detach()
        self.element.add_to(canvas.map)
        self._parent = canvas.map

    def detach(self) -> None:
        if self._parent is None:
            return
        _remove_child(self._parent, self.element)
        self._parent = None


class FoliumMapCanvas:
    """
    MapCanvas and PanoramaRenderer rendered with folium.

    The map lives in memory and is written out with ``save``; the panorama is
    a Google Maps Embed Street View iframe placed under the map.
    """

    def __init__(self, config: ViewConfig = DEFAULT_VIEW_CONFIG):
        self.config = config
        lat, lng = config.default_center
        self.map = folium.Map(location=[lat, lng], zoom_start=config.zoom)
        self._panorama: folium.Element | None = None

    @property
    def center(self) -> list[float]:
        return list(self.map.location)

    def set_center(self, location: Coordinate) -> None:
        self.map.location = _point(location)

    def create_marker(self, position: Coordinate, title: str | None = None) -> FoliumOverlay:
        return FoliumOverlay(folium.Marker(_point(position), tooltip=title))

    def create_polyline(self, path: Sequence[Coordinate]) -> FoliumOverlay:
        return FoliumOverlay(folium.PolyLine([_point(c) for c in path], **ROUTE_STYLE))

    def overlays(self) -> list[str]:
        """Names of the markers and polylines currently on the map."""
        return [
            name
            for name, child in _child_items(self.map)
            if isinstance(child, (folium.Marker, folium.PolyLine))
        ]

    # ── Panorama ────────────────────────────────────────────────────────

    def show_panorama(self, pano_id: str, location: Coordinate) -> None:
        self.hide_panorama()
        src = html.escape(embed_url(pano_id, self.config.maps_api_key), quote=True)
        self._panorama = folium.Element(
            f'<iframe class="roadview" title="roadview {location.lat:.6f},{location.lng:.6f}" '
            f'src="{src}" width="100%" height="360" style="border:0" '
            'loading="lazy" allowfullscreen></iframe>'
        )
        self.map.get_root().html.add_child(self._panorama)

    def hide_panorama(self) -> None:
        if self._panorama is None:
            return
        _remove_child(self.map.get_root().html, self._panorama)
        self._panorama = None

    @property
    def panorama_visible(self) -> bool:
        return self._panorama is not None

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        self.map.save(str(path))
        logger.info("Map written to %s", path)
        return path
