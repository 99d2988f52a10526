from __future__ import annotations

from whattoeat.search.models import Coordinate
from whattoeat.view.adapters.folium_map import FoliumMapCanvas
from whattoeat.view.config import ViewConfig
from whattoeat.view.overlays import OverlaySlot

CONFIG = ViewConfig(maps_api_key="maps-key")
HOME = Coordinate(36.3504, 127.3845)
PLACE = Coordinate(36.3521, 127.3862)


def test_starts_at_default_center():
    canvas = FoliumMapCanvas(CONFIG)
    assert canvas.center == [36.3504, 127.3845]


def test_set_center():
    canvas = FoliumMapCanvas(CONFIG)
    canvas.set_center(Coordinate(37.5, 127.0))
    assert canvas.center == [37.5, 127.0]


def test_overlay_attach_and_detach():
    canvas = FoliumMapCanvas(CONFIG)
    marker = canvas.create_marker(PLACE, title="식당")
    route = canvas.create_polyline([HOME, PLACE])

    marker.attach(canvas)
    route.attach(canvas)
    assert len(canvas.overlays()) == 2

    marker.detach()
    assert canvas.overlays() == [route.element.get_name()]
    assert not marker.attached


def test_slot_replacement_never_duplicates_markers():
    canvas = FoliumMapCanvas(CONFIG)
    slot = OverlaySlot(canvas)

    for lat in (36.35, 36.36, 36.37):
        slot.replace(canvas.create_marker(Coordinate(lat, 127.38)))

    assert canvas.overlays() == [slot.current.element.get_name()]


def test_route_style():
    canvas = FoliumMapCanvas(CONFIG)
    route = canvas.create_polyline([HOME, PLACE])
    route.attach(canvas)

    html = canvas.map.get_root().render()

    assert "#007BFF" in html
    assert route.element.get_name() in html


def test_panorama_show_and_hide():
    canvas = FoliumMapCanvas(CONFIG)

    canvas.show_panorama("pano-9", PLACE)
    assert canvas.panorama_visible
    assert "pano=pano-9" in canvas.map.get_root().render()

    canvas.hide_panorama()
    assert not canvas.panorama_visible
    assert "pano=pano-9" not in canvas.map.get_root().render()


def test_save_writes_html(tmp_path):
    canvas = FoliumMapCanvas(CONFIG)
    canvas.create_marker(PLACE).attach(canvas)

    path = canvas.save(tmp_path / "map.html")

    assert path.is_file()
    assert "leaflet" in path.read_text(encoding="utf-8").lower()
