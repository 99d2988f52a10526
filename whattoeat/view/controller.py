from __future__ import annotations

import logging
import random

from ..search.models import Coordinate, Place
from .capabilities import (
    Geolocation,
    GeolocationError,
    MapCanvas,
    PanoramaLookup,
    PanoramaLookupError,
    PanoramaRenderer,
    PlacesSource,
    Screen,
    SearchError,
    Wheel,
)
from .config import DEFAULT_VIEW_CONFIG, ViewConfig
from .filters import FilterSelection
from .models import Phase, RecommendationSession, RecommendMode
from .overlays import OverlaySlot

logger = logging.getLogger(__name__)

LOCATION_FAILED = "위치 정보를 가져오는 데 실패했습니다. 위치 권한을 허용했는지 확인해주세요."
FETCH_FAILED = "음식점을 불러오는 데 실패했습니다."
NOT_FOUND = "주변에 추천할 음식점을 찾지 못했어요!"
NOT_ENOUGH_FOR_ROULETTE = "주변에 추첨할 음식점이 5개 미만입니다."
NO_PANORAMA = "이 장소 근처에는 로드뷰 정보가 없습니다."


class RecommendationView:
    """
    Owns the recommendation flow for one page view.

    All session mutation goes through ``RecommendationSession`` transitions:
    idle -> locating -> fetching -> picking_single | picking_roulette -> displaying.
    Collaborators are injected as capabilities; ``canvas`` and the panorama
    pair are optional, mirroring a page whose map SDK key is not configured.
    """

    def __init__(
        self,
        places: PlacesSource,
        geolocation: Geolocation,
        screen: Screen,
        wheel: Wheel,
        canvas: MapCanvas | None = None,
        panorama_lookup: PanoramaLookup | None = None,
        panorama_renderer: PanoramaRenderer | None = None,
        config: ViewConfig = DEFAULT_VIEW_CONFIG,
        rng: random.Random | None = None,
    ):
        self.places = places
        self.geolocation = geolocation
        self.screen = screen
        self.wheel = wheel
        self.canvas = canvas
        self.panorama_lookup = panorama_lookup
        self.panorama_renderer = panorama_renderer
        self.config = config
        self.rng = rng or random.Random()

        self.filters = FilterSelection()
        self.session = RecommendationSession()
        self.marker = OverlaySlot(canvas)
        self.route = OverlaySlot(canvas)

    # ── Acquisition flow ────────────────────────────────────────────────

    async def recommend(self, mode: RecommendMode = RecommendMode.single) -> Place | None:
        """
        Locate the user, search nearby places and pick one (or open the wheel).

        Returns the displayed place in single mode, ``None`` otherwise.
        Ignored while a previous request is still loading.
        """
        if self.session.loading:
            logger.info("recommend(%s) ignored: a request is already in flight", mode.value)
            return None

        seq = self.session.begin_request()
        self.marker.clear()
        self.route.clear()
        self._hide_panorama()
        self.screen.show_recommendation(None)

        try:
            try:
                location = await self.geolocation.current_position()
            except GeolocationError:
                logger.warning("Geolocation failed", exc_info=True)
                self.screen.alert(LOCATION_FAILED)
                self.session.transition(Phase.idle)
                return None

            if self._is_stale(seq):
                return None
            self.session.user_location = location
            if self.canvas is not None:
                self.canvas.set_center(location)
            self.session.transition(Phase.fetching)

            try:
                restaurants = await self.places.search(location, self.filters.query, self.filters.radius)
                if self._is_stale(seq):
                    return None
                if mode is RecommendMode.roulette:
                    self._open_roulette(restaurants)
                    return None
                place = self._pick_single(restaurants, location)
            except SearchError:
                logger.warning("Search proxy call failed", exc_info=True)
                self._fail(seq)
                return None
            except Exception:
                logger.exception("Recommendation request %d failed", seq)
                self._fail(seq)
                return None

            if place is not None and self.session.panorama_visible:
                await self.refresh_panorama()
            return place
        finally:
            if not self._is_stale(seq):
                self.session.loading = False

    def _pick_single(self, restaurants: list[Place], location: Coordinate) -> Place | None:
        self.session.transition(Phase.picking_single)
        if not restaurants:
            self.screen.alert(NOT_FOUND)
            self.session.transition(Phase.idle)
            return None
        place = restaurants[self.rng.randrange(len(restaurants))]
        self._display(place, location)
        return place

    def _open_roulette(self, restaurants: list[Place]) -> None:
        self.session.transition(Phase.picking_roulette)
        size = self.config.roulette_size
        if len(restaurants) < size:
            self.screen.alert(NOT_ENOUGH_FOR_ROULETTE)
            self.session.transition(Phase.idle)
            return
        self.session.roulette_items = restaurants[:size]
        self.session.roulette_open = True
        self.session.must_spin = False
        self.screen.show_roulette(self.session.roulette_options)

    # ── Roulette ────────────────────────────────────────────────────────

    async def spin(self) -> Place | None:
        """Spin the wheel once and display the winning place."""
        session = self.session
        if session.must_spin or not session.roulette_open or not session.roulette_items:
            return None

        seq = session.request_seq
        session.prize_number = self.rng.randrange(len(session.roulette_items))
        session.must_spin = True
        await self.wheel.spin(session.roulette_options, session.prize_number)
        if self._is_stale(seq):
            return None
        try:
            place = self._on_stop_spinning()
        except Exception:
            logger.exception("Displaying roulette prize %d failed", session.prize_number)
            self._fail(seq)
            return None
        if place is not None and session.panorama_visible:
            await self.refresh_panorama()
        return place

    def _on_stop_spinning(self) -> Place | None:
        session = self.session
        session.must_spin = False
        session.roulette_open = False
        place = session.roulette_items[session.prize_number]
        if session.user_location is None:
            session.transition(Phase.idle)
            return None
        self._display(place, session.user_location)
        return place

    def close_roulette(self) -> None:
        if not self.session.roulette_open or self.session.must_spin:
            return
        self.session.roulette_open = False
        self.session.transition(Phase.idle)

    # ── Display ─────────────────────────────────────────────────────────

    def _display(self, place: Place, origin: Coordinate) -> None:
        position = place.coordinate if self.canvas is not None else None
        self.session.recommendation = place
        self.session.transition(Phase.displaying)
        self.screen.show_recommendation(place)
        if self.canvas is None:
            return
        self.marker.replace(self.canvas.create_marker(position, title=place.place_name))
        self.route.replace(self.canvas.create_polyline([origin, position]))

    async def refresh_panorama(self) -> bool:
        """Render the panorama nearest to the current recommendation, if any."""
        place = self.session.recommendation
        if place is None or self.panorama_lookup is None or self.panorama_renderer is None:
            return False
        try:
            location = place.coordinate
            pano_id = await self.panorama_lookup.nearest_pano_id(location, self.config.panorama_radius_m)
        except (PanoramaLookupError, ValueError):
            logger.warning("Panorama lookup failed for %s", place.id, exc_info=True)
            pano_id = None
        if self.session.recommendation is not place:
            return False
        if pano_id is None:
            self.screen.alert(NO_PANORAMA)
            return False
        self.panorama_renderer.show_panorama(pano_id, location)
        return True

    async def toggle_panorama(self) -> bool:
        """Flip the panorama view; returns the new visibility."""
        self.session.panorama_visible = not self.session.panorama_visible
        if self.session.panorama_visible:
            await self.refresh_panorama()
        else:
            self._hide_panorama()
        return self.session.panorama_visible

    def _hide_panorama(self) -> None:
        if self.panorama_renderer is not None:
            self.panorama_renderer.hide_panorama()

    def _fail(self, seq: int) -> None:
        if self._is_stale(seq):
            return
        self.marker.clear()
        self.route.clear()
        self.screen.show_recommendation(None)
        self.screen.alert(FETCH_FAILED)
        self.session.abort()

    def _is_stale(self, seq: int) -> bool:
        if seq != self.session.request_seq:
            logger.info("Discarding stale completion of request %d", seq)
            return True
        return False
