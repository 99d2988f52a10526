from __future__ import annotations

import asyncio
from typing import Sequence

from ...search.models import Coordinate, Place
from ..capabilities import GeolocationError
from ..config import DEFAULT_VIEW_CONFIG, ViewConfig


class FixedGeolocation:
    """Reports a position given up front; no position behaves like a denied permission."""

    def __init__(self, location: Coordinate | None):
        self.location = location

    async def current_position(self) -> Coordinate:
        if self.location is None:
            raise GeolocationError("User denied Geolocation")
        return self.location


class ConsoleScreen:
    def __init__(self, out=print):
        self.out = out

    def alert(self, message: str) -> None:
        self.out(f"[!] {message}")

    def show_recommendation(self, place: Place | None) -> None:
        if place is None:
            return
        self.out(f"\n{place.place_name}")
        self.out(f"  카테고리: {place.category_name}")
        self.out(f"  주소: {place.road_address_name or place.address_name}")
        if place.place_url:
            self.out(f"  카카오맵에서 상세보기: {place.place_url}")

    def show_roulette(self, options: Sequence[str]) -> None:
        self.out("룰렛을 돌려 오늘 점심을 선택하세요!")
        for i, option in enumerate(options, start=1):
            self.out(f"  {i}. {option}")


class ConsoleWheel:
    """Cycles through the options and settles on the prize."""

    def __init__(self, config: ViewConfig = DEFAULT_VIEW_CONFIG, out=print):
        self.config = config
        self.out = out

    async def spin(self, options: Sequence[str], prize_number: int) -> None:
        steps = self.config.spin_steps
        # land on the prize after the final step
        start = (prize_number - steps) % len(options)
        for step in range(steps + 1):
            self.out(f"  ... {options[(start + step) % len(options)]}")
            await asyncio.sleep(self.config.spin_interval)
