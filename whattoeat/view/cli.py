"""
Terminal front end for the recommendation view.

Run with: whattoeat --lat 37.5665 --lng 126.9780 --category 한식 --roulette
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import httpx

from ..search.models import Coordinate
from .adapters.console import ConsoleScreen, ConsoleWheel, FixedGeolocation
from .adapters.folium_map import FoliumMapCanvas
from .adapters.proxy_client import ProxyClient
from .adapters.streetview import StreetViewLookup
from .config import DEFAULT_VIEW_CONFIG, ViewConfig
from .controller import RecommendationView
from .filters import CATEGORIES, DISTANCES
from .models import Phase, RecommendMode

logger = logging.getLogger(__name__)

IN_PROCESS_BASE_URL = "http://whattoeat.local"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="whattoeat", description="오늘 뭐 먹지? 주변 음식점 추천")
    parser.add_argument("--lat", type=float, help="current latitude")
    parser.add_argument("--lng", type=float, help="current longitude")
    parser.add_argument("--category", action="append", choices=CATEGORIES, default=[], help="repeatable")
    parser.add_argument("--all-categories", action="store_true")
    parser.add_argument("--radius", type=int, choices=[d.value for d in DISTANCES], default=800)
    parser.add_argument("--roulette", action="store_true", help="pick from a five-way wheel")
    parser.add_argument("--panorama", action="store_true", help="show the nearest street-level panorama")
    parser.add_argument("--proxy-url", default=DEFAULT_VIEW_CONFIG.proxy_base_url,
                        help="search proxy base URL (default: call the app in-process)")
    parser.add_argument("--out", default="recommendation.html", help="where to write the map")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _places_source(proxy_url: str, config: ViewConfig) -> ProxyClient:
    if proxy_url:
        return ProxyClient(proxy_url, config=config)
    from ..app import app

    return ProxyClient(IN_PROCESS_BASE_URL, transport=httpx.ASGITransport(app=app), config=config)


def build_view(args: argparse.Namespace, config: ViewConfig = DEFAULT_VIEW_CONFIG) -> RecommendationView:
    location = Coordinate(args.lat, args.lng) if args.lat is not None and args.lng is not None else None

    canvas = None
    lookup = None
    if config.map_enabled:
        canvas = FoliumMapCanvas(config)
        lookup = StreetViewLookup(config)
    else:
        logger.warning("MAPS_API_KEY not set; map rendering and panorama are disabled")

    view = RecommendationView(
        places=_places_source(args.proxy_url, config),
        geolocation=FixedGeolocation(location),
        screen=ConsoleScreen(),
        wheel=ConsoleWheel(config),
        canvas=canvas,
        panorama_lookup=lookup,
        panorama_renderer=canvas,
        config=config,
    )
    if args.all_categories:
        view.filters.select_all(True)
    for category in args.category:
        if category not in view.filters.categories:
            view.filters.toggle(category)
    view.filters.set_radius(args.radius)
    return view


async def run(args: argparse.Namespace, config: ViewConfig = DEFAULT_VIEW_CONFIG) -> int:
    view = build_view(args, config)
    mode = RecommendMode.roulette if args.roulette else RecommendMode.single
    await view.recommend(mode)

    if view.session.roulette_open:
        await asyncio.to_thread(input, "돌리기 [Enter] ")
        await view.spin()

    if view.session.phase is not Phase.displaying:
        return 1

    if args.panorama:
        await view.toggle_panorama()
    if isinstance(view.canvas, FoliumMapCanvas):
        path = view.canvas.save(args.out)
        print(f"\n지도: {path.resolve()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
