from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ViewConfig:
    maps_api_key: str = os.getenv("MAPS_API_KEY", "")
    proxy_base_url: str = os.getenv("WHATTOEAT_PROXY_URL", "")
    default_center: tuple[float, float] = (36.3504, 127.3845)
    zoom: int = 17
    roulette_size: int = 5
    panorama_radius_m: int = 50
    spin_steps: int = 20
    spin_interval: float = 0.06
    timeout: float = 15.0

    @property
    def map_enabled(self) -> bool:
        return bool(self.maps_api_key)


DEFAULT_VIEW_CONFIG = ViewConfig()
