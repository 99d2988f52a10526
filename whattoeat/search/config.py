from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class KakaoConfig:
    api_key: str = os.getenv("KAKAO_REST_API_KEY", "")
    base_url: str = "https://dapi.kakao.com/v2/local/search/keyword.json"
    timeout: float = 10.0
    default_query: str = "음식점"
    default_radius: int = 800
    max_radius: int = 20000


DEFAULT_KAKAO_CONFIG = KakaoConfig()
