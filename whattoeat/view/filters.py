from __future__ import annotations

from dataclasses import dataclass, field

from ..search.config import DEFAULT_KAKAO_CONFIG

CATEGORIES = [
    "한식", "중식", "일식", "양식", "아시아음식", "분식",
    "패스트푸드", "치킨", "피자", "뷔페", "카페", "술집",
]


@dataclass(frozen=True)
class DistanceOption:
    value: int
    label: str
    walk_time: str


DISTANCES = [
    DistanceOption(500, "가까워요", "약 5분"),
    DistanceOption(800, "적당해요", "약 10분"),
    DistanceOption(2000, "조금 멀어요", "약 25분"),
]

DEFAULT_RADIUS = 800


@dataclass
class FilterSelection:
    """Selected categories (in selection order) and search radius."""

    categories: list[str] = field(default_factory=list)
    radius: int = DEFAULT_RADIUS

    def toggle(self, category: str) -> None:
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category}")
        if category in self.categories:
            self.categories = [c for c in self.categories if c != category]
        else:
            self.categories = [*self.categories, category]

    def select_all(self, checked: bool) -> None:
        self.categories = list(CATEGORIES) if checked else []

    @property
    def all_selected(self) -> bool:
        return len(self.categories) == len(CATEGORIES)

    def set_radius(self, value: int) -> None:
        if value not in {d.value for d in DISTANCES}:
            raise ValueError(f"Unsupported radius: {value}")
        self.radius = value

    @property
    def query(self) -> str:
        """Comma-joined categories, or the generic restaurant term when none are selected."""
        if self.categories:
            return ",".join(self.categories)
        return DEFAULT_KAKAO_CONFIG.default_query
