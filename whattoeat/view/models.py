from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..search.models import Coordinate, Place


class RecommendMode(str, Enum):
    single = "single"
    roulette = "roulette"


class Phase(str, Enum):
    idle = "idle"
    locating = "locating"
    fetching = "fetching"
    picking_single = "picking_single"
    picking_roulette = "picking_roulette"
    displaying = "displaying"


ALLOWED_TRANSITIONS: dict[Phase, set[Phase]] = {
    Phase.idle: {Phase.locating},
    Phase.locating: {Phase.fetching, Phase.idle},
    Phase.fetching: {Phase.picking_single, Phase.picking_roulette, Phase.idle},
    Phase.picking_single: {Phase.displaying, Phase.idle},
    Phase.picking_roulette: {Phase.displaying, Phase.idle, Phase.locating},
    Phase.displaying: {Phase.locating},
}


class InvalidTransitionError(RuntimeError):
    pass


class RecommendationSession(BaseModel):
    """Transient state of one page view; replaced at the start of each request."""

    phase: Phase = Phase.idle
    loading: bool = False
    request_seq: int = 0
    recommendation: Place | None = None
    roulette_items: list[Place] = Field(default_factory=list)
    roulette_open: bool = False
    must_spin: bool = False
    prize_number: int = 0
    user_location: Coordinate | None = None
    panorama_visible: bool = False

    def transition(self, target: Phase) -> None:
        if target not in ALLOWED_TRANSITIONS[self.phase]:
            raise InvalidTransitionError(f"{self.phase.value} -> {target.value}")
        self.phase = target

    def begin_request(self) -> int:
        """Enter ``locating`` and drop everything the previous request produced.

        A phase left behind by an aborted request is reset to ``idle`` first.
        """
        if Phase.locating not in ALLOWED_TRANSITIONS[self.phase]:
            self.abort()
        self.transition(Phase.locating)
        self.loading = True
        self.request_seq += 1
        self.recommendation = None
        self.roulette_items = []
        self.roulette_open = False
        self.must_spin = False
        self.prize_number = 0
        return self.request_seq

    def abort(self) -> None:
        """Force the session back to ``idle`` from any phase, dropping partial results."""
        self.phase = Phase.idle
        self.loading = False
        self.recommendation = None
        self.roulette_items = []
        self.roulette_open = False
        self.must_spin = False

    @property
    def roulette_options(self) -> list[str]:
        return [p.place_name for p in self.roulette_items]
