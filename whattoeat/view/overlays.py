from __future__ import annotations

from .capabilities import MapCanvas, Overlay


class OverlaySlot:
    """
    Single-owner holder for one map overlay (marker, route line).

    ``replace`` always detaches the held overlay before attaching the new one,
    so two overlays from the same slot never coexist on the map.
    """

    def __init__(self, canvas: MapCanvas | None):
        self._canvas = canvas
        self._current: Overlay | None = None

    @property
    def current(self) -> Overlay | None:
        return self._current

    def replace(self, overlay: Overlay) -> None:
        self.clear()
        if self._canvas is None:
            return
        overlay.attach(self._canvas)
        self._current = overlay

    def clear(self) -> None:
        if self._current is not None:
            self._current.detach()
            self._current = None
