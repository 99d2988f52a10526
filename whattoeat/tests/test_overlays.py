from whattoeat.view.overlays import OverlaySlot


class _Canvas:
    def __init__(self):
        self.events: list[tuple[str, str]] = []
        self.attached: set[str] = set()


class _Overlay:
    def __init__(self, name: str):
        self.name = name
        self.canvas: _Canvas | None = None

    def attach(self, canvas):
        self.canvas = canvas
        canvas.events.append(("attach", self.name))
        canvas.attached.add(self.name)

    def detach(self):
        self.canvas.events.append(("detach", self.name))
        self.canvas.attached.discard(self.name)
        self.canvas = None


def test_replace_detaches_previous_before_attaching():
    canvas = _Canvas()
    slot = OverlaySlot(canvas)

    slot.replace(_Overlay("m1"))
    slot.replace(_Overlay("m2"))

    assert canvas.events == [("attach", "m1"), ("detach", "m1"), ("attach", "m2")]
    assert canvas.attached == {"m2"}
    assert slot.current.name == "m2"


def test_clear_is_idempotent():
    canvas = _Canvas()
    slot = OverlaySlot(canvas)
    slot.replace(_Overlay("m1"))

    slot.clear()
    slot.clear()

    assert canvas.attached == set()
    assert slot.current is None


def test_without_canvas_nothing_is_attached():
    slot = OverlaySlot(None)
    overlay = _Overlay("m1")
    slot.replace(overlay)
    assert overlay.canvas is None
    assert slot.current is None
