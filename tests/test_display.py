"""Tests for frames and rendering."""

from snake_duel.display import Frame, MonotonicClock, render_frame


class _Display:
    def __init__(self):
        self.calls = []

    def draw_cell(self, x, y, glyph):
        self.calls.append(("draw", x, y, glyph))

    def clear_cell(self, x, y):
        self.calls.append(("clear", x, y))

    def refresh(self):
        self.calls.append(("refresh",))


class TestRenderFrame:
    def test_clears_then_draws_then_refreshes(self):
        display = _Display()
        frame = Frame(clear=[(1, 1)], draw=[((2, 1), "X"), ((1, 1), "x")])
        render_frame(display, frame)
        assert display.calls == [
            ("clear", 1, 1),
            ("draw", 2, 1, "X"),
            ("draw", 1, 1, "x"),
            ("refresh",),
        ]

    def test_empty_frame_only_refreshes(self):
        display = _Display()
        render_frame(display, Frame())
        assert display.calls == [("refresh",)]


class TestFrame:
    def test_truthiness(self):
        assert not Frame()
        assert Frame(clear=[(0, 0)])
        assert Frame(draw=[((0, 0), "+")])


class TestMonotonicClock:
    def test_never_goes_backwards(self):
        clock = MonotonicClock()
        first = clock.now()
        assert clock.now() >= first
