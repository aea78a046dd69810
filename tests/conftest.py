from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from canvas_pong.geometry import Canvas


@dataclass
class FakeRender:
    """Records draw calls instead of painting."""

    calls: list[tuple] = field(default_factory=list)

    def draw_rect(self, x, y, w, h, color=(255, 255, 255)):
        self.calls.append(("rect", x, y, w, h, color))

    def draw_circle(self, x, y, radius, color=(255, 255, 255)):
        self.calls.append(("circle", x, y, radius, color))


@dataclass
class FakeBackend:
    render: FakeRender = field(default_factory=FakeRender)


@dataclass
class FakeScheduler:
    """Collects frame callbacks; run_pending plays one frame."""

    pending: list = field(default_factory=list)

    def request_frame(self, callback):
        self.pending.append(callback)

    def run_pending(self):
        callbacks, self.pending = self.pending, []
        for callback in callbacks:
            callback()


@pytest.fixture
def canvas():
    return Canvas.of(800, 400)


@pytest.fixture
def render():
    return FakeRender()


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def scheduler():
    return FakeScheduler()
