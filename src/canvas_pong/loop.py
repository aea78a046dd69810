"""
Self-scheduling frame loop that drives a Pong world on any render surface.
"""

from __future__ import annotations

from typing import Callable, Protocol

from mini_arcade_core.backend import RenderProtocol
from mini_arcade_core.utils import logger

from canvas_pong.world import PongWorld

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    """
    Host hook that runs a callback before the next repaint.
    """

    def request_frame(self, callback: FrameCallback):
        """
        Schedule a callback for the next frame.

        :param callback: Callback to run once.
        :type callback: FrameCallback
        """


class SimulationLoop:
    """
    Owns a world and a render surface and ticks them once per frame.

    Every tick clears the background, then moves and redraws each entity in
    order. Paddles go first so the ball collides with their fresh positions.
    """

    def __init__(
        self,
        world: PongWorld,
        render: RenderProtocol,
        scheduler: FrameScheduler,
    ):
        """
        :param world: World to simulate.
        :type world: PongWorld

        :param render: Render surface to draw on.
        :type render: RenderProtocol

        :param scheduler: Host frame scheduler.
        :type scheduler: FrameScheduler
        """
        self.world = world
        self.render = render
        self.scheduler = scheduler
        self.frame = 0
        self.running = False

    def tick(self):
        """Run a single simulation frame."""
        self.world.clear(self.render)
        for entity in self.world.entities:
            self.world.step_entity(entity)
            entity.draw(self.render)
        self.frame += 1

    def start(self):
        """Request the first frame; later frames schedule themselves."""
        if self.running:
            return
        self.running = True
        logger.info("Starting Canvas Pong loop")
        self.scheduler.request_frame(self._on_frame)

    def _on_frame(self):
        self.tick()
        self.scheduler.request_frame(self._on_frame)
