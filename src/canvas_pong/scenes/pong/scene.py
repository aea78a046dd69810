"""
Pong scene hosting the Canvas Pong simulation in mini-arcade-core.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import BaseRenderSystem
from mini_arcade_core.scenes.systems.phases import SystemPhase
from mini_arcade_core.utils import logger

from canvas_pong.config import PongConfig
from canvas_pong.scenes.pong.models import PongTickContext
from canvas_pong.world import PongWorld, build_world


@dataclass
class PongSimulationSystem:
    """
    Move paddles and ball once per engine frame.
    """

    name: str = "pong_simulation"
    phase: int = SystemPhase.SIMULATION
    order: int = 30

    def step(self, ctx: PongTickContext):
        """Advance the world by one frame."""
        was_over = ctx.world.is_over
        ctx.world.advance()
        if ctx.world.is_over and not was_over:
            logger.info("Game over: ball got past a paddle")


class DrawWorld(Drawable[PongTickContext]):
    """
    Drawable to render the whole Pong world.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        ctx.world.draw(backend.render)


@dataclass
class PongRenderSystem(BaseRenderSystem):
    """
    Render the Pong world.
    """

    name: str = "pong_render"
    order: int = 100

    def step(self, ctx: PongTickContext):
        """Render the Pong world."""
        ctx.draw_ops = [DrawCall(drawable=DrawWorld(), ctx=ctx)]
        super().step(ctx)


def world_for_viewport(
    viewport: tuple[int, int], difficulty: str | None = None
) -> PongWorld:
    """
    Build a world sized to the engine's virtual viewport.

    :param viewport: Viewport (width, height).
    :type viewport: tuple[int, int]

    :param difficulty: Difficulty level from the gameplay settings.
    :type difficulty: str | None

    :return: New world.
    :rtype: PongWorld
    """
    data: dict[str, object] = {"canvas_size": viewport}
    if difficulty:
        data["difficulty"] = difficulty
    return build_world(PongConfig.from_dict(data))


@register_scene("pong")
class PongScene(SimScene[PongTickContext, PongWorld]):
    """
    Single scene: two CPU paddles and a ball until the ball gets past one.
    """

    tick_context_type = PongTickContext

    def on_enter(self):
        # Justification: window typer is protocol, mypy can't infer correctly
        # pylint: disable=assignment-from-no-return
        vw, vh = self.context.services.window.get_virtual_size()
        # pylint: enable=assignment-from-no-return

        difficulty = self.context.settings.difficulty.level
        self.world = world_for_viewport((vw, vh), difficulty)

        self.systems.extend(
            [
                PongSimulationSystem(),
                PongRenderSystem(),
            ]
        )
