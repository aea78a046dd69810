"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
)

from canvas_pong.world import PongWorld


@dataclass(frozen=True)
class PongIntent(BaseIntent):
    """
    Intent for the Pong scene. Both paddles are CPU driven, so it is empty.
    """


@dataclass
class PongTickContext(BaseTickContext[PongWorld, PongIntent]):
    """
    Context for a Pong scene tick. Input is carried along but unused,
    the paddles steer themselves.

    :ivar world (PongWorld): Paddles and ball advanced this tick.
    :ivar intent (Optional[PongIntent]): Always empty, nobody is playing.
    :ivar packet (Optional[RenderPacket]): Frame produced by the render
        system.
    """
