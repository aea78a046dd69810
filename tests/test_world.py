from __future__ import annotations

import math

import pytest

from canvas_pong.config import PongConfig
from canvas_pong.constants import BACKGROUND, WHITE
from canvas_pong.controllers import CpuPaddleController
from canvas_pong.geometry import Vector
from canvas_pong.loop import SimulationLoop
from canvas_pong.world import build_world


@pytest.fixture
def world():
    return build_world()


def test_build_world_layout(world):
    assert world.left_paddle.position == Vector(30, 200)
    assert world.right_paddle.position == Vector(770, 200)
    assert world.ball.position == Vector(390, 250)
    assert world.ball.direction == pytest.approx(math.pi / 4)
    assert world.ball.targets == [world.left_paddle, world.right_paddle]
    assert world.entities == (
        world.left_paddle,
        world.right_paddle,
        world.ball,
    )


def test_paddles_are_cpu_driven(world):
    for paddle in world.paddles:
        assert isinstance(paddle.policy, CpuPaddleController)
        assert paddle.policy.ball is world.ball
        assert paddle.speed == 5.0
        assert paddle.width == 100


def test_build_world_from_config():
    world = build_world(
        PongConfig(canvas_size=(640, 480), paddle_inset=40, difficulty="hard")
    )

    assert world.canvas.width == 640
    assert world.right_paddle.position == Vector(600, 240)
    assert world.ball.position == Vector(310, 290)
    assert world.left_paddle.speed == 8.0


def test_one_tick_scenario(world, render, scheduler):
    loop = SimulationLoop(world, render, scheduler)

    loop.tick()

    assert world.ball.position.to_tuple() == pytest.approx(
        (390 + 10 * math.cos(math.pi / 4), 250 + 10 * math.sin(math.pi / 4))
    )
    # paddles saw the ball at y=250 (outside the dead zone) and moved down
    assert world.left_paddle.position == Vector(30, 205)
    assert world.right_paddle.position == Vector(770, 205)
    assert loop.frame == 1


def test_tick_clears_then_draws_in_order(world, render, scheduler):
    SimulationLoop(world, render, scheduler).tick()

    kinds = [call[0] for call in render.calls]
    assert kinds == ["rect", "rect", "rect", "circle"]
    assert render.calls[0] == ("rect", 0, 0, 800, 400, BACKGROUND)
    assert render.calls[1] == ("rect", 20, 155, 20, 100, WHITE)
    assert render.calls[2] == ("rect", 760, 155, 20, 100, WHITE)


def test_ball_collides_with_fresh_paddle_positions(world, render, scheduler):
    # ball heading left: its left probe misses the paddle's old
    # bottom end but hits it once the paddle moved down this frame
    world.ball.position = Vector(55, 253)
    world.ball.direction = math.pi

    SimulationLoop(world, render, scheduler).tick()

    assert world.left_paddle.position == Vector(30, 205)
    assert world.ball.direction == pytest.approx(0.0)
    assert world.ball.position == Vector(55, 253)
    assert not world.is_over


def test_ball_leaves_paddle_corner(world, render, scheduler):
    # right paddle idles in its dead zone while the ball grazes its
    # bottom end at a shallow angle
    world.right_paddle.position = Vector(770, 315)
    world.ball.position = Vector(753.03, 362.30)
    world.ball.direction = 0.3
    loop = SimulationLoop(world, render, scheduler)

    loop.tick()
    assert world.ball.position == Vector(753.03, 362.30)

    xs = []
    for _ in range(4):
        loop.tick()
        xs.append(world.ball.position.x)

    assert xs == sorted(xs, reverse=True)
    assert xs[-1] < 720
    assert not world.is_over


def test_loop_schedules_itself(world, render, scheduler):
    loop = SimulationLoop(world, render, scheduler)

    loop.start()
    loop.start()
    assert len(scheduler.pending) == 1
    assert loop.frame == 0

    for frame in range(1, 4):
        scheduler.run_pending()
        assert loop.frame == frame
        assert len(scheduler.pending) == 1


def test_terminal_state_is_frozen(world, render, scheduler):
    world.ball.position = Vector(12, 380)
    world.ball.direction = math.pi
    loop = SimulationLoop(world, render, scheduler)
    loop.start()

    scheduler.run_pending()
    assert world.is_over

    for _ in range(20):
        scheduler.run_pending()
        assert world.ball.position == Vector(12, 380)
        assert world.ball.direction == math.pi


def test_paddles_never_leave_canvas(world, render, scheduler):
    loop = SimulationLoop(world, render, scheduler)

    for _ in range(500):
        loop.tick()
        for paddle in world.paddles:
            top = paddle.position.y - paddle.width / 2
            bottom = paddle.position.y + paddle.width / 2
            assert 0 <= top <= bottom <= world.canvas.height


def test_ball_stays_inside_canvas(world, render, scheduler):
    loop = SimulationLoop(world, render, scheduler)

    for _ in range(500):
        loop.tick()
        ball = world.ball
        assert 0 <= ball.position.x - ball.radius
        assert ball.position.x + ball.radius <= world.canvas.width
        assert 0 <= ball.position.y - ball.radius
        assert ball.position.y + ball.radius <= world.canvas.height


def test_advance_and_draw_split(world, render):
    world.advance()
    world.draw(render)

    assert world.left_paddle.position == Vector(30, 205)
    assert render.calls[0] == ("rect", 0, 0, 800, 400, BACKGROUND)
    assert render.calls[-1][0] == "circle"
