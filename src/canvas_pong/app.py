"""
Minimal main application for Canvas Pong.
"""

from __future__ import annotations

from mini_arcade_core import run_game  # pyright: ignore[reportMissingImports]
from mini_arcade_core.utils import logger

from canvas_pong.constants import BACKGROUND, CANVAS_SIZE, FPS
from canvas_pong.difficulty import DEFAULT_DIFFICULTY


def run(difficulty: str = DEFAULT_DIFFICULTY):
    """
    Main entry point for Canvas Pong.

    - Auto-discovers scenes from the `canvas_pong.scenes` package.
    - Sets up the game window with the canvas dimensions and background color.
    - Runs the game with the initial scene set to "pong".

    The window backend ships in the ``native`` extra
    (``pip install "canvas-pong[native]"``).

    :param difficulty: CPU difficulty preset name.
    :type difficulty: str

    :raises SystemExit: If the native backend is not installed.
    """
    try:
        # Justification: in editable installs, this module is provided by
        # the package.
        # pylint: disable=no-name-in-module,import-outside-toplevel
        from mini_arcade_native_backend import (  # pyright: ignore[reportMissingImports]
            BackendSettings,
            NativeBackend,
            RendererSettings,
            WindowSettings,
        )

        # pylint: enable=no-name-in-module,import-outside-toplevel
    except ImportError as exc:
        raise SystemExit(
            "canvas-pong needs the native backend to open a window: "
            'pip install "canvas-pong[native]"'
        ) from exc

    c_width, c_height = CANVAS_SIZE
    backend_settings = BackendSettings(
        window=WindowSettings(
            width=c_width,
            height=c_height,
            title="Canvas Pong (Native SDL2 + mini-arcade-core)",
            high_dpi=False,
        ),
        renderer=RendererSettings(background_color=BACKGROUND),
    )
    backend = NativeBackend(settings=backend_settings)

    logger.info("Starting Canvas Pong...")
    run_game(
        engine_config={"fps": FPS, "virtual_resolution": CANVAS_SIZE},
        backend=backend,
        scene_config={
            "initial_scene": "pong",
            "discover_packages": ["canvas_pong.scenes"],
        },
        gameplay_config={"difficulty": difficulty},
    )


if __name__ == "__main__":
    run()
