"""
CPU difficulty presets for Canvas Pong.
"""

from __future__ import annotations

from canvas_pong.controllers.cpu import CpuConfig

# Keys follow mini-arcade-core's difficulty levels.
DIFFICULTY_PRESETS: dict[str, CpuConfig] = {
    "easy": CpuConfig(max_speed=3.0),
    "normal": CpuConfig(max_speed=5.0),
    "hard": CpuConfig(max_speed=8.0),
    "insane": CpuConfig(max_speed=12.0),
}

DEFAULT_DIFFICULTY = "normal"


def cpu_config_for(difficulty: str | None) -> CpuConfig:
    """
    Resolve the CPU settings for a difficulty name.

    Unknown or missing names fall back to the default difficulty.

    :param difficulty: Difficulty name (case-insensitive).
    :type difficulty: str | None

    :return: CPU configuration.
    :rtype: CpuConfig
    """
    key = str(difficulty or DEFAULT_DIFFICULTY).strip().lower()
    return DIFFICULTY_PRESETS.get(key, DIFFICULTY_PRESETS[DEFAULT_DIFFICULTY])
