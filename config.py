"""
Runtime configuration for the Snake game.

Values are read from the environment (a local .env file is loaded first)
and fall back to the defaults in domain.constants:

- SNAKE_WIDTH / SNAKE_HEIGHT: board size in cells
- SNAKE_RENDER_WIDTH / SNAKE_RENDER_HEIGHT: target window area in pixels
- SNAKE_TICK_SECONDS: delay between simulation ticks
- SNAKE_FPS: frame-rate limit of the window loop
- SNAKE_WINDOW_TITLE: window caption
- SNAKE_LOG_LEVEL: logging level name
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from domain.constants import (
    DEFAULT_FPS,
    DEFAULT_HEIGHT,
    DEFAULT_RENDER_HEIGHT,
    DEFAULT_RENDER_WIDTH,
    DEFAULT_TICK_SECONDS,
    DEFAULT_WIDTH,
    DEFAULT_WINDOW_TITLE,
)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    render_width: int = DEFAULT_RENDER_WIDTH
    render_height: int = DEFAULT_RENDER_HEIGHT
    tick_seconds: float = DEFAULT_TICK_SECONDS
    fps: int = DEFAULT_FPS
    title: str = DEFAULT_WINDOW_TITLE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "GameConfig":
        """
        Build a config from environment variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        load_dotenv()
        return cls(
            width=_env_int('SNAKE_WIDTH', DEFAULT_WIDTH),
            height=_env_int('SNAKE_HEIGHT', DEFAULT_HEIGHT),
            render_width=_env_int('SNAKE_RENDER_WIDTH', DEFAULT_RENDER_WIDTH),
            render_height=_env_int('SNAKE_RENDER_HEIGHT', DEFAULT_RENDER_HEIGHT),
            tick_seconds=_env_float('SNAKE_TICK_SECONDS', DEFAULT_TICK_SECONDS),
            fps=_env_int('SNAKE_FPS', DEFAULT_FPS),
            title=os.getenv('SNAKE_WINDOW_TITLE', DEFAULT_WINDOW_TITLE),
            log_level=os.getenv('SNAKE_LOG_LEVEL', 'INFO').upper(),
        )
