"""
Runtime settings for the snake game and the fleet console.

Values come from the environment (a local .env file is loaded first), with
defaults matching the classic desktop game: a 30x20 grid ticking every 150ms.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    grid_width: int = 30
    grid_height: int = 20
    tick_ms: int = 150
    cell_size: int = 20
    player: str = "random"
    fleet_capacity: int = 10
    booking_capacity: int = 100
    log_level: str = "INFO"


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings() -> Settings:
    """
    Build Settings from the environment.

    Raises:
        ValueError: If a numeric variable is not a positive integer
    """
    return Settings(
        grid_width=_positive_int("SNAKE_GRID_WIDTH", 30),
        grid_height=_positive_int("SNAKE_GRID_HEIGHT", 20),
        tick_ms=_positive_int("SNAKE_TICK_MS", 150),
        cell_size=_positive_int("SNAKE_CELL_SIZE", 20),
        player=os.getenv("SNAKE_PLAYER", "random").strip() or "random",
        fleet_capacity=_positive_int("FLEET_CAPACITY", 10),
        booking_capacity=_positive_int("BOOKING_CAPACITY", 100),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
