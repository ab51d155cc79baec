"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "INFO"

    # Game
    time_control_seconds: int = 10 * 60

    # Board
    show_coordinates: bool = True
