"""chessduel: a two-player chess board with per-side countdown clocks."""

__version__ = "0.1.0"
