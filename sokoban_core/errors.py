from __future__ import annotations

__all__ = [
    "SokobanError",
    "LevelError",
    "PreconditionError",
    "UnknownStrategyError",
]


class SokobanError(Exception):
    """Base class for every error raised before a search starts."""


class LevelError(SokobanError, ValueError):
    """Malformed level text or geometry."""


class PreconditionError(SokobanError, ValueError):
    """Level and state parse fine but the puzzle cannot be posed (box/target counts)."""


class UnknownStrategyError(SokobanError, ValueError):
    pass
