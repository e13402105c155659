"""Domain errors raised while reading and solving a maze."""

from __future__ import annotations


class MazeError(ValueError):
    """Base class for fatal maze errors."""


class MalformedInputError(MazeError):
    pass


class OutOfBoundsError(MazeError):
    pass


class BlockedCellError(MazeError):
    pass
