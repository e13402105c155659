"""Grid model and least-cost path search."""

from costmaze.solver.contracts import Cell, MazeInput, RouteReport
from costmaze.solver.errors import (
    BlockedCellError,
    MalformedInputError,
    MazeError,
    OutOfBoundsError,
)
from costmaze.solver.grid import Grid
from costmaze.solver.pathfinding import PathFinder, Route, find_path

__all__ = [
    "BlockedCellError",
    "Cell",
    "Grid",
    "MalformedInputError",
    "MazeError",
    "MazeInput",
    "OutOfBoundsError",
    "PathFinder",
    "Route",
    "RouteReport",
    "find_path",
]
