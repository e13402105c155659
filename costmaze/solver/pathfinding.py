"""Least-cost grid pathfinding (Dijkstra with entry costs)."""

from __future__ import annotations

from dataclasses import dataclass
import heapq
import logging

from costmaze.solver.contracts import Cell
from costmaze.solver.errors import BlockedCellError, OutOfBoundsError
from costmaze.solver.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    cells: list[Cell]
    cost: int


class PathFinder:
    """Finds the cheapest 4-directional route between two cells.

    Entering a cell costs its grid value, and the start cell's own cost is
    counted once, so a route's cost is the sum of every cell on it.
    Returns ``None`` when the end cannot be reached.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    def find_path(self, start: Cell, end: Cell) -> Route | None:
        self._validate_endpoints(start, end)

        dist: dict[Cell, int] = {start: self._grid.cost_at(start)}
        came_from: dict[Cell, Cell] = {}
        frontier: list[tuple[int, Cell]] = [(dist[start], start)]
        pops = 0

        while frontier:
            current_dist, current = heapq.heappop(frontier)
            pops += 1
            if current == end:
                break
            # stale entry
            if current_dist > dist[current]:
                continue

            for neighbor in self._grid.neighbors(current):
                tentative = dist[current] + self._grid.cost_at(neighbor)
                if neighbor not in dist or tentative < dist[neighbor]:
                    dist[neighbor] = tentative
                    came_from[neighbor] = current
                    heapq.heappush(frontier, (tentative, neighbor))

        if end not in dist:
            logger.debug(
                "No route from %s to %s after %d pops (%d cells reached)",
                start,
                end,
                pops,
                len(dist),
            )
            return None

        cells = self._reconstruct_path(came_from, start, end)
        logger.debug(
            "Route from %s to %s: %d cells, cost %d, %d pops",
            start,
            end,
            len(cells),
            dist[end],
            pops,
        )
        return Route(cells=cells, cost=dist[end])

    def _validate_endpoints(self, start: Cell, end: Cell) -> None:
        if not self._grid.in_bounds(start):
            raise OutOfBoundsError(f"Start point {start} is outside the maze.")
        if not self._grid.in_bounds(end):
            raise OutOfBoundsError(f"End point {end} is outside the maze.")
        if not self._grid.is_passable(start):
            raise BlockedCellError(f"Start point {start} is a wall.")
        if not self._grid.is_passable(end):
            raise BlockedCellError(f"End point {end} is a wall.")

    @staticmethod
    def _reconstruct_path(
        came_from: dict[Cell, Cell], start: Cell, end: Cell
    ) -> list[Cell]:
        path = [end]
        current = end
        while current != start:
            if current not in came_from:
                raise RuntimeError(f"Cell {current} has no predecessor.")
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path


def find_path(grid: Grid, start: Cell, end: Cell) -> Route | None:
    return PathFinder(grid).find_path(start, end)
