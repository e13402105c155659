"""Rich rendering of a cost grid with the found route highlighted."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from costmaze.solver.contracts import Cell
from costmaze.solver.grid import Grid
from costmaze.solver.pathfinding import Route

WALL_GLYPH = "#"

WALL_STYLE = "grey37"
FLOOR_STYLE = "grey70"
ROUTE_STYLE = "bold bright_cyan"
START_STYLE = "bold bright_green"
END_STYLE = "bold bright_magenta"


def render_route(
    grid: Grid, start: Cell, end: Cell, route: Route | None
) -> RenderableType:
    on_route = set(route.cells) if route else set()
    lines = render_grid_lines(grid, start=start, end=end, on_route=on_route)
    if route is None:
        footer = Text("No path exists", style="bold red")
    else:
        footer = Text(f"Cost {route.cost} over {len(route.cells)} cells", style="bold")
    rows, columns = grid.bounds()
    return Panel(Group(*lines, footer), title=f"Maze {rows}x{columns}")


def render_grid_lines(
    grid: Grid,
    *,
    start: Cell,
    end: Cell,
    on_route: set[Cell],
) -> list[Text]:
    width = max(len(str(value)) for row in grid.cells for value in row)
    lines: list[Text] = []
    for row_index, row in enumerate(grid.cells):
        line = Text()
        for column_index, value in enumerate(row):
            cell = (row_index, column_index)
            glyph = WALL_GLYPH if value == 0 else str(value)
            if column_index:
                line.append(" ")
            style = _cell_style(cell, value, start, end, on_route)
            line.append(glyph.rjust(width), style=style)
        lines.append(line)
    return lines


def _cell_style(
    cell: Cell, value: int, start: Cell, end: Cell, on_route: set[Cell]
) -> str:
    if cell == start:
        return START_STYLE
    if cell == end:
        return END_STYLE
    if value == 0:
        return WALL_STYLE
    if cell in on_route:
        return ROUTE_STYLE
    return FLOOR_STYLE
