from rich.console import Console

from costmaze.render.route_view import WALL_GLYPH, render_grid_lines, render_route
from costmaze.solver.grid import Grid
from costmaze.solver.pathfinding import find_path


def test_render_route_shows_grid_and_cost() -> None:
    grid = Grid.from_rows([[1, 1, 1], [0, 0, 1], [1, 1, 1]])
    route = find_path(grid, (0, 0), (2, 0))

    console = Console(width=80, record=True)
    console.print(render_route(grid, (0, 0), (2, 0), route))
    output = console.export_text()

    assert "Maze 3x3" in output
    assert "Cost 7 over 7 cells" in output
    assert f"{WALL_GLYPH} {WALL_GLYPH} 1" in output


def test_render_route_without_route() -> None:
    grid = Grid.from_rows([[1, 0, 1]])

    console = Console(width=80, record=True)
    console.print(render_route(grid, (0, 0), (0, 2), None))

    assert "No path exists" in console.export_text()


def test_render_grid_lines_pads_and_styles_cells() -> None:
    grid = Grid.from_rows([[12, 0], [3, 4]])

    lines = render_grid_lines(grid, start=(0, 0), end=(1, 1), on_route={(1, 0)})

    assert [line.plain for line in lines] == ["12  #", " 3  4"]
    assert lines[1].spans[0].style == "bold bright_cyan"
