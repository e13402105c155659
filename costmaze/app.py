"""Application entry for solving one maze."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from costmaze.io.maze_reader import load_maze, read_maze
from costmaze.io.path_writer import format_no_path, format_report_json, format_route
from costmaze.render.route_view import render_route
from costmaze.solver.contracts import MazeInput
from costmaze.solver.errors import MalformedInputError, MazeError
from costmaze.solver.grid import Grid
from costmaze.solver.pathfinding import Route, find_path

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_LEVEL_ENV = "COSTMAZE_LOG_LEVEL"

EXIT_OK = 0
EXIT_ERROR = 1

logger = logging.getLogger(__name__)


def solve(maze: MazeInput) -> tuple[Grid, Route | None]:
    grid = Grid.from_rows(maze.grid)
    return grid, find_path(grid, maze.start, maze.end)


def run_solver(
    source: TextIO,
    out: TextIO,
    *,
    input_path: Path | None = None,
    as_json: bool = False,
    render_console: Console | None = None,
) -> int:
    """Read a maze, search it and write the result to ``out``.

    Domain errors are written to stderr and turn into ``EXIT_ERROR``; a maze
    without a route is a normal outcome.
    """
    try:
        maze = load_maze(input_path) if input_path else read_maze(source)
        grid, route = solve(maze)
    except (MazeError, FileNotFoundError) as exc:
        report_error(exc)
        return EXIT_ERROR

    if route is None:
        logger.info("No route from %s to %s", maze.start, maze.end)
    if render_console is not None:
        render_console.print(render_route(grid, maze.start, maze.end, route))

    if as_json:
        out.write(format_report_json(route))
    elif route is None:
        out.write(format_no_path())
    else:
        out.write(format_route(route))
    return EXIT_OK


def report_error(exc: Exception, *, console: Console | None = None) -> None:
    console = console or Console(stderr=True)
    prefix = "Input error" if _is_input_error(exc) else "Path error"
    console.print(f"[bold red]{prefix}:[/] {escape(str(exc))}", highlight=False)


def resolve_log_level(level: str | None) -> str:
    """Flag, then ``$COSTMAZE_LOG_LEVEL``, then the default; unknown names
    fall back to the default."""
    requested = _requested_log_level(level)
    if requested not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return requested


def configure_logging(level: str | None = None) -> None:
    resolved = resolve_log_level(level)
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    requested = _requested_log_level(level)
    if requested != resolved:
        logger.warning("Unknown log level %r, using %s", requested, resolved)


def _requested_log_level(level: str | None) -> str:
    return (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()


def _is_input_error(exc: Exception) -> bool:
    return isinstance(exc, (MalformedInputError, FileNotFoundError))
