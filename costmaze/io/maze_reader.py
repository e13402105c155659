"""Parse the line-based maze text format into a MazeInput."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, TextIO

from pydantic import ValidationError

from costmaze.solver.contracts import MazeInput
from costmaze.solver.errors import MalformedInputError

logger = logging.getLogger(__name__)

_INT_TOKEN = re.compile(r"[+-]?\d+", re.ASCII)

COORDINATE_LABELS = ("start row", "start column", "end row", "end column")


def parse_maze(text: str) -> MazeInput:
    """Parse ``rows columns``, the grid rows, then ``sr sc er ec``.

    Anything after the coordinate line is ignored.
    """
    lines = iter(_split_lines(text))

    size = _next_fields(lines, "maze dimensions")
    if len(size) != 2:
        raise MalformedInputError(f"Maze dimensions need 2 values, got {len(size)}.")
    rows = _parse_int(size[0], "row count")
    columns = _parse_int(size[1], "column count")
    if rows < 1 or columns < 1:
        raise MalformedInputError(
            f"Maze dimensions must be positive, got {rows}x{columns}."
        )

    grid: list[list[int]] = []
    for index in range(rows):
        fields = _next_fields(lines, f"grid row {index}")
        if len(fields) != columns:
            raise MalformedInputError(
                f"Grid row {index} needs {columns} values, got {len(fields)}."
            )
        label = f"grid row {index} value"
        grid.append([_parse_int(token, label) for token in fields])

    coords = _next_fields(lines, "coordinates")
    if len(coords) != 4:
        raise MalformedInputError(f"Coordinates need 4 values, got {len(coords)}.")
    start_row, start_col, end_row, end_col = (
        _parse_int(token, label) for token, label in zip(coords, COORDINATE_LABELS)
    )

    try:
        maze = MazeInput(
            grid=grid, start=(start_row, start_col), end=(end_row, end_col)
        )
    except ValidationError as exc:
        message = exc.errors()[0].get("msg", str(exc))
        raise MalformedInputError(f"Invalid maze: {message}") from exc
    logger.debug("Parsed %dx%d maze", rows, columns)
    return maze


def read_maze(stream: TextIO) -> MazeInput:
    try:
        text = stream.read()
    except UnicodeDecodeError as exc:
        raise MalformedInputError("Input is not valid UTF-8 text.") from exc
    return parse_maze(text)


def load_maze(path: Path) -> MazeInput:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing maze file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"Maze file {path} is not valid UTF-8 text.") from exc
    except OSError as exc:
        raise MalformedInputError(
            f"Cannot read maze file {path}: {exc.strerror or exc}"
        ) from exc
    return parse_maze(text)


def _next_fields(lines: Iterator[str], section: str) -> list[str]:
    try:
        line = next(lines)
    except StopIteration:
        raise MalformedInputError(
            f"Unexpected end of input reading {section}."
        ) from None
    return line.split()


def _parse_int(token: str, label: str) -> int:
    if not _INT_TOKEN.fullmatch(token):
        raise MalformedInputError(f"Invalid {label}: {token!r} is not an integer.")
    return int(token)


def _split_lines(text: str) -> list[str]:
    # only \n ends a line; \f and \v stay inside it
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines
