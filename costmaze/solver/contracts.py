"""Data contracts shared by the reader, solver and writers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

Cell = tuple[int, int]


class MazeInput(BaseModel):
    """A fully read maze: cost grid plus the two endpoints."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    grid: list[list[int]]
    start: Cell
    end: Cell

    @model_validator(mode="after")
    def validate_grid(self) -> "MazeInput":
        from costmaze.solver.grid import Grid

        Grid.from_rows(self.grid)
        return self


class RouteReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    found: bool
    cost: int | None = None
    path: list[Cell] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_report(self) -> "RouteReport":
        if self.found and (self.cost is None or not self.path):
            raise ValueError("found report requires cost and path")
        if not self.found and (self.cost is not None or self.path):
            raise ValueError("missing route cannot carry cost or path")
        return self
