"""Format search results for stdout."""

from __future__ import annotations

from costmaze.solver.contracts import RouteReport
from costmaze.solver.pathfinding import Route

END_MARKER = "."
NO_PATH_MESSAGE = "No path exists"


def format_route(route: Route) -> str:
    lines = [f"{row} {column}" for row, column in route.cells]
    lines.append(END_MARKER)
    return "\n".join(lines) + "\n"


def format_no_path() -> str:
    return NO_PATH_MESSAGE + "\n"


def build_report(route: Route | None) -> RouteReport:
    if route is None:
        return RouteReport(found=False)
    return RouteReport(found=True, cost=route.cost, path=list(route.cells))


def format_report_json(route: Route | None) -> str:
    return build_report(route).model_dump_json() + "\n"
