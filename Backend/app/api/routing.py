from typing import Any, Callable, Tuple

from fastapi import APIRouter
from starlette.routing import BaseRoute


def route_specificity(route: BaseRoute) -> Tuple[int, ...]:
    """
    Sort key that puts static path segments ahead of {parameter} segments.

    "/songs/by-ids" -> (0, 0) sorts before "/songs/{song_id}" -> (0, 1), so a
    literal segment is never captured as an identifier.
    """
    path = getattr(route, "path", "")
    return tuple(1 if segment.startswith("{") else 0 for segment in path.strip("/").split("/"))


class SpecificityRouter(APIRouter):
    """APIRouter whose route table is ordered by specificity instead of declaration order."""

    def add_api_route(self, path: str, endpoint: Callable[..., Any], **kwargs: Any) -> None:
        super().add_api_route(path, endpoint, **kwargs)
        # sort() is stable, so routes with the same shape keep their declaration order
        self.routes.sort(key=route_specificity)
