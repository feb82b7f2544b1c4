"""RouteCatalog - Immutable set of named routes.

Loaded once at startup (built-in defaults or an operator JSON file) and
never mutated. The first route is the fallback for unknown route ids.
"""

import logging
from typing import Any, Iterator, Optional

from checkpoint_planner.model.route import Route

logger = logging.getLogger(__name__)


class RouteCatalog:
    """Ordered, read-only collection of routes.

    Example:
        catalog = RouteCatalog(routes=[alpha, bravo])
        catalog.resolve(route_id="unknown").id  # "routeA" (first route)
    """

    def __init__(self, routes: list[Route]) -> None:
        """Initialize catalog.

        Raises:
            ValueError: If no routes are given or route ids repeat.
        """
        if not routes:
            raise ValueError("RouteCatalog needs at least one route")
        ids = [r.id for r in routes]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate route ids in catalog: {ids}")
        self._routes: tuple[Route, ...] = tuple(routes)
        self._by_id: dict[str, Route] = {r.id: r for r in routes}

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._routes

    @property
    def first(self) -> Route:
        return self._routes[0]

    @property
    def route_ids(self) -> list[str]:
        return [r.id for r in self._routes]

    def get(self, route_id: str) -> Optional[Route]:
        """Route by id, or None if unknown."""
        return self._by_id.get(route_id)

    def resolve(self, route_id: Optional[str]) -> Route:
        """Route by id, falling back to the first route for unknown ids."""
        route = self._by_id.get(route_id) if route_id is not None else None
        if route is None:
            logger.info(f"Unknown route id {route_id!r}, using {self.first.id}")
            return self.first
        return route

    def routes_containing(self, point_id: str) -> list[Route]:
        """Routes that list this checkpoint, in catalog order."""
        return [r for r in self._routes if r.contains(point_id=point_id)]

    def is_catalog_point(self, point_id: str) -> bool:
        return any(r.contains(point_id=point_id) for r in self._routes)

    @property
    def all_point_ids(self) -> list[str]:
        """Every checkpoint id across routes, first-seen order, no repeats."""
        seen: dict[str, None] = {}
        for route in self._routes:
            for point_id in route.point_ids:
                seen.setdefault(point_id, None)
        return list(seen)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, route_id: object) -> bool:
        return route_id in self._by_id

    def to_dict(self) -> list[dict[str, Any]]:
        return [r.to_dict() for r in self._routes]

    @classmethod
    def from_dict(cls, data: list[dict[str, Any]]) -> "RouteCatalog":
        """Create catalog from a list of route dictionaries."""
        return cls(routes=[Route.from_dict(data=r) for r in data])

    def __repr__(self) -> str:
        return f"RouteCatalog({', '.join(self.route_ids)})"
