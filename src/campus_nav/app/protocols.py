from typing import Protocol, runtime_checkable

from campus_nav.domain.entities.geography import Edge, Node, PathResult


# ------------- Routing --------------------
@runtime_checkable
class AccessibilityPredicate(Protocol):
    """
    Decide whether traversing `edge` from `from_node` to `to_node` is wheelchair accessible.
    Non-accessible edges get their weight inflated when a query prefers accessible routes.
    """

    def is_accessible(self, from_node: Node, to_node: Node, edge: Edge) -> bool: ...


@runtime_checkable
class RouteFinder(Protocol):
    """
    Responsibilities:
      • Answer shortest-path queries over the live campus graph.
      • Apply operator status changes so the next query observes them.
    """

    def find_shortest_path(
        self, start_id: str, end_id: str, prefer_accessible: bool = False
    ) -> PathResult | None: ...
    def update_path_status(self, from_id: str, to_id: str, is_available: bool) -> bool: ...
    def find_alternative_routes(
        self, start_id: str, end_id: str, max_routes: int = 3
    ) -> list[PathResult]: ...
