# campus_nav/domain/routing/route_engine.py
import heapq
import math
import threading
from collections.abc import Iterable

from campus_nav.app.protocols import AccessibilityPredicate, RouteFinder
from campus_nav.config.models import SEGMENT_STATUSES
from campus_nav.domain.entities.geography import Edge, Node, PathResult, SegmentState, eta_minutes
from campus_nav.domain.routing.accessibility import AlwaysAccessible
from campus_nav.engine.hooks import EngineHooks, NoopHooks
from campus_nav.io.status_events import PathStatusChanged

WALKING_SPEED = 80.0  # meters per minute
ACCESSIBILITY_PENALTY = 1.5


class RouteEngine(RouteFinder):
    """
    Owns the campus graph and answers route queries against live path availability.

    Every query and mutation runs under one re-entrant lock, so a status change never
    interleaves with an in-flight search.
    """

    def __init__(
        self,
        nodes: Iterable[Node],
        *,
        accessibility: AccessibilityPredicate | None = None,
        accessibility_penalty: float = ACCESSIBILITY_PENALTY,
        walking_speed: float = WALKING_SPEED,
        hooks: EngineHooks | None = None,
        run_id: str = "local",
    ):
        self._nodes: dict[str, Node] = {}
        for n in nodes:
            if n.id in self._nodes:
                raise ValueError(f"duplicate node id {n.id!r}")
            for e in n.connections:
                if not (math.isfinite(e.distance) and e.distance >= 0):
                    raise ValueError(f"edge {n.id}->{e.neighbor_id} has invalid distance {e.distance!r}")
            self._nodes[n.id] = n
        self.accessibility = accessibility or AlwaysAccessible()
        self.accessibility_penalty = accessibility_penalty
        self.walking_speed = walking_speed
        self._hooks = hooks or NoopHooks()
        self.run_id = run_id
        self._lock = threading.RLock()
        self._seq = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def node(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    # ------------------- Queries ---------------------------

    def _weight(self, u: Node, v: Node, e: Edge, prefer_accessible: bool) -> float:
        w = e.distance
        if prefer_accessible and not self.accessibility.is_accessible(u, v, e):
            w *= self.accessibility_penalty
        return w

    def find_shortest_path(
        self, start_id: str, end_id: str, prefer_accessible: bool = False
    ) -> PathResult | None:
        with self._lock:
            result = self._dijkstra(start_id, end_id, prefer_accessible)
            # hooks run under the lock too; they may keep per-engine counters
            if result is None:
                self._hooks.route_not_found(start_id, end_id, prefer_accessible=prefer_accessible)
            else:
                self._hooks.route_found(
                    start_id, end_id, result=result, prefer_accessible=prefer_accessible
                )
        return result

    def _dijkstra(self, start_id: str, end_id: str, prefer_accessible: bool) -> PathResult | None:
        if start_id not in self._nodes or end_id not in self._nodes:
            return None

        cost: dict[str, float] = {start_id: 0.0}
        # predecessor id + the edge used to reach each node; the edge carries the raw length
        prev: dict[str, tuple[str, Edge]] = {}
        visited: set[str] = set()
        seq = 0  # FIFO tie-break among equal costs
        q: list[tuple[float, int, str]] = [(0.0, seq, start_id)]

        while q:
            c, _, uid = heapq.heappop(q)
            if uid in visited:
                continue
            if uid == end_id:
                break
            visited.add(uid)
            u = self._nodes[uid]
            for e in u.connections:
                if not e.is_available or e.neighbor_id in visited:
                    continue
                v = self._nodes.get(e.neighbor_id)
                if v is None:
                    continue
                alt = c + self._weight(u, v, e, prefer_accessible)
                if alt < cost.get(v.id, math.inf):
                    cost[v.id] = alt
                    prev[v.id] = (uid, e)
                    seq += 1
                    heapq.heappush(q, (alt, seq, v.id))

        if end_id != start_id and end_id not in prev:
            return None

        path = [end_id]
        total = 0.0
        cur = end_id
        while cur != start_id:
            cur, e = prev[cur]
            total += e.distance
            path.append(cur)
        path.reverse()

        return PathResult(
            path=path,
            distance=total,
            estimated_time=eta_minutes(total, self.walking_speed),
            waypoints=[self._nodes[nid].position for nid in path],
        )

    def find_alternative_routes(
        self, start_id: str, end_id: str, max_routes: int = 3
    ) -> list[PathResult]:
        """
        Candidate routes, best first.

        Only the primary shortest route is produced for now; `max_routes` caps the list
        so callers can already ask for more without caring.
        """
        if max_routes < 1:
            return []
        primary = self.find_shortest_path(start_id, end_id)
        return [primary] if primary is not None else []

    # ------------------- Mutations ---------------------------

    def _set_pair(self, a: Node, b: Node, path_id: str, is_available: bool) -> int:
        changed = 0
        for owner, other in ((a, b), (b, a)):
            for e in owner.connections:
                if e.path_id == path_id and e.neighbor_id == other.id:
                    e.is_available = is_available
                    changed += 1
        return changed

    def _record(self, a: Node, b: Node, path_id: str, is_available: bool, **kw) -> None:
        self._seq += 1
        self._hooks.status_changed(
            PathStatusChanged(
                run_id=self.run_id,
                seq=self._seq,
                name="PathStatusChanged",
                path_id=path_id,
                from_id=a.id,
                to_id=b.id,
                is_available=is_available,
                **kw,
            )
        )

    def update_path_status(self, from_id: str, to_id: str, is_available: bool) -> bool:
        """Open or close the walkway between two nodes, both directions. Unknown pairs are ignored."""
        with self._lock:
            a, b = self._nodes.get(from_id), self._nodes.get(to_id)
            fwd = a.edge_to(to_id) if a is not None else None
            if a is None or b is None or fwd is None:
                self._hooks.status_ignored(from_id, to_id, is_available=is_available)
                return False
            self._set_pair(a, b, fwd.path_id, is_available)
            self._record(a, b, fwd.path_id, is_available)
            return True

    def set_segment_status(self, path_id: str, status: str) -> bool:
        """Apply an admin status (open/closed/construction) to every edge of one walkway."""
        if status not in SEGMENT_STATUSES:
            raise ValueError(f"invalid status {status!r}, expected one of {SEGMENT_STATUSES}")
        is_available = status == "open"
        with self._lock:
            done: set[frozenset[str]] = set()
            for a in self._nodes.values():
                for e in a.connections:
                    b = self._nodes.get(e.neighbor_id)
                    pair = frozenset((a.id, e.neighbor_id))
                    if e.path_id != path_id or b is None or pair in done:
                        continue
                    # ids may be shared by several walkways; each pair gets its own event
                    done.add(pair)
                    self._set_pair(a, b, path_id, is_available)
                    self._record(a, b, path_id, is_available, source="path_id", status=status)
            if not done:
                self._hooks.status_ignored(None, None, path_id=path_id, status=status)
            return bool(done)

    def segments(self) -> list[SegmentState]:
        """Each walkway once, in discovery order."""
        with self._lock:
            out: list[SegmentState] = []
            seen: set[tuple[str, frozenset[str]]] = set()
            for a in self._nodes.values():
                for e in a.connections:
                    key = (e.path_id, frozenset((a.id, e.neighbor_id)))
                    if key in seen:
                        continue
                    seen.add(key)
                    out.append(SegmentState(e.path_id, a.id, e.neighbor_id, e.distance, e.is_available))
            return out
