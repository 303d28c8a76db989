# campus_nav/domain/graph_builder.py
from collections.abc import Iterable, Mapping

from campus_nav.config.models import LocationModel, SegmentModel
from campus_nav.domain.entities.geography import Coord, Edge, Node
from campus_nav.engine.hooks import EngineHooks, NoopHooks


def _as_location(rec: LocationModel | Mapping) -> LocationModel:
    return rec if isinstance(rec, LocationModel) else LocationModel.model_validate(rec)


def _as_segment(rec: SegmentModel | Mapping) -> SegmentModel:
    return rec if isinstance(rec, SegmentModel) else SegmentModel.model_validate(rec)


def build_graph(
    locations: Iterable[LocationModel | Mapping],
    segments: Iterable[SegmentModel | Mapping],
    *,
    hooks: EngineHooks | None = None,
) -> list[Node]:
    """
    Turn flat location and segment records into nodes with symmetric edges.

    Each segment yields two edges (forward and reverse) sharing path id, distance
    and availability. Segments whose endpoints are unknown are skipped; records
    that fail validation (negative distance, unknown status) raise.
    """
    hooks = hooks or NoopHooks()
    nodes: list[Node] = []
    by_id: dict[str, Node] = {}

    for rec in locations:
        loc = _as_location(rec)
        node = Node(id=loc.id, position=Coord(loc.lat, loc.lng), accessible=loc.accessible)
        nodes.append(node)
        by_id[loc.id] = node

    for rec in segments:
        seg = _as_segment(rec)
        a, b = by_id.get(seg.from_id), by_id.get(seg.to_id)
        if a is None or b is None:
            hooks.segment_dropped(seg, reason="unknown_endpoint")
            continue
        available = seg.status == "open"
        a.connections.append(
            Edge(b.id, seg.distance, seg.path_id, available, is_accessible=seg.is_accessible)
        )
        b.connections.append(
            Edge(a.id, seg.distance, seg.path_id, available, is_accessible=seg.is_accessible)
        )

    return nodes
