# tests/domain/test_graph_builder.py
import pytest
from pydantic import ValidationError

from campus_nav.config.models import LocationModel, SegmentModel
from campus_nav.domain.entities.geography import Coord
from campus_nav.domain.graph_builder import build_graph
from campus_nav.engine.hooks import NoopHooks


class DropTrace(NoopHooks):
    def __init__(self):
        self.dropped = []

    def segment_dropped(self, segment, *, reason):
        self.dropped.append((segment.from_id, segment.to_id, reason))


LOCATIONS = [
    {"id": "main", "lat": 40.0, "lng": -75.0},
    {"id": "library", "lat": 40.001, "lng": -75.001},
    {"id": "student", "lat": 40.002, "lng": -75.002},
]


def test_one_node_per_location_in_input_order():
    nodes = build_graph(LOCATIONS, [])
    assert [n.id for n in nodes] == ["main", "library", "student"]
    assert nodes[1].position == Coord(40.001, -75.001)
    assert all(n.connections == [] for n in nodes)


def test_segment_yields_symmetric_edge_pair():
    nodes = build_graph(
        LOCATIONS,
        [{"id": "p1", "fromId": "main", "toId": "library", "distance": 150, "status": "open"}],
    )
    main, library, _ = nodes
    (fwd,) = main.connections
    (rev,) = library.connections
    assert (fwd.neighbor_id, rev.neighbor_id) == ("library", "main")
    assert fwd.path_id == rev.path_id == "p1"
    assert fwd.distance == rev.distance == 150
    assert fwd.is_available and rev.is_available


@pytest.mark.parametrize("status", ["closed", "construction"])
def test_non_open_status_builds_unavailable_edges(status):
    nodes = build_graph(
        LOCATIONS,
        [{"fromId": "library", "toId": "student", "distance": 200, "status": status}],
    )
    edges = nodes[1].connections + nodes[2].connections
    assert len(edges) == 2
    assert not any(e.is_available for e in edges)


def test_unknown_endpoint_is_dropped_silently():
    hooks = DropTrace()
    nodes = build_graph(
        LOCATIONS,
        [
            {"fromId": "main", "toId": "ghost", "distance": 10},
            {"fromId": "nowhere", "toId": "library", "distance": 10},
            {"fromId": "main", "toId": "student", "distance": 30},
        ],
        hooks=hooks,
    )
    assert sum(len(n.connections) for n in nodes) == 2
    assert [r for *_, r in hooks.dropped] == ["unknown_endpoint", "unknown_endpoint"]


def test_accepts_validated_models_and_derives_path_id():
    locs = [LocationModel(id="a", lat=0, lng=0), LocationModel(id="b", lat=1, lng=1)]
    segs = [SegmentModel(from_id="a", to_id="b", distance=5.0)]
    a, b = build_graph(locs, segs)
    assert a.connections[0].path_id == b.connections[0].path_id == "a-b"


def test_negative_distance_rejected_at_boundary():
    with pytest.raises(ValidationError):
        build_graph(LOCATIONS, [{"fromId": "main", "toId": "library", "distance": -1}])


def test_unknown_status_rejected_at_boundary():
    with pytest.raises(ValidationError):
        build_graph(
            LOCATIONS,
            [{"fromId": "main", "toId": "library", "distance": 1, "status": "flooded"}],
        )


def test_build_does_not_mutate_input_records():
    segs = [{"fromId": "main", "toId": "library", "distance": 150, "status": "open"}]
    snapshot = [dict(s) for s in segs]
    build_graph(LOCATIONS, segs)
    assert segs == snapshot
