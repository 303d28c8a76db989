# tests/domain/test_accessibility.py
import pytest

from campus_nav.config.models import AccessibilityAlwaysModel, AccessibilitySegmentFlagModel
from campus_nav.domain.entities.geography import Coord, Edge, Node
from campus_nav.domain.graph_builder import build_graph
from campus_nav.domain.routing.accessibility import AlwaysAccessible, SegmentFlagAccessibility
from campus_nav.domain.routing.route_engine import RouteEngine
from campus_nav.runtime.registries import make_accessibility

# Two ways from a to d: stairs via b (100 + 100) or a ramp via c (130 + 100).
LOCATIONS = [
    {"id": "a", "lat": 0.0, "lng": 0.0},
    {"id": "b", "lat": 0.0, "lng": 1.0},
    {"id": "c", "lat": 1.0, "lng": 0.0},
    {"id": "d", "lat": 1.0, "lng": 1.0},
]
SEGMENTS = [
    {"id": "stairs", "fromId": "a", "toId": "b", "distance": 100, "isAccessible": False},
    {"id": "b-d", "fromId": "b", "toId": "d", "distance": 100},
    {"id": "ramp", "fromId": "a", "toId": "c", "distance": 130},
    {"id": "c-d", "fromId": "c", "toId": "d", "distance": 100},
]


@pytest.fixture
def nodes():
    return build_graph(LOCATIONS, SEGMENTS)


def test_reference_predicate_leaves_results_unchanged(nodes):
    eng = RouteEngine(nodes)
    plain = eng.find_shortest_path("a", "d")
    preferred = eng.find_shortest_path("a", "d", prefer_accessible=True)
    assert plain.path == preferred.path == ["a", "b", "d"]
    assert plain.distance == preferred.distance == 200


def test_flagged_stairs_are_avoided_when_preferring_accessible(nodes):
    eng = RouteEngine(nodes, accessibility=SegmentFlagAccessibility())
    assert eng.find_shortest_path("a", "d").path == ["a", "b", "d"]

    res = eng.find_shortest_path("a", "d", prefer_accessible=True)
    assert res.path == ["a", "c", "d"]
    # reported distance is the walked length, not the penalized cost
    assert res.distance == 230
    assert res.estimated_time == 3


def test_penalty_only_biases_when_detour_is_cheaper_than_penalty(nodes):
    # 100 * 1.2 + 100 = 220 < 230, so the stairs still win
    eng = RouteEngine(nodes, accessibility=SegmentFlagAccessibility(), accessibility_penalty=1.2)
    assert eng.find_shortest_path("a", "d", prefer_accessible=True).path == ["a", "b", "d"]


def test_inaccessible_location_flags_its_edges():
    pred = SegmentFlagAccessibility()
    u = Node("u", Coord(0, 0))
    v = Node("v", Coord(0, 0), accessible=False)
    e = Edge("v", 1.0, "p")
    assert not pred.is_accessible(u, v, e)
    assert SegmentFlagAccessibility(check_locations=False).is_accessible(u, v, e)
    assert AlwaysAccessible().is_accessible(u, v, Edge("v", 1.0, "p", is_accessible=False))


def test_registry_builds_predicates_from_config():
    assert isinstance(make_accessibility(AccessibilityAlwaysModel()), AlwaysAccessible)
    pred = make_accessibility(AccessibilitySegmentFlagModel(check_locations=False))
    assert isinstance(pred, SegmentFlagAccessibility)
    assert pred.check_locations is False
