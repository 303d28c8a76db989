# campus_nav/domain/entities/geography.py
import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Coord:
    lat: float
    lng: float


@dataclass
class Edge:
    """One direction of a walkway; its twin lives on the neighbor node."""

    neighbor_id: str
    distance: float  # meters
    path_id: str
    is_available: bool = True
    is_accessible: bool = True  # segment metadata, read by accessibility predicates


@dataclass
class Node:
    id: str
    position: Coord
    connections: list[Edge] = field(default_factory=list)
    accessible: bool = True

    def edge_to(self, neighbor_id: str) -> Edge | None:
        for e in self.connections:
            if e.neighbor_id == neighbor_id:
                return e
        return None


@dataclass(frozen=True)
class SegmentState:
    path_id: str
    from_id: str
    to_id: str
    distance: float
    is_available: bool


@dataclass
class PathResult:
    path: list[str]
    distance: float
    estimated_time: int  # minutes at walking speed
    waypoints: list[Coord]

    def to_dict(self) -> dict:
        return {
            "path": list(self.path),
            "distance": self.distance,
            "estimatedTime": self.estimated_time,
            "waypoints": [{"lat": c.lat, "lng": c.lng} for c in self.waypoints],
        }


def eta_minutes(distance: float, walking_speed: float) -> int:
    return math.ceil(distance / walking_speed)
