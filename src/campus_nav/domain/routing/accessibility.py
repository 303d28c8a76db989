# campus_nav/domain/routing/accessibility.py
from campus_nav.app.protocols import AccessibilityPredicate
from campus_nav.domain.entities.geography import Edge, Node


class AlwaysAccessible(AccessibilityPredicate):
    """Placeholder until walkways carry real accessibility surveys."""

    def is_accessible(self, from_node: Node, to_node: Node, edge: Edge) -> bool:
        return True


class SegmentFlagAccessibility(AccessibilityPredicate):
    def __init__(self, check_locations: bool = True):
        self.check_locations = check_locations

    def is_accessible(self, from_node: Node, to_node: Node, edge: Edge) -> bool:
        if not edge.is_accessible:
            return False
        if self.check_locations:
            return from_node.accessible and to_node.accessible
        return True
