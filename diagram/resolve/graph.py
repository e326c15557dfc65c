"""
Dependency graph of layout values.

Every element contributes three nodes:

    SIZE    its border-box size
    PLACE   its border-box top-left in the parent's content frame
    ORIGIN  its absolute border-box top-left

An edge A -> B means "A needs B". The layout engine evaluates nodes in
topological order, so every value is computed exactly once per pass and a
dependency cycle is reported instead of looping.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, List, NamedTuple

from diagram.core.errors import CyclicPositionError

if TYPE_CHECKING:
    from diagram.element import Element


class NodeKind(Enum):
    SIZE = "size"
    PLACE = "place"
    ORIGIN = "origin"


class LayoutNode(NamedTuple):
    """One layout value of one element."""
    kind: NodeKind
    element: 'Element'

    def describe(self) -> str:
        return f"{self.kind.value}({self.element!r})"


# DFS colours
_WHITE, _GREY, _BLACK = 0, 1, 2


class LayoutGraph:
    """
    Directed graph of LayoutNodes.

    Usage:
        graph = LayoutGraph()
        graph.add(size_node, [parent_size_node])
        for node in graph.topological_order():
            ...
    """

    def __init__(self):
        self._edges: Dict[LayoutNode, List[LayoutNode]] = {}

    def add(self, node: LayoutNode, dependencies: Iterable[LayoutNode] = ()) -> None:
        """Register a node and the nodes it depends on."""
        edges = self._edges.setdefault(node, [])
        for dependency in dependencies:
            if dependency not in edges:
                edges.append(dependency)
            self._edges.setdefault(dependency, [])

    def dependencies(self, node: LayoutNode) -> List[LayoutNode]:
        return self._edges.get(node, [])

    @property
    def nodes(self) -> List[LayoutNode]:
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, node: object) -> bool:
        return node in self._edges

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._edges.values())

    def topological_order(self) -> List[LayoutNode]:
        """
        Order nodes so that every node comes after its dependencies.

        Iterative depth-first search; insertion order breaks ties, so the
        order is deterministic for a given tree.

        Raises:
            CyclicPositionError: With the nodes along the first cycle found
        """
        colour: Dict[LayoutNode, int] = {node: _WHITE for node in self._edges}
        order: List[LayoutNode] = []

        for start in self._edges:
            if colour[start] != _WHITE:
                continue

            colour[start] = _GREY
            path = [start]
            stack = [iter(self._edges[start])]

            while stack:
                advanced = False
                for dependency in stack[-1]:
                    state = colour[dependency]
                    if state == _WHITE:
                        colour[dependency] = _GREY
                        path.append(dependency)
                        stack.append(iter(self._edges[dependency]))
                        advanced = True
                        break
                    if state == _GREY:
                        cycle_start = path.index(dependency)
                        raise CyclicPositionError(path[cycle_start:] + [dependency])

                if not advanced:
                    stack.pop()
                    finished = path.pop()
                    colour[finished] = _BLACK
                    order.append(finished)

        return order
