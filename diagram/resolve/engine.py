"""
Layout engine: one resolution pass over a whole element tree.

A pass builds the dependency graph, orders it topologically and evaluates
every node once:

    SIZE(e)    AutoSizeResolver
    PLACE(e)   PositionResolver for positioned elements, otherwise the
               parent's arrange_children()
    ORIGIN(e)  origin(parent) + content offset(parent) + place(e)
               - frame shift(parent)

Finally every element's absolute border box is committed and the tree is
marked clean.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List

from diagram.core.errors import CyclicPositionError
from diagram.core.geometry import Box, Point, Size
from diagram.resolve.autosize import AutoSizeResolver
from diagram.resolve.graph import LayoutGraph, LayoutNode, NodeKind
from diagram.resolve.position import PositionResolver, frame_origin

if TYPE_CHECKING:
    from diagram.container import Container
    from diagram.element import Element

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Resolves the tree rooted at `root`.

    Usage:
        LayoutEngine(artboard).run()      # compute every box
        LayoutEngine(artboard).check()    # cycle / target check only
    """

    def __init__(self, root: 'Element'):
        self.root = root
        self.sizes = AutoSizeResolver(root.settings)
        self.positions = PositionResolver(root)
        self._arrangements: Dict[int, Dict[int, Point]] = {}

    # Graph construction

    def _place_dependencies(self, element: 'Element') -> List[LayoutNode]:
        parent = element.parent
        if parent is None:
            return []
        if element.position_spec is not None:
            return self.positions.place_dependencies(element)

        nodes = list(parent.placement_dependencies())
        if parent.arrangement_needs_size:
            nodes.append(LayoutNode(NodeKind.SIZE, parent))
        return nodes

    def _origin_dependencies(self, element: 'Element') -> List[LayoutNode]:
        parent = element.parent
        if parent is None:
            if element.position_spec is None:
                return []
            return self.positions.origin_dependencies(element)
        return [
            LayoutNode(NodeKind.ORIGIN, parent),
            LayoutNode(NodeKind.SIZE, parent),
            LayoutNode(NodeKind.PLACE, element),
        ]

    def build_graph(self) -> LayoutGraph:
        """
        Build the dependency graph of the tree.

        Raises:
            InvalidDimensionError: Percentage size on the root
            UnresolvedTargetError: A position target outside the tree
        """
        graph = LayoutGraph()
        for element in self.root.iter_tree():
            graph.add(LayoutNode(NodeKind.SIZE, element), self.sizes.dependencies(element))
            graph.add(LayoutNode(NodeKind.PLACE, element), self._place_dependencies(element))
            graph.add(LayoutNode(NodeKind.ORIGIN, element), self._origin_dependencies(element))
        return graph

    def _order(self, graph: LayoutGraph) -> List[LayoutNode]:
        try:
            return graph.topological_order()
        except CyclicPositionError as e:
            logger.warning(f"Rejected layout of {self.root!r}: {e}")
            raise

    def check(self) -> None:
        """
        Validate the tree without computing anything.

        Raises:
            CyclicPositionError: If any layout value depends on itself
            UnresolvedTargetError: If a position target is outside the tree
        """
        self._order(self.build_graph())

    # Evaluation

    def _reset(self) -> None:
        for element in self.root.iter_tree():
            element._size = None
            element._place = None
            element._origin = None
            element._frame_shift = Point()

    def _arrangement(self, container: 'Container') -> Dict[int, Point]:
        """arrange_children() of a container, computed once per pass."""
        key = id(container)
        if key not in self._arrangements:
            if container.arrangement_needs_size:
                content_size = container.box_model.content_size(container._size)
            else:
                content_size = Size()
            self._arrangements[key] = container.arrange_children(content_size)
        return self._arrangements[key]

    def _evaluate(self, node: LayoutNode) -> None:
        element = node.element

        if node.kind is NodeKind.SIZE:
            self.sizes.resolve(element)

        elif node.kind is NodeKind.PLACE:
            if element.parent is None:
                element._place = Point()
            elif element.position_spec is not None:
                element._place = self.positions.resolve_place(element)
            else:
                element._place = self._arrangement(element.parent)[id(element)]

        else:
            parent = element.parent
            if parent is None:
                if element.position_spec is None:
                    element._origin = Point()
                else:
                    element._origin = self.positions.resolve_root_origin(element)
            else:
                element._origin = frame_origin(parent) + element._place

    def run(self) -> None:
        """Resolve every element of the tree and cache its absolute box."""
        graph = self.build_graph()
        order = self._order(graph)
        logger.debug(
            f"Resolving {self.root!r}: {len(graph)} nodes, {graph.edge_count()} edges"
        )

        self._reset()
        for node in order:
            self._evaluate(node)

        for element in self.root.iter_tree():
            element._box = Box.from_origin(element._origin, element._size)
            element._dirty = False
        self.root._stale = False
