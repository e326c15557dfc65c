"""
Resolution of explicit position() instructions.

A positioned element's placement is "target point + offset - self anchor
offset". The target point is expressed in the parent's raw content frame
(before any freeform frame shift), so that placement can be fed back into
the parent's auto size.

Target evaluation modes:

    frame-local   target is the parent or inside the parent's subtree,
                  box reference is not ROOT. Only local placements are
                  read, so sibling relations never need absolute origins.
    absolute      any other target, or box reference ROOT. The target's
                  absolute point is mapped back through the parent's frame
                  origin, which needs the parent's final size and origin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from diagram.core.box_model import BoxReference
from diagram.core.errors import UnresolvedTargetError
from diagram.core.geometry import Anchor, Box, Point, Size
from diagram.core.placement import AnchorRef, PositionSpec
from diagram.resolve.graph import LayoutNode, NodeKind

if TYPE_CHECKING:
    from diagram.container import Container
    from diagram.element import Element


def _size(element: 'Element') -> LayoutNode:
    return LayoutNode(NodeKind.SIZE, element)


def _place(element: 'Element') -> LayoutNode:
    return LayoutNode(NodeKind.PLACE, element)


def _origin(element: 'Element') -> LayoutNode:
    return LayoutNode(NodeKind.ORIGIN, element)


def frame_origin(container: 'Container') -> Point:
    """Absolute position of the (shifted) content frame of a container."""
    return container._origin + container.box_model.content_offset - container._frame_shift


class PositionResolver:
    """Computes PLACE nodes of positioned elements and ORIGIN of a positioned root."""

    def __init__(self, root: 'Element'):
        self.root = root

    # Dependencies

    def _check_target(self, element: 'Element', target: 'Element') -> None:
        if target.tree_root() is not self.root:
            raise UnresolvedTargetError(
                f"{element!r} is positioned relative to {target!r}, "
                f"which is not in the same tree"
            )

    def _is_frame_local(self, spec: PositionSpec, frame: 'Container') -> bool:
        target = spec.target_element
        if target is None or spec.box_reference is BoxReference.ROOT:
            return False
        return target is frame or target.is_descendant_of(frame)

    def _self_dependencies(self, element: 'Element', spec: PositionSpec) -> List[LayoutNode]:
        if spec.self_anchor is Anchor.TOP_LEFT:
            return []
        return [_size(element)]

    def place_dependencies(self, element: 'Element') -> List[LayoutNode]:
        """
        Nodes the placement of a positioned (non-root) element reads.

        Raises:
            UnresolvedTargetError: If the target is in another tree
        """
        spec = element.position_spec
        frame = element.parent
        nodes = self._self_dependencies(element, spec)

        if isinstance(spec.target, Point):
            if spec.box_reference is BoxReference.ROOT:
                nodes += [_origin(frame), _size(frame)]
            return nodes

        target = spec.target.element
        self._check_target(element, target)

        if not self._is_frame_local(spec, frame):
            return nodes + [_origin(target), _size(target), _origin(frame), _size(frame)]

        if target is frame:
            # The raw frame origin is known before the frame is measured
            if spec.target.anchor is not Anchor.TOP_LEFT:
                nodes.append(_size(frame))
            return nodes

        # Walk from the target up to the frame, collecting local placements
        nodes.append(_size(target))
        node = target
        while node is not frame:
            nodes.append(_place(node))
            if node.parent is not frame:
                nodes.append(_size(node.parent))
            node = node.parent
        return nodes

    def origin_dependencies(self, root: 'Element') -> List[LayoutNode]:
        """Nodes the absolute origin of a positioned root reads."""
        spec = root.position_spec
        nodes = self._self_dependencies(root, spec)
        if isinstance(spec.target, AnchorRef):
            target = spec.target.element
            self._check_target(root, target)
            nodes += [_origin(target), _size(target)]
        return nodes

    # Evaluation

    def _self_offset(self, element: 'Element', spec: PositionSpec) -> Point:
        """Offset from the border top-left to the self anchor on its layer."""
        size = element._size if element._size is not None else Size()
        box = element.box_model.layer_box(Box.from_origin(Point(), size), spec.box_reference)
        return box.anchor(spec.self_anchor)

    @staticmethod
    def _anchor_point(target: AnchorRef, border_box: Box) -> Point:
        return target.element.box_model.layer_box(border_box, target.layer).anchor(target.anchor)

    def _absolute_target(self, target: AnchorRef) -> Point:
        element = target.element
        return self._anchor_point(target, Box.from_origin(element._origin, element._size))

    def _local_target(self, target: AnchorRef, frame: 'Container') -> Point:
        """Target point in the frame's raw content coordinates."""
        element = target.element
        if element is frame:
            box_model = frame.box_model
            if target.anchor is Anchor.TOP_LEFT:
                return box_model.layer_offset(target.layer) - box_model.content_offset
            size = frame._size if frame._size is not None else Size()
            top_left = frame._frame_shift - box_model.content_offset
            return self._anchor_point(target, Box.from_origin(top_left, size))

        # Border box of the target in its parent's raw frame
        top_left = element._place
        node = element
        while node.parent is not frame:
            parent = node.parent
            top_left = (
                top_left - parent._frame_shift
                + parent.box_model.content_offset + parent._place
            )
            node = parent
        return self._anchor_point(target, Box.from_origin(top_left, element._size))

    def _target_point(self, element: 'Element', spec: PositionSpec) -> Point:
        frame = element.parent

        if isinstance(spec.target, Point):
            reference = spec.box_reference
            if reference is BoxReference.ROOT:
                return spec.target - frame_origin(frame)
            if reference is BoxReference.CONTENT:
                return spec.target
            # Relative to a layer of the parent, expressed in its content frame
            box_model = frame.box_model
            return spec.target + box_model.layer_offset(reference) - box_model.content_offset

        if self._is_frame_local(spec, frame):
            return self._local_target(spec.target, frame)
        return self._absolute_target(spec.target) - frame_origin(frame)

    def resolve_place(self, element: 'Element') -> Point:
        """Raw local placement of a positioned element."""
        spec = element.position_spec
        target = self._target_point(element, spec)
        return target + spec.offset - self._self_offset(element, spec)

    def resolve_root_origin(self, root: 'Element') -> Point:
        """Absolute origin of a positioned root."""
        spec = root.position_spec
        if isinstance(spec.target, Point):
            target = spec.target
        else:
            target = self._absolute_target(spec.target)
        return target + spec.offset - self._self_offset(root, spec)
