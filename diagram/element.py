"""
Base element class for every node of a diagram tree.

Elements are declarative: they hold a size (explicit, percentage or auto),
a box model and an optional position instruction. Their absolute boxes
are computed by the layout engine and cached until the tree changes.
"""

from __future__ import annotations

import itertools
from typing import (
    TYPE_CHECKING, Any, ClassVar, Iterator, Optional, Tuple, Type, Union,
)

from diagram.core.box_model import BoxModel, BoxReference
from diagram.core.config import BoxModelConfig, ElementConfig, LayoutConfig, LayoutSettings
from diagram.core.dimension import Dimension
from diagram.core.errors import CyclicPositionError, UnresolvedTargetError
from diagram.core.geometry import Anchor, Box, Point, Size
from diagram.core.placement import AnchorRef, PositionSpec

if TYPE_CHECKING:
    from diagram.artboard import Artboard
    from diagram.container import Container

_creation_counter = itertools.count()


class BoxAccessor:
    """
    Anchor access for one box layer of an element.

    Properties return resolved absolute points; anchor() returns a lazy
    AnchorRef for use in position().
    """

    def __init__(self, element: 'Element', reference: BoxReference):
        self._element = element
        self.reference = reference

    @property
    def box(self) -> Box:
        """Absolute box of this layer."""
        return self._element.box_for(self.reference)

    @property
    def size(self) -> Size:
        return self.box.size

    def anchor(self, anchor: Union[Anchor, str] = Anchor.TOP_LEFT) -> AnchorRef:
        """Lazy reference to an anchor of this layer."""
        return AnchorRef(self._element, Anchor.parse(anchor), self.reference)

    def point(self, anchor: Union[Anchor, str]) -> Point:
        """Absolute point of an anchor of this layer."""
        return self.box.anchor(anchor)

    @property
    def top_left(self) -> Point:
        return self.point(Anchor.TOP_LEFT)

    @property
    def top_center(self) -> Point:
        return self.point(Anchor.TOP_CENTER)

    @property
    def top_right(self) -> Point:
        return self.point(Anchor.TOP_RIGHT)

    @property
    def center_left(self) -> Point:
        return self.point(Anchor.CENTER_LEFT)

    @property
    def center(self) -> Point:
        return self.point(Anchor.CENTER)

    @property
    def center_right(self) -> Point:
        return self.point(Anchor.CENTER_RIGHT)

    @property
    def bottom_left(self) -> Point:
        return self.point(Anchor.BOTTOM_LEFT)

    @property
    def bottom_center(self) -> Point:
        return self.point(Anchor.BOTTOM_CENTER)

    @property
    def bottom_right(self) -> Point:
        return self.point(Anchor.BOTTOM_RIGHT)

    def __repr__(self) -> str:
        return f"BoxAccessor({self._element!r}, {self.reference.value})"


class Element:
    """
    Base class for all diagram nodes.

    An element is created detached. It is attached when added to a
    container, and resolved on demand when any absolute geometry is read.
    """

    config_type: ClassVar[Type[LayoutConfig]] = ElementConfig

    def __init__(self, config: Optional[LayoutConfig] = None, **options: Any):
        self.config = self._make_config(config, options)

        # Geometry
        self.box_model = BoxModel.from_config(self.config.box_model)
        self.width_dimension, self.height_dimension = self._dimensions()

        # Hierarchy
        self.parent: Optional[Container] = None
        self.name: str = self.config.name
        self.z_index: Optional[int] = self.config.z_index
        self.position_spec: Optional[PositionSpec] = None
        self.creation_index = next(_creation_counter)

        # Box layer accessors
        self.border_box = BoxAccessor(self, BoxReference.BORDER)
        self.padding_box = BoxAccessor(self, BoxReference.PADDING)
        self.content_box = BoxAccessor(self, BoxReference.CONTENT)
        self.margin_box = BoxAccessor(self, BoxReference.MARGIN)

        # Resolution state (written by the layout engine)
        self._size: Optional[Size] = None
        self._place: Optional[Point] = None
        self._origin: Optional[Point] = None
        self._frame_shift: Point = Point()
        self._box: Optional[Box] = None
        self._dirty: bool = True
        self._stale: bool = True  # only meaningful on a tree root

    @classmethod
    def _make_config(cls, config: Optional[LayoutConfig], options: dict) -> LayoutConfig:
        """Validate config + keyword options into this class's config type."""
        if config is None:
            return cls.config_type(**options)
        if not isinstance(config, cls.config_type):
            raise TypeError(
                f"{cls.__name__} expects {cls.config_type.__name__}, "
                f"got {type(config).__name__}"
            )
        if options:
            return cls.config_type(**{**dict(config), **options})
        return config

    def _dimensions(self) -> Tuple[Dimension, Dimension]:
        """Width and height dimensions from the config."""
        return self.config.width, self.config.height

    # Hierarchy

    @property
    def children(self) -> Tuple['Element', ...]:
        """Leaves have no children."""
        return ()

    def iter_tree(self) -> Iterator['Element']:
        """Depth-first iteration over this element and its descendants."""
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))

    def ancestors(self) -> Iterator['Container']:
        """Parent, grandparent, ... up to the tree root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def is_descendant_of(self, other: 'Element') -> bool:
        return any(ancestor is other for ancestor in self.ancestors())

    def tree_root(self) -> 'Element':
        """Top-most ancestor (self when detached)."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def artboard(self) -> Optional['Artboard']:
        """The artboard this element is attached to, if any."""
        from diagram.artboard import Artboard

        root = self.tree_root()
        return root if isinstance(root, Artboard) else None

    @property
    def is_attached(self) -> bool:
        return self.artboard is not None

    @property
    def settings(self) -> LayoutSettings:
        """Layout settings of the tree this element belongs to."""
        root = self.tree_root()
        if root is not self:
            return root.settings
        return LayoutSettings()

    # Sizing

    def intrinsic_size(self) -> Optional[Size]:
        """
        Content size this element reports when its dimension is auto.

        Override in shapes. None means the element has nothing to measure.
        """
        return None

    def set_size(
        self,
        width: Union[Dimension, float, str, None] = None,
        height: Union[Dimension, float, str, None] = None,
    ) -> 'Element':
        """Change width and/or height (fluent)."""
        if width is not None:
            self.width_dimension = Dimension.parse(width)
        if height is not None:
            self.height_dimension = Dimension.parse(height)
        self.invalidate()
        return self

    def set_box_model(self, **box_model: Any) -> 'Element':
        """Replace padding/border/margin (fluent)."""
        self.box_model = BoxModel.from_config(box_model)
        # Configs may be shared between elements
        self.config = self.config.model_copy(
            update={"box_model": BoxModelConfig(**box_model)}
        )
        self.invalidate()
        return self

    # Positioning

    def anchor(
        self,
        anchor: Union[Anchor, str] = Anchor.TOP_LEFT,
        box: Union[BoxReference, str] = BoxReference.BORDER,
    ) -> AnchorRef:
        """Lazy reference to one of this element's anchors."""
        return AnchorRef(self, Anchor.parse(anchor), BoxReference.parse(box).layer)

    def position(
        self,
        relative_to: Union[AnchorRef, 'Element', Point, Tuple[float, float]],
        *,
        anchor: Union[Anchor, str] = Anchor.TOP_LEFT,
        target_anchor: Union[Anchor, str, None] = None,
        x: float = 0.0,
        y: float = 0.0,
        box_reference: Union[BoxReference, str] = BoxReference.BORDER,
    ) -> 'Element':
        """
        Place this element's anchor at a target point plus an offset.

        Args:
            relative_to: AnchorRef (e.g. other.anchor("center")), an element
                (uses target_anchor, default: same as anchor), or an
                explicit point interpreted in the parent's box_reference layer
            anchor: Anchor of this element to place
            target_anchor: Anchor of the target element (element targets only)
            x, y: Offset added to the target point
            box_reference: Layer used for this element's anchor (and for
                element targets); "root" evaluates in artboard space

        Raises:
            UnresolvedTargetError: The target is not in a resolvable tree
            CyclicPositionError: The target depends on this element
        """
        reference = BoxReference.parse(box_reference)
        self_anchor = Anchor.parse(anchor)

        if isinstance(relative_to, AnchorRef):
            if target_anchor is not None:
                raise TypeError("target_anchor cannot be combined with an AnchorRef target")
            target: Union[AnchorRef, Point] = relative_to
        elif isinstance(relative_to, Element):
            target = relative_to.anchor(
                target_anchor if target_anchor is not None else self_anchor,
                reference.layer,
            )
        else:
            target = Point.coerce(relative_to)

        if isinstance(target, AnchorRef):
            self._check_target(target.element)

        spec = PositionSpec(
            self_anchor=self_anchor,
            target=target,
            offset=Point(float(x), float(y)),
            box_reference=reference,
        )

        previous = self.position_spec
        self.position_spec = spec
        self.invalidate()

        try:
            self._check_dependencies()
        except UnresolvedTargetError:
            # Includes CyclicPositionError
            self.position_spec = previous
            self.invalidate()
            raise

        return self

    def clear_position(self) -> 'Element':
        """Drop the explicit position and let the parent place this element."""
        if self.position_spec is not None:
            self.position_spec = None
            self.invalidate()
        return self

    def _check_target(self, target: 'Element') -> None:
        if target is self:
            from diagram.resolve.graph import LayoutNode, NodeKind

            node = LayoutNode(NodeKind.PLACE, self)
            raise CyclicPositionError([node, node])
        target_root = target.tree_root()
        if target_root is self.tree_root():
            return
        from diagram.artboard import Artboard

        if not isinstance(target_root, Artboard):
            raise UnresolvedTargetError(
                f"Position target {target!r} is not attached to an artboard"
            )

    def _check_dependencies(self) -> None:
        """Static cycle check of this element's tree, when it is attached."""
        if not self.is_attached:
            return
        from diagram.resolve.engine import LayoutEngine

        LayoutEngine(self.tree_root()).check()

    # Resolution

    def invalidate(self) -> None:
        """Mark this element and its descendants dirty and the tree stale."""
        for element in self.iter_tree():
            element._dirty = True
            element._box = None
        self.tree_root()._stale = True

    def resolve(self) -> Box:
        """
        Ensure this element's tree is resolved.

        Returns:
            Absolute border box of this element
        """
        root = self.tree_root()
        if root._stale or self._dirty or self._box is None:
            from diagram.resolve.engine import LayoutEngine

            LayoutEngine(root).run()
        return self._box

    def get_absolute_position(self) -> Point:
        """Absolute top-left of the border box."""
        return self.resolve().origin

    @property
    def absolute_box(self) -> Box:
        """Absolute border box."""
        return self.resolve()

    def box_for(self, reference: Union[BoxReference, str]) -> Box:
        """Absolute box of a layer."""
        return self.box_model.layer_box(self.resolve(), BoxReference.parse(reference))

    @property
    def size(self) -> Size:
        """Resolved border-box size."""
        return self.resolve().size

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    # Border-box anchors

    @property
    def top_left(self) -> Point:
        return self.border_box.top_left

    @property
    def top_center(self) -> Point:
        return self.border_box.top_center

    @property
    def top_right(self) -> Point:
        return self.border_box.top_right

    @property
    def center_left(self) -> Point:
        return self.border_box.center_left

    @property
    def center(self) -> Point:
        return self.border_box.center

    @property
    def center_right(self) -> Point:
        return self.border_box.center_right

    @property
    def bottom_left(self) -> Point:
        return self.border_box.bottom_left

    @property
    def bottom_center(self) -> Point:
        return self.border_box.bottom_center

    @property
    def bottom_right(self) -> Point:
        return self.border_box.bottom_right

    # Utility

    def find_by_name(self, name: str) -> Optional['Element']:
        """Find an element by name in this subtree."""
        for element in self.iter_tree():
            if element.name == name:
                return element
        return None

    def __repr__(self) -> str:
        label = self.name or f"#{self.creation_index}"
        return f"{self.__class__.__name__}({label!r})"
