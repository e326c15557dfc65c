"""
Final layout output: the resolved boxes of every element in a tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

from diagram.core.box_model import BoxReference
from diagram.core.geometry import Box

if TYPE_CHECKING:
    from diagram.element import Element


@dataclass(frozen=True)
class ResolvedBox:
    """The four absolute box layers of one element."""
    margin: Box
    border: Box
    padding: Box
    content: Box

    @classmethod
    def of(cls, element: 'Element') -> 'ResolvedBox':
        border = element.absolute_box
        layer = element.box_model.layer_box
        return cls(
            margin=layer(border, BoxReference.MARGIN),
            border=border,
            padding=layer(border, BoxReference.PADDING),
            content=layer(border, BoxReference.CONTENT),
        )

    def layer(self, reference: BoxReference) -> Box:
        return getattr(self, BoxReference.parse(reference).layer.value)


class LayoutResult:
    """
    Mapping of element to ResolvedBox for a resolved tree.

    Usage:
        result = artboard.layout()
        result[circle].border.x
        for element in result.paint_order():
            ...
    """

    def __init__(self, root: 'Element', boxes: Dict['Element', ResolvedBox]):
        self.root = root
        self._boxes = boxes

    @classmethod
    def collect(cls, root: 'Element') -> 'LayoutResult':
        return cls(root, {element: ResolvedBox.of(element) for element in root.iter_tree()})

    def __getitem__(self, element: 'Element') -> ResolvedBox:
        return self._boxes[element]

    def get(self, element: 'Element') -> Optional[ResolvedBox]:
        return self._boxes.get(element)

    def __contains__(self, element: object) -> bool:
        return element in self._boxes

    def __iter__(self) -> Iterator['Element']:
        return iter(self._boxes)

    def __len__(self) -> int:
        return len(self._boxes)

    def items(self):
        return self._boxes.items()

    @property
    def bounds(self) -> Box:
        """Union of all border boxes."""
        return Box.union(box.border for box in self._boxes.values())

    def paint_order(self) -> List['Element']:
        """
        Elements back to front.

        Depth-first from the root; siblings ordered by z_index (unset
        counts as 0) and then by creation order.
        """
        order = []
        stack = [self.root]
        while stack:
            element = stack.pop()
            order.append(element)
            siblings = sorted(
                element.children,
                key=lambda child: (child.z_index or 0, child.creation_index),
            )
            stack.extend(reversed(siblings))
        return order
