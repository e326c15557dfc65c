"""
Layout error taxonomy.

All errors are raised synchronously at the call that triggers resolution
(construction, position(), an anchor read, or layout()).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from diagram.resolve.graph import LayoutNode


class LayoutError(Exception):
    """Base error for the layout engine."""


class InvalidBoxModelError(LayoutError, ValueError):
    """A padding/border/margin inset resolved to a negative or unparseable value."""


class InvalidDimensionError(LayoutError, ValueError):
    """A width or height cannot be resolved (e.g. a percentage without a parent)."""


class UnresolvedTargetError(LayoutError):
    """A position target is not attached to the tree being resolved."""


class CyclicPositionError(UnresolvedTargetError):
    """
    A layout value depends, directly or transitively, on itself.

    Attributes:
        cycle: Graph nodes along the cycle, first node repeated at the end
    """

    def __init__(self, cycle: Sequence['LayoutNode']):
        self.cycle = list(cycle)
        path = " -> ".join(node.describe() for node in self.cycle)
        super().__init__(f"Cyclic layout dependency: {path}")


class UnmeasurableAutoSizeError(LayoutError):
    """An auto-sized element has nothing to measure (strict mode only)."""
