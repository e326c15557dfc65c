"""
Layout resolution: dependency graph, size and position resolvers, engine.
"""

from diagram.resolve.graph import LayoutGraph, LayoutNode, NodeKind
from diagram.resolve.result import LayoutResult, ResolvedBox

__all__ = [
    'LayoutGraph',
    'LayoutNode',
    'NodeKind',
    'LayoutResult',
    'ResolvedBox',
]
