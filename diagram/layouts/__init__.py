"""
Layout directors.

Each container arranges its in-flow children in its local content frame:
- Stack / VStack / HStack: sequential along an axis
- Grid: equal cells addressed by row and column
- Columns: a row of vertical stacks
- ZStack: children layered at one aligned spot
- Freeform: no arrangement, union-bound auto sizing
"""

from diagram.layouts.layout import Layout
from diagram.layouts.stack import Stack
from diagram.layouts.vertical import VStack
from diagram.layouts.horizontal import HStack
from diagram.layouts.grid import Grid, GridCell
from diagram.layouts.columns import Column, Columns
from diagram.layouts.freeform import Freeform
from diagram.layouts.zstack import ZStack

__all__ = [
    'Layout',
    'Stack',
    'VStack',
    'HStack',
    'Grid',
    'GridCell',
    'Column',
    'Columns',
    'Freeform',
    'ZStack',
]
