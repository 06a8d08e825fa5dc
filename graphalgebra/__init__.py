"""
graphalgebra - Directed Graph Construction and Algebra Library

A Python library for building directed graphs, transforming them with unary
and binary graph-algebra operators, and computing shortest-path trees.
Undirected graphs are modeled as pairs of mirrored directed edges.

Main Classes:
    pygraph: Main class bundling the graph model and its operations (facade)
    pynode: Node representation owning its outgoing edges
    pyedge: Directed edge representation
    IdentifierAllocator: Node and edge identifier allocation with recycling

Example:
    >>> from graphalgebra import pygraph, IdentifierAllocator
    >>> allocator = IdentifierAllocator()
    >>> graph = pygraph(allocator)
    >>> a = graph.add_node("A")
    >>> b = graph.add_node("B")
    >>> graph.add_edge(a, b, 1, "a_to_b")
    >>> graph.dijkstra_mst(a)
"""

__version__ = "0.1.0"

from graphalgebra.config import DEFAULT_CONFIG, ERROR_ID, GraphConfig
from graphalgebra.classes.edge import pyedge
from graphalgebra.classes.node import pynode, VisitState
from graphalgebra.classes.identifier import IdentifierAllocator, IdNamespace, get_default_allocator
from graphalgebra.classes.status import ErrorKind, IdentifierExhaustedError, OperationResult
from graphalgebra.core.graph import DirectedGraph
from graphalgebra.core.pygraph import pygraph
from graphalgebra.operations.binary import cartesian, disjoint_union, parallel, series

__all__ = [
    'pygraph',
    'pynode',
    'pyedge',
    'VisitState',
    'DirectedGraph',
    'IdentifierAllocator',
    'IdNamespace',
    'get_default_allocator',
    'ErrorKind',
    'IdentifierExhaustedError',
    'OperationResult',
    'GraphConfig',
    'DEFAULT_CONFIG',
    'ERROR_ID',
    'disjoint_union',
    'cartesian',
    'parallel',
    'series',
]
