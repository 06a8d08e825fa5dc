"""
Graph algebra operations.

This module contains the unary operators (vertex and edge contraction,
complement) and the binary operators (disjoint union, Cartesian product,
parallel and series composition).
"""

from .unary import UnaryOperations
from .binary import BinaryOperations, cartesian, disjoint_union, parallel, series

__all__ = [
    'UnaryOperations',
    'BinaryOperations',
    'disjoint_union',
    'cartesian',
    'parallel',
    'series',
]
