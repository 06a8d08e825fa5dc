"""
Graph analysis modules.

This module contains structural queries and the shortest-path tree engine.
"""

from .queries import StructuralQueries
from .pathfinding import PathFinder

__all__ = ['StructuralQueries', 'PathFinder']
