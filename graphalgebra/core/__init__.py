"""
Core graph data structures and management.

This module contains the fundamental graph representation and the facade
that exposes every graph operation.
"""

from .graph import DirectedGraph
from .pygraph import pygraph

__all__ = ['DirectedGraph', 'pygraph']
