"""
Core data classes for graph representation.

This module contains the fundamental data structures used throughout
the graphalgebra library.
"""

from .edge import pyedge
from .node import pynode, VisitState
from .identifier import IdentifierAllocator, IdNamespace, get_default_allocator
from .status import ErrorKind, IdentifierExhaustedError, OperationResult

__all__ = [
    'pyedge',
    'pynode',
    'VisitState',
    'IdentifierAllocator',
    'IdNamespace',
    'get_default_allocator',
    'ErrorKind',
    'IdentifierExhaustedError',
    'OperationResult',
]
