"""
Operation status reporting.

Graph algebra operators never raise across the library boundary; they report
the outcome through an OperationResult carrying an ErrorKind when the call
was rejected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Failure categories reported by graph operations."""
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    RESOURCE_EXHAUSTED = "resource_exhausted"


class IdentifierExhaustedError(RuntimeError):
    """Raised when an allocator cannot mint another identifier."""

    def __init__(self, namespace, ceiling: int):
        self.namespace = namespace
        self.ceiling = ceiling
        super().__init__(f"No {namespace.value} identifiers left (ceiling {ceiling})")


@dataclass
class OperationResult:
    """
    Outcome of a graph operation.

    Attributes:
        graph: The resulting graph. On failure this is the input graph left
            unmodified, or None when the operator had no single input to return
        error: The failure category, None on success
        message: Human readable description of the failure
    """

    graph: Optional[Any] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, graph) -> "OperationResult":
        return cls(graph=graph)

    @classmethod
    def failure(cls, error: ErrorKind, message: str, graph=None) -> "OperationResult":
        return cls(graph=graph, error=error, message=message)
