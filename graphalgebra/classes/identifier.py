"""
Identifier allocation for nodes and edges.

Node and edge identifiers live in two independent namespaces. Released
identifiers go to a FIFO revocation pool and are handed out again before any
new identifier is minted.
"""

import logging
from collections import deque
from enum import Enum
from typing import Deque, Dict, Optional, Set

from ..config import ERROR_ID, MAX_IDENTIFIER
from .status import IdentifierExhaustedError

logger = logging.getLogger(__name__)


class IdNamespace(Enum):
    """Identifier namespaces."""
    NODE = "node"
    EDGE = "edge"


class IdentifierAllocator:
    """
    Issues unique positive identifiers per namespace.

    This class provides:
    - Minting of monotonically increasing identifiers starting at 1
    - A FIFO revocation pool per namespace, drained before minting
    - Liveness checks for identifiers
    """

    def __init__(self, max_identifier: int = MAX_IDENTIFIER):
        """
        Initialize the allocator.

        Args:
            max_identifier: Largest identifier that may be minted
        """
        self.max_identifier = max_identifier
        self._next_id: Dict[IdNamespace, int] = {}
        self._revoked: Dict[IdNamespace, Deque[int]] = {}
        self._revoked_set: Dict[IdNamespace, Set[int]] = {}
        self.reset()

    @classmethod
    def from_config(cls, config) -> "IdentifierAllocator":
        """Create an allocator honouring the identifier ceiling of a GraphConfig."""
        return cls(max_identifier=config.max_identifier)

    def allocate(self, namespace: IdNamespace) -> int:
        """
        Return an identifier for a new entity.

        Args:
            namespace: Namespace to allocate from

        Returns:
            The oldest revoked identifier if any, otherwise a freshly minted one

        Raises:
            IdentifierExhaustedError: If the namespace counter is saturated
        """
        pool = self._revoked[namespace]
        if pool:
            identifier = pool.popleft()
            self._revoked_set[namespace].discard(identifier)
            return identifier

        identifier = self._next_id[namespace]
        if identifier > self.max_identifier:
            logger.error(f"{namespace.value} identifier counter saturated at {self.max_identifier}")
            raise IdentifierExhaustedError(namespace, self.max_identifier)

        self._next_id[namespace] = identifier + 1
        return identifier

    def revoke(self, namespace: IdNamespace, identifier: int) -> None:
        """
        Release an identifier so it can be reused.

        Args:
            namespace: Namespace the identifier belongs to
            identifier: Identifier to release
        """
        if not self.exists(namespace, identifier):
            logger.warning(f"Ignoring revocation of non-live {namespace.value} identifier {identifier}")
            return

        self._revoked[namespace].append(identifier)
        self._revoked_set[namespace].add(identifier)

    def exists(self, namespace: IdNamespace, identifier: int) -> bool:
        """Check whether an identifier is currently assigned to a live entity."""
        if identifier <= ERROR_ID or identifier >= self._next_id[namespace]:
            return False
        return identifier not in self._revoked_set[namespace]

    def highest_minted(self, namespace: IdNamespace) -> int:
        """Return the largest identifier minted so far, ERROR_ID if none."""
        return self._next_id[namespace] - 1

    def available(self, namespace: IdNamespace) -> int:
        """Return how many identifiers can still be handed out, pool included."""
        nMintable = self.max_identifier - self.highest_minted(namespace)
        return max(nMintable, 0) + len(self._revoked[namespace])

    def revoked_ids(self, namespace: IdNamespace) -> list:
        """Return the revocation pool in reuse order."""
        return list(self._revoked[namespace])

    def reset(self, namespace: Optional[IdNamespace] = None) -> None:
        """
        Clear the counter and pool of one namespace, or of both.

        Args:
            namespace: Namespace to reset; None resets every namespace
        """
        targets = [namespace] if namespace is not None else list(IdNamespace)
        for target in targets:
            self._next_id[target] = ERROR_ID + 1
            self._revoked[target] = deque()
            self._revoked_set[target] = set()


_default_allocator = IdentifierAllocator()


def get_default_allocator() -> IdentifierAllocator:
    """Return the process-wide allocator used by graphs created without one."""
    return _default_allocator
