"""
Node representation with its owned outgoing edges.
"""

import math
from enum import Enum
from typing import List, Optional

from ..config import ERROR_ID
from .edge import pyedge


class VisitState(Enum):
    """Shortest-path bookkeeping state of a node."""
    UNVISITED = "unvisited"
    TENTATIVE = "tentative"
    FINALIZED = "finalized"


class pynode:
    """
    A labeled node owning an ordered list of outgoing edges.

    Attributes:
        lNodeID: Node identifier
        sLabel: Node label
        aEdge: Outgoing edges in insertion order
        dDistance: Best known distance from the last shortest-path source
        lNodeID_previous: Previous node on the shortest-path tree
        lEdgeID_previous: Edge reaching this node on the shortest-path tree
        eState: Shortest-path visit state
    """

    def __init__(self, lNodeID: int, sLabel: str):
        self.lNodeID = lNodeID
        self.sLabel = str(sLabel)
        self.aEdge: List[pyedge] = []
        self.reset_path_state()

    def reset_path_state(self):
        """Clear the shortest-path fields."""
        self.dDistance = math.inf
        self.lNodeID_previous = ERROR_ID
        self.lEdgeID_previous = ERROR_ID
        self.eState = VisitState.UNVISITED

    @property
    def nEdge(self) -> int:
        return len(self.aEdge)

    def find_edge(self, lEdgeID: int) -> Optional[pyedge]:
        """Return the owned edge with the given ID, or None."""
        for pEdge in self.aEdge:
            if pEdge.lEdgeID == lEdgeID:
                return pEdge
        return None

    def edges_to(self, lNodeID_destination: int) -> List[pyedge]:
        """Return the owned edges pointing at the given node."""
        return [pEdge for pEdge in self.aEdge if pEdge.lNodeID_destination == lNodeID_destination]

    def __repr__(self) -> str:
        return f"pynode(id={self.lNodeID}, label={self.sLabel!r}, edges={self.nEdge})"
