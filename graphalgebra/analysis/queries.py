"""
Structural queries over directed graphs.

This module provides read-only measurements of a graph: sizes, adjacency
matrix and identifier liveness.
"""

import logging
from typing import Iterable, Sequence

import numpy as np

from ..classes.edge import pyedge
from ..classes.identifier import IdNamespace
from ..core.graph import DirectedGraph

logger = logging.getLogger(__name__)


class StructuralQueries:
    """
    Read-only queries on a graph.

    This class provides methods for:
    - Counting nodes and edges
    - Building the adjacency matrix
    - Counting autoloops
    - Checking identifier liveness
    """

    def __init__(self, graph: DirectedGraph):
        """
        Initialize the query helper.

        Args:
            graph: DirectedGraph instance to inspect
        """
        self.graph = graph

    def graph_dim(self) -> int:
        """Return the number of nodes."""
        return len(self.graph)

    @staticmethod
    def edge_list_dim(aEdge: Sequence[pyedge]) -> int:
        """Return the number of edges in an edge list."""
        return len(aEdge)

    def edge_count(self) -> int:
        """Return the total number of edges in the graph."""
        return sum(pNode.nEdge for pNode in self.graph.aNode)

    def create_graph_matrix(self) -> np.ndarray:
        """
        Build the adjacency matrix of the graph.

        Rows and columns follow the graph iteration order; an entry is 1 when
        at least one edge goes from the row node to the column node.

        Returns:
            Square integer matrix of size graph_dim()
        """
        aNode = self.graph.aNode
        nNode = len(aNode)
        index = {pNode.lNodeID: i for i, pNode in enumerate(aNode)}
        aMatrix = np.zeros((nNode, nNode), dtype=int)

        for i, pNode in enumerate(aNode):
            for pEdge in pNode.aEdge:
                j = index.get(pEdge.aEndpoint[1])
                if j is not None:
                    aMatrix[i, j] = 1

        logger.debug(f"Built {nNode}x{nNode} adjacency matrix with {int(aMatrix.sum())} entries")
        return aMatrix

    @staticmethod
    def autoloop_count(aEdge: Iterable[pyedge]) -> int:
        """Return the number of edges whose endpoints are equal."""
        return sum(1 for pEdge in aEdge if pEdge.is_autoloop())

    def exists_node_from_id(self, lNodeID: int) -> bool:
        return self.graph.allocator.exists(IdNamespace.NODE, lNodeID)

    def exists_edge_from_id(self, lEdgeID: int) -> bool:
        return self.graph.allocator.exists(IdNamespace.EDGE, lEdgeID)
