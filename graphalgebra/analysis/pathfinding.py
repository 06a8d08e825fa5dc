"""
Shortest-path tree computation for directed graphs.

This module provides Dijkstra's algorithm over the graph model. Results are
written onto the nodes (distance and back-pointers) and edges (tree flag).
"""

import heapq
import logging
import math
from typing import Dict, List

from ..config import ERROR_ID
from ..classes.edge import pyedge
from ..classes.node import VisitState
from ..classes.status import ErrorKind, OperationResult
from ..core.graph import DirectedGraph

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Shortest-path algorithms for directed graphs.

    This class provides methods for:
    - Building the shortest-path tree from a source node
    - Reading distances and paths back from the annotated graph
    """

    def __init__(self, graph: DirectedGraph):
        """
        Initialize the path finder.

        Args:
            graph: DirectedGraph instance to analyze
        """
        self.graph = graph
        self.lNodeID_source = ERROR_ID

    def dijkstra_mst(self, lNodeID_source: int) -> OperationResult:
        """
        Compute the shortest-path tree rooted at a source node.

        Every node gets its distance from the source and back-pointers to the
        previous node and edge; every tree edge gets iFlag_mst set. Unreachable
        nodes keep an infinite distance. Negative weights are not supported.

        Args:
            lNodeID_source: ID of the source node

        Returns:
            OperationResult wrapping the annotated graph
        """
        if self.graph.find_node(lNodeID_source) is None:
            message = f"Source node {lNodeID_source} does not belong to the graph"
            logger.error(f"dijkstra_mst: {message}")
            return OperationResult.failure(ErrorKind.NOT_FOUND, message, self.graph)

        aNode = self.graph.aNode
        order = {pNode.lNodeID: i for i, pNode in enumerate(aNode)}

        for pNode in aNode:
            pNode.reset_path_state()
            for pEdge in pNode.aEdge:
                pEdge.iFlag_mst = False

        pSource = self.graph.find_node(lNodeID_source)
        pSource.dDistance = 0
        pSource.eState = VisitState.TENTATIVE

        # (distance, insertion position) keeps ties in iteration order
        heap = [(0, order[lNodeID_source])]

        while heap:
            dDistance, iPosition = heapq.heappop(heap)
            pNode = aNode[iPosition]

            if pNode.eState == VisitState.FINALIZED or dDistance > pNode.dDistance:
                continue

            pNode.eState = VisitState.FINALIZED

            for pEdge in pNode.aEdge:
                pNode_next = self.graph.find_node(pEdge.lNodeID_destination)
                if pNode_next is None or pNode_next.eState == VisitState.FINALIZED:
                    continue

                dDistance_new = pNode.dDistance + pEdge.iWeight
                if dDistance_new < pNode_next.dDistance:
                    pNode_next.dDistance = dDistance_new
                    pNode_next.lNodeID_previous = pNode.lNodeID
                    pNode_next.lEdgeID_previous = pEdge.lEdgeID
                    pNode_next.eState = VisitState.TENTATIVE
                    heapq.heappush(heap, (dDistance_new, order[pNode_next.lNodeID]))

        nReached = 0
        for pNode in aNode:
            if pNode.lEdgeID_previous == ERROR_ID:
                continue
            pEdge = self.graph.find_edge(pNode.lNodeID_previous, pNode.lEdgeID_previous)
            if pEdge is not None:
                pEdge.iFlag_mst = True
                nReached += 1

        self.lNodeID_source = lNodeID_source
        logger.info(f"Shortest-path tree from node {lNodeID_source} reaches {nReached + 1} of {len(aNode)} nodes")
        return OperationResult.success(self.graph)

    def distances(self) -> Dict[int, float]:
        """Return the distance of every node from the last computed source."""
        return {pNode.lNodeID: pNode.dDistance for pNode in self.graph.aNode}

    def mst_edges(self) -> List[pyedge]:
        """Return the edges flagged as part of the shortest-path tree."""
        return [pEdge for pEdge in self.graph.edges() if pEdge.iFlag_mst]

    def shortest_path(self, lNodeID_target: int) -> List[int]:
        """
        Follow back-pointers from a target node to the last computed source.

        Args:
            lNodeID_target: ID of the target node

        Returns:
            Node IDs from the source to the target, empty if unreachable or
            if no tree has been computed yet
        """
        if self.lNodeID_source == ERROR_ID:
            logger.warning("shortest_path: no shortest-path tree computed yet")
            return []

        pNode = self.graph.find_node(lNodeID_target)
        if pNode is None or math.isinf(pNode.dDistance):
            return []

        path = [lNodeID_target]
        while pNode.lNodeID != self.lNodeID_source:
            path.append(pNode.lNodeID_previous)
            pNode = self.graph.find_node(pNode.lNodeID_previous)
            if pNode is None:
                logger.warning(f"Broken back-pointer while tracing path to node {lNodeID_target}")
                return []

        path.reverse()
        return path
