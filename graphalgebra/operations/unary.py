"""
Unary graph operations.

This module provides operations that transform a single graph in place:
vertex contraction, edge contraction and complement.
"""

import logging
from typing import Optional

from ..config import GraphConfig
from ..classes.identifier import IdNamespace
from ..classes.status import ErrorKind, IdentifierExhaustedError, OperationResult
from ..core.graph import DirectedGraph

logger = logging.getLogger(__name__)


class UnaryOperations:
    """
    Handles single-graph algebra operations.

    This class provides methods for:
    - Vertex contraction (merging a donor node into a survivor node)
    - Edge contraction
    - Graph complement
    """

    def __init__(self, graph: DirectedGraph, config: Optional[GraphConfig] = None):
        """
        Initialize the unary operations.

        Args:
            graph: DirectedGraph instance to transform
            config: Defaults for generated edges, the graph's own config if omitted
        """
        self.graph = graph
        self.config = config if config is not None else graph.config

    def contract(self, lNodeID_survivor: int, lNodeID_donor: int) -> OperationResult:
        """
        Merge the donor node into the survivor node.

        Direct edges between the two nodes are dropped, the donor's outgoing
        edges move to the survivor, every edge pointing at the donor is
        redirected to the survivor and the donor is deleted.

        Args:
            lNodeID_survivor: ID of the node that remains
            lNodeID_donor: ID of the node that is merged and removed

        Returns:
            OperationResult wrapping the graph, unchanged on error
        """
        pSurvivor = self.graph.find_node(lNodeID_survivor)
        pDonor = self.graph.find_node(lNodeID_donor)

        if pSurvivor is None or pDonor is None:
            message = f"Node IDs {lNodeID_survivor} and {lNodeID_donor} are not both in the graph"
            logger.error(f"contract: {message}")
            return OperationResult.failure(ErrorKind.NOT_FOUND, message, self.graph)

        if lNodeID_survivor == lNodeID_donor:
            message = f"Cannot contract node {lNodeID_survivor} with itself"
            logger.error(f"contract: {message}")
            return OperationResult.failure(ErrorKind.INVALID_ARGUMENT, message, self.graph)

        # Drop direct links in both directions
        for pEdge in pSurvivor.edges_to(lNodeID_donor):
            self.graph.delete_edge(lNodeID_survivor, pEdge.lEdgeID)
        for pEdge in pDonor.edges_to(lNodeID_survivor):
            self.graph.delete_edge(lNodeID_donor, pEdge.lEdgeID)

        # Re-home outgoing edges of the donor
        for pEdge in pDonor.aEdge:
            if pEdge.is_autoloop():
                pEdge.lNodeID_destination = lNodeID_survivor
            pEdge.lNodeID_source = lNodeID_survivor
            pSurvivor.aEdge.append(pEdge)
        nMoved = pDonor.nEdge
        pDonor.aEdge = []

        # Redirect inward edges; any node may hold one
        nRedirected = 0
        for pNode in self.graph.aNode:
            if pNode.lNodeID == lNodeID_donor:
                continue
            for pEdge in pNode.aEdge:
                if pEdge.lNodeID_destination == lNodeID_donor:
                    pEdge.lNodeID_destination = lNodeID_survivor
                    nRedirected += 1

        self.graph.delete_node(lNodeID_donor)

        logger.debug(f"Contracted node {lNodeID_donor} into {lNodeID_survivor}: "
                     f"moved {nMoved} edges, redirected {nRedirected} inward edges")
        return OperationResult.success(self.graph)

    def contract_edge(self, lEdgeID: int) -> OperationResult:
        """
        Contract an edge by merging its destination into its source.

        An autoloop is simply removed.

        Args:
            lEdgeID: ID of the edge to contract

        Returns:
            OperationResult wrapping the graph, unchanged on error
        """
        for pNode in self.graph.aNode:
            pEdge = pNode.find_edge(lEdgeID)
            if pEdge is None:
                continue

            if pEdge.is_autoloop():
                self.graph.delete_edge(pNode.lNodeID, lEdgeID)
                logger.debug(f"Removed autoloop {lEdgeID} on node {pNode.lNodeID}")
                return OperationResult.success(self.graph)

            lNodeID_destination = pEdge.lNodeID_destination
            if self.graph.find_node(lNodeID_destination) is None:
                message = f"Edge {lEdgeID} points at missing node {lNodeID_destination}"
                logger.error(f"contract_edge: {message}")
                return OperationResult.failure(ErrorKind.INVALID_ARGUMENT, message, self.graph)

            return self.contract(pNode.lNodeID, lNodeID_destination)

        message = f"Edge {lEdgeID} does not belong to the graph"
        logger.error(f"contract_edge: {message}")
        return OperationResult.failure(ErrorKind.NOT_FOUND, message, self.graph)

    def complement(self) -> OperationResult:
        """
        Replace the graph by its complement.

        Every node ends up pointing at exactly the nodes (itself included) it
        did not point at before, through edges carrying the configured
        complement label and weight.

        Returns:
            OperationResult wrapping the graph
        """
        aNode_id = self.graph.node_ids
        plan = []
        for pNode in self.graph.aNode:
            existing = {(pEdge.aEndpoint[0], pEdge.aEndpoint[1]) for pEdge in pNode.aEdge}
            aDestination = [lNodeID for lNodeID in aNode_id
                            if (pNode.lNodeID, lNodeID) not in existing]
            plan.append((pNode, aDestination))

        nEdge_new = sum(len(aDestination) for _, aDestination in plan)
        nEdge_old = sum(pNode.nEdge for pNode in self.graph.aNode)
        nAvailable = self.graph.allocator.available(IdNamespace.EDGE) + nEdge_old
        if nEdge_new > nAvailable:
            message = f"Complement needs {nEdge_new} edge identifiers, only {nAvailable} available"
            logger.error(f"complement: {message}")
            return OperationResult.failure(ErrorKind.RESOURCE_EXHAUSTED, message, self.graph)

        for pNode, aDestination in plan:
            self.graph.delete_edge_list(pNode.lNodeID)
            for lNodeID in aDestination:
                try:
                    pEdge = self.graph.create_edge(
                        self.config.complemented_edge_weight,
                        self.config.complemented_edge_label,
                        [pNode.lNodeID, lNodeID])
                except IdentifierExhaustedError as e:
                    logger.error(f"complement: {e}")
                    return OperationResult.failure(ErrorKind.RESOURCE_EXHAUSTED, str(e), self.graph)
                pNode.aEdge.append(pEdge)

        logger.debug(f"Complemented graph: {nEdge_old} edges replaced by {nEdge_new}")
        return OperationResult.success(self.graph)
