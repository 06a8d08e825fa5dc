"""
Binary graph operations.

This module provides operations that combine two graphs: disjoint union,
Cartesian product and the two-terminal series and parallel compositions.

Operators that re-parent nodes consume their inputs: after the call the input
graphs are empty and the nodes belong to the result.
"""

import logging
from typing import Dict, List, Optional

from ..config import GraphConfig
from ..classes.identifier import IdNamespace
from ..classes.status import ErrorKind, IdentifierExhaustedError, OperationResult
from ..core.graph import DirectedGraph
from .unary import UnaryOperations

logger = logging.getLogger(__name__)


class BinaryOperations:
    """
    Handles two-graph algebra operations.

    This class provides methods for:
    - Disjoint union
    - Cartesian product
    - Parallel composition of two-terminal graphs
    - Series composition of two-terminal graphs
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize the binary operations.

        Args:
            config: Defaults for generated edges; the first graph's config is
                used when omitted
        """
        self.config = config

    def _config_for(self, pGraph: DirectedGraph) -> GraphConfig:
        return self.config if self.config is not None else pGraph.config

    @staticmethod
    def _check_pair(pGraph_1: DirectedGraph, pGraph_2: DirectedGraph, sOperation: str) -> Optional[OperationResult]:
        """Reject graph pairs that cannot be combined without identifier clashes."""
        if pGraph_1 is pGraph_2:
            message = "Both operands are the same graph"
        elif pGraph_1.allocator is not pGraph_2.allocator:
            message = "Operands use different identifier allocators"
        else:
            return None

        logger.error(f"{sOperation}: {message}")
        return OperationResult.failure(ErrorKind.INVALID_ARGUMENT, message)

    def disjoint_union(self, pGraph_1: DirectedGraph, pGraph_2: DirectedGraph) -> OperationResult:
        """
        Combine two graphs without identifying any nodes.

        Nodes keep their identifiers and edges; the nodes of the first graph
        come first. Both inputs are left empty.

        Args:
            pGraph_1: First graph
            pGraph_2: Second graph

        Returns:
            OperationResult wrapping the union graph
        """
        rejected = self._check_pair(pGraph_1, pGraph_2, "disjoint_union")
        if rejected is not None:
            return rejected

        pUnion = DirectedGraph(pGraph_1.allocator, self._config_for(pGraph_1))
        for pNode in pGraph_1.release_nodes() + pGraph_2.release_nodes():
            pUnion.append_node(pNode)

        logger.debug(f"Disjoint union holds {len(pUnion)} nodes")
        return OperationResult.success(pUnion)

    def cartesian(self, pGraph_1: DirectedGraph, pGraph_2: DirectedGraph) -> OperationResult:
        """
        Compute the Cartesian product of two graphs.

        One copy ("layer") of the second graph is made per node of the first
        graph. Each edge u -> v of the first graph then links, for every
        position i of the second graph, the i-th node of layer u to the i-th
        node of layer v. The inputs are only read.

        Args:
            pGraph_1: Graph whose edges connect the layers
            pGraph_2: Graph copied into every layer

        Returns:
            OperationResult wrapping the product graph
        """
        config = self._config_for(pGraph_1)
        allocator = pGraph_2.allocator

        nNode_needed = len(pGraph_1) * len(pGraph_2)
        nEdge_needed = (len(pGraph_1) * pGraph_2.internal_edge_count()
                        + pGraph_1.internal_edge_count() * len(pGraph_2))
        if (nNode_needed > allocator.available(IdNamespace.NODE)
                or nEdge_needed > allocator.available(IdNamespace.EDGE)):
            message = (f"Cartesian product needs {nNode_needed} node and {nEdge_needed} edge identifiers, "
                       f"only {allocator.available(IdNamespace.NODE)} and "
                       f"{allocator.available(IdNamespace.EDGE)} available")
            logger.error(f"cartesian: {message}")
            return OperationResult.failure(ErrorKind.RESOURCE_EXHAUSTED, message)

        pProduct = DirectedGraph(allocator, config)

        aNode_1 = pGraph_1.aNode
        layer_of: Dict[int, int] = {pNode.lNodeID: i for i, pNode in enumerate(aNode_1)}
        aLayer: List[List[int]] = []

        try:
            for _ in aNode_1:
                pLayer = pGraph_2.create_graph_copy()
                aLayer.append(pLayer.node_ids)
                for pNode in pLayer.release_nodes():
                    pProduct.append_node(pNode)

            nPosition = len(pGraph_2)
            for j, pNode in enumerate(aNode_1):
                for pEdge in pNode.aEdge:
                    k = layer_of.get(pEdge.lNodeID_destination)
                    if k is None:
                        continue
                    for i in range(nPosition):
                        lNodeID_source = aLayer[j][i]
                        lNodeID_destination = aLayer[k][i]
                        pProduct.append_edge(
                            lNodeID_source,
                            pProduct.create_edge(config.cartesian_edge_weight,
                                                 config.cartesian_edge_label,
                                                 [lNodeID_source, lNodeID_destination]))
        except IdentifierExhaustedError as e:
            logger.error(f"cartesian: {e}")
            pProduct.delete_graph()
            return OperationResult.failure(ErrorKind.RESOURCE_EXHAUSTED, str(e))

        logger.info(f"Cartesian product of {len(pGraph_1)}x{len(pGraph_2)} nodes built with {len(pProduct)} nodes")
        return OperationResult.success(pProduct)

    def parallel(self, pGraph_1: DirectedGraph, pGraph_2: DirectedGraph,
                 lNodeID_source_1: int, lNodeID_sink_1: int,
                 lNodeID_source_2: int, lNodeID_sink_2: int) -> OperationResult:
        """
        Parallel composition of two two-terminal graphs.

        The disjoint union is taken, the two sources are merged into the
        source of the first graph and the two sinks into its sink.

        Args:
            pGraph_1: First two-terminal graph
            pGraph_2: Second two-terminal graph
            lNodeID_source_1: Source of the first graph
            lNodeID_sink_1: Sink of the first graph
            lNodeID_source_2: Source of the second graph
            lNodeID_sink_2: Sink of the second graph

        Returns:
            OperationResult wrapping the composed graph; the inputs are left
            untouched when the terminals are invalid
        """
        if (pGraph_1.find_node(lNodeID_source_1) is None
                or pGraph_1.find_node(lNodeID_sink_1) is None
                or pGraph_2.find_node(lNodeID_source_2) is None
                or pGraph_2.find_node(lNodeID_sink_2) is None):
            message = "Some of the given terminal IDs do not belong to their graph"
            logger.error(f"parallel: {message}")
            return OperationResult.failure(ErrorKind.NOT_FOUND, message)

        result = self.disjoint_union(pGraph_1, pGraph_2)
        if not result.ok:
            return result

        unary = UnaryOperations(result.graph, self._config_for(result.graph))
        result = unary.contract(lNodeID_source_1, lNodeID_source_2)
        if not result.ok:
            return result

        # The second source is gone; a sink sharing its ID now lives in source_1
        lNodeID_sink_2 = lNodeID_source_1 if lNodeID_sink_2 == lNodeID_source_2 else lNodeID_sink_2
        if lNodeID_sink_2 != lNodeID_sink_1:
            result = unary.contract(lNodeID_sink_1, lNodeID_sink_2)
            if not result.ok:
                return result

        logger.info(f"Parallel composition built with {len(result.graph)} nodes")
        return result

    def series(self, pGraph_1: DirectedGraph, pGraph_2: DirectedGraph,
               lNodeID_sink_1: int, lNodeID_source_2: int) -> OperationResult:
        """
        Series composition of two two-terminal graphs.

        The disjoint union is taken and the exit node of the first graph is
        linked to the entry node of the second graph by one edge in each
        direction. No nodes are merged.

        Args:
            pGraph_1: First graph, contributing its exit node
            pGraph_2: Second graph, contributing its entry node
            lNodeID_sink_1: Exit (sink) node of the first graph
            lNodeID_source_2: Entry (source) node of the second graph

        Returns:
            OperationResult wrapping the composed graph; the inputs are left
            untouched when the terminals are invalid or fewer than two edge
            identifiers remain
        """
        if pGraph_1.find_node(lNodeID_sink_1) is None or pGraph_2.find_node(lNodeID_source_2) is None:
            message = "One or both terminal IDs do not belong to their graph"
            logger.error(f"series: {message}")
            return OperationResult.failure(ErrorKind.NOT_FOUND, message)

        rejected = self._check_pair(pGraph_1, pGraph_2, "series")
        if rejected is not None:
            return rejected

        # Both bridge edges must be obtainable before the operands are consumed
        nAvailable = pGraph_1.allocator.available(IdNamespace.EDGE)
        if nAvailable < 2:
            message = f"Series composition needs 2 edge identifiers, only {nAvailable} available"
            logger.error(f"series: {message}")
            return OperationResult.failure(ErrorKind.RESOURCE_EXHAUSTED, message)

        result = self.disjoint_union(pGraph_1, pGraph_2)
        if not result.ok:
            return result

        pUnion = result.graph
        config = self._config_for(pUnion)
        for aEndpoint in ([lNodeID_sink_1, lNodeID_source_2], [lNodeID_source_2, lNodeID_sink_1]):
            pUnion.append_edge(
                aEndpoint[0],
                pUnion.create_edge(config.series_edge_weight, config.series_edge_label, aEndpoint))

        logger.info(f"Series composition built with {len(pUnion)} nodes")
        return OperationResult.success(pUnion)


_operations = BinaryOperations()


def disjoint_union(pGraph_1: DirectedGraph, pGraph_2: DirectedGraph) -> OperationResult:
    """Disjoint union with default configuration."""
    return _operations.disjoint_union(pGraph_1, pGraph_2)


def cartesian(pGraph_1: DirectedGraph, pGraph_2: DirectedGraph) -> OperationResult:
    """Cartesian product with default configuration."""
    return _operations.cartesian(pGraph_1, pGraph_2)


def parallel(pGraph_1: DirectedGraph, pGraph_2: DirectedGraph,
             lNodeID_source_1: int, lNodeID_sink_1: int,
             lNodeID_source_2: int, lNodeID_sink_2: int) -> OperationResult:
    """Parallel composition with default configuration."""
    return _operations.parallel(pGraph_1, pGraph_2, lNodeID_source_1, lNodeID_sink_1,
                                lNodeID_source_2, lNodeID_sink_2)


def series(pGraph_1: DirectedGraph, pGraph_2: DirectedGraph,
           lNodeID_sink_1: int, lNodeID_source_2: int) -> OperationResult:
    """Series composition with default configuration."""
    return _operations.series(pGraph_1, pGraph_2, lNodeID_sink_1, lNodeID_source_2)
