"""
Main facade class for graph construction and algebra.

This module provides the pygraph class that bundles the graph model with its
queries, path finding and algebra operations behind one object.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

import numpy as np

from ..config import ERROR_ID, GraphConfig
from ..classes.edge import pyedge
from ..classes.identifier import IdentifierAllocator
from ..classes.node import pynode
from ..classes.status import OperationResult
from .graph import DirectedGraph
from ..analysis.queries import StructuralQueries
from ..analysis.pathfinding import PathFinder
from ..operations.unary import UnaryOperations
from ..operations.binary import BinaryOperations

logger = logging.getLogger(__name__)


class pygraph:
    """
    Main facade class for directed graphs.

    Delegates to specialized modules:
    - DirectedGraph for storage and list operations
    - StructuralQueries for sizes and the adjacency matrix
    - PathFinder for the shortest-path tree
    - UnaryOperations and BinaryOperations for graph algebra

    Binary operations return a new pygraph inside the OperationResult and
    leave both operands empty, except cartesian which only reads them.
    """

    def __init__(self, allocator: Optional[IdentifierAllocator] = None,
                 config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            allocator: Identifier allocator; graphs combined together must share one
            config: Defaults for generated labels and weights
        """
        self._attach(DirectedGraph(allocator, config))

    @classmethod
    def from_graph(cls, graph: DirectedGraph) -> "pygraph":
        """Wrap an existing DirectedGraph without copying it."""
        instance = cls.__new__(cls)
        instance._attach(graph)
        return instance

    def _attach(self, graph: DirectedGraph):
        """Bind the core graph and the components operating on it."""
        self._graph = graph
        self._queries = StructuralQueries(graph)
        self._pathfinder = PathFinder(graph)
        self._unary = UnaryOperations(graph)
        self._binary = BinaryOperations(graph.config)

    def _wrap(self, result: OperationResult) -> OperationResult:
        if isinstance(result.graph, DirectedGraph):
            if result.graph is self._graph:
                result.graph = self
            else:
                result.graph = pygraph.from_graph(result.graph)
        return result

    # ========================================================================
    # BASIC GRAPH PROPERTIES
    # ========================================================================

    @property
    def graph(self) -> DirectedGraph:
        return self._graph

    @property
    def allocator(self) -> IdentifierAllocator:
        return self._graph.allocator

    @property
    def config(self) -> GraphConfig:
        return self._graph.config

    @property
    def aNode(self) -> List[pynode]:
        return self._graph.aNode

    @property
    def node_ids(self) -> List[int]:
        return self._graph.node_ids

    def __len__(self) -> int:
        return len(self._graph)

    def __iter__(self) -> Iterator[pynode]:
        return iter(self._graph)

    def __contains__(self, lNodeID) -> bool:
        return lNodeID in self._graph

    def __repr__(self) -> str:
        return f"pygraph(nodes={len(self)}, edges={self.edge_count()})"

    def edges(self) -> Iterator[pyedge]:
        return self._graph.edges()

    # ========================================================================
    # CONSTRUCTION & MUTATION
    # ========================================================================

    def create_node(self, sLabel: str) -> pynode:
        """Create a standalone node (not yet inserted)."""
        return self._graph.create_node(sLabel)

    def create_edge(self, iWeight: int, sLabel: str, aEndpoint: Sequence[int]) -> pyedge:
        """Create a standalone edge (not yet attached to a node)."""
        return self._graph.create_edge(iWeight, sLabel, aEndpoint)

    def add_node(self, sLabel: str) -> int:
        """Create a node, append it and return its ID."""
        pNode = self._graph.create_node(sLabel)
        self._graph.append_node(pNode)
        return pNode.lNodeID

    def add_edge(self, lNodeID_source: int, lNodeID_destination: int,
                 iWeight: int = 0, sLabel: str = "") -> int:
        """
        Create an edge between two nodes of this graph and return its ID.

        Returns:
            The new edge ID, or ERROR_ID when either node is missing
        """
        if lNodeID_source not in self._graph or lNodeID_destination not in self._graph:
            logger.warning(f"add_edge: nodes {lNodeID_source} and {lNodeID_destination} are not both in the graph")
            return ERROR_ID
        pEdge = self._graph.create_edge(iWeight, sLabel, [lNodeID_source, lNodeID_destination])
        self._graph.append_edge(lNodeID_source, pEdge)
        return pEdge.lEdgeID

    def add_undirected_edge(self, lNodeID_a: int, lNodeID_b: int,
                            iWeight: int = 0, sLabel: str = "") -> List[int]:
        """Insert the two mirrored directed edges of an undirected edge."""
        return [self.add_edge(lNodeID_a, lNodeID_b, iWeight, sLabel),
                self.add_edge(lNodeID_b, lNodeID_a, iWeight, sLabel)]

    def append_node(self, pNode: pynode) -> bool:
        return self._graph.append_node(pNode)

    def push_node(self, pNode: pynode) -> bool:
        return self._graph.push_node(pNode)

    def find_node(self, lNodeID: int) -> Optional[pynode]:
        return self._graph.find_node(lNodeID)

    def delete_node(self, lNodeID: int) -> bool:
        return self._graph.delete_node(lNodeID)

    def delete_graph(self):
        self._graph.delete_graph()

    def push_edge(self, lNodeID: int, pEdge: pyedge) -> bool:
        return self._graph.push_edge(lNodeID, pEdge)

    def append_edge(self, lNodeID: int, pEdge: pyedge) -> bool:
        return self._graph.append_edge(lNodeID, pEdge)

    def find_edge(self, lNodeID: int, lEdgeID: int) -> Optional[pyedge]:
        return self._graph.find_edge(lNodeID, lEdgeID)

    def delete_edge(self, lNodeID: int, lEdgeID: int) -> bool:
        return self._graph.delete_edge(lNodeID, lEdgeID)

    def get_node_from_id(self, lNodeID: int) -> Optional[pynode]:
        return self._graph.get_node_from_id(lNodeID)

    def get_id_from_node_label(self, sLabel: str) -> int:
        return self._graph.get_id_from_node_label(sLabel)

    def add_new_edges_to_node(self, lNodeID: int, aEdge_new: Iterable[pyedge]):
        self._graph.add_new_edges_to_node(lNodeID, aEdge_new)

    def change_node_label(self, lNodeID: int, sLabel_new: str):
        self._graph.change_node_label(lNodeID, sLabel_new)

    def change_edge_label(self, lEdgeID: int, sLabel_new: str):
        self._graph.change_edge_label(lEdgeID, sLabel_new)

    def delete_edge_from_node(self, lNodeID: int, lEdgeID: int):
        self._graph.delete_edge_from_node(lNodeID, lEdgeID)

    def change_duplicated_node_labels(self, sPrefix: Optional[str] = None) -> int:
        return self._graph.change_duplicated_node_labels(sPrefix)

    def delete_all_duplicate_edges(self) -> int:
        return self._graph.delete_all_duplicate_edges()

    def create_graph_copy(self, iFlag_keep_attributes: bool = True) -> "pygraph":
        return pygraph.from_graph(self._graph.create_graph_copy(iFlag_keep_attributes))

    # ========================================================================
    # STRUCTURAL QUERIES
    # ========================================================================

    def graph_dim(self) -> int:
        return self._queries.graph_dim()

    def edge_list_dim(self, aEdge: Sequence[pyedge]) -> int:
        return self._queries.edge_list_dim(aEdge)

    def edge_count(self) -> int:
        return self._queries.edge_count()

    def create_graph_matrix(self) -> np.ndarray:
        return self._queries.create_graph_matrix()

    def autoloop_count(self, aEdge: Iterable[pyedge]) -> int:
        return self._queries.autoloop_count(aEdge)

    def exists_node_from_id(self, lNodeID: int) -> bool:
        return self._queries.exists_node_from_id(lNodeID)

    def exists_edge_from_id(self, lEdgeID: int) -> bool:
        return self._queries.exists_edge_from_id(lEdgeID)

    # ========================================================================
    # SHORTEST PATH TREE
    # ========================================================================

    def dijkstra_mst(self, lNodeID_source: int) -> OperationResult:
        """Annotate the graph with the shortest-path tree rooted at a node."""
        return self._wrap(self._pathfinder.dijkstra_mst(lNodeID_source))

    def distances(self) -> Dict[int, float]:
        return self._pathfinder.distances()

    def shortest_path(self, lNodeID_target: int) -> List[int]:
        return self._pathfinder.shortest_path(lNodeID_target)

    def mst_edges(self) -> List[pyedge]:
        return self._pathfinder.mst_edges()

    # ========================================================================
    # UNARY ALGEBRA
    # ========================================================================

    def contract(self, lNodeID_survivor: int, lNodeID_donor: int) -> OperationResult:
        """Merge the donor node into the survivor node."""
        return self._wrap(self._unary.contract(lNodeID_survivor, lNodeID_donor))

    def contract_edge(self, lEdgeID: int) -> OperationResult:
        """Merge the destination of an edge into its source."""
        return self._wrap(self._unary.contract_edge(lEdgeID))

    def complement(self) -> OperationResult:
        """Replace the graph by its complement."""
        return self._wrap(self._unary.complement())

    # ========================================================================
    # BINARY ALGEBRA
    # ========================================================================

    def disjoint_union(self, other: "pygraph") -> OperationResult:
        """Disjoint union with another graph; both operands are consumed."""
        return self._wrap(self._binary.disjoint_union(self._graph, other.graph))

    def cartesian(self, other: "pygraph") -> OperationResult:
        """Cartesian product with another graph; operands are only read."""
        return self._wrap(self._binary.cartesian(self._graph, other.graph))

    def parallel(self, other: "pygraph", lNodeID_source_1: int, lNodeID_sink_1: int,
                 lNodeID_source_2: int, lNodeID_sink_2: int) -> OperationResult:
        """Parallel composition with another two-terminal graph."""
        return self._wrap(self._binary.parallel(self._graph, other.graph,
                                                lNodeID_source_1, lNodeID_sink_1,
                                                lNodeID_source_2, lNodeID_sink_2))

    def series(self, other: "pygraph", lNodeID_sink_1: int, lNodeID_source_2: int) -> OperationResult:
        """Series composition: this graph's exit node linked to the other's entry node."""
        return self._wrap(self._binary.series(self._graph, other.graph, lNodeID_sink_1, lNodeID_source_2))
