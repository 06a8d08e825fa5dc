"""
Core graph data structure for directed graphs.

This module provides the fundamental graph structure without algebra or
path-finding operations.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from ..config import DEFAULT_CONFIG, ERROR_ID, GraphConfig
from ..classes.edge import pyedge
from ..classes.identifier import IdentifierAllocator, IdNamespace, get_default_allocator
from ..classes.node import pynode
from ..classes.status import IdentifierExhaustedError

logger = logging.getLogger(__name__)


class DirectedGraph:
    """
    Core graph data structure for directed graphs.

    This class manages the fundamental graph representation. It provides:
    - Node and edge creation with recycled identifiers
    - Ordered node storage indexed by node ID
    - Edge list maintenance per node
    - Label based lookups and relabeling
    """

    def __init__(self, allocator: Optional[IdentifierAllocator] = None,
                 config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            allocator: Identifier allocator shared by every graph this graph
                will be combined with. Defaults to the process-wide allocator
            config: Defaults for generated labels and weights
        """
        self.allocator = allocator if allocator is not None else get_default_allocator()
        self.config = config if config is not None else DEFAULT_CONFIG

        # Insertion ordered node index
        self.id_to_node: Dict[int, pynode] = {}

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.id_to_node)

    def __iter__(self) -> Iterator[pynode]:
        return iter(list(self.id_to_node.values()))

    def __contains__(self, lNodeID) -> bool:
        return lNodeID in self.id_to_node

    def __repr__(self) -> str:
        return f"DirectedGraph(nodes={len(self)}, edges={sum(n.nEdge for n in self.id_to_node.values())})"

    @property
    def aNode(self) -> List[pynode]:
        """Nodes in iteration order."""
        return list(self.id_to_node.values())

    @property
    def node_ids(self) -> List[int]:
        return list(self.id_to_node.keys())

    def edges(self) -> Iterator[pyedge]:
        """Yield every edge, node by node, in insertion order."""
        for pNode in self.aNode:
            yield from list(pNode.aEdge)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create_node(self, sLabel: str) -> pynode:
        """
        Create a standalone node with no edges.

        The node is not part of the graph until it is appended or pushed.

        Args:
            sLabel: Node label (copied)

        Returns:
            The new node
        """
        lNodeID = self.allocator.allocate(IdNamespace.NODE)
        return pynode(lNodeID, sLabel)

    def create_edge(self, iWeight: int, sLabel: str, aEndpoint: Sequence[int]) -> pyedge:
        """
        Create a standalone edge.

        Endpoints are stored verbatim; callers must make sure they exist.

        Args:
            iWeight: Edge weight
            sLabel: Edge label (copied)
            aEndpoint: [source node ID, destination node ID]

        Returns:
            The new edge
        """
        lEdgeID = self.allocator.allocate(IdNamespace.EDGE)
        return pyedge(lEdgeID, iWeight, sLabel, aEndpoint)

    # ------------------------------------------------------------------
    # Node list operations
    # ------------------------------------------------------------------

    def append_node(self, pNode: pynode) -> bool:
        """
        Insert a node at the tail of the graph.

        Returns:
            True if the node was inserted, False if its ID is already present
        """
        if pNode.lNodeID in self.id_to_node:
            logger.warning(f"Node {pNode.lNodeID} is already in the graph, not appending it again")
            return False

        self.id_to_node[pNode.lNodeID] = pNode
        return True

    def push_node(self, pNode: pynode) -> bool:
        """
        Insert a node at the head of the graph.

        On an empty graph this behaves like append_node.

        Returns:
            True if the node was inserted, False if its ID is already present
        """
        if pNode.lNodeID in self.id_to_node:
            logger.warning(f"Node {pNode.lNodeID} is already in the graph, not pushing it again")
            return False

        reordered = {pNode.lNodeID: pNode}
        reordered.update(self.id_to_node)
        self.id_to_node = reordered
        return True

    def find_node(self, lNodeID: int) -> Optional[pynode]:
        """Return the node with the given ID, or None."""
        return self.id_to_node.get(lNodeID)

    def delete_node(self, lNodeID: int) -> bool:
        """
        Remove a node and revoke its identifier along with its owned edges.

        Inward edges held by other nodes are left untouched; callers relink
        or remove them first.

        Returns:
            True if a node was removed
        """
        pNode = self.id_to_node.pop(lNodeID, None)
        if pNode is None:
            logger.debug(f"delete_node: node {lNodeID} not found")
            return False

        for pEdge in pNode.aEdge:
            self.allocator.revoke(IdNamespace.EDGE, pEdge.lEdgeID)
        pNode.aEdge = []
        self.allocator.revoke(IdNamespace.NODE, lNodeID)
        return True

    def delete_graph(self):
        """Release every node and edge, revoking all their identifiers."""
        for pNode in self.aNode:
            self.allocator.revoke(IdNamespace.NODE, pNode.lNodeID)
            for pEdge in pNode.aEdge:
                self.allocator.revoke(IdNamespace.EDGE, pEdge.lEdgeID)
            pNode.aEdge = []

        logger.debug(f"Deleted graph with {len(self.id_to_node)} nodes")
        self.id_to_node = {}

    def release_nodes(self) -> List[pynode]:
        """
        Hand over every node to the caller, leaving this graph empty.

        No identifiers are revoked: ownership of the nodes moves to the caller.
        """
        aNode = self.aNode
        self.id_to_node = {}
        return aNode

    # ------------------------------------------------------------------
    # Edge list operations (scoped to one node)
    # ------------------------------------------------------------------

    def push_edge(self, lNodeID: int, pEdge: pyedge) -> bool:
        """Insert an edge at the head of a node's edge list."""
        pNode = self.find_node(lNodeID)
        if pNode is None:
            logger.warning(f"push_edge: node {lNodeID} not found")
            return False
        pNode.aEdge.insert(0, pEdge)
        return True

    def append_edge(self, lNodeID: int, pEdge: pyedge) -> bool:
        """Insert an edge at the tail of a node's edge list."""
        pNode = self.find_node(lNodeID)
        if pNode is None:
            logger.warning(f"append_edge: node {lNodeID} not found")
            return False
        pNode.aEdge.append(pEdge)
        return True

    def find_edge(self, lNodeID: int, lEdgeID: int) -> Optional[pyedge]:
        """Return the edge owned by the given node, or None."""
        pNode = self.find_node(lNodeID)
        if pNode is None:
            return None
        return pNode.find_edge(lEdgeID)

    def delete_edge(self, lNodeID: int, lEdgeID: int) -> bool:
        """
        Remove an edge from a node's edge list and revoke its identifier.

        Nothing happens if the edge identifier is not currently live.

        Returns:
            True if an edge was removed
        """
        if not self.allocator.exists(IdNamespace.EDGE, lEdgeID):
            return False

        pNode = self.find_node(lNodeID)
        if pNode is None:
            return False

        for i, pEdge in enumerate(pNode.aEdge):
            if pEdge.lEdgeID == lEdgeID:
                del pNode.aEdge[i]
                self.allocator.revoke(IdNamespace.EDGE, lEdgeID)
                return True

        return False

    def delete_edge_list(self, lNodeID: int) -> int:
        """
        Remove every edge of a node, revoking their identifiers.

        Returns:
            Number of edges removed
        """
        pNode = self.find_node(lNodeID)
        if pNode is None:
            return 0

        nEdge = pNode.nEdge
        for pEdge in pNode.aEdge:
            self.allocator.revoke(IdNamespace.EDGE, pEdge.lEdgeID)
        pNode.aEdge = []
        return nEdge

    # ------------------------------------------------------------------
    # Conveniences
    # ------------------------------------------------------------------

    def get_node_from_id(self, lNodeID: int) -> Optional[pynode]:
        return self.find_node(lNodeID)

    def get_id_from_node_label(self, sLabel: str) -> int:
        """Return the ID of the first node carrying the label, ERROR_ID if none."""
        for pNode in self.id_to_node.values():
            if pNode.sLabel == sLabel:
                return pNode.lNodeID
        return ERROR_ID

    def add_new_edges_to_node(self, lNodeID: int, aEdge_new: Iterable[pyedge]):
        """Append several edges to a node; no-op if the node does not exist."""
        pNode = self.find_node(lNodeID)
        if pNode is None:
            logger.warning(f"add_new_edges_to_node: node {lNodeID} not found")
            return
        pNode.aEdge.extend(aEdge_new)

    def change_node_label(self, lNodeID: int, sLabel_new: str):
        pNode = self.find_node(lNodeID)
        if pNode is None:
            logger.warning(f"change_node_label: node {lNodeID} not found")
            return
        pNode.sLabel = str(sLabel_new)

    def change_edge_label(self, lEdgeID: int, sLabel_new: str):
        for pNode in self.id_to_node.values():
            pEdge = pNode.find_edge(lEdgeID)
            if pEdge is not None:
                pEdge.sLabel = str(sLabel_new)
                return
        logger.warning(f"change_edge_label: edge {lEdgeID} not found")

    def delete_edge_from_node(self, lNodeID: int, lEdgeID: int):
        if not self.delete_edge(lNodeID, lEdgeID):
            logger.warning(f"delete_edge_from_node: edge {lEdgeID} not found on node {lNodeID}")

    def change_duplicated_node_labels(self, sPrefix: Optional[str] = None) -> int:
        """
        Rename every node whose label was already used by an earlier node.

        The first node carrying a label keeps it; later ones become
        prefix + node ID.

        Args:
            sPrefix: Prefix for generated labels, defaults to the configured one

        Returns:
            Number of nodes renamed
        """
        if sPrefix is None:
            sPrefix = self.config.duplicated_node_label_prefix

        taken = {pNode.sLabel for pNode in self.id_to_node.values()}
        seen = set()
        nRenamed = 0

        for pNode in self.id_to_node.values():
            if pNode.sLabel not in seen:
                seen.add(pNode.sLabel)
                continue

            sLabel_new = f"{sPrefix}{pNode.lNodeID}"
            iSuffix = 1
            while sLabel_new in taken:
                sLabel_new = f"{sPrefix}{pNode.lNodeID}_{iSuffix}"
                iSuffix += 1

            logger.debug(f"Renaming duplicated label {pNode.sLabel!r} of node {pNode.lNodeID} to {sLabel_new!r}")
            pNode.sLabel = sLabel_new
            taken.add(sLabel_new)
            seen.add(sLabel_new)
            nRenamed += 1

        return nRenamed

    def delete_all_duplicate_edges(self) -> int:
        """
        Keep only the first edge per (source, destination) pair on every node.

        Returns:
            Number of edges removed
        """
        nRemoved = 0
        for pNode in self.id_to_node.values():
            seen_pairs = set()
            aEdge_kept = []
            for pEdge in pNode.aEdge:
                pair = (pEdge.aEndpoint[0], pEdge.aEndpoint[1])
                if pair in seen_pairs:
                    self.allocator.revoke(IdNamespace.EDGE, pEdge.lEdgeID)
                    nRemoved += 1
                else:
                    seen_pairs.add(pair)
                    aEdge_kept.append(pEdge)
            pNode.aEdge = aEdge_kept

        if nRemoved:
            logger.debug(f"Removed {nRemoved} duplicate edges")
        return nRemoved

    def create_graph_copy(self, iFlag_keep_attributes: bool = True) -> "DirectedGraph":
        """
        Copy the graph with fresh node and edge identifiers.

        Args:
            iFlag_keep_attributes: Copy edge labels and weights; when False the
                configured copied-edge label and weight are used instead

        Returns:
            A new graph sharing this graph's allocator and configuration

        Raises:
            IdentifierExhaustedError: If identifiers run out; the identifiers
                taken by the partial copy are revoked first
        """
        pGraph_copy = DirectedGraph(self.allocator, self.config)
        old_to_new: Dict[int, int] = {}

        try:
            for pNode in self.id_to_node.values():
                pNode_new = pGraph_copy.create_node(pNode.sLabel)
                pGraph_copy.append_node(pNode_new)
                old_to_new[pNode.lNodeID] = pNode_new.lNodeID

            for pNode in self.id_to_node.values():
                lNodeID_new = old_to_new[pNode.lNodeID]
                for pEdge in pNode.aEdge:
                    lNodeID_destination = old_to_new.get(pEdge.lNodeID_destination)
                    if lNodeID_destination is None:
                        logger.debug(f"Dropping edge {pEdge.lEdgeID} pointing outside the graph while copying")
                        continue

                    if iFlag_keep_attributes:
                        iWeight, sLabel = pEdge.iWeight, pEdge.sLabel
                    else:
                        iWeight, sLabel = self.config.copied_edge_weight, self.config.copied_edge_label

                    pGraph_copy.append_edge(
                        lNodeID_new,
                        pGraph_copy.create_edge(iWeight, sLabel, [lNodeID_new, lNodeID_destination]))
        except IdentifierExhaustedError:
            logger.error(f"Graph copy ran out of identifiers after {len(pGraph_copy)} nodes, discarding it")
            pGraph_copy.delete_graph()
            raise

        return pGraph_copy

    def internal_edge_count(self) -> int:
        """Return the number of edges whose destination is a node of this graph."""
        return sum(1 for pEdge in self.edges() if pEdge.lNodeID_destination in self.id_to_node)
