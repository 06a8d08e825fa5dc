"""
Directed edge representation.
"""

from typing import List, Sequence


class pyedge:
    """
    A directed, weighted, labeled edge.

    The edge is owned by its source node and refers to both endpoints by
    node identifier only.

    Attributes:
        lEdgeID: Edge identifier
        iWeight: Integer weight
        sLabel: Edge label
        aEndpoint: [source node ID, destination node ID]
        iFlag_mst: True when the edge belongs to the last computed shortest-path tree
    """

    def __init__(self, lEdgeID: int, iWeight: int, sLabel: str, aEndpoint: Sequence[int]):
        self.lEdgeID = lEdgeID
        self.iWeight = int(iWeight)
        self.sLabel = str(sLabel)
        self.aEndpoint: List[int] = [int(aEndpoint[0]), int(aEndpoint[1])]
        self.iFlag_mst = False

    @property
    def lNodeID_source(self) -> int:
        return self.aEndpoint[0]

    @lNodeID_source.setter
    def lNodeID_source(self, value: int):
        self.aEndpoint[0] = value

    @property
    def lNodeID_destination(self) -> int:
        return self.aEndpoint[1]

    @lNodeID_destination.setter
    def lNodeID_destination(self, value: int):
        self.aEndpoint[1] = value

    def is_autoloop(self) -> bool:
        """Check whether both endpoints are the same node."""
        return self.aEndpoint[0] == self.aEndpoint[1]

    def __repr__(self) -> str:
        return (f"pyedge(id={self.lEdgeID}, {self.aEndpoint[0]}->{self.aEndpoint[1]}, "
                f"label={self.sLabel!r}, weight={self.iWeight})")
