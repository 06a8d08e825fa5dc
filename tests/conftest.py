"""
Pytest configuration for graphalgebra tests.

Every test gets its own identifier allocator so identifiers are predictable
and never leak between tests.
"""
import pytest

from graphalgebra import IdentifierAllocator, pygraph


@pytest.fixture
def allocator():
    """Fresh allocator; the first node and edge IDs are both 1."""
    return IdentifierAllocator()


@pytest.fixture
def build(allocator):
    """
    Build a pygraph from labels and edges.

    Edges are (source_label, destination_label) or
    (source_label, destination_label, weight) tuples.
    Returns the graph and a label -> node ID mapping.
    """
    def _build(labels, edges=()):
        graph = pygraph(allocator)
        ids = {label: graph.add_node(label) for label in labels}
        for edge in edges:
            weight = edge[2] if len(edge) > 2 else 0
            graph.add_edge(ids[edge[0]], ids[edge[1]], weight, f"{edge[0]}_{edge[1]}")
        return graph, ids

    return _build


@pytest.fixture
def pairs():
    """Return a helper listing the (source, destination) pair of every edge."""
    def _pairs(graph):
        return [tuple(edge.aEndpoint) for edge in graph.edges()]

    return _pairs
