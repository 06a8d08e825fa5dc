"""Tests for the graph model: node and edge list operations and conveniences."""
import logging

import pytest

from graphalgebra import (ERROR_ID, DirectedGraph, IdentifierAllocator, IdentifierExhaustedError,
                          IdNamespace, pygraph)


class TestNodeList:
    """Tests for node insertion, lookup and deletion."""

    def test_create_node_does_not_insert(self, allocator):
        graph = pygraph(allocator)
        node = graph.create_node("A")
        assert node.lNodeID == 1
        assert node.aEdge == []
        assert len(graph) == 0

    def test_append_and_push_order(self, allocator):
        graph = pygraph(allocator)
        a, b, c = (graph.create_node(label) for label in "ABC")
        graph.append_node(a)
        graph.append_node(b)
        graph.push_node(c)
        assert [node.sLabel for node in graph] == ["C", "A", "B"]

    def test_push_on_empty_graph_inserts(self, allocator):
        graph = pygraph(allocator)
        assert graph.push_node(graph.create_node("A"))
        assert graph.graph_dim() == 1

    def test_duplicate_insert_is_rejected(self, allocator):
        graph = pygraph(allocator)
        node = graph.create_node("A")
        graph.append_node(node)
        assert not graph.append_node(node)
        assert not graph.push_node(node)
        assert len(graph) == 1

    def test_find_node(self, build):
        graph, ids = build("AB")
        assert graph.find_node(ids["B"]).sLabel == "B"
        assert graph.find_node(99) is None

    def test_delete_node_revokes_node_and_owned_edges(self, build):
        graph, ids = build("AB", [("A", "B"), ("B", "A")])
        edge_ab = graph.find_node(ids["A"]).aEdge[0].lEdgeID

        assert graph.delete_node(ids["A"])
        assert not graph.exists_node_from_id(ids["A"])
        assert not graph.exists_edge_from_id(edge_ab)
        # inward edge held by B is left dangling
        assert graph.find_node(ids["B"]).aEdge[0].aEndpoint == [ids["B"], ids["A"]]

    def test_delete_missing_node(self, build):
        graph, _ = build("A")
        assert not graph.delete_node(42)
        assert len(graph) == 1

    def test_delete_graph_revokes_everything(self, build, allocator):
        graph, ids = build("ABC", [("A", "B"), ("B", "C")])
        graph.delete_graph()

        assert len(graph) == 0
        assert allocator.revoked_ids(IdNamespace.NODE) == [ids["A"], ids["B"], ids["C"]]
        assert sorted(allocator.revoked_ids(IdNamespace.EDGE)) == [1, 2]
        assert graph.create_node("D").lNodeID == ids["A"]


class TestEdgeList:
    """Tests for edge list operations scoped to one node."""

    def test_append_and_push_edge(self, build):
        graph, ids = build("AB")
        first = graph.create_edge(1, "first", [ids["A"], ids["B"]])
        second = graph.create_edge(2, "second", [ids["A"], ids["A"]])
        graph.append_edge(ids["A"], first)
        graph.push_edge(ids["A"], second)
        assert [edge.sLabel for edge in graph.find_node(ids["A"]).aEdge] == ["second", "first"]

    def test_create_edge_keeps_endpoints_verbatim(self, allocator):
        graph = pygraph(allocator)
        edge = graph.create_edge(3, "loose", [7, 8])
        assert edge.aEndpoint == [7, 8]
        assert edge.iWeight == 3

    def test_find_edge(self, build):
        graph, ids = build("AB", [("A", "B")])
        assert graph.find_edge(ids["A"], 1).sLabel == "A_B"
        assert graph.find_edge(ids["B"], 1) is None

    def test_delete_edge_revokes_id(self, build):
        graph, ids = build("AB", [("A", "B"), ("A", "A")])
        assert graph.delete_edge(ids["A"], 1)
        assert not graph.exists_edge_from_id(1)
        assert graph.edge_list_dim(graph.find_node(ids["A"]).aEdge) == 1

    def test_delete_edge_with_dead_id_is_noop(self, build):
        graph, ids = build("AB", [("A", "B")])
        assert not graph.delete_edge(ids["A"], 5)
        assert graph.edge_count() == 1

    def test_delete_edge_list(self, build):
        graph, ids = build("AB", [("A", "B"), ("A", "A")])
        assert graph.graph.delete_edge_list(ids["A"]) == 2
        assert graph.edge_count() == 0
        assert not graph.exists_edge_from_id(1)


class TestConveniences:
    """Tests for label and edge helpers."""

    def test_get_id_from_node_label(self, build):
        graph, ids = build(["x", "y", "x"])
        assert graph.get_id_from_node_label("x") == 1
        assert graph.get_id_from_node_label("missing") == ERROR_ID

    def test_change_labels(self, build):
        graph, ids = build("AB", [("A", "B")])
        graph.change_node_label(ids["A"], "root")
        graph.change_edge_label(1, "renamed")
        assert graph.find_node(ids["A"]).sLabel == "root"
        assert graph.find_edge(ids["A"], 1).sLabel == "renamed"

    def test_missing_targets_are_noops(self, build, caplog):
        graph, ids = build("A")
        with caplog.at_level(logging.WARNING):
            graph.change_node_label(99, "x")
            graph.change_edge_label(99, "x")
            graph.delete_edge_from_node(ids["A"], 99)
        assert graph.find_node(ids["A"]).sLabel == "A"
        assert "not found" in caplog.text

    def test_add_new_edges_to_node(self, build):
        graph, ids = build("AB")
        new_edges = [graph.create_edge(0, "e", [ids["A"], ids["B"]]) for _ in range(3)]
        graph.add_new_edges_to_node(ids["A"], new_edges)
        assert graph.find_node(ids["A"]).nEdge == 3

    def test_add_undirected_edge_inserts_mirrored_pair(self, build, pairs):
        graph, ids = build("AB")
        edge_ids = graph.add_undirected_edge(ids["A"], ids["B"], 3, "road")

        assert edge_ids == [1, 2]
        assert pairs(graph) == [(ids["A"], ids["B"]), (ids["B"], ids["A"])]
        assert [(e.sLabel, e.iWeight) for e in graph.edges()] == [("road", 3), ("road", 3)]

    def test_add_edge_to_missing_node(self, build):
        graph, ids = build("A")
        assert graph.add_edge(ids["A"], 99) == ERROR_ID
        assert graph.add_undirected_edge(ids["A"], 99) == [ERROR_ID, ERROR_ID]
        assert graph.edge_count() == 0

    def test_delete_edge_from_node(self, build):
        graph, ids = build("AB", [("A", "B")])
        graph.delete_edge_from_node(ids["A"], 1)
        assert graph.edge_count() == 0

    def test_change_duplicated_node_labels(self, build):
        graph, ids = build(["x", "x", "y", "x"])
        assert graph.change_duplicated_node_labels() == 2
        assert [node.sLabel for node in graph] == ["x", "duplicated_node_2", "y", "duplicated_node_4"]

    def test_change_duplicated_node_labels_avoids_collisions(self, build):
        graph, _ = build(["a", "a", "dup_2"])
        graph.change_duplicated_node_labels("dup_")
        labels = [node.sLabel for node in graph]
        assert labels == ["a", "dup_2_1", "dup_2"]
        assert len(set(labels)) == len(labels)

    def test_distinct_labels_untouched(self, build):
        graph, _ = build("ABC")
        assert graph.change_duplicated_node_labels() == 0
        assert [node.sLabel for node in graph] == ["A", "B", "C"]

    def test_delete_all_duplicate_edges(self, build, pairs):
        graph, ids = build("AB", [("A", "B"), ("A", "B"), ("A", "A"), ("A", "B")])
        assert graph.delete_all_duplicate_edges() == 2
        assert pairs(graph) == [(ids["A"], ids["B"]), (ids["A"], ids["A"])]
        assert graph.find_node(ids["A"]).aEdge[0].lEdgeID == 1


class TestGraphCopy:
    """Tests for copying graphs with fresh identifiers."""

    def test_copy_preserves_structure_with_new_ids(self, build):
        graph, ids = build("ABC", [("A", "B", 4), ("B", "C", 2), ("C", "C", 1)])
        copy = graph.create_graph_copy()

        assert (copy.create_graph_matrix() == graph.create_graph_matrix()).all()
        assert not set(copy.node_ids) & set(graph.node_ids)
        assert [node.sLabel for node in copy] == ["A", "B", "C"]
        assert [edge.iWeight for edge in copy.edges()] == [4, 2, 1]
        assert not {e.lEdgeID for e in copy.edges()} & {e.lEdgeID for e in graph.edges()}

    def test_copy_with_default_edge_attributes(self, build):
        graph, _ = build("AB", [("A", "B", 9)])
        copy = graph.create_graph_copy(iFlag_keep_attributes=False)
        edge = next(copy.edges())
        assert edge.sLabel == "copied_edge"
        assert edge.iWeight == 0

    def test_copy_drops_dangling_edges(self, allocator):
        graph = DirectedGraph(allocator)
        node = graph.create_node("A")
        graph.append_node(node)
        graph.append_edge(node.lNodeID, graph.create_edge(0, "out", [node.lNodeID, 77]))
        copy = graph.create_graph_copy()
        assert len(copy) == 1
        assert list(copy.edges()) == []

    def test_exhausted_copy_revokes_what_it_took(self):
        allocator = IdentifierAllocator(max_identifier=4)
        graph = pygraph(allocator)
        a = graph.add_node("A")
        b = graph.add_node("B")
        graph.add_edge(a, b)
        graph.add_edge(b, a)
        graph.add_edge(a, a)

        with pytest.raises(IdentifierExhaustedError):
            graph.create_graph_copy()

        assert [i for i in range(1, 5) if allocator.exists(IdNamespace.NODE, i)] == [a, b]
        assert [i for i in range(1, 5) if allocator.exists(IdNamespace.EDGE, i)] == [1, 2, 3]
        assert allocator.revoked_ids(IdNamespace.NODE) == [3, 4]
